"""Core package: configuration, result types, error codes, composition root."""
