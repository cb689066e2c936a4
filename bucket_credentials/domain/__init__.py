"""Domain layer: credential value objects, errors, and ports."""
