"""Infrastructure layer: AWS adapters and logging backends."""
