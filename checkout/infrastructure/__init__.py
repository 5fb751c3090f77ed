"""Infrastructure layer - adapters and logging."""
