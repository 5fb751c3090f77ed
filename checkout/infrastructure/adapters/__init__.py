"""Infrastructure adapters (in-memory implementations of collaborator contracts)."""
