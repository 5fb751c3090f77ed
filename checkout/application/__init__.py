"""Application layer - use case orchestration and collaborator contracts."""
