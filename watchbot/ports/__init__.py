"""Port interfaces (Hexagonal Architecture)."""
