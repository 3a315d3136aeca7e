"""Domain layer for the catalog context."""
