"""Application layer for the catalog context."""
