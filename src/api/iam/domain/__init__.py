"""Domain layer for the IAM context."""
