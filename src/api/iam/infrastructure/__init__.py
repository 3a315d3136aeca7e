"""Identity directory adapters for the IAM context."""
