"""Domain aggregates for IAM context."""

from iam.domain.aggregates.directory_user import DirectoryUser

__all__ = ["DirectoryUser"]
