"""Domain-Oriented Observability for IAM infrastructure."""

from iam.infrastructure.observability.directory_probe import (
    DefaultUserDirectoryProbe,
    UserDirectoryProbe,
)

__all__ = [
    "UserDirectoryProbe",
    "DefaultUserDirectoryProbe",
]
