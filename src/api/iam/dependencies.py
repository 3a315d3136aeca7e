"""Dependency providers for the IAM context."""

from __future__ import annotations

from typing import Any

from iam.infrastructure.cognito_user_directory import CognitoUserDirectory
from iam.ports.directory import IUserDirectory
from iam.ports.exceptions import DirectoryConfigurationError
from infrastructure.settings import CognitoSettings, get_settings


def create_user_directory(
    cognito_client: Any,
    settings: CognitoSettings | None = None,
) -> IUserDirectory:
    """Build the Cognito-backed user directory.

    Args:
        cognito_client: Open aioboto3 ``cognito-idp`` client
        settings: Cognito settings (defaults to cached environment settings)

    Returns:
        IUserDirectory implementation

    Raises:
        DirectoryConfigurationError: If no user pool id is configured
    """
    settings = settings or get_settings().cognito
    if not settings.is_configured:
        raise DirectoryConfigurationError(
            "STOCKROOM_COGNITO_USER_POOL_ID is not configured"
        )
    return CognitoUserDirectory(cognito_client, user_pool_id=settings.user_pool_id)
