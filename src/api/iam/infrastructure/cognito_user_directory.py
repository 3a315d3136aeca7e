"""Amazon Cognito implementation of IUserDirectory.

The adapter keeps no local state: each method is a single live round trip
(two for an update that both renames and enables/disables) to a Cognito
user pool through an aioboto3 ``cognito-idp`` client.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from iam.domain.aggregates import DirectoryUser
from iam.domain.value_objects import UserStatus
from iam.infrastructure.observability import (
    DefaultUserDirectoryProbe,
    UserDirectoryProbe,
)
from iam.ports.directory import IUserDirectory
from iam.ports.exceptions import (
    DirectoryConfigurationError,
    DirectoryUpdateError,
    DirectoryUserNotFoundError,
    DirectoryValidationError,
    UserDirectoryError,
)
from shared_kernel.pagination import (
    OpaqueToken,
    PagedResult,
    clamp_limit,
    decode_cursor,
    encode_cursor,
)

# ListUsers rejects larger limits
COGNITO_MAX_PAGE_SIZE = 60


def _escape_filter_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _attribute(attributes: list[dict[str, Any]], name: str) -> str | None:
    """Case-insensitive lookup in a Cognito attribute list."""
    wanted = name.casefold()
    for attribute in attributes:
        if str(attribute.get("Name", "")).casefold() == wanted:
            return attribute.get("Value")
    return None


def map_user(user: dict[str, Any]) -> DirectoryUser:
    """Convert a Cognito UserType structure into a DirectoryUser.

    Missing attributes degrade to empty values rather than failing.
    """
    attributes = user.get("Attributes") or []
    name = _attribute(attributes, "name")

    created_at = user.get("UserCreateDate")
    if not isinstance(created_at, datetime):
        created_at = datetime.now(UTC)
    elif created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)

    return DirectoryUser(
        id=user.get("Username", ""),
        email=_attribute(attributes, "email") or "",
        name=name if name and name.strip() else None,
        enabled=bool(user.get("Enabled", False)),
        status=UserStatus.parse(user.get("UserStatus")),
        created_at=created_at,
    )


class CognitoUserDirectory(IUserDirectory):
    """Cognito user pool exposed as an IUserDirectory."""

    def __init__(
        self,
        client: Any,
        user_pool_id: str,
        probe: UserDirectoryProbe | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            client: aioboto3 ``cognito-idp`` client, owned by the caller
            user_pool_id: Id of the Cognito user pool to operate on
            probe: Optional domain probe for observability

        Raises:
            DirectoryConfigurationError: If user_pool_id is blank
        """
        if not user_pool_id or not user_pool_id.strip():
            raise DirectoryConfigurationError("Cognito user pool id is not configured")
        self._client = client
        self._user_pool_id = user_pool_id
        self._probe = probe or DefaultUserDirectoryProbe()

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Re-raise botocore failures as directory errors."""
        try:
            yield
        except ClientError as e:
            self._probe.directory_call_failed(operation, str(e))
            code = e.response.get("Error", {}).get("Code")
            if code == "UserNotFoundException":
                raise DirectoryUserNotFoundError(str(e), operation=operation) from e
            raise UserDirectoryError(str(e), operation=operation) from e
        except BotoCoreError as e:
            self._probe.directory_call_failed(operation, str(e))
            raise UserDirectoryError(str(e), operation=operation) from e

    async def list(
        self, keyword: str | None, limit: int, cursor: str | None
    ) -> PagedResult[DirectoryUser]:
        request: dict[str, Any] = {
            "UserPoolId": self._user_pool_id,
            "Limit": clamp_limit(limit, upper=COGNITO_MAX_PAGE_SIZE),
        }

        token = decode_cursor(cursor, OpaqueToken)
        if token is not None:
            request["PaginationToken"] = token.token

        if keyword is not None and keyword.strip():
            request["Filter"] = f'email ^= "{_escape_filter_value(keyword.strip())}"'

        with self._translate_errors("list_users"):
            response = await self._client.list_users(**request)

        users = [map_user(user) for user in response.get("Users", [])]
        next_token = response.get("PaginationToken")
        next_cursor = encode_cursor(OpaqueToken(token=next_token)) if next_token else None

        self._probe.users_listed(len(users), next_cursor is not None)
        return PagedResult(items=users, next_cursor=next_cursor)

    async def create(
        self,
        email: str,
        name: str | None = None,
        temporary_password: str | None = None,
    ) -> str:
        if email is None or not email.strip():
            raise DirectoryValidationError("Email is required")
        email = email.strip()

        attributes = [{"Name": "email", "Value": email}]
        if name is not None and name.strip():
            attributes.append({"Name": "name", "Value": name.strip()})

        request: dict[str, Any] = {
            "UserPoolId": self._user_pool_id,
            "Username": email,
            "UserAttributes": attributes,
        }
        if temporary_password is not None and temporary_password.strip():
            request["TemporaryPassword"] = temporary_password

        with self._translate_errors("admin_create_user"):
            response = await self._client.admin_create_user(**request)

        user_id = (response.get("User") or {}).get("Username") or email
        self._probe.user_created(user_id)
        return user_id

    async def update(
        self,
        user_id: str,
        name: str | None = None,
        enabled: bool | None = None,
    ) -> None:
        failures: dict[str, Exception] = {}
        name_changed = False

        if name is not None and name.strip():
            try:
                with self._translate_errors("admin_update_user_attributes"):
                    await self._client.admin_update_user_attributes(
                        UserPoolId=self._user_pool_id,
                        Username=user_id,
                        UserAttributes=[{"Name": "name", "Value": name.strip()}],
                    )
                name_changed = True
            except UserDirectoryError as e:
                self._probe.user_update_failed(user_id, "name", str(e))
                failures["name"] = e

        if enabled is not None:
            # Enabling is a state transition, not an attribute write
            if enabled:
                operation, call = "admin_enable_user", self._client.admin_enable_user
            else:
                operation, call = "admin_disable_user", self._client.admin_disable_user
            try:
                with self._translate_errors(operation):
                    await call(UserPoolId=self._user_pool_id, Username=user_id)
            except UserDirectoryError as e:
                self._probe.user_update_failed(user_id, "enabled", str(e))
                failures["enabled"] = e

        if failures:
            raise DirectoryUpdateError(user_id, failures)

        self._probe.user_updated(user_id, name_changed=name_changed, enabled=enabled)

    async def delete(self, user_id: str) -> None:
        with self._translate_errors("admin_delete_user"):
            await self._client.admin_delete_user(
                UserPoolId=self._user_pool_id,
                Username=user_id,
            )
        self._probe.user_deleted(user_id)
