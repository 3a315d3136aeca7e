"""Unit tests for CognitoUserDirectory.

The aioboto3 cognito-idp client is replaced by AsyncMocks; tests assert on
the requests sent to the user pool and the mapping of its responses.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from iam.domain.value_objects import UserStatus
from iam.infrastructure.cognito_user_directory import (
    CognitoUserDirectory,
    map_user,
)
from iam.infrastructure.observability import UserDirectoryProbe
from iam.ports.directory import IUserDirectory
from iam.ports.exceptions import (
    DirectoryConfigurationError,
    DirectoryUpdateError,
    DirectoryUserNotFoundError,
    DirectoryValidationError,
    UserDirectoryError,
)

POOL_ID = "us-east-1_Example"


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


def _cognito_user(username: str = "u-1", **overrides) -> dict:
    user = {
        "Username": username,
        "Attributes": [
            {"Name": "email", "Value": f"{username}@example.com"},
            {"Name": "name", "Value": "Alice"},
        ],
        "Enabled": True,
        "UserStatus": "CONFIRMED",
        "UserCreateDate": datetime(2024, 6, 1, tzinfo=UTC),
    }
    user.update(overrides)
    return user


@pytest.fixture
def mock_client():
    """Create mock cognito-idp client."""
    client = MagicMock()
    client.list_users = AsyncMock(return_value={"Users": []})
    client.admin_create_user = AsyncMock(return_value={"User": {"Username": "new-id"}})
    client.admin_update_user_attributes = AsyncMock(return_value={})
    client.admin_enable_user = AsyncMock(return_value={})
    client.admin_disable_user = AsyncMock(return_value={})
    client.admin_delete_user = AsyncMock(return_value={})
    return client


@pytest.fixture
def mock_probe():
    """Create mock directory probe."""
    return create_autospec(UserDirectoryProbe, instance=True)


@pytest.fixture
def directory(mock_client, mock_probe):
    """Create directory bound to the mock client."""
    return CognitoUserDirectory(mock_client, user_pool_id=POOL_ID, probe=mock_probe)


class TestInit:
    """Tests for construction."""

    def test_implements_protocol(self, mock_client):
        """Adapter should satisfy IUserDirectory."""
        assert isinstance(CognitoUserDirectory(mock_client, POOL_ID), IUserDirectory)

    @pytest.mark.parametrize("pool_id", ["", "   "])
    def test_requires_pool_id(self, mock_client, pool_id):
        """A blank user pool id is a configuration error."""
        with pytest.raises(DirectoryConfigurationError):
            CognitoUserDirectory(mock_client, user_pool_id=pool_id)


class TestMapUser:
    """Tests for map_user."""

    def test_maps_full_user(self):
        """All fields are read from the Cognito structure."""
        user = map_user(_cognito_user())

        assert user.id == "u-1"
        assert user.email == "u-1@example.com"
        assert user.name == "Alice"
        assert user.enabled is True
        assert user.status is UserStatus.CONFIRMED
        assert user.created_at == datetime(2024, 6, 1, tzinfo=UTC)

    def test_attribute_names_are_case_insensitive(self):
        """Attribute lookup ignores case."""
        user = map_user(
            _cognito_user(Attributes=[{"Name": "EMAIL", "Value": "x@example.com"}])
        )

        assert user.email == "x@example.com"
        assert user.name is None

    def test_missing_fields_degrade(self):
        """A bare user maps to empty values rather than failing."""
        user = map_user({"Username": "bare"})

        assert user.email == ""
        assert user.name is None
        assert user.enabled is False
        assert user.status is UserStatus.UNKNOWN
        assert user.created_at.tzinfo is not None

    def test_naive_create_date_is_utc(self):
        """Naive creation dates are assumed UTC."""
        user = map_user(_cognito_user(UserCreateDate=datetime(2024, 1, 1)))

        assert user.created_at == datetime(2024, 1, 1, tzinfo=UTC)


class TestList:
    """Tests for list."""

    @pytest.mark.asyncio
    async def test_basic_request(self, directory, mock_client):
        """Without keyword or cursor only pool and limit are sent."""
        await directory.list(None, 25, None)

        mock_client.list_users.assert_awaited_once_with(UserPoolId=POOL_ID, Limit=25)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("requested,sent", [(0, 1), (500, 60), (150, 60)])
    async def test_limit_is_clamped_to_vendor_maximum(
        self, directory, mock_client, requested, sent
    ):
        """Limits are clamped to [1, 60] before the call."""
        await directory.list(None, requested, None)

        assert mock_client.list_users.await_args.kwargs["Limit"] == sent

    @pytest.mark.asyncio
    async def test_keyword_becomes_email_prefix_filter(self, directory, mock_client):
        """A keyword filters on email prefix."""
        await directory.list("  alice ", 10, None)

        assert mock_client.list_users.await_args.kwargs["Filter"] == 'email ^= "alice"'

    @pytest.mark.asyncio
    async def test_keyword_quotes_are_escaped(self, directory, mock_client):
        """Quotes cannot break out of the filter expression."""
        await directory.list('a"b', 10, None)

        assert mock_client.list_users.await_args.kwargs["Filter"] == 'email ^= "a\\"b"'

    @pytest.mark.asyncio
    async def test_cursor_is_passed_through_verbatim(self, directory, mock_client):
        """Vendor tokens are sent back exactly as issued."""
        await directory.list(None, 10, "vendor/token+==")

        assert mock_client.list_users.await_args.kwargs["PaginationToken"] == (
            "vendor/token+=="
        )

    @pytest.mark.asyncio
    async def test_blank_cursor_starts_from_beginning(self, directory, mock_client):
        """A blank cursor sends no pagination token."""
        await directory.list(None, 10, "  ")

        assert "PaginationToken" not in mock_client.list_users.await_args.kwargs

    @pytest.mark.asyncio
    async def test_returns_mapped_page(self, directory, mock_client, mock_probe):
        """Users are mapped and the vendor token becomes the next cursor."""
        mock_client.list_users.return_value = {
            "Users": [_cognito_user("u-1"), _cognito_user("u-2")],
            "PaginationToken": "next-token",
        }

        page = await directory.list(None, 2, None)

        assert [user.id for user in page.items] == ["u-1", "u-2"]
        assert page.next_cursor == "next-token"
        mock_probe.users_listed.assert_called_once_with(2, True)

    @pytest.mark.asyncio
    async def test_last_page_has_no_cursor(self, directory, mock_client):
        """No vendor token means no further pages."""
        mock_client.list_users.return_value = {"Users": [_cognito_user()]}

        page = await directory.list(None, 10, None)

        assert page.next_cursor is None


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_creates_with_email_as_username(self, directory, mock_client):
        """Email is both username and attribute; the vendor id is returned."""
        user_id = await directory.create(" bob@example.com ", name="Bob")

        assert user_id == "new-id"
        mock_client.admin_create_user.assert_awaited_once_with(
            UserPoolId=POOL_ID,
            Username="bob@example.com",
            UserAttributes=[
                {"Name": "email", "Value": "bob@example.com"},
                {"Name": "name", "Value": "Bob"},
            ],
        )

    @pytest.mark.asyncio
    async def test_temporary_password_is_forwarded(self, directory, mock_client):
        """An initial password is sent when given."""
        await directory.create("bob@example.com", temporary_password="Tmp#12345")

        kwargs = mock_client.admin_create_user.await_args.kwargs
        assert kwargs["TemporaryPassword"] == "Tmp#12345"
        assert kwargs["UserAttributes"] == [{"Name": "email", "Value": "bob@example.com"}]

    @pytest.mark.asyncio
    async def test_falls_back_to_email_as_id(self, directory, mock_client):
        """If the response carries no username, the email is the id."""
        mock_client.admin_create_user.return_value = {}

        assert await directory.create("bob@example.com") == "bob@example.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["", "   "])
    async def test_blank_email_is_rejected_before_call(
        self, directory, mock_client, email
    ):
        """A blank email fails validation without a round trip."""
        with pytest.raises(DirectoryValidationError):
            await directory.create(email)

        mock_client.admin_create_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_vendor_error_is_translated(self, directory, mock_client):
        """Vendor rejections surface as UserDirectoryError."""
        mock_client.admin_create_user.side_effect = _client_error(
            "UsernameExistsException", "AdminCreateUser"
        )

        with pytest.raises(UserDirectoryError) as exc_info:
            await directory.create("bob@example.com")

        assert exc_info.value.operation == "admin_create_user"
        assert isinstance(exc_info.value.__cause__, ClientError)


class TestUpdate:
    """Tests for update."""

    @pytest.mark.asyncio
    async def test_name_only(self, directory, mock_client):
        """A name change writes only the name attribute."""
        await directory.update("u-1", name=" Alicia ")

        mock_client.admin_update_user_attributes.assert_awaited_once_with(
            UserPoolId=POOL_ID,
            Username="u-1",
            UserAttributes=[{"Name": "name", "Value": "Alicia"}],
        )
        mock_client.admin_enable_user.assert_not_awaited()
        mock_client.admin_disable_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_name_is_skipped(self, directory, mock_client):
        """A blank name means no attribute write."""
        await directory.update("u-1", name="  ", enabled=True)

        mock_client.admin_update_user_attributes.assert_not_awaited()
        mock_client.admin_enable_user.assert_awaited_once_with(
            UserPoolId=POOL_ID, Username="u-1"
        )

    @pytest.mark.asyncio
    async def test_disable(self, directory, mock_client, mock_probe):
        """enabled=False disables the account."""
        await directory.update("u-1", enabled=False)

        mock_client.admin_disable_user.assert_awaited_once_with(
            UserPoolId=POOL_ID, Username="u-1"
        )
        mock_probe.user_updated.assert_called_once_with(
            "u-1", name_changed=False, enabled=False
        )

    @pytest.mark.asyncio
    async def test_nothing_to_do(self, directory, mock_client):
        """An update with no changes makes no calls."""
        await directory.update("u-1")

        mock_client.admin_update_user_attributes.assert_not_awaited()
        mock_client.admin_enable_user.assert_not_awaited()
        mock_client.admin_disable_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_partial_failure_reports_failed_part(self, directory, mock_client):
        """A failed status change is reported while the rename stays applied."""
        mock_client.admin_enable_user.side_effect = _client_error(
            "InternalErrorException", "AdminEnableUser"
        )

        with pytest.raises(DirectoryUpdateError) as exc_info:
            await directory.update("u-1", name="Alicia", enabled=True)

        assert set(exc_info.value.failures) == {"enabled"}
        mock_client.admin_update_user_attributes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_both_parts_attempted_when_first_fails(
        self, directory, mock_client, mock_probe
    ):
        """A failed rename does not prevent the status change."""
        mock_client.admin_update_user_attributes.side_effect = _client_error(
            "InvalidParameterException", "AdminUpdateUserAttributes"
        )
        mock_client.admin_disable_user.side_effect = EndpointConnectionError(
            endpoint_url="https://cognito-idp.us-east-1.amazonaws.com"
        )

        with pytest.raises(DirectoryUpdateError) as exc_info:
            await directory.update("u-1", name="Alicia", enabled=False)

        assert set(exc_info.value.failures) == {"name", "enabled"}
        mock_client.admin_disable_user.assert_awaited_once()
        assert mock_probe.user_update_failed.call_count == 2
        mock_probe.user_updated.assert_not_called()


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_deletes_user(self, directory, mock_client, mock_probe):
        """delete() removes the user from the pool."""
        await directory.delete("u-1")

        mock_client.admin_delete_user.assert_awaited_once_with(
            UserPoolId=POOL_ID, Username="u-1"
        )
        mock_probe.user_deleted.assert_called_once_with("u-1")

    @pytest.mark.asyncio
    async def test_unknown_user(self, directory, mock_client):
        """UserNotFoundException maps to DirectoryUserNotFoundError."""
        mock_client.admin_delete_user.side_effect = _client_error(
            "UserNotFoundException", "AdminDeleteUser"
        )

        with pytest.raises(DirectoryUserNotFoundError):
            await directory.delete("ghost")
