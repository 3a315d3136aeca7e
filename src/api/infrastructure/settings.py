"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared_kernel.pagination import MAX_PAGE_SIZE, MIN_PAGE_SIZE


class StoreSettings(BaseSettings):
    """Product store settings.

    Environment variables:
        STOCKROOM_STORE_BACKEND: Store backend, "memory" or "dynamodb" (default: memory)
        STOCKROOM_STORE_TABLE_NAME: DynamoDB table name (default: Stockroom)
        STOCKROOM_STORE_DEFAULT_PAGE_SIZE: Page size when none is requested (default: 50)
        STOCKROOM_STORE_MEMORY_SHARDS: Shard count of the in-memory store (default: 16)
    """

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend: Literal["memory", "dynamodb"] = Field(
        default="memory",
        description="Product store backend",
    )
    table_name: str = Field(default="Stockroom", description="DynamoDB table name")
    default_page_size: int = Field(
        default=50,
        description="Page size used when the caller does not request one",
        ge=MIN_PAGE_SIZE,
        le=MAX_PAGE_SIZE,
    )
    memory_shards: int = Field(
        default=16,
        description="Number of independently locked shards in the in-memory store",
        ge=1,
        le=1024,
    )


class AwsSettings(BaseSettings):
    """AWS client settings shared by DynamoDB and Cognito clients.

    Environment variables:
        STOCKROOM_AWS_REGION: AWS region (default: us-east-1)
        STOCKROOM_AWS_ENDPOINT_URL: Endpoint override, e.g. DynamoDB Local
        STOCKROOM_AWS_CONNECT_TIMEOUT: Connect timeout in seconds (default: 5)
        STOCKROOM_AWS_READ_TIMEOUT: Read timeout in seconds (default: 10)
        STOCKROOM_AWS_MAX_ATTEMPTS: botocore retry attempts (default: 3)
        STOCKROOM_AWS_RETRY_MODE: botocore retry mode (default: standard)
    """

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_AWS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    region: str = Field(default="us-east-1", description="AWS region")
    endpoint_url: str | None = Field(
        default=None,
        description="Endpoint override for local emulators",
    )
    connect_timeout: float = Field(default=5.0, description="Connect timeout", gt=0)
    read_timeout: float = Field(default=10.0, description="Read timeout", gt=0)
    max_attempts: int = Field(default=3, description="Retry attempts", ge=1, le=10)
    retry_mode: Literal["legacy", "standard", "adaptive"] = Field(
        default="standard",
        description="botocore retry mode",
    )


class CognitoSettings(BaseSettings):
    """Cognito user directory settings.

    Environment variables:
        STOCKROOM_COGNITO_USER_POOL_ID: User pool backing the user directory
    """

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_COGNITO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    user_pool_id: str = Field(default="", description="Cognito user pool id")

    @model_validator(mode="after")
    def strip_user_pool_id(self) -> "CognitoSettings":
        """Normalize surrounding whitespace in the pool id."""
        self.user_pool_id = self.user_pool_id.strip()
        return self

    @property
    def is_configured(self) -> bool:
        """Whether a user pool has been configured."""
        return bool(self.user_pool_id)


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Stockroom", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def store(self) -> StoreSettings:
        """Get product store settings."""
        return get_store_settings()

    @property
    def aws(self) -> AwsSettings:
        """Get AWS client settings."""
        return get_aws_settings()

    @property
    def cognito(self) -> CognitoSettings:
        """Get Cognito settings."""
        return get_cognito_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_store_settings() -> StoreSettings:
    """Get cached product store settings."""
    return StoreSettings()


@lru_cache
def get_aws_settings() -> AwsSettings:
    """Get cached AWS client settings."""
    return AwsSettings()


@lru_cache
def get_cognito_settings() -> CognitoSettings:
    """Get cached Cognito settings."""
    return CognitoSettings()
