"""Configuration models.

Each section reads its own environment variables through pydantic-settings:

- ``DISCORD_TOKEN``, ``DISCORD_DEVY_DEVELOPER_ROLE_ID``
- ``GITHUB_TOKEN``, ``GITHUB_GRAPHQL_URL``
- ``DEVHUBBOT_COMMAND_TIMEOUT``, ``DEVHUBBOT_LOG_LEVEL``

Values passed to the constructor (the config.json contents) sit below the
environment, so a deployment can override the file without editing it.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class _EnvFirstSettings(BaseSettings):
    """Settings section where environment variables win over init kwargs."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (env_settings, init_settings)


class DiscordSettings(_EnvFirstSettings):
    """Discord connection and guild settings."""

    model_config = SettingsConfigDict(env_prefix="DISCORD_", extra="ignore")

    token: str = Field(default="", description="Bot token")
    devy_developer_role_id: str | None = Field(
        default=None, description="Role toggled by !devydeveloper"
    )

    @field_validator("devy_developer_role_id")
    @classmethod
    def blank_role_is_unset(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class GithubSettings(_EnvFirstSettings):
    """GitHub GraphQL API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str = Field(default="", description="Personal access token")
    graphql_url: str = Field(default="https://api.github.com/graphql")


class BotSettings(_EnvFirstSettings):
    """Top-level bot configuration."""

    model_config = SettingsConfigDict(env_prefix="DEVHUBBOT_", extra="ignore")

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    github: GithubSettings = Field(default_factory=GithubSettings)
    command_timeout: float = Field(
        default=5.0, gt=0, description="Seconds a command may spend on external calls"
    )
    log_level: str = Field(default="INFO")
