"""Pytest fixtures for devhubbot tests."""

import pytest

from devhubbot.bus.events import InboundMessage
from devhubbot.config.settings import BotSettings, DiscordSettings
from tests.fixtures.mocks import FakeGithubService, FakePlatform

ROLE_ID = "555"

SETTINGS_ENV = (
    "DISCORD_TOKEN",
    "DISCORD_DEVY_DEVELOPER_ROLE_ID",
    "GITHUB_TOKEN",
    "GITHUB_GRAPHQL_URL",
    "DEVHUBBOT_COMMAND_TIMEOUT",
    "DEVHUBBOT_LOG_LEVEL",
    "DEVHUBBOT_CONFIG",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep the host environment out of settings built by tests."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def platform():
    return FakePlatform()


@pytest.fixture
def github():
    return FakeGithubService()


@pytest.fixture
def settings():
    return BotSettings(discord=DiscordSettings(devy_developer_role_id=ROLE_ID))


@pytest.fixture
def make_message():
    """Build an inbound guild message from user u1 in channel c1."""

    def _make(content: str, role_ids=(), **kwargs) -> InboundMessage:
        fields = dict(
            channel="discord",
            sender_id="u1",
            sender_name="alice",
            chat_id="c1",
            guild_id="g1",
            message_id="m1",
            role_ids=frozenset(role_ids),
        )
        fields.update(kwargs)
        return InboundMessage(content=content, **fields)

    return _make
