"""Tests for configuration loading."""

import json

import pytest

from devhubbot.config.loader import get_config_path, load_settings
from devhubbot.config.settings import BotSettings, DiscordSettings, GithubSettings
from devhubbot.errors import ConfigurationError


class TestLoadSettings:
    def test_defaults_without_file(self, tmp_path):
        settings = load_settings(tmp_path / "missing.json")

        assert settings == BotSettings()
        assert settings.command_timeout == 5.0
        assert settings.discord.devy_developer_role_id is None

    def test_reads_config_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "discord": {"token": "d", "devy_developer_role_id": "42"},
                    "github": {"token": "g"},
                    "command_timeout": 2.5,
                }
            )
        )

        settings = load_settings(path)

        assert settings.discord.token == "d"
        assert settings.discord.devy_developer_role_id == "42"
        assert settings.github.token == "g"
        assert settings.command_timeout == 2.5

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"discord": {"token": "file"}, "command_timeout": 2}))
        monkeypatch.setenv("DISCORD_TOKEN", "env")
        monkeypatch.setenv("DISCORD_DEVY_DEVELOPER_ROLE_ID", "99")
        monkeypatch.setenv("GITHUB_TOKEN", "gh")
        monkeypatch.setenv("DEVHUBBOT_COMMAND_TIMEOUT", "7")

        settings = load_settings(path)

        assert settings.discord.token == "env"
        assert settings.discord.devy_developer_role_id == "99"
        assert settings.github.token == "gh"
        assert settings.command_timeout == 7.0

    def test_environment_only(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GITHUB_GRAPHQL_URL", "http://localhost/graphql")
        monkeypatch.setenv("DEVHUBBOT_LOG_LEVEL", "DEBUG")

        settings = load_settings(tmp_path / "missing.json")

        assert settings.github.graphql_url == "http://localhost/graphql"
        assert settings.log_level == "DEBUG"

    def test_invalid_json_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        assert load_settings(path) == BotSettings()

    def test_invalid_env_value_names_the_setting(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DISCORD_TOKEN", "tok")
        monkeypatch.setenv("DISCORD_DEVY_DEVELOPER_ROLE_ID", "555")
        monkeypatch.setenv("DEVHUBBOT_COMMAND_TIMEOUT", "five")

        with pytest.raises(ConfigurationError, match="command_timeout"):
            load_settings(tmp_path / "missing.json")

    def test_non_positive_timeout_rejected(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DEVHUBBOT_COMMAND_TIMEOUT", "-1")

        with pytest.raises(ConfigurationError, match="command_timeout"):
            load_settings(tmp_path / "missing.json")

    def test_invalid_section_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"discord": "token"}))

        with pytest.raises(ConfigurationError, match="discord"):
            load_settings(path)

    def test_config_path_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DEVHUBBOT_CONFIG", str(tmp_path / "custom.json"))

        assert get_config_path() == tmp_path / "custom.json"


class TestSections:
    def test_blank_role_id_is_unset(self):
        assert DiscordSettings(devy_developer_role_id="  ").devy_developer_role_id is None

    def test_role_id_trimmed(self):
        assert DiscordSettings(devy_developer_role_id=" 42 ").devy_developer_role_id == "42"

    def test_blank_role_id_from_env_is_unset(self, monkeypatch):
        monkeypatch.setenv("DISCORD_DEVY_DEVELOPER_ROLE_ID", "")

        assert DiscordSettings().devy_developer_role_id is None

    def test_section_reads_its_prefix(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "secret")

        assert GithubSettings().token == "secret"
