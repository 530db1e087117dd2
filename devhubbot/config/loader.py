"""Load BotSettings from a JSON config file and the environment."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from devhubbot.config.settings import BotSettings, DiscordSettings, GithubSettings
from devhubbot.errors import ConfigurationError


def get_data_dir() -> Path:
    return Path.home() / ".devhubbot"


def get_config_path() -> Path:
    """Config file path, overridable with DEVHUBBOT_CONFIG."""
    override = os.environ.get("DEVHUBBOT_CONFIG")
    if override:
        return Path(override).expanduser()
    return get_data_dir() / "config.json"


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config file {}: {}", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file {}: top level is not an object", path)
        return {}
    return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.pop(name, None) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"invalid setting {name}: expected an object")
    return section


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or error.title
    return f"invalid setting {location}: {first['msg']}"


def load_settings(config_path: Path | str | None = None) -> BotSettings:
    """Build settings from the config file, with environment variables on top.

    Raises ConfigurationError naming the first invalid value. A missing role id
    is left unset here; the toggle command reports it when used.
    """
    path = Path(config_path) if config_path else get_config_path()
    data = _read_config_file(path)

    discord = _section(data, "discord")
    github = _section(data, "github")
    try:
        return BotSettings(
            discord=DiscordSettings(**discord),
            github=GithubSettings(**github),
            **data,
        )
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from e
