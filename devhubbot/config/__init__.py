"""Bot configuration."""

from devhubbot.config.loader import get_config_path, load_settings
from devhubbot.config.settings import BotSettings, DiscordSettings, GithubSettings

__all__ = [
    "BotSettings",
    "DiscordSettings",
    "GithubSettings",
    "get_config_path",
    "load_settings",
]
