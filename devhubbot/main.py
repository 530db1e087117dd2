"""Entry point for the devhubbot Discord bot."""

from __future__ import annotations

import argparse
import asyncio
import sys

from loguru import logger

from devhubbot.channels.discord import DiscordChannel
from devhubbot.config.loader import load_settings
from devhubbot.errors import ConfigurationError
from devhubbot.github.service import GithubService


def setup_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a single stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


async def main(config_path: str | None = None, log_level: str | None = None) -> int:
    """
    Start the bot and run until the Discord connection closes.

    Args:
        config_path: Optional path to a JSON config file
        log_level: Overrides the configured log level
    """
    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        setup_logging(log_level or "INFO")
        logger.error("Configuration error: {}", e)
        return 1
    setup_logging(log_level or settings.log_level)

    if not settings.discord.token:
        logger.error("DISCORD_TOKEN not set")
        return 1
    if not settings.discord.devy_developer_role_id:
        logger.warning("DISCORD_DEVY_DEVELOPER_ROLE_ID not set; !devydeveloper will fail")

    logger.info("Starting devhubbot (command timeout {}s)", settings.command_timeout)
    async with GithubService(settings.github) as github:
        client = DiscordChannel(settings, github)
        async with client:
            await client.start(settings.discord.token)
    return 0


def run() -> None:
    parser = argparse.ArgumentParser(description="devhubbot Discord bot")
    parser.add_argument("-c", "--config", help="Path to config.json")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ...)")
    args = parser.parse_args()

    try:
        sys.exit(asyncio.run(main(config_path=args.config, log_level=args.log_level)))
    except KeyboardInterrupt:
        logger.info("devhubbot stopped by user")


if __name__ == "__main__":
    run()
