"""Discord channel: receives guild messages and implements ChatPlatform."""

from __future__ import annotations

from typing import TYPE_CHECKING

import discord
from loguru import logger

from devhubbot.bot.dispatcher import Dispatcher
from devhubbot.bus.events import InboundMessage
from devhubbot.config.settings import BotSettings
from devhubbot.errors import PlatformError

if TYPE_CHECKING:
    from devhubbot.github.service import GithubDataService

MAX_MESSAGE_LENGTH = 2000


def to_inbound(message: discord.Message) -> InboundMessage:
    """Convert a discord.py message into the bot's message type."""
    author = message.author
    # Only guild members carry roles; DM authors are plain users.
    roles = getattr(author, "roles", None) or []
    return InboundMessage(
        channel="discord",
        sender_id=str(author.id),
        chat_id=str(message.channel.id),
        content=message.content or "",
        sender_name=author.name,
        guild_id=str(message.guild.id) if message.guild else None,
        message_id=str(message.id),
        role_ids=frozenset(str(role.id) for role in roles),
    )


class DiscordPlatform:
    """ChatPlatform backed by a discord.py client."""

    def __init__(self, client: discord.Client):
        self.client = client

    async def get_channel(self, channel_id: str) -> discord.abc.Messageable:
        try:
            cid = int(channel_id)
            return self.client.get_channel(cid) or await self.client.fetch_channel(cid)
        except (ValueError, discord.DiscordException) as e:
            raise PlatformError(f"get channel {channel_id}: {e}") from e

    async def send_message(self, channel_id: str, text: str) -> None:
        channel = await self.get_channel(channel_id)
        if len(text) > MAX_MESSAGE_LENGTH:
            text = text[: MAX_MESSAGE_LENGTH - 1] + "…"
        try:
            await channel.send(text)
        except discord.DiscordException as e:
            raise PlatformError(f"channel message send {channel_id}: {e}") from e

    async def _member(self, guild_id: str, user_id: str) -> discord.Member:
        try:
            gid, uid = int(guild_id), int(user_id)
            guild = self.client.get_guild(gid) or await self.client.fetch_guild(gid)
            return guild.get_member(uid) or await guild.fetch_member(uid)
        except (ValueError, discord.DiscordException) as e:
            raise PlatformError(f"guild member {guild_id}/{user_id}: {e}") from e

    async def add_role(self, guild_id: str, user_id: str, role_id: str) -> None:
        member = await self._member(guild_id, user_id)
        try:
            await member.add_roles(discord.Object(id=int(role_id)))
        except (ValueError, discord.DiscordException) as e:
            raise PlatformError(f"guild member role add: {e}") from e

    async def remove_role(self, guild_id: str, user_id: str, role_id: str) -> None:
        member = await self._member(guild_id, user_id)
        try:
            await member.remove_roles(discord.Object(id=int(role_id)))
        except (ValueError, discord.DiscordException) as e:
            raise PlatformError(f"guild member role remove: {e}") from e


class DiscordChannel(discord.Client):
    """Discord client that hands every human message to the dispatcher.

    Usage:
        channel = DiscordChannel(settings, github)
        await channel.start(settings.discord.token)
    """

    def __init__(self, settings: BotSettings, github: "GithubDataService"):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents)
        self.settings = settings
        self.platform = DiscordPlatform(self)
        self.dispatcher = Dispatcher(self.platform, github, settings)

    async def on_ready(self) -> None:
        logger.info("Discord bot logged in as {}", self.user)

    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return
        await self.dispatcher.dispatch(to_inbound(message))

    async def close(self) -> None:
        await self.dispatcher.cancel_all()
        await super().close()
