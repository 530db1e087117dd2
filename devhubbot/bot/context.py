"""Per-invocation state handed to command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from devhubbot.bot.commands import ParsedInvocation
from devhubbot.bot.platform import ChatPlatform
from devhubbot.bus.events import InboundMessage
from devhubbot.config.settings import BotSettings

if TYPE_CHECKING:
    from devhubbot.github.service import GithubDataService


@dataclass(frozen=True)
class CommandContext:
    message: InboundMessage
    invocation: ParsedInvocation
    github: "GithubDataService"
    platform: ChatPlatform
    settings: BotSettings

    @property
    def username(self) -> str:
        """GitHub username argument; handlers that need one run only when present."""
        return self.invocation.argument or ""

    @property
    def subject(self) -> str:
        """Public name used in replies.

        Commands that take a username name it; the rest name the invoking user,
        ignoring any stray words after the command.
        """
        if self.invocation.command.args and self.invocation.argument:
            return self.invocation.argument
        return self.message.sender_name or self.message.sender_id
