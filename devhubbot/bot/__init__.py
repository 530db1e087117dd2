"""Command dispatch: registry, classifier, bounded execution and role toggle."""

from devhubbot.bot.commands import COMMANDS, CommandDef, CommandTag, lookup, parse_invocation
from devhubbot.bot.dispatcher import Dispatcher
from devhubbot.bot.executor import BoundedExecutor
from devhubbot.bot.platform import ChatPlatform
from devhubbot.bot.roles import RoleState, RoleToggle

__all__ = [
    "COMMANDS",
    "BoundedExecutor",
    "ChatPlatform",
    "CommandDef",
    "CommandTag",
    "Dispatcher",
    "RoleState",
    "RoleToggle",
    "lookup",
    "parse_invocation",
]
