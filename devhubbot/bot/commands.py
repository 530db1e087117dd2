"""Command definitions and message classification.

Commands are ``!``-prefixed words at the start of a chat message
(e.g. ``!streakcurrent octocat``). Anything else is not addressed to the
bot and is ignored without a reply.

To add a new command:
1. Add a member to CommandTag
2. Add a CommandDef to COMMANDS
3. Register a handler for the tag in devhubbot.bot.handlers.HANDLERS
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

COMMAND_PREFIX = "!"

MISSING_USERNAME_TEXT = "missing github username"


class CommandTag(str, Enum):
    """Closed set of commands the dispatcher knows how to run."""

    STREAK_CURRENT = "!streakcurrent"
    STREAK_LONGEST = "!streaklongest"
    CONTRIBUTIONS_TOTAL = "!contributionstotal"
    LANGUAGES = "!languages"
    LAST_REPO = "!lastrepo"
    DEVY_DEVELOPER = "!devydeveloper"
    HELP = "!help"


@dataclass(frozen=True)
class CommandDef:
    """Definition of a chat command."""

    tag: CommandTag
    description: str
    args: tuple[str, ...] = ()
    # Reply sent when the handler fails; formatted with ``subject``.
    failure: str = "something went wrong running {name} for user {subject}"

    @property
    def name(self) -> str:
        return self.tag.value

    def usage(self) -> str:
        """Render ``**name** {arg} ...`` followed by the indented description."""
        text = f"**{self.name}**"
        if self.args:
            text += " " + " ".join(f"{{{a}}}" for a in self.args)
        return f"{text}\n\t{self.description}"

    def failure_text(self, subject: str) -> str:
        return self.failure.format(name=self.name, subject=subject)


@dataclass(frozen=True)
class ParsedInvocation:
    """A message that matched a registered command."""

    command: CommandDef
    args: list[str] = field(default_factory=list)

    @property
    def missing_args(self) -> bool:
        return bool(self.command.args) and not self.args

    @property
    def argument(self) -> str | None:
        """First token after the command word; usernames with spaces are unsupported."""
        return self.args[0] if self.args else None


_GITHUB_USERNAME = ("github username",)

_DEFINITIONS = (
    CommandDef(
        CommandTag.STREAK_CURRENT,
        "get the current contribution streak of a github user",
        _GITHUB_USERNAME,
        failure="something went wrong retrieving current streak for github user {subject}",
    ),
    CommandDef(
        CommandTag.STREAK_LONGEST,
        "get the longest contribution streak of a github user",
        _GITHUB_USERNAME,
        failure="something went wrong retrieving longest streak for github user {subject}",
    ),
    CommandDef(
        CommandTag.CONTRIBUTIONS_TOTAL,
        "get the all time total contribution of a github user",
        _GITHUB_USERNAME,
        failure="something went wrong retrieving total contributions for user {subject}",
    ),
    CommandDef(
        CommandTag.LANGUAGES,
        "get a breakdown (in bytes written per language) of all languages "
        "used committed to your repositories",
        _GITHUB_USERNAME,
        failure="something went wrong retrieving languages for user {subject}",
    ),
    CommandDef(
        CommandTag.LAST_REPO,
        "get the most recently updated repository of a github user",
        _GITHUB_USERNAME,
        failure="something went wrong retrieving last repo for user {subject}",
    ),
    CommandDef(
        CommandTag.DEVY_DEVELOPER,
        "toggle devy developer role to add/remove access to devy development channels",
        failure="something went wrong toggle devy developer role for user {subject}",
    ),
    CommandDef(
        CommandTag.HELP,
        "list the available commands",
        failure="something went wrong listing commands for user {subject}",
    ),
)

# Registry of all known commands, keyed by the token users type.
COMMANDS: dict[str, CommandDef] = {defn.name: defn for defn in _DEFINITIONS}


def lookup(token: str) -> CommandDef | None:
    """Return the command registered under ``token``, if any."""
    return COMMANDS.get(token)


def parse_invocation(text: str) -> ParsedInvocation | None:
    """Classify a message body.

    Returns None when the message is not a command for this bot.
    """
    parts = text.strip().split(" ")
    if not parts or not parts[0]:
        return None
    defn = lookup(parts[0])
    if defn is None:
        return None
    # Repeated spaces leave empty strings behind; they are not arguments.
    args = [p for p in parts[1:] if p]
    return ParsedInvocation(command=defn, args=args)


def get_help_text() -> str:
    """Generate help text from registered commands."""
    return "\n".join(defn.usage() for defn in COMMANDS.values())
