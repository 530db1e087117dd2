"""Tests for the command registry and message classification."""

import pytest

from devhubbot.bot.commands import (
    COMMAND_PREFIX,
    COMMANDS,
    CommandDef,
    CommandTag,
    get_help_text,
    lookup,
    parse_invocation,
)
from devhubbot.bot.handlers import HANDLERS


class TestRegistry:
    def test_lookup_returns_matching_name(self):
        for token in COMMANDS:
            assert lookup(token).name == token

    def test_tokens_are_prefixed(self):
        for token in COMMANDS:
            assert token.startswith(COMMAND_PREFIX)

    def test_every_tag_registered_and_handled(self):
        assert {defn.tag for defn in COMMANDS.values()} == set(CommandTag)
        assert set(HANDLERS) == set(CommandTag)

    def test_unknown_token(self):
        assert lookup("!nope") is None
        assert lookup("streakcurrent") is None

    def test_expected_commands(self):
        for token in (
            "!streakcurrent",
            "!streaklongest",
            "!contributionstotal",
            "!languages",
            "!lastrepo",
            "!devydeveloper",
        ):
            assert token in COMMANDS

    def test_role_toggle_takes_no_args(self):
        assert lookup("!devydeveloper").args == ()


class TestUsage:
    def test_usage_with_args(self):
        defn = CommandDef(CommandTag.LANGUAGES, "list languages", ("github username",))
        assert defn.usage() == "**!languages** {github username}\n\tlist languages"

    def test_usage_without_args(self):
        defn = CommandDef(CommandTag.DEVY_DEVELOPER, "toggle role")
        assert defn.usage() == "**!devydeveloper**\n\ttoggle role"

    def test_help_lists_every_command(self):
        text = get_help_text()
        for defn in COMMANDS.values():
            assert defn.name in text
            assert defn.description in text

    def test_failure_text(self):
        assert (
            lookup("!streakcurrent").failure_text("octocat")
            == "something went wrong retrieving current streak for github user octocat"
        )


class TestParseInvocation:
    def test_command_with_argument(self):
        inv = parse_invocation("!streakcurrent octocat")
        assert inv.command.tag is CommandTag.STREAK_CURRENT
        assert inv.argument == "octocat"
        assert not inv.missing_args

    def test_missing_argument(self):
        inv = parse_invocation("!streakcurrent")
        assert inv.missing_args
        assert inv.argument is None

    def test_surrounding_whitespace_trimmed(self):
        inv = parse_invocation("   !languages octocat  ")
        assert inv.command.tag is CommandTag.LANGUAGES
        assert inv.args == ["octocat"]

    def test_only_first_argument_used(self):
        inv = parse_invocation("!streaklongest octo cat")
        assert inv.argument == "octo"

    def test_no_arg_command_never_missing(self):
        assert not parse_invocation("!devydeveloper").missing_args

    @pytest.mark.parametrize("text", ["", "   ", "hello world", "streakcurrent octocat", "!STREAKCURRENT x"])
    def test_not_a_command(self, text):
        assert parse_invocation(text) is None

    def test_command_must_be_first_word(self):
        assert parse_invocation("hey !streakcurrent octocat") is None
