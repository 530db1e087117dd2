"""Command handlers.

Each handler returns the reply text for a successful run and raises on
failure; BoundedExecutor turns failures into the command's generic reply.
"""

from __future__ import annotations

from devhubbot.bot.commands import CommandTag, get_help_text
from devhubbot.bot.context import CommandContext
from devhubbot.bot.executor import CommandHandler
from devhubbot.bot.formatting import format_user_result, format_user_table
from devhubbot.bot.roles import RoleToggle, toggle_action


async def streak_current(ctx: CommandContext) -> str:
    streak = await ctx.github.get_current_contribution_streak(ctx.username)
    return format_user_result(ctx.username, streak)


async def streak_longest(ctx: CommandContext) -> str:
    streak = await ctx.github.get_longest_contribution_streak(ctx.username)
    return format_user_result(ctx.username, streak)


async def contributions_total(ctx: CommandContext) -> str:
    total = await ctx.github.get_total_contributions(ctx.username)
    return format_user_result(ctx.username, total)


async def languages(ctx: CommandContext) -> str:
    breakdown = await ctx.github.get_languages(ctx.username)
    return format_user_table(ctx.username, breakdown)


async def last_repo(ctx: CommandContext) -> str:
    repo = await ctx.github.get_last_repo(ctx.username)
    return format_user_result(ctx.username, repo)


async def devy_developer(ctx: CommandContext) -> str:
    msg = ctx.message
    toggle = RoleToggle(ctx.platform, ctx.settings.discord.devy_developer_role_id)
    state = await toggle.toggle(msg.guild_id, msg.sender_id, msg.role_ids)
    return f"{toggle_action(state)} devy developer role for user {ctx.subject}"


async def help_(ctx: CommandContext) -> str:
    return get_help_text()


HANDLERS: dict[CommandTag, CommandHandler] = {
    CommandTag.STREAK_CURRENT: streak_current,
    CommandTag.STREAK_LONGEST: streak_longest,
    CommandTag.CONTRIBUTIONS_TOTAL: contributions_total,
    CommandTag.LANGUAGES: languages,
    CommandTag.LAST_REPO: last_repo,
    CommandTag.DEVY_DEVELOPER: devy_developer,
    CommandTag.HELP: help_,
}

_unbound = set(CommandTag) - set(HANDLERS)
if _unbound:
    raise RuntimeError(f"commands without handlers: {sorted(t.value for t in _unbound)}")
