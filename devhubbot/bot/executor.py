"""Run command handlers under a time bound."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from loguru import logger

from devhubbot.bot.context import CommandContext
from devhubbot.errors import ConfigurationError

DEFAULT_COMMAND_TIMEOUT = 5.0

CommandHandler = Callable[[CommandContext], Awaitable[str]]


class BoundedExecutor:
    """Invoke a handler and turn every outcome into exactly one reply text.

    The handler runs inside ``asyncio.wait_for``; when the bound expires the
    handler task is cancelled and its result discarded. Failures are logged and
    replaced with the command's generic failure text, which only names the
    subject of the command. Cancellation of the caller propagates.
    """

    def __init__(self, timeout: float = DEFAULT_COMMAND_TIMEOUT):
        self.timeout = timeout

    async def run(self, handler: CommandHandler, ctx: CommandContext) -> str:
        defn = ctx.invocation.command
        try:
            return await asyncio.wait_for(handler(ctx), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error("{} timed out after {}s for {}", defn.name, self.timeout, ctx.subject)
        except ConfigurationError as e:
            logger.error("{} misconfigured: {}", defn.name, e)
        except Exception as e:
            logger.error("{} failed for {}: {}", defn.name, ctx.subject, e)
        return defn.failure_text(ctx.subject)
