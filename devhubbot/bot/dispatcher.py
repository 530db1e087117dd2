"""Route inbound chat messages to command handlers."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping

from loguru import logger

from devhubbot.bot.commands import MISSING_USERNAME_TEXT, CommandTag, parse_invocation
from devhubbot.bot.context import CommandContext
from devhubbot.bot.executor import BoundedExecutor, CommandHandler
from devhubbot.bot.handlers import HANDLERS
from devhubbot.bot.platform import ChatPlatform
from devhubbot.bus.events import InboundMessage, OutboundMessage
from devhubbot.config.settings import BotSettings
from devhubbot.github.service import GithubDataService


class Dispatcher:
    """Classify a message, run its handler and send the single reply.

    Messages are independent: concurrent dispatches share nothing but the
    command registry, so there is no lock. Each handler run is tracked in
    ``_active_tasks`` until it finishes so shutdown can cancel it.
    """

    def __init__(
        self,
        platform: ChatPlatform,
        github: GithubDataService,
        settings: BotSettings | None = None,
        executor: BoundedExecutor | None = None,
        handlers: Mapping[CommandTag, CommandHandler] | None = None,
    ):
        self.platform = platform
        self.github = github
        self.settings = settings or BotSettings()
        self.executor = executor or BoundedExecutor(self.settings.command_timeout)
        self.handlers = handlers or HANDLERS
        self._active_tasks: dict[str, asyncio.Task] = {}

    async def dispatch(self, msg: InboundMessage) -> OutboundMessage | None:
        """Handle one message. Returns the reply sent, or None if it was not a command."""
        invocation = parse_invocation(msg.content)
        if invocation is None:
            return None

        if invocation.missing_args:
            reply = MISSING_USERNAME_TEXT
        else:
            ctx = CommandContext(
                message=msg,
                invocation=invocation,
                github=self.github,
                platform=self.platform,
                settings=self.settings,
            )
            reply = await self._run(self.handlers[invocation.command.tag], ctx)

        out = OutboundMessage(
            channel=msg.channel, chat_id=msg.chat_id, content=reply, reply_to=msg.message_id
        )
        await self._send(out)
        logger.debug("Dispatched {} from {}", invocation.command.name, msg.sender_id)
        return out

    async def _run(self, handler: CommandHandler, ctx: CommandContext) -> str:
        key = ctx.message.dispatch_key
        task = asyncio.create_task(self.executor.run(handler, ctx))
        self._active_tasks[key] = task
        try:
            return await task
        except asyncio.CancelledError:
            logger.info("Command {} cancelled", ctx.invocation.command.name)
            raise
        finally:
            self._active_tasks.pop(key, None)

    async def _send(self, out: OutboundMessage) -> None:
        try:
            await self.platform.send_message(out.chat_id, out.content)
        except Exception as e:
            logger.error("Sending reply to {} failed: {}", out.chat_id, e)

    async def cancel_all(self) -> int:
        """Cancel in-flight commands. Returns how many were cancelled."""
        tasks = [t for t in self._active_tasks.values() if not t.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("Cancelled {} in-flight command(s)", len(tasks))
        return len(tasks)
