"""Toggle a guild member's developer role.

Role membership is never cached: the member's current role set is read from
the inbound message and the change is written straight to the platform.
The read and the write are separate round-trips, so two toggles racing for
the same member may both see the same state. Adding a role twice is a no-op
on the platform; a remove/add race can leave the member in either state.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from loguru import logger

from devhubbot.bot.platform import ChatPlatform
from devhubbot.errors import ConfigurationError, DevhubBotError

ROLE_SETTING = "DISCORD_DEVY_DEVELOPER_ROLE_ID"


class RoleState(str, Enum):
    HAS_ROLE = "has_role"
    NO_ROLE = "no_role"


def current_state(role_ids: Iterable[str], role_id: str) -> RoleState:
    for candidate in role_ids:
        if candidate == role_id:
            return RoleState.HAS_ROLE
    return RoleState.NO_ROLE


class RoleToggle:
    """Flip a single role on or off for the invoking member."""

    def __init__(self, platform: ChatPlatform, role_id: str | None):
        self.platform = platform
        self.role_id = role_id

    async def toggle(self, guild_id: str | None, user_id: str, role_ids: Iterable[str]) -> RoleState:
        """Apply the one valid transition and return the new state.

        Raises ConfigurationError without touching the platform when no role is
        configured. Platform errors propagate; the member keeps the old state.
        """
        if not self.role_id:
            raise ConfigurationError(f"{ROLE_SETTING} not set")
        if not guild_id:
            raise DevhubBotError("role toggle requires a guild message")

        if current_state(role_ids, self.role_id) is RoleState.HAS_ROLE:
            await self.platform.remove_role(guild_id, user_id, self.role_id)
            logger.info("Removed role {} from user {} in guild {}", self.role_id, user_id, guild_id)
            return RoleState.NO_ROLE

        await self.platform.add_role(guild_id, user_id, self.role_id)
        logger.info("Added role {} to user {} in guild {}", self.role_id, user_id, guild_id)
        return RoleState.HAS_ROLE


def toggle_action(state: RoleState) -> str:
    """Past-tense verb for the transition that produced ``state``."""
    return "added" if state is RoleState.HAS_ROLE else "removed"
