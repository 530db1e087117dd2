"""Chat-platform operations the bot depends on.

Handlers receive an implementation of ChatPlatform instead of calling the
Discord client directly, so tests can pass in a fake.
"""

from __future__ import annotations

from typing import Any, Protocol


class ChatPlatform(Protocol):
    """Outbound chat operations. Every method raises PlatformError on failure."""

    async def send_message(self, channel_id: str, text: str) -> None: ...

    async def add_role(self, guild_id: str, user_id: str, role_id: str) -> None: ...

    async def remove_role(self, guild_id: str, user_id: str, role_id: str) -> None: ...

    async def get_channel(self, channel_id: str) -> Any: ...
