"""Message types passed between the chat channel and the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InboundMessage:
    """A message received from a chat channel."""

    channel: str
    sender_id: str
    chat_id: str
    content: str
    sender_name: str = ""
    guild_id: str | None = None
    message_id: str | None = None
    role_ids: frozenset[str] = field(default_factory=frozenset)

    @property
    def session_key(self) -> str:
        return f"{self.channel}:{self.chat_id}"

    @property
    def dispatch_key(self) -> str:
        """Identifies one invocation; falls back to the object id for id-less messages."""
        return f"{self.session_key}:{self.message_id or id(self)}"


@dataclass
class OutboundMessage:
    """A reply to be delivered to a chat channel."""

    channel: str
    chat_id: str
    content: str
    reply_to: str | None = None
