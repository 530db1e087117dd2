"""Inbound/outbound message types."""

from devhubbot.bus.events import InboundMessage, OutboundMessage

__all__ = ["InboundMessage", "OutboundMessage"]
