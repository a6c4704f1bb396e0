"""Protocolos e contratos do core dos conectores."""

from .clock import ClockProtocol, SystemClock, to_iso8601
from .connector import ChannelConnectorProtocol, TargetSender

__all__ = [
    "ChannelConnectorProtocol",
    "ClockProtocol",
    "SystemClock",
    "TargetSender",
    "to_iso8601",
]
