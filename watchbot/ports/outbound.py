"""Outbound ports — interfaces for external system adapters."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NotificationPort(Protocol):
    """Interface for sending messages to channels.

    Implementations raise watchbot.errors.DeliveryError when the message
    cannot be delivered.
    """

    async def send(self, channel_id: int, text: str) -> None: ...


@runtime_checkable
class SessionPort(Protocol):
    """Read-only view of the live gateway session."""

    @property
    def latency(self) -> float:
        """Heartbeat round-trip time in seconds. May be nan/inf before the first heartbeat."""
        ...
