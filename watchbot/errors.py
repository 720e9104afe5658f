"""Exception types raised across the bot."""

from typing import Optional


class WatchbotError(Exception):
    """Base class for bot errors."""


class ConfigError(WatchbotError):
    """Required configuration is missing or unusable. Fatal at startup."""


class LivenessBindError(WatchbotError):
    """The keep-alive HTTP port could not be bound. Fatal at startup."""

    def __init__(self, host: str, port: int, cause: OSError):
        super().__init__(f"cannot bind keep-alive server to {host}:{port}: {cause}")
        self.host = host
        self.port = port
        self.cause = cause


class DeliveryError(WatchbotError):
    """An outbound reply could not be delivered to its channel."""

    def __init__(self, channel_id: int, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"failed to deliver message to channel {channel_id}{detail}")
        self.channel_id = channel_id
        self.cause = cause
