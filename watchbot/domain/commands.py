"""CommandDispatcher — exact-match text commands, no framework dependencies.

Maps an inbound message to at most one outbound reply. The only values read
besides the message itself are process uptime and the session's heartbeat
latency, both maintained elsewhere.
"""

import math
import sys
from datetime import datetime, timezone
from typing import Awaitable, Callable, Dict, Optional

from watchbot.config import uptime_seconds
from watchbot.domain.models import Uptime
from watchbot.errors import DeliveryError
from watchbot.ports.inbound import IncomingMessage
from watchbot.ports.outbound import NotificationPort, SessionPort


def _log(msg: str):
    print(msg, file=sys.stderr)


HELP_TEXT = (
    "Hello! I am a 24/7 active bot hosted on Render.\n\n"
    "Available Commands:\n"
    "- `!ping`: Check my response latency.\n"
    "- `!status`: Check my current uptime."
)

# Reported when the gateway has not measured a heartbeat yet.
UNKNOWN_LATENCY_MS = -1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def api_latency_ms(latency_seconds: float) -> int:
    """Session heartbeat latency in whole milliseconds."""
    if not math.isfinite(latency_seconds):
        return UNKNOWN_LATENCY_MS
    return round(latency_seconds * 1000)


class CommandDispatcher:
    """Replies to !ping, !help and !status.

    Bot-authored messages are dropped before any lookup so two bots can
    never answer each other. Delivery failures are logged and dropped.
    """

    def __init__(
        self,
        session: SessionPort,
        notification: NotificationPort,
        clock: Callable[[], datetime] = _utcnow,
        uptime: Callable[[], float] = uptime_seconds,
    ):
        self._session = session
        self._notification = notification
        self._clock = clock
        self._uptime = uptime
        self._commands: Dict[str, Callable[[IncomingMessage], Awaitable[str]]] = {
            "!ping": self._handle_ping,
            "!help": self._handle_help,
            "!status": self._handle_status,
        }

    @property
    def command_names(self):
        return list(self._commands)

    def resolve(self, message: IncomingMessage) -> Optional[str]:
        """Return the command name a message triggers, or None."""
        if message.is_bot:
            return None
        name = message.content.lower()
        return name if name in self._commands else None

    async def dispatch(self, message: IncomingMessage) -> bool:
        """Handle one message. Returns True when a reply was delivered."""
        name = self.resolve(message)
        if name is None:
            return False

        reply = await self._commands[name](message)
        _log(f"[dispatcher] {name} from {message.author_name} in ch={message.channel_id}")
        try:
            await self._notification.send(message.channel_id, reply)
        except DeliveryError as e:
            _log(f"[dispatcher] {name} reply dropped: {e}")
            return False
        return True

    # -- Command handlers --

    async def _handle_ping(self, message: IncomingMessage) -> str:
        elapsed = self._clock() - message.created_at
        client_ms = int(elapsed.total_seconds() * 1000)
        api_ms = api_latency_ms(self._session.latency)
        return f"📡 Pong! Latency is {client_ms}ms. API Latency is {api_ms}ms."

    async def _handle_help(self, message: IncomingMessage) -> str:
        return HELP_TEXT

    async def _handle_status(self, message: IncomingMessage) -> str:
        uptime = Uptime.from_seconds(self._uptime())
        return f"✅ I am active and have been running for: {uptime.describe()}."
