"""Configuration and process-wide state."""

import os
import sys
import time
from dataclasses import dataclass

from dotenv import load_dotenv

from watchbot.errors import ConfigError

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

# Captured once at import; the bot reports uptime relative to this instant.
PROCESS_STARTED_AT = time.monotonic()

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ACTIVITY = "for commands (24/7 active)"
SUPPORTED_LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


def uptime_seconds() -> float:
    """Seconds elapsed since the process started."""
    return time.monotonic() - PROCESS_STARTED_AT


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        _stderr_print(f"Invalid PORT={raw!r}, falling back to {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 0 <= port <= 65535:
        _stderr_print(f"PORT={port} out of range, falling back to {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


@dataclass
class AppConfig:
    """Typed configuration for the bot process."""

    discord_token: str = ""
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    activity: str = DEFAULT_ACTIVITY
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        log_level = os.getenv("LOG_LEVEL", "info").strip().lower()
        if log_level not in SUPPORTED_LOG_LEVELS:
            _stderr_print(f"Unsupported LOG_LEVEL={log_level!r}, falling back to 'info'")
            log_level = "info"
        return cls(
            discord_token=os.getenv("DISCORD_TOKEN", "").strip(),
            port=_parse_port(os.getenv("PORT", str(DEFAULT_PORT)).strip() or str(DEFAULT_PORT)),
            host=os.getenv("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
            activity=os.getenv("BOT_ACTIVITY", DEFAULT_ACTIVITY).strip() or DEFAULT_ACTIVITY,
            log_level=log_level,
        )

    def require_token(self) -> str:
        """Return the gateway token, or raise ConfigError when it is unset."""
        if not self.discord_token:
            raise ConfigError(
                "DISCORD_TOKEN environment variable is not set. "
                "Add it to the host's environment settings or a local .env file."
            )
        return self.discord_token
