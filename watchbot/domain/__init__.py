"""Domain layer — pure Python, no framework dependencies."""

from watchbot.domain.commands import HELP_TEXT, CommandDispatcher
from watchbot.domain.models import Uptime

__all__ = [
    "CommandDispatcher",
    "HELP_TEXT",
    "Uptime",
]
