"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class IncomingMessage:
    """Discord/Slack/CLI-agnostic message representation."""

    content: str
    channel_id: int
    author_name: str
    author_id: int
    is_bot: bool
    created_at: datetime  # timezone-aware, UTC
