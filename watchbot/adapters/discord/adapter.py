"""Discord adapter — bridges discord.Client to CommandDispatcher.

WatchBot is the gateway session: it owns the connection, exposes the
heartbeat latency, converts discord.Message -> IncomingMessage and hands
each one to the dispatcher.
"""

import sys
from typing import Optional

import aiohttp
import discord

from watchbot.config import DEFAULT_ACTIVITY
from watchbot.domain.commands import CommandDispatcher
from watchbot.errors import DeliveryError
from watchbot.ports.inbound import IncomingMessage


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_intents() -> discord.Intents:
    """Gateway scopes the dispatcher needs: guilds, guild messages, content, members."""
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    intents.members = True
    return intents


class DiscordNotificationAdapter:
    """NotificationPort implementation using discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def send(self, channel_id: int, text: str) -> None:
        channel = self._client.get_channel(channel_id)
        if channel is None:
            raise DeliveryError(channel_id, LookupError("channel not in cache"))
        try:
            await channel.send(text)
        except (discord.HTTPException, aiohttp.ClientError, OSError) as e:
            raise DeliveryError(channel_id, e) from e


class WatchBot(discord.Client):
    """Discord session that answers the fixed command set.

    The dispatcher is injected after construction because it needs the
    client itself as its session and notification target.
    """

    def __init__(self, activity_name: str = DEFAULT_ACTIVITY, **discord_kwargs):
        super().__init__(intents=build_intents(), **discord_kwargs)
        self.activity_name = activity_name
        self.dispatcher: Optional[CommandDispatcher] = None

    def attach(self, dispatcher: CommandDispatcher) -> None:
        self.dispatcher = dispatcher

    @staticmethod
    def to_incoming(message: discord.Message) -> IncomingMessage:
        """Convert a Discord message to platform-agnostic IncomingMessage."""
        return IncomingMessage(
            content=message.content,
            channel_id=message.channel.id,
            author_name=str(message.author),
            author_id=message.author.id,
            is_bot=message.author.bot,
            created_at=message.created_at,
        )

    async def on_ready(self):
        _log(f"[watchbot] Successfully logged in as {self.user}!")
        await self.change_presence(
            activity=discord.Activity(type=discord.ActivityType.watching, name=self.activity_name)
        )

    async def on_message(self, message: discord.Message):
        # Covers our own messages too: the bot account has author.bot set.
        if message.author.bot:
            return
        if self.dispatcher is None:
            _log("[watchbot] message received before dispatcher attached, ignoring")
            return
        await self.dispatcher.dispatch(self.to_incoming(message))


def create_bot(activity_name: str = DEFAULT_ACTIVITY) -> WatchBot:
    """Build a WatchBot wired to its own CommandDispatcher."""
    bot = WatchBot(activity_name=activity_name)
    bot.attach(CommandDispatcher(session=bot, notification=DiscordNotificationAdapter(bot)))
    return bot
