"""Process entry point: keep-alive server plus Discord command bot."""

import asyncio
import socket
import sys

import discord

from watchbot.adapters.discord.adapter import create_bot
from watchbot.adapters.web.server import bind_socket, create_server, serve
from watchbot.config import AppConfig
from watchbot.errors import ConfigError, LivenessBindError


def _log(msg: str):
    print(msg, file=sys.stderr)


async def run(config: AppConfig, token: str, sock: socket.socket) -> int:
    """Serve the keep-alive endpoint and the gateway session on one loop."""
    server = create_server(config.log_level)
    bot = create_bot(config.activity)
    web_task = asyncio.create_task(serve(server, sock))
    try:
        async with bot:
            await bot.start(token)
    except discord.LoginFailure as e:
        _log(f"FATAL ERROR: Discord login failed: {e}")
        return 1
    finally:
        server.should_exit = True
        await web_task
    return 0


def main():
    config = AppConfig.from_env()
    try:
        token = config.require_token()
        sock = bind_socket(config.host, config.port)
    except (ConfigError, LivenessBindError) as e:
        _log(f"FATAL ERROR: {e}")
        sys.exit(1)

    sys.exit(asyncio.run(run(config, token, sock)))


if __name__ == "__main__":
    main()
