"""Tests for process startup — fatal conditions abort before the gateway."""

import socket
from unittest.mock import AsyncMock, MagicMock, patch

import discord
import pytest

from watchbot import app as app_module
from watchbot.config import AppConfig


@pytest.fixture
def env(monkeypatch):
    for name in ("DISCORD_TOKEN", "PORT", "HOST", "BOT_ACTIVITY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestMainFatal:
    def test_missing_token_exits_before_network(self, env, capsys):
        with patch.object(app_module, "bind_socket") as bind, \
                patch.object(app_module, "create_bot") as create_bot:
            with pytest.raises(SystemExit) as exc:
                app_module.main()
        assert exc.value.code == 1
        bind.assert_not_called()
        create_bot.assert_not_called()
        assert "FATAL ERROR" in capsys.readouterr().err

    def test_port_in_use_exits_before_gateway(self, env, capsys):
        taken = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        taken.bind(("127.0.0.1", 0))
        taken.listen(1)
        env.setenv("DISCORD_TOKEN", "token")
        env.setenv("HOST", "127.0.0.1")
        env.setenv("PORT", str(taken.getsockname()[1]))
        try:
            with patch.object(app_module, "create_bot") as create_bot:
                with pytest.raises(SystemExit) as exc:
                    app_module.main()
        finally:
            taken.close()
        assert exc.value.code == 1
        create_bot.assert_not_called()
        assert "cannot bind" in capsys.readouterr().err


class TestRun:
    @pytest.mark.asyncio
    async def test_login_failure_stops_web_server(self):
        bot = MagicMock()
        bot.__aenter__ = AsyncMock(return_value=bot)
        bot.__aexit__ = AsyncMock(return_value=False)
        bot.start = AsyncMock(side_effect=discord.LoginFailure("Improper token"))
        server = MagicMock()
        served = AsyncMock()
        sock = MagicMock()

        with patch.object(app_module, "create_bot", return_value=bot), \
                patch.object(app_module, "create_server", return_value=server), \
                patch.object(app_module, "serve", served):
            code = await app_module.run(AppConfig(discord_token="bad"), "bad", sock)

        assert code == 1
        bot.start.assert_awaited_once_with("bad")
        served.assert_awaited_once_with(server, sock)
        assert server.should_exit is True
