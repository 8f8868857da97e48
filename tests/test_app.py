import importlib
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tgrouter import app, config
from tgrouter.builder import TgBotBuilder
from tgrouter.logging import configure_logging
from tgrouter.router import RouterBot
from tests.fakes import FakeRouter, message_update


def test_main_exits_without_token(monkeypatch):
    monkeypatch.setattr(config, "BOT_TOKEN", None)
    monkeypatch.setattr(config, "BOT_NAME", "test_bot")

    with pytest.raises(SystemExit) as exc:
        app.main()
    assert exc.value.code == 1


def test_main_exits_without_name(monkeypatch):
    monkeypatch.setattr(config, "BOT_TOKEN", "token")
    monkeypatch.setattr(config, "BOT_NAME", "")

    with pytest.raises(SystemExit):
        app.main()


def test_main_starts_echo_bot(monkeypatch):
    monkeypatch.setattr(config, "BOT_TOKEN", "token")
    monkeypatch.setattr(config, "BOT_NAME", "test_bot")
    started = []
    monkeypatch.setattr(RouterBot, "run_polling", lambda self, **kw: started.append(self))

    app.main()

    assert len(started) == 1
    assert isinstance(started[0].default_logic, app.EchoLogic)


@pytest.mark.asyncio
async def test_echo_logic_replies_with_text():
    router = FakeRouter()
    echo = app.EchoLogic()
    echo.set_bot(router)
    echo.set_chat_id(100)

    await echo.process_update(message_update(100, text="ping"))

    router.bot.send_message.assert_awaited_once_with(chat_id=100, text="ping", reply_markup=None)


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("BOT_TOKEN", "env_token")
    monkeypatch.setenv("BOT_NAME", "env_bot")
    monkeypatch.setenv("DROP_PENDING_UPDATES", "TRUE")
    try:
        importlib.reload(config)
        assert config.BOT_TOKEN == "env_token"
        assert config.BOT_NAME == "env_bot"
        assert config.DROP_PENDING_UPDATES is True
        assert TgBotBuilder.from_config().build().bot_username == "env_bot"
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_configure_logging_accepts_level_names():
    logger = configure_logging("debug")

    assert logger.name == "tgrouter"
    assert logging.getLogger("httpx").level == logging.WARNING


def test_root_entrypoint_delegates_to_app_main():
    import bot

    assert bot.main is app.main
