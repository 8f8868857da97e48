from __future__ import annotations

import logging
from typing import List, Optional

from tgrouter import config
from tgrouter.logic import AbstractBotLogic, DefaultBotLogic
from tgrouter.router import RouterBot

logger = logging.getLogger(__name__)


class TgBotBuilder:
    """
    Fluent builder for a RouterBot.

    Usage::

        TgBotBuilder.create() \\
            .token("123:abc") \\
            .bot_name("my_bot") \\
            .register_logic([SupportChatLogic()]) \\
            .register_default_logic(WelcomeLogic()) \\
            .start()
    """

    def __init__(self) -> None:
        self._token: Optional[str] = None
        self._bot_name: Optional[str] = None
        self._logics: Optional[List[AbstractBotLogic]] = None
        self._default_logic: Optional[DefaultBotLogic] = None
        self._drop_pending_updates = False

    @classmethod
    def create(cls) -> "TgBotBuilder":
        return cls()

    @classmethod
    def from_config(cls) -> "TgBotBuilder":
        """Builder pre-filled from environment variables (see tgrouter.config)."""
        return (
            cls.create()
            .token(config.BOT_TOKEN)
            .bot_name(config.BOT_NAME)
            .drop_pending_updates(config.DROP_PENDING_UPDATES)
        )

    def token(self, token: Optional[str]) -> "TgBotBuilder":
        self._token = token
        return self

    def bot_name(self, bot_name: Optional[str]) -> "TgBotBuilder":
        """Bot username, without the leading @."""
        self._bot_name = bot_name
        return self

    def register_logic(self, logics: Optional[List[AbstractBotLogic]]) -> "TgBotBuilder":
        self._logics = logics
        return self

    def register_default_logic(self, default_logic: Optional[DefaultBotLogic]) -> "TgBotBuilder":
        self._default_logic = default_logic
        return self

    def drop_pending_updates(self, drop: bool = True) -> "TgBotBuilder":
        self._drop_pending_updates = drop
        return self

    def build(self) -> RouterBot:
        self._validate()
        return RouterBot(self._token, self._bot_name, self._logics, self._default_logic)

    def start(self) -> None:
        """Build the bot and run long polling until interrupted."""
        bot = self.build()
        bot.run_polling(drop_pending_updates=self._drop_pending_updates)

    def _validate(self) -> None:
        if not self._token or not self._token.strip():
            raise ValueError("Token must not be empty")
        if not self._bot_name or not self._bot_name.strip():
            raise ValueError("Bot name must not be empty")
