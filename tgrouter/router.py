from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from telegram import Bot, Update
from telegram.ext import Application, ContextTypes, TypeHandler

from tgrouter.extraction import get_chat_id_from_update
from tgrouter.logic import AbstractBotLogic, DefaultBotLogic

logger = logging.getLogger(__name__)


class RouterBot:
    """
    Routes every inbound update to the logic registered for its chat.

    The first logic whose ``chat_id`` matches wins. Unmatched updates go to
    the default logic when there is one and are dropped otherwise.
    """

    def __init__(
        self,
        token: str,
        bot_name: str,
        logics: Optional[Sequence[AbstractBotLogic]] = None,
        default_logic: Optional[DefaultBotLogic] = None,
    ):
        self._token = token
        self._bot_name = bot_name
        self._logics: List[AbstractBotLogic] = [logic for logic in (logics or []) if logic is not None]
        self._default_logic = default_logic

        self.application = Application.builder().token(token).build()
        self.application.add_handler(TypeHandler(Update, self.on_update_received))
        self.application.add_error_handler(self._error_handler)

        for logic in self._logics:
            logic.set_bot(self)
        if self._default_logic is not None:
            self._default_logic.set_bot(self)

        self._warn_duplicates()

    @property
    def bot_username(self) -> str:
        return self._bot_name

    @property
    def token(self) -> str:
        return self._token

    @property
    def bot(self) -> Bot:
        return self.application.bot

    @property
    def logics(self) -> List[AbstractBotLogic]:
        return list(self._logics)

    @property
    def default_logic(self) -> Optional[DefaultBotLogic]:
        return self._default_logic

    async def on_update_received(
        self, update: Update, context: Optional[ContextTypes.DEFAULT_TYPE] = None
    ) -> None:
        chat_id = get_chat_id_from_update(update)
        if chat_id is None:
            logger.debug(f"Update {getattr(update, 'update_id', None)} carries no chat id, skipping")
            return

        logic = next((logic for logic in self._logics if logic.chat_id == chat_id), None)
        if logic is not None:
            await logic.process_update(update)
            return

        if self._default_logic is not None:
            self._default_logic.set_chat_id(chat_id)
            await self._default_logic.process_update(update)
            return

        logger.debug(f"No logic registered for chat {chat_id}, update dropped")

    def run_polling(self, drop_pending_updates: bool = False) -> None:
        """Block and process updates until interrupted."""
        logger.info(
            f"Starting @{self._bot_name} with {len(self._logics)} chat logic(s), "
            f"default logic: {type(self._default_logic).__name__ if self._default_logic else 'none'}"
        )
        self.application.run_polling(
            allowed_updates=Update.ALL_TYPES,
            drop_pending_updates=drop_pending_updates,
        )

    def _warn_duplicates(self) -> None:
        seen = set()
        for logic in self._logics:
            chat_id = logic.chat_id
            if chat_id in seen:
                logger.warning(
                    f"Chat {chat_id} is registered more than once, {type(logic).__name__} will never receive updates"
                )
            seen.add(chat_id)

    async def _error_handler(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Log errors raised by logics without stopping the polling loop."""
        error = context.error
        logger.error(
            f"Error while processing update {getattr(update, 'update_id', None)}: {error}",
            exc_info=(type(error), error, error.__traceback__) if error else None,
        )
