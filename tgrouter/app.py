"""
Runnable router bot.

Every chat gets the echo logic below. Real deployments register their own
per-chat logics through TgBotBuilder instead.
"""
import logging
import sys

from telegram import Update

from tgrouter import config
from tgrouter.builder import TgBotBuilder
from tgrouter.logging import configure_logging
from tgrouter.logic import DefaultBotLogic

logger = logging.getLogger(__name__)


class EchoLogic(DefaultBotLogic):
    """Replies to text messages with the same text."""

    async def process_update(self, update: Update) -> None:
        message = update.effective_message
        if not message or not message.text:
            return
        logger.info(f"Echoing message {message.message_id} in chat {self.chat_id}")
        await self.send_message(message.text)


def main():
    configure_logging(config.LOG_LEVEL)

    if not config.BOT_TOKEN:
        logger.error("BOT_TOKEN not set in environment variables!")
        sys.exit(1)
    if not config.BOT_NAME:
        logger.error("BOT_NAME not set in environment variables!")
        sys.exit(1)

    try:
        TgBotBuilder.from_config().register_default_logic(EchoLogic()).start()
    except KeyboardInterrupt:
        logger.info("Bot interrupted by user")
