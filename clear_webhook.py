"""
Helper script to clear any existing Telegram webhook
Run this if polling fails with a conflict error from a webhook or another instance
"""
import sys

from tgrouter import config
from tgrouter.logging import configure_logging
from tgrouter.webhook import delete_webhook

logger = configure_logging(config.LOG_LEVEL)

if not config.BOT_TOKEN:
    logger.error("BOT_TOKEN not found in environment variables")
    sys.exit(1)

result = delete_webhook(config.BOT_TOKEN)
sys.exit(0 if result.get("ok") else 1)
