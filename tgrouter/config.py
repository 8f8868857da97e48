"""
Configuration for the router bot.
Values come from environment variables, a local .env file is loaded first.
"""
import os

from dotenv import load_dotenv
from telegram import Update

load_dotenv()

# Bot Configuration
BOT_TOKEN = os.getenv("BOT_TOKEN")
BOT_NAME = os.getenv("BOT_NAME")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Discard updates queued while the bot was offline
DROP_PENDING_UPDATES = os.getenv("DROP_PENDING_UPDATES", "false").lower() == "true"

# Chat member, reaction and boost updates are only delivered when asked for
ALLOWED_UPDATES = Update.ALL_TYPES
