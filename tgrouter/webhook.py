from __future__ import annotations

import logging
from typing import Any, Dict

import httpx

logger = logging.getLogger(__name__)

API_URL = "https://api.telegram.org/bot{token}/deleteWebhook"


def delete_webhook(token: str, drop_pending_updates: bool = True, timeout: float = 10.0) -> Dict[str, Any]:
    """
    Remove any webhook registered for the bot.

    Telegram refuses getUpdates while a webhook is set, so run this when
    polling fails with a conflict error.
    """
    response = httpx.get(
        API_URL.format(token=token),
        params={"drop_pending_updates": str(drop_pending_updates).lower()},
        timeout=timeout,
    )
    result = response.json()
    if result.get("ok"):
        logger.info("Webhook cleared")
    else:
        logger.error(f"Failed to clear webhook: {result.get('description', result)}")
    return result
