from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from telegram import Update


def _chat_id(payload: Any) -> Optional[int]:
    chat = getattr(payload, "chat", None)
    return chat.id if chat is not None else None


def _sender_id(payload: Any) -> Optional[int]:
    user = getattr(payload, "from_user", None)
    return user.id if user is not None else None


def _callback_query_id(query: Any) -> Optional[int]:
    # Inaccessible messages still carry their chat; inline-mode callbacks carry no message
    if query.message is not None:
        return _chat_id(query.message)
    return _sender_id(query)


def _poll_answer_id(answer: Any) -> Optional[int]:
    if answer.voter_chat is not None:
        return answer.voter_chat.id
    return answer.user.id if answer.user is not None else None


# Checked in order, the first populated field decides the chat
CHAT_ID_EXTRACTORS: Tuple[Tuple[str, Callable[[Any], Optional[int]]], ...] = (
    ("message", _chat_id),
    ("edited_message", _chat_id),
    ("channel_post", _chat_id),
    ("edited_channel_post", _chat_id),
    ("callback_query", _callback_query_id),
    ("my_chat_member", _chat_id),
    ("chat_member", _chat_id),
    ("chat_join_request", _chat_id),
    ("message_reaction", _chat_id),
    ("message_reaction_count", _chat_id),
    ("chat_boost", _chat_id),
    ("removed_chat_boost", _chat_id),
    ("inline_query", _sender_id),
    ("chosen_inline_result", _sender_id),
    ("shipping_query", _sender_id),
    ("pre_checkout_query", _sender_id),
    ("poll_answer", _poll_answer_id),
)


def get_chat_id_from_update(update: Optional[Update]) -> Optional[int]:
    """
    Return the chat id an update belongs to, or None if it has none.

    Query-style updates without a chat (inline queries, payments) resolve to
    the id of the user who sent them, which equals their private chat id.
    """
    if update is None:
        return None
    for field, extract in CHAT_ID_EXTRACTORS:
        payload = getattr(update, field, None)
        if payload is not None:
            return extract(payload)
    return None
