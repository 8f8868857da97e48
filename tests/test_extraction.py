import os
import sys
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from telegram import CallbackQuery, Chat, InaccessibleMessage, Message, Update, User

from tgrouter.extraction import get_chat_id_from_update
from tests.fakes import fake_update, from_user, message_update, with_chat


USER = User(id=7, first_name="Alice", is_bot=False)
GROUP = Chat(id=-100500, type=Chat.SUPERGROUP)


def test_none_update():
    assert get_chat_id_from_update(None) is None


def test_message_uses_chat_id():
    assert get_chat_id_from_update(message_update(-100123)) == -100123


@pytest.mark.parametrize(
    "field",
    [
        "edited_message",
        "channel_post",
        "edited_channel_post",
        "my_chat_member",
        "chat_member",
        "chat_join_request",
        "message_reaction",
        "message_reaction_count",
        "chat_boost",
        "removed_chat_boost",
    ],
)
def test_chat_bound_variants(field):
    assert get_chat_id_from_update(fake_update(**{field: with_chat(-42)})) == -42


@pytest.mark.parametrize("field", ["inline_query", "chosen_inline_result", "shipping_query", "pre_checkout_query"])
def test_query_variants_use_sender(field):
    assert get_chat_id_from_update(fake_update(**{field: from_user(7)})) == 7


def test_callback_query_prefers_message_chat():
    message = Message(message_id=1, date=datetime.now(timezone.utc), chat=GROUP)
    query = CallbackQuery(id="q1", from_user=USER, chat_instance="ci", message=message, data="x")

    assert get_chat_id_from_update(Update(update_id=1, callback_query=query)) == GROUP.id


def test_callback_query_with_inaccessible_message_keeps_chat():
    message = InaccessibleMessage(chat=GROUP, message_id=1)
    query = CallbackQuery(id="q1", from_user=USER, chat_instance="ci", message=message)

    assert get_chat_id_from_update(Update(update_id=1, callback_query=query)) == GROUP.id


def test_callback_query_without_message_uses_sender():
    query = CallbackQuery(id="q1", from_user=USER, chat_instance="ci", inline_message_id="inline-1")

    assert get_chat_id_from_update(Update(update_id=1, callback_query=query)) == USER.id


def test_poll_answer_prefers_voter_chat():
    answer = SimpleNamespace(voter_chat=SimpleNamespace(id=-100500), user=SimpleNamespace(id=7))

    assert get_chat_id_from_update(fake_update(poll_answer=answer)) == -100500


def test_poll_answer_falls_back_to_user():
    answer = SimpleNamespace(voter_chat=None, user=SimpleNamespace(id=7))

    assert get_chat_id_from_update(fake_update(poll_answer=answer)) == 7


def test_poll_answer_without_voter_yields_none():
    answer = SimpleNamespace(voter_chat=None, user=None)

    assert get_chat_id_from_update(fake_update(poll_answer=answer)) is None


def test_earlier_variant_wins():
    update = fake_update(
        message=with_chat(1),
        callback_query=SimpleNamespace(message=with_chat(2), from_user=SimpleNamespace(id=3)),
        inline_query=from_user(4),
    )

    assert get_chat_id_from_update(update) == 1


def test_unrouted_variants_yield_none():
    assert get_chat_id_from_update(Update(update_id=1)) is None
    assert get_chat_id_from_update(fake_update(poll=SimpleNamespace(id="p1"))) is None
