from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING, List, Optional, Union

from telegram import (
    Bot,
    ForceReply,
    InlineKeyboardMarkup,
    InputFile,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    Update,
)
from telegram.error import TelegramError

if TYPE_CHECKING:
    from tgrouter.router import RouterBot

logger = logging.getLogger(__name__)

ReplyKeyboard = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]
# file_id, URL, path, bytes or an open file, as accepted by PTB
FileInput = Union[str, bytes, InputFile, IO[bytes]]


class AbstractBotLogic(ABC):
    """
    Handler for the updates of one chat.

    Subclasses provide ``chat_id`` and ``process_update``. The send helpers
    all target ``chat_id`` and never raise on Telegram errors: failures are
    logged and ``None`` is returned.
    """

    def __init__(self) -> None:
        self._router: Optional["RouterBot"] = None

    @abstractmethod
    async def process_update(self, update: Update) -> None:
        ...

    @property
    @abstractmethod
    def chat_id(self) -> Optional[int]:
        ...

    def set_bot(self, router: "RouterBot") -> None:
        self._router = router

    @property
    def bot(self) -> Optional[Bot]:
        router = getattr(self, "_router", None)
        return router.bot if router is not None else None

    async def send_message(self, text: str, keyboard: Optional[ReplyKeyboard] = None):
        return await self._execute("send message", "send_message", text=text, reply_markup=keyboard)

    async def send_photo(self, photo: FileInput, caption: Optional[str] = None):
        return await self._execute("send photo", "send_photo", photo=photo, caption=caption)

    async def send_video(self, video: FileInput, caption: Optional[str] = None):
        return await self._execute("send video", "send_video", video=video, caption=caption)

    async def send_audio(self, audio: FileInput, caption: Optional[str] = None):
        return await self._execute("send audio", "send_audio", audio=audio, caption=caption)

    async def send_voice(self, voice: FileInput, caption: Optional[str] = None):
        return await self._execute("send voice", "send_voice", voice=voice, caption=caption)

    async def send_animation(self, animation: FileInput, caption: Optional[str] = None):
        return await self._execute("send animation", "send_animation", animation=animation, caption=caption)

    async def send_document(self, document: FileInput, caption: Optional[str] = None):
        return await self._execute("send document", "send_document", document=document, caption=caption)

    async def send_sticker(self, sticker: FileInput):
        return await self._execute("send sticker", "send_sticker", sticker=sticker)

    async def send_location(self, latitude: float, longitude: float):
        return await self._execute("send location", "send_location", latitude=latitude, longitude=longitude)

    async def send_contact(self, phone_number: str, first_name: str, last_name: Optional[str] = None):
        return await self._execute(
            "send contact",
            "send_contact",
            phone_number=phone_number,
            first_name=first_name,
            last_name=last_name,
        )

    async def send_poll(self, question: str, options: List[str]):
        return await self._execute("send poll", "send_poll", question=question, options=options)

    async def send_chat_action(self, action: str):
        """Send a ChatAction such as ``typing`` or ``upload_photo``."""
        return await self._execute("send chat action", "send_chat_action", action=action)

    async def delete_message(self, message_id: int):
        return await self._execute(
            f"delete message {message_id}", "delete_message", message_id=message_id
        )

    async def edit_message_text(
        self, message_id: int, text: str, keyboard: Optional[ReplyKeyboard] = None
    ):
        return await self._execute(
            f"edit message text {message_id}",
            "edit_message_text",
            message_id=message_id,
            text=text,
            reply_markup=_inline_only(keyboard),
        )

    async def edit_message_caption(
        self, message_id: int, caption: str, keyboard: Optional[ReplyKeyboard] = None
    ):
        return await self._execute(
            f"edit message caption {message_id}",
            "edit_message_caption",
            message_id=message_id,
            caption=caption,
            reply_markup=_inline_only(keyboard),
        )

    async def _execute(self, description: str, method_name: str, /, **kwargs):
        bot = self.bot
        if bot is None:
            logger.error(f"Bot instance is not initialized in {type(self).__name__}. Cannot {description}.")
            return None

        chat_id = self.chat_id
        try:
            return await getattr(bot, method_name)(chat_id=chat_id, **kwargs)
        except TelegramError as e:
            logger.error(f"Failed to {description} in chat {chat_id}: {e}")
            return None


def _inline_only(keyboard: Optional[ReplyKeyboard]) -> Optional[InlineKeyboardMarkup]:
    # Edited messages only accept inline keyboards
    return keyboard if isinstance(keyboard, InlineKeyboardMarkup) else None


class DefaultBotLogic(AbstractBotLogic):
    """
    Fallback handler for chats without their own logic.

    The router assigns the chat id of the current update right before
    calling ``process_update``, so ``chat_id`` is only meaningful inside it.
    """

    def __init__(self) -> None:
        super().__init__()
        self._current_chat_id: Optional[int] = None

    @property
    def chat_id(self) -> Optional[int]:
        return getattr(self, "_current_chat_id", None)

    def set_chat_id(self, chat_id: Optional[int]) -> None:
        self._current_chat_id = chat_id
