from tgrouter.builder import TgBotBuilder
from tgrouter.extraction import get_chat_id_from_update
from tgrouter.logic import AbstractBotLogic, DefaultBotLogic
from tgrouter.router import RouterBot

__all__ = [
    "AbstractBotLogic",
    "DefaultBotLogic",
    "RouterBot",
    "TgBotBuilder",
    "get_chat_id_from_update",
]
