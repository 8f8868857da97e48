import logging
from typing import Union


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )
    # PTB polls through httpx and every getUpdates call is logged at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logging.getLogger("tgrouter")
