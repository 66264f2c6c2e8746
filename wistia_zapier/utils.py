from loguru import logger
import sys

from .config import settings


def setup_logger(level: str | None = None) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time}</green> | <level>{level}</level> | <cyan>{message}</cyan>",
        level=level or settings.log_level,
    )
