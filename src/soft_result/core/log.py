import sys
from typing import Optional

from loguru import logger

from soft_result.core.settings import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    logger.remove()

    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>",
        level=(level or get_settings().log_level).upper(),
        backtrace=True,
        diagnose=True,
    )
