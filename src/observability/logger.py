import os
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None):
    """
    Configure loguru: a stderr sink always, plus a rotating file sink
    when log_dir is given (production).
    """
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            os.path.join(log_dir, "server.log"),
            rotation="10 MB",
            retention="7 days",
            format=FILE_FORMAT,
            level=level.upper(),
        )

    return logger
