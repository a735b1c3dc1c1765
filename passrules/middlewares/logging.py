# passrules/middlewares/logging.py

import logging
import sys
from typing import Optional, TextIO

from passrules.core.config import settings


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None):
    logger = logging.getLogger()
    logger.setLevel(level or settings.LOG_LEVEL)
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(stream or sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.info("✅ Logging system initialized")
