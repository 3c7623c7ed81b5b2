"""Loguru-backed loggers bound to a component name."""

import sys
from typing import Optional

from loguru import logger as _loguru_logger

from core.config import LOG_LEVEL

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)

_loguru_logger.remove()
_loguru_logger.configure(extra={"logger_name": "schema_studio"})
_loguru_logger.add(sys.stderr, level=LOG_LEVEL, format=LOG_FORMAT)

_loggers: dict = {}


def get_logger(name: Optional[str] = None):
    if name is None:
        name = "schema_studio"
    if name not in _loggers:
        _loggers[name] = _loguru_logger.bind(logger_name=name)
    return _loggers[name]
