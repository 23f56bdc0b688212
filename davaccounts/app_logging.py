"""Logging setup for applications and scripts using this package."""

from typing import Optional
import logging

from pythonjsonlogger.json import JsonFormatter

FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'

_handler: Optional[logging.Handler] = None


def setup_logger(level: str = 'INFO', json: bool = False) -> logging.Handler:
    """
    Attach a stream handler to the root logger.

    The handler is installed once per process; later calls only update its
    format and the level.
    """
    global _handler
    if json:
        formatter: logging.Formatter = JsonFormatter(
            FORMAT,
            rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
        )
    else:
        formatter = logging.Formatter(FORMAT)

    logger = logging.getLogger()
    if _handler is None or _handler not in logger.handlers:
        _handler = logging.StreamHandler()
        logger.addHandler(_handler)
    _handler.setFormatter(formatter)
    logger.setLevel(level)
    return _handler
