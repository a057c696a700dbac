"""Central logging configuration for the form editor."""
from __future__ import annotations

import logging
from typing import Optional, Union

_DEFAULT_LEVEL = logging.INFO
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format=_FORMAT)
    return logger


def configure_logging(level: Union[int, str] = _DEFAULT_LEVEL) -> None:
    """Apply the app-wide level, replacing any earlier basicConfig."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = _DEFAULT_LEVEL
    logging.basicConfig(level=level, format=_FORMAT, force=True)
