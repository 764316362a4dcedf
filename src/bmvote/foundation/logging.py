from __future__ import annotations

import logging
from typing import TextIO

LOGGER_NAME = "bmvote"


def configure_bmvote_logging(*, level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """
    Attach a plain console handler to the "bmvote" logger.

    Only the CLI and demo entry points call this; library modules log through
    ``logging.getLogger(__name__)`` and never call ``logging.basicConfig()``.
    If the root logger or the "bmvote" logger already has handlers, nothing is
    attached and only the level is adjusted.
    """
    root = logging.getLogger()
    logger = logging.getLogger(LOGGER_NAME)

    if root.handlers or logger.handlers:
        logger.setLevel(level)
        return logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "configure_bmvote_logging"]
