"""Logging helpers for the GUI.

Avoids configuring global logging; the entrypoint does that once.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("liftlog.gui")


def log(message: str, level: int = logging.INFO) -> None:
    logger.log(level, message)
