"""Centralized logger configuration.

Usage:
    from liftlog.utils.logger import get_logger
    logger = get_logger(__name__)

Entry points call setup_logging() once; library modules only ask for a logger.
"""
import logging
import os

DEFAULT_LEVEL = os.getenv("LIFTLOG_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
