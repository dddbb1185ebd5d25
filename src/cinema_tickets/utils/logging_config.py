"""Structured logger setup shared across the purchase pipeline."""

import logging
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

_LEVELS = {
    "info": logging.INFO,
    "error": logging.ERROR,
}


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger for a purchase module once and reuse it.

    Purchase stages log through ``log_operation``, which puts ``type``,
    ``title``, ``detail`` and ``statusCode`` on each record as top-level JSON
    keys. A rejected purchase can then be traced to its stage by filtering
    on ``type`` without parsing messages. Records are not propagated, so an
    embedding application's root handlers cannot log them twice.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger


def log_operation(logger: logging.Logger, level: str, entry: Dict[str, Any]) -> None:
    """Write a ``{type, title, detail, statusCode?}`` entry at ``info`` or ``error``."""
    if level not in _LEVELS:
        raise ValueError(f"Unsupported log level: {level}")
    logger.log(_LEVELS[level], entry["detail"], extra=dict(entry))
