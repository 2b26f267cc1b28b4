"""Logging setup. Read-only config; no business logic."""

import logging
import sys
from typing import Any

from docembed.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def configure_logging(level_name: str | None = None) -> None:
    """Install a single stdout handler on the root logger. Level defaults to settings.log_level."""
    name = (level_name or get_settings().log_level).upper()
    level = getattr(logging, name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # SDK clients are chatty at INFO
    for noisy in ("urllib3", "httpx", "openai", "botocore", "sentence_transformers"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def log_extra(extra: dict[str, Any]) -> dict[str, Any]:
    """Build kwargs for logger calls carrying structured fields: ``logger.info(msg, **log_extra({...}))``."""
    return {"extra": extra}
