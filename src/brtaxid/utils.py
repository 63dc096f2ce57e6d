"""Utility helpers for logging and filename safety.

Security:
    - We never log raw CPF/CNPJ numbers.
    - Filenames are sanitized before writing reports.
"""

from __future__ import annotations

import logging
import os
import re

SAFE_NAME_RE = re.compile(r"[^A-Za-z0-9_.-]+")
LOG_LEVEL_ENV = "BRTAXID_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger that avoids duplicate handlers."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    return logger


def safe_filename(name: str) -> str:
    """Return a filesystem-friendly filename with dangerous characters removed."""
    cleaned = SAFE_NAME_RE.sub("_", name)
    return cleaned.strip("_") or "upload"
