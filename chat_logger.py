"""
chat_logger.py - Centralized logging configuration for greenledger-chat

Sets up Python logging with:
- File handler: <LOG_DIR>/YYYY-MM-DD/chat.txt (daily folders)
- Console handler: stdout
- Configurable log level via LOG_LEVEL env variable
- Redaction of identity numbers (Aadhaar, phone) in user text
"""

import os
import re
import logging
from datetime import datetime
from pathlib import Path

_AADHAAR_RE = re.compile(r"\b\d{4}\s?\d{4}\s?\d{4}\b")
_PHONE_RE = re.compile(r"(?:\+91[\s-]?)?\b[6-9]\d{4}[\s-]?\d{5}\b")


def sanitize_log_string(text: str) -> str:
    """
    Sanitize string for logging to prevent log injection attacks.
    Removes newlines, carriage returns, and other control characters.
    """
    if not text:
        return text
    text = text.replace('\n', ' ').replace('\r', ' ').replace('\t', ' ')
    text = ''.join(char if ord(char) >= 32 else ' ' for char in text)
    return text


def redact_sensitive(text: str) -> str:
    """Mask Aadhaar-like and Indian mobile numbers before they reach a log file."""
    if not text:
        return text
    text = _AADHAAR_RE.sub("[AADHAAR]", text)
    return _PHONE_RE.sub("[PHONE]", text)


def loggable(text: str, limit: int = 100) -> str:
    """Truncate, redact and sanitize user text for a single log line."""
    if text is None:
        return ""
    truncated = text[:limit] + "..." if len(text) > limit else text
    return sanitize_log_string(redact_sensitive(truncated))


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds to the configured datefmt."""

    def formatTime(self, record, datefmt=None):
        if datefmt:
            s = datetime.fromtimestamp(record.created).strftime(datefmt)
            ms = int((record.created - int(record.created)) * 1000)
            return f"{s}.{ms:03d}"
        return super().formatTime(record, datefmt)


def setup_logger(
    name: str = "greenledger_chat",
    log_level: str = "INFO",
    log_dir: str = "logs",
) -> logging.Logger:
    """
    Configure and return a logger with file and console handlers.

    Args:
        name: Logger name
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Root folder for the dated log files

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Prevent duplicate handlers if setup is called multiple times
    if logger.handlers:
        return logger

    formatter = MillisecondFormatter(
        fmt="[%(asctime)s] [%(levelname)s] [%(module)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # ─── File Handler (one folder per day) ───
    today = datetime.now().strftime("%Y-%m-%d")
    day_dir = Path(log_dir) / today
    day_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(day_dir / "chat.txt", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # ─── Console Handler ───
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "greenledger_chat") -> logging.Logger:
    """
    Get the configured logger instance.
    If logger doesn't exist, create it with settings from the environment.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        setup_logger(
            name,
            os.getenv("LOG_LEVEL", "INFO"),
            os.getenv("LOG_DIR", "logs"),
        )
    return logger
