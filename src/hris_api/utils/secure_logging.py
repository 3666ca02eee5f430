"""Logging helpers that keep employee personal data out of production logs.

Domain errors carry employee emails, phone numbers and business keys in
their messages. Outside debug mode those messages pass through
``sanitize_exception_message`` before they reach a log handler.
"""

import logging
import re
from functools import lru_cache
from typing import Any

from hris_api.config import get_settings

MAX_LOGGED_MESSAGE_LENGTH = 200

# Applied in order; URLs go first so their paths are not split up
REDACTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(postgresql|postgresql\+asyncpg|postgres|sqlite|sqlite\+aiosqlite|https?)://\S+"), "[URL]"),
    (re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+"), "[EMAIL]"),
    (re.compile(r"\+\d[\d\s()-]{6,}\d"), "[PHONE]"),
    (re.compile(r"['\"]?(/[a-zA-Z0-9_./\-]+|[A-Z]:\\[^\s'\"]+)['\"]?"), "[PATH]"),
    (re.compile(r"[a-zA-Z0-9_\-]{32,}"), "[TOKEN]"),
]


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    """Check if application is running in debug mode."""
    return get_settings().debug


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def sanitize_exception_message(error: Exception) -> str:
    """Redact personal data and infrastructure details from an error message.

    Args:
        error: The exception to sanitize

    Returns:
        Message with URLs, emails, phone numbers, paths and long tokens
        replaced by placeholders, truncated for production logs
    """
    error_msg = str(error)
    for pattern, placeholder in REDACTIONS:
        error_msg = pattern.sub(placeholder, error_msg)

    if len(error_msg) > MAX_LOGGED_MESSAGE_LENGTH:
        error_msg = error_msg[: MAX_LOGGED_MESSAGE_LENGTH - 3] + "..."
    return error_msg


def _log(
    logger: logging.Logger,
    level: int,
    message: str,
    error: Exception | None,
    exc_info: bool,
    extra: dict[str, Any],
) -> None:
    if is_debug_mode():
        text = f"{message}: {error}" if error else message
        logger.log(level, text, exc_info=exc_info and error is not None, extra=extra)
    elif error:
        logger.log(level, f"{message}: {sanitize_exception_message(error)}")
    else:
        logger.log(level, message)


def log_error(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
    **kwargs: Any,
) -> None:
    """Log an error, with traceback and context only in debug mode.

    Args:
        logger: The logger instance to use
        message: The log message (no employee data)
        error: Optional exception to include
        **kwargs: Additional context, only attached in debug mode
    """
    _log(logger, logging.ERROR, message, error, exc_info=True, extra=kwargs)


def log_warning(
    logger: logging.Logger,
    message: str,
    error: Exception | None = None,
    **kwargs: Any,
) -> None:
    """Log a warning; the error message is sanitized outside debug mode."""
    _log(logger, logging.WARNING, message, error, exc_info=False, extra=kwargs)
