"""Utilities and constants for HTTP authentication headers."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Rich Console for pretty printing
console = Console()

# Get logger for the package
logger = logging.getLogger("httpdigest")


def configure_logging(
    level: int | str = "INFO",
    rich_console: Console | None = None,
) -> logging.Logger:
    """
    Attach a RichHandler to the package logger.

    Nothing is configured on import; applications call this once if they
    want the parser and extractor diagnostics rendered on the console.

    Args:
        level: Logging level for the package logger
        rich_console: Console to render to (default: the package console)

    Returns:
        The configured package logger
    """
    handler = RichHandler(
        console=rich_console or console,
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


# Authentication schemes
DIGEST_PREFIX = "Digest"
BASIC_PREFIX = "Basic"

# Digest algorithms (RFC 2617 Section 3.2.1)
ALGORITHM_MD5 = "MD5"
ALGORITHM_MD5_SESS = "MD5-sess"
DEFAULT_ALGORITHM = ALGORITHM_MD5

# Quality of protection values
QOP_AUTH = "auth"
QOP_AUTH_INT = "auth-int"

SEPARATOR = ":"
CHARSET = "iso-8859-1"

# nc is always sent as 8 lowercase hex digits
NONCE_COUNT_LENGTH = 8

# Parameter names of a Digest Authorization header
PARAM_USERNAME = "username"
PARAM_REALM = "realm"
PARAM_NONCE = "nonce"
PARAM_URI = "uri"
PARAM_RESPONSE = "response"
PARAM_ALGORITHM = "algorithm"
PARAM_CNONCE = "cnonce"
PARAM_OPAQUE = "opaque"
PARAM_QOP = "qop"
PARAM_NC = "nc"

REQUIRED_PARAMS = (
    PARAM_USERNAME,
    PARAM_REALM,
    PARAM_NONCE,
    PARAM_URI,
    PARAM_RESPONSE,
)
