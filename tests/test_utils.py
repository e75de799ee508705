"""Tests for logging setup."""

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from httpdigest import configure_logging, logger, parse_digest_auth_params


def test_configure_logging_renders_parser_diagnostics():
    output = io.StringIO()
    configured = configure_logging("DEBUG", rich_console=Console(file=output, width=200))
    try:
        assert configured is logger
        assert parse_digest_auth_params("Basic abc") is None
        assert "String does not start with 'Digest'" in output.getvalue()
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_configure_logging_replaces_previous_handler():
    try:
        configure_logging()
        configure_logging()
        assert len([h for h in logger.handlers if isinstance(h, RichHandler)]) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
