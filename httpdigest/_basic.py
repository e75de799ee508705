"""
HTTP Basic Authentication (RFC 2617 Section 2).

Decodes the credentials of a ``Basic`` authorization header value. As with
the Digest parser, malformed values are logged and result in None.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re

from ._models._credentials import BasicAuthClientCredentials
from ._utils import BASIC_PREFIX, CHARSET, SEPARATOR
from ._utils import logger as default_logger

_WHITESPACE = re.compile(r"\s+")


def get_basic_auth_client_credentials(
    header_value: str | None,
    *,
    logger: logging.Logger | None = None,
) -> BasicAuthClientCredentials | None:
    """
    Get the Basic credentials from an ``Authorization`` header value.

    Whitespace inside the Base64 payload is ignored.

    Args:
        header_value: Header value (e.g., 'Basic QWxhZGRpbjpvcGVuIHNlc2FtZQ==')
        logger: Logger receiving diagnostics (default: package logger)

    Returns:
        BasicAuthClientCredentials, or None if the value is not a valid
        Basic authorization
    """
    log = logger or default_logger

    if header_value is None:
        return None
    value = header_value.strip()
    if not value:
        return None

    elements = _WHITESPACE.split(value, maxsplit=1)
    if len(elements) != 2:
        log.error("String is not Basic Auth")
        return None

    scheme, encoded = elements
    if scheme != BASIC_PREFIX:
        log.error(f"String does not start with '{BASIC_PREFIX}'")
        return None

    try:
        decoded = base64.b64decode(_WHITESPACE.sub("", encoded), validate=True)
    except (binascii.Error, ValueError):
        log.error(f"Illegal Base64 encoded value '{encoded}'")
        return None

    user_pass = decoded.decode(CHARSET)
    username, sep, password = user_pass.partition(SEPARATOR)
    if not username:
        log.error("Basic Auth does not contain a user name")
        return None
    return BasicAuthClientCredentials(username, password if sep else None)


__all__ = ["get_basic_auth_client_credentials"]
