"""
Type definitions and aliases for HTTP authentication handling.

This module centralizes the type definitions shared by the parser, the
credential models and the digest computation.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping
from enum import Enum

if typing.TYPE_CHECKING:
    from ._models._params import AuthParams


# =============================================================================
# Parameter Types
# =============================================================================

AuthParamsTypes = typing.Union[
    "AuthParams",
    Mapping[str, str],
]


# =============================================================================
# HTTP Methods
# =============================================================================


class HttpMethod(Enum):
    """HTTP request methods (RFC 7231, RFC 5789)."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value


MethodTypes = typing.Union[HttpMethod, str]
