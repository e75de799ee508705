"""
Client credential value objects for HTTP authentication.

Both classes are frozen: a new instance is built for every authentication
attempt and handed to the transport layer as is.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass

from .._exceptions import InvalidAuthArgumentError
from .._strings import is_quoted_text_content, is_token
from .._utils import (
    BASIC_PREFIX,
    CHARSET,
    DIGEST_PREFIX,
    PARAM_ALGORITHM,
    PARAM_CNONCE,
    PARAM_NC,
    PARAM_NONCE,
    PARAM_OPAQUE,
    PARAM_QOP,
    PARAM_REALM,
    PARAM_RESPONSE,
    PARAM_URI,
    PARAM_USERNAME,
    SEPARATOR,
)


def _quoted(name: str, value: str) -> str:
    if not is_quoted_text_content(value):
        raise ValueError(f"Value of '{name}' cannot be sent as quoted-string: {value!r}")
    return f'{name}="{value}"'


def _token_or_quoted(name: str, value: str) -> str:
    if is_token(value):
        return f"{name}={value}"
    return _quoted(name, value)


# ============================================================================
# Digest Authentication (RFC 2617)
# ============================================================================


@dataclass(frozen=True)
class DigestAuthClientCredentials:
    """
    Credentials of one Digest authentication exchange.

    Produced either by parsing an incoming ``Authorization`` header
    (receiver side) or by computing the request digest for a received
    challenge (sender side).

    Attributes:
        username: User name in the realm
        realm: Protection space as declared by the server
        nonce: Server-issued nonce
        digest_uri: Request-URI of the request being authenticated
        response: 32 lowercase hex digits proving knowledge of the password
        algorithm: MD5 or MD5-sess, None means MD5
        client_nonce: cnonce, required with qop or MD5-sess
        opaque: Server opaque value, returned unchanged
        qop: Quality of protection applied (only "auth")
        nonce_count: nc as 8 hex digits, present with qop
    """

    username: str
    realm: str
    nonce: str
    digest_uri: str
    response: str
    algorithm: str | None = None
    client_nonce: str | None = None
    opaque: str | None = None
    qop: str | None = None
    nonce_count: str | None = None

    def __post_init__(self) -> None:
        for name in ("username", "realm", "nonce", "digest_uri", "response"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidAuthArgumentError(f"{name} must be a non-empty string")

    @property
    def scheme(self) -> str:
        """Return 'Digest' scheme."""
        return DIGEST_PREFIX

    @property
    def request_value(self) -> str:
        """
        Build the ``Authorization`` header value for these credentials.

        Returns:
            Complete header value
            Example: 'Digest username="Mufasa", realm="testrealm@host.com", ...'

        Raises:
            ValueError: If a value contains a character that cannot be quoted
        """
        parts = [
            _quoted(PARAM_USERNAME, self.username),
            _quoted(PARAM_REALM, self.realm),
            _quoted(PARAM_NONCE, self.nonce),
            _quoted(PARAM_URI, self.digest_uri),
            _quoted(PARAM_RESPONSE, self.response),
        ]
        if self.algorithm is not None:
            parts.append(_token_or_quoted(PARAM_ALGORITHM, self.algorithm))
        if self.client_nonce is not None:
            parts.append(_quoted(PARAM_CNONCE, self.client_nonce))
        if self.opaque is not None:
            parts.append(_quoted(PARAM_OPAQUE, self.opaque))
        if self.qop is not None:
            parts.append(_token_or_quoted(PARAM_QOP, self.qop))
        if self.nonce_count is not None:
            parts.append(_token_or_quoted(PARAM_NC, self.nonce_count))

        return f"{DIGEST_PREFIX} " + ", ".join(parts)


# ============================================================================
# Basic Authentication (RFC 2617 Section 2)
# ============================================================================


@dataclass(frozen=True)
class BasicAuthClientCredentials:
    """
    Credentials for HTTP Basic authentication.

    Attributes:
        username: User name, may not contain ':'
        password: Password, None when only a user name is sent
    """

    username: str
    password: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.username, str) or not self.username:
            raise InvalidAuthArgumentError("username must be a non-empty string")
        if SEPARATOR in self.username:
            raise InvalidAuthArgumentError(
                f"username may not contain '{SEPARATOR}'"
            )

    @property
    def scheme(self) -> str:
        """Return 'Basic' scheme."""
        return BASIC_PREFIX

    @property
    def request_value(self) -> str:
        """Build the ``Authorization`` header value, e.g. 'Basic QWxsYWRpbg=='."""
        user_pass = self.username
        if self.password is not None:
            user_pass += SEPARATOR + self.password
        encoded = base64.b64encode(user_pass.encode(CHARSET, errors="replace"))
        return f"{BASIC_PREFIX} {encoded.decode('ascii')}"


__all__ = [
    "BasicAuthClientCredentials",
    "DigestAuthClientCredentials",
]
