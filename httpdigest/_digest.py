"""
HTTP Digest Authentication (RFC 2617).

Implements both sides of the Digest challenge-response model:
- Parsing of ``Digest`` header values into ordered auth-params
- Extraction of client credentials from an ``Authorization`` header
- Computation of the request digest for a received challenge
- Verification of received credentials against a known password

Supported algorithms are MD5 and MD5-sess; the only supported qop is
"auth". A missing qop falls back to the RFC 2069 digest.

Error handling differs per side:
- Header values come from the network: failures are logged and None is
  returned, nothing is raised
- Computation arguments come from the caller: invalid combinations raise
  InvalidAuthArgumentError
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import string

from ._exceptions import InvalidAuthArgumentError
from ._models._credentials import DigestAuthClientCredentials
from ._models._params import AuthParams
from ._strings import (
    QUOTEDTEXT_BEGIN,
    QUOTEDTEXT_END,
    is_linear_whitespace_char,
    is_quoted_text_char,
    is_token_char,
)
from ._types import AuthParamsTypes, HttpMethod, MethodTypes
from ._utils import (
    ALGORITHM_MD5,
    ALGORITHM_MD5_SESS,
    CHARSET,
    DEFAULT_ALGORITHM,
    DIGEST_PREFIX,
    NONCE_COUNT_LENGTH,
    PARAM_ALGORITHM,
    PARAM_CNONCE,
    PARAM_NC,
    PARAM_OPAQUE,
    PARAM_QOP,
    QOP_AUTH,
    QOP_AUTH_INT,
    REQUIRED_PARAMS,
    SEPARATOR,
)
from ._utils import logger as default_logger


# ============================================================================
# Header Parameter Parser
# ============================================================================


def _skip_whitespace(value: str, index: int) -> int:
    while index < len(value) and is_linear_whitespace_char(value[index]):
        index += 1
    return index


def _skip_token(value: str, index: int) -> int:
    while index < len(value) and is_token_char(value[index]):
        index += 1
    return index


def _char_at(value: str, index: int) -> str:
    return value[index] if index < len(value) else "<EOF>"


def parse_digest_auth_params(
    header_value: str | None,
    *,
    logger: logging.Logger | None = None,
) -> AuthParams | None:
    """
    Parse the auth-params of a Digest header value.

    Works for both ``WWW-Authenticate`` challenges and ``Authorization``
    credentials.

    Args:
        header_value: Header value (e.g., 'Digest realm="testrealm@host.com", qop=auth')
        logger: Logger receiving parse diagnostics (default: package logger)

    Returns:
        AuthParams in order of appearance, or None if the value cannot be
        parsed as a Digest header value

    Example:
        >>> params = parse_digest_auth_params('Digest realm="atlanta.com", nonce="abc"')
        >>> params["realm"]
        'atlanta.com'
    """
    log = logger or default_logger

    if header_value is None:
        return None
    value = header_value.strip()
    if not value:
        return None

    if not value.startswith(DIGEST_PREFIX):
        log.error(f"String does not start with '{DIGEST_PREFIX}'")
        return None

    length = len(value)
    index = len(DIGEST_PREFIX)
    if index >= length or not is_linear_whitespace_char(value[index]):
        log.error(f"No whitespace after '{DIGEST_PREFIX}'")
        return None
    index += 1

    params = AuthParams()
    while True:
        index = _skip_whitespace(value, index)

        # auth-param name
        start = index
        index = _skip_token(value, index)
        if start == index:
            log.error(
                f"No token found for auth-param name: '{_char_at(value, index)}'"
            )
            return None
        name = value[start:index]

        index = _skip_whitespace(value, index)
        if index >= length or value[index] != "=":
            log.error(f"No separator char '=' found after '{name}'")
            return None
        index += 1

        index = _skip_whitespace(value, index)
        if index >= length:
            log.error(f"Found nothing after '=' of '{name}'")
            return None

        if value[index] == QUOTEDTEXT_BEGIN:
            index += 1
            start = index
            while index < length and is_quoted_text_char(value[index]):
                index += 1
            if index >= length:
                log.error(f"Unexpected EOF in quoted text for '{name}'")
                return None
            if value[index] != QUOTEDTEXT_END:
                log.error(
                    f"Quoted string of '{name}' is not terminated correctly: "
                    f"'{value[index]}'"
                )
                return None
            param_value = value[start:index]
            # Skip closing quote
            index += 1
        else:
            start = index
            index = _skip_token(value, index)
            if start == index:
                log.error(
                    f"No token found for auth-param value of '{name}': "
                    f"'{_char_at(value, index)}'"
                )
                return None
            param_value = value[start:index]

        params[name] = param_value

        index = _skip_whitespace(value, index)
        if index >= length:
            break

        if value[index] != ",":
            log.error(f"Illegal character after auth-param '{name}': '{value[index]}'")
            return None
        index += 1

        if index >= length:
            log.error(f"Found nothing after continuation of auth-param '{name}'")
            return None

    return params


# ============================================================================
# Credential Extractor (receiver side)
# ============================================================================


def get_digest_auth_client_credentials(
    auth: str | AuthParamsTypes | None,
    *,
    logger: logging.Logger | None = None,
) -> DigestAuthClientCredentials | None:
    """
    Get the Digest credentials sent by a client.

    Optional parameters are passed through as received. Whether they are
    consistent (e.g. cnonce present with qop) is decided when the response
    is verified.

    Args:
        auth: Raw ``Authorization`` header value, or already parsed params
            (the mapping is not modified)
        logger: Logger receiving diagnostics (default: package logger)

    Returns:
        DigestAuthClientCredentials, or None if the value is not a complete
        Digest authorization
    """
    log = logger or default_logger

    if auth is None or isinstance(auth, str):
        params = parse_digest_auth_params(auth, logger=log)
        if params is None:
            return None
    else:
        params = AuthParams(auth)

    required: list[str] = []
    for name in REQUIRED_PARAMS:
        value = params.pop(name, None)
        if value is None:
            log.error(f"Digest Auth does not contain '{name}'")
            return None
        if not value:
            log.error(f"Digest Auth contains empty '{name}'")
            return None
        required.append(value)

    username, realm, nonce, digest_uri, response = required
    algorithm = params.pop(PARAM_ALGORITHM, None)
    client_nonce = params.pop(PARAM_CNONCE, None)
    opaque = params.pop(PARAM_OPAQUE, None)
    qop = params.pop(PARAM_QOP, None)
    nonce_count = params.pop(PARAM_NC, None)

    if params:
        log.warning(f"Digest Auth contains unhandled parameters: {dict(params)}")

    return DigestAuthClientCredentials(
        username=username,
        realm=realm,
        nonce=nonce,
        digest_uri=digest_uri,
        response=response,
        algorithm=algorithm,
        client_nonce=client_nonce,
        opaque=opaque,
        qop=qop,
        nonce_count=nonce_count,
    )


# ============================================================================
# Digest Computation (sender side)
# ============================================================================


def get_nonce_count_string(nonce_count: int) -> str | None:
    """
    Format a nonce count as the nc value.

    Args:
        nonce_count: Number of requests sent with the current nonce

    Returns:
        8 lowercase hex digits (e.g. '00000001'), or None if nonce_count <= 0
    """
    if nonce_count <= 0:
        return None
    return f"{nonce_count:0{NONCE_COUNT_LENGTH}x}"


def _md5(value: str) -> str:
    return hashlib.md5(value.encode(CHARSET, errors="replace")).hexdigest()


def _require_text(value: str | None, name: str) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidAuthArgumentError(f"{name} may neither be None nor empty")


def create_digest_auth_client_credentials(
    method: MethodTypes,
    digest_uri: str,
    username: str,
    password: str,
    realm: str,
    server_nonce: str,
    algorithm: str | None = None,
    client_nonce: str | None = None,
    opaque: str | None = None,
    qop: str | None = None,
    nonce_count: int = 0,
) -> DigestAuthClientCredentials:
    """
    Create Digest credentials for a request answering a server challenge.

    Args:
        method: HTTP method exactly as sent on the wire (e.g. 'GET')
        digest_uri: Request-URI of the request line
        username: User name
        password: Password, may be empty but not None
        realm: Realm from the challenge
        server_nonce: Nonce from the challenge
        algorithm: MD5 or MD5-sess from the challenge, None means MD5
        client_nonce: Client nonce, required with qop or MD5-sess
        opaque: Opaque value from the challenge, passed through
        qop: "auth", or None for the RFC 2069 digest
        nonce_count: Requests sent with this nonce including this one,
            must be positive with qop

    Returns:
        DigestAuthClientCredentials carrying the computed response

    Raises:
        InvalidAuthArgumentError: If the arguments are inconsistent or an
            unsupported algorithm or qop is requested

    Example:
        >>> creds = create_digest_auth_client_credentials(
        ...     "GET", "/dir/index.html", "Mufasa", "Circle Of Life",
        ...     "testrealm@host.com", "dcd98b7102dd2f0e8b11d0f600bfb0c093",
        ...     client_nonce="0a4f113b", qop="auth", nonce_count=1,
        ... )
        >>> creds.response
        '6629fae49393a05397450978507c4ef1'
    """
    method_name = method.value if isinstance(method, HttpMethod) else method
    _require_text(method_name, "Method")
    _require_text(digest_uri, "DigestURI")
    _require_text(username, "UserName")
    if password is None:
        raise InvalidAuthArgumentError("Password may not be None")
    _require_text(realm, "Realm")
    _require_text(server_nonce, "ServerNonce")

    if qop is not None and not client_nonce:
        raise InvalidAuthArgumentError("If a QOP is defined, client nonce must be set!")
    if not isinstance(nonce_count, int) or isinstance(nonce_count, bool):
        raise InvalidAuthArgumentError(
            f"Nonce count must be an integer, got {type(nonce_count).__name__}"
        )
    if qop is not None and nonce_count <= 0:
        raise InvalidAuthArgumentError(
            "If a QOP is defined, nonce count must be positive!"
        )

    real_algorithm = DEFAULT_ALGORITHM if algorithm is None else algorithm
    if real_algorithm not in (ALGORITHM_MD5, ALGORITHM_MD5_SESS):
        raise InvalidAuthArgumentError(
            f"Currently only '{ALGORITHM_MD5}' and '{ALGORITHM_MD5_SESS}' "
            f"algorithms are supported!"
        )

    if qop == QOP_AUTH_INT:
        raise InvalidAuthArgumentError(
            f"'{QOP_AUTH_INT}' QOP (integrity protection) is not supported!"
        )
    if qop is not None and qop != QOP_AUTH:
        raise InvalidAuthArgumentError(f"Currently only '{QOP_AUTH}' QOP is supported!")

    # nc is only sent together with qop
    nc_value = get_nonce_count_string(nonce_count) if qop is not None else None

    ha1 = _md5(SEPARATOR.join((username, realm, password)))
    if real_algorithm == ALGORITHM_MD5_SESS:
        if not client_nonce:
            raise InvalidAuthArgumentError("Algorithm requires client nonce!")
        ha1 = _md5(SEPARATOR.join((ha1, server_nonce, client_nonce)))

    ha2 = _md5(SEPARATOR.join((method_name, digest_uri)))

    if qop is None:
        # RFC 2069 compatibility
        response = _md5(SEPARATOR.join((ha1, server_nonce, ha2)))
    else:
        response = _md5(
            SEPARATOR.join((ha1, server_nonce, nc_value, client_nonce, qop, ha2))
        )

    return DigestAuthClientCredentials(
        username=username,
        realm=realm,
        nonce=server_nonce,
        digest_uri=digest_uri,
        response=response,
        algorithm=algorithm,
        client_nonce=client_nonce,
        opaque=opaque,
        qop=qop,
        nonce_count=nc_value,
    )


# ============================================================================
# Response Verification (receiver side)
# ============================================================================


def _parse_nonce_count(nc_value: str) -> int | None:
    if len(nc_value) != NONCE_COUNT_LENGTH:
        return None
    if not all(c in string.hexdigits for c in nc_value):
        return None
    return int(nc_value, 16)


def verify_digest_auth_client_credentials(
    credentials: DigestAuthClientCredentials,
    method: MethodTypes,
    password: str,
    *,
    logger: logging.Logger | None = None,
) -> bool:
    """
    Check the response of received credentials against the known password.

    The caller remains responsible for checking that the nonce was issued
    by itself, that the nonce count was not used before and that
    ``credentials.digest_uri`` matches the request target.

    Args:
        credentials: Credentials extracted from the request
        method: HTTP method of the request
        password: Password of ``credentials.username`` in the realm
        logger: Logger receiving diagnostics (default: package logger)

    Returns:
        True if the response digest matches
    """
    log = logger or default_logger

    nonce_count = 0
    if credentials.qop is not None:
        if credentials.nonce_count is None:
            log.warning("Digest Auth with qop does not contain 'nc'")
            return False
        parsed = _parse_nonce_count(credentials.nonce_count)
        if parsed is None:
            log.warning(f"Digest Auth contains invalid 'nc': '{credentials.nonce_count}'")
            return False
        nonce_count = parsed

    try:
        expected = create_digest_auth_client_credentials(
            method,
            credentials.digest_uri,
            credentials.username,
            password,
            credentials.realm,
            credentials.nonce,
            algorithm=credentials.algorithm,
            client_nonce=credentials.client_nonce,
            opaque=credentials.opaque,
            qop=credentials.qop,
            nonce_count=nonce_count,
        )
    except InvalidAuthArgumentError as e:
        log.warning(f"Digest Auth cannot be verified: {e}")
        return False

    if not hmac.compare_digest(
        expected.response.encode(CHARSET),
        credentials.response.encode(CHARSET, errors="replace"),
    ):
        log.debug(f"Digest Auth response mismatch for user '{credentials.username}'")
        return False
    return True


__all__ = [
    "create_digest_auth_client_credentials",
    "get_digest_auth_client_credentials",
    "get_nonce_count_string",
    "parse_digest_auth_params",
    "verify_digest_auth_client_credentials",
]
