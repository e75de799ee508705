"""httpdigest - HTTP Digest and Basic authentication header handling for Python."""

from __future__ import annotations

# Digest authentication
from ._digest import (
    create_digest_auth_client_credentials,
    get_digest_auth_client_credentials,
    get_nonce_count_string,
    parse_digest_auth_params,
    verify_digest_auth_client_credentials,
)

# Basic authentication
from ._basic import get_basic_auth_client_credentials

# Models
from ._models import (
    AuthParams,
    BasicAuthClientCredentials,
    DigestAuthClientCredentials,
)

# Exceptions
from ._exceptions import AuthError, InvalidAuthArgumentError

# Types
from ._types import AuthParamsTypes, HttpMethod, MethodTypes

# Utilities
from ._utils import (
    ALGORITHM_MD5,
    ALGORITHM_MD5_SESS,
    BASIC_PREFIX,
    DEFAULT_ALGORITHM,
    DIGEST_PREFIX,
    QOP_AUTH,
    QOP_AUTH_INT,
    configure_logging,
    console,
    logger,
)

__version__ = "0.1.0"

__all__ = [
    # Digest - Parser
    "parse_digest_auth_params",
    # Digest - Receiver side
    "get_digest_auth_client_credentials",
    "verify_digest_auth_client_credentials",
    # Digest - Sender side
    "create_digest_auth_client_credentials",
    "get_nonce_count_string",
    # Basic
    "get_basic_auth_client_credentials",
    # Models
    "AuthParams",
    "DigestAuthClientCredentials",
    "BasicAuthClientCredentials",
    # Exceptions
    "AuthError",
    "InvalidAuthArgumentError",
    # Types
    "AuthParamsTypes",
    "HttpMethod",
    "MethodTypes",
    # Utilities - Console & Logging
    "configure_logging",
    "console",
    "logger",
    # Constants
    "ALGORITHM_MD5",
    "ALGORITHM_MD5_SESS",
    "BASIC_PREFIX",
    "DEFAULT_ALGORITHM",
    "DIGEST_PREFIX",
    "QOP_AUTH",
    "QOP_AUTH_INT",
    # Metadata
    "__version__",
]
