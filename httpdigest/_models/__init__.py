"""
HTTP Authentication Models Package.

This package contains the auth-param container and the client credential
value objects.
"""

from ._credentials import BasicAuthClientCredentials, DigestAuthClientCredentials
from ._params import AuthParams

__all__ = [
    # Parameters
    "AuthParams",
    # Credentials - Digest
    "DigestAuthClientCredentials",
    # Credentials - Basic
    "BasicAuthClientCredentials",
]
