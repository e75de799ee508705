"""
Authentication parameter container.

Provides an order-preserving mapping of auth-param names to values as they
appear in a ``WWW-Authenticate`` or ``Authorization`` header.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping

from .._strings import is_token
from .._utils import DIGEST_PREFIX


class AuthParams(typing.MutableMapping[str, str]):
    """Ordered auth-param mapping.

    Names are case-sensitive and kept in first-seen order. Assigning an
    existing name replaces its value but keeps its position, so the last
    occurrence of a repeated parameter wins.

    Examples:
        >>> p = AuthParams({"realm": "a", "nonce": "b"})
        >>> p["realm"] = "c"
        >>> list(p.items())
        [('realm', 'c'), ('nonce', 'b')]
    """

    __slots__ = ("_store", "_order")

    def __init__(self, params: Mapping[str, str] | None = None) -> None:
        self._store: dict[str, str] = {}
        # _order tracks first-seen position of each name
        self._order: list[str] = []

        if isinstance(params, AuthParams):
            self._store = params._store.copy()
            self._order = params._order.copy()
        elif isinstance(params, Mapping):
            for key, value in params.items():
                # None marks an absent parameter
                if value is not None:
                    self[key] = value
        elif params is not None:
            raise TypeError("params must be AuthParams or Mapping")

    def __getitem__(self, key: str) -> str:
        return self._store[key]

    def __setitem__(self, key: str, value: str) -> None:
        if key not in self._store:
            self._order.append(key)
        self._store[key] = str(value)

    def __delitem__(self, key: str) -> None:
        del self._store[key]
        self._order.remove(key)

    def __iter__(self) -> typing.Iterator[str]:
        return iter(list(self._order))

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthParams):
            return NotImplemented
        return self._store == other._store and self._order == other._order

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"AuthParams({{{items}}})"

    def copy(self) -> AuthParams:
        """Create a copy of this AuthParams instance."""
        return AuthParams(self)

    def clear(self) -> None:
        self._store.clear()
        self._order.clear()

    def popitem(self) -> tuple[str, str]:
        """Remove and return the most recently added (name, value) pair."""
        if not self._order:
            raise KeyError("AuthParams is empty")
        key = self._order.pop()
        return key, self._store.pop(key)

    def to_header_value(self, scheme: str = DIGEST_PREFIX) -> str:
        """
        Render the parameters as a header value.

        Every value is sent as a quoted-string, which all auth-params accept.

        Args:
            scheme: Authentication scheme prefix

        Returns:
            Header value, e.g. 'Digest realm="atlanta.com", nonce="abc"'

        Raises:
            ValueError: If a parameter name is not a valid token
        """
        parts = []
        for key, value in self.items():
            if not is_token(key):
                raise ValueError(f"Invalid auth-param name: {key!r}")
            parts.append(f'{key}="{value}"')
        return f"{scheme} " + ", ".join(parts)


__all__ = ["AuthParams"]
