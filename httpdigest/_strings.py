"""
Character classes of the HTTP/1.1 grammar (RFC 2616 Section 2.2).

Only US-ASCII (0..127) is considered; every predicate returns False for
anything outside that range.
"""

from __future__ import annotations

MAX_INDEX = 127

QUOTEDTEXT_BEGIN = '"'
QUOTEDTEXT_END = '"'

# separators = "(" | ")" | "<" | ">" | "@" | "," | ";" | ":" | "\" | <">
#            | "/" | "[" | "]" | "?" | "=" | "{" | "}" | SP | HT
SEPARATOR_CHARS = frozenset('()<>@,;:\\"/[]?={} \t')

# Header folding is resolved before parsing, so CR and LF are not LWS here
LINEAR_WHITESPACE_CHARS = frozenset(" \t")


def _ord(char: str) -> int:
    return ord(char) if len(char) == 1 else -1


def is_char(char: str) -> bool:
    """CHAR = <any US-ASCII character (octets 0 - 127)>"""
    return 0 <= _ord(char) <= MAX_INDEX


def is_control_char(char: str) -> bool:
    """CTL = <any US-ASCII control character (octets 0 - 31) and DEL (127)>"""
    code = _ord(char)
    return 0 <= code < 32 or code == 127


def is_separator_char(char: str) -> bool:
    return char in SEPARATOR_CHARS


def is_linear_whitespace_char(char: str) -> bool:
    return char in LINEAR_WHITESPACE_CHARS


def is_token_char(char: str) -> bool:
    """token = 1*<any CHAR except CTLs or separators>"""
    return is_char(char) and not is_control_char(char) and not is_separator_char(char)


def is_quoted_text_char(char: str) -> bool:
    """qdtext = <any TEXT except <">>, restricted to US-ASCII."""
    if not is_char(char) or char == QUOTEDTEXT_END:
        return False
    if is_control_char(char):
        return char in "\r\n\t"
    return True


def is_token(value: str | None) -> bool:
    """Check if the whole value is a non-empty token."""
    if not value:
        return False
    return all(is_token_char(c) for c in value)


def is_quoted_text_content(value: str | None) -> bool:
    """Check if the value may appear between the quotes of a quoted-string."""
    if value is None:
        return False
    return all(is_quoted_text_char(c) for c in value)
