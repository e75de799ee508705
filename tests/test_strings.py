"""Tests for the HTTP character classes."""

import pytest

from httpdigest._strings import (
    MAX_INDEX,
    is_char,
    is_control_char,
    is_linear_whitespace_char,
    is_quoted_text_char,
    is_quoted_text_content,
    is_separator_char,
    is_token,
    is_token_char,
)

ALL_CHARS = [chr(i) for i in range(MAX_INDEX + 1)]


def test_is_char():
    assert all(is_char(c) for c in ALL_CHARS)
    assert not is_char(chr(MAX_INDEX + 1))
    assert not is_char("ab")
    assert not is_char("")


def test_control_char():
    for c in ALL_CHARS:
        assert is_control_char(c) == (ord(c) < 32 or ord(c) == 127)


def test_linear_whitespace_char():
    for c in ALL_CHARS:
        assert is_linear_whitespace_char(c) == (c in " \t")


def test_token_char():
    for c in ALL_CHARS:
        expected = not is_control_char(c) and not is_separator_char(c)
        assert is_token_char(c) == expected
    assert not is_token_char("ä")


def test_quoted_text_char():
    for c in ALL_CHARS:
        expected = (not is_control_char(c) and c != '"') or c in "\r\n\t"
        assert is_quoted_text_char(c) == expected
    assert not is_quoted_text_char(chr(MAX_INDEX + 1))


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        ("", False),
        (" ", False),
        ("bla bla", False),
        ("(bla", False),
        ("bl<a", False),
        ("bla", True),
        ("bla_foo_fasel", True),
        ("0123435678", True),
        ("MD5-sess", True),
    ],
)
def test_is_token(value, expected):
    assert is_token(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        ("", True),
        (" ", True),
        ("bla bla", True),
        ("bl\u0000a", False),
        ('bl"a', False),
        ("bla foo fasel", True),
    ],
)
def test_is_quoted_text_content(value, expected):
    assert is_quoted_text_content(value) is expected
