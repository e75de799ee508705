"""Tests for parsing of Digest header values."""

import logging

import pytest

from httpdigest import AuthParams, parse_digest_auth_params
from tests.rfc2617 import RFC_AUTHORIZATION


def test_parse_rfc_authorization():
    params = parse_digest_auth_params(RFC_AUTHORIZATION)
    assert isinstance(params, AuthParams)
    assert list(params.keys()) == [
        "username",
        "realm",
        "nonce",
        "uri",
        "qop",
        "nc",
        "cnonce",
        "response",
        "opaque",
    ]
    assert params["username"] == "Mufasa"
    assert params["uri"] == "/dir/index.html"
    assert params["qop"] == "auth"
    assert params["nc"] == "00000001"


def test_parse_challenge():
    params = parse_digest_auth_params(
        'Digest realm="testrealm@host.com", qop="auth,auth-int", '
        'nonce="dcd98b7102dd2f0e8b11d0f600bfb0c093", '
        'opaque="5ccc069c403ebaf9f0171e9517f40e41"'
    )
    assert params is not None
    assert params["qop"] == "auth,auth-int"
    assert len(params) == 4


@pytest.mark.parametrize(
    "pairs",
    [
        [("a", "b")],
        [("realm", "x y z"), ("nonce", "0123"), ("opaque", "")],
        [("x-ext", "a,b=c;d"), ("Name_2", "tab\there"), ("~!#$%&'*+-.^_`|", "(v)")],
    ],
)
def test_parse_preserves_quoted_pairs_in_order(pairs):
    header = "Digest " + ", ".join(f'{name}="{value}"' for name, value in pairs)
    params = parse_digest_auth_params(header)
    assert params is not None
    assert list(params.items()) == pairs


def test_parse_token_values():
    params = parse_digest_auth_params("Digest algorithm=MD5-sess,qop=auth,nc=0000000a")
    assert params is not None
    assert dict(params) == {"algorithm": "MD5-sess", "qop": "auth", "nc": "0000000a"}


def test_parse_whitespace_handling():
    params = parse_digest_auth_params(
        '  Digest\t \trealm \t= \t"r" \t,\t nonce= n1 ,qop =auth  '
    )
    assert params is not None
    assert list(params.items()) == [("realm", "r"), ("nonce", "n1"), ("qop", "auth")]


def test_parse_repeated_name_last_wins_first_position():
    params = parse_digest_auth_params('Digest a="1", b="2", a="3"')
    assert params is not None
    assert list(params.items()) == [("a", "3"), ("b", "2")]


def test_parse_names_are_case_sensitive():
    params = parse_digest_auth_params('Digest Realm="a", realm="b"')
    assert params is not None
    assert dict(params) == {"Realm": "a", "realm": "b"}


@pytest.mark.parametrize("header", [None, "", "   ", "\t"])
def test_parse_absent_or_blank(header):
    assert parse_digest_auth_params(header) is None


@pytest.mark.parametrize(
    "header",
    [
        "Digest",
        "Digest   ",
        'Basic realm="a"',
        'digest realm="a"',
        'Digestrealm="a"',
        'Digest\nrealm="a"',
        'Digest realm="a',
        'Digest realm="a\x00b"',
        'Digest realm "a"',
        "Digest realm",
        "Digest realm=",
        'Digest realm="a",',
        'Digest realm="a" ,',
        'Digest realm="a" nonce="b"',
        'Digest realm="a";nonce="b"',
        'Digest realm="a", ,nonce="b"',
        'Digest ="a"',
        "Digest realm=,",
        'Digest realm=@host',
        'Digest realm="a",\nnonce="b"',
    ],
)
def test_parse_malformed(header):
    assert parse_digest_auth_params(header) is None


def test_parse_logs_failed_rule(diagnostics, caplog):
    assert parse_digest_auth_params('Digest realm="abc', logger=diagnostics) is None
    assert [r.levelno for r in caplog.records] == [logging.ERROR]
    assert "Unexpected EOF in quoted text for 'realm'" in caplog.text


def test_parse_logs_illegal_separator(diagnostics, caplog):
    assert parse_digest_auth_params("Digest a=b; c=d", logger=diagnostics) is None
    assert "Illegal character after auth-param 'a': ';'" in caplog.text


def test_parse_quoted_text_allows_cr_lf_inside_quotes():
    params = parse_digest_auth_params('Digest realm="a\r\nb"')
    assert params is not None
    assert params["realm"] == "a\r\nb"


def test_parse_does_not_unescape_backslash():
    assert parse_digest_auth_params('Digest realm="a\\b"')["realm"] == "a\\b"
    assert parse_digest_auth_params('Digest realm="a\\"b"') is None
