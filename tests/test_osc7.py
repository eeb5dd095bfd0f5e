from urllib.parse import quote

import pytest

from stkit.osc7 import Osc7Error, hex_value, parse_cwd, url_decode


@pytest.mark.parametrize("c, value", [("0", 0), ("9", 9), ("a", 10), ("F", 15)])
def test_hex_value_digits(c, value):
    assert hex_value(c) == value


@pytest.mark.parametrize("c", ["g", "%", "", "ab"])
def test_hex_value_rejects(c):
    assert hex_value(c) == -1


@pytest.mark.parametrize("text", ["plain", "with space", "ünïcødé/path", "100%"])
def test_url_decode_round_trip(text):
    assert url_decode(quote(text)) == text


def test_url_decode_keeps_malformed_escape():
    assert url_decode("%zz%4") == "%zz%4"


def test_url_decode_limit():
    with pytest.raises(Osc7Error):
        url_decode("abc", limit=3)
    assert url_decode("abc", limit=4) == "abc"


def test_parse_cwd_empty_resets():
    assert parse_cwd("") == ""


def test_parse_cwd_localhost():
    assert parse_cwd("file://localhost/tmp/x") == "/tmp/x"


def test_parse_cwd_decodes_path():
    assert parse_cwd("file:///home/a%20b") == "/home/a b"


def test_parse_cwd_own_host_with_user_and_port():
    assert parse_cwd("file://user@myhost:22/srv", hostname="myhost") == "/srv"


def test_parse_cwd_missing_path():
    assert parse_cwd("file://localhost") == ""


def test_parse_cwd_foreign_host():
    with pytest.raises(Osc7Error):
        parse_cwd("file://other/p", hostname="myhost")


@pytest.mark.parametrize("uri", ["http://localhost/", "file:/x", "fil"])
def test_parse_cwd_invalid(uri):
    with pytest.raises(Osc7Error):
        parse_cwd(uri, hostname="myhost")