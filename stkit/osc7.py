"""Parsing of OSC 7 working-directory reports and percent-decoding of URLs."""

from __future__ import annotations

import socket

__all__ = ["Osc7Error", "hex_value", "url_decode", "parse_cwd", "PATH_MAX"]

PATH_MAX = 4096


class Osc7Error(ValueError):
    """An OSC 7 URI that cannot be used as the working directory."""


def hex_value(c: str) -> int:
    """Value of one hexadecimal digit, or -1 if ``c`` is not one."""
    if len(c) != 1:
        return -1
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "a" <= c <= "f":
        return ord(c) - ord("a") + 10
    if "A" <= c <= "F":
        return ord(c) - ord("A") + 10
    return -1


def url_decode(url: str, limit: int | None = None) -> str:
    """Decode ``%XX`` escapes in ``url``; malformed escapes are kept as is.

    When ``limit`` is given and the decoded text reaches that many bytes,
    Osc7Error is raised.
    """
    raw = url.encode("utf-8", "surrogateescape")
    out = bytearray()
    i = 0
    while i < len(raw):
        byte = raw[i]
        if byte == 0x25 and i + 2 < len(raw) + 0 and i + 2 <= len(raw) - 1:
            h1 = hex_value(chr(raw[i + 1]))
            h2 = hex_value(chr(raw[i + 2]))
            if h1 >= 0 and h2 >= 0:
                out.append((h1 << 4) | h2)
                i += 3
                if limit is not None and len(out) >= limit:
                    raise Osc7Error("uri is too long")
                continue
        out.append(byte)
        i += 1
        if limit is not None and len(out) >= limit:
            raise Osc7Error("uri is too long")
    return out.decode("utf-8", "surrogateescape")


def _local_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


def parse_cwd(uri: str, hostname: str | None = None) -> str:
    """Working directory reported by an OSC 7 ``file://`` URI.

    Returns an empty string when the directory is to be reset. Raises
    Osc7Error for unsupported, malformed or non-local URIs.
    """
    if not uri:
        return ""
    decoded = url_decode(uri, PATH_MAX)
    if len(decoded) < 5 or not decoded.startswith("file:"):
        raise Osc7Error(f"scheme is not supported: '{uri}'")
    if len(decoded) < 7 or decoded[5:7] != "//":
        raise Osc7Error(f"invalid uri: '{uri}'")
    auth = decoded[7:]
    slash = auth.find("/")
    if slash < 0:
        return ""
    authority = auth[:slash]
    at = authority.find("@")
    host = authority[at + 1:] if at >= 0 else authority
    colon = host.find(":")
    if colon >= 0:
        host = host[:colon]
    if hostname is None:
        hostname = _local_hostname()
    if host and host != "localhost" and host != hostname:
        raise Osc7Error(f"host is not local: '{host}'")
    return auth[slash:]