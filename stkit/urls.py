"""Detection of URLs in terminal lines and helpers for opening or copying them."""

from __future__ import annotations

import socket
import subprocess
from dataclasses import dataclass
from typing import Sequence

from stkit.osc7 import url_decode

__all__ = [
    "Cell",
    "UrlMatch",
    "MAX_URL",
    "VALID_URL_CHARS",
    "parse_url_protocols",
    "is_protocol_supported",
    "find_end_of_wrapped_line",
    "detect_url",
    "local_file_url",
    "copy_text_for_url",
    "open_url",
]

VALID_URL_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789-._~:/?#@!$&'*+,;=%()[]"
)
MAX_URL = 2085  # maximum url length including the terminator
_TRAILING = ",.;:?!'(["


@dataclass
class Cell:
    """One terminal cell as far as URL detection cares."""

    char: str = " "
    wrap: bool = False
    set: bool = False
    dummy: bool = False
    hyperlink: str | None = None


@dataclass(frozen=True)
class UrlMatch:
    """A detected URL and the cells it spans, first and last inclusive."""

    url: str
    x1: int
    y1: int
    x2: int
    y2: int


def _is_url_char(c: str) -> bool:
    return len(c) == 1 and c in VALID_URL_CHARS


def _hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


def parse_url_protocols(spec: str) -> tuple[str, ...]:
    """Split a comma-separated protocol list, trimming blanks and empty items."""
    return tuple(p for p in (item.strip(" \t") for item in spec.split(",")) if p)


def is_protocol_supported(url: str, protocols: Sequence[str]) -> bool:
    """True when ``url`` begins with one of ``protocols``."""
    return any(url.startswith(p) for p in protocols)


def find_end_of_wrapped_line(line: Sequence[Cell]) -> int:
    """Column of the wrap mark of a wrapped line, or -1 if it does not wrap."""
    for i in range(len(line) - 1, -1, -1):
        if line[i].wrap:
            return i
        if line[i].set:
            return -1
    return -1


def _hyperlink_match(lines, col, row, minrow, maxrow) -> UrlMatch:
    url = lines[row][col].hyperlink
    cells = [
        (y, x)
        for y in range(minrow, maxrow + 1)
        for x, cell in enumerate(lines[y])
        if cell.hyperlink == url
    ]
    (y1, x1), (y2, x2) = cells[0], cells[-1]
    return UrlMatch(url, x1, y1, x2, y2)


def detect_url(lines, col, row, cols, protocols, minrow=0, maxrow=None) -> UrlMatch | None:
    """URL under the cell at (col, row), following wrapped lines both ways.

    ``lines`` is indexable by row numbers from ``minrow`` to ``maxrow``.
    Returns None when no URL with a supported protocol covers the cell.
    """
    if maxrow is None:
        maxrow = len(lines) - 1
    line = lines[row]
    cell = line[col]
    if cell.hyperlink or (cell.dummy and col > 0 and line[col - 1].hyperlink):
        return _hyperlink_match(lines, col - 1 if cell.dummy else col, row, minrow, maxrow)
    if not _is_url_char(cell.char):
        return None

    back: list[str] = []
    x, y = col, row
    start_x, start_y = col, row
    while True:
        start_x, start_y = x, y
        back.append(line[x].char)
        x -= 1
        if x < 0:
            y -= 1
            if y < minrow:
                break
            x = find_end_of_wrapped_line(lines[y])
            if x < 0:
                break
            line = lines[y]
        if not (_is_url_char(line[x].char) and len(back) < MAX_URL + 1):
            break

    forward: list[str] = []
    line = lines[row]
    x, y = col, row
    while True:
        forward.append(line[x].char)
        wrapped = line[x].wrap
        x += 1
        if wrapped:
            y += 1
            if y > maxrow:
                break
            x = 0
            line = lines[y]
        if not (x < cols and _is_url_char(line[x].char) and len(forward) < MAX_URL - 1):
            break

    text = "".join(reversed(back)) + "".join(forward[1:])
    pivot = len(back) - 1

    for b in range(pivot, -1, -1):
        if is_protocol_supported(text[b:], protocols):
            break
    else:
        return None

    # extra closing parentheses or brackets are not part of the url
    parens = brackets = 0
    e = len(text)
    for k in range(b + 1, len(text)):
        c = text[k]
        if c == "(":
            parens += 1
        elif c == "[":
            brackets += 1
        elif c == ")":
            parens -= 1
            if parens < 0:
                e = k
                break
        elif c == "]":
            brackets -= 1
            if brackets < 0:
                e = k
                break

    while e > b and text[e - 1] in _TRAILING:
        e -= 1
    if e - b > MAX_URL - 1:
        e = b + MAX_URL - 1
    if e <= pivot:
        return None

    x1 = start_x + b
    y1 = start_y + x1 // cols
    x1 %= cols
    x2 = x1 + e - b - 1
    y2 = y1 + x2 // cols
    x2 %= cols
    return UrlMatch(text[b:e], x1, y1, x2, y2)


def local_file_url(url: str, hostname: str | None = None) -> str | None:
    """``url`` with a local host name removed from ``file://`` URLs.

    Returns None for file URLs that point to another machine; other URLs
    come back unchanged.
    """
    if not url.startswith("file://") or url[7:8] == "/":
        return url
    if hostname is None:
        hostname = _hostname()
    rest = url[7:]
    if not rest.startswith("localhost/") and not rest.startswith(hostname + "/"):
        return None
    slash = rest.find("/")
    if slash < 0:
        return None
    return "file://" + rest[slash:]


def copy_text_for_url(url: str, hostname: str | None = None) -> str:
    """Text put on the clipboard for ``url``: local file URLs become paths."""
    if url.startswith("file:/"):
        path = url
        if url[6:7] != "/":
            path = url[5:]
        elif url[7:8] == "/":
            path = url[7:]
        elif url[7:].startswith("localhost/"):
            path = url[16:]
        else:
            if hostname is None:
                hostname = _hostname()
            n = len(hostname)
            if n > 0 and url[7:7 + n] == hostname and url[7 + n:8 + n] == "/":
                path = url[7 + n:]
        return url_decode(path) if path != url else url
    if url.startswith("vscode://file/"):
        return url_decode(url[13:])
    return url


def open_url(url, opener, protocols, hostname=None) -> str | None:
    """Start ``opener`` on ``url`` in a new session.

    Returns the argument passed to the opener, or None for a file URL of
    another machine. Raises ValueError for an unsupported protocol.
    """
    if not is_protocol_supported(url, protocols):
        raise ValueError(f"protocol is not supported: '{url}'")
    target = local_file_url(url, hostname)
    if target is None:
        return None
    subprocess.Popen(
        [opener, target],
        start_new_session=True,
        stdin=subprocess.DEVNULL,
    )
    return target