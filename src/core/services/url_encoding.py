"""Query-value encoding for the target URL.

Not generic RFC 3986 quoting: letters, digits and `-_.~` pass through,
space becomes `+`, every other byte becomes `%XX` (uppercase hex).
"""

from __future__ import annotations

import string
from urllib.parse import unquote_plus

_UNRESERVED = frozenset((string.ascii_letters + string.digits + "-_.~").encode("ascii"))
_SPACE = ord(" ")


def url_encode(text: str) -> str:
    """Percent-encode `text` as a single query-parameter value."""

    out: list[str] = []
    for byte in text.encode("utf-8", errors="surrogateescape"):
        if byte in _UNRESERVED:
            out.append(chr(byte))
        elif byte == _SPACE:
            out.append("+")
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


def url_decode(text: str) -> str:
    """Inverse of `url_encode`."""

    return unquote_plus(text, encoding="utf-8", errors="surrogateescape")


def printable(text: str) -> str:
    """`text` with undecodable argv bytes (surrogate escapes) shown as U+FFFD."""

    return text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")
