"""Text helpers shared by the playlist parsers.

Provides the string normalization applied to every extracted value, the
stream URL prefix test, and a forward-only line scanner over raw bytes.
"""

from io import BytesIO
from typing import Iterator, Union

RawPlaylist = Union[bytes, bytearray, str]


def fix_string(s: str) -> str:
    """Remove CRLF, LF and CR sequences and trim surrounding whitespace."""
    v = s.replace("\r\n", "").replace("\n", "").replace("\r", "")
    return v.strip()


def is_url(text: str) -> bool:
    """Return True if text looks like a stream URL (``http`` or ``mms`` prefix)."""
    return bool(text) and (text.startswith("http") or text.startswith("mms"))


def to_bytes(raw: RawPlaylist) -> bytes:
    """Return the playlist body as bytes, encoding text as UTF-8."""
    if isinstance(raw, str):
        return raw.encode("utf-8")
    return bytes(raw)


def decode(raw: RawPlaylist) -> str:
    """Return the whole buffer as text, replacing invalid UTF-8 sequences."""
    if isinstance(raw, str):
        return raw
    return bytes(raw).decode("utf-8", errors="replace")


def iter_lines(raw: RawPlaylist) -> Iterator[str]:
    """Yield lines of ``raw`` one at a time, split on LF.

    Lines keep their terminator. The last line is yielded even when the
    buffer does not end with LF. The generator is single-pass; create a new
    one for every scan.
    """
    reader = BytesIO(to_bytes(raw))
    while True:
        line = reader.readline()
        if not line:
            return
        yield line.decode("utf-8", errors="replace")
