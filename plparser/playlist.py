"""Playlist format detection and dispatch.

The first non-blank line of a document decides its format; the matching
parser then scans the whole buffer again from the start.
"""

from json import dumps
from typing import Dict, List, Optional, Type

from .asf import AsfParser
from .asx import AsxParser
from .base import PlaylistParser
from .constants import TYPE_ASF, TYPE_ASX, TYPE_M3U, TYPE_PLS
from .m3u import M3uParser
from .models import PlaylistResponse, Stream
from .pls import PlsParser
from .text import RawPlaylist, fix_string, iter_lines, to_bytes

PARSERS: Dict[str, Type[PlaylistParser]] = {
    TYPE_PLS: PlsParser,
    TYPE_ASF: AsfParser,
    TYPE_ASX: AsxParser,
    TYPE_M3U: M3uParser,
}


def detect_type(first_line: str) -> str:
    """Classify a playlist by its first non-blank line.

    Args:
        first_line: Normalized first non-blank line of the document.

    Returns:
        One of ``pls``, ``asf``, ``asx``, ``m3u``, or an empty string when
        the line matches no known format.
    """
    header = first_line.lower()
    if header == "[playlist]":
        return TYPE_PLS
    if header == "[reference]":
        return TYPE_ASF
    if header.startswith("<asx"):
        return TYPE_ASX
    if header.startswith("http"):
        return TYPE_M3U
    if header.startswith("#extm3u") or header.startswith("#extinf"):
        return TYPE_M3U
    return ""


def first_non_blank_line(raw: RawPlaylist) -> str:
    """Return the first line that is not blank after normalization, or ''."""
    for line in iter_lines(raw):
        line = fix_string(line)
        if line:
            return line
    return ""


class Playlist:
    """Detect a playlist's format and parse it with the matching parser.

    Attributes:
        response: The fetched playlist; only ``response.raw`` is read.
        type: Detected type tag, empty until detected.
        streams: Streams found by the format parser.
        first_line: First non-blank line, kept for diagnostics.
    """

    def __init__(self, response: PlaylistResponse):
        self.response = response
        self.type = ""
        self.streams: List[Stream] = []
        self.first_line = ""

    def parse(self) -> str:
        """Detect the format and parse the playlist.

        Returns:
            The detected type tag, empty if the format is unknown. An
            undetected playlist has no streams.
        """
        self.type = ""
        self.streams = []
        self.first_line = first_non_blank_line(self.response.raw)

        detected = detect_type(self.first_line)
        parser_cls = PARSERS.get(detected)
        if parser_cls is None:
            return self.type

        parser = parser_cls(self.response.raw)
        self.streams = parser.parse()
        self.type = detected
        return self.type

    def is_detected(self) -> bool:
        """Return True once a playlist format was recognized and parsed."""
        return self.type != ""

    def to_dict(self) -> Dict[str, object]:
        """Return the type, first line and streams as a JSON-ready dict."""
        return {
            "type": self.type,
            "first_line": self.first_line,
            "streams": [s.to_dict() for s in self.streams],
        }

    def streams_as_json(self, indent: Optional[int] = 1) -> str:
        """Return the streams serialized as a JSON array."""
        return dumps([s.to_dict() for s in self.streams], indent=indent)


def parse_playlist(raw: RawPlaylist) -> Playlist:
    """Parse raw playlist content and return the populated ``Playlist``."""
    playlist = Playlist(PlaylistResponse(raw=to_bytes(raw)))
    playlist.parse()
    return playlist


__all__ = ["Playlist", "PARSERS", "detect_type", "first_non_blank_line", "parse_playlist"]
