"""Data models shared by the playlist parsers and the fetcher."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union
from urllib.parse import urlparse

from .constants import BINARY_CONTENT_TYPES, FT_HTML, ORIGIN_FILE


@dataclass
class Stream:
    """One playable stream reference found in a playlist.

    Attributes:
        index: 1-based position of the stream in its source document.
        title: Stream or station title.
        description: Free-text description (ASX ``<abstract>``).
        logo: Logo image URL.
        author: Author of the stream.
        copyright: Copyright notice.
        more_info: URL with more information about the stream.
        url: The playable stream URL.
        raw: Unparsed document fragment the stream was derived from.
        base: Pending base href, resolved before the stream is emitted.
    """

    index: int = 0
    title: str = ""
    description: str = ""
    logo: str = ""
    author: str = ""
    copyright: str = ""
    more_info: str = ""
    url: str = ""

    raw: str = field(default="", repr=False, compare=False)
    base: str = field(default="", repr=False, compare=False)

    def copy(self) -> "Stream":
        """Return a copy carrying the public fields only.

        ``raw`` and ``base`` are working state and are never copied.
        """
        return Stream(
            index=self.index,
            title=self.title,
            description=self.description,
            logo=self.logo,
            author=self.author,
            copyright=self.copyright,
            more_info=self.more_info,
            url=self.url,
        )

    def to_dict(self) -> Dict[str, Union[int, str]]:
        """Return the flat serialization record for this stream."""
        return {
            "index": self.index,
            "title": self.title,
            "descr": self.description,
            "logo": self.logo,
            "author": self.author,
            "copyright": self.copyright,
            "info": self.more_info,
            "url": self.url,
        }


@dataclass
class PlaylistResponse:
    """Raw playlist content handed to the parsers.

    Attributes:
        raw: Playlist bytes. For binary responses only the first
            ``PLAYLIST_READ_LIMIT`` bytes are kept.
        url: URL of the playlist, or an absolute path for local files.
        status_code: HTTP-ish status of the fetch.
        content_type: Content type declared by the server.
        content_type_detected: Content type sniffed from ``raw``.
        origin: ``ORIGIN_URL`` or ``ORIGIN_FILE``.
    """

    raw: bytes = b""
    url: str = ""
    status_code: int = 0
    content_type: str = ""
    content_type_detected: str = ""
    origin: str = ORIGIN_FILE

    def is_binary(self) -> bool:
        """Return True if the sniffed content type is an audio or binary format."""
        return self.content_type_detected in BINARY_CONTENT_TYPES

    def is_html(self) -> bool:
        """Return True if the body was sniffed as an HTML page."""
        return self.content_type_detected == FT_HTML

    def is_potential_playlist(self) -> bool:
        """Return True unless the content was sniffed as binary or HTML."""
        return not (self.is_binary() or self.is_html())


@dataclass
class Source:
    """Where a playlist is fetched from.

    Attributes:
        raw: Playlist location as given: an HTTP(S) URL, a file URI, or a
            local playlist path. Also used as the report label.
        resolved_path: Absolute path of a local playlist file, if resolved.
    """

    raw: str
    resolved_path: Optional[str] = None

    def is_url(self) -> bool:
        """Return True if the playlist is fetched over HTTP(S)."""
        return urlparse(self.raw).scheme in {"http", "https"}

    def is_file_url(self) -> bool:
        """Return True if the playlist is given as a ``file:`` URI."""
        return urlparse(self.raw).scheme == "file"


__all__ = ["Stream", "PlaylistResponse", "Source"]
