"""ASX playlist parser.

An ASX document carries playlist-level metadata and a list of ``<entry>``
elements. Each entry may declare several alternate ``<ref>`` URLs; every
one of them becomes its own stream sharing the entry's metadata. Entry
fields missing from an entry fall back to the playlist-level values, and a
``<base>`` href is prefixed to the entry's stream URLs.
"""

from re import Pattern
from typing import Dict, List, Tuple

from .base import PlaylistParser
from .constants import (
    ASX_ABSTRACT_RE,
    ASX_AUTHOR_RE,
    ASX_BASE_RE,
    ASX_COPYRIGHT_RE,
    ASX_ENTRY_RE,
    ASX_LOGO_RE,
    ASX_MOREINFO_RE,
    ASX_REF_RE,
    ASX_TITLE_RE,
)
from .models import Stream
from .text import RawPlaylist, decode

# Stream field name -> pattern capturing its value. <ref> is handled per entry.
FIELD_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("description", ASX_ABSTRACT_RE),
    ("title", ASX_TITLE_RE),
    ("logo", ASX_LOGO_RE),
    ("author", ASX_AUTHOR_RE),
    ("copyright", ASX_COPYRIGHT_RE),
    ("base", ASX_BASE_RE),
    ("more_info", ASX_MOREINFO_RE),
)


class AsxParser(PlaylistParser):
    """Parse an ASX document into streams.

    After ``parse()`` the playlist-level metadata is available as attributes
    (``title``, ``description``, ``logo``, ``author``, ``copyright``,
    ``base``, ``more_info``).
    """

    def __init__(self, raw: RawPlaylist):
        super().__init__(raw)
        self.title = ""
        self.description = ""
        self.logo = ""
        self.author = ""
        self.copyright = ""
        self.base = ""
        self.more_info = ""

    def parse(self) -> List[Stream]:
        document = decode(self.raw)

        entries = [m.group(1) for m in ASX_ENTRY_RE.finditer(document)]

        # Entries use the same element names as the playlist body, so they
        # are cut out before the playlist-level fields are read.
        body = ASX_ENTRY_RE.sub("", document)
        self._set_playlist_fields(extract_fields(body))

        streams: List[Stream] = []
        for idx, entry in enumerate(entries, start=1):
            streams.extend(self._parse_entry(idx, entry))
        self.streams = streams
        return streams

    def playlist_fields(self) -> Dict[str, str]:
        """Return the playlist-level values entries inherit from."""
        return {
            "description": self.description,
            "title": self.title,
            "logo": self.logo,
            "author": self.author,
            "copyright": self.copyright,
            "base": self.base,
            "more_info": self.more_info,
        }

    def _set_playlist_fields(self, values: Dict[str, str]) -> None:
        self.description = values.get("description", "")
        self.title = values.get("title", "")
        self.logo = values.get("logo", "")
        self.author = values.get("author", "")
        self.copyright = values.get("copyright", "")
        self.base = values.get("base", "")
        self.more_info = values.get("more_info", "")

    def _parse_entry(self, idx: int, body: str) -> List[Stream]:
        """Expand one ``<entry>`` body into one stream per ``<ref>``."""
        values = self.playlist_fields()
        values.update(extract_fields(body))

        entry = Stream(index=idx, raw=body, **values)
        if entry.base and not entry.base.endswith("/"):
            entry.base += "/"

        streams: List[Stream] = []
        for m in ASX_REF_RE.finditer(body):
            href = m.group(1)
            url = entry.base + href if entry.base else href
            if not url:
                continue
            stream = entry.copy()
            stream.url = url
            streams.append(stream)
        return streams


def extract_fields(text: str) -> Dict[str, str]:
    """Return the first match of every field pattern found in ``text``.

    Fields without a match are left out of the result.
    """
    found: Dict[str, str] = {}
    for name, pattern in FIELD_PATTERNS:
        m = pattern.search(text)
        if m:
            found[name] = m.group(1)
    return found
