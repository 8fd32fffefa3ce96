"""PLS (``[playlist]``) parser.

``TitleN`` and ``FileN`` keys may appear in either order, so titles seen
before their file are kept aside and attached once the file shows up.
"""

from typing import Dict, List

from .asf import find_indexed_value
from .base import PlaylistParser
from .constants import PLS_FILE_RE, PLS_TITLE_RE
from .models import Stream
from .text import iter_lines


class PlsParser(PlaylistParser):
    """Parse ``FileN``/``TitleN`` pairs.

    The order of the returned streams is not guaranteed to follow the file.
    """

    def parse(self) -> List[Stream]:
        titles: Dict[int, str] = {}
        streams: Dict[int, Stream] = {}

        for line in iter_lines(self.raw):
            title = find_indexed_value(line, PLS_TITLE_RE)
            if title is not None:
                _add_title(title[0], title[1], titles, streams)

            url = find_indexed_value(line, PLS_FILE_RE)
            if url is not None:
                _add_file(url[0], url[1], titles, streams)

        self.streams = [s for s in streams.values() if s.url]
        return self.streams


def _add_file(
    idx: int, url: str, titles: Dict[int, str], streams: Dict[int, Stream]
) -> None:
    """Create the stream for ``idx``, replacing any previous one."""
    stream = Stream(index=idx, url=url)
    if idx in titles:
        stream.title = titles[idx]
    streams[idx] = stream


def _add_title(
    idx: int, title: str, titles: Dict[int, str], streams: Dict[int, Stream]
) -> None:
    if idx in streams:
        streams[idx].title = title
    else:
        titles[idx] = title
