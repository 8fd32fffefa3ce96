"""M3U playlist parser."""

from typing import List

from .base import PlaylistParser
from .models import Stream
from .text import fix_string, iter_lines, is_url


class M3uParser(PlaylistParser):
    """Collect every ``http``/``mms`` line as a stream.

    Indices count URL lines only, so they stay contiguous. ``#EXTINF``
    metadata is not attached to the following URL.
    """

    def parse(self) -> List[Stream]:
        streams: List[Stream] = []
        idx = 0
        for raw_line in iter_lines(self.raw):
            line = fix_string(raw_line)
            if not is_url(line):
                continue
            idx += 1
            streams.append(Stream(index=idx, url=line))
        self.streams = streams
        return streams
