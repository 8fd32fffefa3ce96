"""ASF reference playlist parser (``[Reference]`` / ``RefN=`` files)."""

from re import Pattern
from typing import List, Optional, Tuple

from .base import PlaylistParser
from .constants import ASF_REF_RE
from .models import Stream
from .text import fix_string, iter_lines


class AsfParser(PlaylistParser):
    """Parse ``RefN=url`` lines in file order.

    Repeated indices are kept as separate streams.
    """

    def parse(self) -> List[Stream]:
        streams: List[Stream] = []
        for line in iter_lines(self.raw):
            match = find_indexed_value(line, ASF_REF_RE)
            if match is None:
                continue
            idx, url = match
            if url:
                streams.append(Stream(index=idx, url=url))
        self.streams = streams
        return streams


def find_indexed_value(line: str, pattern: Pattern[str]) -> Optional[Tuple[int, str]]:
    """Match ``pattern`` against a line and return ``(index, normalized value)``.

    The pattern must capture the numeric index first and the value second.
    Returns None when the line does not match.
    """
    m = pattern.search(line)
    if not m:
        return None
    return int(m.group(1)), fix_string(m.group(2))
