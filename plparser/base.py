"""Common interface implemented by every playlist format parser."""

from abc import ABC, abstractmethod
from typing import List

from .models import Stream
from .text import RawPlaylist


class PlaylistParser(ABC):
    """Parser over one complete raw playlist buffer.

    Every instance owns its own buffer copy and result list, so separate
    instances can be used from separate threads.
    """

    def __init__(self, raw: RawPlaylist):
        self.raw = raw
        self.streams: List[Stream] = []

    @abstractmethod
    def parse(self) -> List[Stream]:
        """Parse the buffer, store the streams found and return them."""
        raise NotImplementedError

    def get_streams(self) -> List[Stream]:
        return self.streams
