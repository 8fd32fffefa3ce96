"""Exceptions raised by plparser collaborators.

The parsing core itself does not raise for unrecognized input; these cover
fetching playlists from URLs and local files.
"""

from typing import Optional


class PlaylistError(Exception):
    """Base class for all plparser errors."""


class FetchError(PlaylistError):
    """A playlist could not be fetched.

    Attributes:
        source: URL or path that was being fetched.
        status_code: Status recorded for the failed fetch, if any.
    """

    def __init__(self, source: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{source}: {message}")
        self.source = source
        self.status_code = status_code


class FetchTimeoutError(FetchError):
    """The remote end did not answer within the configured timeout."""


__all__ = ["PlaylistError", "FetchError", "FetchTimeoutError"]
