"""Fetcher for playlists behind HTTP(S) URLs and in local files.

Each HTTP request runs on a worker thread and is raced against a timeout.
Several sources are fetched concurrently with a thread pool. Content is
handed to the parsers as raw bytes; nothing is retried.
"""

from concurrent import futures
from contextlib import closing
from http.client import BadStatusLine, HTTPException
from logging import getLogger
from typing import Callable, List, Optional, Tuple
from urllib import parse, request
from urllib.error import HTTPError

from .constants import (
    BINARY_BYTES,
    DEFAULT_TIMEOUT,
    FT_BINARY,
    FT_HTML,
    FT_MPEG,
    FT_TEXT,
    FT_XML,
    HTML_SIGNATURES,
    MAX_WORKERS,
    ORIGIN_FILE,
    ORIGIN_URL,
    PLAYLIST_READ_LIMIT,
    SNIFF_LENGTH,
    TEXT_CONTENT_TYPES,
    USER_AGENT,
)
from .errors import FetchError, FetchTimeoutError
from .models import PlaylistResponse, Source

LOGGER = getLogger(__name__)


def fetch(
    sources: List[Source],
    timeout: float = DEFAULT_TIMEOUT,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> Tuple[List[Tuple[Source, PlaylistResponse]], List[Tuple[Source, str]]]:
    """Fetch all sources concurrently.

    Args:
        sources: Playlist locations to fetch.
        timeout: Per-request timeout in seconds for URL sources.
        progress_callback: Optional callback receiving ``(completed, total)``.

    Returns a tuple of:
    - List of ``(source, response)`` pairs in completion order.
    - List of ``(source, message)`` pairs for sources that failed.
    """
    results: List[Tuple[Source, PlaylistResponse]] = []
    failed: List[Tuple[Source, str]] = []
    total_sources = len(sources)
    completed = 0

    with futures.ThreadPoolExecutor(
        max_workers=max(1, min(MAX_WORKERS, total_sources))
    ) as ex:
        fut_to_src = {ex.submit(fetch_source, s, timeout): s for s in sources}
        for fut in futures.as_completed(fut_to_src):
            source = fut_to_src[fut]
            try:
                results.append((source, fut.result()))
            except FetchError as e:
                LOGGER.warning("Failed to fetch %s: %s", source.raw, e)
                failed.append((source, str(e)))
            completed += 1
            if progress_callback:
                progress_callback(completed, total_sources)
    return results, failed


def fetch_source(source: Source, timeout: float = DEFAULT_TIMEOUT) -> PlaylistResponse:
    """Fetch one source, dispatching on URL, file URI, or local path."""
    if source.is_url():
        return fetch_url(source.raw, timeout)
    if source.is_file_url():
        return fetch_file(request.url2pathname(parse.urlparse(source.raw).path))
    return fetch_file(source.resolved_path or source.raw)


def fetch_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> PlaylistResponse:
    """Fetch a playlist over HTTP(S).

    The whole body is read only for text-like content types; anything else
    is capped at ``PLAYLIST_READ_LIMIT`` bytes, enough to sniff it.

    Raises:
        FetchTimeoutError: No response within ``timeout`` seconds.
        FetchError: Any other network or HTTP failure.
    """
    plr = PlaylistResponse(url=url, origin=ORIGIN_URL)
    LOGGER.debug("Fetching %s (timeout %.1fs)", url, timeout)

    executor = futures.ThreadPoolExecutor(max_workers=1)
    try:
        fut = executor.submit(_http_get, url, timeout)
        plr.status_code, plr.content_type, plr.raw = fut.result(timeout=timeout)
    except futures.TimeoutError as e:
        raise FetchTimeoutError(url, "Timeout connecting to URL.") from e
    except BadStatusLine as e:
        # SHOUTcast servers answer with "ICY 200 OK" which http.client rejects.
        if not str(e.line).startswith("ICY"):
            raise FetchError(url, f"bad status line {e.line!r}") from e
        plr.status_code = 200
        plr.content_type = FT_BINARY
        plr.content_type_detected = FT_BINARY
        return plr
    except HTTPError as e:
        raise FetchError(url, str(e), status_code=e.code) from e
    except (HTTPException, OSError, ValueError) as e:
        raise FetchError(url, str(e)) from e
    finally:
        executor.shutdown(wait=False)

    plr.content_type_detected = detect_content_type(plr.raw)
    LOGGER.debug(
        "Fetched %s: status %d, %s (%d bytes)",
        url,
        plr.status_code,
        plr.content_type or "no content type",
        len(plr.raw),
    )
    return plr


def _http_get(url: str, timeout: float) -> Tuple[int, str, bytes]:
    """Perform the GET and return ``(status, content type, body)``."""
    req = request.Request(url, headers={"User-Agent": USER_AGENT})
    with closing(request.urlopen(req, timeout=timeout)) as resp:
        content_type = resp.headers.get("Content-Type", "")
        if content_type in TEXT_CONTENT_TYPES:
            raw = resp.read()
        else:
            raw = resp.read(PLAYLIST_READ_LIMIT)
        return resp.status, content_type, raw


def fetch_file(path: str) -> PlaylistResponse:
    """Read a playlist from a local file.

    Raises:
        FetchError: The file could not be read; ``status_code`` is 500.
    """
    plr = PlaylistResponse(url=path, origin=ORIGIN_FILE)
    try:
        with open(path, "rb") as f:
            plr.raw = f.read()
    except OSError as e:
        raise FetchError(path, str(e), status_code=500) from e

    plr.status_code = 200
    plr.content_type_detected = detect_content_type(plr.raw)
    return plr


def detect_content_type(raw: bytes) -> str:
    """Sniff the content type of a playlist body.

    Looks at the first ``SNIFF_LENGTH`` bytes for HTML and XML markers, an
    ID3 tag, or control bytes that never appear in text.
    """
    data = raw[:SNIFF_LENGTH]
    stripped = data.lstrip(b"\t\n\x0c\r ")
    upper = stripped.upper()

    for sig in HTML_SIGNATURES:
        if (
            upper.startswith(sig)
            and len(stripped) > len(sig)
            and stripped[len(sig)] in b" >"
        ):
            return FT_HTML
    if stripped.startswith(b"<?xml"):
        return FT_XML
    if data.startswith(b"ID3"):
        return FT_MPEG
    if any(b in BINARY_BYTES for b in data):
        return FT_BINARY
    return FT_TEXT
