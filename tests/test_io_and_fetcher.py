"""Tests for plparser.io and plparser.fetcher modules."""

# pylint: disable=missing-function-docstring
from http.client import BadStatusLine
from pathlib import Path
from threading import Event
from urllib.error import HTTPError, URLError

from pytest import mark, raises

from plparser import fetcher, io
from plparser.constants import (
    FT_BINARY,
    FT_HTML,
    FT_MPEG,
    FT_TEXT,
    FT_XML,
    ORIGIN_FILE,
    ORIGIN_URL,
    PLAYLIST_READ_LIMIT,
)
from plparser.errors import FetchError, FetchTimeoutError
from plparser.models import Source
from plparser.playlist import Playlist


class FakeResponse:
    """Minimal stand-in for the object returned by urlopen."""

    def __init__(self, body: bytes, content_type: str, status: int = 200):
        self.body = body
        self.headers = {"Content-Type": content_type}
        self.status = status
        self.read_sizes = []
        self.closed = False

    def read(self, amt=None):
        self.read_sizes.append(amt)
        return self.body if amt is None else self.body[:amt]

    def close(self):
        self.closed = True


def _serve(monkeypatch, response):
    requests = []

    def fake_urlopen(req, timeout=None):
        requests.append((req, timeout))
        return response

    monkeypatch.setattr(fetcher.request, "urlopen", fake_urlopen)
    return requests


def _fail_with(monkeypatch, exc):
    def fake_urlopen(req, timeout=None):
        raise exc

    monkeypatch.setattr(fetcher.request, "urlopen", fake_urlopen)


@mark.parametrize(
    "raw", ["http://example.com/radio.asx", "file:///tmp/radio.m3u", "mms://radio.example/live"]
)
def test_make_source_keeps_urls_as_given(raw):
    assert io.make_source(raw, "/base").resolved_path is None


def test_make_source_resolves_local_paths(tmp_path: Path):
    assert io.make_source("/abs/radio.pls", str(tmp_path)).resolved_path == "/abs/radio.pls"
    assert io.make_source("sub/b.m3u", str(tmp_path)).resolved_path == str(tmp_path / "sub" / "b.m3u")
    assert io.make_source("station", str(tmp_path)).resolved_path == str(tmp_path / "station")


def test_write_output_creates_parent_and_adds_newline(tmp_path: Path):
    out = tmp_path / "nested" / "out.json"

    io.write_output(str(out), "[]")

    assert out.read_bytes() == b"[]\n"


@mark.parametrize(
    "raw,expected",
    [
        (b"<html><body>hi</body></html>", FT_HTML),
        (b"  \n<!DOCTYPE html>\n<html>", FT_HTML),
        (b"<?xml version=\"1.0\"?><playlist/>", FT_XML),
        (b"ID3\x03\x00\x00\x00", FT_MPEG),
        (b"\xff\xfb\x90\x00\x00\x01", FT_BINARY),
        (b"[playlist]\nFile1=http://a/\n", FT_TEXT),
        (b"<ASX version=\"3.0\">", FT_TEXT),
        (b"", FT_TEXT),
    ],
)
def test_detect_content_type(raw, expected):
    assert fetcher.detect_content_type(raw) == expected


def test_fetch_file_reads_local_playlist(tmp_path: Path):
    p = tmp_path / "radio.pls"
    p.write_bytes(b"[playlist]\nFile1=http://a/\n")

    plr = fetcher.fetch_file(str(p))

    assert plr.status_code == 200
    assert plr.origin == ORIGIN_FILE
    assert plr.url == str(p)
    assert plr.content_type_detected == FT_TEXT
    assert plr.raw == b"[playlist]\nFile1=http://a/\n"


def test_fetch_file_missing(tmp_path: Path):
    with raises(FetchError) as excinfo:
        fetcher.fetch_file(str(tmp_path / "missing.pls"))

    assert excinfo.value.status_code == 500


def test_fetch_url_reads_whole_text_body(monkeypatch):
    body = b"[Reference]\nRef1=http://live.example.com/aaa\n" + b"x" * 2048
    resp = FakeResponse(body, "video/x-ms-asf")
    requests = _serve(monkeypatch, resp)

    plr = fetcher.fetch_url("http://example.com/radio.asf", timeout=5)

    assert plr.origin == ORIGIN_URL
    assert plr.status_code == 200
    assert plr.content_type == "video/x-ms-asf"
    assert plr.raw == body
    assert resp.read_sizes == [None]
    assert resp.closed
    req, timeout = requests[0]
    assert req.get_header("User-agent").startswith("plparser/")
    assert timeout == 5

    pl = Playlist(plr)
    assert pl.parse() == "asf"
    assert [s.url for s in pl.streams] == ["http://live.example.com/aaa"]


def test_fetch_url_caps_unknown_content(monkeypatch):
    resp = FakeResponse(b"ID3" + b"\x00" * 4096, "audio/mpeg")
    _serve(monkeypatch, resp)

    plr = fetcher.fetch_url("http://example.com/stream")

    assert resp.read_sizes == [PLAYLIST_READ_LIMIT]
    assert len(plr.raw) == PLAYLIST_READ_LIMIT
    assert plr.is_binary()
    assert not plr.is_potential_playlist()


def test_fetch_url_treats_icy_status_as_binary_stream(monkeypatch):
    _fail_with(monkeypatch, BadStatusLine("ICY 200 OK\r\n"))

    plr = fetcher.fetch_url("http://shoutcast.example.com:8000/")

    assert plr.status_code == 200
    assert plr.content_type == FT_BINARY
    assert plr.content_type_detected == FT_BINARY
    assert plr.raw == b""


def test_fetch_url_other_bad_status_line(monkeypatch):
    _fail_with(monkeypatch, BadStatusLine("GARBAGE\r\n"))

    with raises(FetchError):
        fetcher.fetch_url("http://example.com/")


def test_fetch_url_http_error_keeps_status(monkeypatch):
    _fail_with(
        monkeypatch, HTTPError("http://example.com/x", 404, "Not Found", None, None)
    )

    with raises(FetchError) as excinfo:
        fetcher.fetch_url("http://example.com/x")

    assert excinfo.value.status_code == 404


def test_fetch_url_network_error(monkeypatch):
    _fail_with(monkeypatch, URLError("connection refused"))

    with raises(FetchError) as excinfo:
        fetcher.fetch_url("http://example.com/x")

    assert not isinstance(excinfo.value, FetchTimeoutError)
    assert excinfo.value.source == "http://example.com/x"


def test_fetch_url_times_out(monkeypatch):
    release = Event()

    def slow_urlopen(req, timeout=None):
        release.wait(5)
        return FakeResponse(b"", "text/plain")

    monkeypatch.setattr(fetcher.request, "urlopen", slow_urlopen)
    try:
        with raises(FetchTimeoutError):
            fetcher.fetch_url("http://slow.example.com/", timeout=0.05)
    finally:
        release.set()


def test_fetch_mixed_sources_reports_failures(tmp_path: Path):
    good = tmp_path / "radio.m3u"
    good.write_text("http://a/\nhttp://b/\n", encoding="utf-8")
    uri = tmp_path / "uri.m3u"
    uri.write_text("http://c/\n", encoding="utf-8")
    sources = [
        Source(raw=str(good), resolved_path=str(good)),
        Source(raw=uri.as_uri()),
        Source(raw=str(tmp_path / "missing.pls")),
    ]

    progress_updates = []

    def cb(done, total):
        progress_updates.append((done, total))

    results, failed = fetcher.fetch(sources, progress_callback=cb)

    assert {s.raw: r.raw for s, r in results} == {
        str(good): b"http://a/\nhttp://b/\n",
        uri.as_uri(): b"http://c/\n",
    }
    assert [s.raw for s, _ in failed] == [str(tmp_path / "missing.pls")]
    assert progress_updates[-1] == (3, 3)


def test_fetch_no_sources():
    assert fetcher.fetch([]) == ([], [])
