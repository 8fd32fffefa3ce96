"""Project-wide constants and compiled regular expressions used by plparser.

These values define where a playlist came from, which content types are
worth reading in full, fetcher defaults, and the patterns used by the
per-format parsers. The module is stdlib-only; every pattern is compiled once
and never modified.
"""

from re import DOTALL, IGNORECASE
from re import compile as re_compile
from sys import version

ORIGIN_URL = "url"
ORIGIN_FILE = "file"

FT_TEXT = "text/plain; charset=utf-8"
FT_HTML = "text/html; charset=utf-8"
FT_XML = "text/xml; charset=utf-8"
FT_BINARY = "application/octet-stream"
FT_MPEG = "audio/mpeg"

BINARY_CONTENT_TYPES = frozenset({FT_MPEG, FT_BINARY})
TEXT_CONTENT_TYPES = frozenset(
    {
        "text/plain",
        FT_TEXT,
        "text/html",
        FT_HTML,
        "audio/x-scpls",
        "video/x-ms-asf",
        "audio/mpegurl",
        "audio/x-mpegurl",
    }
)

TYPE_PLS = "pls"
TYPE_ASF = "asf"
TYPE_ASX = "asx"
TYPE_M3U = "m3u"

PLAYLIST_READ_LIMIT = 1024
SNIFF_LENGTH = 512
DEFAULT_TIMEOUT = 10.0
MAX_WORKERS = 16

USER_AGENT = "plparser/1.0 Python/" + version.split()[0]

ASF_REF_RE = re_compile(r"ref([0-9]+)\s*=\s*(.*)", IGNORECASE)

PLS_TITLE_RE = re_compile(r"title([0-9]+)\s*=\s*(.*)", IGNORECASE)
PLS_FILE_RE = re_compile(r"file([0-9]+)\s*=\s*(.*)", IGNORECASE)

ASX_ENTRY_RE = re_compile(r"<entry\s*>(.*?)</entry\s*>", IGNORECASE | DOTALL)
ASX_ABSTRACT_RE = re_compile(
    r"<abstract\s*>(.*?)</abstract\s*>", IGNORECASE | DOTALL
)
ASX_TITLE_RE = re_compile(r"<title\s*>(.*?)</title\s*>", IGNORECASE | DOTALL)
ASX_LOGO_RE = re_compile(
    r"<logo\s*href\s*=\s*[\"'](.*?)[\"'].*?/>", IGNORECASE
)
ASX_AUTHOR_RE = re_compile(r"<author\s*>(.*?)</author\s*>", IGNORECASE | DOTALL)
ASX_COPYRIGHT_RE = re_compile(
    r"<copyright\s*>(.*?)</copyright\s*>", IGNORECASE | DOTALL
)
ASX_REF_RE = re_compile(
    r"<ref\s*href\s*=\s*[\"'](.*?)[\"'].*?/?>(?:</ref\s*>)?", IGNORECASE
)
ASX_BASE_RE = re_compile(
    r"<base\s*href\s*=\s*[\"'](.*?)[\"'].*?/?>(?:</base\s*>)?", IGNORECASE
)
ASX_MOREINFO_RE = re_compile(
    r"<moreinfo\s*href\s*=\s*[\"'](.*?)[\"'].*?/?>(?:</moreinfo\s*>)?",
    IGNORECASE,
)

HTML_SIGNATURES = (
    b"<!DOCTYPE HTML",
    b"<HTML",
    b"<HEAD",
    b"<SCRIPT",
    b"<IFRAME",
    b"<H1",
    b"<DIV",
    b"<FONT",
    b"<TABLE",
    b"<A",
    b"<STYLE",
    b"<TITLE",
    b"<B",
    b"<BODY",
    b"<BR",
    b"<P",
    b"<!--",
)
BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20))
)
