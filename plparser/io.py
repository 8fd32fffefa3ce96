"""I/O helpers: turn command-line locations into sources and write reports."""

from os import makedirs, path

from .models import Source


def make_source(raw: str, base_dir: str = "") -> Source:
    """Build a ``Source`` for a playlist location.

    URLs and file URIs are kept as given. Anything else is a local playlist
    path and gets an absolute ``resolved_path`` relative to ``base_dir``.
    """
    source = Source(raw=raw)
    if source.is_url() or source.is_file_url() or "://" in raw:
        return source
    source.resolved_path = path.abspath(path.join(base_dir, raw))
    return source


def write_output(file: str, text: str):
    """Write text to a file (LF endings), creating the parent directory.

    A trailing LF is added when missing.
    """
    makedirs(path.dirname(path.abspath(file)) or ".", exist_ok=True)
    with open(file, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
        if not text.endswith("\n"):
            f.write("\n")
