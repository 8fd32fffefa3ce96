"""Command line interface: fetch playlists and print their streams as JSON."""

from argparse import ArgumentParser
from asyncio import to_thread
from json import dumps
from logging import DEBUG, INFO, basicConfig, getLogger
from os import getcwd
from typing import Dict, List, Optional, Sequence

from .constants import DEFAULT_TIMEOUT
from .fetcher import fetch
from .io import make_source, write_output
from .models import PlaylistResponse, Source
from .playlist import Playlist

LOGGER = getLogger(__name__)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="plparser",
        description="Parse PLS, ASX, ASF and M3U playlists into stream lists.",
    )
    parser.add_argument("sources", nargs="*", help="Playlist URLs or file paths.")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Per-request timeout in seconds (default: %(default)s).",
    )
    parser.add_argument("--output", help="Write the JSON result to this file.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def describe(source: Source, response: PlaylistResponse) -> Dict[str, object]:
    """Parse one fetched response into its JSON report record.

    Binary and HTML responses are reported without a type and not parsed.
    """
    record: Dict[str, object] = {
        "source": source.raw,
        "type": "",
        "first_line": "",
        "streams": [],
    }
    if not response.is_potential_playlist():
        LOGGER.info(
            "%s is not a playlist (%s)", source.raw, response.content_type_detected
        )
        return record

    playlist = Playlist(response)
    playlist.parse()
    if not playlist.is_detected():
        LOGGER.info("Unrecognized playlist format: %s", source.raw)
    record.update(playlist.to_dict())
    return record


async def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code.

    0 when every source was fetched, 1 when some failed, 2 on usage errors.
    """
    args = build_parser().parse_args(argv)
    basicConfig(
        level=DEBUG if args.verbose else INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    sources: List[Source] = [make_source(raw, getcwd()) for raw in args.sources]
    if not sources:
        LOGGER.error("No playlist sources given")
        return 2

    results, failed = await to_thread(fetch, sources, args.timeout)
    by_label = {source.raw: response for source, response in results}
    report = [describe(s, by_label[s.raw]) for s in sources if s.raw in by_label]

    text = dumps(report, indent=2)
    if args.output:
        write_output(args.output, text)
        LOGGER.info("Wrote %d playlists to %s", len(report), args.output)
    else:
        print(text)

    if failed:
        LOGGER.warning("%d of %d sources failed", len(failed), len(sources))
        return 1
    return 0
