"""Command-line entry point: load one GPX file and answer time lookups interactively."""

from __future__ import annotations

import argparse
import logging
import sys

from .errors import TrackLookupError
from .index import build_index
from .localtime import parse_offset, resolve_local_offset
from .reader import read_gpx
from .session import TrackSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="track-lookup",
        description="Find the most recent GPX track point at or before a local time.",
    )
    parser.add_argument("path", help="Path to the GPX file")
    parser.add_argument(
        "--utc-offset",
        metavar="±HH:MM",
        help="Local UTC offset to use instead of the system time zone",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics written to stderr (default: WARNING)",
    )
    return parser


def open_session(path: str, utc_offset: str | None = None) -> TrackSession:
    """Read, index and pair ``path`` with the local offset.

    Raises:
        OSError: the file cannot be read.
        TrackLookupError: the document or the offset is unusable.
    """
    tz = parse_offset(utc_offset) if utc_offset else resolve_local_offset()
    waypoints = build_index(read_gpx(path))
    logger.info("Loaded %d waypoints from %s", len(waypoints), path)
    return TrackSession(waypoints, tz, source=path)


def main(argv: list[str] | None = None, stdin=None, stdout=None, stderr=None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    try:
        session = open_session(args.path, args.utc_offset)
    except OSError as e:
        print(f"Error: cannot read {args.path}: {e.strerror or e}", file=stderr)
        return 1
    except TrackLookupError as e:
        print(f"Error: {e}", file=stderr)
        return 1

    try:
        session.run(stdin, stdout)
    except KeyboardInterrupt:
        print(file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
