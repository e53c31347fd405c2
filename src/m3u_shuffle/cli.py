from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from m3u_shuffle import __version__, config
from m3u_shuffle import logger as logger_mod
from m3u_shuffle.errors import M3UShuffleError
from m3u_shuffle.streams import read_input, shuffle_text, write_output

log = logger_mod.get_logger()

EPILOG = """\
parsing rules:
  - the first non-blank line must be the #EXTM3U header; a missing header is
    an error unless --allow-missing-header is given
  - each #EXTINF line stays attached to the track line that follows it
  - other "#" lines stay attached to the following track
  - blank lines are dropped
  - #EXTINF lines with no track after them are dropped with a warning

The output file may be the input file; the input is read completely first.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.PROG_NAME,
        description=(
            "CLI tool to shuffle a m3u file. If no file given, reads from STDIN"
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", help="m3u file to shuffle (default: stdin)")
    parser.add_argument(
        "-o", "--output", help="output file to write to (default: stdout)"
    )
    parser.add_argument(
        "--allow-missing-header",
        dest="require_header",
        action="store_false",
        default=config.REQUIRE_HEADER,
        help="accept input without an #EXTM3U header (none is written)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress to stderr (-vv for debug output)",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger_mod.set_logging_level("DEBUG" if args.verbose > 1 else "INFO")

    try:
        text = read_input(args.file)
        output = shuffle_text(text, require_header=args.require_header)
        write_output(output, args.output)
    except M3UShuffleError as e:
        log.debug("Run failed", exc_info=True)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
