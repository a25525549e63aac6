"""
Entry point script for strbuf.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .core import buffer as bufops
from .core.file import lines_from_path
from .core.result import Result
from .core.tokenizer import split_by_delimiters
from .utils.hex_utils import hex_dump, highlight_dump, parse_hex_string
from .utils.search import SearchEngine

log = logging.getLogger('strbuf')

LOG_LEVEL_ENV = 'STRBUF_LOG_LEVEL'


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog='strbuf',
        description="strbuf - byte string tools: split, dump and search files"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    split = commands.add_parser("split", help="Split each line of a file on delimiters")
    split.add_argument("file", type=str, help="File to read")
    split.add_argument("-d", "--delimiters", default=",", help="Delimiter characters")
    split.add_argument("-q", "--quotes", default='"', help="Characters that toggle an ignore region")
    split.add_argument("--separator", default="\t", help="Output separator between tokens")

    dump = commands.add_parser("dump", help="Print a hex dump of a file")
    dump.add_argument("file", type=str, help="File to read")
    dump.add_argument("-w", "--width", type=int, default=16, help="Bytes per line")
    dump.add_argument("--no-color", action="store_true", help="Disable highlighting")

    find = commands.add_parser("find", help="Find a pattern in a file")
    find.add_argument("file", type=str, help="File to read")
    find.add_argument("pattern", type=str, help="Text, or hex bytes with --hex")
    find.add_argument("--hex", action="store_true", help="Treat the pattern as hex bytes")
    find.add_argument("-i", "--ignore-case", action="store_true", help="Case-insensitive search")
    find.add_argument("--all", action="store_true", help="Report every occurrence")

    lines = commands.add_parser("lines", help="Print the lines of a file")
    lines.add_argument("file", type=str, help="File to read")
    lines.add_argument("-n", "--number", action="store_true", help="Prefix line numbers")

    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    """Set up logging from the command line flag or STRBUF_LOG_LEVEL."""

    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING")
    level = getattr(logging, level_name.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s][%(levelname)s] %(message)s",
        stream=sys.stderr
    )


def _decode(data: bytes) -> str:
    return data.decode('latin-1')


def _fail(result: Result, context: str) -> int:
    print(f"Error: {context}: {result.status.value}", file=sys.stderr)
    return 1


def _read_buffer(filename: str) -> Result:
    with open(filename, 'rb') as f:
        return bufops.from_bytes(f.read())


def run_split(args: argparse.Namespace) -> int:
    lines = lines_from_path(args.file)
    if not lines.ok:
        return _fail(lines, args.file)

    delimiters = args.delimiters.encode('latin-1')
    quotes = args.quotes.encode('latin-1')

    for line in lines.value:
        tokens = split_by_delimiters(line, delimiters, quotes)
        if not tokens.ok:
            return _fail(tokens, args.file)

        print(args.separator.join(_decode(t) for t in tokens.value.to_bytes_list()))

    return 0


def run_dump(args: argparse.Namespace) -> int:
    buf = _read_buffer(args.file)
    if not buf.ok:
        return _fail(buf, args.file)

    dump = hex_dump(buf.value, args.width)
    if not args.no_color:
        dump = highlight_dump(dump)

    sys.stdout.write(dump)

    return 0


def run_find(args: argparse.Namespace) -> int:
    buf = _read_buffer(args.file)
    if not buf.ok:
        return _fail(buf, args.file)

    if args.hex:
        pattern = parse_hex_string(args.pattern)
        if not pattern:
            print(f"Error: invalid hex pattern: {args.pattern}", file=sys.stderr)
            return 1
    else:
        pattern = args.pattern.encode('latin-1')

    engine = SearchEngine(buf.value)
    case_sensitive = not args.ignore_case

    if args.all:
        results = engine.find_all(pattern, case_sensitive)
        if not results:
            print("No match", file=sys.stderr)
            return 1

        for result in results:
            print(result.position)
        return 0

    found = engine.find_next(pattern, case_sensitive, 0)
    if not found.ok:
        return _fail(found, args.pattern)

    print(found.value.position)

    return 0


def run_lines(args: argparse.Namespace) -> int:
    lines = lines_from_path(args.file)
    if not lines.ok:
        return _fail(lines, args.file)

    for number, line in enumerate(lines.value, start=1):
        text = _decode(line.to_bytes())
        print(f"{number:6d}  {text}" if args.number else text)

    return 0


COMMANDS = {
    "split": run_split,
    "dump": run_dump,
    "find": run_find,
    "lines": run_lines,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    configure_logging(args.verbose)
    log.debug("Running %s on %s", args.command, args.file)

    try:
        return COMMANDS[args.command](args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
