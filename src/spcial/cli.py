"""``spcial`` command-line converter between SPCiaL and JSON.

Usage::

    spcial to-json config.spcial      # SPCiaL → JSON
    spcial from-json config.json      # JSON → SPCiaL
    cat config.spcial | spcial to-json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import IO, Sequence

from .api import dumps, loads
from .errors import SpcialError

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SPCIAL_LOG_LEVEL"


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def _read(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def _to_json(text: str, dest: IO[str], indent: int) -> None:
    json.dump(loads(text), dest, indent=indent or None, ensure_ascii=False)
    print(file=dest)


def _from_json(text: str, dest: IO[str]) -> None:
    dest.write(dumps(json.loads(text)))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spcial",
        description="Convert between SPCiaL and JSON.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    to_json = sub.add_parser("to-json", help="SPCiaL → JSON")
    to_json.add_argument("file", nargs="?", help="Input file (default: stdin)")
    to_json.add_argument("--indent", type=int, default=2, help="JSON indent, 0 for compact")

    from_json = sub.add_parser("from-json", help="JSON → SPCiaL")
    from_json.add_argument("file", nargs="?", help="Input file (default: stdin)")

    return parser


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None, dest: IO[str] | None = None) -> int:
    """Run the converter; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    dest = dest or sys.stdout

    try:
        text = _read(args.file)
        if args.command == "to-json":
            _to_json(text, dest, args.indent)
        else:
            _from_json(text, dest)
    except OSError as exc:
        print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON: {exc}", file=sys.stderr)
        return 1
    except SpcialError as exc:
        _LOGGER.debug("Conversion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
