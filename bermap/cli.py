"""Command line entry point that loads a map and reports a check result."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from bermap.mapfile import MapError, has_valid_elements, load_map
from bermap.reach import validate

DEFAULT_MAP = "map.ber"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bermap",
        description="Check a map file; prints 0 when the check passes, 1 otherwise.",
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_MAP, help="map file to read")
    parser.add_argument(
        "--full",
        action="store_true",
        help="run every map check instead of only the tile check",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map and print 0 if it passes the check, 1 if it does not."""
    args = _parser().parse_args(argv)
    try:
        grid = load_map(args.path)
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    passed = validate(grid) if args.full else has_valid_elements(grid)
    print(0 if passed else 1, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())