"""Command that prints the operations sorting the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorting import is_sorted, solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        items = parse_arguments(args)
    except ParseError as err:
        print(err)
        return 1
    if len(items) == 1 or is_sorted(items):
        return 1
    for op in solve(items):
        print(op)
    return 0


if __name__ == "__main__":
    sys.exit(main())