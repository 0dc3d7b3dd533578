"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorting import is_sorted
from pushswap.stacks import Operation, Stacks


class InstructionError(ValueError):
    """Raised when a line of input is not a known instruction."""


def parse_instruction(line: str) -> Operation:
    """Turn one input line, newline included, into an operation.

    The line must be exactly an operation name followed by a newline;
    anything else raises InstructionError.
    """
    if not line.endswith("\n"):
        raise InstructionError("Error: wrong instruction")
    try:
        return Operation(line[:-1])
    except ValueError:
        raise InstructionError("Error: wrong instruction") from None


def read_instructions(stream: Iterable[str]) -> Iterator[Operation]:
    """Yield the operations read line by line from ``stream``.

    Lines are parsed as they are read, so a bad line raises only when
    it is reached.
    """
    for line in stream:
        yield parse_instruction(line)


def check(items: Sequence[Any], instructions: Iterable[Operation | str]) -> bool:
    """Apply the instructions to ``items`` and report whether they end sorted.

    The result is True when stack ``b`` ends empty and stack ``a`` holds
    at least two values in ascending order.
    """
    stacks = Stacks(items)
    stacks.run(instructions)
    return not stacks.b and is_sorted(stacks.a)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        items = parse_arguments(args)
    except ParseError as err:
        print(err)
        return 1
    if len(items) == 1:
        print("OK")
        return 1
    try:
        solved = check(items, read_instructions(sys.stdin))
    except InstructionError as err:
        print(err)
        return 1
    print("OK" if solved else "KO")
    return 0


if __name__ == "__main__":
    sys.exit(main())