"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Optional


@dataclass
class Item:
    """A number on a stack together with its rank among all numbers."""

    value: int
    index: int = -1


class Operation(str, Enum):
    """The operations; each value is the instruction's written name."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def swap(stack: Deque[Any]) -> bool:
    """Exchange the two top elements. Does nothing with fewer than two."""
    if len(stack) < 2:
        return False
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)
    return True


def push(source: Deque[Any], target: Deque[Any]) -> bool:
    """Move the top of ``source`` onto ``target``. Does nothing if empty."""
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def rotate(stack: Deque[Any]) -> bool:
    """Move the top element to the bottom. Does nothing if empty."""
    if not stack:
        return False
    stack.rotate(-1)
    return True


def reverse_rotate(stack: Deque[Any]) -> bool:
    """Move the bottom element to the top. Does nothing with fewer than two."""
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is at its left end.

    ``log``, when given, is called with every operation that took effect,
    in the order they were performed.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        log: Optional[Callable[[Operation], Any]] = None,
    ) -> None:
        self.a: Deque[Any] = deque(items)
        self.b: Deque[Any] = deque()
        self.log = log

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, op: Operation | str) -> bool:
        """Perform one operation and report whether it took effect.

        For the double rotations the result is that of stack ``a``.
        ``ss`` swaps ``a`` only when ``b`` could be swapped, and its
        result is that of ``b``. Unknown names raise ValueError.
        """
        op = Operation(op)
        if op is Operation.SA:
            done = swap(self.a)
        elif op is Operation.SB:
            done = swap(self.b)
        elif op is Operation.SS:
            done = swap(self.b)
            if done:
                swap(self.a)
        elif op is Operation.PA:
            done = push(self.b, self.a)
        elif op is Operation.PB:
            done = push(self.a, self.b)
        elif op is Operation.RA:
            done = rotate(self.a)
        elif op is Operation.RB:
            done = rotate(self.b)
        elif op is Operation.RR:
            done = rotate(self.a)
            rotate(self.b)
        elif op is Operation.RRA:
            done = reverse_rotate(self.a)
        elif op is Operation.RRB:
            done = reverse_rotate(self.b)
        else:
            done = reverse_rotate(self.a)
            reverse_rotate(self.b)
        if done and self.log is not None:
            self.log(op)
        return done

    def run(self, ops: Iterable[Operation | str]) -> None:
        """Perform a sequence of operations in order."""
        for op in ops:
            self.apply(op)

    def is_solved(self) -> bool:
        """True when ``b`` is empty and ``a`` is non-empty and ascending."""
        if self.b or not self.a:
            return False
        values = [_value_of(item) for item in self.a]
        return all(x <= y for x, y in zip(values, values[1:]))


def _value_of(item: Any) -> Any:
    return item.value if isinstance(item, Item) else item