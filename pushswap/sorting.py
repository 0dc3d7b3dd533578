"""Strategies that sort stack ``a`` and record the operations used."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Deque, Optional

from pushswap.parsing import assign_indices
from pushswap.stacks import Item, Operation, Stacks


def _value_of(item: Any) -> Any:
    return item.value if isinstance(item, Item) else item


def is_sorted(items: Iterable[Any]) -> bool:
    """True when there are at least two values and they never decrease."""
    values = [_value_of(item) for item in items]
    if len(values) < 2:
        return False
    return all(x <= y for x, y in zip(values, values[1:]))


def create_chunks(size: int, divide: int) -> list[tuple[int, int]]:
    """Split ranks ``0 .. size - 3`` into at most ``divide`` ranges.

    Neighbouring ranges share their boundary rank; the last one always
    ends at ``size - 3``.
    """
    step = size // divide
    chunks: list[tuple[int, int]] = []
    start = 0
    while len(chunks) + 1 < divide and start + step < size - 3:
        chunks.append((start, start + step))
        start += step
    chunks.append((start, size - 3))
    return chunks


def chunk_count(size: int) -> int:
    """How many chunks the large sort splits a stack of ``size`` into."""
    if size < 400:
        return 5
    if size < 750:
        return 13
    count = 5
    while size > 0:
        size -= 50
        count += 1
    return count


def _position(stack: Deque[Item], item: Item) -> int:
    return next(pos for pos, it in enumerate(stack) if it.index == item.index)


def _depth(stack: Deque[Item], item: Optional[Item]) -> int:
    """Number of elements from ``item`` down to the bottom, inclusive."""
    if item is None:
        return 0
    return len(stack) - _position(stack, item)


def _away(stack: Deque[Item], item: Optional[Item]) -> bool:
    return bool(stack) and item is not None and stack[0].index != item.index


def _sort_two(stacks: Stacks) -> None:
    a = stacks.a
    if len(a) >= 2 and a[0].value > a[1].value:
        stacks.apply(Operation.SA)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two or three items using at most two moves."""
    a = stacks.a
    if len(a) == 2:
        _sort_two(stacks)
        return
    if len(a) < 2:
        return
    top, second, last = a[0].index, a[1].index, a[-1].index
    if top > second and top < last:
        stacks.apply(Operation.SA)
    elif top > second and top > last and second < last:
        stacks.apply(Operation.RA)
    elif top < second and second > last and last < top:
        stacks.apply(Operation.RRA)
    elif top > second and second > last and top > last:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RRA)
    elif top < second and second > last and top < last:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RA)


def sort_five(stacks: Stacks) -> None:
    """Sort four or five items: park the smallest on ``b``, sort three."""
    a = stacks.a
    while len(a) > 3:
        smallest = min(a, key=lambda it: it.index)
        if _depth(a, smallest) > 5 // 2:
            while a[0].index != smallest.index:
                stacks.apply(Operation.RA)
        else:
            while a[0].index != smallest.index:
                stacks.apply(Operation.RRA)
        stacks.apply(Operation.PB)
    sort_three(stacks)
    while stacks.b:
        stacks.apply(Operation.PA)


def _cheapest_in_chunk(a: Deque[Item], chunk: tuple[int, int]) -> Item:
    """The item of the chunk nearest to either end of ``a``."""
    low, high = chunk
    inside = [pos for pos, it in enumerate(a) if low <= it.index <= high]
    first = inside[0] if inside else len(a) - 1
    last = inside[-1] if inside else 0
    if first <= len(a) - last:
        return a[first]
    return a[last]


def _place_in_b(b: Deque[Item], target: Item) -> tuple[Optional[Item], bool]:
    """The item of ``b`` that should sit on top before ``target`` is pushed.

    The flag is False when the pushed item must afterwards be rotated
    to the bottom of ``b``.
    """
    if not b:
        return None, True
    largest = max(b, key=lambda it: it.index)
    smallest = min(b, key=lambda it: it.index)
    if largest.index < target.index:
        return largest, True
    if smallest.index > target.index:
        return largest, len(b) <= 2
    below = [it for it in b if it.index < target.index]
    return max(below, key=lambda it: it.index), True


def _bring_to_top(
    stacks: Stacks,
    target_a: Item,
    target_b: Optional[Item],
    size_a: int,
    size_b: int,
) -> None:
    a, b = stacks.a, stacks.b
    depth_a = _depth(a, target_a)
    depth_b = _depth(b, target_b)
    upper_a = depth_a >= size_a // 2
    upper_b = depth_b >= size_b // 2
    lower_a = depth_a <= size_a // 2
    lower_b = depth_b <= size_b // 2
    while upper_b and upper_a and _away(a, target_a) and _away(b, target_b):
        stacks.apply(Operation.RR)
    while upper_b and _away(b, target_b):
        stacks.apply(Operation.RB)
    while upper_a and _away(a, target_a):
        stacks.apply(Operation.RA)
    while lower_a and lower_b and _away(b, target_b) and _away(a, target_a):
        stacks.apply(Operation.RRR)
    while lower_b and _away(b, target_b):
        stacks.apply(Operation.RRB)
    while lower_a and _away(a, target_a):
        stacks.apply(Operation.RRA)


def _return_largest(stacks: Stacks) -> None:
    b = stacks.b
    largest = max(b, key=lambda it: it.value)
    if _depth(b, largest) > len(b) // 2:
        while b and b[0].index != largest.index:
            stacks.apply(Operation.RB)
    else:
        while b and b[0].index != largest.index:
            stacks.apply(Operation.RRB)
    stacks.apply(Operation.PA)


def sort_large(stacks: Stacks) -> None:
    """Sort by pushing chunk by chunk onto ``b`` in order, then back."""
    a, b = stacks.a, stacks.b
    size = len(a)
    chunks = create_chunks(size, chunk_count(size))
    chunk = 0
    for count in range(max(size - 2, 0)):
        if count > chunks[chunk][1]:
            chunk += 1
        size_a, size_b = len(a), len(b)
        target_a = _cheapest_in_chunk(a, chunks[chunk])
        target_b, stay_on_top = _place_in_b(b, target_a)
        _bring_to_top(stacks, target_a, target_b, size_a, size_b)
        stacks.apply(Operation.PB)
        if not stay_on_top:
            stacks.apply(Operation.RB)
        if len(b) == 2 and b[0].index < b[1].index:
            stacks.apply(Operation.SB)
    _sort_two(stacks)
    while b:
        _return_largest(stacks)


def solve(items: Sequence[Any]) -> list[Operation]:
    """Return the operations that sort ``items``, top of the stack first.

    Plain integers are ranked first; a single item or an already sorted
    sequence needs no operations.
    """
    items = list(items)
    if items and not isinstance(items[0], Item):
        items = assign_indices(items)
    ops: list[Operation] = []
    if len(items) <= 1 or is_sorted(items):
        return ops
    stacks = Stacks(items, log=ops.append)
    if len(items) <= 3:
        sort_three(stacks)
    elif len(items) <= 5:
        sort_five(stacks)
    else:
        sort_large(stacks)
    return ops