"""Reading the numbers of the puzzle from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import Item

MIN_INT = -2147483648
MAX_INT = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid set of numbers."""


def parse_int(text: str) -> int:
    """Read a leading integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read up to the first non-digit. Without digits the
    result is 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def split_words(text: str) -> list[str]:
    """Split on spaces, dropping the empty pieces between repeated spaces."""
    return [word for word in text.split(" ") if word]


def check_is_num(text: str) -> str:
    """Return ``text`` if it is an optionally signed run of digits.

    Raises ParseError otherwise. A sign is allowed only in front.
    """
    if text[:1] in ("+", "-") and text[1:2] not in tuple(_DIGITS):
        raise ParseError("Error: not a number")
    for position, char in enumerate(text):
        if char in _DIGITS:
            continue
        if position != 0 or char not in "+-":
            raise ParseError("Error: not a number")
    return text


def check_in_range(number: int) -> int:
    """Return ``number`` if it fits a signed 32-bit integer, else raise."""
    if number < MIN_INT or number > MAX_INT:
        raise ParseError("Error: out of range")
    return number


def check_no_duplicates(values: Iterable[int]) -> list[int]:
    """Return the values as a list, raising ParseError on any repeat."""
    result = list(values)
    if len(set(result)) != len(result):
        raise ParseError("Error: duplicated number")
    return result


def assign_indices(values: Sequence[int]) -> list[Item]:
    """Wrap each value in an Item whose index is its rank, starting at 0.

    Equal values are ranked in the order they appear.
    """
    items = [Item(value) for value in values]
    for rank, item in enumerate(sorted(items, key=lambda it: it.value)):
        item.index = rank
    return items


def parse_arguments(args: Iterable[str]) -> list[Item]:
    """Turn arguments into ranked items, top of the stack first.

    Each argument may hold several numbers separated by spaces. An
    argument with no numbers at all, a word that is not a number, a
    number outside the 32-bit range or a repeated number raises
    ParseError.
    """
    values: list[int] = []
    for arg in args:
        words = split_words(arg)
        if not words:
            raise ParseError("Error")
        for word in words:
            check_is_num(word)
            values.append(check_in_range(parse_int(word)))
    items = assign_indices(values)
    check_no_duplicates(item.value for item in items)
    return items