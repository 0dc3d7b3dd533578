import pytest

from pushswap.parsing import (
    MAX_INT,
    MIN_INT,
    ParseError,
    assign_indices,
    check_in_range,
    check_is_num,
    check_no_duplicates,
    parse_arguments,
    parse_int,
    split_words,
)


@pytest.mark.parametrize("number", [0, 7, -7, 123456, MAX_INT, MIN_INT])
def test_parse_int_round_trip(number):
    assert parse_int(str(number)) == number


def test_parse_int_skips_whitespace_and_stops_at_non_digit():
    assert parse_int(" \t\n-42abc") == -42
    assert parse_int("+17x9") == 17


@pytest.mark.parametrize("text", ["", "abc", "-", "+", "--5"])
def test_parse_int_without_digits_is_zero(text):
    assert parse_int(text) == 0


def test_split_words_drops_empty_pieces():
    assert split_words("  3 1   2 ") == ["3", "1", "2"]
    assert split_words("    ") == []
    assert split_words("") == []


def test_split_words_splits_on_spaces_only():
    assert split_words("1\t2 3") == ["1\t2", "3"]


@pytest.mark.parametrize("text", ["0", "42", "+42", "-42", "007"])
def test_check_is_num_accepts_numbers(text):
    assert check_is_num(text) == text


@pytest.mark.parametrize("text", ["-", "+", "--5", "+-5", "5-", "4a", "a4", "1+2", "1.5"])
def test_check_is_num_rejects_non_numbers(text):
    with pytest.raises(ParseError, match="not a number"):
        check_is_num(text)


@pytest.mark.parametrize("number", [MIN_INT, MAX_INT, 0])
def test_check_in_range_accepts_bounds(number):
    assert check_in_range(number) == number


@pytest.mark.parametrize("number", [MIN_INT - 1, MAX_INT + 1])
def test_check_in_range_rejects_outside(number):
    with pytest.raises(ParseError, match="out of range"):
        check_in_range(number)


def test_check_no_duplicates():
    assert check_no_duplicates(iter([3, 1, 2])) == [3, 1, 2]
    with pytest.raises(ParseError, match="duplicated number"):
        check_no_duplicates([1, 2, 1])


def test_assign_indices_ranks_values():
    values = [30, -5, 12, 7]
    items = assign_indices(values)
    assert [item.value for item in items] == values
    assert sorted(item.index for item in items) == list(range(len(values)))
    by_rank = sorted(items, key=lambda it: it.index)
    assert [item.value for item in by_rank] == sorted(values)


def test_assign_indices_ties_follow_position():
    items = assign_indices([5, 5, 1])
    assert [item.index for item in items] == [1, 2, 0]


def test_parse_arguments_mixes_split_and_separate_arguments():
    items = parse_arguments(["3 1", "2", "  -4  "])
    assert [item.value for item in items] == [3, 1, 2, -4]
    assert [item.index for item in items] == [3, 1, 2, 0]


def test_parse_arguments_with_no_arguments():
    assert parse_arguments([]) == []


@pytest.mark.parametrize("arg", ["", "   "])
def test_parse_arguments_empty_argument(arg):
    with pytest.raises(ParseError) as info:
        parse_arguments(["1", arg])
    assert str(info.value) == "Error"


def test_parse_arguments_not_a_number():
    with pytest.raises(ParseError, match="not a number"):
        parse_arguments(["1 2 x"])


def test_parse_arguments_out_of_range():
    with pytest.raises(ParseError, match="out of range"):
        parse_arguments(["1", str(MAX_INT + 1)])


def test_parse_arguments_accepts_range_bounds():
    items = parse_arguments([str(MAX_INT), str(MIN_INT)])
    assert [item.value for item in items] == [MAX_INT, MIN_INT]


def test_parse_arguments_duplicates():
    with pytest.raises(ParseError, match="duplicated number"):
        parse_arguments(["1 2", "+2"])


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["abc"])