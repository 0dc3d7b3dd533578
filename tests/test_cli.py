import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_no_arguments(capsys):
    assert main([]) == 0
    assert _lines(capsys) == []


def test_sorts_single_argument_list(capsys):
    assert main(["3 2 1"]) == 0
    ops = _lines(capsys)
    stacks = Stacks([3, 2, 1])
    stacks.run(ops)
    assert stacks.is_solved()


def test_sorts_many_arguments(capsys):
    values = [9, -4, 17, 0, 3, 12, -8, 5]
    assert main([str(v) for v in values]) == 0
    stacks = Stacks(values)
    stacks.run(_lines(capsys))
    assert stacks.is_solved()


@pytest.mark.parametrize("args", [["1", "2", "3"], ["7"], ["1 2", "3"]])
def test_nothing_to_do_exits_with_one(args, capsys):
    assert main(args) == 1
    assert _lines(capsys) == []


@pytest.mark.parametrize(
    "args,message",
    [
        (["1", "a"], "Error: not a number"),
        (["1", "1"], "Error: duplicated number"),
        (["2147483648"], "Error: out of range"),
        ([""], "Error"),
    ],
)
def test_errors(args, message, capsys):
    assert main(args) == 1
    assert _lines(capsys) == [message]