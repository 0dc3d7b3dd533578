# pushswap

Sort a list of distinct integers with two stacks, `a` and `b`, and a
fixed set of instructions. The package prints the instructions that sort
the numbers, and checks whether a given sequence of instructions sorts
them.

## Instructions

| Name  | Effect                                             |
|-------|----------------------------------------------------|
| `sa`  | swap the top two items of `a`                      |
| `sb`  | swap the top two items of `b`                      |
| `ss`  | `sb`, then `sa` only if `sb` had two items to swap |
| `pa`  | move the top of `b` onto `a`                       |
| `pb`  | move the top of `a` onto `b`                       |
| `ra`  | rotate `a` up: the top item goes to the bottom     |
| `rb`  | rotate `b` up                                      |
| `rr`  | `ra` and `rb` together                             |
| `rra` | rotate `a` down: the bottom item goes to the top   |
| `rrb` | rotate `b` down                                    |
| `rrr` | `rra` and `rrb` together                           |

An instruction that cannot act (for example `pa` with `b` empty) does
nothing. The first number given is the top of stack `a`.

## Installing

    pip install .

## Producing instructions

Numbers may be given as separate arguments or as space-separated words
within one argument:

    push-swap 3 2 1
    push-swap "5 4 3 2 1"

One instruction is printed per line and the exit status is 0. Up to
three numbers are sorted with at most two instructions, four or five by
parking the smallest ones on `b`, and more by moving them to `b` chunk
by chunk and back.

With no arguments nothing happens and the status is 0. When only one
number is given, or the numbers are already in ascending order, nothing
is printed and the status is 1. An empty argument, a word that is not an
optionally signed integer, a number outside the 32-bit signed range, or
a repeated number prints an error message (`Error`, `Error: not a
number`, `Error: out of range` or `Error: duplicated number`) on
standard output and exits with status 1.

## Checking instructions

`push-swap-checker` takes the same numbers, reads instructions from
standard input, one per line, each ending in a newline, applies them,
and prints `OK` if stack `b` ends empty and stack `a` holds at least two
numbers in ascending order, otherwise `KO`:

    push-swap 3 1 2 | push-swap-checker 3 1 2

A line that is not exactly an instruction name followed by a newline
prints `Error: wrong instruction` and exits with status 1. Invalid
numbers are rejected as for `push-swap`. A single number prints `OK`
without reading any input, with status 1.

## Using it from Python

    from pushswap.sorting import solve
    from pushswap.checker import check

    ops = solve([3, 1, 2])
    assert check([3, 1, 2], ops)

- `pushswap.stacks`: `Stacks` holds the two stacks (`a` and `b`, top at
  the left) and performs `Operation` values with `apply` and `run`;
  `is_solved` tells whether `a` is ascending and `b` empty. The plain
  functions `swap`, `push`, `rotate` and `reverse_rotate` act on single
  deques. `Item` pairs a value with its rank.
- `pushswap.parsing`: `parse_arguments` turns command-line words into
  ranked `Item`s and raises `ParseError` on bad input; `parse_int`,
  `split_words`, `check_is_num`, `check_in_range`, `check_no_duplicates`
  and `assign_indices` are its building blocks.
- `pushswap.sorting`: `solve` returns the list of operations;
  `sort_three`, `sort_five` and `sort_large` act on a `Stacks` directly;
  `is_sorted`, `create_chunks` and `chunk_count` are helpers.
- `pushswap.checker`: `parse_instruction`, `read_instructions` and
  `check`, with `InstructionError` for unknown instructions.

## Running the tests

    pip install ".[test]"
    pytest