"""Two-stack sorting puzzle: stacks and operations, input parsing, a solver and a checker."""

__version__ = "0.1.0"