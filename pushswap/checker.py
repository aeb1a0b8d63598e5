"""Command that reads moves from standard input and checks they sort the numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import Entry, Move, Stacks, is_sorted


class InstructionError(ValueError):
    """Raised for a line that is not a known move followed by a newline."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_move(line: str) -> Move:
    """Read one instruction line; it must end with a newline."""
    if not line.endswith("\n"):
        raise InstructionError()
    try:
        return Move(line[:-1])
    except ValueError:
        raise InstructionError() from None


def check(entries: Iterable[Entry], lines: Iterable[str]) -> bool:
    """Apply the moves in lines to the entries and report whether they end sorted."""
    stacks = Stacks(entries)
    for line in lines:
        stacks.apply(parse_move(line))
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Print OK or KO for the moves on standard input, or "Error" on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    if len(args) == 1 and args[0] and not args[0].strip(" "):
        return 1
    try:
        entries = parse_arguments(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    if is_sorted(entries):
        print("OK")
        return 0
    try:
        solved = check(entries, sys.stdin)
    except InstructionError:
        print("Error", file=sys.stderr)
        return 1
    print("OK" if solved else "KO")
    return 0