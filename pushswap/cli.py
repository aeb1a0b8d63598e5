"""Command that prints the moves sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import sort_stacks
from pushswap.stacks import Move, Stacks, is_sorted


def solve(args: Sequence[str]) -> list[Move]:
    """Return the moves that sort the numbers in args; none if already sorted."""
    entries = parse_arguments(args)
    if not entries or is_sorted(entries):
        return []
    stacks = Stacks(entries)
    return list(sort_stacks(stacks))


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line, or "Error" on standard error for bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        moves = solve(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0