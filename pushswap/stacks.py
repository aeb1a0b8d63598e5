"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class Move(str, Enum):
    """The instructions understood by the puzzle, spelled as they are printed."""

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


@dataclass
class Entry:
    """A number on a stack together with its 1-based rank among all numbers."""

    value: int
    index: int = 0


def is_sorted(entries: Iterable[Entry]) -> bool:
    """Return True if the values never decrease from top to bottom."""
    values = [entry.value for entry in entries]
    return all(lower <= upper for lower, upper in zip(values, values[1:]))


def _swap(stack: deque[Entry]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[Entry], steps: int) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(steps)
    return True


def _push(source: deque[Entry], target: deque[Entry]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of the moves made.

    A move is recorded only when it is announced: single-stack moves when
    they change something, ``rr`` and ``rrr`` when either stack changes,
    and ``ss`` every time it is made.
    """

    def __init__(self, entries: Iterable[Entry]) -> None:
        self.a: deque[Entry] = deque(entries)
        self.b: deque[Entry] = deque()
        self.moves: list[Move] = []

    def __repr__(self) -> str:
        a = [entry.value for entry in self.a]
        b = [entry.value for entry in self.b]
        return f"Stacks(a={a}, b={b})"

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.a)

    def _record(self, move: Move, changed: bool) -> None:
        if changed:
            self.moves.append(move)

    def apply(self, move: Move | str) -> None:
        """Perform a move given as a Move or its spelling."""
        move = Move(move)
        getattr(self, move.value)()

    def sa(self) -> None:
        """Swap the two top entries of a."""
        self._record(Move.SA, _swap(self.a))

    def sb(self) -> None:
        """Swap the two top entries of b."""
        self._record(Move.SB, _swap(self.b))

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.moves.append(Move.SS)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._record(Move.PA, _push(self.b, self.a))

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._record(Move.PB, _push(self.a, self.b))

    def ra(self) -> None:
        """Send the top of a to its bottom."""
        self._record(Move.RA, _rotate(self.a, -1))

    def rb(self) -> None:
        """Send the top of b to its bottom."""
        self._record(Move.RB, _rotate(self.b, -1))

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        changed_a = _rotate(self.a, -1)
        changed_b = _rotate(self.b, -1)
        self._record(Move.RR, changed_a or changed_b)

    def rra(self) -> None:
        """Bring the bottom of a to its top."""
        self._record(Move.RRA, _rotate(self.a, 1))

    def rrb(self) -> None:
        """Bring the bottom of b to its top."""
        self._record(Move.RRB, _rotate(self.b, 1))

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        changed_a = _rotate(self.a, 1)
        changed_b = _rotate(self.b, 1)
        self._record(Move.RRR, changed_a or changed_b)

    def is_solved(self) -> bool:
        """Return True if a is in ascending order and b is empty."""
        return not self.b and is_sorted(self.a)