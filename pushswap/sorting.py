"""Strategies that sort stack a, announcing every move they make."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice

from pushswap.stacks import Entry, Move, Stacks, is_sorted


@dataclass(frozen=True)
class ChunkPlan:
    """How many ranks go into each chunk when sorting many numbers."""

    count: int
    divisor: int
    chunk_size: int

    @classmethod
    def for_count(cls, count: int) -> "ChunkPlan":
        """Choose the chunk layout for a stack of ``count`` numbers."""
        if count >= 280:
            divisor = 19
        elif count >= 90:
            divisor = 11
        elif count >= 6:
            divisor = 5
        else:
            divisor = 1
        return cls(count=count, divisor=divisor, chunk_size=count // divisor)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack a of exactly three entries in at most two moves."""
    while not is_sorted(stacks.a):
        first, second, third = (entry.value for entry in islice(stacks.a, 3))
        if second > first > third:
            stacks.rra()
        elif first > third > second:
            stacks.ra()
        else:
            stacks.sa()


def _lift_small(stacks: Stacks) -> None:
    """Rotate a until one of the two smallest ranks is on top."""
    if all(entry.index >= 3 for entry in islice(stacks.a, 3)):
        stacks.rra()
    while stacks.a[0].index >= 3:
        stacks.ra()


def sort_four_five(stacks: Stacks) -> None:
    """Sort a stack a of four or five entries ranked from 1."""
    five = len(stacks.a) == 5
    _lift_small(stacks)
    if five:
        stacks.pb()
        _lift_small(stacks)
    if not is_sorted(islice(stacks.a, 1, None)):
        stacks.pb()
        sort_three(stacks)
        stacks.pa()
    if stacks.a[0].index > stacks.a[1].index:
        stacks.sa()
    if five:
        stacks.pa()
        if stacks.a[0].index > stacks.a[1].index:
            stacks.sa()


def _push_chunks(stacks: Stacks, plan: ChunkPlan) -> None:
    """Move all of a onto b two chunks at a time, lower chunk sent down."""
    low, high = 0, 2 * plan.chunk_size
    while stacks.a:
        pushed = 0
        while pushed < high - low:
            current = stacks.a[0].index
            if low < current <= high:
                stacks.pb()
                pushed += 1
                if current <= high - plan.chunk_size:
                    a = stacks.a
                    if a and (a[0].index <= low or a[0].index > high):
                        stacks.rr()
                    else:
                        stacks.rb()
            else:
                stacks.ra()
        low = high
        high = min(high + 2 * plan.chunk_size, plan.count)


def _within_reach(stack: deque[Entry], target: int, chunk_size: int) -> bool:
    return any(entry.index == target for entry in islice(stack, chunk_size + 1))


def _bring_to_top(stacks: Stacks, target: int, from_top: bool) -> int:
    """Rotate b until ``target`` is on top; return 1 if its predecessor went to a."""
    pushed_next = 0
    while stacks.b and stacks.b[0].index != target:
        if stacks.b[0].index == target - 1:
            stacks.pa()
            pushed_next = 1
            if not stacks.b:
                break
        if stacks.b[0].index != target:
            if from_top:
                stacks.rb()
            else:
                stacks.rrb()
    return pushed_next


def sort_many(stacks: Stacks) -> None:
    """Sort more than five entries by chunking them into b and pulling back."""
    plan = ChunkPlan.for_count(len(stacks.a))
    _push_chunks(stacks, plan)
    current = plan.count
    while stacks.b or current > 0:
        from_top = _within_reach(stacks.b, current, plan.chunk_size)
        pushed_next = _bring_to_top(stacks, current, from_top)
        stacks.pa()
        a, b = stacks.a, stacks.b
        if len(a) > 1 and a[0].index > a[1].index:
            if len(b) > 1 and b[0].index < b[1].index:
                stacks.ss()
            else:
                stacks.sa()
        current -= pushed_next + 1


def sort_stacks(stacks: Stacks) -> list[Move]:
    """Pick the strategy for the size of a, run it and return the moves made.

    Two entries are always swapped, so callers should check first whether
    a is already in order.
    """
    count = len(stacks.a)
    if count == 2:
        stacks.sa()
    elif count == 3:
        sort_three(stacks)
    elif count in (4, 5):
        sort_four_five(stacks)
    elif count > 5:
        sort_many(stacks)
    return stacks.moves