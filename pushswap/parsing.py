"""Turning command-line arguments into ranked entries for stack a."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.stacks import Entry

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class InputError(ValueError):
    """Raised when the numbers given to the program are not acceptable."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _has_sign(text: str) -> bool:
    return len(text) > 1 and text[0] in "+-"


def is_valid_token(text: str) -> bool:
    """Return True if text is empty or an optional sign followed by digits only."""
    if not text:
        return True
    body = text[1:] if _has_sign(text) else text
    return all("0" <= char <= "9" for char in body)


def parse_int(text: str) -> int:
    """Read a 32-bit integer, allowing leading spaces and tabs.

    Whitespace alone reads as zero. Anything that is not a digit after the
    optional sign, values beyond the 32-bit range, and the smallest 32-bit
    value itself are rejected with InputError.
    """
    if not text:
        raise InputError()
    body = text.lstrip(" \t")
    negative = False
    if _has_sign(body):
        negative = body[0] == "-"
        body = body[1:]
    magnitude = 0
    for char in body:
        if not "0" <= char <= "9":
            raise InputError()
        digit = ord(char) - ord("0")
        if negative and magnitude * 10 + digit == -INT_MIN:
            raise InputError()
        if magnitude > (INT_MAX - digit) // 10:
            raise InputError()
        magnitude = magnitude * 10 + digit
    return -magnitude if negative else magnitude


def rank_values(values: Iterable[int]) -> list[int]:
    """Return the 1-based rank of each value; duplicates raise InputError."""
    values = list(values)
    if len(set(values)) != len(values):
        raise InputError()
    order = {value: rank for rank, value in enumerate(sorted(values), start=1)}
    return [order[value] for value in values]


def parse_arguments(args: Sequence[str]) -> list[Entry]:
    """Build the entries of stack a, top first, from the program arguments.

    A single argument is split on spaces and every piece must be a plain
    signed number; several arguments are each read as one number. No
    arguments give no entries.
    """
    if not args:
        return []
    if len(args) == 1:
        text = args[0]
        if not text:
            raise InputError()
        tokens = [token for token in text.split(" ") if token]
        if not tokens or not all(is_valid_token(token) for token in tokens):
            raise InputError()
    else:
        tokens = list(args)
    values = [parse_int(token) for token in tokens]
    return [
        Entry(value=value, index=rank)
        for value, rank in zip(values, rank_values(values))
    ]