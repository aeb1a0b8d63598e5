"""Two-stack sorting puzzle: stacks and moves, a solver and an instruction checker."""

__version__ = "0.1.0"
__all__ = ["checker", "cli", "parsing", "sorting", "stacks"]