# pushswap

Sort a list of distinct integers using two stacks, **a** and **b**, and a
small fixed set of instructions. A checker replays a sequence of
instructions and reports whether it sorts the input.

## Instructions

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of a                  |
| `sb`  | swap the top two elements of b                  |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of b onto a                        |
| `pb`  | move the top of a onto b                        |
| `ra`  | rotate a up: its top becomes its bottom         |
| `rb`  | rotate b up                                     |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate a down: its bottom becomes its top       |
| `rrb` | rotate b down                                   |
| `rrr` | `rra` and `rrb` together                        |

A move on a stack with fewer than two elements, or a push from an empty
stack, changes nothing.

## Installation

```
pip install .
```

## Solving

You can give the numbers as separate arguments or as one string separated
by spaces. The first number is the top of stack a.

```
push-swap 3 2 1 5 4
push-swap "3 2 1 5 4"
```

The command prints the instructions one per line. If the input is already
sorted, or there are no arguments, it prints nothing.

Some input prints `Error` to standard error and exits with status 1:

- tokens that are not integers;
- values outside the 32-bit signed range, including `-2147483648` itself;
- duplicate values;
- an empty argument.

When you give several arguments, each one may begin with spaces or tabs.
When you give a single string, each piece must be an optional sign
followed by digits.

The strategy depends on how many numbers there are:

- two numbers take one swap;
- three numbers take at most two moves;
- four or five numbers push the smallest onto b, sort the rest and push
  them back;
- more than five numbers are moved to b in chunks and pulled back in order.

## Checking

`push-swap-checker` takes the same arguments as `push-swap`. It reads
instructions from standard input, one per line, and each line must end
with a newline. It prints `OK` if the instructions leave a sorted and b
empty, and `KO` otherwise. If the input is already sorted, it prints `OK`
without reading standard input.

It prints `Error` to standard error and exits with status 1 in two cases:
the arguments are bad, or a line holds an unknown instruction or lacks its
newline. A single argument made only of spaces also exits with status 1,
without printing anything. With no arguments the checker does nothing.

```
push-swap 3 2 1 5 4 | push-swap-checker 3 2 1 5 4
```

## Using the library

```python
from pushswap.parsing import parse_arguments
from pushswap.stacks import Stacks, is_sorted
from pushswap.sorting import sort_stacks

entries = parse_arguments(["3", "2", "1", "5", "4"])
if not is_sorted(entries):
    stacks = Stacks(entries)
    moves = sort_stacks(stacks)
    assert stacks.is_solved()
```

The library has these parts:

- `pushswap.stacks` has `Move` (an enum of the eleven instructions),
  `Entry` (a value and its 1-based rank) and `Stacks`. `Stacks` has one
  method per move, `apply(move)` and `is_solved()`. It records the moves it
  makes in `moves`: `ss` is recorded every time it is made, and the other
  moves only when they change something.
- `pushswap.parsing` has `parse_arguments`, `parse_int`, `is_valid_token`
  and `rank_values`. They raise `InputError` on bad input.
- `pushswap.sorting` has `sort_stacks` and the strategies `sort_three`,
  `sort_four_five` and `sort_many`, as well as `ChunkPlan.for_count`.
  `sort_stacks` always swaps two entries, so check `is_sorted` first.
- `pushswap.cli.solve(args)` returns the moves for a list of arguments.
  It returns no moves when the input is already sorted.
- `pushswap.checker.check(entries, lines)` replays instruction lines
  against parsed entries. `parse_move(line)` reads a single line. An
  unknown instruction raises `InstructionError`.

## What it does not do

The package only prints and checks instruction sequences. It does not show
the stacks step by step.