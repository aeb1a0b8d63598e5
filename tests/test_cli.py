import random
import sys

import pytest

from pushswap.cli import main, solve
from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import Stacks


def replay(args, moves):
    stacks = Stacks(parse_arguments(args))
    for move in moves:
        stacks.apply(move)
    return stacks


def test_main_two_numbers(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_sorted_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["1", "x"], [""], ["   "], ["1 2 a"], ["2147483648", "1"], ["1", ""]],
)
def test_main_bad_input(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_reads_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["push_swap", "3", "1", "2", "-7", "5"])
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert replay(["3", "1", "2", "-7", "5"], lines).is_solved()


@pytest.mark.parametrize("count", [3, 5, 10, 100])
def test_solve_round_trip(count):
    rng = random.Random(count)
    values = [str(v) for v in rng.sample(range(-500, 500), count)]
    moves = solve(values)
    assert replay(values, moves).is_solved()


def test_solve_already_sorted():
    assert solve(["-1", "0", "1"]) == []


def test_solve_duplicates():
    with pytest.raises(InputError):
        solve(["4 2 4"])