import pytest

from pushswap.parsing import (
    InputError,
    is_valid_token,
    parse_arguments,
    parse_int,
    rank_values,
)


@pytest.mark.parametrize("text", ["", "42", "-7", "+7", "007"])
def test_valid_tokens(text):
    assert is_valid_token(text) is True


@pytest.mark.parametrize("text", ["-", "+", "--5", "5a", "1.5", "\t3", "+-1"])
def test_invalid_tokens(text):
    assert is_valid_token(text) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+42", 42),
        ("  \t17", 17),
        ("2147483647", 2147483647),
        ("-2147483647", -2147483647),
        ("0", 0),
    ],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


def test_parse_int_whitespace_only_is_zero():
    assert parse_int(" \t ") == 0


@pytest.mark.parametrize(
    "text",
    ["", "2147483648", "-2147483648", "99999999999", "12 ", "-", "+", "4x", "--3"],
)
def test_parse_int_rejects(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_int("abc")


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("abc")


def test_rank_of_permutation_is_itself():
    assert rank_values([3, 1, 2, 5, 4]) == [3, 1, 2, 5, 4]


def test_rank_values_is_permutation():
    values = [100, -5, 42, 7, -1000, 0]
    ranks = rank_values(values)
    assert sorted(ranks) == list(range(1, len(values) + 1))
    by_rank = [value for _, value in sorted(zip(ranks, values))]
    assert by_rank == sorted(values)


def test_rank_values_duplicates():
    with pytest.raises(InputError):
        rank_values([1, 2, 1])


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


def test_parse_arguments_single_string():
    entries = parse_arguments(["3 -1  2"])
    assert [entry.value for entry in entries] == [3, -1, 2]
    assert [entry.index for entry in entries] == [3, 1, 2]


def test_parse_arguments_many():
    entries = parse_arguments(["10", "-20", "30"])
    assert [entry.value for entry in entries] == [10, -20, 30]
    assert [entry.index for entry in entries] == [2, 1, 3]


def test_parse_arguments_single_number():
    entries = parse_arguments(["5"])
    assert [(entry.value, entry.index) for entry in entries] == [(5, 1)]


def test_parse_arguments_many_allows_leading_blanks():
    entries = parse_arguments([" 4", "\t2"])
    assert [entry.value for entry in entries] == [4, 2]


@pytest.mark.parametrize(
    "args",
    [
        [""],
        ["   "],
        ["1 2 x"],
        ["1\t2"],
        ["1 - 2"],
        ["1", ""],
        ["1", "2 "],
        ["1", "1"],
        ["4 2 4"],
        ["1", "2147483648"],
    ],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_parse_arguments_ranks_cover_all():
    entries = parse_arguments(["9 8 7 6 5 4 3 2 1 0"])
    assert sorted(entry.index for entry in entries) == list(range(1, 11))
    assert entries[0].index == 10
    assert entries[-1].index == 1