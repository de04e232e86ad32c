import random

import pytest

from pushswap.cli import main
from pushswap.stack import StackMachine


def _replay(numbers, operations):
    machine = StackMachine(numbers)
    actions = {
        "sa": lambda: machine.swap("a"),
        "sb": lambda: machine.swap("b"),
        "ss": machine.swap_both,
        "pa": lambda: machine.push("a"),
        "pb": lambda: machine.push("b"),
        "ra": lambda: machine.rotate("a"),
        "rb": lambda: machine.rotate("b"),
        "rr": machine.rotate_both,
        "rra": lambda: machine.reverse_rotate("a"),
        "rrb": lambda: machine.reverse_rotate("b"),
        "rrr": machine.reverse_rotate_both,
    }
    for operation in operations:
        actions[operation]()
    return machine


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_single_quoted_argument_is_split(capsys):
    assert main(["3 2 1"]) == 0
    assert capsys.readouterr().out == "sa\nrra\n"


def test_separate_arguments(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [["1", "1"], ["abc"], ["2147483648"], ["-2147483649"], [""], ["-"], ["1 2 2"], ["4", "x7"]],
)
def test_bad_input_reports_error(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_int_limits_are_accepted(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize("seed", range(4))
def test_printed_operations_sort_the_input(seed, capsys):
    rng = random.Random(seed)
    numbers = rng.sample(range(-5000, 5000), 40)
    assert main([" ".join(str(n) for n in numbers)]) == 0
    operations = capsys.readouterr().out.split()
    machine = _replay(numbers, operations)
    assert machine.a.numbers() == sorted(numbers)
    assert len(machine.b) == 0