import pytest

from simulator.tape import Tape
from simulator.turing_machine import TuringMachine
from tools.mirror_table import (
    MirrorSymbol,
    build_mirror_table,
    expected_steps,
    format_symbols,
    mirror_tape,
    parse_symbols,
)

A, B, E = MirrorSymbol.A, MirrorSymbol.B, MirrorSymbol.EMPTY


def check_result(input_symbols, expected_symbols):
    input_tape = Tape(MirrorSymbol, input_symbols)
    input_length = input_tape.length()
    tm = TuringMachine(build_mirror_table(), input_tape)
    answer, steps = tm.run()
    assert answer == Tape(MirrorSymbol, expected_symbols), "Compare results"
    assert steps == expected_steps(input_length), "Compare number of steps taken"


@pytest.mark.parametrize("input_symbols,expected_symbols", [
    ([], [E]),
    ([A], [A]),
    ([B], [B]),
    ([A, B], [B, A]),
    ([B, A, A], [A, A, B]),
    ([A, B, B, A], [A, B, B, A]),
    ([B, A, B, B, B], [B, A, B, B, B]),
])
def test_mirror_swap(input_symbols, expected_symbols):
    check_result(input_symbols, expected_symbols)


def test_empty_input_gives_empty_contents():
    tape, steps = TuringMachine(build_mirror_table(), Tape(MirrorSymbol)).run()
    assert steps == 1
    assert tape.length() == 0
    assert tape.contents() == []


def test_step_counts():
    assert [expected_steps(n) for n in range(4)] == [1, 3, 5, 7]


def test_parse_and_format():
    assert parse_symbols("ab_") == [A, B, E]
    assert format_symbols([B, E, A]) == "B_A"
    assert mirror_tape("AAB") == Tape(MirrorSymbol, [A, A, B])


def test_parse_rejects_unknown_symbols():
    with pytest.raises(ValueError):
        parse_symbols("ABC")
