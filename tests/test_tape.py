import pytest

from simulator.errors import EndOfTapeReached
from simulator.tape import Direction, Location, Tape
from tests.helpers import Symbol

A, B, E = Symbol.A, Symbol.B, Symbol.EMPTY


def test_new_tape_is_empty():
    tape = Tape(Symbol)
    assert tape.length() == 0
    assert tape.capacity() == 0
    assert tape.contents() == []


def test_set_keeps_trailing_empties_in_capacity():
    tape = Tape(Symbol)
    tape.set([A, E, B, E, E])
    assert tape.capacity() == 5
    assert tape.length() == 3
    assert tape.contents() == [A, E, B]


def test_set_replaces_previous_content():
    tape = Tape(Symbol, [A, A, A, A])
    tape.set([B])
    assert tape.capacity() == 1
    assert tape.contents() == [B]


def test_clear():
    tape = Tape(Symbol, [A, B])
    tape.clear()
    assert tape.capacity() == 0
    assert tape == Tape(Symbol)


def test_read_past_end_returns_empty_without_growing():
    tape = Tape(Symbol, [A])
    assert tape.read(0) == A
    assert tape.read(1) == E
    assert tape.read(100) == E
    assert tape.capacity() == 1


def test_write_grows_and_pads_with_empty():
    tape = Tape(Symbol, [A, B])
    tape.write(5, B)
    assert tape.capacity() == 6
    assert [tape.read(i) for i in range(2, 5)] == [E, E, E]
    assert tape.read(5) == B


def test_write_inside_bounds_never_shrinks():
    tape = Tape(Symbol, [A, B, A, B])
    tape.write(1, E)
    assert tape.capacity() == 4
    assert tape.contents() == [A, E, A, B]


@pytest.mark.parametrize("capacity,position", [(0, 0), (0, 3), (2, 2), (3, 10)])
def test_growth_property(capacity, position):
    tape = Tape(Symbol, [A] * capacity)
    tape.write(position, B)
    assert tape.capacity() >= position + 1
    assert all(tape.read(i) == E for i in range(capacity, position))
    assert tape.read(position) == B


def test_write_range_grows():
    tape = Tape(Symbol)
    tape.write_range(2, [A, B])
    assert tape.capacity() == 4
    assert tape.read_range(0, 4) == [E, E, A, B]


def test_write_range_overwrites():
    tape = Tape(Symbol, [A, A, A, A])
    tape.write_range(1, [B, B])
    assert tape.contents() == [A, B, B, A]


def test_read_range_inside_bounds():
    tape = Tape(Symbol, [A, B, A, E])
    assert tape.read_range(1, 3) == [B, A, E]
    assert tape.read_range(4, 0) == []


def test_read_range_past_capacity_is_an_error():
    tape = Tape(Symbol, [A, B])
    with pytest.raises(IndexError):
        tape.read_range(1, 5)


def test_negative_positions_rejected():
    tape = Tape(Symbol)
    with pytest.raises(IndexError):
        tape.write(-1, A)
    with pytest.raises(IndexError):
        tape.read(-1)


def test_length_of_all_empty_tape_is_zero():
    assert Tape(Symbol, [E, E, E]).length() == 0
    assert Tape(Symbol, [E]).contents() == []


def test_equality_ignores_trailing_empties():
    tape_true = Tape(Symbol, [A, E, B, E])
    tape_same = Tape(Symbol, [A, E, B, E])
    tape_missing_space = Tape(Symbol, [A, E, B])
    tape_different = Tape(Symbol, [A, E, E, B])

    assert tape_true == tape_same
    assert tape_true == tape_missing_space
    assert tape_true != tape_different


@pytest.mark.parametrize("symbols", [[], [A], [B, A, E, B], [E, A]])
@pytest.mark.parametrize("padding", [0, 1, 7])
def test_trim_equality_property(symbols, padding):
    assert Tape(Symbol, symbols) == Tape(Symbol, symbols + [E] * padding)


def test_empty_tape_equals_single_empty_cell():
    assert Tape(Symbol) == Tape(Symbol, [E])


def test_location_starts_valid_at_zero():
    loc = Location()
    assert loc.is_valid()
    assert loc.index == 0


def test_location_moves():
    loc = Location()
    loc.move_direction(Direction.RIGHT)
    loc.move_direction(Direction.RIGHT)
    assert loc.index == 2
    loc.move_direction(Direction.LEFT)
    assert loc.index == 1
    assert loc.is_valid()


def test_location_past_left_edge_is_permanently_invalid():
    loc = Location()
    loc.move_direction(Direction.LEFT)
    assert not loc.is_valid()
    loc.move_direction(Direction.RIGHT)
    assert not loc.is_valid()
    with pytest.raises(EndOfTapeReached):
        loc.index


def test_location_copy_is_independent():
    loc = Location(3)
    other = loc.copy()
    other.move_direction(Direction.RIGHT)
    assert loc.index == 3
    assert other.index == 4
    assert loc == Location(3)


def test_dereferencing_invalid_location_fails():
    tape = Tape(Symbol, [A])
    loc = Location()
    loc.move_direction(Direction.LEFT)
    with pytest.raises(EndOfTapeReached):
        tape.read_location(loc)
    with pytest.raises(EndOfTapeReached):
        tape.write_location(loc, B)
    assert tape.contents() == [A]


def test_write_location_grows_tape():
    tape = Tape(Symbol)
    loc = Location(2)
    tape.write_location(loc, A)
    assert tape.read_location(loc) == A
    assert tape.contents() == [E, E, A]


def test_write_range_with_no_symbols_does_not_grow():
    tape = Tape(Symbol, [A])
    tape.write_range(5, [])
    assert tape.capacity() == 1
    assert tape.contents() == [A]
