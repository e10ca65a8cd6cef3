from enum import Enum

from simulator.errors import EndOfTapeReached


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


class Location:
    """
    A head position on the tape.

    Moving left from cell 0 does not wrap; the location becomes invalid for
    good and any later dereference raises EndOfTapeReached.
    """

    __slots__ = ("_index", "_valid")

    def __init__(self, index=0):
        if index < 0:
            raise ValueError(f"Location index must be >= 0, got {index}")
        self._index = index
        self._valid = True

    @property
    def index(self):
        if not self._valid:
            raise EndOfTapeReached()
        return self._index

    def is_valid(self):
        return self._valid

    def move_direction(self, direction):
        if direction == Direction.RIGHT:
            if self._valid:
                self._index += 1
        elif self._index == 0:
            self._valid = False
        elif self._valid:
            self._index -= 1

    def copy(self):
        other = Location(self._index)
        other._valid = self._valid
        return other

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        if not (self._valid and other._valid):
            return self._valid == other._valid
        return self._index == other._index

    def __hash__(self):
        return hash((self._index, self._valid)) if self._valid else hash(None)

    def __repr__(self):
        if not self._valid:
            return "Location(<past left edge>)"
        return f"Location({self._index})"


class Tape:
    """
    Tape storage, infinite in the positive direction.

    Only a prefix is held in memory. Reads past it return the empty symbol,
    writes past it pad the gap with empties. length() ignores trailing empties
    and so does equality, so padding left behind by a run never matters when
    comparing results.
    """

    def __init__(self, alphabet, symbols=None):
        self.alphabet = alphabet
        self._empty = alphabet.empty()
        self._cells = []
        if symbols is not None:
            self.set(symbols)

    def _extend_to_fit(self, size):
        # Never truncates.
        if len(self._cells) < size:
            self._cells.extend([self._empty] * (size - len(self._cells)))

    def clear(self):
        self._cells.clear()

    def set(self, symbols):
        self._cells = list(symbols)

    def write(self, position, symbol):
        if position < 0:
            raise IndexError(f"Tape position must be >= 0, got {position}")
        self._extend_to_fit(position + 1)
        self._cells[position] = symbol

    def write_range(self, offset, symbols):
        symbols = list(symbols)
        if offset < 0:
            raise IndexError(f"Tape offset must be >= 0, got {offset}")
        if not symbols:
            return
        self._extend_to_fit(offset + len(symbols))
        self._cells[offset:offset + len(symbols)] = symbols

    def read(self, position):
        if position < 0:
            raise IndexError(f"Tape position must be >= 0, got {position}")
        if position >= len(self._cells):
            return self._empty
        return self._cells[position]

    def read_range(self, offset, length):
        if offset < 0 or length < 0 or offset + length > len(self._cells):
            raise IndexError(
                f"Range [{offset}, {offset + length}) outside tape of capacity {len(self._cells)}"
            )
        return list(self._cells[offset:offset + length])

    def read_location(self, location):
        return self.read(location.index)

    def write_location(self, location, symbol):
        self.write(location.index, symbol)

    def capacity(self):
        return len(self._cells)

    def length(self):
        # Scan back from the end for the last non-empty symbol.
        for idx in range(len(self._cells) - 1, -1, -1):
            if self._cells[idx] != self._empty:
                return idx + 1
        return 0

    def contents(self):
        return self.read_range(0, self.length())

    def __len__(self):
        return self.length()

    def __iter__(self):
        return iter(self.contents())

    def __eq__(self, other):
        if not isinstance(other, Tape):
            return NotImplemented
        return self.contents() == other.contents()

    __hash__ = None

    def __repr__(self):
        return f"Tape({[getattr(s, 'name', s) for s in self.contents()]})"
