# tools/mirror_table.py

from simulator.language import Language
from simulator.tape import Direction, Tape
from simulator.transition import Table, Transition

L, R = Direction.LEFT, Direction.RIGHT


class MirrorSymbol(Language):
    A = "A"
    B = "B"
    EMPTY = "_"

    @classmethod
    def empty(cls):
        return cls.EMPTY


A, B, EMPTY = MirrorSymbol.A, MirrorSymbol.B, MirrorSymbol.EMPTY

# (from, to, read, write, direction)
MIRROR_RULES = [
    (0, 2, A, EMPTY, R),
    (0, 4, B, EMPTY, R),
    (0, 1, EMPTY, EMPTY, R),
    # First symbol was an A: walk to the end
    (2, 2, A, A, R),
    (2, 2, B, B, R),
    (2, 3, EMPTY, EMPTY, L),
    (3, 6, A, A, L),
    (3, 7, B, A, L),
    (3, 1, EMPTY, A, R),
    # First symbol was a B
    (4, 4, A, A, R),
    (4, 4, B, B, R),
    (4, 5, EMPTY, EMPTY, L),
    (5, 6, A, B, L),
    (5, 7, B, B, L),
    (5, 1, EMPTY, B, R),
    # Carrying an A back to the start
    (6, 6, A, A, L),
    (6, 6, B, B, L),
    (6, 1, EMPTY, A, R),
    # Carrying a B back to the start
    (7, 7, A, A, L),
    (7, 7, B, B, L),
    (7, 1, EMPTY, B, R),
]


def build_mirror_table():
    """Table that swaps the first and last symbol of an A/B string in 2n + 1 steps."""
    return Table(Transition(*rule) for rule in MIRROR_RULES)


def expected_steps(input_length):
    return 2 * input_length + 1


def parse_symbols(text):
    try:
        return [MirrorSymbol(ch) for ch in text.strip().upper()]
    except ValueError:
        raise ValueError(f"Input {text!r} may only contain 'A', 'B' and '_'") from None


def format_symbols(symbols):
    return "".join(s.value for s in symbols)


def mirror_tape(text):
    return Tape(MirrorSymbol, parse_symbols(text))
