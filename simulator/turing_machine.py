from rich.console import Console

from simulator.errors import TuringMachineError
from simulator.tape import Location

START_STATE = 0
HALT_STATE = 1


def is_halting(state):
    return state == HALT_STATE


class TuringMachine:
    """
    Single-tape deterministic machine.

    The machine takes ownership of the table and tape it is built with. After
    any error from step() or run() it must be treated as terminated: the step
    counter has already moved and the tape may have been written.
    """

    def __init__(self, table, tape):
        self.table = table
        self.tape = tape
        self.head = Location()
        self.state = START_STATE
        self.steps = 0

    @property
    def halted(self):
        return is_halting(self.state)

    def write_to_tape(self, offset, symbols):
        self.tape.write_range(offset, symbols)

    def step(self):
        self.steps += 1
        try:
            current_symbol = self.tape.read_location(self.head)
            transition = self.table.lookup(self.state, current_symbol)
            self.tape.write_location(self.head, transition.write)
        except TuringMachineError as err:
            err.with_context(self.state, self.steps)
            raise
        # Moving off the left edge only invalidates the head; the next step reports it.
        self.head.move_direction(transition.direction)
        self.state = transition.to_state
        return transition

    def run(self):
        while not self.halted:
            self.step()
        return self.tape, self.steps

    def visualize(self, window=10, console=None):
        """Display a small window around the head."""
        console = console or Console()
        if self.head.is_valid():
            head = self.head.index
            start = max(0, head - window)
        else:
            head = -1
            start = 0
        end = max(self.tape.capacity(), head + 1) + window

        tape_str = ""
        head_str = ""
        for pos in range(start, end):
            symbol = self.tape.read(pos)
            label = str(getattr(symbol, "value", symbol))
            tape_str += f"{label} "
            head_str += "^" + " " * len(label) if pos == head else " " * (len(label) + 1)
        console.print(tape_str.rstrip(), markup=False, highlight=False)
        console.print(head_str.rstrip(), markup=False, highlight=False)
        console.print(f"State: {self.state}, Steps: {self.steps}, Halted: {self.halted}")
