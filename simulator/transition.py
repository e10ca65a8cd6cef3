from dataclasses import dataclass

from simulator.errors import NonDeterministic, NoStateFound
from simulator.tape import Direction


@dataclass(frozen=True)
class Transition:
    from_state: int
    to_state: int
    read: object
    write: object
    direction: Direction

    def matches(self, state, symbol):
        return self.from_state == state and self.read == symbol

    def __str__(self):
        write = getattr(self.write, "value", self.write)
        return f"{write}{self.direction.value}{self.to_state}"


class Table:
    """
    The program of a machine: an unordered list of transitions.

    Nothing is validated on insert. A (state, symbol) pair with several rules
    is only reported when the machine actually looks it up, so tables can be
    built in any order without knowing the alphabet or state space up front.
    """

    def __init__(self, transitions=None):
        self.transitions = []
        if transitions is not None:
            self.add_many(transitions)

    def add(self, transition):
        self.transitions.append(transition)

    def add_many(self, transitions):
        self.transitions.extend(transitions)

    def matching(self, state, symbol):
        return [t for t in self.transitions if t.matches(state, symbol)]

    def lookup(self, state, symbol):
        # Scan every entry before deciding; stopping at the first match would hide conflicts.
        found = self.matching(state, symbol)
        if not found:
            raise NoStateFound(state, symbol)
        if len(found) > 1:
            raise NonDeterministic(state, symbol)
        return found[0]

    def states(self):
        """Every state id mentioned as a source or destination, sorted."""
        seen = set()
        for t in self.transitions:
            seen.add(t.from_state)
            seen.add(t.to_state)
        return sorted(seen)

    def __len__(self):
        return len(self.transitions)

    def __iter__(self):
        return iter(self.transitions)
