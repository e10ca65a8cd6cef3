from enum import Enum


class ErrorType(Enum):
    NON_DETERMINISTIC = "Non-Deterministic"
    NO_STATE_FOUND = "No valid next state"
    END_OF_TAPE_REACHED = "Invalid tape location"


class TuringMachineError(Exception):
    """Raised by the engine; always fatal to the run that produced it."""

    error_type = None

    def __init__(self, state=None, symbol=None, step=None):
        self.state = state
        self.symbol = symbol
        self.step = step
        super().__init__(state, symbol, step)

    def context(self):
        return {"state": self.state, "symbol": _symbol_name(self.symbol), "step": self.step}

    def describe(self):
        if self.error_type is None:
            return "Turing machine failure"
        return self.error_type.value

    def with_context(self, state=None, step=None):
        """Fill in where the failure happened, keeping what is already known."""
        if state is not None:
            self.state = state
        if step is not None:
            self.step = step
        self.args = (self.state, self.symbol, self.step)
        return self

    def __str__(self):
        details = ", ".join(f"{k}={v}" for k, v in self.context().items() if v is not None)
        if details:
            return f"Error: {self.describe()} ({details})"
        return f"Error: {self.describe()}"


class NonDeterministic(TuringMachineError):
    error_type = ErrorType.NON_DETERMINISTIC


class NoStateFound(TuringMachineError):
    error_type = ErrorType.NO_STATE_FOUND


class EndOfTapeReached(TuringMachineError):
    error_type = ErrorType.END_OF_TAPE_REACHED


def _symbol_name(symbol):
    if symbol is None:
        return None
    return getattr(symbol, "name", symbol)
