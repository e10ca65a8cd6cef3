from enum import Enum


class Language(Enum):
    """
    Base class for a tape alphabet.

    A machine works over exactly one alphabet, so it must hold every symbol the
    table reads or writes. Members are compared by identity/equality only; the
    one symbol with a meaning is the one returned by empty(), which pads
    untouched cells and is trimmed from the end of a tape.

        class Binary(Language):
            ZERO = "0"
            ONE = "1"

            @classmethod
            def empty(cls):
                return cls.ZERO
    """

    @classmethod
    def empty(cls):
        raise NotImplementedError(f"{cls.__name__} must define empty()")
