from simulator.language import Language


class Symbol(Language):
    A = "A"
    B = "B"
    EMPTY = "_"

    @classmethod
    def empty(cls):
        return cls.EMPTY
