"""Exceptions raised while loading and running Brainfuck programs."""


class BrainfuckError(Exception):
    """Base class for every error the interpreter raises."""


class ConfigError(BrainfuckError):
    """An environment setting could not be understood."""


class ProgramLoadError(BrainfuckError):
    """The program source could not be read."""


class UnbalancedBracketsError(ProgramLoadError, SyntaxError):
    """A '[' or ']' has no partner."""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"Unmatched '{symbol}' at position {position}")


class TapeUnderflowError(BrainfuckError, IndexError):
    """The cursor was moved left of cell 0."""


class InvalidInputError(BrainfuckError, ValueError):
    """An input line was not a decimal byte value."""


class StepLimitExceeded(BrainfuckError):
    """The program did not halt within the allowed number of steps."""

    def __init__(self, steps: int):
        self.steps = steps
        super().__init__(f"Program did not halt within {steps} steps")
