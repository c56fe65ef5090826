"""Two-tape Brainfuck interpreter."""

from .brainfuck import MEMORY_SIZE, Instruction, Program, build_jump_table
from .errors import (
    BrainfuckError,
    ConfigError,
    InvalidInputError,
    ProgramLoadError,
    StepLimitExceeded,
    TapeUnderflowError,
    UnbalancedBracketsError,
)
from .runner import load_program, parse, run_file, run_source
from .tape import Tape

__version__ = "0.1.0"
