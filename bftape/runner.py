"""Loading programs from files or text, and running them."""

import io
import logging
from typing import IO, List, Optional, TextIO

from .brainfuck import Instruction, Program
from .errors import ProgramLoadError

logger = logging.getLogger(__name__)


def parse(stream: IO) -> List[Instruction]:
    """Read a program from a binary or text stream, keeping only the 8 commands."""
    ops = (Instruction.from_symbol(symbol) for symbol in stream.read())
    return [op for op in ops if op is not Instruction.NO_OP]


def load_program(path: str) -> List[Instruction]:
    """Parse the program stored at path. Raises ProgramLoadError if it can't be read."""
    try:
        with open(path, "rb") as f:
            instructions = parse(f)
    except OSError as e:
        raise ProgramLoadError(f"Cannot open program file {path!r}: {e.strerror or e}") from e
    logger.debug("Read %d instructions from %s", len(instructions), path)
    return instructions


def run_file(
    path: str,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    step_limit: Optional[int] = None,
) -> Program:
    """Load and run a program file. Returns the halted program for inspection."""
    program = Program(load_program(path), stdin=stdin, stdout=stdout)
    program.run(max_steps=step_limit)
    return program


def run_source(code: str, input_data: str = "", step_limit: Optional[int] = None) -> str:
    """Execute Brainfuck code and return its output.
    input_data holds the lines read by ',' (one decimal byte per line).
    """
    stdout = io.StringIO()
    program = Program(parse(io.StringIO(code)), stdin=io.StringIO(input_data), stdout=stdout)
    program.run(max_steps=step_limit)
    return stdout.getvalue()
