"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Read a decimal byte value (one line) into the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.

The interpreter keeps two tapes: one holding the instructions and one holding
the memory cells. Each has its own cursor. Execution fetches the instruction
under the instruction cursor, performs it, and moves the instruction cursor
one to the right, until it lands on a NO_OP (the end of the program).
"""

import logging
import re
import sys
from enum import Enum
from typing import Dict, Iterable, List, Optional, TextIO

import numpy as np

from .errors import InvalidInputError, StepLimitExceeded, UnbalancedBracketsError
from .tape import Tape

logger = logging.getLogger(__name__)

# Initial number of memory cells; the tape doubles whenever it runs out
MEMORY_SIZE = 512

_BYTE_PATTERN = re.compile(r"\+?[0-9]+")


class Instruction(Enum):
    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    INCREMENT = "+"
    DECREMENT = "-"
    OUTPUT = "."
    INPUT = ","
    JUMP_FORWARD = "["
    JUMP_BACK = "]"
    NO_OP = ""

    @classmethod
    def from_symbol(cls, symbol) -> "Instruction":
        """Map a source character (or byte value) to its instruction.
        Anything that is not one of the 8 commands becomes NO_OP.
        """
        if isinstance(symbol, int):
            symbol = chr(symbol)
        return _SYMBOLS.get(symbol, cls.NO_OP)


_SYMBOLS: Dict[str, Instruction] = {op.value: op for op in Instruction if op is not Instruction.NO_OP}


def build_jump_table(instructions: List[Instruction]) -> Dict[int, int]:
    """Build a table mapping bracket positions to their partners.
    Raises UnbalancedBracketsError for a bracket without a partner.
    """
    jump_table = {}
    stack = []

    for i, op in enumerate(instructions):
        if op is Instruction.JUMP_FORWARD:
            stack.append(i)
        elif op is Instruction.JUMP_BACK:
            if not stack:
                raise UnbalancedBracketsError("]", i)
            start = stack.pop()
            jump_table[start] = i
            jump_table[i] = start

    if stack:
        raise UnbalancedBracketsError("[", stack[-1])

    return jump_table


class Program:
    """A loaded Brainfuck program together with its memory.

    stdin and stdout default to sys.stdin / sys.stdout, looked up when the
    program actually reads or writes. With precompute_jumps the bracket
    partners are taken from the jump table built at load time instead of
    being rescanned on every jump; the result is the same either way.
    """

    def __init__(
        self,
        instructions: Iterable[Instruction],
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        precompute_jumps: bool = False,
    ):
        ops = [op for op in instructions if op is not Instruction.NO_OP]
        jump_table = build_jump_table(ops)

        self.ops = Tape(ops, Instruction.NO_OP, dtype=object)
        self.memory = Tape(np.zeros(MEMORY_SIZE, dtype=np.uint8), 0, dtype=np.uint8)
        self.stdin = stdin
        self.stdout = stdout
        self.jump_table = jump_table if precompute_jumps else None
        self.steps = 0

        logger.debug("Program loaded: %d instructions, %d bracket pairs", len(ops), len(jump_table) // 2)

    @property
    def cell(self) -> int:
        """Value of the memory cell under the memory cursor."""
        return int(self.memory.current)

    def inc(self) -> None:
        self.memory.current = (self.cell + 1) % 256

    def dec(self) -> None:
        self.memory.current = (self.cell - 1) % 256

    def mvr(self) -> None:
        self.memory.move_right()

    def mvl(self) -> None:
        self.memory.move_left()

    def jpf(self) -> None:
        """On a zero cell, move the instruction cursor onto the matching ']'."""
        if self.cell != 0:
            return
        if self.jump_table is not None:
            self.ops.cursor = self.jump_table[self.ops.cursor]
            return

        depth = 1
        while depth:
            self.ops.move_right()
            op = self.ops.current
            if op is Instruction.JUMP_FORWARD:
                depth += 1
            elif op is Instruction.JUMP_BACK:
                depth -= 1

    def jpb(self) -> None:
        """On a nonzero cell, move the instruction cursor onto the matching '['."""
        if self.cell == 0:
            return
        if self.jump_table is not None:
            self.ops.cursor = self.jump_table[self.ops.cursor]
            return

        depth = 1
        while depth:
            self.ops.move_left()
            op = self.ops.current
            if op is Instruction.JUMP_BACK:
                depth += 1
            elif op is Instruction.JUMP_FORWARD:
                depth -= 1

    def prt(self) -> None:
        stream = self.stdout if self.stdout is not None else sys.stdout
        stream.write(chr(self.cell))

    def inp(self) -> None:
        """Read one line and store it as a byte. EOF is malformed input."""
        stream = self.stdin if self.stdin is not None else sys.stdin
        line = stream.readline()
        text = line.strip()
        if not _BYTE_PATTERN.fullmatch(text) or int(text) > 255:
            raise InvalidInputError(f"Expected a byte value between 0 and 255, got {line!r}")
        self.memory.current = int(text)

    def operate(self) -> None:
        """Perform the instruction under the instruction cursor."""
        op = self.ops.current

        if op is Instruction.INCREMENT:
            self.inc()
        elif op is Instruction.DECREMENT:
            self.dec()
        elif op is Instruction.MOVE_RIGHT:
            self.mvr()
        elif op is Instruction.MOVE_LEFT:
            self.mvl()
        elif op is Instruction.OUTPUT:
            self.prt()
        elif op is Instruction.INPUT:
            self.inp()
        elif op is Instruction.JUMP_FORWARD:
            self.jpf()
        elif op is Instruction.JUMP_BACK:
            self.jpb()

    def step(self) -> None:
        # A jump leaves the cursor on the partner bracket; this skips past it
        self.operate()
        self.ops.move_right()
        self.steps += 1

    def run(self, max_steps: Optional[int] = None) -> None:
        """Step until the end of the program.
        With a positive max_steps, raise StepLimitExceeded once that many steps
        have run (counted since the program was loaded) without halting. Zero
        or a negative value means no limit.
        """
        try:
            while self.ops.current is not Instruction.NO_OP:
                if max_steps is not None and 0 < max_steps <= self.steps:
                    raise StepLimitExceeded(self.steps)
                self.step()
        finally:
            stream = self.stdout if self.stdout is not None else sys.stdout
            stream.flush()
        logger.debug("Program halted after %d steps", self.steps)
