"""
Cursor-addressed tape used for both the program and the data memory.

A tape is a numpy array plus a cursor. Moving the cursor right past the end
doubles the array, filling the new half with the tape's default value, so
the tape behaves as if it were infinite to the right. Moving left of cell 0
is an error.
"""

import logging
from typing import Any, Iterable, Optional

import numpy as np

from .errors import TapeUnderflowError

logger = logging.getLogger(__name__)


class Tape:
    """A growable sequence of homogeneous elements with a single cursor."""

    def __init__(self, values: Iterable[Any], default: Any, dtype: Optional[Any] = None):
        self.default = default
        data = np.array(list(values), dtype=dtype)
        if len(data) == 0:
            # Keep 0 <= cursor < len valid even for an empty program
            data = np.full(1, default, dtype=data.dtype)
        self.data = data
        self.cursor = 0

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __repr__(self) -> str:
        return f"Tape(len={len(self.data)}, cursor={self.cursor}, dtype={self.data.dtype})"

    @property
    def current(self):
        return self.data[self.cursor]

    @current.setter
    def current(self, value):
        self.data[self.cursor] = value

    def move_right(self) -> None:
        self.cursor += 1
        if self.cursor >= len(self.data):
            self._grow()

    def move_left(self) -> None:
        if self.cursor == 0:
            raise TapeUnderflowError("Cannot move left of cell 0")
        self.cursor -= 1

    def _grow(self) -> None:
        """Double the backing array, filling the new half with the default."""
        size = len(self.data)
        filler = np.full(size, self.default, dtype=self.data.dtype)
        self.data = np.concatenate((self.data, filler))
        logger.debug("Tape grew from %d to %d cells", size, len(self.data))
