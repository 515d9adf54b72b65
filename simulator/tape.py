# simulator/tape.py

from collections import deque
from enum import Enum

# Internal marker for untouched cells. Descriptions carry their own
# presentation blank which is only substituted back in when rendering.
BLANK = "\0"


class Move(Enum):
    LEFT = "<"
    RIGHT = ">"
    STAY = "^"

    @property
    def delta(self):
        if self is Move.LEFT:
            return -1
        if self is Move.RIGHT:
            return 1
        return 0

    @classmethod
    def from_symbol(cls, symbol):
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown head move '{symbol}', expected one of < > ^") from None


class Tape:
    """
    Single-head tape that behaves as blank-filled in both directions.

    Only the contiguous span of cells that the input or a write has ever
    touched is stored. The head may sit one cell outside that span; the
    next write grows the store by exactly that cell.
    """

    def __init__(self, word=""):
        self._cells = deque(word)
        self._head = 0

    @classmethod
    def _from_state(cls, cells, head):
        tape = cls.__new__(cls)
        tape._cells = deque(cells)
        tape._head = head
        return tape

    @property
    def head(self):
        """Raw head index into the stored cells (may be -1 or len(self))."""
        return self._head

    def __len__(self):
        return len(self._cells)

    def current_symbol(self):
        if 0 <= self._head < len(self._cells):
            return self._cells[self._head]
        return BLANK

    def write(self, symbol):
        if self._head == -1:
            self._cells.appendleft(BLANK)
            self._head = 0
        elif self._head == len(self._cells):
            self._cells.append(BLANK)
        self._cells[self._head] = symbol

    def move(self, direction):
        self._head += direction.delta

    def apply(self, symbol, direction):
        self.write(symbol)
        self.move(direction)
        return self

    def _span(self):
        # Smallest [first, last] covering the head and every non-blank cell.
        first = last = None
        for index, cell in enumerate(self._cells):
            if cell != BLANK:
                if first is None:
                    first = index
                last = index
        if first is None:
            return self._head, self._head
        return min(first, self._head), max(last, self._head)

    def logical_content(self):
        first, last = self._span()
        size = len(self._cells)
        return [self._cells[i] if 0 <= i < size else BLANK for i in range(first, last + 1)]

    def logical_head_offset(self):
        first, _ = self._span()
        return self._head - first

    def copy(self):
        return Tape._from_state(self._cells, self._head)

    def render(self, blank="_"):
        """Logical content as text with the head cell wrapped in brackets."""
        offset = self.logical_head_offset()
        parts = []
        for index, cell in enumerate(self.logical_content()):
            symbol = blank if cell == BLANK else cell
            parts.append(f"[{symbol}]" if index == offset else symbol)
        return "".join(parts)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Tape):
            return NotImplemented
        return (
            self.logical_content() == other.logical_content()
            and self.logical_head_offset() == other.logical_head_offset()
        )

    def __hash__(self):
        return hash((tuple(self.logical_content()), self.logical_head_offset()))

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Tape({self.render()!r})"
