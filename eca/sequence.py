from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from .engine import eca_step, normalize_start, to_bits
from .errors import check_rule, check_width
from .rules import rule_number_to_table


def _checked_start(start) -> np.ndarray:
    """Keep the raw start as an object array; must be 1D."""
    raw = np.array([] if start is None else list(start), dtype=object)
    to_bits(raw)
    return raw


class RowSequence:
    """Lazy, restartable, never-ending sequence of ECA generations.

    Generation 0 is `start` padded with zeros (or truncated) to `width`.
    Every later generation is one `eca_step` of the previous row under the
    rule's table with zero-padded edges.

    Rows handed out by `current()`, iteration and `take()` are copies; the
    sequence owns its buffer and replaces it on each advance.
    """

    def __init__(self, rule_number: int = 0, width: int = 0, start: Optional[Sequence[int]] = None):
        # Validate everything before any attribute is set.
        rule_number = check_rule(rule_number)
        width = check_width(width)
        start = _checked_start(start)

        self._rule = rule_number
        self._width = width
        self._start = start

        self._rule_table: Optional[np.ndarray] = None
        self._table_stale = True
        self._row = np.zeros(width, dtype=np.uint8)
        self._index = 0
        self.restart()

    def get_rule(self) -> int:
        return self._rule

    def set_rule(self, rule_number: int) -> None:
        """Change the rule. The table is rebuilt lazily on next use."""
        self._rule = check_rule(rule_number)
        self._table_stale = True

    def get_width(self) -> int:
        return self._width

    def set_width(self, width: int) -> None:
        """Change the width. Takes effect on the row at the next `restart()`."""
        self._width = check_width(width)

    def get_start(self) -> np.ndarray:
        return self._start.copy()

    def set_start(self, start: Sequence[int]) -> None:
        """Replace the raw start. Takes effect at the next `restart()`."""
        self._start = _checked_start(start)

    def get_rule_table(self) -> np.ndarray:
        if self._rule_table is None or self._table_stale:
            self._rule_table = rule_number_to_table(self._rule)
            self._table_stale = False
        return self._rule_table.copy()

    def restart(self) -> None:
        row = normalize_start(self._start, self._width)
        self._rule_table = rule_number_to_table(self._rule)
        self._table_stale = False
        self._row = row
        self._index = 0

    def current(self) -> Tuple[int, np.ndarray]:
        return self._index, self._row.copy()

    def advance_one(self) -> None:
        if self._rule_table is None or self._table_stale:
            self.get_rule_table()
        self._row = eca_step(self._row, self._rule_table)
        self._index += 1

    def __iter__(self) -> Iterator[np.ndarray]:
        self.restart()
        while True:
            yield self._row.copy()
            self.advance_one()

    def take(self, count: int) -> np.ndarray:
        """Restart and return generations 0..count-1 as a (count, W) array."""
        count = int(count)
        if count < 0:
            raise ValueError("count must be >= 0")
        self.restart()
        out = np.empty((count, self._width), dtype=np.uint8)
        for t in range(count):
            out[t] = self._row
            if t + 1 < count:
                self.advance_one()
        return out

    def __repr__(self) -> str:
        return f"RowSequence(rule_number={self._rule}, width={self._width}, generation={self._index})"
