"""The VSIDS branching heuristic.

Each variable has an activity. Variables involved in a conflict are bumped,
which raises their activity by the current bump value, and after each conflict
all activities decay. Decisions branch on the unassigned variable with the
highest activity.

Rather than scaling every activity on decay, the bump value is divided by the
decay factor. When values would grow too large, all activities and the bump
value are scaled down by the same factor, which keeps their order intact.

Variables are given by their index. Activities use single precision.
"""

from __future__ import annotations

import math
import struct
from typing import Iterator, List, Optional

from varisat.config import SolverConfig


def _f32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


_F32_MAX = struct.unpack("<f", bytes.fromhex("ffff7f7f"))[0]
# Rescale activities if any value reaches this.
_RESCALE_LIMIT = _f32(_F32_MAX / 16.0)
_RESCALE_FACTOR = _f32(1.0 / _RESCALE_LIMIT)


class Vsids:
    """Activity-ordered heap of the variables available for decisions.

    Iterating pops the available variable with the highest activity.
    """

    def __init__(self) -> None:
        self._activity: List[float] = []
        self._heap: List[int] = []
        self._position: List[Optional[int]] = []
        self._bump = 1.0
        self._inv_decay = _f32(1.0 / _f32(SolverConfig().vsids_decay))

    def set_var_count(self, count: int) -> None:
        """Resize the structures for ``count`` variables."""
        del self._activity[count:]
        del self._position[count:]
        self._activity.extend([0.0] * (count - len(self._activity)))
        self._position.extend([None] * (count - len(self._position)))

    def set_decay(self, decay: float) -> None:
        """Change the decay factor; it must lie strictly between 1/16 and 1."""
        decay = _f32(decay)
        if not 1.0 / 16.0 < decay < 1.0:
            raise ValueError(f"decay factor {decay} must be in (1/16, 1)")
        self._inv_decay = _f32(1.0 / decay)

    def activity(self, var: int) -> float:
        """The current activity of ``var``."""
        return self._activity[var]

    def bump(self, var: int) -> None:
        """Increase the activity of ``var``."""
        value = _f32(self._activity[var] + self._bump)
        self._activity[var] = value
        if value >= _RESCALE_LIMIT:
            self._rescale()
        position = self._position[var]
        if position is not None:
            self._sift_up(position)

    def decay(self) -> None:
        """Decay all variable activities."""
        self._bump = _f32(self._bump * self._inv_decay)
        if self._bump >= _RESCALE_LIMIT:
            self._rescale()

    def _rescale(self) -> None:
        self._activity = [_f32(value * _RESCALE_FACTOR) for value in self._activity]
        self._bump = _f32(self._bump * _RESCALE_FACTOR)

    def reset(self, var: int) -> None:
        """Reset the activity of an unavailable variable to zero.

        Raises :class:`ValueError` if the variable is still available.
        """
        if self._position[var] is not None:
            raise ValueError(f"variable {var} is still available")
        self._activity[var] = 0.0

    def make_unavailable(self, var: int) -> None:
        """Remove ``var`` from the heap if present."""
        position = self._position[var]
        if position is None:
            return
        last = self._heap.pop()
        if position < len(self._heap):
            self._heap[position] = last
            self._position[last] = position
            self._sift_down(position)
        self._position[var] = None

    def make_available(self, var: int) -> None:
        """Insert ``var`` into the heap if not already present."""
        if self._position[var] is None:
            position = len(self._heap)
            self._position[var] = position
            self._heap.append(var)
            self._sift_up(position)

    def _place(self, var: int, position: int) -> None:
        self._heap[position] = var
        self._position[var] = position

    def _sift_up(self, pos: int) -> None:
        var = self._heap[pos]
        while pos > 0:
            parent_pos = (pos - 1) // 2
            parent_var = self._heap[parent_pos]
            if self._activity[parent_var] >= self._activity[var]:
                return
            self._place(var, parent_pos)
            self._place(parent_var, pos)
            pos = parent_pos

    def _sift_down(self, pos: int) -> None:
        var = self._heap[pos]
        size = len(self._heap)
        while True:
            largest_pos, largest_var = pos, var
            for child_pos in (pos * 2 + 1, pos * 2 + 2):
                if child_pos < size:
                    child_var = self._heap[child_pos]
                    if self._activity[largest_var] < self._activity[child_var]:
                        largest_pos, largest_var = child_pos, child_var
            if largest_pos == pos:
                return
            self._place(var, largest_pos)
            self._place(largest_var, pos)
            pos = largest_pos

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if not self._heap:
            raise StopIteration
        var = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._place(last, 0)
            self._sift_down(0)
        self._position[var] = None
        return var

    def __len__(self) -> int:
        return len(self._heap)