"""Storage for long clauses with compact references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from varisat.clause_header import HEADER_LEN, ClauseHeader

# Largest offset a clause reference may hold.
_MAX_OFFSET = (1 << 32) - 1


@dataclass(frozen=True, order=True)
class ClauseRef:
    """Compact reference to a clause stored in a :class:`ClauseAlloc`."""

    offset: int


class Clause:
    """View of a stored clause: its header and its literals."""

    __slots__ = ("_alloc", "_offset", "_length")

    def __init__(self, alloc: ClauseAlloc, offset: int, length: int) -> None:
        self._alloc = alloc
        self._offset = offset
        self._length = length

    @property
    def _start(self) -> int:
        return self._offset + HEADER_LEN

    @property
    def header(self) -> ClauseHeader:
        """The clause's header; changes to it are stored."""
        return self._alloc._headers[self._offset]

    @property
    def lits(self) -> List[int]:
        """A list of the clause's literal codes."""
        return self._alloc._buffer[self._start : self._start + self._length]

    @lits.setter
    def lits(self, values: Iterable[int]) -> None:
        values = list(values)
        if len(values) != self._length:
            raise ValueError(
                f"expected {self._length} literals but got {len(values)}"
            )
        self._alloc._buffer[self._start : self._start + self._length] = values

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        return iter(self.lits)

    def __getitem__(self, index: int) -> int:
        return self.lits[index]

    def __setitem__(self, index: int, lit: int) -> None:
        position = range(self._length)[index]
        self._alloc._buffer[self._start + position] = lit


class ClauseAlloc:
    """Append-only storage for clauses of three or more literals.

    Clauses cannot be freed individually; deleted clauses are reclaimed by
    copying the remaining ones into a new allocator.
    """

    def __init__(self) -> None:
        # Each clause occupies HEADER_LEN slots (kept as None) followed by its literals.
        self._buffer: list = []
        self._headers: dict[int, ClauseHeader] = {}

    def add_clause(self, header: ClauseHeader, lits: Sequence[int]) -> ClauseRef:
        """Store a copy of ``header`` with its length set, and the literals.

        Raises :class:`ValueError` for clauses with fewer than three literals.
        """
        lits = list(lits)
        if len(lits) < 3:
            raise ValueError("ClauseAlloc can only store ternary and larger clauses")
        offset = len(self._buffer)
        if offset > _MAX_OFFSET:
            raise OverflowError("Exceeded ClauseAlloc's maximal buffer size")
        stored = header.copy()
        stored.length = len(lits)
        self._headers[offset] = stored
        self._buffer.extend([None] * HEADER_LEN)
        self._buffer.extend(lits)
        return ClauseRef(offset)

    def header(self, cref: ClauseRef) -> ClauseHeader:
        """The header of a clause; changes to it are stored."""
        offset = cref.offset
        if offset + HEADER_LEN > len(self._buffer) or offset not in self._headers:
            raise IndexError("ClauseRef out of bounds")
        return self._headers[offset]

    def clause(self, cref: ClauseRef) -> Clause:
        """A view of the clause, with as many literals as its header states."""
        length = self.header(cref).length
        self.check_bounds(cref, length)
        return Clause(self, cref.offset, length)

    def check_bounds(self, cref: ClauseRef, length: int) -> None:
        """Raise :class:`IndexError` unless ``length`` literals fit at ``cref``."""
        if cref.offset + HEADER_LEN + length > len(self._buffer):
            raise IndexError("ClauseRef out of bounds")

    @property
    def buffer_size(self) -> int:
        """Size of the storage in words, headers included."""
        return len(self._buffer)