"""Metadata kept for each long clause."""

from __future__ import annotations

import enum
import struct

HEADER_LEN = 3
"""Size of a clause header in buffer words."""

GLUE_LIMIT = (1 << 6) - 1
"""Largest glue level a header stores; larger values are clamped."""

_MAX_LEN = (1 << 32) - 1


class Tier(enum.IntEnum):
    """Partitions of the long clause database."""

    IRRED = 0
    CORE = 1
    MID = 2
    LOCAL = 3


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class ClauseHeader:
    """Metadata of a clause: length, tier, flags, glue level and activity."""

    __slots__ = ("_length", "tier", "deleted", "mark", "active", "_glue", "_activity")

    def __init__(self) -> None:
        self._length = 0
        self.tier = Tier.IRRED
        self.deleted = False
        # A temporary flag that users must reset after use.
        self.mark = False
        # Set when the clause took part in conflict analysis; periodically reset.
        self.active = False
        self._glue = 0
        self._activity = 0.0

    @property
    def length(self) -> int:
        """Number of literals of the clause."""
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        if not 0 <= value <= _MAX_LEN:
            raise ValueError(f"clause length {value} out of range")
        self._length = value

    @property
    def redundant(self) -> bool:
        """Whether the clause is redundant, i.e. not irredundant."""
        return self.tier != Tier.IRRED

    @property
    def glue(self) -> int:
        """The glue level, at most :data:`GLUE_LIMIT`."""
        return self._glue

    @glue.setter
    def glue(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"glue level {value} is negative")
        self._glue = min(value, GLUE_LIMIT)

    @property
    def activity(self) -> float:
        """Clause activity, stored with single precision."""
        return self._activity

    @activity.setter
    def activity(self, value: float) -> None:
        self._activity = _to_f32(value)

    def copy(self) -> ClauseHeader:
        """Return an independent copy of this header."""
        other = ClauseHeader()
        for name in self.__slots__:
            setattr(other, name, getattr(self, name))
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClauseHeader):
            return NotImplemented
        return all(getattr(self, n) == getattr(other, n) for n in self.__slots__)

    def __repr__(self) -> str:
        return (
            f"ClauseHeader(length={self._length}, tier={self.tier.name}, "
            f"deleted={self.deleted}, mark={self.mark}, active={self.active}, "
            f"glue={self._glue}, activity={self._activity})"
        )