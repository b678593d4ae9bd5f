"""Proof steps of the solver's internal proof format and clause hashing.

Literals are given by their integer codes (``2 * var_index`` for the positive
and ``2 * var_index + 1`` for the negative literal); variables by their index.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Tuple

ClauseHash = int

_U64_MASK = (1 << 64) - 1
# Constant based on the golden ratio, mixes well into the upper bits.
_HASH_MULTIPLIER = 0x61C8864680B583EB


def lit_code_hash(lit_code: int) -> ClauseHash:
    """Hash a literal given by its code; the code need not be a valid literal."""
    return ((~lit_code & _U64_MASK) * _HASH_MULTIPLIER) & _U64_MASK


def lit_hash(lit: int) -> ClauseHash:
    """Hash a single literal; hashes of several literals combine with xor."""
    return lit_code_hash(lit)


def clause_hash(lits: Iterable[int]) -> ClauseHash:
    """Hash a set of literals; the result does not depend on their order."""
    result = 0
    for lit in lits:
        result ^= lit_hash(lit)
    return result


class DeleteClauseProof(enum.Enum):
    """Justification for a simple clause deletion."""

    REDUNDANT = "redundant"
    """The clause is known to be redundant."""
    SIMPLIFIED = "simplified"
    """The clause is irredundant and subsumed by the clause added just before."""
    SATISFIED = "satisfied"
    """The clause contains a true literal or is tautological."""


class ProofStep:
    """A mutation of the current formula together with its justification."""

    __slots__ = ()
    _uses_hashes: ClassVar[bool] = False

    def contains_hashes(self) -> bool:
        """Whether this step carries clause hashes."""
        return self._uses_hashes


def _freeze(step: object, name: str) -> None:
    object.__setattr__(step, name, tuple(getattr(step, name)))


@dataclass(frozen=True)
class SolverVarName(ProofStep):
    """Update (or remove, if ``solver`` is None) the global to solver var mapping."""

    global_var: int
    solver: Optional[int]


@dataclass(frozen=True)
class UserVarName(ProofStep):
    """Update (or remove, if ``user`` is None) the global to user var mapping."""

    global_var: int
    user: Optional[int]


@dataclass(frozen=True)
class DeleteVar(ProofStep):
    """Delete an isolated and hidden variable."""

    var: int


@dataclass(frozen=True)
class ChangeSamplingMode(ProofStep):
    """Switch a variable between sample and witness mode."""

    var: int
    sample: bool


@dataclass(frozen=True)
class AddClause(ProofStep):
    """Add a new input clause after an initial solve call."""

    clause: Tuple[int, ...]

    def __post_init__(self) -> None:
        _freeze(self, "clause")


@dataclass(frozen=True)
class AtClause(ProofStep):
    """Add an asymmetric tautology, with the hashes of the propagating clauses."""

    _uses_hashes: ClassVar[bool] = True

    redundant: bool
    clause: Tuple[int, ...]
    propagation_hashes: Tuple[ClauseHash, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "clause")
        _freeze(self, "propagation_hashes")


@dataclass(frozen=True)
class UnitClauses(ProofStep):
    """Unit clauses from top-level propagation, paired with the clause that became unit."""

    _uses_hashes: ClassVar[bool] = True

    units: Tuple[Tuple[int, ClauseHash], ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "units", tuple((lit, hash_) for lit, hash_ in self.units)
        )


@dataclass(frozen=True)
class DeleteClause(ProofStep):
    """Delete a clause consisting of the given literals."""

    clause: Tuple[int, ...]
    proof: DeleteClauseProof

    def __post_init__(self) -> None:
        _freeze(self, "clause")


@dataclass(frozen=True)
class ChangeHashBits(ProofStep):
    """Change the number of clause hash bits used."""

    bits: int


@dataclass(frozen=True)
class Model(ProofStep):
    """A (partial) assignment satisfying all clauses and assumptions."""

    assignment: Tuple[int, ...]

    def __post_init__(self) -> None:
        _freeze(self, "assignment")


@dataclass(frozen=True)
class Assumptions(ProofStep):
    """Change the active set of assumptions."""

    assumptions: Tuple[int, ...]

    def __post_init__(self) -> None:
        _freeze(self, "assumptions")


@dataclass(frozen=True)
class FailedAssumptions(ProofStep):
    """A subset of the assumptions that makes the formula unsatisfiable."""

    _uses_hashes: ClassVar[bool] = True

    failed_core: Tuple[int, ...]
    propagation_hashes: Tuple[ClauseHash, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "failed_core")
        _freeze(self, "propagation_hashes")


@dataclass(frozen=True)
class End(ProofStep):
    """Marks the end of a complete proof."""