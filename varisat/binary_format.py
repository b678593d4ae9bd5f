"""Binary encoding of proof steps."""

from __future__ import annotations

import enum
from typing import BinaryIO, Iterable, Iterator, Tuple

from varisat.proof import (
    AddClause,
    Assumptions,
    AtClause,
    ChangeHashBits,
    ChangeSamplingMode,
    DeleteClause,
    DeleteClauseProof,
    DeleteVar,
    End,
    FailedAssumptions,
    Model,
    ProofStep,
    SolverVarName,
    UnitClauses,
    UserVarName,
)
from varisat.vli import read_u64, write_u64


class _Code(enum.IntEnum):
    SOLVER_VAR_NAME_UPDATE = 0
    SOLVER_VAR_NAME_REMOVE = 1
    USER_VAR_NAME_UPDATE = 2
    USER_VAR_NAME_REMOVE = 3
    DELETE_VAR = 4
    CHANGE_SAMPLING_MODE_SAMPLE = 5
    CHANGE_SAMPLING_MODE_WITNESS = 6
    AT_CLAUSE_RED = 7
    AT_CLAUSE_IRRED = 8
    UNIT_CLAUSES = 9
    DELETE_CLAUSE_REDUNDANT = 10
    DELETE_CLAUSE_SIMPLIFIED = 11
    DELETE_CLAUSE_SATISFIED = 12
    CHANGE_HASH_BITS = 13
    MODEL = 14
    ADD_CLAUSE = 15
    ASSUMPTIONS = 16
    FAILED_ASSUMPTIONS = 17
    # A random value makes silent acceptance of a truncated, corrupted proof unlikely.
    END = 0x9AC3391F4294C211


_DELETE_CODES = {
    DeleteClauseProof.REDUNDANT: _Code.DELETE_CLAUSE_REDUNDANT,
    DeleteClauseProof.SIMPLIFIED: _Code.DELETE_CLAUSE_SIMPLIFIED,
    DeleteClauseProof.SATISFIED: _Code.DELETE_CLAUSE_SATISFIED,
}
_DELETE_PROOFS = {code: proof for proof, code in _DELETE_CODES.items()}

_U32_MASK = (1 << 32) - 1


def _sequence(values: Tuple[int, ...]) -> Iterator[int]:
    yield len(values)
    yield from values


def _step_numbers(step: ProofStep) -> Iterable[int]:
    match step:
        case SolverVarName(global_var=global_var, solver=None):
            return (_Code.SOLVER_VAR_NAME_REMOVE, global_var)
        case SolverVarName(global_var=global_var, solver=solver):
            return (_Code.SOLVER_VAR_NAME_UPDATE, global_var, solver)
        case UserVarName(global_var=global_var, user=None):
            return (_Code.USER_VAR_NAME_REMOVE, global_var)
        case UserVarName(global_var=global_var, user=user):
            return (_Code.USER_VAR_NAME_UPDATE, global_var, user)
        case DeleteVar(var=var):
            return (_Code.DELETE_VAR, var)
        case ChangeSamplingMode(var=var, sample=sample):
            code = (
                _Code.CHANGE_SAMPLING_MODE_SAMPLE
                if sample
                else _Code.CHANGE_SAMPLING_MODE_WITNESS
            )
            return (code, var)
        case AddClause(clause=clause):
            return (_Code.ADD_CLAUSE, *_sequence(clause))
        case AtClause(redundant=redundant, clause=clause, propagation_hashes=hashes):
            code = _Code.AT_CLAUSE_RED if redundant else _Code.AT_CLAUSE_IRRED
            return (code, *_sequence(clause), *_sequence(hashes))
        case UnitClauses(units=units):
            flat = [number for unit in units for number in unit]
            return (_Code.UNIT_CLAUSES, len(units), *flat)
        case DeleteClause(clause=clause, proof=proof):
            return (_DELETE_CODES[proof], *_sequence(clause))
        case ChangeHashBits(bits=bits):
            return (_Code.CHANGE_HASH_BITS, bits)
        case Model(assignment=assignment):
            return (_Code.MODEL, *_sequence(assignment))
        case Assumptions(assumptions=assumptions):
            return (_Code.ASSUMPTIONS, *_sequence(assumptions))
        case FailedAssumptions(failed_core=core, propagation_hashes=hashes):
            return (_Code.FAILED_ASSUMPTIONS, *_sequence(core), *_sequence(hashes))
        case End():
            return (_Code.END,)
    raise TypeError(f"not a proof step: {step!r}")


def write_step(target: BinaryIO, step: ProofStep) -> None:
    """Write a proof step to the binary stream ``target``."""
    for number in _step_numbers(step):
        write_u64(target, int(number))


def _read_sequence(source: BinaryIO) -> Tuple[int, ...]:
    length = read_u64(source)
    return tuple(read_u64(source) for _ in range(length))


class Parser:
    """Reads proof steps written by :func:`write_step`."""

    def parse_step(self, source: BinaryIO) -> ProofStep:
        """Read the next proof step from ``source``.

        Raises :class:`ValueError` on an unknown step code and :class:`EOFError`
        if the input ends within a step.
        """
        raw_code = read_u64(source)
        try:
            code = _Code(raw_code)
        except ValueError:
            raise ValueError("parse error") from None

        match code:
            case _Code.SOLVER_VAR_NAME_UPDATE:
                global_var = read_u64(source)
                return SolverVarName(global_var=global_var, solver=read_u64(source))
            case _Code.SOLVER_VAR_NAME_REMOVE:
                return SolverVarName(global_var=read_u64(source), solver=None)
            case _Code.USER_VAR_NAME_UPDATE:
                global_var = read_u64(source)
                return UserVarName(global_var=global_var, user=read_u64(source))
            case _Code.USER_VAR_NAME_REMOVE:
                return UserVarName(global_var=read_u64(source), user=None)
            case _Code.DELETE_VAR:
                return DeleteVar(var=read_u64(source))
            case _Code.CHANGE_SAMPLING_MODE_SAMPLE | _Code.CHANGE_SAMPLING_MODE_WITNESS:
                return ChangeSamplingMode(
                    var=read_u64(source),
                    sample=code == _Code.CHANGE_SAMPLING_MODE_SAMPLE,
                )
            case _Code.ADD_CLAUSE:
                return AddClause(clause=_read_sequence(source))
            case _Code.AT_CLAUSE_RED | _Code.AT_CLAUSE_IRRED:
                clause = _read_sequence(source)
                return AtClause(
                    redundant=code == _Code.AT_CLAUSE_RED,
                    clause=clause,
                    propagation_hashes=_read_sequence(source),
                )
            case _Code.UNIT_CLAUSES:
                count = read_u64(source)
                units = []
                for _ in range(count):
                    lit = read_u64(source)
                    units.append((lit, read_u64(source)))
                return UnitClauses(units=units)
            case (
                _Code.DELETE_CLAUSE_REDUNDANT
                | _Code.DELETE_CLAUSE_SIMPLIFIED
                | _Code.DELETE_CLAUSE_SATISFIED
            ):
                return DeleteClause(
                    clause=_read_sequence(source), proof=_DELETE_PROOFS[code]
                )
            case _Code.CHANGE_HASH_BITS:
                return ChangeHashBits(bits=read_u64(source) & _U32_MASK)
            case _Code.MODEL:
                return Model(assignment=_read_sequence(source))
            case _Code.ASSUMPTIONS:
                return Assumptions(assumptions=_read_sequence(source))
            case _Code.FAILED_ASSUMPTIONS:
                core = _read_sequence(source)
                return FailedAssumptions(
                    failed_core=core, propagation_hashes=_read_sequence(source)
                )
            case _Code.END:
                return End()
        raise ValueError("parse error")