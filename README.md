# varisat

Data structures for a conflict-driven clause learning (CDCL) SAT solver,
written in plain Python with no third-party dependencies.

Throughout the package a variable is an integer index and a literal is an
integer code: `2 * var` for the positive and `2 * var + 1` for the negative
literal. Negating a literal flips its lowest bit.

## Modules

- `varisat.vli`: a variable-length encoding of unsigned 64-bit integers.
  `write_u64(target, value)` writes to a binary stream, and
  `read_u64(source)` reads one number back. It raises `EOFError` if the stream
  ends early. `write_u64` raises `ValueError` for values outside 0..2**64-1.
- `varisat.proof`: the proof step types `SolverVarName`, `UserVarName`,
  `DeleteVar`, `ChangeSamplingMode`, `AddClause`, `AtClause`, `UnitClauses`,
  `DeleteClause`, `ChangeHashBits`, `Model`, `Assumptions`,
  `FailedAssumptions` and `End`. They are frozen dataclasses derived from
  `ProofStep`, and `ProofStep.contains_hashes()` says whether a step carries
  clause hashes. The module also holds the `DeleteClauseProof` justifications
  (`REDUNDANT`, `SIMPLIFIED`, `SATISFIED`) and the 64-bit hash functions
  `lit_code_hash`, `lit_hash` and `clause_hash`. The result of `clause_hash`
  does not depend on the order of the literals.
- `varisat.binary_format`: `write_step(target, step)` encodes a proof step.
  `Parser().parse_step(source)` decodes it again. It raises `ValueError` on
  an unknown step code and `EOFError` on truncated input.
- `varisat.config`: `SolverConfig` holds the solver parameters with their
  defaults:
  - `vsids_decay` 0.95
  - `clause_activity_decay` 0.999
  - `reduce_locals_interval` 15000
  - `reduce_mids_interval` 10000
  - `luby_restart_interval_scale` 128

  `SolverConfigUpdate` is a partial update. Its `apply(config)` checks every
  set value before it writes any of them. It raises `ValueError` when a value
  is out of range and `TypeError` when a value has the wrong type, and in
  both cases the configuration is left unchanged. `merge(other)` combines two
  updates. `config_help()` returns a text that describes every option.
- `varisat.clause_header`: `ClauseHeader` holds the metadata of a clause:
  - `length`
  - `tier`
  - `deleted`, `mark` and `active` flags
  - `glue`, clamped to `GLUE_LIMIT`
  - `activity`, kept with single precision
  - `redundant`

  The module also defines `Tier` (`IRRED`, `CORE`, `MID`, `LOCAL`).
- `varisat.clause_alloc`: `ClauseAlloc` is append-only storage for clauses of
  three or more literals. Its methods are `add_clause`, `header`, `clause`,
  `check_bounds` and the `buffer_size` property. Clauses are addressed by
  `ClauseRef`, and `alloc.clause(cref)` gives a `Clause` view. A `Clause`
  offers `header`, `lits`, indexing and assignment of single literals.
- `varisat.vsids`: `Vsids`, the VSIDS branching heuristic. It is a heap of
  the available variables, ordered by activity. It provides `bump`, `decay`,
  `set_decay`, `reset`, `make_available` and `make_unavailable`. Iterating
  over it pops the available variable with the highest activity.
- `varisat.binary_clauses`: `BinaryClauses` keeps two-literal clauses as
  implication lists. It provides `add_binary_clause`, `implied`, `count` and
  `simplify`. `simplify` removes every clause with an assigned literal and
  returns the removed clauses.

## Examples

Round-tripping proof steps:

```python
import io

from varisat.binary_format import Parser, write_step
from varisat.proof import AtClause, End

buf = io.BytesIO()
step = AtClause(redundant=True, clause=[0, 3, 4], propagation_hashes=[1, 2])
write_step(buf, step)
write_step(buf, End())

buf.seek(0)
parser = Parser()
assert parser.parse_step(buf) == step
assert parser.parse_step(buf) == End()
```

Configuration:

```python
from varisat.config import SolverConfig, SolverConfigUpdate, config_help

config = SolverConfig()
SolverConfigUpdate(vsids_decay=0.9).apply(config)
assert config.vsids_decay == 0.9
print(config_help())
```

Clause storage:

```python
from varisat.clause_alloc import ClauseAlloc
from varisat.clause_header import ClauseHeader

alloc = ClauseAlloc()
cref = alloc.add_clause(ClauseHeader(), [0, 2, 5])
assert alloc.clause(cref).lits == [0, 2, 5]
assert alloc.header(cref).length == 3
```

Decision heuristic:

```python
from varisat.vsids import Vsids

vsids = Vsids()
vsids.set_var_count(3)
for var in range(3):
    vsids.make_available(var)
vsids.bump(2)
assert next(vsids) == 2
```

## What this package does not do

This package contains building blocks only. It does not provide:

- a solver, that is no propagation, conflict analysis or search loop
- DIMACS input or output
- a proof checker
- a command-line program

## Running the tests

```
pip install -e .[test]
pytest
```