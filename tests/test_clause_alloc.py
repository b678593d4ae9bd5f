import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from varisat.clause_alloc import ClauseAlloc, ClauseRef
from varisat.clause_header import HEADER_LEN, ClauseHeader, Tier

clauses = st.lists(
    st.integers(min_value=0, max_value=199),
    min_size=3,
    max_size=30,
    unique_by=lambda code: code >> 1,
)
formulas = st.lists(clauses, max_size=60)


def _fill(formula):
    alloc = ClauseAlloc()
    crefs = [alloc.add_clause(ClauseHeader(), lits) for lits in formula]
    return alloc, crefs


@settings(max_examples=50)
@given(formulas)
def test_roundtrip_from_cnf_formula(formula):
    alloc, crefs = _fill(formula)
    recovered = []
    for cref in crefs:
        clause = alloc.clause(cref)
        assert clause.header.length == len(clause.lits)
        recovered.append(clause.lits)
    assert recovered == formula


@settings(max_examples=50)
@given(formulas)
def test_clause_mutation(formula):
    alloc, crefs = _fill(formula)
    for cref in crefs:
        clause = alloc.clause(cref)
        clause.lits = clause.lits[::-1]
    for cref in crefs:
        clause_len = len(alloc.clause(cref).lits)
        if clause_len > 3:
            alloc.header(cref).length = clause_len - 1
    for cref, lits in zip(crefs, formula):
        expected = lits[1:][::-1] if len(lits) > 3 else lits[::-1]
        assert alloc.clause(cref).lits == expected


@settings(max_examples=30)
@given(formulas)
def test_buffer_size_counts_headers_and_lits(formula):
    alloc, _ = _fill(formula)
    assert alloc.buffer_size == sum(HEADER_LEN + len(lits) for lits in formula)


def test_short_clauses_rejected():
    alloc = ClauseAlloc()
    with pytest.raises(ValueError):
        alloc.add_clause(ClauseHeader(), [0, 2])
    assert alloc.buffer_size == 0


def test_header_is_copied_and_length_set():
    header = ClauseHeader()
    header.tier = Tier.LOCAL
    alloc = ClauseAlloc()
    cref = alloc.add_clause(header, [0, 3, 4, 7])
    header.tier = Tier.CORE
    stored = alloc.header(cref)
    assert stored.tier == Tier.LOCAL
    assert stored.length == 4
    assert header.length == 0


def test_header_changes_persist():
    alloc = ClauseAlloc()
    cref = alloc.add_clause(ClauseHeader(), [0, 2, 4])
    alloc.header(cref).deleted = True
    assert alloc.clause(cref).header.deleted


def test_item_access_on_clause_view():
    alloc = ClauseAlloc()
    cref = alloc.add_clause(ClauseHeader(), [1, 2, 5])
    clause = alloc.clause(cref)
    clause[0] = 9
    assert list(alloc.clause(cref)) == [9, 2, 5]
    assert clause[-1] == 5
    with pytest.raises(IndexError):
        clause[3] = 1


def test_wrong_literal_count_rejected():
    alloc = ClauseAlloc()
    cref = alloc.add_clause(ClauseHeader(), [1, 2, 5])
    with pytest.raises(ValueError):
        alloc.clause(cref).lits = [1, 2]


def test_out_of_bounds_refs():
    alloc = ClauseAlloc()
    cref = alloc.add_clause(ClauseHeader(), [0, 2, 4])
    with pytest.raises(IndexError):
        alloc.header(ClauseRef(cref.offset + 100))
    with pytest.raises(IndexError):
        alloc.check_bounds(cref, 4)
    alloc.header(cref).length = 5
    with pytest.raises(IndexError):
        alloc.clause(cref)


def test_refs_are_ordered_by_offset():
    alloc = ClauseAlloc()
    first = alloc.add_clause(ClauseHeader(), [0, 2, 4])
    second = alloc.add_clause(ClauseHeader(), [1, 3, 5])
    assert first < second
    assert sorted([second, first]) == [first, second]