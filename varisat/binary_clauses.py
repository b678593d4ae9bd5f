"""Storage of binary clauses as implication lists."""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple


class BinaryClauses:
    """Binary clauses, indexed by the literal whose assignment implies the other.

    Literals are given by their codes; negation flips the lowest bit.
    """

    def __init__(self) -> None:
        self._by_lit: List[List[int]] = []
        self._count = 0

    def set_var_count(self, count: int) -> None:
        """Resize the structures for ``count`` variables."""
        size = count * 2
        del self._by_lit[size:]
        self._by_lit.extend([] for _ in range(size - len(self._by_lit)))

    def add_binary_clause(self, lits: Sequence[int]) -> None:
        """Add the clause made of the two literals in ``lits``."""
        first, second = lits
        self._by_lit[first ^ 1].append(second)
        self._by_lit[second ^ 1].append(first)
        self._count += 1

    def implied(self, lit: int) -> List[int]:
        """Literals implied when ``lit`` becomes true."""
        return self._by_lit[lit]

    @property
    def count(self) -> int:
        """Number of binary clauses."""
        return self._count

    def simplify(self, lit_is_unknown: Callable[[int], bool]) -> List[Tuple[int, int]]:
        """Remove every binary clause that contains an assigned literal.

        ``lit_is_unknown`` tells whether a literal is unassigned. Returns the
        removed clauses as sorted pairs, each once, in the order they are found.
        """
        deleted: List[Tuple[int, int]] = []
        double_count = 0

        for lit, implied in enumerate(self._by_lit):
            negated = lit ^ 1
            if not lit_is_unknown(lit):
                deleted.extend((negated, other) for other in implied if negated < other)
                implied.clear()
                continue

            kept = []
            for other in implied:
                if lit_is_unknown(other):
                    kept.append(other)
                elif negated < other:
                    deleted.append((negated, other))
            implied[:] = kept
            double_count += len(kept)

        self._count = double_count // 2
        return deleted