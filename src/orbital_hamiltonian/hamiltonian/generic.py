"""
Term-type keyed container shared by the integral and fermion Hamiltonians.
"""
from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, Set, Tuple

import numpy as np

from orbital_hamiltonian.orbital_integral import TermType


class Hamiltonian:
    """
    Mapping ``term type -> {term: coefficient}`` plus the set of system indices.

    Terms must be hashable and expose a ``term_type`` attribute. Adding a
    term that is already present sums the coefficients, so the final
    mapping does not depend on the order terms were added in.
    """

    def __init__(self):
        self.terms: Dict[TermType, Dict[Hashable, float]] = {}
        self.system_indices: Set[int] = set()

    def add_term(self, term, coefficient: float):
        self._merge(term, coefficient)
        self.add_to_system_indices(term)

    def add_terms(self, terms: Iterable[Tuple[Any, float]]):
        for term, coefficient in terms:
            self.add_term(term, coefficient)

    def add_to_system_indices(self, term):
        raise NotImplementedError

    def add_hamiltonian(self, other: Hamiltonian):
        """
        Merge the terms and system indices of ``other`` into this Hamiltonian.

        Used to reduce Hamiltonians built independently from disjoint parts
        of a source.
        """
        if not isinstance(other, type(self)):
            raise TypeError(
                f"Cannot merge {type(other).__name__} into {type(self).__name__}."
            )
        for bucket in other.terms.values():
            for term, coefficient in bucket.items():
                self._merge(term, coefficient)
        self.system_indices |= other.system_indices

    def _merge(self, term, coefficient: float):
        bucket = self.terms.setdefault(term.term_type, {})
        bucket[term] = bucket.get(term, 0.0) + coefficient

    def get_terms(self, term_type: TermType) -> Dict[Hashable, float]:
        return dict(self.terms.get(term_type, {}))

    def count_terms(self) -> int:
        return sum(len(bucket) for bucket in self.terms.values())

    def norm(self, power: float = 1.0) -> float:
        """Return ``(sum |c|^power)^(1/power)`` over all coefficients."""
        coeffs = np.array([c for bucket in self.terms.values() for c in bucket.values()])
        if coeffs.size == 0:
            return 0.0
        return float(np.sum(np.abs(coeffs) ** power) ** (1.0 / power))

    def __str__(self):
        lines = []
        for term_type, bucket in self.terms.items():
            lines.append(f"{term_type.name}: {len(bucket)} terms")
            for term, coefficient in bucket.items():
                lines.append(f"    {term}: {coefficient:.12g}")
        return "\n".join(lines)
