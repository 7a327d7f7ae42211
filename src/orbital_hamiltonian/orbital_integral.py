"""
Orbital integrals and the enumeration of their symmetry orbits.

Two-electron integrals are stored in the index order of the operator string
they multiply: ``(i, j, k, l)`` stands for ``a†_i a†_j a_k a_l``, which is the
chemists' integral ``(il|jk)``. In that order a real integral is invariant
under the eight permutations

    ijkl = jilk = klij = lkji = ikjl = kilj = jlik = ljki

and one-electron integrals under ``ij = ji``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

from orbital_hamiltonian.exceptions import UnsupportedArityError
from orbital_hamiltonian.spin import Spin, SpinOrbital


class TermType(Enum):
    """Kind of Hamiltonian term, shared by integral and fermion Hamiltonians."""
    ONE_BODY = "one_body"
    TWO_BODY = "two_body"


# Index permutations generating each symmetry orbit.
_ONE_BODY_SYMMETRIES = ((0, 1), (1, 0))
_TWO_BODY_SYMMETRIES = (
    (0, 1, 2, 3),  # ijkl
    (1, 0, 3, 2),  # jilk
    (2, 3, 0, 1),  # klij
    (3, 2, 1, 0),  # lkji
    (0, 2, 1, 3),  # ikjl
    (2, 0, 3, 1),  # kilj
    (1, 3, 0, 2),  # jlik
    (3, 1, 2, 0),  # ljki
)

# Spin assignments that conserve spin between creation/annihilation pairs.
_UP, _DOWN = Spin.UP, Spin.DOWN
_ONE_BODY_SPINS = ((_UP, _UP), (_DOWN, _DOWN))
_TWO_BODY_SPINS = (
    (_UP, _UP, _UP, _UP),
    (_UP, _DOWN, _DOWN, _UP),
    (_DOWN, _UP, _UP, _DOWN),
    (_DOWN, _DOWN, _DOWN, _DOWN),
)


@dataclass(frozen=True, eq=False)
class OrbitalIntegral:
    """
    An immutable one- or two-electron orbital integral.

    Equality and hashing use the canonical form of the indices (the smallest
    member of the symmetry orbit) and ignore the coefficient, so an integral
    and its symmetry images land on the same Hamiltonian key.

    Fields:
      orbital_indices: tuple of 2 or 4 non-negative orbital indices
      coefficient: real value of the integral
    """
    orbital_indices: Tuple[int, ...]
    coefficient: float = 1.0
    _key: Tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self):
        indices = tuple(int(i) for i in self.orbital_indices)
        if any(i < 0 for i in indices):
            raise ValueError(f"Orbital indices must be non-negative, got {indices}.")
        object.__setattr__(self, "orbital_indices", indices)
        object.__setattr__(self, "coefficient", float(self.coefficient))
        # Unsupported arities stay constructible so the error surfaces at
        # conversion time rather than when the integral is read in.
        key = _canonical(indices) if len(indices) in (2, 4) else indices
        object.__setattr__(self, "_key", key)

    @classmethod
    def from_mulliken(cls, orbital_indices: Sequence[int],
                      coefficient: float = 1.0) -> OrbitalIntegral:
        """
        Build an integral from chemists' notation ``(ij|kl)``.

        Two-body indices are reordered to ``(i, k, l, j)``; one-body indices
        are the same in both notations.
        """
        indices = tuple(orbital_indices)
        if len(indices) == 4:
            i, j, k, l = indices
            indices = (i, k, l, j)
        return cls(indices, coefficient)

    @property
    def term_type(self) -> TermType:
        n = len(self.orbital_indices)
        if n == 2:
            return TermType.ONE_BODY
        if n == 4:
            return TermType.TWO_BODY
        raise UnsupportedArityError(self.orbital_indices)

    def to_canonical_form(self) -> OrbitalIntegral:
        """Return the member of the symmetry orbit with the smallest indices."""
        return OrbitalIntegral(_canonical(self.orbital_indices), self.coefficient)

    @property
    def is_canonical(self) -> bool:
        """True if the indices are already the canonical member of the orbit."""
        return self.orbital_indices == self._key

    def with_coefficient(self, coefficient: float) -> OrbitalIntegral:
        return OrbitalIntegral(self.orbital_indices, coefficient)

    def __eq__(self, other):
        if not isinstance(other, OrbitalIntegral):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __str__(self):
        return f"{self.term_type.name}: {list(self.orbital_indices)} * {self.coefficient}"


def _symmetries(indices: Tuple[int, ...]):
    if len(indices) == 2:
        return _ONE_BODY_SYMMETRIES
    if len(indices) == 4:
        return _TWO_BODY_SYMMETRIES
    raise UnsupportedArityError(indices)


def _permute(indices, permutation):
    return tuple(indices[i] for i in permutation)


def _canonical(indices):
    return min(_permute(indices, p) for p in _symmetries(indices))


def enumerate_orbital_symmetries(integral: OrbitalIntegral) -> List[OrbitalIntegral]:
    """
    List the distinct orbital-index tuples equivalent to ``integral``.

    Parameters
    ----------
    integral : OrbitalIntegral
        One- or two-body integral.

    Returns
    -------
    list of OrbitalIntegral
        Orbit members in first-seen order, each with the original coefficient.
        Repeated indices collapse permutations, so the list has between 1 and
        2 (one-body) or 1 and 8 (two-body) entries.

    Raises
    ------
    UnsupportedArityError
        If the integral has neither 2 nor 4 indices.
    """
    indices = integral.orbital_indices
    seen = {}
    for permutation in _symmetries(indices):
        seen.setdefault(_permute(indices, permutation), None)
    return [OrbitalIntegral(orbit, integral.coefficient) for orbit in seen]


def enumerate_spin_orbitals(integral: OrbitalIntegral) -> List[Tuple[SpinOrbital, ...]]:
    """
    Expand one orbital-index tuple over its spin-conserving spin assignments.

    One-body integrals give ``(i↑, j↑)`` and ``(i↓, j↓)``. Two-body integrals
    give four assignments where ``i`` shares its spin with ``l`` and ``j``
    shares its spin with ``k``.
    """
    term_type = integral.term_type
    spins = _ONE_BODY_SPINS if term_type is TermType.ONE_BODY else _TWO_BODY_SPINS
    return [
        tuple(SpinOrbital(orbital, spin)
              for orbital, spin in zip(integral.orbital_indices, assignment))
        for assignment in spins
    ]


def iter_spin_orbital_tuples(integral: OrbitalIntegral) -> Iterator[Tuple[SpinOrbital, ...]]:
    """Yield every spin-orbital tuple in the symmetry orbit of ``integral``."""
    for orbit_member in enumerate_orbital_symmetries(integral):
        yield from enumerate_spin_orbitals(orbit_member)
