"""
Conversion from orbital integrals to Hermitian fermion terms.

For each integral: enumerate its symmetry orbit over spin assignments, map
every spin-orbital to an integer with the index convention, then keep only
the canonical tuples (see ``canonical``).
"""
from __future__ import annotations

import logging
from typing import List, Tuple

from orbital_hamiltonian.config import DEFAULT_INDEX_CONVENTION
from orbital_hamiltonian.hamiltonian.canonical import (
    canonicalize_one_body,
    canonicalize_two_body,
)
from orbital_hamiltonian.hamiltonian.fermion_hamiltonian import FermionHamiltonian
from orbital_hamiltonian.hamiltonian.fermion_ops import FermionTermHermitian
from orbital_hamiltonian.orbital_integral import (
    OrbitalIntegral,
    TermType,
    iter_spin_orbital_tuples,
)
from orbital_hamiltonian.spin import Convention

logger = logging.getLogger(__name__)


def to_hermitian_fermion_terms(
    integral: OrbitalIntegral,
    n_orbitals: int,
    convention: Convention = DEFAULT_INDEX_CONVENTION,
) -> List[Tuple[FermionTermHermitian, float]]:
    """
    Create all fermion terms generated by the symmetries of one integral.

    Parameters
    ----------
    integral : OrbitalIntegral
        One- or two-body orbital integral.
    n_orbitals : int
        Total number of spatial orbitals.
    convention : IndexConvention or callable, optional
        Map from (orbital, spin, n_orbitals) to a spin-orbital index.

    Returns
    -------
    list of (FermionTermHermitian, float)
        Canonical terms with their scaled coefficients, in enumeration order.
        No term appears twice.

    Raises
    ------
    UnsupportedArityError
        If the integral has neither 2 nor 4 indices.
    IndexOutOfRangeError
        If an orbital index is not less than ``n_orbitals``.
    """
    if integral.term_type is TermType.ONE_BODY:
        canonicalize = canonicalize_one_body
    else:
        canonicalize = canonicalize_two_body

    terms = []
    for spin_orbitals in iter_spin_orbital_tuples(integral):
        indices = tuple(so.to_int(n_orbitals, convention) for so in spin_orbitals)
        emitted = canonicalize(indices, integral.coefficient)
        if emitted is not None:
            terms.append(emitted)
    return terms


def to_fermion_hamiltonian(
    source,
    convention: Convention = DEFAULT_INDEX_CONVENTION,
) -> FermionHamiltonian:
    """
    Convert an orbital-integral Hamiltonian to a fermion Hamiltonian.

    Parameters
    ----------
    source : OrbitalIntegralHamiltonian
        Any object exposing ``terms`` (term type -> {integral: coefficient})
        and ``system_indices``. It is only read.
    convention : IndexConvention or callable, optional
        Map from (orbital, spin, n_orbitals) to a spin-orbital index.

    Returns
    -------
    FermionHamiltonian
        Merged canonical terms. ``system_indices`` is ``range(2 * n_orbitals)``
        with ``n_orbitals = max(source.system_indices) + 1``.

    Notes
    -----
    Every term is computed before the result is populated, so an error on
    any integral leaves nothing half-built.
    """
    hamiltonian = FermionHamiltonian()
    if not source.system_indices:
        return hamiltonian
    n_orbitals = max(source.system_indices) + 1

    terms = []
    for integrals in source.terms.values():
        for integral, coefficient in integrals.items():
            terms.extend(to_hermitian_fermion_terms(
                integral.with_coefficient(coefficient), n_orbitals, convention
            ))

    hamiltonian.add_terms(terms)
    # Number of spin-orbitals is twice the number of orbitals.
    hamiltonian.system_indices = set(range(2 * n_orbitals))
    logger.debug("Converted %d orbital integrals over %d orbitals to %d fermion terms",
                 sum(len(integrals) for integrals in source.terms.values()),
                 n_orbitals, hamiltonian.count_terms())
    return hamiltonian
