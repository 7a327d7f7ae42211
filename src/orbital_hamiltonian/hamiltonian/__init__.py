"""
Hamiltonian containers and the orbital-integral to fermion-term conversion.

This module turns a second-quantized molecular Hamiltonian given as orbital
integrals into a deduplicated sum of Hermitian fermion terms over
spin-orbitals.

Main Entry Points
-----------------
to_fermion_hamiltonian : Convert a whole Hamiltonian
    Converts an OrbitalIntegralHamiltonian into a FermionHamiltonian under a
    chosen spin-orbital index convention.

to_hermitian_fermion_terms : Convert a single integral
    Lists the canonical (term, coefficient) pairs generated by all
    symmetries of one orbital integral. Useful for checking one integral
    in isolation.

Containers
----------
OrbitalIntegralHamiltonian : Integrals keyed by term type
    Build term by term, or from dense MO integral arrays with
    ``OrbitalIntegralHamiltonian.from_arrays``.

FermionHamiltonian : Canonical fermion terms keyed by term type

Examples
--------
Build from integral arrays and convert:

>>> import numpy as np
>>> from orbital_hamiltonian.hamiltonian import (
...     OrbitalIntegralHamiltonian, to_fermion_hamiltonian)
>>> h1 = np.array([[-1.25, 0.0], [0.0, -0.47]])
>>> source = OrbitalIntegralHamiltonian.from_arrays(h1)
>>> H = to_fermion_hamiltonian(source)
>>> sorted(H.system_indices)
[0, 1, 2, 3]
"""

from .canonical import (
    TwoBodyPattern,
    canonicalize_one_body,
    canonicalize_two_body,
    classify_two_body,
)
from .conversion import to_fermion_hamiltonian, to_hermitian_fermion_terms
from .fermion_hamiltonian import FermionHamiltonian
from .fermion_ops import FermionTermHermitian, LadderOperator, LadderType
from .generic import Hamiltonian
from .orbital_integral_hamiltonian import OrbitalIntegralHamiltonian

__all__ = [
    "FermionHamiltonian",
    "FermionTermHermitian",
    "Hamiltonian",
    "LadderOperator",
    "LadderType",
    "OrbitalIntegralHamiltonian",
    "TwoBodyPattern",
    "canonicalize_one_body",
    "canonicalize_two_body",
    "classify_two_body",
    "to_fermion_hamiltonian",
    "to_hermitian_fermion_terms",
]
