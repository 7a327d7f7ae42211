"""Orbital-integral to fermion-term Hamiltonian conversion."""

from orbital_hamiltonian.exceptions import IndexOutOfRangeError, UnsupportedArityError
from orbital_hamiltonian.hamiltonian import (
    FermionHamiltonian,
    FermionTermHermitian,
    OrbitalIntegralHamiltonian,
    to_fermion_hamiltonian,
    to_hermitian_fermion_terms,
)
from orbital_hamiltonian.orbital_integral import OrbitalIntegral, TermType
from orbital_hamiltonian.spin import IndexConvention, Spin, SpinOrbital

__all__ = [
    "FermionHamiltonian",
    "FermionTermHermitian",
    "IndexConvention",
    "IndexOutOfRangeError",
    "OrbitalIntegral",
    "OrbitalIntegralHamiltonian",
    "Spin",
    "SpinOrbital",
    "TermType",
    "UnsupportedArityError",
    "to_fermion_hamiltonian",
    "to_hermitian_fermion_terms",
]
