from __future__ import annotations

from orbital_hamiltonian.hamiltonian.fermion_ops import FermionTermHermitian
from orbital_hamiltonian.hamiltonian.generic import Hamiltonian


class FermionHamiltonian(Hamiltonian):
    """Hamiltonian stored as canonical Hermitian fermion terms over spin-orbitals."""

    def add_term(self, term: FermionTermHermitian, coefficient: float):
        # Fold in the sign picked up while normal-ordering the term.
        super().add_term(term, coefficient * term.sign)

    def add_to_system_indices(self, term: FermionTermHermitian):
        self.system_indices.update(term.indices)
