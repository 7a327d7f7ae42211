from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

import numpy as np

from orbital_hamiltonian.config import DEFAULT_THRESHOLD
from orbital_hamiltonian.hamiltonian.generic import Hamiltonian
from orbital_hamiltonian.orbital_integral import OrbitalIntegral

logger = logging.getLogger(__name__)


class OrbitalIntegralHamiltonian(Hamiltonian):
    """
    Hamiltonian stored as one- and two-electron orbital integrals.

    Integrals that are symmetry images of each other share a key, so adding
    ``(0, 1)`` and then ``(1, 0)`` accumulates onto one entry.
    """

    def add_term(self, integral: OrbitalIntegral, coefficient: Optional[float] = None):
        """
        Add an orbital integral.

        Parameters
        ----------
        integral : OrbitalIntegral
            Integral to add. Its arity is checked immediately.
        coefficient : float, optional
            Value to accumulate. Defaults to ``integral.coefficient``.
        """
        if coefficient is None:
            coefficient = integral.coefficient
        super().add_term(integral, coefficient)

    def add_terms(self, terms: Iterable[Union[OrbitalIntegral, tuple]]):
        for term in terms:
            if isinstance(term, OrbitalIntegral):
                self.add_term(term)
            else:
                self.add_term(*term)

    def add_to_system_indices(self, integral: OrbitalIntegral):
        self.system_indices.update(integral.orbital_indices)

    @classmethod
    def from_arrays(
        cls,
        one_body: np.ndarray,
        two_body: Optional[np.ndarray] = None,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> OrbitalIntegralHamiltonian:
        """
        Build a Hamiltonian from dense MO integral arrays.

        Parameters
        ----------
        one_body : np.ndarray
            One-electron integrals ``h[i, j]``, shape ``(n, n)``, symmetric.
        two_body : np.ndarray, optional
            Two-electron integrals in chemists' notation ``(ij|kl)``, shape
            ``(n, n, n, n)``, with full 8-fold symmetry.
        threshold : float, optional
            Entries with ``|value| <= threshold`` are skipped.

        Returns
        -------
        OrbitalIntegralHamiltonian
            One integral per symmetry orbit. ``system_indices`` covers all
            ``n`` orbitals even if some carry no integral above threshold.

        Notes
        -----
        The represented operator is
        ``sum_ij h_ij a†i a_j + 1/2 sum_ijkl (ij|kl) a†i a†k a_l a_j``
        summed over spin.
        """
        h1 = np.asarray(one_body, dtype=float)
        if h1.ndim != 2 or h1.shape[0] != h1.shape[1]:
            raise ValueError(f"one_body must be a square matrix, got shape {h1.shape}.")
        n = h1.shape[0]

        hamiltonian = cls()
        for i in range(n):
            for j in range(i, n):
                if abs(h1[i, j]) > threshold:
                    hamiltonian.add_term(OrbitalIntegral((i, j), h1[i, j]))

        if two_body is not None:
            g2 = np.asarray(two_body, dtype=float)
            if g2.shape != (n, n, n, n):
                raise ValueError(
                    f"two_body must have shape {(n, n, n, n)}, got {g2.shape}."
                )
            for idx in np.ndindex(*g2.shape):
                value = g2[idx]
                if abs(value) <= threshold:
                    continue
                integral = OrbitalIntegral.from_mulliken(idx, value)
                if integral.is_canonical:
                    hamiltonian.add_term(integral)

        hamiltonian.system_indices.update(range(n))
        logger.debug("Read %d orbital integrals over %d orbitals",
                     hamiltonian.count_terms(), n)
        return hamiltonian
