"""
Spin labels, spin-orbitals and the conventions that flatten them to integers.

A spin-orbital is a spatial orbital index paired with a spin label. Ladder
operators act on integer indices, so every spin-orbital has to be mapped to
``[0, 2 * n_orbitals)`` by an index convention. Two conventions are built in:

``IndexConvention.UP_DOWN``
    Interleaved ordering ``0↑, 0↓, 1↑, 1↓, ...`` i.e. ``2 * orbital + spin``.

``IndexConvention.HALF_UP``
    Block ordering, all spin-up orbitals followed by all spin-down orbitals,
    i.e. ``orbital + n_orbitals * spin``. This matches the alpha-then-beta
    qubit layout used for Jordan-Wigner circuits.

Any callable ``(orbital, spin, n_orbitals) -> int`` that is injective onto
``[0, 2 * n_orbitals)`` may be passed wherever a convention is expected.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Union

from orbital_hamiltonian.exceptions import IndexOutOfRangeError


class Spin(IntEnum):
    """Spin label of a spin-orbital."""
    UP = 0
    DOWN = 1

    def __str__(self):
        return "↑" if self is Spin.UP else "↓"


class IndexConvention(Enum):
    """
    Built-in maps from (orbital, spin) to a flat spin-orbital index.

    Members are callable with ``(orbital, spin, n_orbitals)`` so they can be
    used anywhere a custom convention function is accepted.
    """
    UP_DOWN = "up_down"
    HALF_UP = "half_up"

    def __call__(self, orbital: int, spin: Spin, n_orbitals: int) -> int:
        if self is IndexConvention.UP_DOWN:
            return 2 * orbital + int(spin)
        return orbital + n_orbitals * int(spin)

    def from_index(self, index: int, n_orbitals: int) -> SpinOrbital:
        """
        Invert the convention.

        Parameters
        ----------
        index : int
            Flat spin-orbital index in ``[0, 2 * n_orbitals)``.
        n_orbitals : int
            Number of spatial orbitals.

        Returns
        -------
        SpinOrbital
            The spin-orbital that maps to ``index``.

        Raises
        ------
        IndexOutOfRangeError
            If ``index`` lies outside ``[0, 2 * n_orbitals)``.
        """
        if not 0 <= index < 2 * n_orbitals:
            raise IndexOutOfRangeError(index, 2 * n_orbitals)
        if self is IndexConvention.UP_DOWN:
            orbital, spin = divmod(index, 2)
        else:
            spin, orbital = divmod(index, n_orbitals)
        return SpinOrbital(orbital, Spin(spin))


Convention = Union[IndexConvention, Callable[[int, Spin, int], int]]


def spin_orbital_index(orbital: int, spin: Spin, n_orbitals: int,
                       convention: Convention) -> int:
    """
    Map a spatial orbital and spin label to a flat spin-orbital index.

    The orbital is range-checked before ``convention`` is called; the
    convention itself is treated as an opaque injective function.

    Parameters
    ----------
    orbital : int
        Spatial orbital index.
    spin : Spin
        Spin label.
    n_orbitals : int
        Number of spatial orbitals in the system.
    convention : IndexConvention or callable
        Map ``(orbital, spin, n_orbitals) -> int``.

    Returns
    -------
    int
        Spin-orbital index.

    Raises
    ------
    IndexOutOfRangeError
        If ``orbital`` is negative or not less than ``n_orbitals``.
    """
    if not 0 <= orbital < n_orbitals:
        raise IndexOutOfRangeError(orbital, n_orbitals)
    return convention(orbital, Spin(spin), n_orbitals)


@dataclass(frozen=True)
class SpinOrbital:
    """A spatial orbital index paired with a spin label."""
    orbital: int
    spin: Spin

    def to_int(self, n_orbitals: int, convention: Convention) -> int:
        return spin_orbital_index(self.orbital, self.spin, n_orbitals, convention)

    def __str__(self):
        return f"{self.orbital}{str(self.spin)}"
