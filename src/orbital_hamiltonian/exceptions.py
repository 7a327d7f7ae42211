"""Errors raised while building or converting Hamiltonians."""


class UnsupportedArityError(ValueError):
    """An orbital integral carries neither 2 nor 4 orbital indices."""

    def __init__(self, orbital_indices):
        self.orbital_indices = tuple(orbital_indices)
        super().__init__(
            f"Orbital integral must have 2 or 4 indices, got "
            f"{len(self.orbital_indices)}: {self.orbital_indices}."
        )


class IndexOutOfRangeError(IndexError):
    """An orbital index does not lie in ``[0, n_orbitals)``."""

    def __init__(self, orbital: int, n_orbitals: int):
        self.orbital = orbital
        self.n_orbitals = n_orbitals
        super().__init__(
            f"Orbital index {orbital} out of range for {n_orbitals} orbitals."
        )
