"""
Package-wide defaults. Callers can override each of these per call.
"""
from orbital_hamiltonian.spin import IndexConvention

# Block (alpha then beta) ordering, matching the qubit layout of JW circuits.
DEFAULT_INDEX_CONVENTION = IndexConvention.HALF_UP

# Integrals at or below this magnitude are dropped when importing arrays.
DEFAULT_THRESHOLD = 1e-12
