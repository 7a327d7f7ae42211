"""
Reduction of spin-orbital index tuples to canonical Hermitian fermion terms.

The symmetry enumeration visits every member of an integral's orbit. Only
the tuples that sit in canonical position produce a term here; their
coefficient is scaled by the number of orbit members they stand for, and
its sign is flipped whenever two operators had to be exchanged.

Two-body tuples are first classified by their index-equality pattern and
then looked up in ``TWO_BODY_RULES``, keyed by ``(pattern, branch)``. Each
rule gives the positions of ``(p, q, r, s)`` in the emitted term and the
coefficient factor.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from orbital_hamiltonian.hamiltonian.fermion_ops import FermionTermHermitian


class TwoBodyPattern(Enum):
    PQQP = "pqqp"
    PQPQ = "pqpq"
    PQQR = "pqqr"
    PQRQ = "pqrq"
    PQRS = "pqrs"
    NONE = "none"


_P, _Q, _R, _S = 0, 1, 2, 3
_PQRS = (_P, _Q, _R, _S)
_PQSR = (_P, _Q, _S, _R)
_QPRS = (_Q, _P, _R, _S)
_QPSR = (_Q, _P, _S, _R)

# (pattern, branch) -> (emitted positions, coefficient factor)
TWO_BODY_RULES: Dict[Tuple[TwoBodyPattern, Tuple[bool, ...]], Tuple[Tuple[int, ...], float]] = {
    (TwoBodyPattern.PQQP, ()): (_PQRS, 1.0),
    (TwoBodyPattern.PQPQ, ()): (_PQSR, -1.0),
    # branch: (r < s, p < q)
    (TwoBodyPattern.PQQR, (True, True)): (_PQSR, -2.0),
    (TwoBodyPattern.PQQR, (True, False)): (_QPSR, 2.0),
    (TwoBodyPattern.PQQR, (False, True)): (_PQRS, 2.0),
    (TwoBodyPattern.PQQR, (False, False)): (_QPRS, -2.0),
    # branch: (p < q, r > q)
    (TwoBodyPattern.PQRQ, (True, True)): (_PQRS, 2.0),
    (TwoBodyPattern.PQRQ, (True, False)): (_PQSR, -2.0),
    (TwoBodyPattern.PQRQ, (False, True)): (_QPRS, -2.0),
    (TwoBodyPattern.PQRQ, (False, False)): (_QPRS, -2.0),
    # branch: (r < s,)
    (TwoBodyPattern.PQRS, (True,)): (_PQSR, -2.0),
    (TwoBodyPattern.PQRS, (False,)): (_PQRS, 2.0),
}


def classify_two_body(p: int, q: int, r: int, s: int) -> TwoBodyPattern:
    """
    Classify a spin-orbital index tuple by which of its indices coincide.

    The checks run in a fixed order and the first match wins. Tuples that
    are not the canonical representative of their orbit classify as
    ``TwoBodyPattern.NONE``.
    """
    if p == s and q == r and p < q:
        return TwoBodyPattern.PQQP
    if p == r and q == s and p < q:
        return TwoBodyPattern.PQPQ
    if q == r and p < s and r != s and p != q:
        return TwoBodyPattern.PQQR
    if q == s and p < r and r != s and p != s:
        return TwoBodyPattern.PQRQ
    if p < q and p < r and p < s and q != r and q != s and r != s:
        return TwoBodyPattern.PQRS
    return TwoBodyPattern.NONE


def _branch(pattern: TwoBodyPattern, p: int, q: int, r: int, s: int) -> Tuple[bool, ...]:
    if pattern is TwoBodyPattern.PQQR:
        return (r < s, p < q)
    if pattern is TwoBodyPattern.PQRQ:
        return (p < q, r > q)
    if pattern is TwoBodyPattern.PQRS:
        return (r < s,)
    return ()


def canonicalize_one_body(
    indices: Sequence[int], coefficient: float
) -> Optional[Tuple[FermionTermHermitian, float]]:
    """
    Canonical term for a one-body spin-orbital pair ``(p, q)``.

    Returns ``([p, q], c)`` for ``p == q``, ``([p, q], 2c)`` for ``p < q``
    (the term also stands for ``(q, p)``) and ``None`` for ``p > q``.
    """
    p, q = indices
    if p == q:
        return FermionTermHermitian.from_indices((p, q)), coefficient
    if p < q:
        return FermionTermHermitian.from_indices((p, q)), 2.0 * coefficient
    return None


def canonicalize_two_body(
    indices: Sequence[int], coefficient: float
) -> Optional[Tuple[FermionTermHermitian, float]]:
    """
    Canonical term for a two-body spin-orbital tuple ``(p, q, r, s)``.

    Parameters
    ----------
    indices : sequence of int
        Spin-orbital indices of ``a†p a†q ar as``.
    coefficient : float
        Value of the orbital integral the tuple was enumerated from.

    Returns
    -------
    (FermionTermHermitian, float) or None
        The emitted term with its scaled coefficient, or ``None`` when the
        tuple is covered by another member of its orbit.
    """
    p, q, r, s = indices
    pattern = classify_two_body(p, q, r, s)
    if pattern is TwoBodyPattern.NONE:
        return None
    positions, factor = TWO_BODY_RULES[(pattern, _branch(pattern, p, q, r, s))]
    term = FermionTermHermitian.from_indices(indices[i] for i in positions)
    return term, factor * coefficient
