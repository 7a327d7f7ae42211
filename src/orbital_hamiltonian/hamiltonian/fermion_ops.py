# file: fermion_ops.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence, Tuple

from orbital_hamiltonian.exceptions import UnsupportedArityError
from orbital_hamiltonian.orbital_integral import TermType


class LadderType(Enum):
    RAISING = "u"
    LOWERING = "d"


@dataclass(frozen=True)
class LadderOperator:
    """A creation (``RAISING``) or annihilation (``LOWERING``) operator on one mode."""
    index: int
    type: LadderType

    def __str__(self):
        return f"a†{self.index}" if self.type is LadderType.RAISING else f"a{self.index}"


def to_ladder_sequence(indices: Sequence[int]) -> Tuple[LadderOperator, ...]:
    """
    Turn ``[p, q, ..., r, s]`` into ``a†p a†q ... ar as``.

    The first half of the indices become creation operators and the second
    half annihilation operators.
    """
    if len(indices) % 2:
        raise ValueError(f"Ladder sequence needs an even number of indices, got {list(indices)}.")
    half = len(indices) // 2
    return tuple(
        LadderOperator(int(idx), LadderType.RAISING if k < half else LadderType.LOWERING)
        for k, idx in enumerate(indices)
    )


def _sort_sign(indices: Sequence[int], reverse: bool = False) -> int:
    """Return (-1)^(# of transpositions needed to sort ``indices``)."""
    inversions = 0
    for a in range(len(indices)):
        for b in range(a + 1, len(indices)):
            if (indices[a] < indices[b]) if reverse else (indices[a] > indices[b]):
                inversions += 1
    return -1 if inversions % 2 else 1


@dataclass(frozen=True)
class FermionTermHermitian:
    """
    Canonical representative of a fermion term plus its Hermitian conjugate.

    On construction the operators are brought into normal order (creation
    indices ascending, annihilation indices descending). If the conjugate
    then has the lexicographically smaller creation indices the term is
    replaced by it. The anticommutation sign picked up while reordering is
    kept in ``sign``; it does not take part in equality.

    Parameters
    ----------
    ladder_operators : iterable of LadderOperator
        Equal numbers of creation and annihilation operators, all creation
        operators first.

    Raises
    ------
    ValueError
        If the sequence is unbalanced, has an annihilation operator before a
        creation operator, or repeats a mode among its creation (or its
        annihilation) operators, which makes the term vanish.
    """
    ladder_operators: Tuple[LadderOperator, ...]
    sign: int = field(default=1, compare=False)

    def __post_init__(self):
        ops = tuple(self.ladder_operators)
        half = len(ops) // 2
        expected = [LadderType.RAISING] * half + [LadderType.LOWERING] * half
        if len(ops) % 2 or [op.type for op in ops] != expected:
            raise ValueError(
                "Hermitian fermion terms need creation operators followed by "
                f"as many annihilation operators, got {' '.join(map(str, ops))}."
            )
        raising = [op.index for op in ops[:half]]
        lowering = [op.index for op in ops[half:]]
        if len(set(raising)) < half or len(set(lowering)) < half:
            raise ValueError(f"Term {' '.join(map(str, ops))} repeats a mode and vanishes.")

        sign = self.sign * _sort_sign(raising) * _sort_sign(lowering, reverse=True)
        raising, lowering = sorted(raising), sorted(lowering)
        # Hermitian conjugate of a normal-ordered term swaps the two index sets
        if lowering < raising:
            raising, lowering = lowering, raising
        indices = raising + lowering[::-1]
        object.__setattr__(self, "ladder_operators", to_ladder_sequence(indices))
        object.__setattr__(self, "sign", sign)

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> FermionTermHermitian:
        return cls(to_ladder_sequence(list(indices)))

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(op.index for op in self.ladder_operators)

    @property
    def term_type(self) -> TermType:
        n = len(self.ladder_operators)
        if n == 2:
            return TermType.ONE_BODY
        if n == 4:
            return TermType.TWO_BODY
        raise UnsupportedArityError(self.indices)

    def __str__(self):
        return " ".join(map(str, self.ladder_operators))
