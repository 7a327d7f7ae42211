"""
Tests for converting orbital integrals and whole Hamiltonians to fermion terms.
"""
import types

import numpy as np
import pytest

from orbital_hamiltonian.exceptions import IndexOutOfRangeError, UnsupportedArityError
from orbital_hamiltonian.hamiltonian import (
    FermionHamiltonian,
    OrbitalIntegralHamiltonian,
    canonicalize_two_body,
    to_fermion_hamiltonian,
    to_hermitian_fermion_terms,
)
from orbital_hamiltonian.orbital_integral import (
    OrbitalIntegral,
    TermType,
    enumerate_orbital_symmetries,
    iter_spin_orbital_tuples,
)
from orbital_hamiltonian.spin import IndexConvention

HALF_UP = IndexConvention.HALF_UP
UP_DOWN = IndexConvention.UP_DOWN


def _as_lists(terms):
    return [(list(term.indices), coefficient) for term, coefficient in terms]


def _random_integrals(n, seed=7):
    """Random real MO integrals with the symmetries of a real basis."""
    rng = np.random.default_rng(seed)
    h1 = rng.normal(size=(n, n))
    h1 = h1 + h1.T
    g2 = rng.normal(size=(n, n, n, n))
    g2 = g2 + g2.transpose(1, 0, 2, 3)
    g2 = g2 + g2.transpose(0, 1, 3, 2)
    g2 = g2 + g2.transpose(2, 3, 0, 1)
    return h1, g2


class TestToHermitianFermionTerms:
    """Test suite for single-integral conversion."""

    def test_one_body_diagonal(self):
        terms = to_hermitian_fermion_terms(OrbitalIntegral((0, 0), 3.0), 1, HALF_UP)
        assert _as_lists(terms) == [([0, 0], 3.0), ([1, 1], 3.0)]

    def test_one_body_off_diagonal(self):
        terms = to_hermitian_fermion_terms(OrbitalIntegral((0, 1), 2.0), 2, HALF_UP)
        assert _as_lists(terms) == [([0, 1], 4.0), ([2, 3], 4.0)]

    def test_one_body_symmetry_image(self):
        """(1, 0) enumerates the same orbit as (0, 1)."""
        a = to_hermitian_fermion_terms(OrbitalIntegral((1, 0), 2.0), 2, HALF_UP)
        b = to_hermitian_fermion_terms(OrbitalIntegral((0, 1), 2.0), 2, HALF_UP)
        assert sorted(_as_lists(a)) == sorted(_as_lists(b))

    def test_two_body_coulomb_half_up(self):
        terms = to_hermitian_fermion_terms(OrbitalIntegral((0, 1, 1, 0), 1.5), 2, HALF_UP)
        assert _as_lists(terms) == [
            ([0, 1, 1, 0], 1.5),
            ([0, 3, 3, 0], 1.5),
            ([2, 3, 3, 2], 1.5),
            ([1, 2, 2, 1], 1.5),
        ]

    def test_two_body_coulomb_up_down(self):
        terms = to_hermitian_fermion_terms(OrbitalIntegral((0, 1, 1, 0), 1.5), 2, UP_DOWN)
        assert _as_lists(terms) == [
            ([0, 2, 2, 0], 1.5),
            ([0, 3, 3, 0], 1.5),
            ([1, 2, 2, 1], 1.5),
            ([1, 3, 3, 1], 1.5),
        ]

    def test_pqqr_integral(self):
        """Same-spin part of (0, 1, 1, 2) is a single PQQR term."""
        terms = to_hermitian_fermion_terms(OrbitalIntegral((0, 1, 1, 2), 1.0), 3, HALF_UP)
        assert ([0, 1, 2, 1], -2.0) in _as_lists(terms)

    def test_index_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            to_hermitian_fermion_terms(OrbitalIntegral((0, 2), 1.0), 2, HALF_UP)

    def test_unsupported_arity(self):
        with pytest.raises(UnsupportedArityError):
            to_hermitian_fermion_terms(OrbitalIntegral((0, 1, 2), 1.0), 3, HALF_UP)

    @pytest.mark.parametrize("convention", [HALF_UP, UP_DOWN])
    @pytest.mark.parametrize(
        "indices",
        [(0, 1, 2, 3), (0, 0, 1, 1), (0, 1, 1, 2), (0, 1, 2, 1), (3, 1, 0, 2), (1, 1, 1, 1)],
    )
    def test_symmetry_closure(self, indices, convention):
        """Every member of an orbit converts to the same multiset of terms."""
        integral = OrbitalIntegral(indices, 0.75)
        expected = sorted(_as_lists(to_hermitian_fermion_terms(integral, 4, convention)))
        for member in enumerate_orbital_symmetries(integral):
            got = sorted(_as_lists(to_hermitian_fermion_terms(member, 4, convention)))
            assert got == expected

    @pytest.mark.parametrize("convention", [HALF_UP, UP_DOWN])
    @pytest.mark.parametrize(
        "indices",
        [(0, 1, 2, 3), (0, 0, 1, 1), (0, 1, 1, 2), (0, 1, 2, 1), (2, 0, 1, 0), (0, 1), (1, 1)],
    )
    def test_no_duplicate_terms(self, indices, convention):
        terms = to_hermitian_fermion_terms(OrbitalIntegral(indices, 1.0), 4, convention)
        keys = [term for term, _ in terms]
        assert len(keys) == len(set(keys))

    def test_visiting_order_irrelevant(self):
        """Canonicalizing the enumerated tuples backwards gives the same terms."""
        integral = OrbitalIntegral((0, 1, 2, 3), 1.0)
        forward = _as_lists(to_hermitian_fermion_terms(integral, 4, HALF_UP))
        tuples = list(iter_spin_orbital_tuples(integral))
        backward = []
        for spin_orbitals in reversed(tuples):
            result = canonicalize_two_body(
                tuple(so.to_int(4, HALF_UP) for so in spin_orbitals), integral.coefficient
            )
            if result is not None:
                backward.append(result)
        assert sorted(forward) == sorted(_as_lists(backward))

    def test_custom_convention(self):
        """A plain function works as an index convention."""
        def reversed_half_up(orbital, spin, n_orbitals):
            return 2 * n_orbitals - 1 - (orbital + n_orbitals * spin)

        terms = to_hermitian_fermion_terms(OrbitalIntegral((0, 1), 1.0), 2, reversed_half_up)
        assert sorted(_as_lists(terms)) == [([0, 1], 2.0), ([2, 3], 2.0)]


def _small_source():
    source = OrbitalIntegralHamiltonian()
    source.add_terms([
        OrbitalIntegral((0, 0), 1.0),
        OrbitalIntegral((0, 1), 0.5),
        OrbitalIntegral((0, 1, 1, 0), 0.25),
    ])
    return source


class TestToFermionHamiltonian:
    """Test suite for whole-Hamiltonian conversion."""

    def test_small_hamiltonian(self):
        H = to_fermion_hamiltonian(_small_source(), HALF_UP)
        one_body = {term.indices: c for term, c in H.get_terms(TermType.ONE_BODY).items()}
        two_body = {term.indices: c for term, c in H.get_terms(TermType.TWO_BODY).items()}
        assert one_body == {(0, 0): 1.0, (2, 2): 1.0, (0, 1): 1.0, (2, 3): 1.0}
        assert two_body == {
            (0, 1, 1, 0): 0.25,
            (0, 3, 3, 0): 0.25,
            (2, 3, 3, 2): 0.25,
            (1, 2, 2, 1): 0.25,
        }
        assert H.system_indices == {0, 1, 2, 3}
        assert H.count_terms() == 8
        assert H.norm() == pytest.approx(5.0)

    def test_system_index_range(self):
        """All 2n spin-orbitals are in play even if few appear in terms."""
        source = OrbitalIntegralHamiltonian()
        source.add_term(OrbitalIntegral((3, 3), 1.0))
        H = to_fermion_hamiltonian(source, HALF_UP)
        assert H.system_indices == set(range(8))
        assert {term.indices for term in H.get_terms(TermType.ONE_BODY)} == {(3, 3), (7, 7)}

    def test_accumulated_coefficient_used(self):
        """Symmetry images added separately convert as one summed integral."""
        source = OrbitalIntegralHamiltonian()
        source.add_term(OrbitalIntegral((0, 1), 0.5))
        source.add_term(OrbitalIntegral((1, 0), 0.25))
        H = to_fermion_hamiltonian(source, HALF_UP)
        one_body = {term.indices: c for term, c in H.get_terms(TermType.ONE_BODY).items()}
        assert one_body == {(0, 1): pytest.approx(1.5), (2, 3): pytest.approx(1.5)}

    def test_idempotent(self):
        h1, g2 = _random_integrals(3)
        source = OrbitalIntegralHamiltonian.from_arrays(h1, g2)
        first = to_fermion_hamiltonian(source)
        second = to_fermion_hamiltonian(source)
        assert first.terms == second.terms
        assert first.system_indices == second.system_indices

    def test_source_not_mutated(self):
        source = _small_source()
        before = {k: dict(v) for k, v in source.terms.items()}
        to_fermion_hamiltonian(source)
        assert source.terms == before
        assert source.system_indices == {0, 1}

    def test_empty_source(self):
        H = to_fermion_hamiltonian(OrbitalIntegralHamiltonian())
        assert H.count_terms() == 0
        assert H.system_indices == set()

    def test_unsupported_arity_aborts(self, monkeypatch):
        """A bad integral aborts before anything is added to the result."""
        added = []
        monkeypatch.setattr(
            FermionHamiltonian, "add_term", lambda self, term, c: added.append(term)
        )
        source = types.SimpleNamespace(
            terms={TermType.ONE_BODY: {
                OrbitalIntegral((0, 1)): 1.0,
                OrbitalIntegral((0, 1, 2)): 1.0,
            }},
            system_indices={0, 1, 2},
        )
        with pytest.raises(UnsupportedArityError):
            to_fermion_hamiltonian(source)
        assert added == []

    def test_partition_then_reduce(self):
        """Converting disjoint parts and merging equals one conversion."""
        h1, g2 = _random_integrals(3, seed=11)
        source = OrbitalIntegralHamiltonian.from_arrays(h1, g2)
        full = to_fermion_hamiltonian(source, UP_DOWN)

        parts = [OrbitalIntegralHamiltonian(), OrbitalIntegralHamiltonian()]
        items = [(i, c) for bucket in source.terms.values() for i, c in bucket.items()]
        for k, (integral, coefficient) in enumerate(items):
            parts[k % 2].add_term(integral, coefficient)
        for part in parts:
            part.system_indices = set(source.system_indices)

        merged = to_fermion_hamiltonian(parts[0], UP_DOWN)
        merged.add_hamiltonian(to_fermion_hamiltonian(parts[1], UP_DOWN))

        assert merged.system_indices == full.system_indices
        for term_type, bucket in full.terms.items():
            merged_bucket = merged.get_terms(term_type)
            assert set(merged_bucket) == set(bucket)
            for term, coefficient in bucket.items():
                assert merged_bucket[term] == pytest.approx(coefficient)

