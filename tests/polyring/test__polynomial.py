"""Tests for polynomial construction, normalization and ring operations."""

import numpy as np
import pytest
import torch
from numpy.polynomial import Polynomial as NpPolynomial

from polyring import (
    Monomial,
    Polynomial,
    PolynomialError,
    SymbolicConstant,
    polynomial,
    polynomial_add,
    polynomial_add_term,
    polynomial_combine,
    polynomial_definite_value,
    polynomial_degree,
    polynomial_densify,
    polynomial_drop_zero_terms,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_is_zero,
    polynomial_leading_term,
    polynomial_multiply,
    polynomial_negate,
    polynomial_scale,
    polynomial_subtract,
    polynomial_terms,
)


def _ascending(p: Polynomial) -> np.ndarray:
    """Dense ascending coefficients, as numpy.polynomial expects."""
    return polynomial_densify(p).coefficients.flip(0).numpy()


class TestPolynomialConstructor:
    """Tests for polynomial() constructor."""

    def test_from_pairs(self):
        p = polynomial([(1.0, 0), (2.0, 1), (3.0, 2)])
        torch.testing.assert_close(p.exponents, torch.tensor([2, 1, 0]))
        torch.testing.assert_close(
            p.coefficients,
            torch.tensor([3.0, 2.0, 1.0], dtype=torch.float64),
        )

    def test_from_monomials(self):
        p = polynomial([Monomial(2.0, 1), Monomial(-1.0, 3)])
        assert polynomial_terms(p) == [Monomial(-1.0, 3), Monomial(2.0, 1)]

    def test_single_term(self):
        p = polynomial(Monomial(4.0, 2))
        assert polynomial_terms(p) == [Monomial(4.0, 2)]

    def test_single_pair(self):
        p = polynomial((4.0, 2))
        assert polynomial_terms(p) == [Monomial(4.0, 2)]

    def test_scalar_is_constant(self):
        assert polynomial_terms(polynomial(7.0)) == [Monomial(7.0, 0)]

    def test_default_is_zero_polynomial(self):
        p = polynomial()
        assert polynomial_terms(p) == [Monomial(0.0, 0)]

    def test_empty_sequence_is_zero_polynomial(self):
        assert polynomial_terms(polynomial([])) == [Monomial(0.0, 0)]

    def test_merges_like_terms(self):
        p = polynomial([(1.0, 2), (2.0, 0), (3.0, 2)])
        assert polynomial_terms(p) == [Monomial(4.0, 2), Monomial(2.0, 0)]

    def test_keeps_zero_terms(self):
        p = polynomial([(1.0, 2), (-1.0, 2), (5.0, 0)])
        assert polynomial_terms(p) == [Monomial(0.0, 2), Monomial(5.0, 0)]

    def test_symbolic_term(self):
        p = polynomial([(2.0, 1), SymbolicConstant(0)])
        torch.testing.assert_close(
            p.indeterminate, torch.tensor([False, True])
        )

    def test_default_dtype(self):
        assert polynomial([(1.0, 1)]).coefficients.dtype == torch.float64

    def test_preserves_dtype(self):
        p = polynomial([(1.0, 1)], dtype=torch.float32)
        assert p.coefficients.dtype == torch.float32
        assert p.exponents.dtype == torch.int64

    def test_negative_exponent_raises(self):
        with pytest.raises(PolynomialError):
            polynomial([(1.0, -1)])

    def test_malformed_term_raises(self):
        with pytest.raises(PolynomialError, match="Cannot interpret"):
            polynomial(["x^2"])


class TestPolynomialNormalization:
    """Tests for combine, drop-zero and densify."""

    def test_combine_sorts_and_merges(self):
        p = Polynomial(
            coefficients=torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64),
            exponents=torch.tensor([0, 2, 0]),
            indeterminate=torch.tensor([False, False, False]),
        )
        assert polynomial_terms(polynomial_combine(p)) == [
            Monomial(2.0, 2),
            Monomial(4.0, 0),
        ]

    def test_combine_symbolic_absorbs(self):
        p = polynomial([(3.0, 0), SymbolicConstant(0), (1.0, 1)])
        assert polynomial_terms(p) == [Monomial(1.0, 1), SymbolicConstant(0)]

    @pytest.mark.parametrize("seed", range(8))
    def test_combine_idempotent(self, random_polynomial, seed):
        p = random_polynomial(seed)
        once = polynomial_combine(p)
        twice = polynomial_combine(once)
        assert polynomial_terms(once) == polynomial_terms(twice)
        # Strictly decreasing exponents
        assert (once.exponents[:-1] > once.exponents[1:]).all()

    def test_drop_zero_terms(self):
        p = polynomial([(0.0, 3), (1.0, 2), (0.0, 1), (-2.0, 0)])
        assert polynomial_terms(polynomial_drop_zero_terms(p)) == [
            Monomial(1.0, 2),
            Monomial(-2.0, 0),
        ]

    def test_drop_zero_terms_keeps_one_term(self):
        p = polynomial([(0.0, 3), (0.0, 1)])
        assert polynomial_terms(polynomial_drop_zero_terms(p)) == [
            Monomial(0.0, 0)
        ]

    def test_drop_zero_terms_tolerance(self):
        p = polynomial([(1e-12, 2), (1.0, 0)])
        assert polynomial_terms(polynomial_drop_zero_terms(p, tol=1e-9)) == [
            Monomial(1.0, 0)
        ]

    def test_drop_zero_terms_keeps_symbolic(self):
        p = polynomial([SymbolicConstant(1), (0.0, 0)])
        assert polynomial_terms(polynomial_drop_zero_terms(p)) == [
            SymbolicConstant(1)
        ]

    def test_is_zero(self):
        assert polynomial_is_zero(polynomial())
        assert polynomial_is_zero(polynomial([(0.0, 4)]))
        assert not polynomial_is_zero(polynomial([(1.0, 4)]))
        assert not polynomial_is_zero(polynomial(SymbolicConstant(0)))

    def test_densify_fills_missing_exponents(self):
        p = polynomial([(2.0, 3), (1.0, 0)])
        d = polynomial_densify(p)
        torch.testing.assert_close(d.exponents, torch.tensor([3, 2, 1, 0]))
        torch.testing.assert_close(
            d.coefficients,
            torch.tensor([2.0, 0.0, 0.0, 1.0], dtype=torch.float64),
        )

    def test_densify_sized_by_exponent_range(self):
        """Two sparse terms spanning six exponents give six slots."""
        p = polynomial([(1.0, 5), (1.0, 0)])
        d = polynomial_densify(p)
        assert d.exponents.numel() == 6
        assert polynomial_terms(d)[0] == Monomial(1.0, 5)
        assert polynomial_terms(d)[-1] == Monomial(1.0, 0)

    def test_densify_single_high_term(self):
        d = polynomial_densify(polynomial([(3.0, 4)]))
        assert d.exponents.tolist() == [4, 3, 2, 1, 0]
        assert d.coefficients.tolist() == [3.0, 0.0, 0.0, 0.0, 0.0]

    def test_densify_zero_polynomial(self):
        assert polynomial_terms(polynomial_densify(polynomial())) == [
            Monomial(0.0, 0)
        ]

    def test_add_term(self):
        p = polynomial_add_term(polynomial([(1.0, 1)]), Monomial(2.0, 1))
        assert polynomial_terms(p) == [Monomial(3.0, 1)]

    def test_add_term_coefficient_exponent(self):
        p = polynomial_add_term(polynomial([(1.0, 1)]), 2.0, 3)
        assert polynomial_terms(p) == [Monomial(2.0, 3), Monomial(1.0, 1)]

    def test_add_term_rejects_bare_number(self):
        with pytest.raises(PolynomialError):
            polynomial_add_term(polynomial(), 2.0)

    def test_degree(self):
        p = polynomial([(0.0, 5), (1.0, 2), (1.0, 0)])
        assert polynomial_degree(p) == 2

    def test_degree_zero_polynomial(self):
        assert polynomial_degree(polynomial()) == 0

    def test_leading_term(self):
        p = polynomial([(0.0, 5), (-3.0, 2), (1.0, 0)])
        assert polynomial_leading_term(p) == Monomial(-3.0, 2)


class TestPolynomialArithmetic:
    """Tests for ring operations."""

    def test_add(self):
        p = polynomial([(1.0, 2), (2.0, 1)])
        q = polynomial([(3.0, 1), (4.0, 0)])
        r = polynomial_add(p, q)
        assert polynomial_terms(r) == [
            Monomial(1.0, 2),
            Monomial(5.0, 1),
            Monomial(4.0, 0),
        ]

    def test_add_operator(self):
        p = polynomial([(1.0, 1)])
        assert polynomial_equal(p + p, polynomial([(2.0, 1)]))

    def test_add_term_operator(self):
        p = polynomial([(1.0, 1)]) + Monomial(2.0, 0)
        assert polynomial_terms(p) == [Monomial(1.0, 1), Monomial(2.0, 0)]
        p = Monomial(2.0, 0) + polynomial([(1.0, 1)])
        assert polynomial_terms(p) == [Monomial(1.0, 1), Monomial(2.0, 0)]

    def test_add_scalar_operator(self):
        p = polynomial([(1.0, 1)]) + 3.0
        assert polynomial_terms(p) == [Monomial(1.0, 1), Monomial(3.0, 0)]

    def test_subtract(self):
        p = polynomial([(5.0, 1), (1.0, 0)])
        q = polynomial([(2.0, 1), (1.0, 0)])
        r = polynomial_subtract(p, q)
        assert polynomial_terms(r) == [Monomial(3.0, 1), Monomial(0.0, 0)]

    def test_subtract_operators(self):
        p = polynomial([(1.0, 2), (1.0, 0)])
        assert polynomial_equal(p - Monomial(1.0, 0), polynomial([(1.0, 2)]))
        assert polynomial_equal(p - 1.0, polynomial([(1.0, 2)]))
        assert polynomial_equal(
            1.0 - p, polynomial([(-1.0, 2)])
        )

    def test_negate(self):
        p = polynomial([(1.0, 2), (-2.0, 0)])
        assert polynomial_terms(polynomial_negate(p)) == [
            Monomial(-1.0, 2),
            Monomial(2.0, 0),
        ]
        assert polynomial_equal(-p, polynomial_negate(p))

    def test_negate_keeps_symbolic(self):
        p = polynomial([(1.0, 1), SymbolicConstant(0)])
        assert polynomial_terms(-p) == [Monomial(-1.0, 1), SymbolicConstant(0)]

    def test_multiply(self):
        # (x + 1)(x - 1) = x^2 - 1
        p = polynomial([(1.0, 1), (1.0, 0)])
        q = polynomial([(1.0, 1), (-1.0, 0)])
        r = polynomial_multiply(p, q)
        assert polynomial_terms(r) == [
            Monomial(1.0, 2),
            Monomial(0.0, 1),
            Monomial(-1.0, 0),
        ]
        assert polynomial_equal(p * q, r)

    def test_multiply_sparse(self):
        p = polynomial([(2.0, 10)])
        q = polynomial([(3.0, 7), (1.0, 0)])
        assert polynomial_terms(polynomial_multiply(p, q)) == [
            Monomial(6.0, 17),
            Monomial(2.0, 10),
        ]

    def test_multiply_vs_numpy(self):
        p = polynomial([(1.0, 0), (2.0, 1), (3.0, 2)])
        q = polynomial([(4.0, 0), (5.0, 1)])
        r = polynomial_multiply(p, q)

        expected = NpPolynomial([1.0, 2.0, 3.0]) * NpPolynomial([4.0, 5.0])
        np.testing.assert_allclose(_ascending(r), expected.coef)

    def test_multiply_by_zero_polynomial(self):
        p = polynomial([(1.0, 3), (2.0, 0)])
        assert polynomial_is_zero(p * polynomial())

    def test_multiply_symbolic(self):
        p = polynomial([(2.0, 1), SymbolicConstant(0)])
        r = p * polynomial([(1.0, 1)])
        assert polynomial_terms(r) == [Monomial(2.0, 2), SymbolicConstant(1)]

    def test_scale_by_scalar(self):
        p = polynomial([(1.0, 2), (2.0, 0)])
        assert polynomial_terms(polynomial_scale(p, 3.0)) == [
            Monomial(3.0, 2),
            Monomial(6.0, 0),
        ]
        assert polynomial_equal(2.0 * p, polynomial_scale(p, 2.0))

    def test_scale_by_monomial(self):
        p = polynomial([(1.0, 2), (2.0, 0)])
        r = polynomial_scale(p, Monomial(-1.0, 1))
        assert polynomial_terms(r) == [Monomial(-1.0, 3), Monomial(-2.0, 1)]
        assert polynomial_equal(p * Monomial(-1.0, 1), r)
        assert polynomial_equal(Monomial(-1.0, 1) * p, r)

    def test_dtype_promotion(self):
        p = polynomial([(1.0, 1)], dtype=torch.float32)
        q = polynomial([(1.0, 0)], dtype=torch.float64)
        assert (p + q).coefficients.dtype == torch.float64
        assert (p * q).coefficients.dtype == torch.float64

    def test_operands_unchanged(self):
        p = polynomial([(1.0, 1), (1.0, 0)])
        q = polynomial([(1.0, 1), (-1.0, 0)])
        _ = p * q + p - q
        assert polynomial_terms(p) == [Monomial(1.0, 1), Monomial(1.0, 0)]
        assert polynomial_terms(q) == [Monomial(1.0, 1), Monomial(-1.0, 0)]


class TestPolynomialRingLaws:
    """Algebraic identities on seeded random polynomials."""

    @pytest.mark.parametrize("seed", range(10))
    def test_add_commutative(self, random_polynomial, seed):
        a = random_polynomial(seed)
        b = random_polynomial(seed + 100)
        assert polynomial_equal(a + b, b + a)

    @pytest.mark.parametrize("seed", range(10))
    def test_add_associative(self, random_polynomial, seed):
        a = random_polynomial(seed)
        b = random_polynomial(seed + 100)
        c = random_polynomial(seed + 200)
        assert polynomial_equal((a + b) + c, a + (b + c))

    @pytest.mark.parametrize("seed", range(10))
    def test_subtract_self_is_zero(self, random_polynomial, seed):
        a = random_polynomial(seed)
        assert polynomial_equal(a - a, polynomial())

    @pytest.mark.parametrize("seed", range(10))
    def test_multiply_distributes(self, random_polynomial, seed):
        a = random_polynomial(seed)
        b = random_polynomial(seed + 100)
        c = random_polynomial(seed + 200)
        assert polynomial_equal(a * (b + c), a * b + a * c, tol=1e-9)

    @pytest.mark.parametrize("seed", range(10))
    def test_multiply_commutative(self, random_polynomial, seed):
        a = random_polynomial(seed)
        b = random_polynomial(seed + 100)
        assert polynomial_equal(a * b, b * a)

    def test_zero_plus_zero(self):
        p = polynomial()
        assert polynomial_terms(p + p) == polynomial_terms(p)


class TestPolynomialEvaluate:
    """Tests for evaluation."""

    def test_evaluate_scalar(self):
        p = polynomial([(3.0, 2), (2.0, 1), (1.0, 0)])
        assert polynomial_evaluate(p, 2.0).item() == 17.0

    def test_evaluate_tensor(self):
        p = polynomial([(3.0, 2), (2.0, 1), (1.0, 0)])
        x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        torch.testing.assert_close(
            polynomial_evaluate(p, x),
            torch.tensor([1.0, 6.0, 17.0], dtype=torch.float64),
        )

    def test_evaluate_preserves_shape(self):
        p = polynomial([(1.0, 2)])
        x = torch.arange(6, dtype=torch.float64).reshape(2, 3)
        torch.testing.assert_close(polynomial_evaluate(p, x), x**2)

    def test_evaluate_zero_polynomial(self):
        assert polynomial_evaluate(polynomial(), 3.0).item() == 0.0

    def test_constant_at_zero(self):
        assert polynomial_evaluate(polynomial(5.0), 0.0).item() == 5.0

    def test_call_operator(self):
        p = polynomial([(1.0, 3), (-1.0, 0)])
        assert p(2.0).item() == 7.0

    def test_evaluate_vs_numpy(self):
        p = polynomial([(0.5, 4), (-2.0, 3), (1.0, 0)])
        x = torch.linspace(-2.0, 2.0, 9, dtype=torch.float64)
        expected = NpPolynomial(_ascending(p))(x.numpy())
        np.testing.assert_allclose(polynomial_evaluate(p, x).numpy(), expected)

    def test_evaluate_symbolic_warns_and_is_nan(self):
        p = polynomial([(1.0, 1), SymbolicConstant(0)])
        with pytest.warns(UserWarning, match="constant of integration"):
            value = polynomial_evaluate(p, 1.0)
        assert torch.isnan(value)

    def test_definite_value(self):
        p = polynomial([(1.0, 2)])
        assert polynomial_definite_value(p, 1.0, 3.0).item() == 8.0
