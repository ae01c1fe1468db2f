#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Feb  3 22:10:41 2026

@author: Marcel Hesselberth
"""

"""
Pytest suite for Polynomial:
- construction, coefficient access
- algebra, substitution, scaling
- Horner evaluation, text rendering
"""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from polynomial import Polynomial


# ──────────────────────────────────────────────── Fixtures

@pytest.fixture
def quad():
    """x² + 3x + 2 = (x + 1)(x + 2)"""
    return Polynomial([1.0, 3.0, 2.0])


@pytest.fixture
def linear():
    """x + 1"""
    return Polynomial([1.0, 1.0])


def power_sum(c, x):
    N = len(c) - 1
    return sum(ci * x ** (N - i) for i, ci in enumerate(c))


# ──────────────────────────────────────────────── Construction

@pytest.mark.parametrize("c, degree", [
    ([1.0], 0),
    ([2.0, 1.0], 1),
    ([0.0, 0.0, 1.0, 3.0, 2.0], 2),
    ([0.0, 5.0, 0.0, 0.0, 0.0], 3),
])
def test_degree_after_stripping(c, degree):
    p = Polynomial(c)
    assert p.degree == degree
    assert len(p.coefficients) == degree + 1
    assert p.coefficient_at(0) != 0.0


def test_all_zero_is_constant_one():
    p = Polynomial([0.0, 0.0, 0.0])
    assert p.degree == 0
    assert p(3.7) == 1.0


def test_default_is_constant_one():
    assert Polynomial().coefficients.tolist() == [1.0]


def test_coefficients_are_copied(quad):
    c = quad.coefficients
    c[0] = 99.0
    assert quad.coefficient_at(0) == 1.0
    assert quad[1] == 3.0


def test_from_roots(quad):
    p = Polynomial.from_roots([-1.0, -2.0])
    assert_allclose(p.coefficients, quad.coefficients)


def test_from_complex_roots():
    p = Polynomial.from_roots([1j, -1j])
    assert_allclose(p.coefficients, [1.0, 0.0, 1.0], atol=1e-15)


def test_copy_is_independent(quad):
    q = quad.copy()
    q *= 2.0
    assert_allclose(quad.coefficients, [1.0, 3.0, 2.0])
    assert_allclose(q.coefficients, [2.0, 6.0, 4.0])


def test_fit_exact():
    x = [0.0, 1.0, 2.0, 3.0]
    y = [1.0, 2.0, 5.0, 10.0]   # x² + 1
    p = Polynomial.fit(x, y, 2)
    assert_allclose(p.coefficients, [1.0, 0.0, 1.0], atol=1e-10)


# ──────────────────────────────────────────────── Algebra

def test_add_aligns_by_degree():
    p = Polynomial([1.0, 0.0, 0.0]) + Polynomial([1.0])
    assert_allclose(p.coefficients, [1.0, 0.0, 1.0])
    q = Polynomial([2.0]).add(Polynomial([1.0, 2.0, 3.0]))
    assert_allclose(q.coefficients, [1.0, 2.0, 5.0])


def test_subtract(quad, linear):
    assert_allclose(quad.subtract(linear).coefficients, [1.0, 2.0, 1.0])
    assert_allclose((linear - quad).coefficients, [-1.0, -2.0, -1.0])


def test_subtract_cancels_leading_terms(quad):
    p = quad - Polynomial([1.0, 0.0, 0.0])
    assert p.degree == 1
    assert_allclose(p.coefficients, [3.0, 2.0])


def test_subtract_self_is_zero(quad):
    p = quad - quad
    assert p.degree == 0
    assert p(2.0) == 0.0


def test_scalar_operators(linear):
    assert_allclose((linear + 2).coefficients, [1.0, 3.0])
    assert_allclose((2 + linear).coefficients, [1.0, 3.0])
    assert_allclose((1 - linear).coefficients, [-1.0, 0.0])
    assert_allclose((-linear).coefficients, [-1.0, -1.0])
    assert_allclose((linear * 3).coefficients, [3.0, 3.0])


def test_multiply_degree(quad, linear):
    p = quad.multiply(linear)
    assert p.degree == quad.degree + linear.degree
    assert_allclose(p.coefficients, [1.0, 4.0, 5.0, 2.0])


def test_multiply_scalar(quad):
    assert_allclose(quad.multiply(0.5).coefficients, [0.5, 1.5, 1.0])


def test_pow(linear):
    assert_allclose(linear.pow(3).coefficients, [1.0, 3.0, 3.0, 1.0])
    assert_allclose((linear ** 2).coefficients, [1.0, 2.0, 1.0])


def test_pow_zero_is_one(quad):
    assert quad.pow(0).coefficients.tolist() == [1.0]


@pytest.mark.parametrize("n", [1, 2, 4, 5])
def test_pow_equals_repeated_multiply(quad, n):
    expected = quad
    for _ in range(n - 1):
        expected = expected * quad
    assert_allclose(quad.pow(n).coefficients, expected.coefficients)


def test_pow_negative_raises(quad):
    with pytest.raises(ValueError, match="Power must be >= 0"):
        quad.pow(-1)


def test_derivative(quad):
    assert_allclose(quad.derivative().coefficients, [2.0, 3.0])
    assert_allclose(Polynomial([4.0, 0.0, 0.0, 1.0]).derivative().coefficients,
                    [12.0, 0.0, 0.0])


def test_derivative_of_constant_is_zero():
    d = Polynomial([5.0]).derivative()
    assert d.degree == 0
    assert d(1.0) == 0.0


def test_equality(quad):
    assert quad == Polynomial([0.0, 1.0, 3.0, 2.0])
    assert quad != Polynomial([1.0, 3.0])


# ──────────────────────────────────────────────── In-place forms and root cache

def test_inplace_add_clears_roots(quad):
    assert len(quad.roots()) == 2
    quad += Polynomial([1.0, 0.0, 0.0, 0.0])
    assert quad.degree == 3
    assert len(quad.roots()) == 3


def test_inplace_sub_and_mul(quad, linear):
    quad -= linear
    assert_allclose(quad.coefficients, [1.0, 2.0, 1.0])
    quad *= linear
    assert_allclose(quad.coefficients, [1.0, 3.0, 3.0, 1.0])
    assert_allclose(quad.roots(), [-1.0, -1.0, -1.0], atol=1e-5)


def test_inplace_mul_by_zero_is_zero(quad):
    expected = quad * 0.0
    quad *= 0.0
    assert quad == expected
    assert quad.degree == 0
    assert quad(2.5) == 0.0


def test_inplace_scalar_mul_clears_roots(quad):
    quad.roots()
    quad *= 3.0
    assert quad._roots is None
    assert_allclose(quad.coefficients, [3.0, 9.0, 6.0])
    assert_allclose(sorted(quad.roots().real), [-2.0, -1.0])


def test_from_roots_caches_roots():
    r = [-1.0 + 2.0j, -1.0 - 2.0j, -3.0, -0.5 + 0.5j, -0.5 - 0.5j]
    p = Polynomial.from_roots(r)
    assert_allclose(p.roots(), r)


def test_roots_are_copied(quad):
    r = quad.roots()
    r[0] = 99.0
    assert 99.0 not in quad.roots()


def test_roots_of_constant():
    assert len(Polynomial([3.0]).roots()) == 0


def test_quad_roots(quad):
    assert_allclose(sorted(quad.roots().real), [-2.0, -1.0])
    assert_allclose(quad.roots().imag, 0.0)


# ──────────────────────────────────────────────── Normalization

def test_normalize_returns_gain():
    p = Polynomial([2.0, 4.0, 6.0])
    gain = p.normalize()
    assert gain == 2.0
    assert_allclose(p.coefficients, [1.0, 2.0, 3.0])


def test_denormalize_uses_lowest_nonzero():
    p = Polynomial([2.0, 4.0, 0.0])
    p.denormalize()
    assert_allclose(p.coefficients, [0.5, 1.0, 0.0])


def test_denormalize_negative_lowest():
    p = Polynomial([2.0, 4.0, -2.0])
    p.denormalize()
    assert_allclose(p.coefficients, [-1.0, -2.0, 1.0])


def test_denormalize_clears_roots():
    p = Polynomial.from_roots([-1.0, -2.0])
    p.roots()
    p.denormalize()
    assert p._roots is None
    assert_allclose(sorted(p.roots().real), [-2.0, -1.0])


def test_normalize_zero_leading_is_unchecked():
    z = Polynomial([5.0]).derivative()
    assert z.normalize() == 0.0
    assert z.coefficient_at(0) == 1.0
    z = Polynomial([5.0]).derivative()
    z.denormalize()
    assert np.isnan(z.coefficient_at(0))


def test_normalize_clears_roots():
    p = Polynomial.from_roots([-1.0, -2.0]) * 2.0
    p.roots()
    assert p.normalize() == 2.0
    assert p._roots is None
    assert_allclose(sorted(p.roots().real), [-2.0, -1.0])



# ──────────────────────────────────────────────── Substitution

def test_substitute_scalar(quad):
    # P(2x) = 4x² + 6x + 2
    assert_allclose(quad.substitute(2.0).coefficients, [4.0, 6.0, 2.0])
    assert_allclose(quad.coefficients, [1.0, 3.0, 2.0])


def test_substitute_scalar_inplace(quad):
    quad.roots()
    quad.substitute(0.5, inplace=True)
    assert_allclose(quad.coefficients, [0.25, 1.5, 2.0])
    assert_allclose(sorted(quad.roots().real), [-4.0, -2.0])


def test_substitute_polynomial(linear):
    assert_allclose(linear.substitute(linear).coefficients, [1.0, 2.0])
    sq = Polynomial([1.0, 0.0, 0.0])
    assert_allclose(sq.substitute(linear).coefficients, [1.0, 2.0, 1.0])


@pytest.mark.parametrize("x", [-1.5, 0.0, 0.3, 2.0])
def test_substitute_is_composition(quad, x):
    inner = Polynomial([2.0, -1.0, 0.5])
    assert quad.substitute(inner)(x) == pytest.approx(quad(inner(x)))


def test_substitute_rational(linear):
    # x + 1 with x -> (x² + 1) / x, times x
    s = Polynomial([1.0, 0.0])
    p = linear.substitute(Polynomial([1.0, 0.0, 1.0]), s)
    assert_allclose(p.coefficients, [1.0, 1.0, 1.0])


def test_substitute_polynomial_inplace(quad, linear):
    out = quad.substitute(linear, inplace=True)
    assert out is quad
    # (x+1)² + 3(x+1) + 2
    assert_allclose(quad.coefficients, [1.0, 5.0, 6.0])


# ──────────────────────────────────────────────── Evaluation

@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 1.25, 7.0])
def test_horner_matches_power_sum(x):
    c = [0.5, -2.0, 0.0, 3.0, 1.0]
    assert Polynomial(c)(x) == pytest.approx(power_sum(c, x))


def test_evaluate_array(quad):
    x = np.array([0.0, 1.0, -1.0, 2.0])
    assert_allclose(quad.evaluate(x), [2.0, 6.0, 0.0, 12.0])


def test_evaluate_complex():
    p = Polynomial([1.0, 0.0, 1.0])
    assert p.evaluate(0.0, 1.0) == pytest.approx(0.0)
    assert p(1.0 + 1.0j) == pytest.approx(1.0 + 2.0j)


# ──────────────────────────────────────────────── Text

@pytest.mark.parametrize("c, text", [
    ([1.0, 3.0, 2.0], "1.0000 * x^2 + 3.0000 * x + 2.0000"),
    ([1.0, -1.0], "1.0000 * x^1 - 1.0000"),
    ([5.0], "5.0000"),
    ([1.0, 0.0, -4.0], "1.0000 * x^2 - 4.0000"),
    ([-2.0, 0.5, 0.0], "-2.0000 * x^2 + 0.5000 * x"),
    ([1.0, 0.0, 0.0, 2.0, 0.0], "1.0000 * x^4 + 2.0000 * x"),
])
def test_str(c, text):
    assert str(Polynomial(c)) == text


def test_repr(quad):
    assert repr(quad) == "Polynomial([1.0, 3.0, 2.0])"
