#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Feb  3 20:14:37 2026

@author: Marcel Hesselberth

Version 0.3

Polynomial root solvers. Closed form formulas are used up to degree 3, for
higher degrees the roots are the eigenvalues of the companion matrix.
Coefficients are in descending order (index 0 is the highest power) and are
not normalized before use; the leading coefficient enters the formulas.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

REALTOL = 1e-12  # relative imaginary part below which a cubic root is real
SQRT3 = np.sqrt(3.0)


def eigenvalues(matrix):
    """
    Eigenvalues of a square matrix as two arrays (real parts, imaginary
    parts) of equal length whose entries correspond index by index.
    This is the only linear algebra the root solver depends on.
    """
    w = np.linalg.eigvals(np.asarray(matrix, dtype=float))
    return np.real(w).copy(), np.imag(w).copy()


def companion(coefficients):
    """
    Companion matrix of the polynomial with the given (descending)
    coefficients. The first row holds -c[1:] / c[0], the subdiagonal ones.
    """
    c = np.asarray(coefficients, dtype=float)
    N = len(c) - 1
    M = np.zeros((N, N))
    M[0, :] = -c[1:] / c[0]
    M[1:, :-1] = np.eye(N - 1)
    return M


def quadratic(a, b, c):
    """
    Roots of a*x**2 + b*x + c. A negative discriminant gives a complex
    conjugate pair. The root with the larger magnitude is computed first and
    the other from the product of the roots to avoid cancellation.
    """
    disc = b * b - 4.0 * a * c
    sq = np.sqrt(complex(disc))
    q = -0.5 * (b + sq) if b >= 0 else -0.5 * (b - sq)
    if q == 0:
        return np.zeros(2, dtype=complex)
    r = np.array([q / a, c / q], dtype=complex)
    if disc >= 0:
        r = np.real(r).astype(complex)
    return r


def _polish(coefficients, r, steps=2):
    """
    Newton steps on each root. A step is kept only when it does not increase
    |P(x)|, so multiple roots (where P' vanishes) are left alone.
    """
    c = np.asarray(coefficients, dtype=float)
    dc = np.polyder(c)
    for k in range(len(r)):
        x = r[k]
        px = np.polyval(c, x)
        for _ in range(steps):
            dpx = np.polyval(dc, x)
            if px == 0 or dpx == 0:
                break
            xn = x - px / dpx
            pn = np.polyval(c, xn)
            if abs(pn) > abs(px):
                break
            x, px = xn, pn
        r[k] = x
    return r


def cubic(a, b, c, d):
    """
    Roots of a*x**3 + b*x**2 + c*x + d (Cardano). For a non-negative
    discriminant all three roots are real, otherwise there is one real root
    and a complex conjugate pair. The closed form loses relative accuracy on
    roots far smaller than the others, so the roots are Newton polished.
    """
    d0 = b * b - 3.0 * a * c
    d1 = 2.0 * b ** 3 - 9.0 * a * b * c + 27.0 * a * a * d
    disc = (18.0 * a * b * c * d - 4.0 * b ** 3 * d + b * b * c * c
            - 4.0 * a * c ** 3 - 27.0 * a * a * d * d)

    if d0 == 0 and d1 == 0:
        return np.full(3, -b / (3.0 * a), dtype=complex)

    sq = np.sqrt(complex(d1 * d1 - 4.0 * d0 ** 3))
    C = 0.5 * (d1 + sq)
    if abs(0.5 * (d1 - sq)) > abs(C):
        C = 0.5 * (d1 - sq)
    C = C ** (1.0 / 3.0)

    xi = complex(-0.5, 0.5 * SQRT3)
    r = np.empty(3, dtype=complex)
    for k in range(3):
        Ck = C * xi ** k
        r[k] = -(b + Ck + d0 / Ck) / (3.0 * a)
    r = _polish((a, b, c, d), r)

    if disc >= 0:
        return np.real(r).astype(complex)
    # exactly one real root
    i = np.argmin(np.abs(np.imag(r)))
    if abs(np.imag(r[i])) <= REALTOL * max(1.0, abs(r[i])):
        r[i] = np.real(r[i])
    return r


def solve(coefficients):
    """
    Roots of the polynomial with the given descending coefficients.
    Returns a complex array with exactly degree entries.
    """
    c = np.asarray(coefficients, dtype=float)
    N = len(c) - 1
    if N <= 0:
        return np.zeros(0, dtype=complex)
    if N == 1:
        return np.array([complex(-c[1] / c[0], 0.0)])
    if N == 2:
        return quadratic(c[0], c[1], c[2])
    if N == 3:
        return cubic(c[0], c[1], c[2], c[3])

    logger.debug("solving degree %d polynomial via companion matrix", N)
    re, im = eigenvalues(companion(c))
    r = np.empty(N, dtype=complex)
    for i in range(N):
        r[N - i - 1] = complex(re[i], im[i])
    return r
