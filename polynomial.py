#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Feb  3 19:02:11 2026

@author: Marcel Hesselberth

Version 0.3

Polynomial with real coefficients for filter synthesis.

Coefficients are stored high-to-low: index 0 holds the highest power, so
[1, 3, 2] is x**2 + 3*x + 2. This is the order used by the filter design
formulas and the reverse of numpy.polynomial.Polynomial.
The roots are computed on demand and cached. Every operation that changes
the coefficients in place drops the cache.
"""

import logging

import numpy as np

import rootsolve

logger = logging.getLogger(__name__)

MIN_VALUE = np.finfo(float).smallest_subnormal  # smallest positive double
SCALARS = (int, float, np.floating, np.integer)


class Polynomial:
    """
    Polynomial P(x) = c[0]*x**N + c[1]*x**(N-1) + ... + c[N].
    """
    def __init__(self, coefficients=(1.0,)):
        """
        Polynomial constructor.

        Parameters
        ----------
        coefficients : sequence of float, descending order
             Leading zeros are removed. If every coefficient is zero the
             result is the constant polynomial 1.
        """
        c = np.array(coefficients, dtype=float).ravel()
        nz = np.flatnonzero(c)
        if len(nz) == 0:
            c = np.array([1.0])
        else:
            c = c[nz[0]:].copy()
        self._coefs = c
        self._roots = None

    @classmethod
    def _raw(cls, coefficients):
        p = cls.__new__(cls)
        p._coefs = np.array(coefficients, dtype=float)
        p._roots = None
        return p

    @classmethod
    def _trimmed(cls, coefficients):
        # algebra results: cancellation gives the zero polynomial, not 1
        c = np.asarray(coefficients, dtype=float)
        nz = np.flatnonzero(c)
        return cls._raw(c[nz[0]:] if len(nz) else [0.0])

    @classmethod
    def from_coefficients(cls, coefficients):
        return cls(coefficients)

    @classmethod
    def from_roots(cls, roots):
        """
        Expand (x - r[0]) * (x - r[1]) * ... by synthetic multiplication.
        The roots may be complex; conjugate pairs are assumed so that only
        the real parts of the product are kept. The roots are cached.
        """
        roots = np.array(roots, dtype=complex).ravel()
        n = len(roots)
        acc = np.zeros(n + 1, dtype=complex)
        acc[0] = 1.0
        for i, r in enumerate(roots):
            for j in range(i, -1, -1):
                acc[j + 1] -= r * acc[j]
        p = cls._raw(np.real(acc))
        p._roots = roots
        return p

    @classmethod
    def fit(cls, x, y, deg):
        """Least squares fit of a polynomial of degree deg to (x, y)."""
        return cls(np.polyfit(np.asarray(x, dtype=float),
                              np.asarray(y, dtype=float), deg))

    def copy(self):
        p = Polynomial._raw(self._coefs)
        if self._roots is not None:
            p._roots = self._roots.copy()
        return p

    # ──────────────────────────────────────── accessors

    @property
    def degree(self):
        return len(self._coefs) - 1

    @property
    def coefficients(self):
        """Copy of the coefficients in descending order."""
        return self._coefs.copy()

    def coefficient_at(self, index):
        return float(self._coefs[index])

    def __getitem__(self, index):
        return self._coefs[index]

    def __len__(self):
        return len(self._coefs)

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return np.array_equal(self._coefs, other._coefs)
        return NotImplemented

    __hash__ = None

    def _changed(self):
        self._roots = None

    # ──────────────────────────────────────── algebra

    @staticmethod
    def _aligned(c1, c2):
        """Pad the shorter sequence on the high side, aligning degrees."""
        n = max(len(c1), len(c2))
        return np.pad(c1, (n - len(c1), 0)), np.pad(c2, (n - len(c2), 0))

    def add(self, p):
        a, b = self._aligned(self._coefs, p._coefs)
        return Polynomial._trimmed(a + b)

    def subtract(self, p):
        a, b = self._aligned(self._coefs, p._coefs)
        return Polynomial._trimmed(a - b)

    def multiply(self, p):
        """Product with another polynomial (convolution) or a scalar."""
        if isinstance(p, Polynomial):
            return Polynomial._trimmed(np.convolve(self._coefs, p._coefs))
        return Polynomial._trimmed(self._coefs * p)

    def pow(self, n):
        """P(x)**n for integer n >= 0."""
        if n < 0:
            raise ValueError("Power must be >= 0")
        if n == 0:
            return Polynomial([1.0])
        c = self._coefs.copy()
        for _ in range(n - 1):
            c = np.convolve(c, self._coefs)
        return Polynomial._trimmed(c)

    def derivative(self):
        N = self.degree
        if N == 0:
            return Polynomial._raw([0.0])
        return Polynomial._trimmed(self._coefs[:-1] * np.arange(N, 0, -1))

    def __iadd__(self, p):
        if not isinstance(p, Polynomial):
            return NotImplemented
        a, b = self._aligned(self._coefs, p._coefs)
        self._coefs = Polynomial._trimmed(a + b)._coefs
        self._changed()
        return self

    def __isub__(self, p):
        if not isinstance(p, Polynomial):
            return NotImplemented
        a, b = self._aligned(self._coefs, p._coefs)
        self._coefs = Polynomial._trimmed(a - b)._coefs
        self._changed()
        return self

    def __imul__(self, p):
        if isinstance(p, Polynomial):
            self._coefs = Polynomial._trimmed(np.convolve(self._coefs, p._coefs))._coefs
        elif isinstance(p, SCALARS):
            self._coefs = Polynomial._trimmed(self._coefs * p)._coefs
        else:
            return NotImplemented
        self._changed()
        return self

    def __add__(self, other):
        if isinstance(other, SCALARS):
            other = Polynomial._raw([other])
        if isinstance(other, Polynomial):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, SCALARS):
            other = Polynomial._raw([other])
        if isinstance(other, Polynomial):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other):
        return (-self) + other

    def __mul__(self, other):
        if isinstance(other, (Polynomial,) + SCALARS):
            return self.multiply(other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self):
        return Polynomial._trimmed(-self._coefs)

    def __pow__(self, n):
        return self.pow(n)

    # ──────────────────────────────────────── scaling

    def normalize(self):
        """
        Make the leading coefficient 1 by dividing all coefficients by it.
        Returns the divisor (the gain). A zero divisor is not checked.
        """
        cn = self._coefs[0]
        with np.errstate(divide="ignore", invalid="ignore"):
            self._coefs = self._coefs / cn
        self._coefs[0] = 1.0
        self._changed()
        return cn

    def denormalize(self):
        """
        Divide all coefficients by the lowest order coefficient whose
        magnitude exceeds MIN_VALUE, making that coefficient 1.
        """
        i = len(self._coefs) - 1
        while i > 0 and abs(self._coefs[i]) < MIN_VALUE:
            i -= 1
        with np.errstate(divide="ignore", invalid="ignore"):
            self._coefs = self._coefs / self._coefs[i]
        self._changed()

    def substitute(self, p, q=None, inplace=False):
        """
        Substitution of the variable.

        - p scalar: coefficient i is scaled by p**(degree - i), the result
          is P(p*x).
        - p Polynomial: composition P(p(x)) = sum c[i] * p**(degree - i).
        - p, q Polynomials: rational substitution x -> p/q with the common
          denominator q**degree cleared, sum c[i] * p**(degree - i) * q**i.

        With inplace=True the coefficients of self are replaced and self is
        returned.
        """
        if isinstance(p, Polynomial):
            result = self._compose(p, q)
        else:
            N = self.degree
            result = Polynomial._trimmed(self._coefs * float(p) ** np.arange(N, -1, -1))
        if not inplace:
            return result
        self._coefs = result._coefs
        self._changed()
        return self

    def _compose(self, p, q):
        N = self.degree
        result = p.pow(N) * self._coefs[0]
        for k in range(N - 1, -1, -1):
            term = p.pow(k) * self._coefs[N - k]
            if q is not None:
                term *= q.pow(N - k)
            result += term
        return result

    # ──────────────────────────────────────── evaluation

    def evaluate(self, x, imag=None):
        """
        Evaluate with Horner's method. x may be a real or complex scalar or
        an array (elementwise). evaluate(re, im) evaluates at re + 1j*im.
        """
        if imag is not None:
            x = complex(x, imag)
        if isinstance(x, (list, tuple)):
            x = np.asarray(x)
        result = 0.0
        for c in self._coefs:
            result = result * x + c
        return result

    __call__ = evaluate

    def roots(self):
        """Roots as a complex array; the cache is never handed out."""
        if self._roots is None:
            self._roots = rootsolve.solve(self._coefs)
        return self._roots.copy()

    # ──────────────────────────────────────── text

    def __str__(self):
        c = self._coefs
        order = self.degree
        s = f"{c[0]:.4f} * x^{order}"
        for i in range(order - 1, -1, -1):
            ci = c[order - i]
            if ci != 0.0:
                s += " - " if ci < 0 else " + "
                s += f"{abs(ci):.4f} * x" + ("" if i == 1 else f"^{i}")
        if s.rfind("^0") > 0:
            s = s[:-6]
        return s

    def __repr__(self):
        return f"Polynomial({self._coefs.tolist()})"
