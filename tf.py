#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Feb  1 11:58:05 2026

@author: Marcel Hesselberth

Version 0.3

Continuous time transfer function H(s) = num(s) / den(s) built on the
descending order Polynomial. Used by the analog filter synthesis in
butterworth.py, which rewrites numerator and denominator in place.
"""

import numpy as np

from polynomial import SCALARS, Polynomial


def _poly(p):
    return p.copy() if isinstance(p, Polynomial) else Polynomial(p)


class TransferFunction:
    """
    Transfer Function H(s) = num(s) / den(s) for analog filter design.
    """
    def __init__(self, *args):
        """
        Transfer Function constructor.

        Parameters
        ----------
        *args : 0, 1 or 2 positional arguments
                - 0 args: unity gain TF (1/1)
                - 1 arg: copy another TransferFunction
                - 2 args: num, den (descending coefficients or Polynomial)
        """
        if len(args) == 0:
            self.num = Polynomial([1.0])
            self.den = Polynomial([1.0])
        elif len(args) == 1:
            other = args[0]
            if not isinstance(other, TransferFunction):
                raise TypeError("Single positional argument must be a TransferFunction")
            self.num = other.num.copy()
            self.den = other.den.copy()
        elif len(args) == 2:
            self.fromnd(args[0], args[1])
        else:
            raise ValueError("TransferFunction accepts 0, 1 (copy) or 2 "
                             "positional arguments")

    def fromnd(self, n, d):
        if len(n) == 0 or len(d) == 0:
            raise ValueError("numerator and denominator must be non-empty")
        self.num = _poly(n)
        self.den = _poly(d)

    @classmethod
    def from_roots(cls, zeros, poles, gain=1.0):
        """
        Build H(s) = gain * prod(s - z) / prod(s - p). An empty zero set
        gives the all-pole form 1 / prod(s - p).
        """
        num = Polynomial.from_roots(zeros)
        if gain != 1.0:
            num *= gain
        return cls(num, Polynomial.from_roots(poles))

    @property
    def numerator(self):
        return self.num

    @numerator.setter
    def numerator(self, p):
        self.num = _poly(p)

    @property
    def denominator(self):
        return self.den

    @denominator.setter
    def denominator(self, p):
        self.den = _poly(p)

    def scale(self, factor):
        """
        Frequency scaling in place: both polynomials become P(factor * s),
        so the scaled function at s / factor equals the original at s.
        """
        self.num.substitute(factor, inplace=True)
        self.den.substitute(factor, inplace=True)
        return self

    def __add__(self, other):
        if isinstance(other, SCALARS):
            return TransferFunction(other * self.den + self.num, self.den)
        if isinstance(other, TransferFunction):
            return TransferFunction(self.num * other.den + other.num * self.den,
                                    self.den * other.den)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        return self + (-other)

    def __mul__(self, other):
        if isinstance(other, SCALARS):
            return TransferFunction(other * self.num, self.den)
        if isinstance(other, TransferFunction):
            return TransferFunction(self.num * other.num, self.den * other.den)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, SCALARS):
            return TransferFunction(self.num, self.den * other)
        if isinstance(other, TransferFunction):
            return TransferFunction(self.num * other.den, self.den * other.num)
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, SCALARS):
            return TransferFunction(other * self.den, self.num)
        return NotImplemented

    def __neg__(self):
        return TransferFunction(-self.num, self.den)

    def evaluate(self, s):
        """H(s) for a scalar or an array of (complex) frequencies."""
        return self.num(s) / self.den(s)

    __call__ = evaluate

    def frequency_response(self, w):
        """H(jw) for angular frequencies w, always an array."""
        return self(1j * np.atleast_1d(np.asarray(w, dtype=float)))

    def magnitude_db(self, w):
        return 20 * np.log10(np.abs(self.frequency_response(w)))

    def poles(self):
        return self.den.roots()

    def zeros(self):
        return self.num.roots()

    def __repr__(self):
        return f"TransferFunction(num={self.num!r}, den={self.den!r})"

    def __str__(self):
        ns = str(self.num)
        ds = str(self.den)
        sep = "\n" + "-" * max(len(ns), len(ds)) + "\n"
        return ns + sep + ds
