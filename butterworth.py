#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Feb  4 21:37:50 2026

@author: Marcel Hesselberth

Version 0.3

Analog Butterworth filter design: minimum order estimation, pole placement
of the normalized low-pass prototype and the low-pass to high-pass and
low-pass to band-pass frequency transforms.

Frequencies are angular frequencies (rad/s), attenuations are in dB.
Band edges are not checked for consistency; for example ws == wp makes the
order estimate meaningless.
"""

import logging
from functools import cache
from math import ceil, cos, log10, pi, sin, sqrt
from typing import Protocol, runtime_checkable

import numpy as np

from polynomial import Polynomial
from tf import TransferFunction

logger = logging.getLogger(__name__)

PID = pi / 180.0
PI2 = 2 * pi


@runtime_checkable
class AnalogFilter(Protocol):
    """Capabilities shared by analog filter designs."""
    order: int
    epsilon: float

    def transfer_function(self) -> TransferFunction:
        ...


def min_order(wp, ws, Ap, As):
    """
    Minimum order of a low-pass Butterworth filter.

    Parameters
    ----------
    wp : passband edge
    ws : stopband edge
    Ap : maximum passband attenuation (dB)
    As : minimum stopband attenuation (dB)
    """
    amax = 10 ** (Ap * 0.1) - 1
    amin = 10 ** (As * 0.1) - 1
    L = log10(amin / amax) / (2 * log10(ws / wp))
    n = int(ceil(L))
    logger.debug("min_order(wp=%g, ws=%g, Ap=%g, As=%g) = %d", wp, ws, Ap, As, n)
    return n


def ripple_factor(Ap):
    return sqrt(10 ** (Ap * 0.1) - 1)


@cache
def prototype_poles(n):
    """
    Poles of the order n prototype on the unit circle in the left half
    plane, as a tuple of complex numbers.
    """
    if n % 2 == 0:
        ks = np.arange(-n * 0.5 + 1.0, n * 0.5 + 0.5, 1.0)
        phis = [180.0 * (k / n) - 90.0 / n for k in ks]
    else:
        ks = np.arange(-(n - 1) * 0.5, (n - 1) * 0.5 + 0.5, 1.0)
        phis = [180.0 * (k / n) for k in ks]
    return tuple(complex(-cos(phi * PID), sin(phi * PID)) for phi in phis)


def lp_to_hp(numerator, denominator):
    """
    Low-pass to high-pass transform s -> 1/s. The coefficient sequences are
    reversed and padded with zeros to num_degree + den_degree + 1 terms,
    which multiplies both by the same power of s.
    Accepts Polynomials or descending coefficient sequences.
    """
    if isinstance(numerator, Polynomial):
        numerator = numerator.coefficients
    if isinstance(denominator, Polynomial):
        denominator = denominator.coefficients
    num = np.asarray(numerator, dtype=float)
    den = np.asarray(denominator, dtype=float)
    length = (len(num) - 1) + (len(den) - 1) + 1

    hp_num = np.zeros(length)
    hp_num[:len(num)] = num[::-1]
    hp_den = np.zeros(length)
    hp_den[:len(den)] = den[::-1]
    return TransferFunction(hp_num, hp_den)


def lp_to_bp(numerator, denominator, w0, bw):
    """
    Low-pass to band-pass transform s -> (s**2 + w0**2) / s.

    Numerator and denominator are substituted separately with the
    denominator s**degree cleared, then each is multiplied by the power of
    s the other one lost. The bandwidth scaling is expected to be applied
    to the prototype beforehand; bw is accepted for symmetry with the
    design call. Accepts Polynomials or descending coefficient sequences.
    """
    if not isinstance(numerator, Polynomial):
        numerator = Polynomial(numerator)
    if not isinstance(denominator, Polynomial):
        denominator = Polynomial(denominator)
    s = Polynomial([1.0, 0.0])
    s2w2 = Polynomial([1.0, 0.0, w0 * w0])

    bp_num = numerator.substitute(s2w2, s)
    bp_den = denominator.substitute(s2w2, s)

    bp_num *= s.pow(denominator.degree)
    bp_den *= s.pow(numerator.degree)
    logger.debug("lp_to_bp(w0=%g, bw=%g): degree %d / %d",
                 w0, bw, bp_num.degree, bp_den.degree)
    return TransferFunction(bp_num, bp_den)


class Butterworth:
    """
    Analog Butterworth filter. Use the factory classmethods; the
    constructor builds the unscaled order n prototype.

    Attributes
    ----------
    order : filter order (twice the prototype order for band-pass)
    epsilon : ripple factor sqrt(10**(Ap/10) - 1)
    tf : TransferFunction of the design
    """
    def __init__(self, n, Ap):
        self.epsilon = ripple_factor(Ap)
        self.order = n
        self.tf = TransferFunction.from_roots([], prototype_poles(n))

    @classmethod
    def lowpass(cls, wp, ws, Ap, As):
        n = min_order(wp, ws, Ap, As)
        lp = cls(n, Ap)
        factor = lp.epsilon ** (-1.0 / n) * wp
        lp.tf.scale(1.0 / factor)
        logger.debug("lowpass order %d, cutoff %g", n, factor)
        return lp

    @classmethod
    def lowpass_order(cls, n, Ap):
        return cls(n, Ap)

    @classmethod
    def highpass(cls, wp, ws, Ap, As):
        n = min_order(ws, wp, Ap, As)
        hp = cls(n, Ap)
        factor = wp / hp.epsilon ** (-1.0 / n)
        hp.tf.scale(factor)
        hp.tf = lp_to_hp(hp.tf.numerator, hp.tf.denominator)
        logger.debug("highpass order %d, cutoff %g", n, factor)
        return hp

    @classmethod
    def highpass_order(cls, n, Ap):
        hp = cls.lowpass_order(n, Ap)
        hp.tf = lp_to_hp(hp.tf.numerator, hp.tf.denominator)
        return hp

    @classmethod
    def bandpass(cls, wp1, wp2, ws1, ws2, Ap, As1, As2):
        """
        Band-pass design from passband edges wp1 < wp2, stopband edges
        ws1 < wp1 and ws2 > wp2 and the attenuation at each stopband edge.
        """
        w0 = sqrt(wp1 * wp2)
        Q = w0 / (wp2 - wp1)

        whs1 = ws1 / w0
        whs2 = ws2 / w0

        # each stopband edge as a low-pass problem with unit passband edge
        omega1 = Q * abs((whs1 * whs1 - 1) / whs1)
        omega2 = Q * abs((whs2 * whs2 - 1) / whs2)

        n1 = min_order(1, omega1, Ap, As1)
        n2 = min_order(1, omega2, Ap, As2)
        n = max(n1, n2)

        bp = cls(n, Ap)
        bw = Q / bp.epsilon ** (-1.0 / n) / w0
        bp.tf.scale(bw)
        bp.tf = lp_to_bp(bp.tf.numerator, bp.tf.denominator, w0, bw)
        bp.order = 2 * n
        logger.debug("bandpass order %d, w0 %g, Q %g", bp.order, w0, Q)
        return bp

    def get_order(self):
        return self.order

    def get_epsilon(self):
        return self.epsilon

    def transfer_function(self):
        return self.tf

    def __repr__(self):
        return f"Butterworth(order={self.order}, epsilon={self.epsilon:.6g})"


if __name__ == "__main__":
    lowpass = Butterworth.lowpass(1 * PI2, 10 * PI2, 0.2, 60)
    highpass = Butterworth.highpass(10 * PI2, 1 * PI2, 0.2, 60)
    bandpass = Butterworth.bandpass(190 * PI2, 210 * PI2, 180 * PI2, 220 * PI2,
                                    0.2, 20, 20)

    f = Polynomial([1, 1])
    print(f.pow(2))
    print(f.pow(3))
    print(f.substitute(Polynomial([1, 1])))
    print()

    print(f"Low pass: {lowpass!r}\n{lowpass.tf}\n")
    print(f"High pass: {highpass!r}\n{highpass.tf}\n")
    print(f"Band pass: {bandpass!r}\n{bandpass.tf}")
