"""Phases expressed as rational numbers of half-turns."""

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Rational

# Largest denominator used when turning a float into a rational phase.
_FLOAT_DENOM_LIMIT = 1 << 53


def limit_denominator(fraction, max_denom):
    """Return the closest fraction to ``fraction`` with denominator at most ``max_denom``.

    Raises ``ValueError`` if ``max_denom`` is not greater than 1.
    """
    if max_denom <= 1:
        raise ValueError("max_denom must be greater than 1")
    fraction = Fraction(fraction)
    if fraction.denominator <= max_denom:
        return fraction

    p0, q0, p1, q1 = 0, 1, 1, 0
    n, d = fraction.numerator, fraction.denominator
    while True:
        a = n // d
        q2 = q0 + a * q1
        if q2 > max_denom:
            break
        p0, q0, p1, q1 = p1, q1, p0 + a * p1, q2
        n, d = d, n - a * d

    k = (max_denom - q0) // q1
    if 2 * d * (q0 + k * q1) <= fraction.denominator:
        return Fraction(p1, q1)
    return Fraction(p0 + k * p1, q0 + k * q1)


def _float_to_fraction(f: float) -> Fraction:
    if not math.isfinite(f):
        raise ValueError(f"cannot convert {f!r} to a phase")
    return Fraction(f).limit_denominator(_FLOAT_DENOM_LIMIT)


def _to_fraction(value) -> Fraction:
    if isinstance(value, Phase):
        return value._r
    if isinstance(value, bool):
        raise TypeError("a boolean is not a phase")
    if isinstance(value, (int, Rational)):
        return Fraction(value)
    if isinstance(value, float):
        return _float_to_fraction(value)
    if isinstance(value, tuple) and len(value) == 2:
        numer, denom = value
        return Fraction(int(numer), int(denom))
    raise TypeError(f"cannot convert {type(value).__name__} to a phase")


def _normalized(r: Fraction) -> Fraction:
    num, denom = r.numerator, r.denominator
    if -denom < num <= denom:
        return r
    num %= 2 * denom
    if num > denom:
        num -= 2 * denom
    return Fraction(num, denom)


class Phase:
    """A phase in half-turns, kept normalised to the range (-1, 1]."""

    __slots__ = ("_r",)

    def __init__(self, value=0):
        self._r = _normalized(_to_fraction(value))

    @classmethod
    def from_float(cls, f):
        """Build a phase from a floating point number of half-turns."""
        return cls(_float_to_fraction(float(f)))

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def to_fraction(self) -> Fraction:
        return self._r

    def to_float(self) -> float:
        return float(self._r)

    def normalize(self) -> Phase:
        return Phase(self._r)

    def is_zero(self) -> bool:
        return self._r == 0

    def is_one(self) -> bool:
        return self._r == 1

    def is_clifford(self) -> bool:
        """True if the phase is a multiple of 1/2."""
        return self._r.denominator <= 2

    def is_proper_clifford(self) -> bool:
        """True if the phase is 1/2 or -1/2."""
        return self._r in (Fraction(1, 2), Fraction(-1, 2))

    def is_pauli(self) -> bool:
        return self.is_zero() or self.is_one()

    def is_t(self) -> bool:
        """True if the phase is a non-Clifford multiple of 1/4."""
        return self._r.denominator == 4

    def limit_denominator(self, max_denom) -> Phase:
        return Phase(limit_denominator(self._r, max_denom))

    def __neg__(self) -> Phase:
        return Phase(-self._r)

    def __add__(self, other):
        if not isinstance(other, Phase):
            return NotImplemented
        return Phase(self._r + other._r)

    def __sub__(self, other):
        if not isinstance(other, Phase):
            return NotImplemented
        return Phase(self._r - other._r)

    def __mul__(self, other):
        if isinstance(other, Phase):
            return Phase(self._r * other._r)
        if isinstance(other, int) and not isinstance(other, bool):
            return Phase(self._r * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return Phase(self._r * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Phase):
            return Phase(self._r / other._r)
        if isinstance(other, int) and not isinstance(other, bool):
            return Phase(self._r / other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Phase):
            return NotImplemented
        return self._r == other._r

    def __hash__(self):
        return hash(("Phase", self._r))

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return str(self._r)

    def __repr__(self) -> str:
        return f"Phase({self._r!s})"