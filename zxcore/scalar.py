"""Exact and approximate complex scalars for ZX-diagrams.

A scalar is either *exact*, an element of D[omega] with D the dyadic
rationals and omega a 2n-th root of unity, or *float*, a plain complex
number. Exact scalars are stored as a power of two and a tuple of integer
coefficients; see :mod:`zxcore.cyclotomic` for the representation and for
the meaning of ``size``.
"""

from __future__ import annotations

import cmath
import math
from fractions import Fraction

from zxcore.cyclotomic import (
    add_coeffs,
    coeffs_equal,
    coeffs_value,
    conj_coeffs,
    mul_coeffs,
    new_coeffs,
    phase_coeffs,
    reduce_coeffs,
    sqrt2_pow_coeffs,
)
from zxcore.phase import Phase

#: Coefficient storage used when none is given: Clifford+T scalars.
DEFAULT_SIZE = 4


def _fmt_real(x: float) -> str:
    if math.isfinite(x) and x == int(x) and abs(x) < 1e16:
        return str(int(x))
    return repr(x)


class Scalar:
    """A complex number, held exactly when possible and as a float otherwise."""

    __slots__ = ("_power", "_coeffs", "_size", "_value")

    def __init__(self, power, coeffs, size=DEFAULT_SIZE):
        coeffs = tuple(int(c) for c in coeffs)
        if size is None:
            if not coeffs:
                raise ValueError("an exact scalar needs at least one coefficient")
        elif len(coeffs) != size:
            raise ValueError(
                f"expected {size} coefficients for this scalar type, got {len(coeffs)}"
            )
        self._power = int(power)
        self._coeffs = coeffs
        self._size = size
        self._value = None

    # -- internal constructors -------------------------------------------

    @classmethod
    def _exact(cls, power, coeffs, size):
        obj = cls.__new__(cls)
        obj._power = power
        obj._coeffs = tuple(coeffs)
        obj._size = size
        obj._value = None
        return obj

    @classmethod
    def _float(cls, value, size):
        obj = cls.__new__(cls)
        obj._power = 0
        obj._coeffs = None
        obj._size = size
        obj._value = complex(value)
        return obj

    def _assign(self, other: Scalar) -> None:
        self._power = other._power
        self._coeffs = other._coeffs
        self._size = other._size
        self._value = other._value

    # -- constructors ------------------------------------------------------

    @classmethod
    def complex(cls, re, im, size=DEFAULT_SIZE):
        """A float scalar with the given real and imaginary parts."""
        return cls._float(complex(re, im), size)

    @classmethod
    def real(cls, re, size=DEFAULT_SIZE):
        """A float scalar with the given real value."""
        return cls._float(complex(re, 0.0), size)

    @classmethod
    def from_int_coeffs(cls, coeffs, size=DEFAULT_SIZE):
        """An exact scalar from integer coefficients, in reduced form.

        Raises ``ValueError`` if the number of coefficients does not fit the
        storage size.
        """
        coeffs = [int(c) for c in coeffs]
        storage = new_coeffs(size, len(coeffs))
        if storage is None:
            raise ValueError("Wrong number of coefficients for scalar type")
        slots, pad = storage
        for i, c in enumerate(coeffs):
            slots[i * pad] = c
        power, reduced = reduce_coeffs(0, slots)
        return cls._exact(power, reduced, size)

    @classmethod
    def zero(cls, size=DEFAULT_SIZE):
        if size is None:
            return cls._exact(0, (0,), None)
        return cls._exact(0, (0,) * size, size)

    @classmethod
    def one(cls, size=DEFAULT_SIZE):
        if size is None:
            return cls._exact(0, (1,), None)
        return cls._exact(0, (1,) + (0,) * (size - 1), size)

    @classmethod
    def sqrt2_pow(cls, p, size=DEFAULT_SIZE):
        """The p-th power of sqrt(2)."""
        exact = sqrt2_pow_coeffs(p, size)
        if exact is None:
            return cls._float(complex(2.0**p, 0.0), size)
        power, coeffs = exact
        return cls._exact(power, coeffs, size)

    @classmethod
    def sqrt2(cls, size=DEFAULT_SIZE):
        return cls.sqrt2_pow(1, size)

    @classmethod
    def one_over_sqrt2(cls, size=DEFAULT_SIZE):
        return cls.sqrt2_pow(-1, size)

    @classmethod
    def from_phase(cls, p, size=DEFAULT_SIZE):
        """The number exp(i*pi*p) for a phase p in half-turns."""
        r = Phase(p).to_fraction()
        exact = phase_coeffs(r.numerator, r.denominator, size)
        if exact is None:
            return cls._float(cmath.exp(1j * math.pi * float(r)), size)
        power, coeffs = exact
        return cls._exact(power, coeffs, size)

    @classmethod
    def minus_one(cls, size=DEFAULT_SIZE):
        return cls.from_phase(Phase.one(), size)

    @classmethod
    def one_plus_phase(cls, p, size=DEFAULT_SIZE):
        """The number 1 + exp(i*pi*p)."""
        return cls.one(size) + cls.from_phase(p, size)

    # -- accessors ---------------------------------------------------------

    @property
    def power(self):
        """The power of two of an exact scalar (0 for float scalars)."""
        return self._power

    @property
    def coeffs(self):
        """The coefficients of an exact scalar, or None for float scalars."""
        return self._coeffs

    @property
    def size(self):
        """The coefficient storage size, or None for variable length."""
        return self._size

    def complex_value(self) -> complex:
        if self._value is not None:
            return self._value
        return coeffs_value(self._power, self._coeffs)

    def phase(self) -> Phase:
        """The argument of the scalar, in half-turns.

        Multiples of 1/4 are recognised exactly for four coefficients.
        """
        if self._value is None and len(self._coeffs) == 4:
            match self._coeffs:
                case (_, b, 0, c) if -b == c:
                    return Phase(0 if self.complex_value().real > 0 else 1)
                case (0, c, 0, 0):
                    return Phase(Fraction(1 if c > 0 else 5, 4))
                case (0, 0, c, 0):
                    return Phase(Fraction(1 if c > 0 else 3, 2))
                case (0, 0, 0, c):
                    return Phase(Fraction(3 if c > 0 else 7, 4))
                case (c, 0, d, 0) if c == d:
                    return Phase(Fraction(1 if c > 0 else 5, 4))
                case (0, c, 0, d) if c == d:
                    return Phase(Fraction(1 if c > 0 else 3, 2))
                case (d, 0, c, 0) if -c == d:
                    return Phase(Fraction(3 if c > 0 else 7, 4))
        return Phase.from_float(cmath.phase(self.complex_value()) / math.pi)

    def is_exact(self) -> bool:
        return self._value is None

    def is_float(self) -> bool:
        return self._value is not None

    def is_zero(self) -> bool:
        return self == Scalar.zero(self._size)

    def is_one(self) -> bool:
        return self == Scalar.one(self._size)

    # -- in-place updates --------------------------------------------------

    def mul_sqrt2_pow(self, p) -> None:
        """Multiply this scalar in place by sqrt(2)**p."""
        self._assign(self * Scalar.sqrt2_pow(p, self._size))

    def mul_phase(self, phase) -> None:
        """Multiply this scalar in place by exp(i*pi*phase)."""
        self._assign(self * Scalar.from_phase(phase, self._size))

    # -- derived scalars ---------------------------------------------------

    def to_float(self) -> Scalar:
        return Scalar._float(self.complex_value(), self._size)

    def conj(self) -> Scalar:
        """The complex conjugate."""
        if self._value is not None:
            return Scalar._float(self._value.conjugate(), self._size)
        return Scalar._exact(self._power, conj_coeffs(self._coeffs), self._size)

    def approx_eq(self, other, epsilon=1e-6) -> bool:
        """Approximate equality; two exact scalars must be exactly equal."""
        if self.is_exact() and other.is_exact():
            return self == other
        diff = self.complex_value() - other.complex_value()
        return abs(diff) ** 2 < epsilon * epsilon

    def convert(self, size) -> Scalar:
        """Re-express this scalar with a different coefficient storage size.

        Falls back to a float scalar if the coefficients do not fit.
        """
        if self._value is not None:
            return Scalar._float(self._value, size)
        storage = new_coeffs(size, len(self._coeffs))
        if storage is None:
            return Scalar._float(self.complex_value(), size)
        slots, pad = storage
        for i, c in enumerate(self._coeffs):
            slots[i * pad] = c
        return Scalar._exact(self._power, slots, size)

    # -- arithmetic --------------------------------------------------------

    def __mul__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        if self._value is not None or other._value is not None:
            return Scalar._float(self.complex_value() * other.complex_value(), self._size)
        result = mul_coeffs(
            self._power, self._coeffs, other._power, other._coeffs, self._size
        )
        if result is None:
            return Scalar._float(self.complex_value() * other.complex_value(), self._size)
        power, coeffs = result
        return Scalar._exact(power, coeffs, self._size)

    def __add__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        # Catch zeros early so very large numbers do not overflow.
        if other.is_zero():
            return self.convert(self._size)
        if self.is_zero():
            return other.convert(self._size)
        if self._value is not None or other._value is not None:
            return Scalar._float(self.complex_value() + other.complex_value(), self._size)
        result = add_coeffs(
            self._power, self._coeffs, other._power, other._coeffs, self._size
        )
        if result is None:
            return Scalar._float(self.complex_value() + other.complex_value(), self._size)
        power, coeffs = result
        return Scalar._exact(power, coeffs, self._size)

    def __eq__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        if self._value is not None and other._value is not None:
            return self._value == other._value
        if self._value is None and other._value is None:
            return coeffs_equal(self._power, self._coeffs, other._power, other._coeffs)
        return self.complex_value() == other.complex_value()

    __hash__ = None

    def __complex__(self) -> complex:
        return self.complex_value()

    def __str__(self) -> str:
        if self._value is not None:
            re, im = self._value.real, self._value.imag
            if im < 0:
                return f"{_fmt_real(re)}-{_fmt_real(-im)}i"
            return f"{_fmt_real(re)}+{_fmt_real(im)}i"

        power, coeffs = self._power, self._coeffs
        if len(coeffs) == 4 and coeffs[1] == -coeffs[3] and coeffs[2] == 0:
            text = str(coeffs[0])
            if coeffs[1] != 0:
                text += f" + {coeffs[1]} * sqrt2"
            if power != 0:
                text = f"2^{power} * ({text})"
            return text

        terms = [
            str(c) if i == 0 else f"{c} * om^{i}"
            for i, c in enumerate(coeffs)
            if c != 0
        ]
        if not terms:
            return "0"
        text = " + ".join(terms)
        if power != 0:
            text = f"2^{power} * ({text})"
        return text

    def __repr__(self) -> str:
        if self._value is not None:
            return (
                f"Scalar.complex({self._value.real!r}, {self._value.imag!r}, "
                f"size={self._size!r})"
            )
        return f"Scalar({self._power}, {self._coeffs}, size={self._size!r})"