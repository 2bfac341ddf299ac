"""Exact arithmetic on dyadic cyclotomic numbers.

A number is stored as a power of two together with integer coefficients
``c[0..n)`` and stands for ``2**power * sum(c[i] * omega**i)``, where
``omega = exp(i*pi/n)`` is the primitive 2n-th root of unity.

Coefficient storage is described by ``size``: ``None`` means the list may
have any length, an integer means the list has exactly that many entries.
A number with ``k`` coefficients fits into fixed storage of ``size`` entries
only if ``k`` divides ``size``, in which case coefficient ``i`` is placed at
position ``i * (size // k)``. Functions that need storage return ``None``
when the requested length does not fit, so callers can fall back to
floating point.

Coefficients are kept within the range of a signed 64-bit integer; an
operation that would leave it raises ``OverflowError``.
"""

from __future__ import annotations

import cmath
import math

_INT_MIN = -(1 << 63)
_INT_MAX = (1 << 63) - 1


def _checked(value: int, operation: str) -> int:
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"attempt to {operation} with overflow")
    return value


def lcm_with_padding(n1, n2):
    """Return ``(lcm, lcm // n1, lcm // n2)`` for two coefficient lengths."""
    if n1 == n2:
        return n1, 1, 1
    lcm = math.lcm(n1, n2)
    return lcm, lcm // n1, lcm // n2


def new_coeffs(size, length):
    """Return fresh zero storage for ``length`` coefficients and its padding.

    The result is ``(coeffs, pad)`` where coefficient ``i`` of a number with
    ``length`` coefficients lives at ``coeffs[i * pad]``, or ``None`` if such
    a number does not fit into storage of the given size.
    """
    if size is None:
        return [0] * length, 1
    if length <= 0 or size % length != 0:
        return None
    return [0] * size, size // length


def reduce_coeffs(power, coeffs):
    """Bring a number to its reduced form.

    For a non-zero number, factors of two are moved from the coefficients
    into the power until some coefficient is odd. Zero gets power 0.
    """
    coeffs = list(coeffs)
    if not any(coeffs):
        return 0, tuple(coeffs)
    while all(c % 2 == 0 for c in coeffs):
        coeffs = [c >> 1 for c in coeffs]
        power += 1
    return power, tuple(coeffs)


def add_coeffs(power0, coeffs0, power1, coeffs1, size):
    """Add two numbers, returning a reduced ``(power, coeffs)`` or ``None``.

    Raises ``OverflowError`` if the powers of two are too far apart for the
    coefficients to be brought to a common power.
    """
    lcm, pad0, pad1 = lcm_with_padding(len(coeffs0), len(coeffs1))
    minpow = min(power0, power1)
    diff0 = power0 - minpow
    diff1 = power1 - minpow
    if diff0 >= 63 or diff1 >= 63:
        raise OverflowError("attempt to multiply with overflow")
    base0 = 1 << diff0
    base1 = 1 << diff1

    storage = new_coeffs(size, lcm)
    if storage is None:
        return None
    coeffs, pad = storage

    for i, c in enumerate(coeffs0):
        pos = i * pad * pad0
        term = _checked(c * base0, "multiply")
        coeffs[pos] = _checked(coeffs[pos] + term, "add")
    for i, c in enumerate(coeffs1):
        pos = i * pad * pad1
        term = _checked(c * base1, "multiply")
        coeffs[pos] = _checked(coeffs[pos] + term, "add")

    return reduce_coeffs(minpow, coeffs)


def mul_coeffs(power0, coeffs0, power1, coeffs1, size):
    """Multiply two numbers, returning a reduced ``(power, coeffs)`` or ``None``."""
    lcm, pad0, pad1 = lcm_with_padding(len(coeffs0), len(coeffs1))
    storage = new_coeffs(size, lcm)
    if storage is None:
        return None
    coeffs, pad = storage
    n = len(coeffs)

    for i, a in enumerate(coeffs0):
        for j, b in enumerate(coeffs1):
            pos = (i * pad * pad0 + j * pad * pad1) % (2 * n)
            term = _checked(a * b, "multiply")
            if pos < n:
                coeffs[pos] = _checked(coeffs[pos] + term, "add")
            else:
                coeffs[pos - n] = _checked(coeffs[pos - n] - term, "subtract")

    return reduce_coeffs(power0 + power1, coeffs)


def coeffs_equal(power0, coeffs0, power1, coeffs1):
    """Compare two reduced numbers exactly, allowing different lengths."""
    if power0 != power1:
        return False
    lcm, pad0, pad1 = lcm_with_padding(len(coeffs0), len(coeffs1))
    for i in range(lcm):
        c0 = coeffs0[i // pad0] if i % pad0 == 0 else 0
        c1 = coeffs1[i // pad1] if i % pad1 == 0 else 0
        if c0 != c1:
            return False
    return True


def conj_coeffs(coeffs):
    """Return the coefficients of the complex conjugate."""
    n = len(coeffs)
    if n == 0:
        return ()
    conj = [0] * n
    conj[0] = coeffs[0]
    for i in range(1, n):
        conj[n - i] = -coeffs[i]
    return tuple(conj)


def coeffs_value(power, coeffs):
    """Return the complex floating point value of a number."""
    n = len(coeffs)
    if n == 0:
        return 0j
    try:
        pow2 = 2.0**power
    except OverflowError:
        pow2 = math.inf
    return sum(
        (pow2 * c * cmath.exp(1j * math.pi * i / n) for i, c in enumerate(coeffs)),
        0j,
    )


def sqrt2_pow_coeffs(p, size):
    """Return ``(power, coeffs)`` for ``sqrt(2)**p``, or ``None`` if it does not fit.

    Uses ``omega - omega**3 = sqrt(2)`` for ``omega = exp(i*pi/4)``.
    """
    storage = new_coeffs(size, 4)
    if storage is None:
        return None
    coeffs, pad = storage
    if p % 2 == 0:
        coeffs[0] = 1
        return p // 2, tuple(coeffs)
    coeffs[pad] = 1
    coeffs[3 * pad] = -1
    return (p - 1) // 2, tuple(coeffs)


def phase_coeffs(numer, denom, size):
    """Return ``(power, coeffs)`` for ``exp(i*pi*numer/denom)``, or ``None``.

    ``denom`` must be positive; ``None`` is returned when ``denom`` does not
    fit into storage of the given size.
    """
    storage = new_coeffs(size, denom)
    if storage is None:
        return None
    coeffs, pad = storage
    numer *= pad
    denom *= pad
    numer %= 2 * denom
    sign = 1
    if numer >= denom:
        numer -= denom
        sign = -1
    coeffs[numer] = sign
    return 0, tuple(coeffs)