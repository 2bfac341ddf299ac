import math
from fractions import Fraction

import pytest

from zxcore.phase import Phase
from zxcore.scalar import Scalar


def scalar_n(coeffs):
    return Scalar.from_int_coeffs(coeffs, size=None)


def test_approx_mul():
    s = Scalar.real(math.sqrt(0.3) * math.sqrt(0.3) - 0.3)
    t = Scalar.zero()
    assert not (s == t)
    assert complex(s) == pytest.approx(complex(t), abs=1e-6)


def test_sqrt_i():
    s = Scalar.from_int_coeffs([0, 1, 0, 0])
    expected = complex(1 / math.sqrt(2), 1 / math.sqrt(2))
    assert complex(s.to_float()) == pytest.approx(expected, abs=1e-6)


def test_mul_same_base():
    s = Scalar.from_int_coeffs([1, 2, 3, 4])
    t = Scalar.from_int_coeffs([4, 5, 6, 7])
    st = s * t
    assert st.is_exact()
    expected = complex(s.to_float() * t.to_float())
    assert complex(st.to_float()) == pytest.approx(expected, abs=1e-6)


def test_phases_variable_length():
    s = Scalar.from_phase(Fraction(4, 3), size=None) * Scalar.from_phase(
        Fraction(2, 5), size=None
    )
    t = Scalar.from_phase(Fraction(4, 3) + Fraction(2, 5), size=None)
    assert complex(s) == pytest.approx(complex(t), abs=1e-6)


@pytest.mark.parametrize(
    "phase, expected",
    [
        (Fraction(0, 1), Scalar.one()),
        (Fraction(1, 1), Scalar.real(-1.0)),
        (Fraction(1, 2), Scalar.complex(0.0, 1.0)),
        (Fraction(-1, 2), Scalar.complex(0.0, -1.0)),
        (Fraction(1, 4), Scalar.from_int_coeffs([0, 1, 0, 0])),
        (Fraction(3, 4), Scalar.from_int_coeffs([0, 0, 0, 1])),
        (Fraction(7, 4), Scalar.from_int_coeffs([0, 0, 0, -1])),
    ],
)
def test_phases_scalar4(phase, expected):
    assert complex(Scalar.from_phase(phase)) == pytest.approx(complex(expected), abs=1e-6)


@pytest.mark.parametrize(
    "coeffs",
    [
        [3, 0, 0, 0],
        [0, -2, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 1],
        [0, 0, 0, -1],
        [2, 0, 2, 0],
        [2, 0, -2, 0],
        [-2, 0, -2, 0],
        [0, 1, 0, 1],
        [0, 1, 0, -1],
        [0, -1, 0, 1],
        [0, -2, 0, -2],
        [0, 2, 0, -2],
        [1, 1, 0, -1],
        [1, 1, 0, 1],
        [1, -1, 0, 1],
        [1, 1, 0, -1],
        [2, -1, 0, 1],
        [-2, 1, 0, 1],
        [2, 2, 0, -2],
        [-1, 2, 3, -4],
    ],
)
def test_get_phase(coeffs):
    s = scalar_n(coeffs)
    expected = math.atan2(s.complex_value().imag, s.complex_value().real) / math.pi
    assert abs(s.phase().to_float() - expected) <= 1e-6


def test_additions():
    s = scalar_n([1, 2, 3, 4])
    t = scalar_n([2, 3, 4, 5])
    st = scalar_n([3, 5, 7, 9])
    assert s + t == st


def test_sqrt2_powers():
    assert Scalar.sqrt2_pow(0) == Scalar.one()
    assert Scalar.sqrt2_pow(2) == Scalar.from_int_coeffs([2])
    assert complex(Scalar.sqrt2_pow(1)) == pytest.approx(math.sqrt(2), abs=1e-6)
    assert complex(Scalar.sqrt2_pow(-1)) == pytest.approx(1 / math.sqrt(2), abs=1e-6)
    for p in range(-7, 7):
        assert complex(Scalar.sqrt2_pow(p)) == pytest.approx(math.sqrt(2) ** p, abs=1e-6)


def test_sqrt2_and_inverse():
    assert Scalar.sqrt2() == Scalar.sqrt2_pow(1)
    assert Scalar.sqrt2() * Scalar.one_over_sqrt2() == Scalar.one()


def test_one_plus_phases():
    zero_ish = Scalar.one_plus_phase(Fraction(1, 1), size=None)
    assert complex(zero_ish) == pytest.approx(complex(Scalar.zero(size=None)), abs=1e-6)
    plus = Scalar.one_plus_phase(Fraction(1, 2), size=None)
    minus = Scalar.one_plus_phase(Fraction(-1, 2), size=None)
    assert complex(plus * minus) == pytest.approx(2.0, abs=1e-6)


def test_mul_large_power_2():
    p3 = Scalar.sqrt2_pow(200) * Scalar.sqrt2_pow(-200)
    assert p3 == Scalar.one()


def test_add_large_power_2():
    p3 = Scalar.sqrt2_pow(200) + Scalar.sqrt2_pow(210)
    q3 = Scalar.sqrt2_pow(200) * (Scalar.one() + Scalar.sqrt2_pow(10))
    assert p3 == q3


def test_add_diff_power_2():
    with pytest.raises(OverflowError, match="attempt to multiply with overflow"):
        Scalar.sqrt2_pow(200) + Scalar.sqrt2_pow(-200)


@pytest.mark.parametrize(
    "power, coeffs",
    [
        (0, (1, 1, 0, 0)),
        (0, (1, 2, 0, 5)),
        (10, (1, 1, 0, 0)),
        (-3, (1, 1, 1, 1)),
    ],
)
def test_conjugates(power, coeffs):
    p = Scalar(power, coeffs)
    p_conj = p.conj()
    expected = p.complex_value().conjugate()
    assert p_conj.complex_value() == pytest.approx(expected, abs=1e-5)
    absf = (p * p_conj).complex_value()
    assert abs(absf.imag) <= 1e-5
    assert absf.real > 0.0


def test_minus_one_exact():
    assert Scalar.minus_one() == Scalar.from_int_coeffs([-1, 0, 0, 0])
    assert Scalar.minus_one().is_exact()


def test_from_phase_accepts_phase_object():
    assert Scalar.from_phase(Phase(Fraction(1, 2))) == Scalar.from_int_coeffs([0, 0, 1, 0])


def test_from_phase_falls_back_to_float():
    s = Scalar.from_phase(Fraction(1, 4), size=3)
    assert s.is_float()
    expected = complex(math.sqrt(0.5), math.sqrt(0.5))
    assert complex(s) == pytest.approx(expected, abs=1e-6)


def test_from_int_coeffs_wrong_count():
    with pytest.raises(ValueError):
        Scalar.from_int_coeffs([1, 2, 3], size=4)


def test_constructor_wrong_length():
    with pytest.raises(ValueError):
        Scalar(0, (1, 0), size=4)


def test_from_int_coeffs_reduces():
    s = Scalar.from_int_coeffs([2, 0, 2, 0])
    assert s.power == 1
    assert s.coeffs == (1, 0, 1, 0)


def test_is_zero_and_is_one():
    assert Scalar.zero().is_zero()
    assert Scalar.one().is_one()
    assert not Scalar.one().is_zero()
    assert Scalar.real(0.0).is_zero()


def test_mul_sqrt2_pow_in_place():
    s = Scalar.one()
    s.mul_sqrt2_pow(2)
    assert s == Scalar.from_int_coeffs([2])


def test_mul_phase_in_place():
    s = Scalar.one()
    s.mul_phase(Fraction(1, 2))
    s.mul_phase(Fraction(1, 2))
    assert s == Scalar.minus_one()


def test_convert_pads_coefficients():
    s = Scalar.from_int_coeffs([0, 1], size=None)
    converted = s.convert(4)
    assert converted.coeffs == (0, 0, 1, 0)
    assert converted == Scalar.from_int_coeffs([0, 0, 1, 0])


def test_convert_falls_back_to_float():
    s = Scalar.from_int_coeffs([0, 1], size=None).convert(3)
    assert s.is_float()
    assert complex(s) == pytest.approx(1j, abs=1e-6)


def test_approx_eq():
    assert Scalar.sqrt2().approx_eq(Scalar.real(math.sqrt(2)), 1e-9)
    assert not Scalar.one().approx_eq(Scalar.sqrt2(), 1e-9)
    assert not Scalar.sqrt2().approx_eq(Scalar.real(1.4), 1e-6)


def test_exact_equality_across_sizes():
    a = Scalar.from_int_coeffs([0, 1], size=None)
    b = Scalar.from_int_coeffs([0, 0, 1, 0], size=None)
    assert a == b


def test_add_with_zero_returns_other():
    s = Scalar.from_int_coeffs([1, 2, 3, 4])
    assert s + Scalar.zero() == s
    assert Scalar.zero() + s == s


def test_mixed_float_exact_arithmetic():
    s = Scalar.one() + Scalar.real(1.0)
    assert s.is_float()
    assert s.complex_value() == 2 + 0j


def test_phase_of_float():
    assert Scalar.complex(0.0, 2.0).phase() == Phase(Fraction(1, 2))


def test_str_exact():
    assert str(Scalar.one()) == "1"
    assert str(Scalar.zero()) == "0"
    assert str(Scalar.sqrt2()) == "0 + 1 * sqrt2"
    assert str(Scalar.from_int_coeffs([0, 0, 1, 0])) == "1 * om^2"
    assert str(Scalar.from_int_coeffs([2, 0, 2, 0])) == "2^1 * (1 + 1 * om^2)"
    assert str(Scalar.sqrt2_pow(4)) == "2^2 * (1)"


def test_str_float():
    assert str(Scalar.complex(1.0, -2.0)) == "1-2i"
    assert str(Scalar.real(0.5)) == "0.5+0i"


def test_complex_dunder():
    assert complex(Scalar.from_int_coeffs([0, 0, 1, 0])) == pytest.approx(1j)