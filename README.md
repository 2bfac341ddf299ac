# zxcore

Numeric building blocks for working with ZX-diagrams in Python. The package has no dependencies outside the standard library.

## Modules

- `zxcore.phase`: `Phase` is an exact rational phase measured in half-turns. It is always normalised to the range (-1, 1]. It supports negation, addition, subtraction, multiplication and division by other phases or by integers. It also has predicates such as `is_clifford`, `is_proper_clifford`, `is_pauli` and `is_t`. The module-level function `limit_denominator(fraction, max_denom)` returns the closest fraction whose denominator is at most `max_denom`. It raises `ValueError` if `max_denom` is 1 or less.
- `zxcore.scalar`: `Scalar` is a complex number. It is held exactly when possible, as a power of two times integer coefficients over a root of unity, and as a floating-point complex number otherwise.
  - Constructors: `zero`, `one`, `real`, `complex`, `from_int_coeffs`, `sqrt2_pow`, `sqrt2`, `one_over_sqrt2`, `from_phase`, `minus_one` and `one_plus_phase`.
  - Operations: `*`, `+`, `==`, `conj`, `phase`, `complex_value`, `to_float`, `convert` and `approx_eq`.
  - In-place updates: `mul_sqrt2_pow` and `mul_phase`.
  - The `size` argument sets the coefficient storage. The default is 4, which covers Clifford+T values. `None` gives a variable length.
  - Exact arithmetic raises `OverflowError` when a coefficient would leave the signed 64-bit range. This can happen, for example, when you add two numbers whose powers of two are very far apart.
- `zxcore.cyclotomic`: the low-level coefficient arithmetic that `Scalar` is built on. It provides `add_coeffs`, `mul_coeffs`, `reduce_coeffs`, `coeffs_equal`, `conj_coeffs`, `coeffs_value`, `sqrt2_pow_coeffs`, `phase_coeffs`, `new_coeffs` and `lcm_with_padding`.
- `zxcore.params`: boolean parameter expressions.
  - `Parity` is an XOR of variables plus a constant bit. Adding two parities cancels shared variables and XORs the constants.
  - `Expr` is a conjunction of parities, built with `Expr.linear` or `Expr.quadratic`.
- `zxcore.linalg`: `Mat2` is a matrix over F2.
  - Elimination: `gauss(full_reduce, blocksize, x)` does block Gaussian elimination and can replay every row operation onto any `RowOps` object. `rank` and `inverse` are built on it; `inverse` returns `None` when the matrix is singular or not square.
  - Row and column operations: `row_add`, `row_swap`, `col_add` and `col_swap`.
  - Weights: `row_weight`, `weight` and `unit_rows`.
  - Other operations: `transpose`, `copy`, indexing by row or by `(row, col)`, and matrix multiplication with `@`.
- `zxcore.jsonphase`: encodes and decodes phase strings as `.qgraph` files write them.
  - Encoding: `encode_phase(phase, options)` writes strings such as `"pi/2"`, `"2*pi/3"` or `"~-pi/3"`. Its behaviour is controlled by `PhaseOptions`, whose fields are `ignore_value`, `ignore_approx`, `ignore_pi` and `limit_denom`.
  - Decoding: `decode_phase(text)` reads these strings. It also reads plain rationals, floats of half-turns, and the spellings `π` and `\pi`.
  - Return values and errors: `decode_phase` returns `None` for an empty string and raises `InvalidPhaseError`, a `ValueError`, for anything else it cannot read.
- `zxcore.util`: `pmax(iterable)` returns the maximum of partially ordered items, preferring the earlier of two items that cannot be compared, and `None` for an empty iterable.

## Installation

```
pip install .
```

## Examples

```python
from fractions import Fraction
from zxcore.phase import Phase

p = Phase(Fraction(3, 2))
print(p)                 # -1/2
print(p.is_clifford())   # True
```

```python
from zxcore.scalar import Scalar

s = Scalar.sqrt2_pow(3)
print(s.complex_value())
print(s * Scalar.one_over_sqrt2())   # 2
```

```python
from zxcore.linalg import Mat2

m = Mat2([[1, 1, 1], [0, 1, 1], [0, 0, 1]])
print(m.rank())                               # 3
inv = m.inverse()
print(m @ inv == Mat2.identity(3))            # True
```

```python
from zxcore.jsonphase import decode_phase, encode_phase, PhaseOptions
from zxcore.phase import Phase

print(decode_phase("2*pi/3"))                  # 2/3
print(encode_phase(Phase.one(), PhaseOptions()))  # pi
```

## What this package does not do

zxcore only provides the numeric pieces listed above. It has none of the following:

- a ZX-diagram graph type
- rewrite rules or simplification
- quantum circuits
- tensor evaluation
- reading or writing whole `.qgraph` graph files

Only the phase strings used inside those files are handled. There is also no command-line program.

## Running the tests

```
pip install .[test]
pytest
```