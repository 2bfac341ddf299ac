"""Text encoding of phases in the .qgraph json format.

Phases are written as multiples of pi, such as ``"pi/2"`` or ``"2*pi/3"``.
Decoding also accepts plain rationals, floating point numbers of
half-turns, the ``π`` and ``\\pi`` spellings and a leading ``~`` that marks
approximate values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction

from zxcore.phase import Phase, limit_denominator

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)(e[+-]?[0-9]+)?")
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


class InvalidPhaseError(ValueError):
    """Raised when a phase string cannot be decoded."""

    def __init__(self, phase: str):
        super().__init__(f"Got an invalid phase value {phase}")
        self.phase = phase


@dataclass(frozen=True)
class PhaseOptions:
    """Options for encoding phases.

    ``ignore_value``: a phase that is encoded as the empty string.
    ``ignore_approx``: leave out the ``~`` mark on approximated values.
    ``ignore_pi``: leave out the ``pi`` factor.
    ``limit_denom``: approximate phases whose denominator exceeds this.
    """

    ignore_value: Phase | None = None
    ignore_approx: bool = False
    ignore_pi: bool = False
    limit_denom: int | None = 256


def encode_phase(phase, options=None) -> str:
    """Encode a phase, given in half-turns, as a string."""
    if options is None:
        options = PhaseOptions()
    phase = Phase(phase)

    if options.ignore_value is not None and phase == Phase(options.ignore_value):
        return ""

    r = phase.to_fraction()
    if r == 0:
        return "0"

    approx_mark = ""
    if options.limit_denom is not None and r.denominator > options.limit_denom:
        if not options.ignore_approx:
            approx_mark = "~"
        r = limit_denominator(r, options.limit_denom)

    numer = r.numerator
    if options.ignore_pi:
        numer_text = str(numer)
    elif numer == 1:
        numer_text = "pi"
    elif numer == -1:
        numer_text = "-pi"
    else:
        numer_text = f"{numer}*pi"

    denom_text = "" if r.denominator == 1 else f"/{r.denominator}"
    return f"{approx_mark}{numer_text}{denom_text}"


def _parse_int(text: str, original: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise InvalidPhaseError(original)
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise InvalidPhaseError(original)
    return value


def decode_phase(text: str):
    """Decode a phase string.

    Returns ``None`` for the empty string and raises ``InvalidPhaseError``
    for anything that is not a valid phase. Variables are not supported.
    """
    if text == "":
        return None

    s = "".join(
        c.lower() for c in text if not c.isspace() and c not in ("π", "~")
    )
    s = s.replace("\\pi", "").replace("pi", "")
    s = s.lstrip("*").rstrip("*")

    if s == "":
        return Phase.one()
    if s == "-":
        return -Phase.one()

    if "." in s or "e" in s:
        if not _FLOAT_PATTERN.fullmatch(s):
            raise InvalidPhaseError(text)
        try:
            return Phase.from_float(float(s)).limit_denominator(256)
        except (ValueError, OverflowError) as exc:
            raise InvalidPhaseError(text) from exc

    if "/" in s:
        parts = s.split("/")
        numer_text = parts[0].rstrip("*")
        denom = _parse_int(parts[1], text)
        if denom == 0:
            raise InvalidPhaseError(text)
        if numer_text == "":
            numer = 1
        elif numer_text == "-":
            numer = -1
        else:
            numer = _parse_int(numer_text, text)
        return Phase(Fraction(numer, denom))

    return Phase(_parse_int(s, text))