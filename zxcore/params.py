"""Boolean parameter expressions: XORs of variables and their conjunctions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, order=True)
class Parity:
    """An XOR of variables plus a constant bit.

    ``Parity((0, 3, 4), True)`` stands for b0 ⊕ b3 ⊕ b4 ⊕ 1. Variables are
    expected in sorted order.
    """

    variables: tuple = ()
    flip: bool = False

    def __post_init__(self):
        object.__setattr__(self, "variables", tuple(self.variables))
        object.__setattr__(self, "flip", bool(self.flip))

    @classmethod
    def from_vars(cls, variables):
        """Build a parity from variables, sorting them; duplicates are kept."""
        return cls(tuple(sorted(variables)), False)

    @classmethod
    def single(cls, var):
        return cls((var,), False)

    @classmethod
    def zero(cls):
        return cls((), False)

    @classmethod
    def one(cls):
        return cls((), True)

    def is_zero(self) -> bool:
        return not self.variables and not self.flip

    def is_one(self) -> bool:
        return len(self.variables) == 1 and self.variables[0] == 0

    def negated(self) -> Parity:
        return Parity(self.variables, not self.flip)

    def __len__(self) -> int:
        return len(self.variables)

    def __iter__(self) -> Iterator[int]:
        return iter(self.variables)

    def __getitem__(self, index):
        return self.variables[index]

    def __add__(self, other):
        if not isinstance(other, Parity):
            return NotImplemented
        merged = []
        a, b = self.variables, other.variables
        i = j = 0
        while i < len(a) and j < len(b):
            if a[i] < b[j]:
                merged.append(a[i])
                i += 1
            elif a[i] > b[j]:
                merged.append(b[j])
                j += 1
            else:
                i += 1
                j += 1
        merged.extend(a[i:])
        merged.extend(b[j:])
        return Parity(tuple(merged), self.flip ^ other.flip)


def _as_parity(p) -> Parity:
    if isinstance(p, Parity):
        return p
    return Parity.from_vars(p)


@dataclass(frozen=True, order=True)
class Expr:
    """A conjunction of parities."""

    parities: tuple = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "parities", tuple(self.parities))

    @classmethod
    def linear(cls, parity):
        return cls((_as_parity(parity),))

    @classmethod
    def quadratic(cls, p1, p2):
        p1 = _as_parity(p1)
        p2 = _as_parity(p2)
        if p1 > p2:
            p1, p2 = p2, p1
        if p1.is_one() or p1 == p2:
            return cls((p2,))
        return cls((p1, p2))

    def is_linear(self) -> bool:
        return len(self.parities) == 1

    def __len__(self) -> int:
        return len(self.parities)

    def __iter__(self) -> Iterator[Parity]:
        return iter(self.parities)

    def __getitem__(self, index):
        return self.parities[index]