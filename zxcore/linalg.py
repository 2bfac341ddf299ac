"""Matrices and linear algebra over the two-element field F2."""

from __future__ import annotations


class RowOps:
    """Receiver of primitive row operations.

    The base class ignores every operation, which makes it usable as a
    stand-in when the operations performed by an elimination are not needed.
    """

    def row_add(self, r0, r1):
        """Add row ``r0`` to row ``r1``."""

    def row_swap(self, r0, r1):
        """Swap rows ``r0`` and ``r1``."""


class Mat2(RowOps):
    """A matrix over F2, stored as a list of rows of 0/1 integers."""

    __slots__ = ("_d",)

    def __init__(self, rows):
        self._d = [[int(x) for x in row] for row in rows]

    @classmethod
    def build(cls, rows, cols, f):
        """Build a ``rows`` x ``cols`` matrix with a 1 wherever ``f(i, j)`` is true."""
        return cls([[1 if f(i, j) else 0 for j in range(cols)] for i in range(rows)])

    @classmethod
    def zeros(cls, rows, cols):
        return cls.build(rows, cols, lambda _i, _j: False)

    @classmethod
    def ones(cls, rows, cols):
        return cls.build(rows, cols, lambda _i, _j: True)

    @classmethod
    def identity(cls, dim):
        return cls.build(dim, dim, lambda i, j: i == j)

    @classmethod
    def unit_vector(cls, dim, i):
        """A column vector with a single 1 at index ``i``."""
        return cls.build(dim, 1, lambda x, _y: x == i)

    def num_rows(self) -> int:
        return len(self._d)

    def num_cols(self) -> int:
        return len(self._d[0]) if self._d else 0

    def copy(self) -> Mat2:
        return Mat2(self._d)

    def transpose(self) -> Mat2:
        return Mat2.build(self.num_cols(), self.num_rows(), lambda i, j: self._d[j][i] == 1)

    def _eliminate_duplicates(self, rows, i0, i1, x):
        chunks = {}
        for r in rows:
            chunk = tuple(self._d[r][i0:i1])
            if not any(chunk):
                continue
            if chunk in chunks:
                r1 = chunks[chunk]
                self.row_add(r1, r)
                x.row_add(r1, r)
            else:
                chunks[chunk] = r

    def gauss(self, full_reduce=False, blocksize=3, x=None) -> int:
        """Row-reduce this matrix in place and return its rank.

        With ``full_reduce`` the fully reduced echelon form is computed.
        ``blocksize`` is the block size for Patel/Markov/Hayes elimination.
        Every row operation is also applied to ``x`` (any ``RowOps``), so if
        ``g * m = m'`` then ``x`` becomes ``g * x``.
        """
        if blocksize < 1:
            raise ValueError("blocksize must be positive")
        if x is None:
            x = RowOps()

        rows = self.num_rows()
        cols = self.num_cols()
        num_blocks = -(-cols // blocksize)
        pivot_cols = []
        pivot_row = 0

        for sec in range(num_blocks):
            i0 = sec * blocksize
            i1 = min(cols, (sec + 1) * blocksize)
            self._eliminate_duplicates(range(pivot_row, rows), i0, i1, x)

            for p in range(i0, i1):
                for r0 in range(pivot_row, rows):
                    if not self._d[r0][p]:
                        continue
                    if r0 != pivot_row:
                        self.row_add(r0, pivot_row)
                        x.row_add(r0, pivot_row)
                    for r1 in range(pivot_row + 1, rows):
                        if self._d[r1][p]:
                            self.row_add(pivot_row, r1)
                            x.row_add(pivot_row, r1)
                    pivot_cols.append(p)
                    pivot_row += 1
                    break

        rank = pivot_row

        if full_reduce and rank != 0:
            pivot_row -= 1
            remaining = list(pivot_cols)
            for sec in reversed(range(num_blocks)):
                i0 = sec * blocksize
                i1 = min(cols, (sec + 1) * blocksize)
                self._eliminate_duplicates(range(pivot_row, -1, -1), i0, i1, x)

                while remaining:
                    pcol = remaining[-1]
                    if i0 > pcol or pcol >= i1:
                        break
                    remaining.pop()
                    for r in range(pivot_row):
                        if self._d[r][pcol]:
                            self.row_add(pivot_row, r)
                            x.row_add(pivot_row, r)
                    pivot_row = max(pivot_row - 1, 0)

        return rank

    def rank(self) -> int:
        return self.copy().gauss(False)

    def inverse(self):
        """Return the inverse, or None if the matrix is not square or singular."""
        if self.num_rows() != self.num_cols():
            return None
        m = self.copy()
        inv = Mat2.identity(self.num_rows())
        rank = m.gauss(True, 3, inv)
        if rank < self.num_rows():
            return None
        return inv

    def row_weight(self, i) -> int:
        """Hamming weight of row ``i``."""
        return sum(self._d[i])

    def weight(self) -> int:
        """Hamming weight of the whole matrix."""
        return sum(sum(row) for row in self._d)

    def unit_rows(self) -> list:
        """Indices of the rows holding exactly one 1."""
        return [i for i, row in enumerate(self._d) if sum(row) == 1]

    def row_add(self, r0, r1):
        target, source = self._d[r1], self._d[r0]
        self._d[r1] = [a ^ b for a, b in zip(target, source)]

    def row_swap(self, r0, r1):
        self._d[r0], self._d[r1] = self._d[r1], self._d[r0]

    def col_add(self, c0, c1):
        for row in self._d:
            row[c1] ^= row[c0]

    def col_swap(self, c0, c1):
        for row in self._d:
            row[c0], row[c1] = row[c1], row[c0]

    def __getitem__(self, index):
        if isinstance(index, tuple):
            i, j = index
            return self._d[i][j]
        return self._d[index]

    def __setitem__(self, index, value):
        if isinstance(index, tuple):
            i, j = index
            self._d[i][j] = int(value)
        else:
            self._d[index] = [int(v) for v in value]

    def __matmul__(self, other):
        if not isinstance(other, Mat2):
            return NotImplemented
        if self.num_cols() != other.num_rows():
            raise ValueError("Cannot multiply matrices with mismatched dimensions.")
        k = self.num_cols()

        def entry(i, j):
            bit = 0
            for t in range(k):
                bit ^= self._d[i][t] & other._d[t][j]
            return bit == 1

        return Mat2.build(self.num_rows(), other.num_cols(), entry)

    def __eq__(self, other):
        if not isinstance(other, Mat2):
            return NotImplemented
        return self._d == other._d

    __hash__ = None

    def __str__(self) -> str:
        return "".join("[ " + "".join(f"{x} " for x in row) + "]\n" for row in self._d)

    def __repr__(self) -> str:
        return f"Mat2({self._d!r})"