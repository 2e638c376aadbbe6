"""
Modular Matrix
===============

:class:`ModMatrix` owns an N x N grid of residues together with the
modulus they live under, and implements the algebra the Hill cipher
needs: minors, transpose, determinant by cofactor expansion, cofactor
and adjugate matrices, scalar multiplication, inversion, matrix product
and the matrix-vector transform.

Every transform builds and returns a new matrix; the only mutator is
:meth:`ModMatrix.set`. Arithmetic runs on Python integers (the grid is
read out of numpy before multiplying), so intermediate products are
exact, and each term is still reduced into ``[0, modulus)`` before it is
accumulated.

The determinant is the naive Laplace expansion along row 0, which costs
``O(N!)``. Above :data:`MEMOIZE_THRESHOLD` the same expansion runs with
memoised sub-determinants keyed by the set of surviving columns, which
costs ``O(N * 2**N)`` and returns the identical residue.

References:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
    - Strang, G. (2016). Introduction to Linear Algebra (5th ed.),
      Section 5.3 (Cramer's Rule, Inverses).
"""

from __future__ import annotations

import functools
import numbers
import operator
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from shared.math_utils import (
    gcd,
    parity_sign,
    positive_mod,
    scalar_inverse as _euclid_inverse,
    scalar_inverse_search as _search_inverse,
)
from hill.core.errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    NotInvertibleError,
)
from hill.core.modulus import normalize_modulus

IntGrid = NDArray[np.int64]

MEMOIZE_THRESHOLD: int = 6

INVERSE_METHODS = ("euclid", "search")


def scalar_inverse(value: int, modulus: int, *, method: str = "euclid") -> int:
    """Multiplicative inverse of *value* modulo *modulus*.

    Args:
        value:   Integer to invert.
        modulus: Modulus of the residue ring.
        method:  ``"euclid"`` (extended Euclid, ``O(log m)``) or
                 ``"search"`` (exhaustive scan, ``O(m)``). Both return the
                 same residue.

    Raises:
        NotInvertibleError: ``gcd(value, modulus) != 1``.
        ValueError: Unknown *method*.
    """
    if method == "euclid":
        finder = _euclid_inverse
    elif method == "search":
        finder = _search_inverse
    else:
        raise ValueError(
            f"unknown inverse method {method!r}; expected one of {INVERSE_METHODS}"
        )
    try:
        return finder(value, modulus)
    except ValueError as exc:
        raise NotInvertibleError(str(exc), value=value, modulus=modulus) from exc


def _check_dimension(dimension: object) -> int:
    if isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral):
        raise InvalidDimensionError(f"dimension must be an integer, got {dimension!r}")
    if dimension < 0:
        raise InvalidDimensionError(f"dimension must be non-negative, got {dimension}")
    return int(dimension)


class ModMatrix:
    """Square matrix of residues modulo ``modulus``.

    Usage::

        m = ModMatrix.from_rows([[3, 3], [2, 5]], modulus=26)
        m.determinant()          # 9
        m.inverse().to_rows()    # [[15, 17], [20, 9]]
        m.apply([7, 4])          # [7, 8]

    Args:
        dimension:      Number of rows (and columns), ``>= 0``.
        modulus:        Requested modulus; normalised by the modulus policy.
        strict_modulus: Raise instead of clamping an out-of-range modulus.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        dimension: int,
        modulus: int,
        *,
        strict_modulus: bool = False,
    ) -> None:
        self._dimension = _check_dimension(dimension)
        self._modulus = normalize_modulus(modulus, strict=strict_modulus)
        self._grid: IntGrid = np.zeros(
            (self._dimension, self._dimension), dtype=np.int64
        )

    # ------------------------------------------------------------------ #
    #  Construction
    # ------------------------------------------------------------------ #

    @staticmethod
    def _from_grid(grid: IntGrid, modulus: int) -> ModMatrix:
        """Wrap an already-reduced grid whose modulus is already normalised."""
        matrix = ModMatrix.__new__(ModMatrix)
        matrix._dimension = int(grid.shape[0])
        matrix._modulus = modulus
        matrix._grid = grid
        return matrix

    @staticmethod
    def _from_values(rows: Sequence[Sequence[int]], dimension: int, modulus: int) -> ModMatrix:
        grid = np.array(rows, dtype=np.int64).reshape(dimension, dimension)
        return ModMatrix._from_grid(grid, modulus)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        modulus: int,
        *,
        strict_modulus: bool = False,
    ) -> ModMatrix:
        """Build a matrix from nested row sequences.

        Entries are reduced modulo the (normalised) modulus.

        Raises:
            DimensionMismatchError: The rows do not form a square grid.
        """
        dimension = len(rows)
        for index, row in enumerate(rows):
            if len(row) != dimension:
                raise DimensionMismatchError(
                    f"row {index} has {len(row)} entries, expected {dimension}"
                )
        matrix = ModMatrix(dimension, modulus, strict_modulus=strict_modulus)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                matrix.set(i, j, value)
        return matrix

    @classmethod
    def identity(cls, dimension: int, modulus: int) -> ModMatrix:
        matrix = ModMatrix(dimension, modulus)
        for i in range(matrix.dimension):
            matrix.set(i, i, 1)
        return matrix

    def copy(self) -> ModMatrix:
        return ModMatrix._from_grid(self._grid.copy(), self._modulus)

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def modulus(self) -> int:
        return self._modulus

    # ------------------------------------------------------------------ #
    #  Entry access
    # ------------------------------------------------------------------ #

    def _check_index(self, i: int, j: int) -> None:
        for name, index in (("row", i), ("column", j)):
            if isinstance(index, bool) or not isinstance(index, numbers.Integral):
                raise IndexOutOfBoundsError(f"{name} index must be an integer, got {index!r}")
            if not 0 <= index < self._dimension:
                raise IndexOutOfBoundsError(
                    f"{name} index {index} outside [0, {self._dimension})"
                )

    def get(self, i: int, j: int) -> int:
        self._check_index(i, j)
        return int(self._grid[i, j])

    def set(self, i: int, j: int, value: int) -> None:
        """Store ``value mod modulus`` at row *i*, column *j*."""
        self._check_index(i, j)
        self._grid[i, j] = positive_mod(operator.index(value), self._modulus)

    # ------------------------------------------------------------------ #
    #  Structural transforms
    # ------------------------------------------------------------------ #

    def minor(self, row: int, col: int) -> ModMatrix:
        """Submatrix with *row* and *col* removed.

        The surviving entries keep their row-major order, which the
        cofactor sign convention relies on.
        """
        self._check_index(row, col)
        reduced = np.delete(np.delete(self._grid, row, axis=0), col, axis=1)
        return ModMatrix._from_grid(np.ascontiguousarray(reduced), self._modulus)

    def transpose(self) -> ModMatrix:
        return ModMatrix._from_grid(self._grid.T.copy(), self._modulus)

    # ------------------------------------------------------------------ #
    #  Determinant
    # ------------------------------------------------------------------ #

    def determinant(self, *, memoize: Optional[bool] = None) -> int:
        """Determinant reduced into ``[0, modulus)``.

        The empty (0 x 0) matrix has determinant 1.

        Args:
            memoize: Force (``True``) or forbid (``False``) the memoised
                expansion. ``None`` picks it when the dimension exceeds
                :data:`MEMOIZE_THRESHOLD`.
        """
        if memoize is None:
            memoize = self._dimension > MEMOIZE_THRESHOLD
        if memoize:
            return self._expand_memoized()
        return self._expand()

    def _expand(self) -> int:
        if self._dimension == 0:
            return 1

        m = self._modulus
        total = 0
        for i in range(self._dimension):
            entry = int(self._grid[0, i])
            if entry == 0:
                continue
            term = entry * self.minor(0, i)._expand() * parity_sign(i)
            total += positive_mod(term, m)
        return total % m

    def _expand_memoized(self) -> int:
        n, m = self._dimension, self._modulus
        rows = self._grid.tolist()

        # Expanding along row 0 of each successive minor always removes the
        # top row, so a sub-determinant is fixed by its surviving columns.
        @functools.lru_cache(maxsize=None)
        def expand(depth: int, columns: tuple[int, ...]) -> int:
            if depth == n:
                return 1
            total = 0
            for position, col in enumerate(columns):
                entry = rows[depth][col]
                if entry == 0:
                    continue
                rest = columns[:position] + columns[position + 1:]
                total += positive_mod(
                    entry * expand(depth + 1, rest) * parity_sign(position), m
                )
            return total % m

        return expand(0, tuple(range(n)))

    def is_invertible(self) -> bool:
        """``True`` when ``gcd(determinant, modulus) == 1``."""
        return gcd(self.determinant(), self._modulus) == 1

    # ------------------------------------------------------------------ #
    #  Cofactor / adjugate
    # ------------------------------------------------------------------ #

    def cofactor(self) -> ModMatrix:
        """Matrix of signed minor determinants, ``C[i,j] = (-1)^(i+j) det(minor(i,j))``."""
        n, m = self._dimension, self._modulus
        values = [
            [
                positive_mod(self.minor(i, j).determinant() * parity_sign(i + j), m)
                for j in range(n)
            ]
            for i in range(n)
        ]
        return ModMatrix._from_values(values, n, m)

    def adjugate(self) -> ModMatrix:
        return self.cofactor().transpose()

    # ------------------------------------------------------------------ #
    #  Scalar and matrix arithmetic
    # ------------------------------------------------------------------ #

    def scalar_multiply(self, scalar: int) -> ModMatrix:
        scalar = operator.index(scalar)
        m = self._modulus
        values = [[positive_mod(v * scalar, m) for v in row] for row in self._grid.tolist()]
        return ModMatrix._from_values(values, self._dimension, m)

    def inverse(self, *, method: str = "euclid") -> ModMatrix:
        """Modular inverse ``adjugate * det^-1``.

        Raises:
            NotInvertibleError: The determinant shares a factor with the
                modulus.
        """
        det = self.determinant()
        try:
            det_inv = scalar_inverse(det, self._modulus, method=method)
        except NotInvertibleError as exc:
            raise NotInvertibleError(
                f"matrix is not invertible modulo {self._modulus}: "
                f"determinant {det} shares factor {gcd(det, self._modulus)} "
                f"with the modulus",
                value=det,
                modulus=self._modulus,
            ) from exc
        return self.adjugate().scalar_multiply(det_inv)

    def multiply(self, other: ModMatrix) -> ModMatrix:
        """Matrix product ``self @ other`` reduced modulo the shared modulus."""
        if not isinstance(other, ModMatrix):
            raise TypeError(f"cannot multiply ModMatrix by {type(other).__name__}")
        if other.dimension != self._dimension or other.modulus != self._modulus:
            raise DimensionMismatchError(
                f"cannot multiply {self._dimension}x{self._dimension} mod {self._modulus} "
                f"by {other.dimension}x{other.dimension} mod {other.modulus}"
            )
        n, m = self._dimension, self._modulus
        left, right = self._grid.tolist(), other._grid.tolist()
        values = [
            [sum(positive_mod(left[i][k] * right[k][j], m) for k in range(n)) % m for j in range(n)]
            for i in range(n)
        ]
        return ModMatrix._from_values(values, n, m)

    __matmul__ = multiply

    def apply(self, vector: Sequence[int]) -> list[int]:
        """Multiply the matrix by a column vector modulo the modulus.

        Each product is reduced before summing, then the sum is reduced.

        Raises:
            DimensionMismatchError: ``len(vector) != dimension``.
        """
        if len(vector) != self._dimension:
            raise DimensionMismatchError(
                f"vector has length {len(vector)}, matrix dimension is {self._dimension}"
            )
        m = self._modulus
        values = [operator.index(v) for v in vector]
        return [
            sum(positive_mod(entry * v, m) for entry, v in zip(row, values)) % m
            for row in self._grid.tolist()
        ]

    # ------------------------------------------------------------------ #
    #  Serialisation
    # ------------------------------------------------------------------ #

    def to_rows(self) -> list[list[int]]:
        return self._grid.tolist()

    def to_array(self) -> list[int]:
        """Entries flattened in row-major order."""
        return self._grid.ravel().tolist()

    def __str__(self) -> str:
        # Debug listing only; dimension and modulus are not encoded.
        return ", ".join(str(v) for v in self.to_array())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dimension={self._dimension}, "
            f"modulus={self._modulus}, rows={self.to_rows()})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModMatrix):
            return NotImplemented
        return (
            self._dimension == other._dimension
            and self._modulus == other._modulus
            and bool(np.array_equal(self._grid, other._grid))
        )
