"""
Hill Key Generation
====================

:class:`KeyMatrix` is a :class:`ModMatrix` whose determinant is coprime
to its modulus, i.e. one that can be inverted and therefore used as a
Hill cipher key. :class:`KeyGenerator` produces such matrices by
generate-and-test: draw every entry uniformly from ``[0, modulus)``,
keep the draw if the determinant is a unit, otherwise draw again.

The probability that a uniform draw is invertible equals
``|GL_N(Z/mZ)| / m^(N*N)``, the product over primes ``p | m`` of
``prod_{k=1..N} (1 - p^-k)``. For ``m = 26`` and any ``N`` this is
roughly 0.31, so a few draws suffice; moduli with many small prime
factors push it down. The loop is therefore bounded by a retry budget
and reports exhaustion instead of spinning forever.

References:
    - Overbey, J., Traves, W. & Wojdylo, J. (2005). On the Keyspace of
      the Hill Cipher. Cryptologia, 29(1), 59-72.
"""

from __future__ import annotations

import itertools
import numbers
from typing import Iterable, Optional, Sequence

import numpy as np

from shared.logger import ForgeLogger
from shared.math_utils import gcd
from hill.core.errors import (
    GenerationExhaustedError,
    InvalidDimensionError,
    NotInvertibleError,
)
from hill.core.matrix import ModMatrix
from hill.core.modulus import normalize_modulus

DEFAULT_MAX_ATTEMPTS: int = 10_000


class KeyMatrix(ModMatrix):
    """A matrix verified to be invertible under its modulus.

    Construct from an existing matrix or from rows; both paths check
    ``gcd(det, modulus) == 1``. Entry updates through :meth:`set` are
    re-verified and rolled back if they would break invertibility.

    Raises:
        NotInvertibleError: The source matrix is not invertible.
    """

    def __init__(self, matrix: ModMatrix) -> None:
        det = matrix.determinant()
        if gcd(det, matrix.modulus) != 1:
            raise NotInvertibleError(
                f"determinant {det} is not a unit modulo {matrix.modulus}",
                value=det,
                modulus=matrix.modulus,
            )
        super().__init__(matrix.dimension, matrix.modulus)
        self._grid = matrix._grid.copy()
        self._key_determinant = det

    @classmethod
    def from_matrix(cls, matrix: ModMatrix) -> KeyMatrix:
        return cls(matrix)

    @classmethod
    def from_rows(  # type: ignore[override]
        cls,
        rows: Sequence[Sequence[int]],
        modulus: int,
        *,
        strict_modulus: bool = False,
    ) -> KeyMatrix:
        return cls(ModMatrix.from_rows(rows, modulus, strict_modulus=strict_modulus))

    @property
    def key_determinant(self) -> int:
        """Determinant recorded at the last successful verification."""
        return self._key_determinant

    def set(self, i: int, j: int, value: int) -> None:
        previous = self.get(i, j)
        super().set(i, j, value)
        det = self.determinant()
        if gcd(det, self.modulus) != 1:
            super().set(i, j, previous)
            raise NotInvertibleError(
                f"setting ({i}, {j}) to {value} makes the determinant {det}, "
                f"not a unit modulo {self.modulus}",
                value=det,
                modulus=self.modulus,
            )
        self._key_determinant = det


class KeyGenerator:
    """Draws random invertible key matrices.

    The random source is injected: pass a ``numpy.random.Generator`` as
    *rng*, or a *seed* to build one. Giving neither seeds from OS entropy.

    Usage::

        gen = KeyGenerator(3, 26, seed=1234)
        key = gen.generate()
        gen.last_attempts     # draws it took

    Args:
        dimension:      Key size N.
        modulus:        Requested modulus (normalised by the modulus policy).
        rng:            Random generator to draw entries from.
        seed:           Seed for a fresh ``numpy.random.default_rng``.
        max_attempts:   Retry budget; ``None`` retries without limit.
        strict_modulus: Reject an out-of-range modulus instead of clamping.
        logger:         Logger; defaults to ``ForgeLogger("hill.keygen")``.
    """

    def __init__(
        self,
        dimension: int,
        modulus: int,
        *,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS,
        strict_modulus: bool = False,
        logger: Optional[ForgeLogger] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        if isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral) or dimension < 0:
            raise InvalidDimensionError(f"dimension must be a non-negative integer, got {dimension!r}")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be positive or None, got {max_attempts}")

        self._dimension = int(dimension)
        self._modulus = normalize_modulus(modulus, strict=strict_modulus)
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._max_attempts = max_attempts
        self._logger = logger or ForgeLogger("hill.keygen")
        self.last_attempts = 0

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def modulus(self) -> int:
        return self._modulus

    @property
    def max_attempts(self) -> Optional[int]:
        return self._max_attempts

    def sample(self) -> ModMatrix:
        """One uniform draw; not checked for invertibility."""
        grid = self._rng.integers(
            0, self._modulus, size=(self._dimension, self._dimension), dtype=np.int64
        )
        return ModMatrix._from_grid(grid, self._modulus)

    def generate(self) -> KeyMatrix:
        """Draw until the determinant is coprime to the modulus.

        Raises:
            GenerationExhaustedError: ``max_attempts`` draws were all
                singular modulo the modulus.
        """
        attempts: Iterable[int] = (
            itertools.count(1)
            if self._max_attempts is None
            else range(1, self._max_attempts + 1)
        )

        with self._logger.operation("generate"):
            for attempt in attempts:
                candidate = self.sample()
                det = candidate.determinant()
                if gcd(det, self._modulus) == 1:
                    self.last_attempts = attempt
                    self._logger.debug(
                        "Accepted %dx%d key mod %d after %d draw(s)",
                        self._dimension, self._dimension, self._modulus, attempt,
                        determinant=det,
                    )
                    return KeyMatrix(candidate)

            self.last_attempts = self._max_attempts or 0
            self._logger.warning(
                "No invertible %dx%d matrix mod %d in %d draws",
                self._dimension, self._dimension, self._modulus, self.last_attempts,
            )
            raise GenerationExhaustedError(
                f"no invertible {self._dimension}x{self._dimension} matrix modulo "
                f"{self._modulus} found in {self.last_attempts} attempts",
                attempts=self.last_attempts,
            )
