"""
Hill Matrix Errors
===================

Exception hierarchy for the modular matrix engine. Every failure is
local and synchronous: an operation either returns a complete matrix or
vector, or raises one of these without touching existing matrices.

Each class also derives from the closest builtin exception so callers
that only know about ``ValueError`` / ``IndexError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class MatrixError(Exception):
    """Base class for all matrix engine errors."""


class InvalidModulusError(MatrixError, ValueError):
    """Requested modulus lies outside the supported range (strict mode),
    or is not an integer at all."""

    def __init__(self, message: str, *, requested: object = None) -> None:
        super().__init__(message)
        self.requested = requested


class InvalidDimensionError(MatrixError, ValueError):
    """Matrix dimension is negative or not an integer."""


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Row or column index outside ``[0, dimension)``."""


class DimensionMismatchError(MatrixError, ValueError):
    """Operand shapes or moduli do not line up (vector length, ragged rows,
    product of matrices over different moduli)."""


class NotInvertibleError(MatrixError, ArithmeticError):
    """A scalar or matrix has no inverse under the modulus."""

    def __init__(
        self,
        message: str,
        *,
        value: Optional[int] = None,
        modulus: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.modulus = modulus


class GenerationExhaustedError(MatrixError, RuntimeError):
    """Key generator used up its retry budget without an invertible draw."""

    def __init__(self, message: str, *, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts


class MatrixParseError(MatrixError, ValueError):
    """A matrix or vector literal could not be parsed."""
