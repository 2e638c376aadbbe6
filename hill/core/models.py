"""
Hill Core Data Models
======================

Pydantic models describing the results of matrix engine operations.
They are dumped into :attr:`shared.models.OperationResult.metadata` by
the engine and rebuilt by the console output layer.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from hill.core.matrix import ModMatrix


class MatrixSnapshot(BaseModel):
    """Immutable view of a matrix for display and JSON output.

    Attributes:
        dimension: Number of rows / columns.
        modulus:   Modulus the entries are reduced by.
        rows:      Entries, row by row.
    """

    dimension: int = Field(..., ge=0)
    modulus: int = Field(..., ge=1)
    rows: list[list[int]] = Field(default_factory=list)

    @classmethod
    def of(cls, matrix: ModMatrix) -> MatrixSnapshot:
        return cls(
            dimension=matrix.dimension,
            modulus=matrix.modulus,
            rows=matrix.to_rows(),
        )

    def to_matrix(self) -> ModMatrix:
        return ModMatrix.from_rows(self.rows, self.modulus)


class KeyGenerationResult(BaseModel):
    """Outcome of a key generation run.

    Attributes:
        key:                 The accepted key matrix.
        inverse:             Its modular inverse.
        determinant:         Determinant of the key.
        determinant_inverse: Inverse of the determinant modulo the modulus.
        attempts:            Draws it took to find the key.
        max_attempts:        Retry budget (``None`` = unbounded).
        seed:                Seed of the random source, when one was given.
    """

    key: MatrixSnapshot
    inverse: MatrixSnapshot
    determinant: int
    determinant_inverse: int
    attempts: int = Field(..., ge=1)
    max_attempts: Optional[int] = None
    seed: Optional[int] = None


class InversionResult(BaseModel):
    """Determinant analysis and, where possible, the inverse of a matrix.

    Attributes:
        matrix:              The analysed matrix.
        determinant:         Determinant modulo the modulus.
        gcd:                 ``gcd(determinant, modulus)``.
        invertible:          ``gcd == 1``.
        adjugate:            Adjugate (transposed cofactor) matrix.
        determinant_inverse: Inverse of the determinant, if it exists.
        inverse:             Inverse matrix, if it exists.
        verified:            ``inverse @ matrix`` reproduced the identity.
    """

    matrix: MatrixSnapshot
    determinant: int
    gcd: int
    invertible: bool
    adjugate: MatrixSnapshot
    determinant_inverse: Optional[int] = None
    inverse: Optional[MatrixSnapshot] = None
    verified: bool = False


class TransformResult(BaseModel):
    """A matrix applied to a vector."""

    matrix: MatrixSnapshot
    vector: list[int]
    result: list[int]


class CipherTextResult(BaseModel):
    """Hill cipher encryption or decryption of a text.

    Attributes:
        direction:   ``"encrypt"`` or ``"decrypt"``.
        key:         Key matrix used.
        alphabet:    Alphabet the text was encoded over.
        input_text:  Text as given.
        normalized:  Text after dropping symbols outside the alphabet.
        output_text: Result text.
    """

    direction: str
    key: MatrixSnapshot
    alphabet: str
    input_text: str
    normalized: str
    output_text: str
