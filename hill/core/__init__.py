"""
Hill Core Module
=================

Contains the modular matrix engine, the key generator, the Hill text
cipher, the data models and the central engine facade.
"""

from hill.core.engine import HillEngine
from hill.core.errors import (
    DimensionMismatchError,
    GenerationExhaustedError,
    IndexOutOfBoundsError,
    InvalidDimensionError,
    InvalidModulusError,
    MatrixError,
    MatrixParseError,
    NotInvertibleError,
)
from hill.core.hill_cipher import HillCipher
from hill.core.keygen import KeyGenerator, KeyMatrix
from hill.core.matrix import ModMatrix, scalar_inverse
from hill.core.models import (
    CipherTextResult,
    InversionResult,
    KeyGenerationResult,
    MatrixSnapshot,
    TransformResult,
)
from hill.core.modulus import MAX_MODULUS, MIN_MODULUS, clamp_modulus, normalize_modulus

__all__ = [
    "CipherTextResult",
    "DimensionMismatchError",
    "GenerationExhaustedError",
    "HillCipher",
    "HillEngine",
    "IndexOutOfBoundsError",
    "InvalidDimensionError",
    "InvalidModulusError",
    "InversionResult",
    "KeyGenerationResult",
    "KeyGenerator",
    "KeyMatrix",
    "MAX_MODULUS",
    "MIN_MODULUS",
    "MatrixError",
    "MatrixParseError",
    "MatrixSnapshot",
    "ModMatrix",
    "NotInvertibleError",
    "TransformResult",
    "clamp_modulus",
    "normalize_modulus",
    "scalar_inverse",
]
