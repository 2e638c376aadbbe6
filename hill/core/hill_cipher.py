"""
Hill Text Cipher
=================

Polygraphic substitution over an alphabet: text is mapped to residues,
split into blocks of the key's dimension, and each block is multiplied
by the key matrix modulo the alphabet size. Decryption multiplies by the
inverse key.

Text is normalised before encoding: characters outside the alphabet are
tried upper-cased, then dropped. The final plaintext block is padded
with ``pad_char``; decryption returns the padded text.

The cipher is linear and falls to a known-plaintext attack with N
plaintext/ciphertext block pairs; it is provided for teaching and
puzzles, not for protecting data.

Reference:
    Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
    The American Mathematical Monthly, 36(6), 306-312.
"""

from __future__ import annotations

import string

from hill.core.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    InvalidModulusError,
)
from hill.core.keygen import KeyMatrix
from hill.core.matrix import ModMatrix

DEFAULT_ALPHABET = string.ascii_uppercase


class HillCipher:
    """Encrypt and decrypt text with a :class:`KeyMatrix`.

    Usage::

        key = KeyMatrix.from_rows([[3, 3], [2, 5]], 26)
        cipher = HillCipher(key)
        cipher.encrypt("help")      # "HIAT"
        cipher.decrypt("HIAT")      # "HELP"

    Args:
        key:      Invertible key; its modulus must equal ``len(alphabet)``.
        alphabet: Symbols in residue order, no duplicates.
        pad_char: Symbol used to fill the last block; must be in *alphabet*.

    Raises:
        InvalidModulusError:   Key modulus differs from the alphabet size.
        InvalidDimensionError: Zero-dimension key.
        ValueError:            Duplicate symbols or a pad char outside the
                               alphabet.
    """

    def __init__(
        self,
        key: KeyMatrix,
        alphabet: str = DEFAULT_ALPHABET,
        pad_char: str = "X",
    ) -> None:
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet contains duplicate symbols")
        if len(pad_char) != 1 or pad_char not in alphabet:
            raise ValueError(f"pad character {pad_char!r} is not in the alphabet")
        if key.modulus != len(alphabet):
            raise InvalidModulusError(
                f"key modulus {key.modulus} does not match alphabet size {len(alphabet)}",
                requested=key.modulus,
            )
        if key.dimension == 0:
            raise InvalidDimensionError("a Hill key needs dimension >= 1")

        self._key = key
        self._inverse = key.inverse()
        self._alphabet = alphabet
        self._pad_char = pad_char
        self._index = {symbol: i for i, symbol in enumerate(alphabet)}

    @property
    def key(self) -> KeyMatrix:
        return self._key

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def block_size(self) -> int:
        return self._key.dimension

    # ------------------------------------------------------------------ #
    #  Encoding
    # ------------------------------------------------------------------ #

    def normalize(self, text: str) -> str:
        """Keep only alphabet symbols, upper-casing where that helps."""
        kept: list[str] = []
        for ch in text:
            if ch not in self._index:
                ch = ch.upper()
            if ch in self._index:
                kept.append(ch)
        return "".join(kept)

    def encode(self, text: str) -> list[int]:
        return [self._index[ch] for ch in self.normalize(text)]

    def decode(self, values: list[int]) -> str:
        return "".join(self._alphabet[v] for v in values)

    def _pad(self, values: list[int]) -> list[int]:
        remainder = len(values) % self.block_size
        if remainder:
            values = values + [self._index[self._pad_char]] * (self.block_size - remainder)
        return values

    def _transform(self, values: list[int], matrix: ModMatrix) -> list[int]:
        n = self.block_size
        out: list[int] = []
        for start in range(0, len(values), n):
            out.extend(matrix.apply(values[start:start + n]))
        return out

    # ------------------------------------------------------------------ #
    #  Public API
    # ------------------------------------------------------------------ #

    def encrypt(self, plaintext: str) -> str:
        return self.decode(self._transform(self._pad(self.encode(plaintext)), self._key))

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt *ciphertext*; padding added at encryption is kept.

        Raises:
            DimensionMismatchError: The normalised ciphertext length is not
                a multiple of the block size.
        """
        values = self.encode(ciphertext)
        if len(values) % self.block_size:
            raise DimensionMismatchError(
                f"ciphertext length {len(values)} is not a multiple of "
                f"block size {self.block_size}"
            )
        return self.decode(self._transform(values, self._inverse))
