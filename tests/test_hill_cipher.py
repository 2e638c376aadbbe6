"""
Unit tests for the Hill text cipher.
"""

import string

import pytest

from hill.core.errors import DimensionMismatchError, InvalidModulusError
from hill.core.hill_cipher import HillCipher
from hill.core.keygen import KeyMatrix


@pytest.fixture
def cipher():
    return HillCipher(KeyMatrix.from_rows([[3, 3], [2, 5]], 26))


class TestEncryption:
    """Tests for encrypt / decrypt."""

    def test_known_ciphertext(self, cipher):
        assert cipher.encrypt("HELP") == "HIAT"

    def test_known_plaintext(self, cipher):
        assert cipher.decrypt("HIAT") == "HELP"

    def test_three_by_three(self):
        key = KeyMatrix.from_rows([[6, 24, 1], [13, 16, 10], [20, 17, 15]], 26)
        c = HillCipher(key)
        assert c.encrypt("ACT") == "POH"
        assert c.decrypt("POH") == "ACT"

    def test_normalisation(self, cipher):
        assert cipher.encrypt("h-e l.p!") == "HIAT"

    def test_padding(self, cipher):
        ciphertext = cipher.encrypt("HELPS")
        assert len(ciphertext) == 6
        assert cipher.decrypt(ciphertext) == "HELPSX"

    def test_empty_text(self, cipher):
        assert cipher.encrypt("") == ""

    def test_round_trip(self, cipher):
        text = "ATTACKATDAWN"
        assert cipher.decrypt(cipher.encrypt(text)) == text

    def test_ciphertext_length_mismatch(self, cipher):
        with pytest.raises(DimensionMismatchError):
            cipher.decrypt("HIA")


class TestAlphabet:
    """Tests for alphabet and key validation."""

    def test_custom_alphabet(self):
        alphabet = string.ascii_uppercase + "_,."  # 29 symbols, prime
        key = KeyMatrix.from_rows([[3, 3], [2, 5]], len(alphabet))
        c = HillCipher(key, alphabet, pad_char="_")
        assert c.decrypt(c.encrypt("HI, YOU.")) == "HI,YOU._"

    def test_modulus_must_match_alphabet(self):
        key = KeyMatrix.from_rows([[3, 3], [2, 5]], 29)
        with pytest.raises(InvalidModulusError):
            HillCipher(key)

    def test_duplicate_symbols(self):
        key = KeyMatrix.from_rows([[3, 3], [2, 5]], 26)
        with pytest.raises(ValueError):
            HillCipher(key, "A" * 26)

    def test_pad_char_outside_alphabet(self):
        key = KeyMatrix.from_rows([[3, 3], [2, 5]], 26)
        with pytest.raises(ValueError):
            HillCipher(key, pad_char="?")

    def test_block_size(self, cipher):
        assert cipher.block_size == 2
