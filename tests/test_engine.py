"""
Integration tests for HillEngine.

Tests:
- Key generation results and findings
- Determinant analysis of invertible and singular matrices
- Inversion, vector transform and text cipher operations
"""

import pytest

from shared.config import ForgeConfig
from shared.models import Severity
from hill.core.engine import HillEngine
from hill.core.errors import (
    DimensionMismatchError,
    GenerationExhaustedError,
    InvalidModulusError,
    NotInvertibleError,
)
from hill.core.models import InversionResult, KeyGenerationResult, MatrixSnapshot
from hill.core.matrix import ModMatrix


def _titles(result):
    return [f.title for f in result.findings]


class TestGenerateKey:
    """Tests for HillEngine.generate_key."""

    def test_result_shape(self, engine):
        result = engine.generate_key(3, 26, seed=7)
        assert result.tool_name == "hill"
        assert result.operation == "keygen"
        assert result.subject == "3x3 mod 26"
        assert result.end_time is not None
        payload = KeyGenerationResult(**result.metadata)
        key = payload.key.to_matrix()
        assert key.determinant() == payload.determinant
        assert payload.inverse.to_matrix().multiply(key) == ModMatrix.identity(3, 26)
        assert (payload.determinant * payload.determinant_inverse) % 26 == 1
        assert payload.seed == 7

    def test_reproducible(self, engine):
        a = engine.generate_key(3, 26, seed=11)
        b = engine.generate_key(3, 26, seed=11)
        assert a.metadata["key"] == b.metadata["key"]

    def test_findings(self, engine):
        result = engine.generate_key(2, 26, seed=1)
        assert "Invertible Key Generated" in _titles(result)
        assert result.highest_severity == Severity.MEDIUM

    def test_config_defaults(self, quiet_logger):
        cfg = ForgeConfig()
        cfg.keygen.dimension = 2
        cfg.keygen.modulus = 29
        cfg.keygen.seed = 3
        result = HillEngine(cfg, logger=quiet_logger).generate_key()
        assert result.subject == "2x2 mod 29"
        assert result.metadata["seed"] == 3

    def test_zero_budget_is_unbounded(self, engine):
        result = engine.generate_key(2, 26, seed=1, max_attempts=0)
        assert result.metadata["max_attempts"] is None

    def test_modulus_adjusted_finding(self, engine):
        result = engine.generate_key(2, 5, seed=1)
        assert result.subject == "2x2 mod 13"
        assert "Modulus Adjusted" in _titles(result)

    def test_strict_modulus(self, quiet_logger):
        cfg = ForgeConfig()
        cfg.matrix.strict_modulus = True
        with pytest.raises(InvalidModulusError):
            HillEngine(cfg, logger=quiet_logger).generate_key(2, 5, seed=1)

    def test_exhaustion_propagates(self, engine, monkeypatch):
        monkeypatch.setattr(
            "hill.core.keygen.KeyGenerator.sample",
            lambda self: ModMatrix(self.dimension, self.modulus),
        )
        with pytest.raises(GenerationExhaustedError):
            engine.generate_key(2, 26, max_attempts=3)


class TestAnalyzeMatrix:
    """Tests for HillEngine.analyze_matrix and invert."""

    def test_invertible(self, engine):
        result = engine.analyze_matrix([[3, 3], [2, 5]], 26)
        payload = InversionResult(**result.metadata)
        assert payload.determinant == 9
        assert payload.gcd == 1
        assert payload.invertible
        assert payload.determinant_inverse == 3
        assert payload.adjugate.rows == [[5, 23], [24, 3]]
        assert payload.inverse.rows == [[15, 17], [20, 9]]
        assert payload.verified
        assert result.highest_severity == Severity.INFO

    def test_singular_is_high_finding(self, engine):
        result = engine.analyze_matrix([[1, 2], [3, 4]], 26)
        payload = InversionResult(**result.metadata)
        assert not payload.invertible
        assert payload.gcd == 2
        assert payload.inverse is None
        assert result.highest_severity == Severity.HIGH
        assert "not invertible" in result.summary

    def test_default_modulus(self, engine):
        result = engine.analyze_matrix([[3, 3], [2, 5]])
        assert result.metadata["matrix"]["modulus"] == 26

    def test_search_inverse_method(self, quiet_logger):
        cfg = ForgeConfig()
        cfg.matrix.inverse_method = "search"
        result = HillEngine(cfg, logger=quiet_logger).analyze_matrix([[3, 3], [2, 5]])
        assert result.metadata["inverse"]["rows"] == [[15, 17], [20, 9]]

    def test_invert(self, engine):
        result = engine.invert([[6, 24, 1], [13, 16, 10], [20, 17, 15]])
        assert result.operation == "invert"
        assert result.metadata["inverse"]["rows"] == [[8, 5, 10], [21, 8, 21], [21, 12, 8]]

    def test_invert_singular(self, engine):
        with pytest.raises(NotInvertibleError) as excinfo:
            engine.invert([[2, 0], [0, 2]], 26)
        assert excinfo.value.value == 4
        assert excinfo.value.modulus == 26

    def test_ragged_rows(self, engine):
        with pytest.raises(DimensionMismatchError):
            engine.analyze_matrix([[1, 2], [3]], 26)


class TestTransform:
    """Tests for HillEngine.transform."""

    def test_apply(self, engine):
        result = engine.transform([[1, 2], [3, 4]], [1, 1], 26)
        assert result.metadata["result"] == [3, 7]
        assert result.summary == "[1, 1] -> [3, 7]"

    def test_mismatch(self, engine):
        with pytest.raises(DimensionMismatchError):
            engine.transform([[1, 2], [3, 4]], [1, 2, 3], 26)


class TestTextCipher:
    """Tests for HillEngine.encrypt_text / decrypt_text."""

    def test_encrypt(self, engine):
        result = engine.encrypt_text("help", [[3, 3], [2, 5]])
        assert result.summary == "HIAT"
        assert result.metadata["normalized"] == "HELP"
        assert result.metadata["output_text"] == "HIAT"

    def test_decrypt(self, engine):
        result = engine.decrypt_text("HIAT", [[3, 3], [2, 5]])
        assert result.metadata["output_text"] == "HELP"

    def test_singular_key(self, engine):
        with pytest.raises(NotInvertibleError):
            engine.encrypt_text("help", [[1, 2], [3, 4]])

    def test_alphabet_too_short(self, engine):
        with pytest.raises(InvalidModulusError):
            engine.encrypt_text("abc", [[1, 0], [0, 1]], alphabet="abcdef")

    def test_snapshot_round_trip(self, engine):
        result = engine.encrypt_text("help", [[3, 3], [2, 5]])
        snapshot = MatrixSnapshot(**result.metadata["key"])
        assert snapshot.to_matrix() == ModMatrix.from_rows([[3, 3], [2, 5]], 26)
