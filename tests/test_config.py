"""
Unit tests for TOML configuration loading.
"""

import pytest

from shared.config import ForgeConfig, get_config


class TestDefaults:
    """Tests for built-in defaults."""

    def test_defaults(self):
        cfg = ForgeConfig()
        assert cfg.matrix.default_modulus == 26
        assert cfg.matrix.strict_modulus is False
        assert cfg.matrix.inverse_method == "euclid"
        assert cfg.keygen.dimension == 3
        assert cfg.keygen.max_attempts == 10_000
        assert cfg.keygen.seed is None
        assert len(cfg.cipher.alphabet) == 26

    def test_to_dict(self):
        data = ForgeConfig().to_dict()
        assert data["keygen"]["modulus"] == 26
        assert data["global_settings"]["log_level"] == "INFO"


class TestLoad:
    """Tests for ForgeConfig.load."""

    def test_load_sections(self, tmp_path):
        path = tmp_path / "hill.toml"
        path.write_text(
            "[global]\n"
            'log_level = "DEBUG"\n'
            "[matrix]\n"
            "strict_modulus = true\n"
            'inverse_method = "search"\n'
            "[keygen]\n"
            "dimension = 4\n"
            "max_attempts = 0\n"
            "seed = 99\n"
            "[cipher]\n"
            'pad_char = "Q"\n',
            encoding="utf-8",
        )
        cfg = ForgeConfig.load(path)
        assert cfg.global_settings.log_level == "DEBUG"
        assert cfg.matrix.strict_modulus is True
        assert cfg.matrix.inverse_method == "search"
        assert cfg.matrix.default_modulus == 26
        assert cfg.keygen.dimension == 4
        assert cfg.keygen.max_attempts == 0
        assert cfg.keygen.seed == 99
        assert cfg.cipher.pad_char == "Q"

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "hill.toml"
        path.write_text("[keygen]\ncolour = \"blue\"\nmodulus = 29\n", encoding="utf-8")
        cfg = ForgeConfig.load(path)
        assert cfg.keygen.modulus == 29

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ForgeConfig.load(tmp_path / "absent.toml")

    def test_get_config_caches(self, tmp_path):
        path = tmp_path / "hill.toml"
        path.write_text("[keygen]\ndimension = 5\n", encoding="utf-8")
        first = get_config(path)
        assert get_config() is first
        assert first.keygen.dimension == 5
