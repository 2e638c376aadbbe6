"""
Tests for the click command-line interface.
"""

import json

import pytest
from click.testing import CliRunner

from hill.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def _json(runner, *args):
    result = runner.invoke(cli, ["-q", "-o", "json", *args], obj={})
    return result, (json.loads(result.stdout) if result.stdout.strip() else None)


class TestJsonOutput:
    """Tests for --output json."""

    def test_keygen(self, runner):
        result, data = _json(runner, "keygen", "-n", "2", "-m", "26", "--seed", "4")
        assert result.exit_code == 0
        assert data["operation"] == "keygen"
        assert data["metadata"]["key"]["dimension"] == 2

    def test_inspect(self, runner):
        result, data = _json(runner, "inspect", "3,3;2,5")
        assert result.exit_code == 0
        assert data["metadata"]["determinant"] == 9
        assert data["metadata"]["inverse"]["rows"] == [[15, 17], [20, 9]]

    def test_inspect_singular_succeeds(self, runner):
        result, data = _json(runner, "inspect", "1,2;3,4")
        assert result.exit_code == 0
        assert data["findings"][0]["severity"] == "HIGH"

    def test_invert_singular_fails(self, runner):
        result, data = _json(runner, "invert", "1,2;3,4")
        assert result.exit_code == 1
        assert data["error"] == "NotInvertibleError"

    def test_apply(self, runner):
        result, data = _json(runner, "apply", "1,2;3,4", "1,1")
        assert result.exit_code == 0
        assert data["metadata"]["result"] == [3, 7]

    def test_encrypt_decrypt(self, runner):
        _, enc = _json(runner, "encrypt", "help", "--key", "3,3;2,5")
        assert enc["summary"] == "HIAT"
        _, dec = _json(runner, "decrypt", "HIAT", "-k", "3,3;2,5")
        assert dec["summary"] == "HELP"


class TestErrors:
    """Tests for argument and library error handling."""

    def test_bad_matrix_literal(self, runner):
        result = runner.invoke(cli, ["-q", "inspect", "1,2;3"], obj={})
        assert result.exit_code == 2

    def test_vector_mismatch(self, runner):
        result = runner.invoke(cli, ["-q", "apply", "1,2;3,4", "1,2,3"], obj={})
        assert result.exit_code == 1

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(
            cli, ["-c", str(tmp_path / "absent.toml"), "inspect", "3,3;2,5"], obj={}
        )
        assert result.exit_code == 2


class TestConsoleOutput:
    """Tests for the default Rich console output."""

    def test_inspect_console(self, runner):
        result = runner.invoke(cli, ["inspect", "3,3;2,5"], obj={})
        assert result.exit_code == 0
        assert "HillForge" in result.output
        assert "Adjugate" in result.output

    def test_keygen_console(self, runner):
        result = runner.invoke(cli, ["keygen", "--seed", "1"], obj={})
        assert result.exit_code == 0
        assert "Inverse Key" in result.output

    def test_config_file(self, runner, tmp_path):
        path = tmp_path / "hill.toml"
        path.write_text("[keygen]\ndimension = 2\nmodulus = 29\n", encoding="utf-8")
        result = runner.invoke(
            cli, ["-c", str(path), "-q", "-o", "json", "keygen", "--seed", "2"], obj={}
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["subject"] == "2x2 mod 29"

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert "1.0.0" in result.output
