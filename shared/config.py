"""
HillForge Configuration Management
===================================

Centralized configuration for the HillForge matrix engine and its tools
using Python dataclasses and TOML-based persistence.

Architecture follows the Twelve-Factor App methodology for configuration
management (Wiggins, 2011), separating config from code.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the HillForge root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class MatrixConfig:
    """Configuration for the modular matrix engine.

    Controls how requested moduli are normalised and which scalar
    inverse algorithm backs matrix inversion.
    """

    default_modulus: int = 26
    strict_modulus: bool = False
    inverse_method: str = "euclid"  # "euclid" | "search"


@dataclass(frozen=False, slots=True)
class KeygenConfig:
    """Configuration for the invertible key generator.

    ``max_attempts`` is the retry budget of the generate-and-test loop;
    ``seed`` pins the random source for reproducible keys.
    """

    dimension: int = 3
    modulus: int = 26
    max_attempts: int = 10_000  # 0 disables the budget
    seed: Optional[int] = None


@dataclass(frozen=False, slots=True)
class CipherConfig:
    """Configuration for the Hill text cipher.

    The alphabet length doubles as the cipher modulus.
    """

    alphabet: str = string.ascii_uppercase
    pad_char: str = "X"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all HillForge modules.

    Controls logging verbosity, log destinations, and general
    operational parameters.
    """

    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ForgeConfig:
    """Master configuration aggregating all tool-specific and global settings.

    Usage:
        >>> config = ForgeConfig.load()                  # from default path
        >>> config = ForgeConfig.load("custom.toml")     # from custom path
        >>> print(config.keygen.dimension)
        3
        >>> print(config.matrix.default_modulus)
        26
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    matrix: MatrixConfig = field(default_factory=MatrixConfig)
    keygen: KeygenConfig = field(default_factory=KeygenConfig)
    cipher: CipherConfig = field(default_factory=CipherConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ForgeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        HillForge project root.  Missing keys gracefully fall back to
        dataclass defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`ForgeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            # Fall back to pure defaults when the default file is absent.
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            matrix=cls._build_section(MatrixConfig, raw.get("matrix", {})),
            keygen=cls._build_section(KeygenConfig, raw.get("keygen", {})),
            cipher=cls._build_section(CipherConfig, raw.get("cipher", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> ForgeConfig:
    """Module-level convenience wrapper around :meth:`ForgeConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = ForgeConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
