"""
Modulus Policy
===============

Gatekeeper for every modulus a matrix is built with. The lower bound
keeps the residue system large enough for an alphabet-derived cipher;
the upper bound keeps stored residues, and their doubles, inside the
signed 64-bit range of the numpy grid that backs :class:`ModMatrix`.

Two modes:

- lenient (default): out-of-range values are clamped and the adjustment
  is reported as a WARNING log record;
- strict: out-of-range values raise :class:`InvalidModulusError`.
"""

from __future__ import annotations

import numbers

import numpy as np

from shared.logger import ForgeLogger
from hill.core.errors import InvalidModulusError

MIN_MODULUS: int = 13
MAX_MODULUS: int = int(np.iinfo(np.int64).max) // 2

_log = ForgeLogger("hill.modulus")


def _require_integer(requested: object) -> int:
    if isinstance(requested, bool) or not isinstance(requested, numbers.Integral):
        raise InvalidModulusError(
            f"modulus must be an integer, got {requested!r}",
            requested=requested,
        )
    return int(requested)


def clamp_modulus(requested: int) -> int:
    """Clamp *requested* into ``[MIN_MODULUS, MAX_MODULUS]``."""
    value = _require_integer(requested)
    return min(max(value, MIN_MODULUS), MAX_MODULUS)


def normalize_modulus(requested: int, *, strict: bool = False) -> int:
    """Validate *requested* and return the modulus a matrix will use.

    Args:
        requested: Caller-supplied modulus.
        strict:    Reject out-of-range values instead of clamping them.

    Returns:
        A modulus in ``[MIN_MODULUS, MAX_MODULUS]``.

    Raises:
        InvalidModulusError: Non-integer input, or out-of-range input in
            strict mode.
    """
    value = _require_integer(requested)
    if MIN_MODULUS <= value <= MAX_MODULUS:
        return value

    if strict:
        raise InvalidModulusError(
            f"modulus {value} outside supported range "
            f"[{MIN_MODULUS}, {MAX_MODULUS}]",
            requested=value,
        )

    clamped = clamp_modulus(value)
    _log.warning(
        "Modulus %d adjusted to %d", value, clamped,
        requested=value, effective=clamped,
    )
    return clamped
