"""
HillForge Mathematical Utilities
=================================

Exact integer primitives used by the modular matrix engine: residue
reduction, cofactor signs, greatest common divisors, and modular
multiplicative inverses.

Everything here works on Python integers, which never overflow, so the
results are exact for every modulus the engine accepts.

References (master list):
    [1] Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2:
        Seminumerical Algorithms (3rd ed.). Section 4.5.2.
    [2] Menezes, A., van Oorschot, P. & Vanstone, S. (1996). Handbook of
        Applied Cryptography. CRC Press. Algorithm 2.107, 2.142.
    [3] Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
        The American Mathematical Monthly, 36(6), 306-312.
"""

from __future__ import annotations


# ========================== Residues & Signs ===============================


def positive_mod(value: int, modulus: int) -> int:
    """Reduce *value* into the canonical residue range ``[0, modulus)``.

    Python's ``%`` already returns a non-negative result for a positive
    modulus; the helper exists so every reduction in the engine reads the
    same way and rejects a non-positive modulus early.

    Args:
        value:   Any integer.
        modulus: Positive modulus.

    Returns:
        The residue of *value* modulo *modulus*.

    Raises:
        ValueError: If *modulus* is not positive.
    """
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")
    return value % modulus


def parity_sign(index: int) -> int:
    """Return ``(-1) ** index`` computed from the parity of *index*.

    Exact for every integer, no floating point involved.
    """
    return -1 if index & 1 else 1


# ========================== GCD ============================================


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    ``gcd(0, m) == m``, which makes a zero determinant invertible only
    when the modulus itself is 1 (never the case in this engine).

    Reference:
        Knuth (1997), Algorithm 4.5.2A.

    Args:
        a: First integer.
        b: Second integer.

    Returns:
        Non-negative greatest common divisor of *a* and *b*.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclidean algorithm.

    Finds ``(g, x, y)`` such that ``a*x + b*y == g == gcd(a, b)``.
    Iterative, so deep inputs cannot hit the recursion limit.

    Reference:
        Menezes et al. (1996), Algorithm 2.107.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


# ========================== Modular Inverse ================================


def scalar_inverse(value: int, modulus: int) -> int:
    """Modular multiplicative inverse via the extended Euclidean algorithm.

    Returns the unique ``w`` in ``[0, modulus)`` with
    ``(value * w) % modulus == 1``. Runs in ``O(log modulus)`` and returns
    exactly what :func:`scalar_inverse_search` would.

    Reference:
        Menezes et al. (1996), Algorithm 2.142.

    Args:
        value:   Integer to invert (any representative of its residue).
        modulus: Modulus, must be greater than 1.

    Returns:
        The inverse residue.

    Raises:
        ValueError: If ``modulus <= 1`` or ``gcd(value, modulus) != 1``.
    """
    if modulus <= 1:
        raise ValueError(f"modulus must be greater than 1, got {modulus}")
    g, x, _ = extended_gcd(value % modulus, modulus)
    if g != 1:
        raise ValueError(
            f"{value} has no inverse modulo {modulus} (gcd = {g})"
        )
    return x % modulus


def scalar_inverse_search(value: int, modulus: int) -> int:
    """Modular multiplicative inverse by exhaustive search.

    Scans candidates ``0, 1, ..., modulus - 1`` and returns the first ``i``
    with ``(i * value) % modulus == 1``. Always finds the inverse when
    ``gcd(value, modulus) == 1`` but costs ``O(modulus)``; kept for small
    moduli and as a cross-check of :func:`scalar_inverse`.

    Raises:
        ValueError: If ``modulus <= 1`` or the search range is exhausted.
    """
    if modulus <= 1:
        raise ValueError(f"modulus must be greater than 1, got {modulus}")
    for candidate in range(modulus):
        if (candidate * value) % modulus == 1:
            return candidate
    raise ValueError(f"{value} has no inverse modulo {modulus}")
