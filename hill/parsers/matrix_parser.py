"""
Matrix Literal Parser
======================

Parses the compact text forms used on the command line and in config
files:

    - Matrix: rows separated by ``;``, entries by ``,`` or whitespace,
      e.g. ``"3,3;2,5"`` or ``"3 3; 2 5"``. Optional surrounding
      brackets are ignored, so ``"[[3,3],[2,5]]"`` also parses.
    - Vector: entries separated by ``,`` or whitespace, e.g. ``"1,1"``.

An empty string parses to the 0 x 0 matrix / the empty vector.
"""

from __future__ import annotations

import re
from typing import Sequence

from hill.core.errors import MatrixParseError

_ENTRY_SPLIT = re.compile(r"[,\s]+")
_NESTED_ROW = re.compile(r"\[([^\[\]]*)\]")


def parse_vector(text: str) -> list[int]:
    """Parse a vector literal into a list of integers.

    Raises:
        MatrixParseError: An entry is not an integer.
    """
    body = text.strip().strip("[]").strip()
    if not body:
        return []
    values: list[int] = []
    for token in _ENTRY_SPLIT.split(body):
        if not token:
            continue
        try:
            values.append(int(token))
        except ValueError as exc:
            raise MatrixParseError(f"not an integer: {token!r}") from exc
    return values


def parse_matrix(text: str) -> list[list[int]]:
    """Parse a matrix literal into square nested rows.

    Raises:
        MatrixParseError: Non-integer entry, or the rows do not form a
            square grid.
    """
    stripped = text.strip()
    row_texts = _NESTED_ROW.findall(stripped) or stripped.split(";")
    # Blank rows come from trailing separators or empty brackets.
    rows = [row for row in map(parse_vector, row_texts) if row]

    for index, row in enumerate(rows):
        if len(row) != len(rows):
            raise MatrixParseError(
                f"matrix is not square: row {index} has {len(row)} entries, "
                f"expected {len(rows)}"
            )
    return rows


def format_matrix(rows: Sequence[Sequence[int]]) -> str:
    """Inverse of :func:`parse_matrix`: ``[[3, 3], [2, 5]] -> "3,3;2,5"``."""
    return ";".join(",".join(str(v) for v in row) for row in rows)
