"""
Hill Parsers
=============

Text parsing utilities for matrix and vector literals.
"""

from hill.parsers.matrix_parser import format_matrix, parse_matrix, parse_vector

__all__ = [
    "format_matrix",
    "parse_matrix",
    "parse_vector",
]
