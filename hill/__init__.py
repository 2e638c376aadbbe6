"""
HillForge Hill -- Modular Matrix Key Engine
============================================

Square matrices over the integers modulo M: determinants by cofactor
expansion, adjugates, modular inverses, vector transforms and random
invertible key generation, plus a Hill cipher built on top.

Modules:
    - hill.core.matrix: Matrix store and determinant/adjugate/inverse engine
    - hill.core.keygen: Invertible key matrices and the random generator
    - hill.core.hill_cipher: Polygraphic text cipher
    - hill.core.engine: Central operation orchestrator
    - hill.parsers: Matrix / vector literal parsing
    - hill.output: Console output
    - hill.cli: Click-based command-line interface

References:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
    - Overbey, J., Traves, W., & Wojdylo, J. (2005). On the Keyspace of
      the Hill Cipher. Cryptologia, 29(1), 59-72.
"""

__version__ = "1.0.0"
__tool_name__ = "hill"
