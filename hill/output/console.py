"""
Hill Console Output
====================

Rich-based console output formatters for the Hill matrix engine.
Renders matrices as bordered grids and summarises key generation,
inversion, vector transforms and text cipher runs.

Uses the HillForge shared console infrastructure for consistent
styling across all components.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ForgeConsole
from hill.core.models import (
    CipherTextResult,
    InversionResult,
    KeyGenerationResult,
    MatrixSnapshot,
    TransformResult,
)


class HillConsoleOutput:
    """Console output formatters for Hill engine results.

    Usage::

        console = ForgeConsole()
        output = HillConsoleOutput(console)
        output.display_key_generation(keygen_result)
        output.display_inversion(inversion_result)
    """

    def __init__(self, console: Optional[ForgeConsole] = None) -> None:
        """Initialise the console output formatter.

        Args:
            console: ForgeConsole instance. Creates one if not provided.
        """
        self.console = console or ForgeConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Matrices
    # ------------------------------------------------------------------ #

    def display_matrix(self, title: str, matrix: MatrixSnapshot) -> None:
        """Render *matrix* as a grid with row and column indices."""
        heading = f"{title} ({matrix.dimension}x{matrix.dimension} mod {matrix.modulus})"
        tbl = Table(
            title=heading,
            min_width=len(heading) + 4,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("", style="dim", justify="right")
        for j in range(matrix.dimension):
            tbl.add_column(str(j), justify="right")
        for i, row in enumerate(matrix.rows):
            tbl.add_row(str(i), *(str(v) for v in row))
        self._rich.print(tbl)

    def _summary_panel(self, title: str, fields: list[tuple[str, str]]) -> None:
        text = Text()
        for index, (label, value) in enumerate(fields):
            if index:
                text.append("\n")
            text.append(f"{label}: ", style="bold")
            text.append(value)
        self._rich.print(Panel(text, title=title, border_style="cyan", expand=False))

    # ------------------------------------------------------------------ #
    #  Key generation
    # ------------------------------------------------------------------ #

    def display_key_generation(self, result: KeyGenerationResult) -> None:
        self.console.section("Key Generation")
        budget = "unbounded" if result.max_attempts is None else f"{result.max_attempts:,}"
        self._summary_panel("Overview", [
            ("Determinant", str(result.determinant)),
            ("Determinant Inverse", str(result.determinant_inverse)),
            ("Attempts", f"{result.attempts:,} / {budget}"),
            ("Seed", "random" if result.seed is None else str(result.seed)),
        ])
        self.display_matrix("Key", result.key)
        self.display_matrix("Inverse Key", result.inverse)

    # ------------------------------------------------------------------ #
    #  Inversion
    # ------------------------------------------------------------------ #

    def display_inversion(self, result: InversionResult) -> None:
        """Display determinant analysis, the adjugate and the inverse.

        A non-invertible matrix shows the shared factor in red and no
        inverse grid.
        """
        self.console.section("Matrix Analysis")
        self.display_matrix("Input", result.matrix)

        status = (
            Text("invertible", style="bold green")
            if result.invertible
            else Text("NOT invertible", style="bold red")
        )
        text = Text()
        text.append("Determinant: ", style="bold")
        text.append(f"{result.determinant}\n")
        text.append("gcd(det, modulus): ", style="bold")
        text.append(str(result.gcd), style="green" if result.gcd == 1 else "red")
        text.append("\nStatus: ", style="bold")
        text.append(status)
        if result.determinant_inverse is not None:
            text.append("\nDeterminant Inverse: ", style="bold")
            text.append(str(result.determinant_inverse))
        if result.inverse is not None:
            text.append("\nVerified (inverse x M = I): ", style="bold")
            text.append(
                "yes" if result.verified else "no",
                style="green" if result.verified else "red",
            )
        self._rich.print(Panel(text, title="Determinant", border_style="cyan", expand=False))

        self.display_matrix("Adjugate", result.adjugate)
        if result.inverse is not None:
            self.display_matrix("Inverse", result.inverse)

    # ------------------------------------------------------------------ #
    #  Transform / cipher
    # ------------------------------------------------------------------ #

    def display_transform(self, result: TransformResult) -> None:
        self.console.section("Vector Transform")
        self.display_matrix("Matrix", result.matrix)
        self.console.table(
            "Transform",
            ["Index", "Input", "Output"],
            [
                (i, v, out)
                for i, (v, out) in enumerate(zip(result.vector, result.result))
            ],
            justify="right",
        )

    def display_cipher_text(self, result: CipherTextResult) -> None:
        self.console.section(f"Hill Cipher ({result.direction})")
        self.display_matrix("Key", result.key)
        self._summary_panel("Text", [
            ("Alphabet", result.alphabet),
            ("Input", result.input_text),
            ("Normalised", result.normalized),
            ("Output", result.output_text),
        ])
