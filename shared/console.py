"""
HillForge Console Interface
============================

Rich-powered console abstraction providing one presentation layer for
every HillForge tool: section headers, severity-coloured messages,
tables, findings, and status spinners, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

_FORGE_THEME = Theme(
    {
        "forge.banner": "bold bright_cyan",
        "forge.section": "bold bright_magenta",
        "forge.error": "bold red",
        "forge.info": "bold bright_blue",
        "forge.dim": "dim white",
        "forge.high": "bold red",
        "forge.medium": "bold yellow",
        "forge.low": "bold bright_cyan",
        "forge.informational": "bold bright_blue",
    }
)

_SEVERITY_STYLES: dict[str, str] = {
    "HIGH": "forge.high",
    "MEDIUM": "forge.medium",
    "LOW": "forge.low",
    "INFO": "forge.informational",
}


class ForgeConsole:
    """Unified console interface for HillForge tools.

    Usage::

        con = ForgeConsole()
        con.banner()
        con.section("Key Generation")
        con.info("Key accepted")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for later export.
        """
        self._console = Console(
            theme=_FORGE_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner & sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display a compact HillForge banner panel."""
        self._console.print(
            Panel(
                "[forge.banner]HillForge[/forge.banner]  "
                "[forge.dim]modular matrix key engine  |  "
                f"v{version}[/forge.dim]",
                border_style="bright_cyan",
                expand=False,
            )
        )

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(f"  {title}  ", style="forge.section")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def error(self, message: str) -> None:
        self._console.print(
            f"[forge.error][✘] ERROR:[/forge.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[forge.info][ℹ] INFO:[/forge.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        justify: str = "left",
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            justify:  Cell justification for every column.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        for col_name in columns:
            tbl.add_column(col_name, justify=justify)  # type: ignore[arg-type]
        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))
        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render a findings table with automatic severity colouring.

        Expects objects with ``severity``, ``title``, and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        if not findings:
            return

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            style = _SEVERITY_STYLES.get(sev_name)
            sev_cell = f"[{style}]{sev_name}[/{style}]" if style else sev_name
            tbl.add_row(
                str(idx),
                sev_cell,
                str(getattr(finding, "title", "")),
                str(getattr(finding, "description", "")),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(self, message: str = "Working...") -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message."""
        with self._console.status(
            f"[forge.info]{message}[/forge.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

