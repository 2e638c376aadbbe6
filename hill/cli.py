"""
Hill CLI
=========

Click-based command-line interface for the Hill matrix engine.
Provides subcommands for key generation, determinant analysis,
inversion, vector transforms and Hill cipher encryption.

Matrices are given as literals with rows separated by ``;`` and entries
by ``,`` (see :mod:`hill.parsers.matrix_parser`).

Usage::

    python -m hill keygen --size 3 --modulus 26 --seed 7
    python -m hill inspect "3,3;2,5" --modulus 26
    python -m hill invert "15,17;20,9"
    python -m hill apply "1,2;3,4" "1,1" --modulus 26
    python -m hill encrypt "help" --key "3,3;2,5"
    python -m hill decrypt "HIAT" --key "3,3;2,5"

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
import sys
from typing import Callable, Optional

import click

from shared.config import ForgeConfig
from shared.console import ForgeConsole
from shared.logger import ForgeLogger
from shared.models import OperationResult

from hill import __version__
from hill.core.engine import HillEngine
from hill.core.errors import MatrixError
from hill.core.models import (
    CipherTextResult,
    InversionResult,
    KeyGenerationResult,
    TransformResult,
)
from hill.output.console import HillConsoleOutput
from hill.parsers import parse_matrix, parse_vector


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="hillforge")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to HillForge configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
    verbose: bool,
) -> None:
    """HillForge -- modular matrix key engine.

    Generate invertible key matrices, compute determinants, adjugates and
    inverses modulo M, and encrypt text with the Hill cipher.
    """
    ctx.ensure_object(dict)

    forge_config = ForgeConfig.load(config)
    if verbose:
        forge_config.global_settings.debug = True
    ctx.obj["config"] = forge_config
    ctx.obj["output_format"] = output

    # JSON goes to stdout, so console chatter is silenced with it.
    console = ForgeConsole(quiet=quiet or output == "json")
    ctx.obj["console"] = console
    ctx.obj["engine"] = HillEngine(
        forge_config,
        logger=ForgeLogger.from_config(
            "hill.engine",
            forge_config.global_settings,
            console_output=not quiet,
        ),
    )
    ctx.obj["display"] = HillConsoleOutput(console)

    if not quiet and output == "console":
        console.banner(version=__version__)


def _run(ctx: click.Context, operation: Callable[[], OperationResult]) -> OperationResult:
    """Run an engine operation, turning library errors into exit status 1."""
    console: ForgeConsole = ctx.obj["console"]
    try:
        return operation()
    except (MatrixError, ValueError) as exc:
        if ctx.obj["output_format"] == "json":
            click.echo(json.dumps({"error": type(exc).__name__, "message": str(exc)}))
        else:
            console.error(str(exc))
        sys.exit(1)


def _parse(parser: Callable[[str], list], text: str):
    try:
        return parser(text)
    except MatrixError as exc:
        raise click.BadParameter(str(exc)) from exc


def _handle_output(ctx: click.Context, result: OperationResult, show: Callable[[], None]) -> None:
    """Render *result* as JSON on stdout or via the console display."""
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(
            result.model_dump(mode="json"),
            indent=2,
            ensure_ascii=False,
        ))
        return
    show()
    ctx.obj["console"].findings_table(result.findings)
    ctx.obj["console"].info(
        f"{result.summary} ({result.duration_seconds or 0.0:.3f}s)"
    )


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option("--size", "-n", type=click.IntRange(min=0), default=None,
              help="Matrix dimension (default from config).")
@click.option("--modulus", "-m", type=int, default=None,
              help="Modulus (default from config).")
@click.option("--seed", type=int, default=None,
              help="Seed for a reproducible key.")
@click.option("--max-attempts", type=click.IntRange(min=0), default=None,
              help="Retry budget; 0 means unbounded.")
@click.pass_context
def keygen(
    ctx: click.Context,
    size: Optional[int],
    modulus: Optional[int],
    seed: Optional[int],
    max_attempts: Optional[int],
) -> None:
    """Generate a random invertible key matrix.

    Samples every entry uniformly in [0, M) and retries until the
    determinant is coprime to the modulus.
    """
    engine: HillEngine = ctx.obj["engine"]
    display: HillConsoleOutput = ctx.obj["display"]

    with ctx.obj["console"].status("Searching for an invertible key..."):
        result = _run(ctx, lambda: engine.generate_key(
            size, modulus, seed=seed, max_attempts=max_attempts
        ))
    _handle_output(
        ctx, result,
        lambda: display.display_key_generation(KeyGenerationResult(**result.metadata)),
    )


@cli.command()
@click.argument("matrix")
@click.option("--modulus", "-m", type=int, default=None,
              help="Modulus (default from config).")
@click.pass_context
def inspect(ctx: click.Context, matrix: str, modulus: Optional[int]) -> None:
    """Show determinant, adjugate and inverse (if any) of MATRIX."""
    engine: HillEngine = ctx.obj["engine"]
    display: HillConsoleOutput = ctx.obj["display"]

    rows = _parse(parse_matrix, matrix)
    result = _run(ctx, lambda: engine.analyze_matrix(rows, modulus))
    _handle_output(
        ctx, result,
        lambda: display.display_inversion(InversionResult(**result.metadata)),
    )


@cli.command()
@click.argument("matrix")
@click.option("--modulus", "-m", type=int, default=None,
              help="Modulus (default from config).")
@click.pass_context
def invert(ctx: click.Context, matrix: str, modulus: Optional[int]) -> None:
    """Invert MATRIX modulo M; fails if the determinant is not a unit."""
    engine: HillEngine = ctx.obj["engine"]
    display: HillConsoleOutput = ctx.obj["display"]

    rows = _parse(parse_matrix, matrix)
    result = _run(ctx, lambda: engine.invert(rows, modulus))
    _handle_output(
        ctx, result,
        lambda: display.display_inversion(InversionResult(**result.metadata)),
    )


@cli.command()
@click.argument("matrix")
@click.argument("vector")
@click.option("--modulus", "-m", type=int, default=None,
              help="Modulus (default from config).")
@click.pass_context
def apply(ctx: click.Context, matrix: str, vector: str, modulus: Optional[int]) -> None:
    """Multiply MATRIX by VECTOR modulo M."""
    engine: HillEngine = ctx.obj["engine"]
    display: HillConsoleOutput = ctx.obj["display"]

    rows = _parse(parse_matrix, matrix)
    values = _parse(parse_vector, vector)
    result = _run(ctx, lambda: engine.transform(rows, values, modulus))
    _handle_output(
        ctx, result,
        lambda: display.display_transform(TransformResult(**result.metadata)),
    )


_KEY_OPTION = click.option(
    "--key", "-k", "key", required=True,
    help="Key matrix literal, e.g. '3,3;2,5'.",
)
_ALPHABET_OPTION = click.option(
    "--alphabet", "-a", default=None,
    help="Alphabet (default from config); its length is the modulus.",
)


@cli.command()
@click.argument("text")
@_KEY_OPTION
@_ALPHABET_OPTION
@click.pass_context
def encrypt(ctx: click.Context, text: str, key: str, alphabet: Optional[str]) -> None:
    """Encrypt TEXT with the Hill cipher.

    Symbols outside the alphabet are dropped and the last block is
    padded with the configured pad character.
    """
    engine: HillEngine = ctx.obj["engine"]
    display: HillConsoleOutput = ctx.obj["display"]

    rows = _parse(parse_matrix, key)
    result = _run(ctx, lambda: engine.encrypt_text(text, rows, alphabet))
    _handle_output(
        ctx, result,
        lambda: display.display_cipher_text(CipherTextResult(**result.metadata)),
    )


@cli.command()
@click.argument("text")
@_KEY_OPTION
@_ALPHABET_OPTION
@click.pass_context
def decrypt(ctx: click.Context, text: str, key: str, alphabet: Optional[str]) -> None:
    """Decrypt TEXT with the Hill cipher."""
    engine: HillEngine = ctx.obj["engine"]
    display: HillConsoleOutput = ctx.obj["display"]

    rows = _parse(parse_matrix, key)
    result = _run(ctx, lambda: engine.decrypt_text(text, rows, alphabet))
    _handle_output(
        ctx, result,
        lambda: display.display_cipher_text(CipherTextResult(**result.metadata)),
    )


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Hill CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
