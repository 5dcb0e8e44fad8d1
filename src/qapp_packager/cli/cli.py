#!/usr/bin/env python3
"""
qapp_packager.cli.cli

Typer-based CLI that interactively builds the ``app.toml`` manifest of a
Quantii application bundle.

A bundle is laid out as::

    appname.qapp
    ├── app.toml
    └── icon.svg

Examples
--------
Create ``app.toml`` in the current directory:

    qapp-packager init

Write somewhere else, one array item per author:

    qapp-packager init --output build/app.toml --split-authors

Validate an existing manifest:

    qapp-packager check app.toml
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from qapp_packager.application.options import DEFAULT_MANIFEST_NAME
from qapp_packager.errors import PackagerError

app = typer.Typer(
    name="qapp-packager",
    help="Interactively create the app.toml manifest of a Quantii application.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DOCTOR_MODULES = ("qapp-packager", "typer", "click", "pydantic", "pydantic-core")


# -----------------------------
# Utilities
# -----------------------------
def _configure_logging(log_level: str) -> None:
    """Route stdlib logging to stderr at ``log_level``.

    Raises
    ------
    typer.BadParameter
        If the level name is unknown.
    """
    level_name = log_level.upper()
    if level_name not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'. Choose from: {', '.join(LOG_LEVELS)}."
        )
    logging.basicConfig(level=level_name, stream=sys.stderr, format=LOG_FORMAT)
    logging.getLogger("qapp_packager").setLevel(level_name)


def _print_packager_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised by a command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    log_level: str = typer.Option(
        "WARNING", "--log-level", help=f"Logging level ({', '.join(LOG_LEVELS)})."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    log_level : str, default="WARNING"
        Level for diagnostic logging on stderr.
    """
    _configure_logging(log_level)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("init")
def init_cmd(
    ctx: typer.Context,
    output: Path = typer.Option(
        Path(DEFAULT_MANIFEST_NAME),
        "--output",
        "-o",
        help="Manifest file to create.",
    ),
    split_authors: bool = typer.Option(
        False,
        "--split-authors",
        help='Render each author as its own array item (["A", "B"]) instead of one joined item.',
    ),
) -> None:
    """Prompt for application metadata and write the manifest.

    Notes
    -----
    - Reads one line per prompt from stdin; end of input is fatal.
    - An invalid repository link, version or menu selection stops the run.
    - If the manifest exists, choose to overwrite it, abort, or write a
      different file.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from qapp_packager.adapters.prompters import TerminalPrompter
        from qapp_packager.application.use_cases import (
            build_manifest_options,
            create_manifest,
        )

        result = create_manifest(
            prompter=TerminalPrompter(),
            options=build_manifest_options(output_path=output, split_authors=split_authors),
        )
        logger.info("manifest run finished: %s", result.outcome.status)
    except PackagerError as exc:
        raise typer.Exit(code=_print_packager_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_packager_error(exc, debug))


@app.command("check")
def check_cmd(
    ctx: typer.Context,
    manifest_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Path to an app.toml manifest.",
    ),
) -> None:
    """Validate an existing manifest's [app] table."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from qapp_packager.application.use_cases import load_manifest

        manifest = load_manifest(manifest_path)
        typer.echo(f"✓ Valid: {manifest.name} {manifest.version} ({manifest.repo})")
    except PackagerError as exc:
        raise typer.Exit(code=_print_packager_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_packager_error(exc, debug))


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in DOCTOR_MODULES:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")


if __name__ == "__main__":
    app()
