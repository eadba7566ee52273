#!/usr/bin/env python3
"""
dia_export.cli.cli

Typer-based CLI for rendering Dia diagrams to cached PNG files.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Render a diagram at 300px wide into the default cache:

    dia-export export /diagrams/architecture.dia --book-root docs --width 300
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from pathlib import Path

import typer

from dia_export.config import ExporterSettings
from dia_export.errors import DiaExportError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dia-export",
    help="Render Dia diagrams to PNG through the dia binary, with an on-disk cache.",
    no_args_is_help=True,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_export_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly export error.

    Parameters
    ----------
    exc : Exception
        Exception raised during export.
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
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
) -> None:
    """Initialize shared CLI state."""
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("export")
def export_cmd(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Slash-led diagram path inside the book, e.g. /a/b.dia."),
    book: str = typer.Option("/", "--book", help="Book name used in the cache key."),
    book_root: Path = typer.Option(
        Path("."),
        "--book-root",
        exists=True,
        file_okay=False,
        help="Directory the diagram path is relative to.",
    ),
    cache_dir: Path | None = typer.Option(
        None, "--cache-dir", help="Cache root (default: $DIA_EXPORT_CACHE_DIR or temp dir)."
    ),
    width: int | None = typer.Option(None, "--width", min=1, help="Requested width in pixels."),
    height: int | None = typer.Option(None, "--height", min=1, help="Requested height in pixels."),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.0, help="Seconds before dia is killed (0 disables)."
    ),
    executable: str | None = typer.Option(
        None, "--executable", help="Path to the dia executable."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Render a diagram, reusing the cached PNG while it is fresh."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        settings = ExporterSettings.from_env(
            cache_dir=cache_dir,
            executable=executable,
            timeout=timeout,
            log_level="DEBUG" if debug else None,
        )
        _configure_logging(settings.log_level)

        from dia_export.api import export_diagram_file

        result = export_diagram_file(
            path,
            book_root,
            book=book,
            width=width,
            height=height,
            settings=settings,
        )
    except DiaExportError as exc:
        raise typer.Exit(code=_print_export_error(exc, debug))
    except Exception as exc:
        logger.debug("unexpected export failure", exc_info=True)
        raise typer.Exit(code=_print_export_error(exc, debug))

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "artifact_path": str(result.artifact_path),
                    "width": result.width,
                    "height": result.height,
                }
            )
        )
    else:
        typer.echo(f"✓ Exported: {result.artifact_path} ({result.width}x{result.height})")


@app.command("doctor")
def doctor_cmd(
    executable: str | None = typer.Option(
        None, "--executable", help="Path to the dia executable."
    ),
) -> None:
    """Print the selected platform profile, executables and dependency versions."""
    import importlib.metadata as metadata

    from dia_export.adapters.platforms import detect_platform_profile

    settings = ExporterSettings.from_env(executable=executable)
    profile = detect_platform_profile(executable=settings.executable)

    typer.echo(f"Python: {sys.version.split()[0]}")
    typer.echo(f"profile: {profile.name}")
    for label, exe in (
        ("export executable", profile.executable_path()),
        ("open executable", profile.open_executable_path()),
    ):
        state = "found" if Path(exe).is_file() else "<missing>"
        typer.echo(f"{label}: {exe} ({state})")
    typer.echo(f"cache dir: {settings.cache_dir}")
    typer.echo(f"timeout: {settings.timeout if settings.timeout else 'none'}")

    for module in ("pydantic", "pillow", "typer"):
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")


if __name__ == "__main__":
    app()
