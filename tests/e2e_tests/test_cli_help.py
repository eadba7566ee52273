"""End-to-end smoke tests for the installed console script."""

from __future__ import annotations

import subprocess

import dia_export


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert dia_export.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["dia-export", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Render Dia diagrams" in result.stdout


def test_cli_missing_diagram_fails_cleanly(tmp_path) -> None:
    """Ensure a missing source surfaces NotFoundError with its exit code."""
    result = subprocess.run(
        [
            "dia-export",
            "export",
            "/definitely-missing.dia",
            "--book-root",
            str(tmp_path),
            "--cache-dir",
            str(tmp_path / "cache"),
        ],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 2
    assert "NotFoundError" in result.stderr
