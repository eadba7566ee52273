#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/dia_export"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    _assert_no_imports(
        PACKAGE / "cli/cli.py",
        ["import subprocess", "from PIL", "import PIL"],
    )

    # The exporter talks to the outside world only through its ports.
    _assert_no_imports(
        PACKAGE / "exporter.py",
        ["import subprocess", "from PIL", "import typer", "dia_export.adapters"],
    )

    for name in ("ports.py", "options.py", "results.py", "__init__.py"):
        _assert_no_imports(
            PACKAGE / "application" / name,
            [
                "import typer",
                "from typer",
                "import subprocess",
                "from PIL",
                "dia_export.adapters",
            ],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
