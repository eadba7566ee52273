#!/usr/bin/env python3
"""Regenerate or verify requirements.txt from pyproject.toml.

Usage:
    uv run python scripts/sync_requirements.py           # rewrite requirements.txt
    uv run python scripts/sync_requirements.py --check   # fail when out of sync
"""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SYNC_EXTRAS = ("cli",)
HEADER = (
    f"# Generated from pyproject.toml (base + extras: {','.join(SYNC_EXTRAS)})\n"
    "# Do not edit manually; run: uv run python scripts/sync_requirements.py\n"
    "\n"
)


def expected_requirements(root: Path = ROOT) -> list[str]:
    """Return base dependencies plus the synced extras, sorted."""
    project = tomllib.loads((root / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    deps = set(project.get("dependencies", []))
    optional = project.get("optional-dependencies", {})
    for extra in SYNC_EXTRAS:
        deps.update(optional.get(extra, []))
    return sorted(dep.strip() for dep in deps if dep.strip())


def current_requirements(root: Path = ROOT) -> list[str]:
    """Return requirement lines from requirements.txt without comments."""
    lines = (root / "requirements.txt").read_text(encoding="utf-8").splitlines()
    stripped = (line.split("#", 1)[0].strip() for line in lines)
    return sorted(line for line in stripped if line)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--check", action="store_true", help="verify instead of rewriting")
    args = parser.parse_args(argv)

    expected = expected_requirements()
    if not args.check:
        (ROOT / "requirements.txt").write_text(HEADER + "\n".join(expected) + "\n", encoding="utf-8")
        print(f"Wrote {len(expected)} requirements to requirements.txt")
        return

    actual = current_requirements()
    missing = sorted(set(expected) - set(actual))
    unknown = sorted(set(actual) - set(expected))
    if missing or unknown:
        parts = ["requirements.txt is out of sync with pyproject.toml."]
        parts.extend(f"- missing: {entry}" for entry in missing)
        parts.extend(f"- unexpected: {entry}" for entry in unknown)
        raise SystemExit("\n".join(parts))
    print("Dependency sync check passed.")


if __name__ == "__main__":
    main()
