"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExportResult:
    """Rendered PNG location and its measured pixel size."""

    artifact_path: Path
    width: int
    height: int


@dataclass(frozen=True)
class ProcessResult:
    """Captured outcome of an external process run."""

    exit_code: int
    stdout: str
    stderr: str
