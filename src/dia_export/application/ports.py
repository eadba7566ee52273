"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from dia_export.application.results import ProcessResult
from dia_export.model import DiagramReference
from dia_export.types import Command, Dimension


class SourceResolver(Protocol):
    """Resolve a diagram reference to its source file."""

    def resolve_source_file(self, reference: DiagramReference) -> Path:
        """Return the existing source file or raise ``NotFoundError``."""


class ProcessRunner(Protocol):
    """Run an external command to completion."""

    def run(self, command: Command, *, timeout: float | None) -> ProcessResult:
        """Block until the command exits and return its captured output."""


class PlatformProfile(Protocol):
    """Host-specific rendering executable and output validation."""

    name: str

    def executable_path(self) -> str:
        """Path of the head-less export executable."""

    def open_executable_path(self) -> str:
        """Path of the interactive executable."""

    def validate_output(
        self,
        result: ProcessResult,
        *,
        source: Path,
        output: Path,
    ) -> None:
        """Raise ``ExportError`` unless the run produced ``output``."""


class ImageSizeProbe(Protocol):
    """Read pixel dimensions from an image header."""

    def probe(self, path: Path) -> Dimension:
        """Return ``(width, height)`` of the image at ``path``."""
