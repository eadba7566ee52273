"""Top-level API for rendering Dia diagrams to cached PNG files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from dia_export.application.results import ExportResult
from dia_export.errors import (
    CacheIOError,
    DiaExportError,
    ExportError,
    InvalidRequestError,
    NotFoundError,
)
from dia_export.model import Diagram, DiagramBuilder, DiagramReference

if TYPE_CHECKING:
    from dia_export.config import ExporterSettings

__version__ = "0.1.0"


def export_diagram_file(
    path: str,
    book_root: Path,
    *,
    book: str = "/",
    width: int | None = None,
    height: int | None = None,
    settings: ExporterSettings | None = None,
) -> ExportResult:
    """Render a ``.dia`` file to a cached PNG.

    Parameters
    ----------
    path : str
        Slash-led diagram path inside the book.
    book_root : Path
        Directory the book's paths are relative to.
    book : str, default="/"
        Book name used in the cache key.
    width, height : int | None
        Requested size in pixels.
    settings : ExporterSettings | None
        Overrides for cache location, executable and timeout.

    Returns
    -------
    ExportResult
        Path of the cached PNG and its measured dimensions.
    """
    from dia_export.api import export_diagram_file as _impl

    return _impl(
        path,
        book_root,
        book=book,
        width=width,
        height=height,
        settings=settings,
    )


__all__ = [
    "CacheIOError",
    "DiaExportError",
    "Diagram",
    "DiagramBuilder",
    "DiagramReference",
    "ExportError",
    "ExportResult",
    "InvalidRequestError",
    "NotFoundError",
    "export_diagram_file",
]
