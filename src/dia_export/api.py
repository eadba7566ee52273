"""Public file-based export API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from dia_export.adapters.platforms import detect_platform_profile
from dia_export.adapters.resolvers import FilesystemSourceResolver
from dia_export.application.options import ExportOptions
from dia_export.application.results import ExportResult
from dia_export.application.use_cases import export_diagram
from dia_export.config import ExporterSettings
from dia_export.model import ROOT_BOOK, DiagramReference


def export_diagram_file(
    path: str,
    book_root: Path,
    *,
    book: str = ROOT_BOOK,
    width: int | None = None,
    height: int | None = None,
    settings: ExporterSettings | None = None,
) -> ExportResult:
    """Render ``path`` of the book rooted at ``book_root`` to a cached PNG.

    Parameters
    ----------
    path : str
        Slash-led diagram path inside the book, e.g. ``/diagrams/a.dia``.
    book_root : Path
        Directory holding the book's files.
    book : str, default="/"
        Book name used in the cache key.
    width, height : int | None
        Requested size; ``None`` leaves the dimension to Dia.
    settings : ExporterSettings | None
        Cache location, executable and timeout; read from the environment
        when omitted.
    """
    settings = settings or ExporterSettings.from_env()
    options = ExportOptions(
        width=width,
        height=height,
        cache_root=settings.cache_dir,
        timeout=settings.timeout,
    )
    return export_diagram(
        DiagramReference(book=book, path=path),
        options,
        resolver=FilesystemSourceResolver({book: book_root}),
        profile=detect_platform_profile(executable=settings.executable),
    )
