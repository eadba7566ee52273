"""Filesystem source resolver mapping books to directories."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from dia_export.errors import NotFoundError
from dia_export.model import DiagramReference
from dia_export.types import StrPath


class FilesystemSourceResolver:
    """Resolve references against a book-name to root-directory mapping."""

    def __init__(self, book_roots: Mapping[str, StrPath]) -> None:
        self._book_roots = {book: Path(root) for book, root in book_roots.items()}

    def books(self) -> list[str]:
        """Return configured book names."""
        return sorted(self._book_roots)

    def resolve_source_file(self, reference: DiagramReference) -> Path:
        """Return the source file for ``reference``.

        Raises
        ------
        NotFoundError
            If the book is unknown or the file does not exist.
        """
        try:
            root = self._book_roots[reference.book]
        except KeyError as exc:
            raise NotFoundError(
                f"Unknown book '{reference.book}'. Available books: {', '.join(self.books())}"
            ) from exc
        source = root.joinpath(*[part for part in reference.path.split("/") if part])
        if not source.is_file():
            raise NotFoundError(f"Diagram not found: {reference.book}:{reference.path} ({source})")
        return source
