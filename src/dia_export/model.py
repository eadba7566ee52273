"""Diagram element model and the reference it resolves to."""

from __future__ import annotations

from dataclasses import dataclass

from dia_export.errors import ElementStateError, FrozenElementError
from dia_export.types import OptionalDimension

EXTENSION = "dia"
DOT_EXTENSION = "." + EXTENSION
ROOT_BOOK = "/"
DEFAULT_ID_PREFIX = "dia"


@dataclass(frozen=True)
class DiagramReference:
    """Location of a source diagram inside a book.

    Parameters
    ----------
    book : str
        Slash-led book name; ``"/"`` is the root book.
    path : str
        Slash-led path of the ``.dia`` file within the book.
    """

    book: str
    path: str

    @property
    def book_prefix(self) -> str:
        """Book name as a path prefix (empty for the root book)."""
        return self.book.rstrip("/")


def _blank_to_none(value: str | None) -> str | None:
    return value if value else None


@dataclass(frozen=True)
class Diagram:
    """Immutable diagram element as embedded in a page.

    ``width`` and ``height`` of ``0`` mean the dimension is not constrained.
    """

    label: str | None = None
    book: str | None = None
    path: str | None = None
    width: int = 0
    height: int = 0

    @property
    def display_label(self) -> str:
        """Explicit label, or the file name of ``path`` without ``.dia``."""
        if self.label is not None:
            return self.label
        if self.path is None:
            raise ElementStateError("Cannot get label, neither label nor path set")
        filename = self.path.rsplit("/", 1)[-1]
        if filename.endswith(DOT_EXTENSION):
            filename = filename[: -len(DOT_EXTENSION)]
        if not filename:
            raise ValueError(f"Invalid filename for diagram: {self.path}")
        return filename

    def requested_size(self) -> OptionalDimension:
        """Return ``(width, height)`` with unconstrained dimensions as ``None``."""
        return (self.width or None, self.height or None)

    def to_reference(self) -> DiagramReference:
        """Build the reference used to locate the source file."""
        if self.path is None:
            raise ElementStateError("Cannot reference diagram without a path")
        return DiagramReference(book=self.book or ROOT_BOOK, path=self.path)


class DiagramBuilder:
    """Mutable builder that freezes into a :class:`Diagram`."""

    def __init__(self) -> None:
        self._label: str | None = None
        self._book: str | None = None
        self._path: str | None = None
        self._width = 0
        self._height = 0
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise FrozenElementError("Diagram builder is frozen")

    def set_label(self, label: str | None) -> DiagramBuilder:
        self._check_not_frozen()
        self._label = _blank_to_none(label)
        return self

    def set_book(self, book: str | None) -> DiagramBuilder:
        self._check_not_frozen()
        self._book = _blank_to_none(book)
        return self

    def set_path(self, path: str | None) -> DiagramBuilder:
        self._check_not_frozen()
        self._path = _blank_to_none(path)
        return self

    def set_width(self, width: int) -> DiagramBuilder:
        self._check_not_frozen()
        if width < 0:
            raise ValueError("width must not be negative")
        self._width = width
        return self

    def set_height(self, height: int) -> DiagramBuilder:
        self._check_not_frozen()
        if height < 0:
            raise ValueError("height must not be negative")
        self._height = height
        return self

    def build(self) -> Diagram:
        """Freeze the builder and return the immutable diagram."""
        self._frozen = True
        return Diagram(
            label=self._label,
            book=self._book,
            path=self._path,
            width=self._width,
            height=self._height,
        )
