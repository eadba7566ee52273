"""Unit tests for the Pillow size probe and the filesystem resolver."""

from __future__ import annotations

from pathlib import Path

import pytest

from dia_export.adapters.image_size import PillowImageSizeProbe
from dia_export.adapters.resolvers import FilesystemSourceResolver
from dia_export.errors import CacheIOError, NotFoundError
from dia_export.model import DiagramReference


def test_probe_reads_png_dimensions(tmp_path: Path, png_factory) -> None:
    png = png_factory(tmp_path / "a.png", 640, 48)

    assert PillowImageSizeProbe().probe(png) == (640, 48)


@pytest.mark.parametrize("content", [None, b"", b"not an image"])
def test_probe_failures_raise_cache_io_error(tmp_path: Path, content: bytes | None) -> None:
    """Map missing, empty and corrupt files to CacheIOError."""
    target = tmp_path / "broken.png"
    if content is not None:
        target.write_bytes(content)

    with pytest.raises(CacheIOError):
        PillowImageSizeProbe().probe(target)


def test_resolver_maps_books_to_directories(tmp_path: Path) -> None:
    """Resolve slash-led paths below the configured book root."""
    docs = tmp_path / "docs"
    (docs / "net").mkdir(parents=True)
    source = docs / "net" / "topology.dia"
    source.write_text("dia")
    resolver = FilesystemSourceResolver({"/docs": docs, "/": tmp_path})

    assert resolver.resolve_source_file(DiagramReference("/docs", "/net/topology.dia")) == source
    assert resolver.books() == ["/", "/docs"]


def test_resolver_unknown_book(tmp_path: Path) -> None:
    resolver = FilesystemSourceResolver({"/": tmp_path})

    with pytest.raises(NotFoundError, match="Unknown book '/other'"):
        resolver.resolve_source_file(DiagramReference("/other", "/a.dia"))


def test_resolver_missing_file_or_directory(tmp_path: Path) -> None:
    """Reject paths that are absent or name a directory."""
    (tmp_path / "folder.dia").mkdir()
    resolver = FilesystemSourceResolver({"/": tmp_path})

    for path in ("/missing.dia", "/folder.dia"):
        with pytest.raises(NotFoundError, match="Diagram not found"):
            resolver.resolve_source_file(DiagramReference("/", path))
