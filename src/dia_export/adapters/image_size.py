"""Pillow-backed image size probe."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from dia_export.errors import CacheIOError
from dia_export.types import Dimension


class PillowImageSizeProbe:
    """Read image dimensions from the file header without decoding pixels."""

    def probe(self, path: Path) -> Dimension:
        try:
            with Image.open(path) as image:
                width, height = image.size
        except (OSError, UnidentifiedImageError) as exc:
            raise CacheIOError(f"Unable to read image size of {path}: {exc}") from exc
        return int(width), int(height)
