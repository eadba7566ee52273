"""Shared pytest configuration, marker assignment and image helpers."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


def write_png(path: Path, width: int, height: int) -> Path:
    """Write a blank PNG of the given size."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", (width, height), "white").save(path, format="PNG")
    return path


@pytest.fixture
def png_factory() -> Callable[[Path, int, int], Path]:
    """Expose :func:`write_png` to tests."""
    return write_png
