"""Unit tests for the top-level and file-based API wrappers."""

from __future__ import annotations

from pathlib import Path

import pytest

import dia_export
import dia_export.api as api_module
from dia_export.adapters.platforms import StderrMatchingProfile
from dia_export.application.results import ExportResult
from dia_export.config import ExporterSettings


def test_package_exports_version_and_errors() -> None:
    assert dia_export.__version__
    assert issubclass(dia_export.NotFoundError, FileNotFoundError)
    assert issubclass(dia_export.CacheIOError, OSError)
    assert issubclass(dia_export.InvalidRequestError, ValueError)
    assert issubclass(dia_export.ExportError, dia_export.DiaExportError)


def test_top_level_wrapper_forwards(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Forward arguments to the file-based API implementation."""
    called: dict[str, object] = {}

    def fake_impl(path: str, book_root: Path, **kwargs: object) -> ExportResult:
        called.update(kwargs, path=path, book_root=book_root)
        return ExportResult(artifact_path=tmp_path / "a.png", width=1, height=2)

    monkeypatch.setattr(api_module, "export_diagram_file", fake_impl)

    out = dia_export.export_diagram_file("/a.dia", tmp_path, width=10)

    assert out.height == 2
    assert called["path"] == "/a.dia"
    assert called["width"] == 10
    assert called["book"] == "/"


def test_api_builds_resolver_profile_and_options(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Translate settings into use-case options and adapters."""
    called: dict[str, object] = {}

    def fake_use_case(reference, options, **kwargs: object) -> ExportResult:
        called.update(kwargs, reference=reference, options=options)
        return ExportResult(artifact_path=tmp_path / "a.png", width=1, height=1)

    monkeypatch.setattr(api_module, "export_diagram", fake_use_case)
    settings = ExporterSettings(cache_dir=tmp_path / "c", executable="/opt/dia", timeout=None)

    api_module.export_diagram_file(
        "/n/a.dia", tmp_path, book="/docs", height=40, settings=settings
    )

    assert called["reference"] == dia_export.DiagramReference("/docs", "/n/a.dia")
    options = called["options"]
    assert (options.width, options.height) == (None, 40)
    assert options.cache_root == tmp_path / "c"
    assert options.timeout is None
    assert called["resolver"].books() == ["/docs"]
    profile = called["profile"]
    assert profile.executable_path() == "/opt/dia"
    if isinstance(profile, StderrMatchingProfile):
        assert profile.name == "stderr-matching"
