"""Fakes and fixtures shared by exporter unit tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest
from PIL import Image

from dia_export.adapters.image_size import PillowImageSizeProbe
from dia_export.adapters.platforms import StderrMatchingProfile
from dia_export.adapters.resolvers import FilesystemSourceResolver
from dia_export.application.results import ProcessResult
from dia_export.exporter import DiagramExporter, KeyedLocks

NATIVE_SIZE = (400, 300)
XLIB_NOISE = 'Xlib:  extension "RANDR" missing on display ":0".'


class FakeDiaRunner:
    """Imitate ``dia --export``: write a PNG honouring ``--size`` and log to stderr."""

    def __init__(
        self,
        *,
        exit_code: int = 0,
        success_line: bool = True,
        write_output: bool = True,
        error: Exception | None = None,
    ) -> None:
        self.exit_code = exit_code
        self.success_line = success_line
        self.write_output = write_output
        self.error = error
        self.calls: list[list[str]] = []
        self.timeouts: list[float | None] = []

    @staticmethod
    def option(command: Sequence[str], name: str) -> str | None:
        prefix = f"--{name}="
        for arg in command:
            if arg.startswith(prefix):
                return arg[len(prefix):]
        return None

    @staticmethod
    def scaled_size(size: str | None) -> tuple[int, int]:
        native_w, native_h = NATIVE_SIZE
        if size is None:
            return NATIVE_SIZE
        raw_w, _, raw_h = size.partition("x")
        if raw_w and raw_h:
            return int(raw_w), int(raw_h)
        if raw_w:
            width = int(raw_w)
            return width, round(width * native_h / native_w)
        height = int(raw_h)
        return round(height * native_w / native_h), height

    def run(self, command: Sequence[str], *, timeout: float | None) -> ProcessResult:
        self.calls.append(list(command))
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        output = self.option(command, "export")
        assert output is not None
        source = command[-1]
        if self.write_output:
            width, height = self.scaled_size(self.option(command, "size"))
            Image.new("RGB", (width, height), "white").save(output, format="PNG")
        lines = [XLIB_NOISE]
        if self.success_line:
            lines.append(f"{source} --> {output}")
        else:
            lines.append(f"Failed to load {source}")
        return ProcessResult(
            exit_code=self.exit_code,
            stdout="",
            stderr="\n".join(lines) + "\n",
        )


@pytest.fixture
def book_root(tmp_path: Path) -> Path:
    root = tmp_path / "book"
    root.mkdir()
    return root


@pytest.fixture
def dia_source(book_root: Path) -> Path:
    source = book_root / "diagrams" / "architecture.dia"
    source.parent.mkdir(parents=True)
    source.write_text("<?xml version='1.0'?><dia:diagram/>")
    return source


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def fake_runner() -> FakeDiaRunner:
    return FakeDiaRunner()


@pytest.fixture
def make_exporter(book_root: Path):
    def _make(runner: object, **kwargs: object) -> DiagramExporter:
        return DiagramExporter(
            resolver=FilesystemSourceResolver({"/": book_root}),
            runner=runner,
            profile=StderrMatchingProfile(executable="/usr/bin/dia"),
            probe=PillowImageSizeProbe(),
            locks=KeyedLocks(),
            **kwargs,
        )

    return _make


@pytest.fixture
def runner_factory() -> type[FakeDiaRunner]:
    return FakeDiaRunner
