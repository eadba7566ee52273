"""Render Dia diagrams to PNG through the external ``dia`` binary.

Rendered files are cached under ``<cache_root>/<namespace>/`` and keyed by the
diagram's book, path and requested size. An entry is reused while it is
strictly newer than its source; otherwise Dia re-renders it into a temporary
file that replaces the entry only once Dia reported success and the PNG size
could be read.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from dia_export.application.ports import (
    ImageSizeProbe,
    PlatformProfile,
    ProcessRunner,
    SourceResolver,
)
from dia_export.application.results import ExportResult
from dia_export.errors import CacheIOError, NotFoundError
from dia_export.model import DOT_EXTENSION, DiagramReference
from dia_export.types import Dimension, StrPath

logger = logging.getLogger(__name__)

WILDCARD = "_"


def size_param(width: int | None, height: int | None) -> str | None:
    """Return Dia's ``--size`` value, or ``None`` for the native size."""
    if width is None:
        if height is None:
            return None
        return f"x{height}"
    if height is None:
        return f"{width}x"
    return f"{width}x{height}"


def strip_diagram_extension(path: str) -> str:
    """Drop a trailing ``.dia`` (any case) from ``path``."""
    if path.lower().endswith(DOT_EXTENSION):
        return path[: -len(DOT_EXTENSION)]
    return path


def cache_file_path(
    cache_root: StrPath,
    reference: DiagramReference,
    width: int | None,
    height: int | None,
    namespace: str,
) -> Path:
    """Build the cache location for ``reference`` rendered at the given size.

    The layout is ``<namespace><book prefix><path without .dia>-<W>x<H>.png``
    below ``cache_root``, with unset dimensions written as ``_``.
    """
    logical = reference.book_prefix + strip_diagram_extension(reference.path)
    name = (
        namespace
        + logical.replace("/", os.sep)
        + "-"
        + (WILDCARD if width is None else str(width))
        + "x"
        + (WILDCARD if height is None else str(height))
        + ".png"
    )
    return Path(cache_root) / name


def is_fresh(source: Path, artifact: Path) -> bool:
    """Return whether ``artifact`` exists and is strictly newer than ``source``."""
    try:
        artifact_mtime = artifact.stat().st_mtime_ns
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise CacheIOError(f"Unable to stat cache file {artifact}: {exc}") from exc
    try:
        source_mtime = source.stat().st_mtime_ns
    except FileNotFoundError as exc:
        raise NotFoundError(f"Diagram not found: {source}") from exc
    except OSError as exc:
        raise CacheIOError(f"Unable to stat diagram {source}: {exc}") from exc
    return artifact_mtime > source_mtime


def build_command(
    executable: str,
    source: Path,
    output: Path,
    size: str | None,
) -> list[str]:
    """Assemble the Dia command line; the source file is always last."""
    command = [executable, f"--export={output}", "--filter=png"]
    if size is not None:
        command.append(f"--size={size}")
    command.extend(["--log-to-stderr", str(source)])
    return command


class KeyedLocks:
    """In-process mutexes keyed by string, dropped once no caller holds them."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._entries: dict[str, tuple[threading.Lock, int]] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                lock, users = threading.Lock(), 0
            else:
                lock, users = entry
            self._entries[key] = (lock, users + 1)
        try:
            with lock:
                yield
        finally:
            with self._guard:
                lock, users = self._entries[key]
                if users == 1:
                    del self._entries[key]
                else:
                    self._entries[key] = (lock, users - 1)


_CACHE_LOCKS = KeyedLocks()


def _published_mode() -> int:
    """Mode a file created by Dia itself would get under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class DiagramExporter:
    """Export diagrams to cached PNG files.

    Parameters
    ----------
    resolver : SourceResolver
        Maps diagram references to source files.
    runner : ProcessRunner
        Runs the Dia executable.
    profile : PlatformProfile
        Supplies the executable path and validates Dia's output.
    probe : ImageSizeProbe
        Reads the rendered PNG size.
    timeout : float | None, default=None
        Seconds before a hung Dia process is killed.
    namespace : str | None, default=None
        Cache subdirectory; defaults to this class's qualified name.
    """

    def __init__(
        self,
        resolver: SourceResolver,
        runner: ProcessRunner,
        profile: PlatformProfile,
        probe: ImageSizeProbe,
        *,
        timeout: float | None = None,
        namespace: str | None = None,
        locks: KeyedLocks | None = None,
    ) -> None:
        self.resolver = resolver
        self.runner = runner
        self.profile = profile
        self.probe = probe
        self.timeout = timeout
        self.namespace = namespace or f"{type(self).__module__}.{type(self).__qualname__}"
        self._locks = locks or _CACHE_LOCKS

    def cache_file(
        self,
        reference: DiagramReference,
        width: int | None,
        height: int | None,
        cache_root: StrPath,
    ) -> Path:
        """Return where ``reference`` at this size is cached."""
        return cache_file_path(cache_root, reference, width, height, self.namespace)

    def export(
        self,
        reference: DiagramReference,
        width: int | None = None,
        height: int | None = None,
        *,
        cache_root: StrPath,
    ) -> ExportResult:
        """Return a fresh PNG for ``reference``, rendering it when needed.

        Raises
        ------
        NotFoundError
            If the source diagram does not exist.
        ExportError
            If Dia cannot be run, times out or reports failure.
        CacheIOError
            If the cache cannot be written or the PNG size cannot be read.
        """
        source = self.resolver.resolve_source_file(reference)
        target = self.cache_file(reference, width, height, cache_root)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheIOError(f"Unable to create cache directory {target.parent}: {exc}") from exc

        with self._locks.hold(str(target)):
            if is_fresh(source, target):
                logger.debug("cache hit for %s:%s -> %s", reference.book, reference.path, target)
                size = self.probe.probe(target)
            else:
                logger.info("rendering %s:%s -> %s", reference.book, reference.path, target)
                size = self._render(source, target, size_param(width, height))
        return ExportResult(artifact_path=target, width=size[0], height=size[1])

    def _render(self, source: Path, target: Path, size: str | None) -> Dimension:
        try:
            canonical_source = source.resolve(strict=True)
        except FileNotFoundError as exc:
            raise NotFoundError(f"Diagram not found: {source}") from exc
        except OSError as exc:
            raise CacheIOError(f"Unable to resolve diagram path {source}: {exc}") from exc

        staging = self._staging_file(target)
        try:
            command = build_command(self.profile.executable_path(), canonical_source, staging, size)
            result = self.runner.run(command, timeout=self.timeout)
            self.profile.validate_output(result, source=canonical_source, output=staging)
            measured = self.probe.probe(staging)
        except BaseException:
            staging.unlink(missing_ok=True)
            logger.warning("rendering %s failed", source)
            raise
        try:
            os.chmod(staging, _published_mode())
            os.replace(staging, target)
        except OSError as exc:
            staging.unlink(missing_ok=True)
            raise CacheIOError(f"Unable to publish {target}: {exc}") from exc
        return measured

    def _staging_file(self, target: Path) -> Path:
        """Create an empty temp file beside ``target`` and return its canonical path."""
        try:
            fd, name = tempfile.mkstemp(
                prefix=f".{target.stem}.",
                suffix=".png",
                dir=target.parent,
            )
            os.close(fd)
            return Path(name).resolve()
        except OSError as exc:
            raise CacheIOError(f"Unable to create staging file in {target.parent}: {exc}") from exc
