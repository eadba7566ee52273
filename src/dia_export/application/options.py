"""Typed option objects shared across export use-cases."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TIMEOUT_SECONDS = 120.0


@dataclass(frozen=True)
class ExportOptions:
    """Per-call export configuration.

    ``width``/``height`` of ``None`` leave the dimension unconstrained and
    ``timeout`` of ``None`` waits for the tool indefinitely.
    """

    width: int | None = None
    height: int | None = None
    cache_root: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS
    namespace: str | None = None
