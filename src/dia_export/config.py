"""Environment-driven settings for the exporter."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from dia_export.application.options import DEFAULT_TIMEOUT_SECONDS
from dia_export.errors import InvalidRequestError


def _parse_timeout(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidRequestError(f"DIA_EXPORT_TIMEOUT must be a number, got {raw!r}") from exc
    if value < 0:
        raise InvalidRequestError("DIA_EXPORT_TIMEOUT must not be negative")
    return value or None


@dataclass(frozen=True)
class ExporterSettings:
    """All exporter configuration in one place.

    Environment variables (all optional):
        DIA_EXPORT_CACHE_DIR:   Cache root. Default: the system temp directory.
        DIA_EXPORT_EXECUTABLE:  Dia executable override. Default: platform path.
        DIA_EXPORT_TIMEOUT:     Seconds before Dia is killed; 0 disables. Default 120.
        DIA_EXPORT_LOG_LEVEL:   Logging level for the CLI. Default "WARNING".
    """

    cache_dir: Path
    executable: str | None = None
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        *,
        cache_dir: Path | None = None,
        executable: str | None = None,
        timeout: float | None = None,
        log_level: str | None = None,
    ) -> ExporterSettings:
        """Build settings from environment variables + explicit overrides."""
        env_timeout = os.environ.get("DIA_EXPORT_TIMEOUT")
        if timeout is not None:
            resolved_timeout = timeout or None
        elif env_timeout is not None:
            resolved_timeout = _parse_timeout(env_timeout)
        else:
            resolved_timeout = DEFAULT_TIMEOUT_SECONDS
        return cls(
            cache_dir=cache_dir
            or Path(os.environ.get("DIA_EXPORT_CACHE_DIR") or tempfile.gettempdir()),
            executable=executable or os.environ.get("DIA_EXPORT_EXECUTABLE") or None,
            timeout=resolved_timeout,
            log_level=(log_level or os.environ.get("DIA_EXPORT_LOG_LEVEL", "WARNING")).upper(),
        )
