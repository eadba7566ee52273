"""Error hierarchy for diagram export."""

from __future__ import annotations

from pathlib import Path


class DiaExportError(Exception):
    """Base class for all dia-export failures."""

    exit_code: int = 1


class NotFoundError(DiaExportError, FileNotFoundError):
    """Raised when a source diagram does not exist or cannot be read."""

    exit_code = 2


class InvalidRequestError(DiaExportError, ValueError):
    """Raised when export parameters or settings fail validation."""

    exit_code = 2


class ExportError(DiaExportError):
    """Raised when the external rendering tool fails.

    Parameters
    ----------
    message : str
        Human readable summary.
    tool_path : str | Path | None, default=None
        Executable that was invoked.
    detail : str | None, default=None
        Diagnostic text captured from the tool (usually its stderr).
    return_code : int | None, default=None
        Exit code of the tool when it ran to completion.
    timed_out : bool, default=False
        Whether the tool was killed after exceeding its timeout.
    """

    exit_code = 3

    def __init__(
        self,
        message: str,
        *,
        tool_path: str | Path | None = None,
        detail: str | None = None,
        return_code: int | None = None,
        timed_out: bool = False,
    ) -> None:
        super().__init__(message)
        self.tool_path = str(tool_path) if tool_path is not None else None
        self.detail = detail
        self.return_code = return_code
        self.timed_out = timed_out


class CacheIOError(DiaExportError, OSError):
    """Raised for cache directory, filesystem or image-probe failures."""

    exit_code = 4


class ElementStateError(DiaExportError):
    """Raised when a diagram element lacks the data an accessor needs."""


class FrozenElementError(DiaExportError):
    """Raised when a frozen diagram builder is modified."""
