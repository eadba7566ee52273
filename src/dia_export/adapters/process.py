"""Subprocess-backed process runner."""

from __future__ import annotations

import logging
import subprocess

from dia_export.application.results import ProcessResult
from dia_export.errors import ExportError
from dia_export.types import Command

logger = logging.getLogger(__name__)


def _as_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class SubprocessRunner:
    """Run commands with :func:`subprocess.run`, capturing both streams."""

    def run(self, command: Command, *, timeout: float | None) -> ProcessResult:
        """Run ``command`` and block until it exits.

        Parameters
        ----------
        command : Sequence[str]
            Executable followed by its arguments.
        timeout : float | None
            Seconds to wait before killing the child; ``None`` waits forever.

        Returns
        -------
        ProcessResult
            Exit code and decoded stdout/stderr.

        Raises
        ------
        ExportError
            If the executable cannot be started or exceeds ``timeout``.
        """
        argv = list(command)
        tool = argv[0]
        logger.debug("running %s", argv)
        try:
            proc = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExportError(
                f"{tool}: timed out after {timeout} seconds",
                tool_path=tool,
                detail=_as_text(exc.stderr),
                timed_out=True,
            ) from exc
        except OSError as exc:
            raise ExportError(
                f"{tool}: cannot be invoked: {exc}",
                tool_path=tool,
            ) from exc
        return ProcessResult(
            exit_code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )
