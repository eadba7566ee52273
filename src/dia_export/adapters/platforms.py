"""Platform profiles for the Dia executable.

Dia reports failures differently per host. On Windows a non-zero exit code is
the only signal. Elsewhere it always exits 0 and writes both its success line
and its errors to stderr, mixed with unrelated environment warnings such as::

    Xlib:  extension "RANDR" missing on display ":0".
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from pathlib import Path

from dia_export.application.ports import PlatformProfile
from dia_export.application.results import ProcessResult
from dia_export.errors import ExportError

POSIX_DIA_PATH = "/usr/bin/dia"
WINDOWS_DIA_PATH = "C:\\Program Files (x86)\\Dia\\bin\\dia.exe"
WINDOWS_DIAW_PATH = "C:\\Program Files (x86)\\Dia\\bin\\diaw.exe"


def is_windows(os_name: str | None = None) -> bool:
    """Return whether ``os_name`` (default: the host) names Windows."""
    name = platform.system() if os_name is None else os_name
    return "windows" in name.lower()


def expected_success_line(source: Path, output: Path) -> str:
    """Line Dia prints on stderr after a successful export."""
    return f"{source} --> {output}"


def _check_exit_code(tool: str, result: ProcessResult) -> None:
    if result.exit_code != 0:
        raise ExportError(
            f"{tool}: non-zero exit value: {result.exit_code}",
            tool_path=tool,
            detail=result.stderr,
            return_code=result.exit_code,
        )


@dataclass(frozen=True)
class ExitCodeProfile:
    """Profile trusting the exit code alone (Windows builds of Dia)."""

    executable: str = WINDOWS_DIA_PATH
    open_executable: str = WINDOWS_DIAW_PATH
    name: str = "exit-code"

    def executable_path(self) -> str:
        return self.executable

    def open_executable_path(self) -> str:
        return self.open_executable

    def validate_output(
        self,
        result: ProcessResult,
        *,
        source: Path,
        output: Path,
    ) -> None:
        del source, output
        _check_exit_code(self.executable, result)


@dataclass(frozen=True)
class StderrMatchingProfile:
    """Profile requiring Dia's success line on stderr."""

    executable: str = POSIX_DIA_PATH
    open_executable: str = POSIX_DIA_PATH
    name: str = "stderr-matching"

    def executable_path(self) -> str:
        return self.executable

    def open_executable_path(self) -> str:
        return self.open_executable

    def validate_output(
        self,
        result: ProcessResult,
        *,
        source: Path,
        output: Path,
    ) -> None:
        """Accept the run only if one stderr line is exactly the success line.

        Raises
        ------
        ExportError
            On non-zero exit, or when no line matches; the full stderr text is
            attached as ``detail``.
        """
        _check_exit_code(self.executable, result)
        expected = expected_success_line(source, output)
        if any(line == expected for line in result.stderr.splitlines()):
            return
        raise ExportError(
            f"{self.executable}: {result.stderr}",
            tool_path=self.executable,
            detail=result.stderr,
            return_code=result.exit_code,
        )


def detect_platform_profile(
    os_name: str | None = None,
    executable: str | None = None,
) -> PlatformProfile:
    """Select the profile for ``os_name`` (default: the running host).

    Parameters
    ----------
    os_name : str | None, default=None
        Operating system identifier such as ``platform.system()`` returns.
    executable : str | None, default=None
        Override for the export executable path.
    """
    if is_windows(os_name):
        if executable:
            return ExitCodeProfile(executable=executable)
        return ExitCodeProfile()
    if executable:
        return StderrMatchingProfile(executable=executable)
    return StderrMatchingProfile()
