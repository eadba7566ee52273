"""Concrete adapters for the application ports."""

from __future__ import annotations

from dia_export.adapters.image_size import PillowImageSizeProbe
from dia_export.adapters.platforms import (
    ExitCodeProfile,
    StderrMatchingProfile,
    detect_platform_profile,
)
from dia_export.adapters.process import SubprocessRunner
from dia_export.adapters.resolvers import FilesystemSourceResolver

__all__ = [
    "ExitCodeProfile",
    "FilesystemSourceResolver",
    "PillowImageSizeProbe",
    "StderrMatchingProfile",
    "SubprocessRunner",
    "detect_platform_profile",
]
