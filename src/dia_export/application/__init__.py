"""Application-layer use-cases and option objects."""

from __future__ import annotations

from dia_export.application.options import ExportOptions
from dia_export.application.ports import (
    ImageSizeProbe,
    PlatformProfile,
    ProcessRunner,
    SourceResolver,
)
from dia_export.application.results import ExportResult, ProcessResult
from dia_export.model import Diagram, DiagramReference


def export_diagram(
    reference: DiagramReference,
    options: ExportOptions,
    *,
    resolver: SourceResolver,
    runner: ProcessRunner | None = None,
    profile: PlatformProfile | None = None,
    probe: ImageSizeProbe | None = None,
) -> ExportResult:
    """Export a diagram reference via lazy use-case import."""
    from dia_export.application.use_cases import export_diagram as _impl

    return _impl(
        reference,
        options,
        resolver=resolver,
        runner=runner,
        profile=profile,
        probe=probe,
    )


def export_diagram_element(
    diagram: Diagram,
    options: ExportOptions,
    *,
    resolver: SourceResolver,
    runner: ProcessRunner | None = None,
    profile: PlatformProfile | None = None,
    probe: ImageSizeProbe | None = None,
) -> ExportResult:
    """Export a diagram element via lazy use-case import."""
    from dia_export.application.use_cases import export_diagram_element as _impl

    return _impl(
        diagram,
        options,
        resolver=resolver,
        runner=runner,
        profile=profile,
        probe=probe,
    )


__all__ = [
    "ExportOptions",
    "ExportResult",
    "ProcessResult",
    "export_diagram",
    "export_diagram_element",
]
