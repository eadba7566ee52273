"""Application use-cases orchestrating diagram exports."""

from __future__ import annotations

from dataclasses import replace

from pydantic import ValidationError

from dia_export.adapters.image_size import PillowImageSizeProbe
from dia_export.adapters.platforms import detect_platform_profile
from dia_export.adapters.process import SubprocessRunner
from dia_export.application.options import ExportOptions
from dia_export.application.ports import (
    ImageSizeProbe,
    PlatformProfile,
    ProcessRunner,
    SourceResolver,
)
from dia_export.application.results import ExportResult
from dia_export.errors import InvalidRequestError
from dia_export.exporter import DiagramExporter
from dia_export.model import Diagram, DiagramReference
from dia_export.schemas import DiagramReferenceConfig, ExportRequestConfig


def export_diagram(
    reference: DiagramReference,
    options: ExportOptions,
    *,
    resolver: SourceResolver,
    runner: ProcessRunner | None = None,
    profile: PlatformProfile | None = None,
    probe: ImageSizeProbe | None = None,
) -> ExportResult:
    """Use-case: render ``reference`` to a cached PNG."""
    try:
        config = ExportRequestConfig(
            reference=DiagramReferenceConfig(book=reference.book, path=reference.path),
            width=options.width,
            height=options.height,
            cache_root=options.cache_root,
            timeout=options.timeout,
            namespace=options.namespace,
        )
    except ValidationError as exc:
        raise InvalidRequestError(f"Invalid export parameters: {exc}") from exc

    exporter = DiagramExporter(
        resolver=resolver,
        runner=runner or SubprocessRunner(),
        profile=profile or detect_platform_profile(),
        probe=probe or PillowImageSizeProbe(),
        timeout=config.timeout,
        namespace=config.namespace,
    )
    return exporter.export(
        DiagramReference(book=config.reference.book, path=config.reference.path),
        config.width,
        config.height,
        cache_root=config.cache_root,
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
    """Use-case: export a diagram element at its own size unless overridden."""
    element_width, element_height = diagram.requested_size()
    effective = replace(
        options,
        width=options.width if options.width is not None else element_width,
        height=options.height if options.height is not None else element_height,
    )
    return export_diagram(
        diagram.to_reference(),
        effective,
        resolver=resolver,
        runner=runner,
        profile=profile,
        probe=probe,
    )
