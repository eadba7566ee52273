"""Pydantic schemas for runtime validation of export inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _check_slash_led(value: str, what: str) -> str:
    if not value.startswith("/"):
        raise ValueError(f"{what} must start with '/'.")
    if any(part == ".." for part in value.split("/")):
        raise ValueError(f"{what} must not contain '..' segments.")
    return value


class DiagramReferenceConfig(BaseModel):
    """Validated diagram location."""

    model_config = ConfigDict(extra="forbid")

    book: str = "/"
    path: str

    @field_validator("book")
    @classmethod
    def _validate_book(cls, value: str) -> str:
        return _check_slash_led(value, "book")

    @field_validator("path")
    @classmethod
    def _validate_path(cls, value: str) -> str:
        _check_slash_led(value, "path")
        if value.endswith("/"):
            raise ValueError("path must name a file.")
        return value


class ExportRequestConfig(BaseModel):
    """Validated input for a single diagram export."""

    model_config = ConfigDict(extra="forbid")

    reference: DiagramReferenceConfig
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    cache_root: Path
    timeout: float | None = Field(default=None, gt=0.0)
    namespace: str | None = None

    @field_validator("namespace")
    @classmethod
    def _validate_namespace(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not value.strip() or "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError("namespace must be a single path segment.")
        return value
