"""Shared type aliases for export modules."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike

type Dimension = tuple[int, int]
type OptionalDimension = tuple[int | None, int | None]
type StrPath = str | PathLike[str]
type Command = Sequence[str]
