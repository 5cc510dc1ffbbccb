"""Converter configuration — controls image preparation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glyphgrid.config import Settings


@dataclass
class ConverterConfig:
    """Tunables for the preparation stage."""

    # Monospace cell height / width. Rows are divided by this.
    cell_aspect: float = 2.0

    # Resampling kernel (lanczos, bicubic, hamming)
    resample_filter: str = "lanczos"

    # Upper bound on output rows, checked before resampling. None = unbounded.
    max_rows: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> ConverterConfig:
        return cls(
            cell_aspect=settings.cell_aspect,
            resample_filter=settings.resample_filter,
            max_rows=settings.max_rows,
        )
