"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from vectormorph.models.shapes import VectorSourceModel


class MorphRequest(BaseModel):
    start: VectorSourceModel = Field(..., description="Shape at fraction 0")
    end: VectorSourceModel = Field(..., description="Shape at fraction 1")
    width: float = Field(default=0.0, description="Target width (<= 0: larger of the two shapes)")
    height: float = Field(default=0.0, description="Target height (<= 0: larger of the two shapes)")
    smoothness: int | None = Field(default=None, ge=1, le=10_000, description="Cache resolution")
    fractions: list[float] = Field(
        default_factory=lambda: [0.0, 0.5, 1.0],
        description="Progress values to render",
    )
    breakpoint: float | None = Field(default=None, gt=0, le=1, description="Fade window for unpaired subpaths")
    precision: int = Field(default=3, ge=0, le=10, description="Decimals in path data output")
    include_svg: bool = Field(default=False, description="Also return a standalone SVG per frame")
