"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from vectormorph.models.shapes import CommandModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    converters_registered: int = 0


class FrameResponse(BaseModel):
    fraction: float
    paired: list[CommandModel] = Field(default_factory=list)
    unpaired_start: list[CommandModel] = Field(default_factory=list)
    unpaired_end: list[CommandModel] = Field(default_factory=list)
    paired_d: str = ""
    unpaired_start_d: str = ""
    unpaired_end_d: str = ""
    start_alpha: float = 1.0
    end_alpha: float = 0.0
    svg: str | None = None


class MorphResponse(BaseModel):
    width: float
    height: float
    paired_count: int = 0
    unpaired_start_count: int = 0
    unpaired_end_count: int = 0
    frames: list[FrameResponse] = Field(default_factory=list)
    processing_time_ms: float = 0.0
