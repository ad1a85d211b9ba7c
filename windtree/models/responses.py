"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    max_depth: int = 4


class ShortcutSummary(BaseModel):
    segment_id: int
    incoming: bool
    x1: float
    y1: float
    x2: float
    y2: float


class LeafSummary(BaseModel):
    x: float
    y: float
    width: float
    height: float
    winding_number: int
    segment_ids: list[int] = Field(default_factory=list)
    shortcuts: list[ShortcutSummary] = Field(default_factory=list)


class AnnotateResponse(BaseModel):
    svg: str
    path_count: int = 0
    segment_count: int = 0
    leaf_count: int = 0
    tree_depth: int = 0
    leaves: list[LeafSummary] = Field(default_factory=list)
    processing_time_ms: float = 0.0
