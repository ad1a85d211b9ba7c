"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnnotateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code with a viewBox")
    max_depth: int | None = Field(
        default=None,
        ge=0,
        le=8,
        description="Override the tree depth limit for this request",
    )
