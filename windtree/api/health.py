"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from windtree import __version__
from windtree.config import Settings
from windtree.dependencies import get_settings
from windtree.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        max_depth=settings.tree_max_depth,
    )
