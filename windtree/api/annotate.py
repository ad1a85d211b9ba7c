"""POST /api/annotate — segment, build the region tree, return the annotated SVG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from windtree.config import Settings
from windtree.dependencies import get_settings
from windtree.engine.annotator import LeafAnnotation
from windtree.engine.errors import MalformedDrawingError
from windtree.engine.pipeline import run_pipeline
from windtree.models.requests import AnnotateRequest
from windtree.models.responses import AnnotateResponse, LeafSummary, ShortcutSummary

logger = logging.getLogger(__name__)

router = APIRouter()


def _leaf_summary(leaf: LeafAnnotation) -> LeafSummary:
    box = leaf.bounding_box
    return LeafSummary(
        x=box.x0,
        y=box.y0,
        width=box.width,
        height=box.height,
        winding_number=leaf.winding_number,
        segment_ids=leaf.segment_ids,
        shortcuts=[
            ShortcutSummary(
                segment_id=s.segment_id,
                incoming=s.incoming,
                x1=s.guide.start.real,
                y1=s.guide.start.imag,
                x2=s.guide.end.real,
                y2=s.guide.end.imag,
            )
            for s in leaf.shortcuts
        ],
    )


@router.post("/annotate", response_model=AnnotateResponse)
def annotate_svg(
    req: AnnotateRequest,
    settings: Settings = Depends(get_settings),
) -> AnnotateResponse:
    start = time.perf_counter()
    try:
        result = run_pipeline(req.svg, settings.tree_config(req.max_depth))
    except MalformedDrawingError as e:
        logger.warning("Rejected drawing: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return AnnotateResponse(
        svg=result.svg,
        path_count=result.drawing.num_paths,
        segment_count=len(result.flat_segments),
        leaf_count=result.leaf_count,
        tree_depth=result.tree.depth(),
        leaves=[_leaf_summary(leaf) for leaf in result.annotations],
        processing_time_ms=round(elapsed, 1),
    )
