"""Pipeline orchestrator — parse → segment → build tree → annotate → serialize."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from windtree.engine.annotator import LeafAnnotation, annotate
from windtree.engine.config import TreeConfig
from windtree.engine.context import Drawing
from windtree.engine.segmenter import AbstractSegment, segment_all
from windtree.engine.tree import Region, build_tree
from windtree.svg.parser import parse_drawing
from windtree.svg.serializer import serialize_annotated

logger = logging.getLogger(__name__)


@dataclass
class WindingResult:
    """Every intermediate product of one run."""

    drawing: Drawing
    segments: list[list[AbstractSegment]]
    tree: Region
    annotations: list[LeafAnnotation]
    svg: str = ""
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def flat_segments(self) -> list[AbstractSegment]:
        return [s for per_path in self.segments for s in per_path]

    @property
    def leaf_count(self) -> int:
        return len(self.annotations)

    @property
    def total_ms(self) -> float:
        return sum(self.timings_ms.values())


class Pipeline:
    """Runs the stages in order. Malformed input propagates; nothing is retried."""

    def __init__(self, config: TreeConfig | None = None) -> None:
        self.config = config or TreeConfig()
        self._timings: dict[str, float] = {}

    def _timed(self, stage: str, fn, *args):
        t0 = time.perf_counter()
        result = fn(*args)
        elapsed = (time.perf_counter() - t0) * 1000
        self._timings[stage] = elapsed
        logger.debug("  %s completed in %.1fms", stage, elapsed)
        return result

    def run(self, svg_text: str) -> WindingResult:
        self._timings = {}
        cfg = self.config

        drawing = self._timed("parse", parse_drawing, svg_text)
        per_path = self._timed("segment", segment_all, drawing.paths, cfg.cut_merge_tolerance)
        flat = [s for segs in per_path for s in segs]
        tree = self._timed("tree", build_tree, drawing.view_box, flat, 0, cfg)
        annotations = self._timed("annotate", annotate, tree, cfg)
        svg = self._timed("serialize", serialize_annotated, drawing, flat, annotations)

        result = WindingResult(
            drawing=drawing,
            segments=per_path,
            tree=tree,
            annotations=annotations,
            svg=svg,
            timings_ms=dict(self._timings),
        )
        logger.info(
            "Pipeline complete: %d paths, %d segments, %d leaves in %.0fms",
            drawing.num_paths,
            len(flat),
            result.leaf_count,
            result.total_ms,
        )
        return result


def run_pipeline(svg_text: str, config: TreeConfig | None = None) -> WindingResult:
    """Run the full pipeline on raw SVG text."""
    return Pipeline(config).run(svg_text)
