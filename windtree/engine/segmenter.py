"""Segmenter — break raw paths into abstract segments.

Lines are kept whole, quadratic curves are split at their extrema, cubic
curves at extrema and inflection points. Arcs are first approximated by cubics.
Every piece is then monotonic in x and y, so a subdivision boundary can only be
crossed where the intersection test sees it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier

from windtree.engine.config import CUT_MERGE_TOLERANCE
from windtree.engine.context import RawPath
from windtree.engine.errors import MalformedDrawingError
from windtree.utils.geometry import (
    Curve,
    arc_to_cubics,
    extrema,
    inflections,
    subcurve,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AbstractSegment:
    """A single monotonic piece of an original curve. Never mutated after creation."""

    id: int
    curve: Curve
    attributes: dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def start(self) -> complex:
        return self.curve.start

    @property
    def end(self) -> complex:
        return self.curve.end

    @property
    def endpoints(self) -> tuple[complex, complex]:
        return self.curve.start, self.curve.end

    @property
    def dom_id(self) -> str:
        return f"segment{self.id}"


def merge_close_cuts(
    cuts: Iterable[float],
    tolerance: float = CUT_MERGE_TOLERANCE,
) -> list[float]:
    """Sort cut parameters and drop interior cuts within ``tolerance`` of a kept one.

    0.0 and 1.0 always survive, so the result has at least two cuts.
    """
    interior = sorted(t for t in cuts if 0.0 < t < 1.0)
    merged = [0.0]
    for t in interior:
        if t - merged[-1] < tolerance or 1.0 - t < tolerance:
            continue
        merged.append(t)
    merged.append(1.0)
    return merged


def _split_at(curve: Curve, cuts: Sequence[float]) -> list[Curve]:
    return [subcurve(curve, t0, t1) for t0, t1 in zip(cuts, cuts[1:])]


def split_curve(curve: Curve, tolerance: float = CUT_MERGE_TOLERANCE) -> list[Curve]:
    """Split one curve into monotonic pieces (lines pass through)."""
    if isinstance(curve, Line):
        return [curve]
    if isinstance(curve, QuadraticBezier):
        cuts = [0.0, *sorted(set(extrema(curve))), 1.0]
        return _split_at(curve, cuts)
    if isinstance(curve, CubicBezier):
        cuts = merge_close_cuts([0.0, 1.0, *extrema(curve), *inflections(curve)], tolerance)
        return _split_at(curve, cuts)
    if isinstance(curve, Arc):
        pieces: list[Curve] = []
        for cubic in arc_to_cubics(curve):
            pieces.extend(split_curve(cubic, tolerance))
        return pieces
    raise MalformedDrawingError(f"Unsupported path segment type: {type(curve).__name__}")


def segment_path(
    path: RawPath,
    tolerance: float = CUT_MERGE_TOLERANCE,
) -> list[AbstractSegment]:
    """Abstract segments of one path, numbered from 0."""
    result: list[AbstractSegment] = []
    for curve in path.segments:
        for piece in split_curve(curve, tolerance):
            result.append(
                AbstractSegment(id=len(result), curve=piece, attributes=dict(path.attributes))
            )
    logger.debug(
        "Path %d: %d commands -> %d abstract segments",
        path.index,
        len(path.segments),
        len(result),
    )
    return result


def segment_all(
    paths: Iterable[RawPath],
    tolerance: float = CUT_MERGE_TOLERANCE,
) -> list[list[AbstractSegment]]:
    """Segment every path; ids are local to each path."""
    per_path = [segment_path(p, tolerance) for p in paths]
    logger.info(
        "Segmented %d paths into %d abstract segments",
        len(per_path),
        sum(len(s) for s in per_path),
    )
    return per_path
