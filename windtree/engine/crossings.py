"""Boundary-crossing counters used to derive child winding numbers.

Three places intersect segments with a boundary line and turn each hit into a
signed contribution. Their sign rules differ, so each one is its own function.
"""

from __future__ import annotations

from collections.abc import Iterable

from svgpathtools import Line

from windtree.engine.segmenter import AbstractSegment
from windtree.utils.geometry import Rect, intersects_line


def count_bottom_crossings(segments: Iterable[AbstractSegment], box: Rect) -> int:
    """Signed crossings of the line through ``box``'s bottom edge.

    -1 for a segment starting above the line, +1 otherwise.
    """
    line = box.bottom_line
    total = 0
    for seg in segments:
        if intersects_line(seg.curve, line):
            total += -1 if seg.start.imag < box.y1 else 1
    return total


def ray_line(box: Rect, far_x: float) -> Line:
    """Rightward ray from the middle of ``box``'s right edge."""
    halfway = (box.y0 + box.y1) / 2
    reach = max(far_x, box.x1 + box.width)
    return Line(complex(box.x1, halfway), complex(reach, halfway))


def count_ray_crossings(segments: Iterable[AbstractSegment], box: Rect, far_x: float) -> int:
    """Signed crossings of the rightward ray at ``box``'s vertical midpoint.

    -1 for a segment starting above the midline, +1 at or below it.
    """
    ray = ray_line(box, far_x)
    halfway = ray.start.imag
    total = 0
    for seg in segments:
        if intersects_line(seg.curve, ray):
            total += -1 if seg.start.imag < halfway else 1
    return total


def right_edge_adjustment(segments: Iterable[AbstractSegment], box: Rect) -> int:
    """Correction for segments touching ``box``'s right edge.

    For each segment meeting the edge: -1 if it starts right of the box and
    below the midline, +1 if it ends there. Both can apply to one segment.
    """
    edge = box.right_line
    halfway = (box.y0 + box.y1) / 2
    total = 0
    for seg in segments:
        if not intersects_line(seg.curve, edge):
            continue
        start, end = seg.endpoints
        if start.real > box.x1 and start.imag > halfway:
            total -= 1
        if end.real > box.x1 and end.imag > halfway:
            total += 1
    return total


def right_section_crossings(
    segments: Iterable[AbstractSegment],
    box: Rect,
    far_x: float,
) -> int:
    """Ray crossings plus the right-edge correction; shifts the top row's winding."""
    segments = list(segments)
    return count_ray_crossings(segments, box, far_x) + right_edge_adjustment(segments, box)
