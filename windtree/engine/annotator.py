"""Annotator — per-leaf records for rendering a built region tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgpathtools import Line

from windtree.engine.config import TreeConfig
from windtree.engine.tree import Region
from windtree.utils.geometry import Rect, intersects_line, subdivide


@dataclass(frozen=True)
class Shortcut:
    """Guide line for a segment crossing a leaf's right edge.

    Incoming crossings (start.x > end.x) run from above the leaf down to the
    segment's start; outgoing ones run from the segment's end up.
    """

    segment_id: int
    incoming: bool
    guide: Line

    @property
    def first_half(self) -> Line:
        """The half that carries the arrowhead."""
        return subdivide(self.guide)[0]

    @property
    def second_half(self) -> Line:
        return subdivide(self.guide)[1]


@dataclass
class LeafAnnotation:
    bounding_box: Rect
    winding_number: int
    segment_ids: list[int] = field(default_factory=list)
    shortcuts: list[Shortcut] = field(default_factory=list)

    @property
    def label(self) -> str:
        return str(self.winding_number)


def leaf_shortcuts(leaf: Region, offset: float) -> list[Shortcut]:
    box = leaf.bounding_box
    edge = box.right_line
    top = box.y0 - offset

    shortcuts: list[Shortcut] = []
    for seg in leaf.segments:
        if not intersects_line(seg.curve, edge):
            continue
        start, end = seg.endpoints
        if start.real > end.real:
            guide = Line(complex(start.real, top), start)
            shortcuts.append(Shortcut(seg.id, True, guide))
        else:
            guide = Line(end, complex(end.real, top))
            shortcuts.append(Shortcut(seg.id, False, guide))
    return shortcuts


def annotate(tree: Region, config: TreeConfig | None = None) -> list[LeafAnnotation]:
    """One record per leaf, in pre-order (TL, TR, BL, BR)."""
    config = config or TreeConfig()
    return [
        LeafAnnotation(
            bounding_box=leaf.bounding_box,
            winding_number=leaf.initial_winding_number,
            segment_ids=[s.id for s in leaf.segments],
            shortcuts=leaf_shortcuts(leaf, config.shortcut_offset),
        )
        for leaf in tree.iter_leaves()
    ]
