"""Region tree — quadtree over the drawing with incremental winding numbers.

Each split hands every quadrant the segments that could touch it and a
winding number derived from the parent's value plus crossings counted on the
shared edges. Nothing is recomputed from the full path.

    origin
    v
    *------*------*
    |  TL  |  TR  |
    |      |v-----|--- center
    *------*------*
    |  BL  |  BR  |
    |      |      |
    *------*------*
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Union

from windtree.engine.config import TreeConfig
from windtree.engine.crossings import count_bottom_crossings, right_section_crossings
from windtree.engine.errors import TreeInvariantError
from windtree.engine.segmenter import AbstractSegment
from windtree.utils.geometry import Rect, intersects_line

logger = logging.getLogger(__name__)


@dataclass
class Leaf:
    segments: list[AbstractSegment] = field(default_factory=list)


@dataclass
class Branch:
    top_left: Region
    top_right: Region
    bottom_left: Region
    bottom_right: Region

    def children(self) -> tuple[Region, Region, Region, Region]:
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)


@dataclass
class Region:
    """One node of the tree. ``node`` is a Leaf until the node is split, then a Branch."""

    bounding_box: Rect
    node: Union[Leaf, Branch]
    initial_winding_number: int = 0

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.node, Leaf)

    @property
    def segments(self) -> list[AbstractSegment]:
        if not isinstance(self.node, Leaf):
            raise TreeInvariantError("Asked a branched region for its leaf segments")
        return self.node.segments

    def children(self) -> tuple[Region, ...]:
        if isinstance(self.node, Branch):
            return self.node.children()
        return ()

    def iter_leaves(self) -> Iterator[Region]:
        """Leaves in pre-order: top-left, top-right, bottom-left, bottom-right."""
        if isinstance(self.node, Leaf):
            yield self
            return
        for child in self.node.children():
            yield from child.iter_leaves()

    def depth(self) -> int:
        """Height of the subtree; a single leaf has depth 0."""
        kids = self.children()
        if not kids:
            return 0
        return 1 + max(k.depth() for k in kids)

    def leaf_count(self) -> int:
        return sum(1 for _ in self.iter_leaves())


def filter_segments(segments: Sequence[AbstractSegment], box: Rect) -> list[AbstractSegment]:
    """Segments that could touch ``box``: an endpoint inside, or a hit on any edge.

    Over-inclusive on purpose; a segment touching the box is never dropped.
    """
    edges = box.edges()
    kept: list[AbstractSegment] = []
    for seg in segments:
        start, end = seg.endpoints
        if (
            box.contains(start)
            or box.contains(end)
            or any(intersects_line(seg.curve, edge) for edge in edges)
        ):
            kept.append(seg)
    return kept


def _split(region: Region, depth: int, config: TreeConfig) -> Region:
    if not isinstance(region.node, Leaf):
        raise TreeInvariantError("Called split on a region that is already branched")

    segments = region.node.segments
    if len(segments) <= config.leaf_segment_limit or depth >= config.max_depth:
        return region

    box = region.bounding_box
    tl_box, tr_box, bl_box, br_box = box.quadrants()
    tl_segs = filter_segments(segments, tl_box)
    tr_segs = filter_segments(segments, tr_box)
    bl_segs = filter_segments(segments, bl_box)
    br_segs = filter_segments(segments, br_box)

    w = region.initial_winding_number
    section = right_section_crossings(segments, box, config.ray_far_x)

    top_left = Region(tl_box, Leaf(tl_segs), w + count_bottom_crossings(tr_segs, tr_box) + section)
    top_right = Region(tr_box, Leaf(tr_segs), w + section)
    bottom_left = Region(bl_box, Leaf(bl_segs), w + count_bottom_crossings(br_segs, br_box))
    bottom_right = Region(br_box, Leaf(br_segs), w)

    logger.debug(
        "Split depth %d (%d segs, w=%d) -> TL %d/%d TR %d/%d BL %d/%d BR %d/%d",
        depth,
        len(segments),
        w,
        len(tl_segs),
        top_left.initial_winding_number,
        len(tr_segs),
        top_right.initial_winding_number,
        len(bl_segs),
        bottom_left.initial_winding_number,
        len(br_segs),
        bottom_right.initial_winding_number,
    )

    region.node = Branch(
        _split(top_left, depth + 1, config),
        _split(top_right, depth + 1, config),
        _split(bottom_left, depth + 1, config),
        _split(bottom_right, depth + 1, config),
    )
    return region


def build_tree(
    box: Rect,
    segments: Sequence[AbstractSegment],
    winding: int = 0,
    config: TreeConfig | None = None,
) -> Region:
    """Build the region tree over ``box``; the root starts at ``winding``."""
    config = config or TreeConfig()
    root = _split(Region(box, Leaf(list(segments)), winding), 0, config)
    logger.info(
        "Region tree: %d segments -> %d leaves, depth %d",
        len(segments),
        root.leaf_count(),
        root.depth(),
    )
    return root
