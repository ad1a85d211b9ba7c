"""Tree configuration — the algorithm constants, tunable per run."""

from __future__ import annotations

from dataclasses import dataclass

# Cubic cut parameters closer than this (in t) are merged into one cut.
CUT_MERGE_TOLERANCE = 0.01


@dataclass
class TreeConfig:
    """Controls segmentation, subdivision and annotation."""

    # Subdivision stops at this depth (root = 0)
    max_depth: int = 4
    # A node with this many segments or fewer stays a leaf
    leaf_segment_limit: int = 2

    # Segmenter
    cut_merge_tolerance: float = CUT_MERGE_TOLERANCE

    # Far end of the rightward winding ray; pushed further out for wide boxes
    ray_far_x: float = 1000.0

    # Shortcut guides end this far above the leaf's top edge
    shortcut_offset: float = 20.0
