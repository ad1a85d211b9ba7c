"""windtree winding-number quadtree engine."""

from windtree.engine.annotator import LeafAnnotation, Shortcut, annotate
from windtree.engine.config import TreeConfig
from windtree.engine.context import Drawing, RawPath
from windtree.engine.errors import MalformedDrawingError, TreeInvariantError, WindtreeError
from windtree.engine.segmenter import AbstractSegment, merge_close_cuts, segment_all
from windtree.engine.tree import Branch, Leaf, Region, build_tree

__all__ = [
    "AbstractSegment",
    "Branch",
    "Drawing",
    "Leaf",
    "LeafAnnotation",
    "MalformedDrawingError",
    "RawPath",
    "Region",
    "Shortcut",
    "TreeConfig",
    "TreeInvariantError",
    "WindtreeError",
    "annotate",
    "build_tree",
    "merge_close_cuts",
    "segment_all",
]
