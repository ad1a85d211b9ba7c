"""windtree — monotonic segmentation and winding-number quadtrees for SVG paths."""

__version__ = "0.1.0"
