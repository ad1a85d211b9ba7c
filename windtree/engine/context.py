"""Drawing data handed from the SVG parser to the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from windtree.utils.geometry import Rect


@dataclass
class RawPath:
    """One ``<path>`` element: its parsed segments plus everything else it carried."""

    # Original ``d`` attribute text
    d: str
    # svgpathtools segments (Line / QuadraticBezier / CubicBezier / Arc)
    segments: list[Any] = field(default_factory=list)
    # All other attributes, opaque to the engine
    attributes: dict[str, str] = field(default_factory=dict)
    # Document order
    index: int = 0


@dataclass
class Drawing:
    """A parsed drawing: the declared view box and its paths."""

    view_box: Rect
    paths: list[RawPath] = field(default_factory=list)
    # Attributes of the root ``<svg>`` element, written back on output
    document_attributes: dict[str, str] = field(default_factory=dict)

    @property
    def num_paths(self) -> int:
        return len(self.paths)
