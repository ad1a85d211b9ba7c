"""Write the annotated SVG: original paths, tree leaves, shortcuts and segments."""

from __future__ import annotations

import html
from collections.abc import Iterable, Mapping

from svgpathtools import Path

from windtree.engine.annotator import LeafAnnotation, Shortcut
from windtree.engine.context import Drawing
from windtree.engine.segmenter import AbstractSegment
from windtree.utils.geometry import Curve, bounding_box, subdivide

_ARROW_MARKER = (
    '  <defs>\n'
    '    <marker id="arrow" viewBox="0 0 10 10" refX="5" refY="5" markerWidth="6"'
    ' markerHeight="6" orient="auto-start-reverse">\n'
    '      <path d="M 0 0 L 10 5 L 0 10 z" fill="black" stroke="black" />\n'
    '    </marker>\n'
    '  </defs>'
)

# Endpoint dot radius
_BOUNDARY_RADIUS = 2

# Winding label offset from the leaf's top-left corner
_LABEL_DX = 1.0
_LABEL_DY = 6.0


def _fmt(value: float) -> str:
    """Shortest round-tripping text, without a trailing ".0"."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _attr_str(attrs: Mapping[str, object]) -> str:
    return " ".join(f'{k}="{html.escape(str(v), quote=True)}"' for k, v in attrs.items())


def _element(tag: str, attrs: Mapping[str, object], indent: int = 2) -> str:
    return f"{' ' * indent}<{tag} {_attr_str(attrs)} />"


def _d(curve: Curve) -> str:
    return Path(curve).d()


def _shortcut_lines(shortcut: Shortcut) -> list[str]:
    style = {"stroke": "black", "stroke-dasharray": "2"}
    return [
        _element(
            "path",
            {"d": _d(shortcut.first_half), "class": "shortcut firstHalf arrowhead", **style},
            indent=4,
        ),
        _element("path", {"d": _d(shortcut.second_half), "class": "shortcut", **style}, indent=4),
    ]


def _leaf_group(leaf: LeafAnnotation) -> list[str]:
    box = leaf.bounding_box
    segment_refs = " ".join(f"segment{i}" for i in leaf.segment_ids)
    lines = [f'  <g class="treenode" segments="{segment_refs}">']
    lines.append(
        _element(
            "rect",
            {
                "x": _fmt(box.x0),
                "y": _fmt(box.y0),
                "width": _fmt(box.width),
                "height": _fmt(box.height),
                "stroke": "#aaa",
                "fill": "transparent",
            },
            indent=4,
        )
    )
    lines.append(
        f'    <text x="{_fmt(box.x0 + _LABEL_DX)}" y="{_fmt(box.y0 + _LABEL_DY)}"'
        f' class="winding_number">{html.escape(leaf.label)}</text>'
    )
    for shortcut in leaf.shortcuts:
        lines.extend(_shortcut_lines(shortcut))
    lines.append("  </g>")
    return lines


def _segment_bbox(segment: AbstractSegment) -> str:
    bb = bounding_box(segment.curve)
    return _element(
        "rect",
        {
            "class": "segment_bounding_box",
            "x": _fmt(bb.x0),
            "y": _fmt(bb.y0),
            "width": _fmt(bb.width),
            "height": _fmt(bb.height),
            "stroke": "blue",
            "fill": "none",
            "stroke-dasharray": "4",
        },
    )


def _segment_group(segment: AbstractSegment) -> list[str]:
    first, second = subdivide(segment.curve)
    lines = [f'  <g id="{segment.dom_id}" class="segment">']
    lines.append("    <g>")
    lines.append(
        _element("path", {**segment.attributes, "d": _d(first), "class": "firstHalf"}, indent=6)
    )
    lines.append(_element("path", {**segment.attributes, "d": _d(second)}, indent=6))
    lines.append("    </g>")
    for point in segment.endpoints:
        lines.append(
            _element(
                "circle",
                {
                    "cx": _fmt(point.real),
                    "cy": _fmt(point.imag),
                    "r": _BOUNDARY_RADIUS,
                    "fill": "black",
                    "class": "segmentBoundary",
                },
                indent=4,
            )
        )
    lines.append("  </g>")
    return lines


def serialize_annotated(
    drawing: Drawing,
    segments: Iterable[AbstractSegment],
    annotations: Iterable[LeafAnnotation],
) -> str:
    """Generate the annotated SVG document."""
    segments = list(segments)
    doc_attrs = dict(drawing.document_attributes)
    doc_attrs.setdefault("xmlns", "http://www.w3.org/2000/svg")

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f"<svg {_attr_str(doc_attrs)}>",
        _ARROW_MARKER,
    ]

    for path in drawing.paths:
        lines.append(_element("path", {**path.attributes, "d": path.d, "class": "original"}))

    for leaf in annotations:
        lines.extend(_leaf_group(leaf))

    for segment in segments:
        lines.append(_segment_bbox(segment))

    for segment in segments:
        lines.extend(_segment_group(segment))

    lines.append("</svg>")
    return "\n".join(lines)
