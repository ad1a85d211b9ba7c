"""SVG parser — facade over svgpathtools.

Converts raw SVG string → Drawing (view box + raw paths with their attributes).
"""

from __future__ import annotations

import html
import logging
import math
import re

from svgpathtools import parse_path

from windtree.engine.context import Drawing, RawPath
from windtree.engine.errors import MalformedDrawingError
from windtree.utils.geometry import Rect

logger = logging.getLogger(__name__)

_SVG_TAG_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_PATH_TAG_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r"""([\w:.-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_NUMBER_SPLIT_RE = re.compile(r"[\s,]+")


def parse_drawing(svg_text: str) -> Drawing:
    """Parse raw SVG string into a Drawing. Malformed input raises MalformedDrawingError."""
    svg_match = _SVG_TAG_RE.search(svg_text)
    if svg_match is None:
        raise MalformedDrawingError("No <svg> element found")

    document_attrs = _extract_attrs(svg_match.group(0), tag="svg")
    view_box = parse_view_box(document_attrs.get("viewBox"))

    drawing = Drawing(view_box=view_box, document_attributes=document_attrs)

    for index, match in enumerate(_PATH_TAG_RE.finditer(svg_text)):
        attrs = _extract_attrs(match.group(0), tag="path")
        d = attrs.pop("d", None)
        if d is None:
            raise MalformedDrawingError(f"Path {index} has no 'd' attribute")
        try:
            path = parse_path(d)
        except Exception as e:
            raise MalformedDrawingError(f"Path {index} has unparseable data: {e}") from e

        drawing.paths.append(RawPath(d=d, segments=list(path), attributes=attrs, index=index))

    logger.info(
        "Parsed SVG: %d paths, view box %.0f×%.0f at (%.0f, %.0f)",
        drawing.num_paths,
        view_box.width,
        view_box.height,
        view_box.x0,
        view_box.y0,
    )
    return drawing


def parse_view_box(raw: str | None) -> Rect:
    """``"min-x min-y width height"`` → Rect. Width and height must be positive."""
    if raw is None:
        raise MalformedDrawingError("Drawing has no viewBox")
    parts = [p for p in _NUMBER_SPLIT_RE.split(raw.strip()) if p]
    if len(parts) != 4:
        raise MalformedDrawingError(f"viewBox needs 4 numbers, got {raw!r}")
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError as e:
        raise MalformedDrawingError(f"viewBox is not numeric: {raw!r}") from e
    if not all(math.isfinite(v) for v in (x, y, w, h)):
        raise MalformedDrawingError(f"viewBox is not finite: {raw!r}")
    if w <= 0 or h <= 0:
        raise MalformedDrawingError(f"viewBox has non-positive size: {raw!r}")
    return Rect.from_origin_size(x, y, w, h)


def _extract_attrs(tag_text: str, tag: str) -> dict[str, str]:
    """Attributes of a single start tag, in document order, entities decoded."""
    body = tag_text[len(tag) + 1:]
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(body):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = html.unescape(value)
    return attrs
