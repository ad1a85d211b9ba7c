"""Rasterize an annotated drawing to PNG for quick previews."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Default preview width in pixels; height follows the view box aspect ratio.
_DEFAULT_PREVIEW_WIDTH = 800


def render_png(svg: str, width: int = _DEFAULT_PREVIEW_WIDTH) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(bytestring=svg.encode("utf-8"), output_width=width)
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise
