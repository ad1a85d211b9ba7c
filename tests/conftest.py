"""Shared test fixtures."""

from __future__ import annotations

import pytest

from windtree.engine.context import RawPath
from windtree.engine.segmenter import segment_all
from windtree.svg.parser import parse_drawing


DIAGONAL_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <path d="M 0 0 L 10 10" stroke="black"/>
</svg>'''

# 4 line segments; every quadrant of the root ends up with exactly 2 of them.
SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <path d="M 5 5 L 15 5 L 15 15 L 5 15 Z"/>
</svg>'''

S_CURVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 30 30">
  <path d="M 0 0 C 10 20 20 10 30 30" fill="none" stroke="red"/>
</svg>'''

HEART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M50 30 C50 10 20 10 20 35 C20 55 50 70 50 85 C50 70 80 55 80 35 C80 10 50 10 50 30 Z" fill="#d33"/>
</svg>'''

# Lucide icons: arcs, smooth curves and relative commands.
HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

SETTINGS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M12.22 2h-.44a2 2 0 0 0-2 2v.18a2 2 0 0 1-1 1.73l-.43.25a2 2 0 0 1-2 0l-.15-.08a2 2 0 0 0-2.73.73l-.22.38a2 2 0 0 0 .73 2.73l.15.1a2 2 0 0 1 1 1.72v.51a2 2 0 0 1-1 1.74l-.15.09a2 2 0 0 0-.73 2.73l.22.38a2 2 0 0 0 2.73.73l.15-.08a2 2 0 0 1 2 0l.43.25a2 2 0 0 1 1 1.73V20a2 2 0 0 0 2 2h.44a2 2 0 0 0 2-2v-.18a2 2 0 0 1 1-1.73l.43-.25a2 2 0 0 1 2 0l.15.08a2 2 0 0 0 2.73-.73l.22-.39a2 2 0 0 0-.73-2.73l-.15-.08a2 2 0 0 1-1-1.74v-.5a2 2 0 0 1 1-1.74l.15-.09a2 2 0 0 0 .73-2.73l-.22-.38a2 2 0 0 0-2.73-.73l-.15.08a2 2 0 0 1-2 0l-.43-.25a2 2 0 0 1-1-1.73V4a2 2 0 0 0-2-2z"/>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="M 0 0 L 10 10"/>
</svg>'''

BAD_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M 0 0 L 10"/>
</svg>'''


def flat_segments(svg_text: str):
    drawing = parse_drawing(svg_text)
    return drawing, [s for per_path in segment_all(drawing.paths) for s in per_path]


def raw_path(*segments, **attributes) -> RawPath:
    return RawPath(d="", segments=list(segments), attributes=dict(attributes))


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def settings_svg() -> str:
    return SETTINGS_SVG


@pytest.fixture
def heart_svg() -> str:
    return HEART_SVG
