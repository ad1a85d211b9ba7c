"""Tests for the segmenter."""

from __future__ import annotations

import pytest
from svgpathtools import CubicBezier, Line, QuadraticBezier, parse_path

from windtree.engine.errors import MalformedDrawingError
from windtree.engine.segmenter import (
    AbstractSegment,
    merge_close_cuts,
    segment_all,
    segment_path,
    split_curve,
)
from windtree.svg.parser import parse_drawing
from tests.conftest import HEART_SVG, SETTINGS_SVG, SQUARE_SVG, raw_path


def _assert_chained(segments: list[AbstractSegment], start: complex, end: complex) -> None:
    assert abs(segments[0].start - start) < 1e-9
    assert abs(segments[-1].end - end) < 1e-9
    for a, b in zip(segments, segments[1:]):
        assert abs(a.end - b.start) < 1e-9


class TestMergeCloseCuts:
    def test_endpoints_only(self):
        assert merge_close_cuts([0.0, 1.0]) == [0.0, 1.0]

    def test_empty_input_still_has_endpoints(self):
        assert merge_close_cuts([]) == [0.0, 1.0]

    def test_cut_near_one_does_not_swallow_one(self):
        assert merge_close_cuts([0.0, 0.995, 1.0]) == [0.0, 1.0]

    def test_cuts_near_both_ends(self):
        assert merge_close_cuts([0.0, 0.004, 0.5, 0.996, 1.0]) == [0.0, 0.5, 1.0]

    def test_sorts_and_merges_interior(self):
        assert merge_close_cuts([1.0, 0.3, 0.0, 0.305, 0.7]) == [0.0, 0.3, 0.7, 1.0]

    def test_custom_tolerance(self):
        assert merge_close_cuts([0.0, 0.3, 0.35, 1.0], tolerance=0.1) == [0.0, 0.3, 1.0]
        assert merge_close_cuts([0.0, 0.3, 0.35, 1.0], tolerance=0.01) == [0.0, 0.3, 0.35, 1.0]


def test_lines_are_never_split():
    drawing = parse_drawing(SQUARE_SVG)
    [segments] = segment_all(drawing.paths)
    assert len(segments) == 4
    assert [s.id for s in segments] == [0, 1, 2, 3]
    assert all(isinstance(s.curve, Line) for s in segments)
    assert all(s.attributes == {} for s in segments)


def test_cubic_with_one_inflection_splits_in_two():
    cubic = CubicBezier(0j, 10 + 20j, 20 + 10j, 30 + 30j)
    segments = segment_path(raw_path(cubic))
    assert len(segments) == 2
    assert abs(segments[0].end - (15 + 15j)) < 1e-9
    _assert_chained(segments, cubic.start, cubic.end)


def test_quadratic_split_at_extremum():
    quad = QuadraticBezier(0j, 5 + 10j, 10 + 0j)
    segments = segment_path(raw_path(quad))
    assert len(segments) == 2
    assert all(isinstance(s.curve, QuadraticBezier) for s in segments)
    _assert_chained(segments, quad.start, quad.end)


def test_quadratic_without_extrema_stays_whole():
    quad = QuadraticBezier(0j, 5 + 2j, 10 + 10j)
    assert split_curve(quad) == [quad]


def test_cubic_pieces_are_contiguous():
    cubic = CubicBezier(0j, 40 + 40j, -20 + 40j, 20 + 0j)
    segments = segment_path(raw_path(cubic))
    assert len(segments) > 1
    _assert_chained(segments, cubic.start, cubic.end)


def test_arc_becomes_cubic_segments():
    arc = parse_path("M 0 10 A 10 10 0 0 1 20 10")[0]
    segments = segment_path(raw_path(arc))
    assert len(segments) >= 2
    assert all(isinstance(s.curve, CubicBezier) for s in segments)
    _assert_chained(segments, arc.start, arc.end)


def test_heart_path_chains_through_every_command():
    drawing = parse_drawing(HEART_SVG)
    [segments] = segment_all(drawing.paths)
    assert len(segments) > len(drawing.paths[0].segments)
    _assert_chained(segments, segments[0].start, drawing.paths[0].segments[-1].end)


def test_ids_are_local_to_each_path():
    first = raw_path(Line(0j, 1 + 0j), Line(1 + 0j, 1 + 1j))
    second = raw_path(Line(5j, 6j))
    per_path = segment_all([first, second])
    assert [s.id for s in per_path[0]] == [0, 1]
    assert [s.id for s in per_path[1]] == [0]


def test_ids_count_sub_segments():
    drawing = parse_drawing(SETTINGS_SVG)
    [segments] = segment_all(drawing.paths)
    assert [s.id for s in segments] == list(range(len(segments)))


def test_attributes_are_copied_per_segment():
    path = raw_path(Line(0j, 1 + 0j), Line(1 + 0j, 2 + 0j), fill="red")
    segments = segment_path(path)
    assert segments[0].attributes == {"fill": "red"}
    assert segments[0].attributes is not segments[1].attributes
    assert segments[0].attributes is not path.attributes
    segments[0].attributes["fill"] = "blue"
    assert segments[1].attributes["fill"] == "red"
    assert path.attributes["fill"] == "red"


def test_segments_are_immutable():
    [segment] = segment_path(raw_path(Line(0j, 1 + 0j)))
    with pytest.raises(AttributeError):
        segment.id = 7


def test_unknown_segment_type_is_malformed():
    with pytest.raises(MalformedDrawingError):
        split_curve("not a curve")
