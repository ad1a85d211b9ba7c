"""Leaf-node geometry helpers. No engine imports.

Curves are svgpathtools segments; points are complex numbers (x = real, y = imag).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier

Curve = Union[Line, QuadraticBezier, CubicBezier]

# Coefficients below this fraction of the largest one are treated as zero.
_COEFF_EPS = 1e-12

# Roots with |imag| above this are complex, not real.
_IMAG_EPS = 1e-7

# Slack on the closed [0, 1] parameter range for line intersections.
_PARAM_EPS = 1e-9

# Arcs are cut into pieces of at most a quarter turn before cubic fitting.
_MAX_ARC_PIECE_DEG = 90.0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle. y grows downwards, so (x0, y0) is the top-left corner."""

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_origin_size(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def origin(self) -> complex:
        return complex(self.x0, self.y0)

    @property
    def center(self) -> complex:
        return complex((self.x0 + self.x1) / 2, (self.y0 + self.y1) / 2)

    def contains(self, point: complex) -> bool:
        """Half-open containment: the right and bottom edges are outside."""
        return self.x0 <= point.real < self.x1 and self.y0 <= point.imag < self.y1

    @property
    def top_line(self) -> Line:
        return Line(complex(self.x0, self.y0), complex(self.x1, self.y0))

    @property
    def right_line(self) -> Line:
        return Line(complex(self.x1, self.y0), complex(self.x1, self.y1))

    @property
    def bottom_line(self) -> Line:
        return Line(complex(self.x0, self.y1), complex(self.x1, self.y1))

    @property
    def left_line(self) -> Line:
        return Line(complex(self.x0, self.y0), complex(self.x0, self.y1))

    def edges(self) -> tuple[Line, Line, Line, Line]:
        """Boundary lines: top, right, bottom, left."""
        return (self.top_line, self.right_line, self.bottom_line, self.left_line)

    def quadrants(self) -> tuple[Rect, Rect, Rect, Rect]:
        """Four equal quadrants split at the center: TL, TR, BL, BR."""
        c = self.center
        w = self.width / 2
        h = self.height / 2
        return (
            Rect.from_origin_size(self.x0, self.y0, w, h),
            Rect.from_origin_size(c.real, self.y0, w, h),
            Rect.from_origin_size(self.x0, c.imag, w, h),
            Rect.from_origin_size(c.real, c.imag, w, h),
        )


def endpoints(curve: Curve) -> tuple[complex, complex]:
    return curve.start, curve.end


def power_coefficients(curve: Curve) -> NDArray[np.complex128]:
    """Power-basis coefficients of B(t), highest degree first."""
    p = np.array(curve.bpoints(), dtype=np.complex128)
    if len(p) == 2:
        return np.array([p[1] - p[0], p[0]])
    if len(p) == 3:
        return np.array([p[0] - 2 * p[1] + p[2], 2 * (p[1] - p[0]), p[0]])
    return np.array(
        [
            -p[0] + 3 * p[1] - 3 * p[2] + p[3],
            3 * p[0] - 6 * p[1] + 3 * p[2],
            3 * (p[1] - p[0]),
            p[0],
        ]
    )


def _cross(a: complex, b: complex) -> float:
    return a.real * b.imag - a.imag * b.real


def real_roots(
    coeffs: NDArray[np.float64] | list[float],
    *,
    open_interval: bool = True,
) -> list[float]:
    """Sorted real roots of a polynomial (highest degree first) within [0, 1].

    With ``open_interval`` the bounds themselves are excluded. A polynomial that
    is identically zero has no roots.
    """
    c = np.asarray(coeffs, dtype=np.float64)
    scale = float(np.max(np.abs(c))) if len(c) else 0.0
    if scale == 0.0:
        return []
    c = c / scale
    nonzero = np.nonzero(np.abs(c) > _COEFF_EPS)[0]
    c = c[nonzero[0]:]
    if len(c) < 2:
        return []

    roots: list[float] = []
    for r in np.roots(c):
        if abs(r.imag) > _IMAG_EPS:
            continue
        t = float(r.real)
        if open_interval:
            if 0.0 < t < 1.0:
                roots.append(t)
        elif -_PARAM_EPS <= t <= 1.0 + _PARAM_EPS:
            roots.append(min(max(t, 0.0), 1.0))
    return sorted(roots)


def extrema(curve: Curve) -> list[float]:
    """Parameters in (0, 1) where dx/dt or dy/dt vanishes."""
    if isinstance(curve, Line):
        return []
    coeffs = power_coefficients(curve)
    degree = len(coeffs) - 1
    deriv = np.array([coeffs[i] * (degree - i) for i in range(degree)])
    found = real_roots(deriv.real) + real_roots(deriv.imag)
    return sorted(found)


def inflections(curve: Curve) -> list[float]:
    """Parameters in (0, 1) where B'(t) x B''(t) changes sign. Cubics only."""
    if not isinstance(curve, CubicBezier):
        return []
    a, b, c, _ = power_coefficients(curve)
    # B' = 3a t^2 + 2b t + c, B'' = 6a t + 2b; the cross product halves to this quadratic.
    return real_roots([-3 * _cross(a, b), 3 * _cross(c, a), _cross(c, b)])


def line_intersections(curve: Curve, line: Line) -> list[float]:
    """Curve parameters where ``curve`` meets the line segment ``line``.

    Both parameter ranges are closed. A curve lying along the line reports
    nothing, as does a zero-length line.
    """
    direction = line.end - line.start
    norm = abs(direction) ** 2
    if norm == 0.0:
        return []

    coeffs = power_coefficients(curve)
    coeffs[-1] -= line.start
    rotated = np.conj(direction) * coeffs

    hits: list[float] = []
    for t in real_roots(rotated.imag, open_interval=False):
        offset = complex(curve.point(t)) - line.start
        u = (direction.conjugate() * offset).real / norm
        if -_PARAM_EPS <= u <= 1.0 + _PARAM_EPS:
            hits.append(t)
    return hits


def intersects_line(curve: Curve, line: Line) -> bool:
    return bool(line_intersections(curve, line))


def bounding_box(curve: Curve) -> Rect:
    xmin, xmax, ymin, ymax = curve.bbox()
    return Rect(float(xmin), float(ymin), float(xmax), float(ymax))


def subdivide(curve: Curve) -> tuple[Curve, Curve]:
    """Split at t = 0.5."""
    first, second = curve.split(0.5)
    return first, second


def _point_at(curve: Curve, t: float) -> complex:
    if t == 0.0:
        return curve.start
    if t == 1.0:
        return curve.end
    return complex(curve.point(t))


def subcurve(curve: Curve, t0: float, t1: float) -> Curve:
    """The piece of ``curve`` between t0 and t1.

    Two exact splits rather than ``cropped``, which searches for t1 in the
    middle case. End points are evaluated on the original curve, so pieces cut
    at the same parameter meet exactly.
    """
    if t0 == 0.0 and t1 == 1.0:
        return curve
    piece = curve.split(t1)[0] if t1 < 1.0 else curve
    if t0 > 0.0:
        piece = piece.split(t0 / t1)[1]
    points = list(piece.bpoints())
    points[0] = _point_at(curve, t0)
    points[-1] = _point_at(curve, t1)
    return type(curve)(*points)


def arc_to_cubics(arc: Arc) -> list[CubicBezier]:
    """Approximate an elliptical arc with cubic pieces of at most a quarter turn."""
    sweep = math.radians(arc.delta)
    pieces = max(1, math.ceil(abs(arc.delta) / _MAX_ARC_PIECE_DEG - 1e-9))
    step = sweep / pieces
    k = 4.0 / 3.0 * math.tan(step / 4.0)

    rx, ry = arc.radius.real, arc.radius.imag
    rot = arc.rot_matrix
    start_angle = math.radians(arc.theta)

    def _point(angle: float) -> complex:
        return arc.center + rot * complex(rx * math.cos(angle), ry * math.sin(angle))

    def _tangent(angle: float) -> complex:
        return rot * complex(-rx * math.sin(angle), ry * math.cos(angle))

    angles = [start_angle + i * step for i in range(pieces + 1)]
    points = [_point(a) for a in angles]
    points[0] = arc.start
    points[-1] = arc.end

    return [
        CubicBezier(p0, p0 + k * _tangent(a0), p3 - k * _tangent(a1), p3)
        for p0, p3, a0, a1 in zip(points, points[1:], angles, angles[1:])
    ]
