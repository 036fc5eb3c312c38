"""Path-command vocabulary and bezier segment math for vgshape.

A path is a list of commands tagged with one of the constants below.
Segment helpers work on plain coordinates so that :mod:`vgshape.path`
can evaluate lines, quadratic and cubic curves uniformly.
"""

from __future__ import annotations

import math
from typing import List

MOVETO = 'M'
LINETO = 'L'
QUADTO = 'Q'
CURVETO = 'C'
CLOSE = 'Z'

COMMAND_TYPES = (MOVETO, LINETO, QUADTO, CURVETO, CLOSE)


def line_point(t, x0, y0, x1, y1):
    return x0 + t * (x1 - x0), y0 + t * (y1 - y0)


def quad_point(t, x0, y0, x1, y1, x2, y2):
    mt = 1.0 - t
    x = mt * mt * x0 + 2 * mt * t * x1 + t * t * x2
    y = mt * mt * y0 + 2 * mt * t * y1 + t * t * y2
    return x, y


def cubic_point(t, x0, y0, x1, y1, x2, y2, x3, y3):
    mt = 1.0 - t
    a = mt * mt * mt
    b = 3 * mt * mt * t
    c = 3 * mt * t * t
    d = t * t * t
    return (a * x0 + b * x1 + c * x2 + d * x3,
            a * y0 + b * y1 + c * y2 + d * y3)


def line_length(x0, y0, x1, y1):
    return math.hypot(x1 - x0, y1 - y0)


def _polyline_length(fn, coords, precision):
    total = 0.0
    px, py = coords[0], coords[1]
    for i in range(1, precision + 1):
        x, y = fn(i / precision, *coords)
        total += math.hypot(x - px, y - py)
        px, py = x, y
    return total


def quad_length(x0, y0, x1, y1, x2, y2, precision=20):
    """Approximate arc length by summing ``precision`` chords."""
    return _polyline_length(quad_point, (x0, y0, x1, y1, x2, y2), precision)


def cubic_length(x0, y0, x1, y1, x2, y2, x3, y3, precision=20):
    """Approximate arc length by summing ``precision`` chords."""
    return _polyline_length(cubic_point, (x0, y0, x1, y1, x2, y2, x3, y3), precision)


def _quadratic_roots(a, b, c) -> List[float]:
    if abs(a) < 1e-12:
        if abs(b) < 1e-12:
            return []
        return [-c / b]
    disc = b * b - 4 * a * c
    if disc < 0:
        return []
    sq = math.sqrt(disc)
    return [(-b + sq) / (2 * a), (-b - sq) / (2 * a)]


def cubic_extrema(p0, p1, p2, p3) -> List[float]:
    """Parameters in ``(0, 1)`` where one coordinate of a cubic peaks."""
    # derivative coefficients of the cubic bernstein polynomial
    a = 3 * (-p0 + 3 * p1 - 3 * p2 + p3)
    b = 6 * (p0 - 2 * p1 + p2)
    c = 3 * (p1 - p0)
    return [t for t in _quadratic_roots(a, b, c) if 0.0 < t < 1.0]


def quad_extrema(p0, p1, p2) -> List[float]:
    denom = p0 - 2 * p1 + p2
    if abs(denom) < 1e-12:
        return []
    t = (p0 - p1) / denom
    return [t] if 0.0 < t < 1.0 else []
