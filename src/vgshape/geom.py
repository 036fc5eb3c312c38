## foundational value types and scalar geometry for vgshape
## Copyright (c) 2026 vgshape contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational value types for **vgshape**

====================
OVERVIEW
====================

The vgshape.geom module provides the immutable value types every other
module builds on -- ``Point``, ``Rect`` and ``Color`` -- together with
the scalar and angle helpers used by the shape operations.

constants
=========

vgshape.geom provides the "constants" ``EPSILON`` and ``SWATCH_SIZE``.
Redefine these at your peril.  ``EPSILON`` is the tolerance used when
comparing coordinates; ``SWATCH_SIZE`` is the edge length of the square
a ``Color`` occupies when bounds are requested for it.

angles
======

Angles are specified in degrees and are right-handed, which is to say
a positive angle specifies a counter-clockwise sweep in a y-up frame
(clockwise on a y-down canvas).  ``angle(x0, y0, x1, y1)`` returns the
direction of the vector from the first point to the second.

points and rects
================

Points are frozen ``(x, y)`` pairs.  ``ZERO`` is the conventional
default origin.  Rects are frozen ``(x, y, width, height)`` boxes;
``Rect.contains()`` treats all four edges as inside.

"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

EPSILON = 1e-12
SWATCH_SIZE = 30


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return 'Point({}, {})'.format(self.x, self.y)


ZERO = Point(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    """Immutable axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __repr__(self):
        return 'Rect({}, {}, {}, {})'.format(self.x, self.y, self.width, self.height)

    def unite(self, other: "Rect") -> "Rect":
        """Return the smallest rect covering both ``self`` and ``other``."""

        x0 = min(self.x, other.x)
        y0 = min(self.y, other.y)
        x1 = max(self.x + self.width, other.x + other.width)
        y1 = max(self.y + self.height, other.y + other.height)
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def contains(self, x, y=None) -> bool:
        """Is the point ``(x, y)`` (or the ``Point`` ``x``) inside the rect?

        Points on the edges count as inside.
        """
        if y is None:
            x, y = x.x, x.y
        return (self.x <= x <= self.x + self.width and
                self.y <= y <= self.y + self.height)

    def center_point(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class Color:
    """RGBA color with components in the ``[0, 1]`` range."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __repr__(self):
        return 'Color({}, {}, {}, {})'.format(self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0, 1)
WHITE = Color(1, 1, 1, 1)


def isgoodnum(n) -> bool:
    return (not isinstance(n, bool)) and isinstance(n, (int, float)) and math.isfinite(n)


def radians(degrees: float) -> float:
    return degrees / 180.0 * math.pi


def degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def distance(x0: float, y0: float, x1: float, y1: float) -> float:
    return math.hypot(x1 - x0, y1 - y0)


def angle(x0: float, y0: float, x1: float, y1: float) -> float:
    """direction in degrees of the vector from ``(x0, y0)`` to ``(x1, y1)``"""
    return degrees(math.atan2(y1 - y0, x1 - x0))


def coordinates(x0: float, y0: float, angle: float, distance: float) -> Point:
    """the point ``distance`` away from ``(x0, y0)`` in direction ``angle``"""
    rad = radians(angle)
    return Point(x0 + math.cos(rad) * distance, y0 + math.sin(rad) * distance)


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def _round_half_up(v: float) -> float:
    return math.floor(v + 0.5)


def snap_value(v: float, distance: float, strength: float = 1.0) -> float:
    """Blend ``v`` toward the nearest multiple of ``distance``.

    ``strength`` of 0 leaves ``v`` untouched, 1 moves it all the way onto
    the grid.  Halfway values round up.
    """
    snapped = _round_half_up(v / distance) * distance
    return v * (1.0 - strength) + strength * snapped


## Count the crossings of a horizontal ray cast from the test point;
## inside only if the number of crossings is odd.
def point_in_polygon(points: Sequence[Point], x: float, y: float) -> bool:
    """Even-odd inside test of ``(x, y)`` against the closed ring ``points``."""
    inside = False
    n = len(points)
    if n < 3:
        return False
    j = n - 1
    for i in range(n):
        pi_ = points[i]
        pj = points[j]
        if ((pi_.y > y) != (pj.y > y)) and \
           (x < (pj.x - pi_.x) * (y - pi_.y) / (pj.y - pi_.y) + pi_.x):
            inside = not inside
        j = i
    return inside
