## Path class for vgshape: an ordered sequence of drawing commands
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

"""
Paths
=====

A ``Path`` is a list of ``Command`` values plus fill, stroke and stroke
width.  One path may hold several contours: each contour starts at a
MOVETO and runs up to the next MOVETO or CLOSE, and it is closed when
its last command is CLOSE.

Paths are parameterized over the interval ``0 <= t <= 1`` by arc
length, across every contour in order.  The implicit segment from the
last point of a closed contour back to its MOVETO counts toward the
length; the jump between contours does not.

The drawing methods (``move_to``, ``line_to``, ``quad_to``,
``curve_to``, ``close``) append to the path they are called on and
exist for building a path.  Every other method returns a new Path.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from vgshape import bezier
from vgshape.bezier import CLOSE, CURVETO, LINETO, MOVETO, QUADTO
from vgshape.geom import BLACK, EPSILON, Point, Rect, ZERO
from vgshape.xform import Transformable

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 20

## circle approximation constant for four cubic quarter arcs
KAPPA = 0.5522847498


@dataclass(frozen=True)
class Command:
    """One drawing instruction; see :mod:`vgshape.bezier` for the tags."""

    type: str
    x: Optional[float] = None
    y: Optional[float] = None
    x1: Optional[float] = None
    y1: Optional[float] = None
    x2: Optional[float] = None
    y2: Optional[float] = None

    def with_type(self, type: str) -> "Command":
        """retag as ``type``, dropping control points the new tag lacks"""
        if type == CLOSE:
            return Command(CLOSE)
        if type in (MOVETO, LINETO):
            return Command(type, self.x, self.y)
        return Command(type, self.x, self.y, self.x1, self.y1, self.x2, self.y2)


def moveto(x, y):
    return Command(MOVETO, x, y)


def lineto(x, y):
    return Command(LINETO, x, y)


def quadto(x1, y1, x, y):
    return Command(QUADTO, x, y, x1, y1)


def curveto(x1, y1, x2, y2, x, y):
    return Command(CURVETO, x, y, x1, y1, x2, y2)


def closepath():
    return Command(CLOSE)


def map_command(cmd: Command, fn: Callable[[float, float], Point]) -> Command:
    """Apply ``fn(x, y) -> Point`` to every coordinate of ``cmd``."""

    t = cmd.type
    if t == CLOSE:
        return Command(CLOSE)
    if t == MOVETO or t == LINETO:
        pt = fn(cmd.x, cmd.y)
        return Command(t, pt.x, pt.y)
    if t == QUADTO:
        pt = fn(cmd.x, cmd.y)
        c1 = fn(cmd.x1, cmd.y1)
        return Command(t, pt.x, pt.y, c1.x, c1.y)
    if t == CURVETO:
        pt = fn(cmd.x, cmd.y)
        c1 = fn(cmd.x1, cmd.y1)
        c2 = fn(cmd.x2, cmd.y2)
        return Command(t, pt.x, pt.y, c1.x, c1.y, c2.x, c2.y)
    raise ValueError('unknown path command {}'.format(cmd))


## A segment is a (type, coords, length) tuple where coords begins with
## the segment's start point.  Closing segments are stored as lines.
def _segments(commands, precision=DEFAULT_PRECISION):
    segs = []
    cx = cy = 0.0
    sx = sy = 0.0
    for cmd in commands:
        t = cmd.type
        if t == MOVETO:
            cx, cy = cmd.x, cmd.y
            sx, sy = cx, cy
        elif t == LINETO:
            coords = (cx, cy, cmd.x, cmd.y)
            segs.append((LINETO, coords, bezier.line_length(*coords)))
            cx, cy = cmd.x, cmd.y
        elif t == QUADTO:
            coords = (cx, cy, cmd.x1, cmd.y1, cmd.x, cmd.y)
            segs.append((QUADTO, coords, bezier.quad_length(*coords, precision=precision)))
            cx, cy = cmd.x, cmd.y
        elif t == CURVETO:
            coords = (cx, cy, cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
            segs.append((CURVETO, coords, bezier.cubic_length(*coords, precision=precision)))
            cx, cy = cmd.x, cmd.y
        elif t == CLOSE:
            coords = (cx, cy, sx, sy)
            segs.append((LINETO, coords, bezier.line_length(*coords)))
            cx, cy = sx, sy
        else:
            raise ValueError('unknown path command {}'.format(cmd))
    return segs


def _segment_point(seg, t):
    kind, coords, _ = seg
    if kind == LINETO:
        return bezier.line_point(t, *coords)
    if kind == QUADTO:
        return bezier.quad_point(t, *coords)
    return bezier.cubic_point(t, *coords)


def _first_point(commands):
    for cmd in commands:
        if cmd.x is not None:
            return Point(cmd.x, cmd.y)
    return ZERO


def _sample(commands, segs, total, t):
    if total <= 0.0:
        return _first_point(commands)
    t = min(max(t, 0.0), 1.0)
    target = t * total
    acc = 0.0
    for seg in segs:
        seglen = seg[2]
        if seglen > 0.0 and acc + seglen >= target:
            x, y = _segment_point(seg, (target - acc) / seglen)
            return Point(x, y)
        acc += seglen
    # rounding left target a hair past the end
    for seg in reversed(segs):
        if seg[2] > 0.0:
            x, y = _segment_point(seg, 1.0)
            return Point(x, y)
    return _first_point(commands)


class Path(Transformable):
    """ordered drawing commands with fill, stroke and stroke width"""

    def __init__(self, commands=None, fill=BLACK, stroke=None, stroke_width=1.0):
        if isinstance(commands, Path):
            commands = commands.commands
        self.commands: List[Command] = []
        for cmd in commands or []:
            if not isinstance(cmd, Command):
                raise ValueError('bad command passed to Path: {}'.format(cmd))
            self.commands.append(cmd)
        self.fill = fill
        self.stroke = stroke
        self.stroke_width = stroke_width

    def __repr__(self):
        return 'Path({}, fill={}, stroke={}, stroke_width={})'.format(
            self.commands, self.fill, self.stroke, self.stroke_width)

    def __eq__(self, other):
        return (isinstance(other, Path) and
                self.commands == other.commands and
                self.fill == other.fill and
                self.stroke == other.stroke and
                self.stroke_width == other.stroke_width)

    __hash__ = None

    ## drawing

    def move_to(self, x, y):
        self.commands.append(moveto(x, y))
        return self

    def line_to(self, x, y):
        self.commands.append(lineto(x, y))
        return self

    def quad_to(self, x1, y1, x, y):
        self.commands.append(quadto(x1, y1, x, y))
        return self

    def curve_to(self, x1, y1, x2, y2, x, y):
        self.commands.append(curveto(x1, y1, x2, y2, x, y))
        return self

    def close(self):
        self.commands.append(closepath())
        return self

    def _derive(self, commands):
        return Path(commands, self.fill, self.stroke, self.stroke_width)

    ## construction helpers

    @classmethod
    def line(cls, x1, y1, x2, y2):
        return cls(fill=None, stroke=BLACK).move_to(x1, y1).line_to(x2, y2)

    @classmethod
    def rect(cls, x, y, width, height):
        p = cls()
        p.move_to(x, y)
        p.line_to(x + width, y)
        p.line_to(x + width, y + height)
        p.line_to(x, y + height)
        return p.close()

    @classmethod
    def ellipse(cls, x, y, width, height):
        """ellipse inscribed in the rect ``(x, y, width, height)``"""
        hw = width / 2
        hh = height / 2
        cx = x + hw
        cy = y + hh
        ox = hw * KAPPA
        oy = hh * KAPPA
        p = cls()
        p.move_to(x, cy)
        p.curve_to(x, cy - oy, cx - ox, y, cx, y)
        p.curve_to(cx + ox, y, x + width, cy - oy, x + width, cy)
        p.curve_to(x + width, cy + oy, cx + ox, y + height, cx, y + height)
        p.curve_to(cx - ox, y + height, x, cy + oy, x, cy)
        return p.close()

    @classmethod
    def polygon(cls, x, y, radius, sides=3):
        """regular polygon centered on ``(x, y)``"""
        if sides < 3:
            raise ValueError('a polygon needs at least three sides, got {}'.format(sides))
        p = cls()
        step = 2 * math.pi / sides
        for i in range(sides):
            px = x + math.cos(i * step) * radius
            py = y + math.sin(i * step) * radius
            if i == 0:
                p.move_to(px, py)
            else:
                p.line_to(px, py)
        return p.close()

    @classmethod
    def from_points(cls, points, closed=False, **attrs):
        p = cls(**attrs)
        for i, pt in enumerate(points):
            if i == 0:
                p.move_to(pt.x, pt.y)
            else:
                p.line_to(pt.x, pt.y)
        if closed and p.commands:
            p.close()
        return p

    @staticmethod
    def combine(shape) -> "Path":
        """join every leaf path of ``shape`` into a single Path"""
        from vgshape.shape import iter_paths

        commands = []
        first = None
        for p in iter_paths(shape):
            if first is None:
                first = p
            commands.extend(p.commands)
        if first is None:
            return Path()
        return first._derive(commands)

    ## structure

    def contours(self) -> List[List[Command]]:
        """Split into contours, each ending at CLOSE or before the next
        MOVETO.  Drawing that goes on after a CLOSE begins a new contour
        at the first point of the closed one."""
        contours = []
        current = []
        start = None
        for cmd in self.commands:
            if cmd.type == MOVETO:
                if current:
                    contours.append(current)
                current = [cmd]
                start = cmd
            elif not current and cmd.type == CLOSE:
                continue
            else:
                if not current and start is not None:
                    current = [start]
                current.append(cmd)
                if cmd.type == CLOSE:
                    contours.append(current)
                    current = []
        if current:
            contours.append(current)
        return contours

    def is_closed(self) -> bool:
        contours = self.contours()
        if not contours:
            return False
        return all(c[-1].type == CLOSE for c in contours)

    def map_points(self, fn: Callable[[float, float], Point]) -> "Path":
        return self._derive([map_command(cmd, fn) for cmd in self.commands])

    def colorize(self, fill=BLACK, stroke=None, stroke_width=1.0) -> "Path":
        return Path(self.commands, fill, stroke, stroke_width)

    ## measurement

    def bounds(self) -> Rect:
        xs = []
        ys = []
        cx = cy = 0.0
        for cmd in self.commands:
            t = cmd.type
            if t == MOVETO or t == LINETO:
                xs.append(cmd.x)
                ys.append(cmd.y)
            elif t == QUADTO:
                xs.append(cmd.x)
                ys.append(cmd.y)
                for u in bezier.quad_extrema(cx, cmd.x1, cmd.x):
                    xs.append(bezier.quad_point(u, cx, cy, cmd.x1, cmd.y1, cmd.x, cmd.y)[0])
                for u in bezier.quad_extrema(cy, cmd.y1, cmd.y):
                    ys.append(bezier.quad_point(u, cx, cy, cmd.x1, cmd.y1, cmd.x, cmd.y)[1])
            elif t == CURVETO:
                coords = (cx, cy, cmd.x1, cmd.y1, cmd.x2, cmd.y2, cmd.x, cmd.y)
                xs.append(cmd.x)
                ys.append(cmd.y)
                for u in bezier.cubic_extrema(cx, cmd.x1, cmd.x2, cmd.x):
                    xs.append(bezier.cubic_point(u, *coords)[0])
                for u in bezier.cubic_extrema(cy, cmd.y1, cmd.y2, cmd.y):
                    ys.append(bezier.cubic_point(u, *coords)[1])
            elif t != CLOSE:
                raise ValueError('unknown path command {}'.format(cmd))
            if cmd.x is not None:
                cx, cy = cmd.x, cmd.y
        if not xs:
            return Rect()
        x0 = min(xs)
        y0 = min(ys)
        return Rect(x0, y0, max(xs) - x0, max(ys) - y0)

    def length(self, precision=DEFAULT_PRECISION) -> float:
        return sum(seg[2] for seg in _segments(self.commands, precision))

    def point(self, t: float) -> Point:
        """point at arc-length parameter ``t`` (clamped to ``[0, 1]``)"""
        segs = _segments(self.commands)
        total = sum(seg[2] for seg in segs)
        return _sample(self.commands, segs, total, t)

    def points(self, amount: int, closed: bool = False) -> List[Point]:
        """``amount`` evenly spaced points along the path.

        With ``closed`` the last point stops one step short of the end,
        since the end coincides with the start.
        """
        if amount <= 0 or not self.commands:
            return []
        segs = _segments(self.commands)
        total = sum(seg[2] for seg in segs)
        if amount == 1:
            return [_sample(self.commands, segs, total, 0.0)]
        delta = 1.0 / amount if closed else 1.0 / (amount - 1)
        return [_sample(self.commands, segs, total, i * delta) for i in range(amount)]

    ## resampling

    def resample_by_length(self, max_length: float) -> "Path":
        """Rebuild as polylines whose vertices are at most ``max_length``
        apart along the path."""
        if max_length <= 0:
            raise ValueError('resample length must be positive, got {}'.format(max_length))
        commands = []
        for contour in self.contours():
            sub = Path(contour)
            closed = sub.is_closed()
            contour_length = sub.length()
            if contour_length < EPSILON:
                commands.append(moveto(*_first_point(contour)))
                if closed:
                    commands.append(closepath())
                continue
            amount = max(1, int(math.ceil(contour_length / max_length)))
            logger.debug('resampling contour of length %.3f into %d segments',
                         contour_length, amount)
            if closed:
                pts = sub.points(amount, closed=True)
            else:
                pts = sub.points(amount + 1)
            commands.extend(_polyline(pts, closed))
        return self._derive(commands)

    def resample_by_amount(self, amount: int, per_contour: bool = False) -> "Path":
        """Rebuild as a polyline of ``amount`` vertices, either across the
        whole path or for each contour separately."""
        if amount < 1:
            raise ValueError('resample amount must be at least 1, got {}'.format(amount))
        subpaths = self.contours() if per_contour else [self.commands]
        commands = []
        for cmds in subpaths:
            sub = Path(cmds)
            closed = sub.is_closed()
            commands.extend(_polyline(sub.points(amount, closed=closed), closed))
        return self._derive(commands)


def _polyline(points, closed):
    commands = []
    for i, pt in enumerate(points):
        commands.append(moveto(pt.x, pt.y) if i == 0 else lineto(pt.x, pt.y))
    if closed and commands:
        commands.append(closepath())
    return commands
