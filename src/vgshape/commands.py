## shape construction and manipulation commands for vgshape
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

"""shape operations for **vgshape**

===============
Overview
===============

The functions in this module accept any *shape* -- a ``Path``, a
``Group``, a list of ``Point`` values or a list of shapes -- determine
its variant with :func:`vgshape.shape.kind_of`, and return a freshly
built shape of the same structure.  Inputs are never modified, and
fill, stroke and stroke width are carried over to every derived path.

Passing ``None`` as the primary shape returns ``None`` (or the empty
value noted in the function's docstring) instead of raising, so
operations can be chained over selections that may be empty.
Malformed input -- a path command with an unknown tag, an unknown
delete scope -- raises ``ValueError``.

tunables
========

``DEFAULT_WIGGLE_OFFSET`` is the jitter used when no offset is given,
``POINTS_PER_SEGMENT`` the number of polygon vertices per path command
used for inside testing by :func:`scatter_points`, and
``SCATTER_ATTEMPTS`` the number of tries each scattered point gets.
Redefine these at your peril.

randomness
==========

The wiggle and scatter functions take a ``seed``.  The same seed always
reproduces the same output; omitting it draws a fresh seed from
:mod:`vgshape.prng`.

"""

import logging
import math
import sys
from dataclasses import replace

from vgshape import geom, prng
from vgshape.bezier import CLOSE, COMMAND_TYPES, MOVETO
from vgshape.compound import compound
from vgshape.geom import BLACK, Color, Point, Rect, ZERO
from vgshape.group import Group
from vgshape.path import DEFAULT_PRECISION, Path, map_command
from vgshape.shape import ShapeKind, is_points, iter_leaves, iter_paths, kind_of, map_shape
from vgshape.xform import Transform, Transformable, pair

logger = logging.getLogger(__name__)

HORIZONTAL = 'horizontal'
VERTICAL = 'vertical'

DEFAULT_WIGGLE_OFFSET = 10
POINTS_PER_SEGMENT = 5
SCATTER_ATTEMPTS = 100

## smallest bounds extent treated as non-zero by fit()
_MIN_EXTENT = 0.000000000001


def _copy_path(p):
    return Path(p.commands, p.fill, p.stroke, p.stroke_width)


_DONE = object()


## flatten nested argument lists, skipping None and empty lists
def _flatten(items):
    flat = []
    stack = [iter(items)]
    while stack:
        item = next(stack[-1], _DONE)
        if item is _DONE:
            stack.pop()
        elif item is None:
            continue
        elif isinstance(item, (list, tuple)) and not is_points(item):
            stack.append(iter(item))
        else:
            flat.append(item)
    return flat


def _is_color_list(o):
    return isinstance(o, (list, tuple)) and len(o) > 0 and isinstance(o[0], Color)


## ----------------------------------------
## construction and inspection

def bounds(o) -> Rect:
    """
    Return the smallest ``Rect`` enclosing ``o``.

    A point has a zero-size rect at its position.  Colors have no
    position, so a single color is a ``SWATCH_SIZE`` square at the
    origin and a list of colors a row of such squares.  Lists unite the
    bounds of their members; ``None`` and empty lists give ``Rect()``.
    """
    if o is None:
        return Rect()
    elif isinstance(o, (Path, Group)):
        return o.bounds()
    elif isinstance(o, Rect):
        return o
    elif isinstance(o, Point):
        return Rect(o.x, o.y, 0, 0)
    elif isinstance(o, Color):
        return Rect(0, 0, geom.SWATCH_SIZE, geom.SWATCH_SIZE)
    elif isinstance(o, (list, tuple)):
        if _is_color_list(o):
            return Rect(0, 0, len(o) * geom.SWATCH_SIZE, geom.SWATCH_SIZE)
        r = None
        stack = list(o)
        while stack:
            item = stack.pop()
            if item is None:
                continue
            if isinstance(item, (list, tuple)) and not _is_color_list(item):
                stack.extend(item)
                continue
            if isinstance(item, Path) and not item.commands:
                continue
            b = bounds(item)
            r = b if r is None else r.unite(b)
        return r or Rect()
    raise ValueError("inappropriate type for bounds(): {}".format(o))


def make_point(x, y) -> Point:
    return Point(x, y)


def make_rect(x, y, width, height) -> Rect:
    return Rect(x, y, width, height)


def make_centered_rect(cx, cy, width, height) -> Rect:
    return Rect(cx - width / 2, cy - height / 2, width, height)


def merge(*shapes) -> Group:
    """Combine all shape arguments, flattening lists, into one new Group.

    ``None`` and empty lists are skipped.
    """
    return Group([_copy_shape(s) for s in _flatten(shapes)])


def group(*shapes) -> Group:
    """Wrap the shape arguments in a new Group of copies."""
    return merge(*shapes)


def ungroup(shape) -> list:
    """Flatten ``shape`` into copies of its Path leaves, depth-first."""
    if shape is None:
        return []
    if isinstance(shape, (Path, Group)):
        return [_copy_path(p) for p in iter_paths(shape)]
    return []


def _copy_shape(s):
    if isinstance(s, Path):
        return _copy_path(s)
    return map_shape(s, _copy_path)


def combine_paths(shape) -> Path:
    if shape is None:
        return None
    return Path.combine(shape)


def shape_points(shape) -> list:
    """Every vertex of ``shape``: path command endpoints and list points."""
    if shape is None:
        return []
    pts = []
    for leaf in iter_leaves(shape):
        if isinstance(leaf, Path):
            pts.extend(Point(cmd.x, cmd.y) for cmd in leaf.commands
                       if cmd.x is not None)
        else:
            pts.extend(leaf)
    return pts


to_points = shape_points


def center_point(shape) -> Point:
    if shape is None:
        return ZERO
    return bounds(shape).center_point()


def colorize(shape, fill=BLACK, stroke=None, stroke_width=1.0):
    if shape is None:
        return None
    return map_shape(shape, lambda p: p.colorize(fill, stroke, stroke_width))


def connect_points(points, closed=False) -> Path:
    """Join ``points`` into an unfilled polyline with a black stroke."""
    if points is None:
        return None
    return Path.from_points(points, closed, fill=None, stroke=BLACK)


## ----------------------------------------
## transformation

def translate(shape, position):
    if shape is None:
        return None
    if isinstance(shape, Transformable):
        return shape.translate(position)
    return Transformable.translate(shape, position)


def scale(shape, scale, origin=ZERO):
    if shape is None:
        return None
    if isinstance(shape, Transformable):
        return shape.scale(scale, origin)
    return Transformable.scale(shape, scale, origin)


def rotate(shape, angle, origin=ZERO):
    if shape is None:
        return None
    if isinstance(shape, Transformable):
        return shape.rotate(angle, origin)
    return Transformable.rotate(shape, angle, origin)


def skew(shape, skew, origin=ZERO):
    if shape is None:
        return None
    if isinstance(shape, Transformable):
        return shape.skew(skew, origin)
    return Transformable.skew(shape, skew, origin)


def copy(shape, copies, order='tsr', translate=ZERO, rotate=0.0, scale=ZERO):
    """
    Return ``copies`` transformed duplicates of ``shape``.

    ``order`` lists the operations ``'t'`` (translate), ``'r'`` (rotate)
    and ``'s'`` (scale) in the order they are chained for each copy.
    Copy *i* is translated by ``i * translate``, rotated by
    ``i * rotate`` degrees and scaled by ``1 + i * scale`` per axis, so
    the first copy is the original.  The copies of a point list are
    concatenated into one list; any other shape gives a list of shapes.
    """
    if shape is None:
        return None
    dx, dy = pair(translate)
    dsx, dsy = pair(scale)
    points_input = is_points(shape)
    shapes = []
    tx = ty = r = 0.0
    sx = sy = 1.0
    for i in range(copies):
        t = Transform()
        for op in order:
            if op == 't':
                t = t.translate(tx, ty)
            elif op == 'r':
                t = t.rotate(r)
            elif op == 's':
                t = t.scale(sx, sy)
        if points_input:
            shapes.extend(t.transform_shape(shape))
        else:
            shapes.append(t.transform_shape(shape))
        tx += dx
        ty += dy
        r += rotate
        sx += dsx
        sy += dsy
    return shapes


def fit(shape, position, width, height, stretch=False):
    """
    Scale and move ``shape`` so its bounds fit a ``width`` x ``height``
    box centered on ``position``.

    Unless ``stretch`` is set the aspect ratio is kept: both axes use
    the smaller of the two ratios.  A zero extent puts no constraint on
    its axis (or, with ``stretch``, leaves that axis unscaled).
    """
    if shape is None:
        return None
    b = bounds(shape)
    bx, by, bw, bh = b.x, b.y, b.width, b.height

    # near-zero extents (e.g. a horizontal line) count as zero
    bw = bw if bw > _MIN_EXTENT else 0
    bh = bh if bh > _MIN_EXTENT else 0

    t = Transform().translate(position.x, position.y)
    if not stretch:
        sx = (width / bw) if bw > 0 else sys.float_info.max
        sy = (height / bh) if bh > 0 else sys.float_info.max
        sx = sy = min(sx, sy)
    else:
        sx = (width / bw) if bw > 0 else 1
        sy = (height / bh) if bh > 0 else 1

    t = t.scale(sx, sy)
    t = t.translate(-bw / 2 - bx, -bh / 2 - by)
    return t.transform_shape(shape)


def fit_to(shape, bounding, stretch=False):
    """Fit ``shape`` into the bounds of ``bounding``, centered."""
    if shape is None or bounding is None:
        return None
    b = bounds(bounding)
    return fit(shape, Point(b.x + b.width / 2, b.y + b.height / 2),
               b.width, b.height, stretch)


def align(shape, position, h_align=None, v_align=None):
    """
    Move ``shape`` so that the edge named by ``h_align`` (``'left'``,
    ``'center'``, ``'right'``) lies on ``position.x`` and the edge named
    by ``v_align`` (``'top'``, ``'middle'``, ``'bottom'``) on
    ``position.y``.  Any other value leaves that axis alone.
    """
    if shape is None:
        return None
    x = position.x
    y = position.y
    b = bounds(shape)
    if h_align == 'left':
        dx = x - b.x
    elif h_align == 'right':
        dx = x - b.x - b.width
    elif h_align == 'center':
        dx = x - b.x - b.width / 2
    else:
        dx = 0
    if v_align == 'top':
        dy = y - b.y
    elif v_align == 'bottom':
        dy = y - b.y - b.height
    elif v_align == 'middle':
        dy = y - b.y - b.height / 2
    else:
        dy = 0
    return Transform().translate(dx, dy).transform_shape(shape)


def _map_coordinates(shape, fn):
    return map_shape(shape,
                     lambda p: p.map_points(fn),
                     lambda pts: [fn(pt.x, pt.y) for pt in pts])


def mirror(shape, angle=90.0, origin=ZERO, keep_original=False):
    """
    Reflect ``shape`` across the line through ``origin`` at ``angle``
    degrees.

    With ``keep_original`` the result holds the original followed by
    the reflection: one concatenated list for a point list, a list of
    both for a shape list, and a Group of both otherwise.
    """
    if shape is None:
        return None
    if angle is None:
        angle = 90.0
    if origin is None:
        origin = ZERO

    def fn(x, y):
        ## project onto the mirror line, then step twice as far
        d = geom.distance(x, y, origin.x, origin.y)
        a = geom.angle(x, y, origin.x, origin.y)
        pt = geom.coordinates(origin.x, origin.y, 180 + angle,
                              d * math.cos(geom.radians(a - angle)))
        d = geom.distance(x, y, pt.x, pt.y)
        a = geom.angle(x, y, pt.x, pt.y)
        return geom.coordinates(x, y, a, d * 2)

    mirrored = _map_coordinates(shape, fn)

    if not keep_original:
        return mirrored
    kind = kind_of(shape)
    if kind is ShapeKind.POINTS:
        return list(shape) + mirrored
    if kind is ShapeKind.SHAPES:
        return [_copy_shape(shape), mirrored]
    return Group([_copy_shape(shape), mirrored])


def snap(shape, distance, strength=1.0, center=ZERO):
    """
    Snap every coordinate of ``shape`` (control points included) toward
    a grid of ``distance`` spacing offset by ``center``.  ``strength``
    blends between the original (0) and the snapped position (1).
    """
    if shape is None:
        return None
    if strength is None:
        strength = 1.0
    if center is None:
        center = ZERO

    def fn(x, y):
        return Point(geom.snap_value(x + center.x, distance, strength) - center.x,
                     geom.snap_value(y + center.y, distance, strength) - center.y)

    return _map_coordinates(shape, fn)


## ----------------------------------------
## measurement and resampling

def path_length(shape, precision=DEFAULT_PRECISION):
    if shape is None:
        return None
    total = 0.0
    for leaf in iter_leaves(shape):
        if isinstance(leaf, Path):
            total += leaf.length(precision)
        else:
            total += Path.from_points(leaf).length(precision)
    return total


def resample_by_length(shape, max_length):
    if shape is None:
        return None
    return map_shape(shape, lambda p: p.resample_by_length(max_length))


def resample_by_amount(shape, amount, per_contour=False):
    if shape is None:
        return None
    return map_shape(shape, lambda p: p.resample_by_amount(amount, per_contour))


def point_on_path(shape, t):
    """
    The point at parameter ``t`` along ``shape``.  ``t`` wraps modulo 1,
    so negative values count back from the end.  Groups and shape lists
    are first combined into one path.
    """
    if shape is None:
        return None
    kind = kind_of(shape)
    if kind is ShapeKind.POINTS:
        shape = Path.from_points(shape)
    elif kind is not ShapeKind.PATH:
        shape = Path.combine(shape)
    t = t % 1
    if t < 0:
        t += 1
    pt = shape.point(t)
    return Point(pt.x, pt.y)


## ----------------------------------------
## randomization

def _offsets(offset):
    if offset is None:
        offset = DEFAULT_WIGGLE_OFFSET
    return pair(offset)


def _jitter(rand, ox, oy):
    dx = (rand(0, 1) - 0.5) * ox * 2
    dy = (rand(0, 1) - 0.5) * oy * 2
    return dx, dy


def _translate_commands(commands, dx, dy):
    return [map_command(cmd, lambda x, y: Point(x + dx, y + dy)) for cmd in commands]


def wiggle_points(shape, offset=None, seed=None):
    """
    Jitter every vertex of ``shape`` independently by up to ``offset``
    (a number or a Point for per-axis offsets) in each direction.
    Curve control points stay in place.
    """
    if shape is None:
        return None
    ox, oy = _offsets(offset)
    rand = prng.generator(seed)

    def wiggle_path(p):
        commands = []
        for cmd in p.commands:
            if cmd.type == CLOSE:
                commands.append(cmd)
                continue
            if cmd.type not in COMMAND_TYPES:
                raise ValueError('unknown path command {}'.format(cmd))
            dx, dy = _jitter(rand, ox, oy)
            commands.append(replace(cmd, x=cmd.x + dx, y=cmd.y + dy))
        return Path(commands, p.fill, p.stroke, p.stroke_width)

    def wiggle_list(pts):
        wiggled = []
        for pt in pts:
            dx, dy = _jitter(rand, ox, oy)
            wiggled.append(Point(pt.x + dx, pt.y + dy))
        return wiggled

    return map_shape(shape, wiggle_path, wiggle_list)


def wiggle_contours(shape, offset=None, seed=None):
    """Move each contour of ``shape`` by its own random offset.  A point
    list moves as a single contour."""
    if shape is None:
        return None
    ox, oy = _offsets(offset)
    rand = prng.generator(seed)

    def wiggle_path(p):
        commands = []
        for contour in p.contours():
            dx, dy = _jitter(rand, ox, oy)
            commands.extend(_translate_commands(contour, dx, dy))
        return Path(commands, p.fill, p.stroke, p.stroke_width)

    def wiggle_list(pts):
        dx, dy = _jitter(rand, ox, oy)
        return [Point(pt.x + dx, pt.y + dy) for pt in pts]

    return map_shape(shape, wiggle_path, wiggle_list)


def wiggle_paths(shape, offset=None, seed=None):
    """
    Move each Path inside a Group or shape list by its own random
    offset.  A lone Path or point list has nothing to move relative to
    and comes back unchanged, as do point lists nested in a shape list.
    """
    if shape is None:
        return None
    ox, oy = _offsets(offset)
    rand = prng.generator(seed)
    kind = kind_of(shape)
    if kind is ShapeKind.PATH:
        return _copy_path(shape)
    if kind is ShapeKind.POINTS:
        return list(shape)

    def wiggle_path(p):
        dx, dy = _jitter(rand, ox, oy)
        return Path(_translate_commands(p.commands, dx, dy),
                    p.fill, p.stroke, p.stroke_width)

    return map_shape(shape, wiggle_path)


def scatter_points(shape, amount, seed=None):
    """
    Generate up to ``amount`` random points inside the outline of
    ``shape``.

    Candidates are drawn uniformly from the bounds and kept when they
    fall inside an odd number of contours.  Each point gets
    ``SCATTER_ATTEMPTS`` tries and is skipped if none lands inside, so
    thin or sparse shapes can yield fewer points than requested.
    """
    if shape is None:
        return None
    rand = prng.generator(seed)
    if is_points(shape):
        path = Path.from_points(shape, closed=True)
    else:
        path = Path.combine(shape)
    b = path.bounds()

    rings = []
    for contour in path.contours():
        rings.append(Path(contour).points(len(contour) * POINTS_PER_SEGMENT, closed=True))

    points = []
    for i in range(amount):
        for attempt in range(SCATTER_ATTEMPTS):
            x = b.x + rand(0, 1) * b.width
            y = b.y + rand(0, 1) * b.height
            hits = 0
            for ring in rings:
                if geom.point_in_polygon(ring, x, y):
                    hits += 1
            if hits % 2:
                points.append(Point(x, y))
                break
    if len(points) < amount:
        logger.debug('scatter_points placed %d of %d requested points',
                     len(points), amount)
    return points


## ----------------------------------------
## selection and ordering

def delete_points(shape, bounding, invert=False):
    """
    Remove the vertices inside ``bounding`` (or, with ``invert``, the
    ones outside).  The first surviving vertex of each contour becomes
    its MOVETO; a CLOSE whose contour lost every vertex is dropped.
    """
    def keep(x, y):
        return bounding.contains(x, y) == bool(invert)

    def delete_from_path(p):
        commands = []
        started = False
        for cmd in p.commands:
            t = cmd.type
            if t not in COMMAND_TYPES:
                raise ValueError('unknown path command {}'.format(cmd))
            if t == CLOSE:
                if started:
                    commands.append(cmd)
                started = False
                continue
            if t == MOVETO:
                started = False
            if not keep(cmd.x, cmd.y):
                continue
            if not started:
                cmd = cmd.with_type(MOVETO)
                started = True
            commands.append(cmd)
        return Path(commands, p.fill, p.stroke, p.stroke_width)

    def delete_from_list(pts):
        return [pt for pt in pts if keep(pt.x, pt.y)]

    return map_shape(shape, delete_from_path, delete_from_list)


def delete_paths(shape, bounding, invert=False):
    """
    Remove every path that has a vertex inside ``bounding`` (or, with
    ``invert``, every path that has none).  A point list counts as one
    path.  Groups left empty are dropped; a lone path that is removed
    gives ``None``.
    """
    def selected(pts):
        return any(bounding.contains(x, y) for x, y in pts)

    def path_vertices(p):
        return ((cmd.x, cmd.y) for cmd in p.commands if cmd.x is not None)

    def filter_path(p):
        if selected(path_vertices(p)) == bool(invert):
            return _copy_path(p)
        return None

    def filter_list(pts):
        if selected((pt.x, pt.y) for pt in pts) == bool(invert):
            return list(pts)
        return None

    return map_shape(shape, filter_path, filter_list, prune=True)


def delete(shape, bounding, scope, invert=False):
    """Delete ``'points'`` or whole ``'paths'`` selected by ``bounding``."""
    if shape is None or bounding is None:
        return None
    if scope == 'points':
        return delete_points(shape, bounding, invert)
    if scope == 'paths':
        return delete_paths(shape, bounding, invert)
    raise ValueError('Invalid scope: {}'.format(scope))


def _x(shape):
    if isinstance(shape, Point):
        return shape.x
    return bounds(shape).x


def _y(shape):
    if isinstance(shape, Point):
        return shape.y
    return bounds(shape).y


def _center(shape):
    if isinstance(shape, Point):
        return shape
    return bounds(shape).center_point()


def _angle_to_point(point):
    def key(shape):
        c = _center(shape)
        return geom.angle(c.x, c.y, point.x, point.y)
    return key


def _distance_to_point(point):
    def key(shape):
        c = _center(shape)
        return geom.distance(c.x, c.y, point.x, point.y)
    return key


def shape_sort(shapes, method, origin=ZERO):
    """
    Return a sorted copy of ``shapes`` (shapes or points) ordered by
    ``'x'``, ``'y'``, ``'angle'`` or ``'distance'`` relative to
    ``origin``.  Ties keep their input order; an unknown method returns
    ``shapes`` unchanged.
    """
    if shapes is None:
        return None
    if origin is None:
        origin = ZERO
    methods = {
        'x': _x,
        'y': _y,
        'angle': _angle_to_point(origin),
        'distance': _distance_to_point(origin),
    }
    key = methods.get(method)
    if key is None:
        return shapes
    return sorted(shapes, key=key)


def link(shape1, shape2, orientation=HORIZONTAL):
    """
    A closed ribbon joining the facing edges of the bounds of two
    shapes with one cubic curve per side.  ``HORIZONTAL`` links the
    right edge of ``shape1`` to the left edge of ``shape2``;
    ``VERTICAL`` links the bottom of ``shape1`` to the top of
    ``shape2``.
    """
    if shape1 is None or shape2 is None:
        return None
    p = Path()
    a = bounds(shape1)
    b = bounds(shape2)
    if orientation == HORIZONTAL:
        hw = (b.x - (a.x + a.width)) / 2
        p.move_to(a.x + a.width, a.y)
        p.curve_to(a.x + a.width + hw, a.y, b.x - hw, b.y, b.x, b.y)
        p.line_to(b.x, b.y + b.height)
        p.curve_to(b.x - hw, b.y + b.height, a.x + a.width + hw, a.y + a.height,
                   a.x + a.width, a.y + a.height)
        p.close()
    else:
        hh = (b.y - (a.y + a.height)) / 2
        p.move_to(a.x, a.y + a.height)
        p.curve_to(a.x, a.y + a.height + hh, b.x, b.y - hh, b.x, b.y)
        p.line_to(b.x + b.width, b.y)
        p.curve_to(b.x + b.width, b.y - hh, a.x + a.width, a.y + a.height + hh,
                   a.x + a.width, a.y + a.height)
        p.close()
    return p


__all__ = [
    'HORIZONTAL', 'VERTICAL',
    'bounds', 'make_point', 'make_rect', 'make_centered_rect',
    'merge', 'group', 'ungroup', 'combine_paths', 'shape_points', 'to_points',
    'center_point', 'colorize', 'connect_points',
    'translate', 'scale', 'rotate', 'skew', 'copy', 'fit', 'fit_to',
    'align', 'mirror', 'snap',
    'path_length', 'resample_by_length', 'resample_by_amount', 'point_on_path',
    'wiggle_points', 'wiggle_contours', 'wiggle_paths', 'scatter_points',
    'delete_points', 'delete_paths', 'delete', 'shape_sort', 'link',
    'compound',
]
