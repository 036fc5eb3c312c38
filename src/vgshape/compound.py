## vgshape boolean operation support for 2D paths
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
Compound (boolean) operations
=============================

``compound(shape1, shape2, method)`` computes the union, difference,
intersection or xor of the outlines of two shapes.

Curves cannot be clipped exactly, so both shapes are first resampled
into polylines with vertices at most ``RESAMPLE_LENGTH`` apart.  The
rings are scaled by ``SCALE`` and rounded onto the integer grid before
clipping, results are cleaned of vertices closer than
``CLEAN_DISTANCE`` and scaled back.  The output is a single Path of
straight segments, one closed contour per result ring.  Outer rings
run counter-clockwise and holes clockwise.

Rings are filled with the nonzero rule: a region belongs to a shape
when the rings of that shape wind around it a non-zero number of
times, so oppositely wound rings cut holes only where they overlap.
``shape1`` is the subject and ``shape2`` the clip.  An open subject
path is clipped as a set of polylines and its pieces come back as open
contours.
"""

import logging

import numpy as np
from shapely.geometry import LineString, MultiLineString, Polygon
from shapely.geometry.base import BaseMultipartGeometry
from shapely.geometry.polygon import orient
from shapely.ops import polygonize, unary_union

from vgshape.bezier import CLOSE
from vgshape.path import Path
from vgshape.shape import is_points

logger = logging.getLogger(__name__)

SCALE = 100
RESAMPLE_LENGTH = 1
CLEAN_DISTANCE = 0.1

METHODS = ('union', 'difference', 'intersection', 'xor')


def _union(a, b):
    return a.union(b)


def _difference(a, b):
    return a.difference(b)


def _intersection(a, b):
    return a.intersection(b)


def _xor(a, b):
    return a.symmetric_difference(b)


_OPERATIONS = {
    'union': _union,
    'difference': _difference,
    'intersection': _intersection,
    'xor': _xor,
}


def _as_path(shape):
    if isinstance(shape, Path):
        return shape
    if is_points(shape):
        return Path.from_points(shape, closed=True)
    return Path.combine(shape)


def _rings(path):
    """resampled contours as lists of scaled, grid-rounded vertices"""
    rings = []
    for contour in path.resample_by_length(RESAMPLE_LENGTH).contours():
        ring = [(cmd.x, cmd.y) for cmd in contour if cmd.type != CLOSE]
        if ring:
            rings.append(np.rint(np.asarray(ring, dtype=float) * SCALE))
    return rings


def _winding_number(ring, x, y):
    """signed count of the turns the closed ``ring`` makes around ``(x, y)``"""
    x0 = ring[:, 0]
    y0 = ring[:, 1]
    x1 = np.roll(x0, -1)
    y1 = np.roll(y0, -1)
    side = (x1 - x0) * (y - y0) - (x - x0) * (y1 - y0)
    up = (y0 <= y) & (y1 > y) & (side > 0)
    down = (y0 > y) & (y1 <= y) & (side < 0)
    return int(np.count_nonzero(up)) - int(np.count_nonzero(down))


def _fill(rings):
    """polygonal region covered by ``rings`` under the nonzero rule"""
    rings = [ring for ring in rings if len(np.unique(ring, axis=0)) >= 3]
    if not rings:
        return Polygon()

    ## node the rings against each other, then keep every face of the
    ## arrangement whose total winding number is not zero
    edges = unary_union([LineString(np.vstack([ring, ring[:1]])) for ring in rings])
    filled = []
    for face in polygonize(edges):
        pt = face.representative_point()
        if sum(_winding_number(ring, pt.x, pt.y) for ring in rings) != 0:
            filled.append(face)
    if not filled:
        return Polygon()
    return unary_union(filled)


def _polylines(rings):
    lines = [ring for ring in rings if len(ring) >= 2]
    if not lines:
        return MultiLineString()
    return MultiLineString(lines)


def _clean(coords, tolerance):
    """drop vertices closer than ``tolerance`` to the previous kept one"""
    kept = [coords[0]]
    for pt in coords[1:]:
        if np.hypot(*(pt - kept[-1])) >= tolerance:
            kept.append(pt)
    return np.asarray(kept)


def _parts(geometry):
    if geometry.is_empty:
        return []
    if isinstance(geometry, BaseMultipartGeometry):
        parts = []
        for g in geometry.geoms:
            parts.extend(_parts(g))
        return parts
    return [geometry]


def _solution(geometry):
    """yield ``(coords, closed)`` for every ring or polyline in the result"""
    tolerance = CLEAN_DISTANCE * SCALE
    for part in _parts(geometry):
        if isinstance(part, Polygon):
            part = orient(part)
            for ring in [part.exterior, *part.interiors]:
                # back onto the grid; drop the repeated closing vertex
                coords = _clean(np.rint(np.asarray(ring.coords)[:-1]), tolerance)
                if len(coords) >= 3:
                    yield coords / SCALE, True
        elif isinstance(part, LineString):
            coords = _clean(np.rint(np.asarray(part.coords)), tolerance)
            if len(coords) >= 2:
                yield coords / SCALE, False


def compound(shape1, shape2, method):
    """
    Boolean combination of the outlines of ``shape1`` (subject) and
    ``shape2`` (clip).  ``method`` is one of ``'union'``,
    ``'difference'``, ``'intersection'`` or ``'xor'``; anything else
    raises ``ValueError``.
    """
    if shape1 is None or shape2 is None:
        return None
    operation = _OPERATIONS.get(method)
    if operation is None:
        raise ValueError('unsupported compound operation: {}'.format(method))

    path1 = _as_path(shape1)
    path2 = _as_path(shape2)
    subject_rings = _rings(path1)
    clip_rings = _rings(path2)
    logger.debug('compound %s: %d subject rings, %d clip rings',
                 method, len(subject_rings), len(clip_rings))

    if path1.is_closed():
        subject = _fill(subject_rings)
    else:
        subject = _polylines(subject_rings)
    clip = _fill(clip_rings)

    path = Path()
    for coords, closed in _solution(operation(subject, clip)):
        for j, (x, y) in enumerate(coords):
            if j == 0:
                path.move_to(float(x), float(y))
            else:
                path.line_to(float(x), float(y))
        if closed and (coords[0] != coords[-1]).any():
            path.close()
    return path
