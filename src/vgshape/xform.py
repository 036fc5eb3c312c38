## affine matrix transformation operations for 2D coordinates in vgshape

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

from math import cos, sin, tan

from vgshape import geom
from vgshape.geom import Point, ZERO

## a transform is represented as a 3x3 matrix of homogeneous 2D
## coordinates, stored as a list of three rows.  Points are treated as
## column vectors, so Mp maps p.  The bottom row is always [0,0,1].

## Transform instances are never modified after construction.  Every
## operation (translate, rotate, scale, skew, append, prepend) returns
## a new Transform.  Operations chained onto a transform act on points
## *before* the operations already present: T.translate(d).scale(s)
## scales first and then translates.


class Transform:
    """3x3 affine transformation matrix for 2D coordinates"""

    def __init__(self, a=False):
        self.m = [[1, 0, 0],
                  [0, 1, 0],
                  [0, 0, 1]]

        if isinstance(a, Transform):
            self.m = [list(row) for row in a.m]

        elif isinstance(a, (tuple, list)):
            if len(a) == 3:
                for i in range(3):
                    if len(a[i]) != 3:
                        raise ValueError('bad row in transform initialization: {}'.format(a[i]))
                    for j in range(3):
                        self.m[i][j] = _checked(a[i][j])
            elif len(a) == 6:
                ## canvas-style (a, b, c, d, e, f) coefficients
                self.m = [[_checked(a[0]), _checked(a[2]), _checked(a[4])],
                          [_checked(a[1]), _checked(a[3]), _checked(a[5])],
                          [0, 0, 1]]
            else:
                raise ValueError('bad thing used in attempt to initialize transform: {}'.format(a))

        elif a is not False and a is not None:
            raise ValueError('bad thing used in attempt to initialize transform: {}'.format(a))

    def __repr__(self):
        return "Transform({},{},{})".format(self.m[0], self.m[1], self.m[2])

    def __eq__(self, other):
        return isinstance(other, Transform) and self.m == other.m

    # return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 2 or j < 0 or j > 2:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    def getrow(self, i):
        if i < 0 or i > 2:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 2:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j], self.m[1][j], self.m[2][j]]

    # matrix multiply.  If x is a transform, compute MX.  If x is a
    # point, compute Mx.
    def mul(self, x):
        if isinstance(x, Transform):
            rows = []
            for i in range(3):
                r = self.getrow(i)
                rows.append([sum(r[k] * x.m[k][j] for k in range(3))
                             for j in range(3)])
            return Transform(rows)
        elif isinstance(x, Point):
            return self.transform_point(x.x, x.y)

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def append(self, other):
        """apply ``other`` to points before this transform"""
        return self.mul(other)

    def prepend(self, other):
        """apply ``other`` to points after this transform"""
        return other.mul(self)

    def translate(self, tx=0.0, ty=0.0):
        return self.mul(Translation(tx, ty))

    def rotate(self, angle=0.0):
        return self.mul(Rotation(angle))

    def scale(self, sx=1.0, sy=None):
        return self.mul(Scale(sx, sy))

    def skew(self, kx=0.0, ky=0.0):
        return self.mul(Skew(kx, ky))

    def transform_point(self, x, y=None):
        if y is None:
            x, y = x.x, x.y
        m = self.m
        return Point(m[0][0] * x + m[0][1] * y + m[0][2],
                     m[1][0] * x + m[1][1] * y + m[1][2])

    def transform_shape(self, shape):
        """Return a copy of ``shape`` with every coordinate transformed.

        ``shape`` may be a Path, a Group, a list of points or a list of
        shapes; the result has the same structure.
        """
        from vgshape.shape import map_shape

        return map_shape(shape,
                         lambda p: p.map_points(self.transform_point),
                         lambda pts: [self.transform_point(pt) for pt in pts])


def _checked(x):
    if not geom.isgoodnum(x):
        raise ValueError('bad element in transform initialization: {}'.format(x))
    return x


def pair(value):
    """split a scalar, point or 2-sequence into an ``(x, y)`` tuple"""
    if isinstance(value, Point):
        return value.x, value.y
    if isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise ValueError('expected a pair of numbers, got {}'.format(value))
        return value[0], value[1]
    if geom.isgoodnum(value):
        return value, value
    raise ValueError('bad value passed where a number or point was expected: {}'.format(value))


def Translation(tx, ty=0.0):
    return Transform([[1, 0, tx],
                      [0, 1, ty],
                      [0, 0, 1]])


def Rotation(angle):
    rad = geom.radians(angle)
    c = cos(rad)
    s = sin(rad)
    return Transform([[c, -s, 0],
                      [s, c, 0],
                      [0, 0, 1]])


def Scale(sx, sy=None):
    if sy is None:
        sy = sx
    return Transform([[sx, 0, 0],
                      [0, sy, 0],
                      [0, 0, 1]])


def Skew(kx, ky=0.0):
    return Transform([[1, tan(geom.radians(kx)), 0],
                      [tan(geom.radians(ky)), 1, 0],
                      [0, 0, 1]])


class Transformable:
    """Mixin giving shapes translate/scale/rotate/skew.

    The methods only need ``Transform.transform_shape`` to understand
    ``self``, so they can also be called unbound on a list of points or
    shapes, e.g. ``Transformable.rotate(points, 45)``.
    """

    def translate(self, position):
        tx, ty = pair(position)
        return Transform().translate(tx, ty).transform_shape(self)

    def scale(self, scale, origin=ZERO):
        sx, sy = pair(scale)
        t = Transform().translate(origin.x, origin.y)
        t = t.scale(sx, sy)
        t = t.translate(-origin.x, -origin.y)
        return t.transform_shape(self)

    def rotate(self, angle, origin=ZERO):
        t = Transform().translate(origin.x, origin.y)
        t = t.rotate(angle)
        t = t.translate(-origin.x, -origin.y)
        return t.transform_shape(self)

    def skew(self, skew, origin=ZERO):
        kx, ky = pair(skew)
        t = Transform().translate(origin.x, origin.y)
        t = t.skew(kx, ky)
        t = t.translate(-origin.x, -origin.y)
        return t.transform_shape(self)
