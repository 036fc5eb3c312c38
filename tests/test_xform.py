import pytest
from vgshape.xform import *
from vgshape.geom import Point, ZERO
## unit tests for vgshape xform.py


def approx_point(p, x, y):
    return tuple(p) == pytest.approx((x, y), abs=1e-9)


class TestTransform:
    """unit tests for vgshape affine transforms"""

    def test_identity(self):
        I = Transform()
        assert I.m == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
        assert I.mul(Point(3, 4)) == Point(3, 4)
        assert I.mul(I) == I

    def test_init(self):
        t = Transform([1, 0, 0, 1, 5, 6])
        assert t.transform_point(0, 0) == Point(5, 6)
        rows = [[2, 0, 1], [0, 2, 1], [0, 0, 1]]
        assert Transform(rows).m == rows
        assert Transform(Transform(rows)) == Transform(rows)

    def test_bad_init(self):
        with pytest.raises(ValueError):
            Transform([1, 2])
        with pytest.raises(ValueError):
            Transform('foo')
        with pytest.raises(ValueError):
            Transform([[1, 0], [0, 1], [0, 0]])
        with pytest.raises(ValueError):
            Transform([1, 0, 0, 1, float('nan'), 0])

    def test_accessors(self):
        t = Translation(5, 6)
        assert t.get(0, 2) == 5
        assert t.getrow(1) == [0, 1, 6]
        assert t.getcol(2) == [5, 6, 1]
        with pytest.raises(ValueError):
            t.get(3, 0)
        with pytest.raises(ValueError):
            t.mul('bar')

    def test_translate(self):
        t = Transform().translate(5, 3)
        assert t.transform_point(1, 1) == Point(6, 4)
        assert t.transform_point(Point(0, 0)) == Point(5, 3)

    def test_chaining_order(self):
        ## chained operations act on points first
        t = Transform().translate(10, 0).scale(2)
        assert t.transform_point(1, 0) == Point(12, 0)
        t = Transform().scale(2).translate(10, 0)
        assert t.transform_point(1, 0) == Point(22, 0)

    def test_append_prepend(self):
        s = Scale(2)
        tr = Translation(10, 0)
        assert tr.append(s).transform_point(1, 0) == Point(12, 0)
        assert tr.prepend(s).transform_point(1, 0) == Point(22, 0)

    def test_rotate(self):
        t = Transform().rotate(90)
        assert approx_point(t.transform_point(1, 0), 0, 1)
        t = Transform().rotate(180)
        assert approx_point(t.transform_point(1, 2), -1, -2)

    def test_scale(self):
        assert Transform().scale(2, 3).transform_point(1, 1) == Point(2, 3)
        assert Transform().scale(2).transform_point(1, 1) == Point(2, 2)

    def test_skew(self):
        t = Transform().skew(45, 0)
        assert approx_point(t.transform_point(0, 1), 1, 1)
        t = Transform().skew(0, 45)
        assert approx_point(t.transform_point(2, 0), 2, 2)

    def test_immutable(self):
        t = Transform()
        t.translate(5, 5)
        assert t == Transform()

    def test_transform_points(self):
        pts = [Point(0, 0), Point(1, 0)]
        out = Translation(1, 1).transform_shape(pts)
        assert out == [Point(1, 1), Point(2, 1)]
        assert pts == [Point(0, 0), Point(1, 0)]


class TestPair:

    def test_pair(self):
        assert pair(3) == (3, 3)
        assert pair(Point(1, 2)) == (1, 2)
        assert pair([4, 5]) == (4, 5)
        with pytest.raises(ValueError):
            pair([1, 2, 3])
        with pytest.raises(ValueError):
            pair('x')


class TestTransformable:
    """unbound use of the Transformable methods on point lists"""

    pts = [Point(1, 0), Point(2, 0)]

    def test_translate(self):
        assert Transformable.translate(self.pts, Point(1, 1)) == [Point(2, 1), Point(3, 1)]
        assert Transformable.translate(self.pts, 2) == [Point(3, 2), Point(4, 2)]

    def test_scale_origin(self):
        out = Transformable.scale(self.pts, 2, Point(1, 0))
        assert out == [Point(1, 0), Point(3, 0)]

    def test_rotate_origin(self):
        out = Transformable.rotate(self.pts, 90, Point(1, 0))
        assert approx_point(out[0], 1, 0)
        assert approx_point(out[1], 1, 1)

    def test_skew_origin(self):
        out = Transformable.skew([Point(0, 2)], Point(45, 0), Point(0, 1))
        assert approx_point(out[0], 1, 2)
