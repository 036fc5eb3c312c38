import pytest
from vgshape.geom import *
## unit tests for vgshape geom.py


class TestPoint:
    """Point value semantics"""

    def test_equality(self):
        assert Point(1, 2) == Point(1, 2)
        assert Point(1, 2) != Point(2, 1)
        assert ZERO == Point(0, 0)

    def test_unpack(self):
        x, y = Point(3, 4)
        assert (x, y) == (3, 4)

    def test_frozen(self):
        p = Point(1, 2)
        with pytest.raises(Exception):
            p.x = 5


class TestRect:
    """Rect union, containment and center"""

    def test_unite(self):
        assert Rect(0, 0, 2, 2).unite(Rect(1, 1, 3, 3)) == Rect(0, 0, 4, 4)
        assert Rect(5, 5, 1, 1).unite(Rect(-1, 0, 1, 1)) == Rect(-1, 0, 7, 6)

    def test_contains_edges(self):
        r = Rect(0, 0, 10, 10)
        assert r.contains(5, 5)
        assert r.contains(0, 0)
        assert r.contains(10, 10)
        assert r.contains(0, 7)
        assert not r.contains(-0.1, 5)
        assert not r.contains(5, 10.1)

    def test_contains_point(self):
        r = Rect(0, 0, 10, 10)
        assert r.contains(Point(3, 3))
        assert not r.contains(Point(11, 3))

    def test_center_point(self):
        assert Rect(0, 0, 4, 2).center_point() == Point(2, 1)
        assert Rect(-2, -2, 4, 4).center_point() == Point(0, 0)


class TestColor:

    def test_defaults(self):
        assert Color(1, 0, 0).a == 1
        assert BLACK == Color(0, 0, 0, 1)
        assert WHITE == Color(1, 1, 1, 1)


class TestHelpers:
    """scalar and angle helpers"""

    def test_isgoodnum(self):
        assert isgoodnum(1)
        assert isgoodnum(-2.5)
        assert not isgoodnum(True)
        assert not isgoodnum(float('nan'))
        assert not isgoodnum(float('inf'))
        assert not isgoodnum('1')

    def test_angles(self):
        assert radians(180) == pytest.approx(math.pi)
        assert degrees(math.pi / 2) == pytest.approx(90)
        assert angle(0, 0, 0, 1) == pytest.approx(90)
        assert angle(0, 0, -1, 0) == pytest.approx(180)
        assert angle(1, 1, 2, 2) == pytest.approx(45)

    def test_distance(self):
        assert distance(0, 0, 3, 4) == 5
        assert distance(1, 1, 1, 1) == 0

    def test_coordinates(self):
        p = coordinates(0, 0, 90, 2)
        assert tuple(p) == pytest.approx((0, 2))
        p = coordinates(1, 1, 180, 1)
        assert tuple(p) == pytest.approx((0, 1))

    def test_clamp(self):
        assert clamp(5, 0, 1) == 1
        assert clamp(-5, 0, 1) == 0
        assert clamp(0.5, 0, 1) == 0.5

    def test_snap_value(self):
        assert snap_value(4.9, 10) == 0
        assert snap_value(5, 10) == 10
        assert snap_value(-5, 10) == 0
        assert snap_value(23, 10) == 20
        ## half strength lands halfway between value and grid
        assert snap_value(7, 10, 0.5) == pytest.approx(8.5)
        assert snap_value(7, 10, 0) == 7

    def test_point_in_polygon(self):
        square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        assert point_in_polygon(square, 5, 5)
        assert not point_in_polygon(square, 15, 5)
        assert not point_in_polygon(square, 5, -1)
        assert not point_in_polygon(square[:2], 5, 0)
