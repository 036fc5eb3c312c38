import pytest
from vgshape.geom import *
from vgshape.group import Group
from vgshape.path import Path
from vgshape.shape import *

"""tests for shape dispatch, traversal and the Group node"""


def square(x=0, y=0, size=10):
    return Path.rect(x, y, size, size)


class TestKind:

    def test_variants(self):
        assert kind_of(square()) is ShapeKind.PATH
        assert kind_of(Group()) is ShapeKind.GROUP
        assert kind_of([Point(0, 0), Point(1, 1)]) is ShapeKind.POINTS
        assert kind_of([square(), Group()]) is ShapeKind.SHAPES
        assert kind_of([]) is ShapeKind.SHAPES

    def test_not_a_shape(self):
        with pytest.raises(ValueError):
            kind_of(5)
        with pytest.raises(ValueError):
            kind_of(None)
        with pytest.raises(ValueError):
            kind_of(Rect(0, 0, 1, 1))

    def test_is_points(self):
        assert is_points([Point(0, 0)])
        assert not is_points([])
        assert not is_points(square())
        assert not is_points([Point(0, 0), square()])


class TestMapShape:
    """structure-preserving rebuilds"""

    def test_structure(self):
        a, b, c = square(), square(20), square(40)
        shape = [a, Group([b, Group([c])]), [Point(1, 1)]]
        out = map_shape(shape, lambda p: p.translate(Point(1, 0)))
        assert isinstance(out, list)
        assert out[0] == a.translate(Point(1, 0))
        assert isinstance(out[1], Group)
        assert isinstance(out[1].shapes[1], Group)
        assert out[1].shapes[1].shapes[0] == c.translate(Point(1, 0))
        ## point lists are copied when no callback is given
        assert out[2] == [Point(1, 1)]
        assert out[2] is not shape[2]

    def test_drop_leaves(self):
        shape = Group([square(), Group([square(20)])])
        out = map_shape(shape, lambda p: None)
        assert isinstance(out, Group)
        assert len(out) == 1
        assert len(out.shapes[0]) == 0

    def test_prune(self):
        shape = Group([square(), Group([square(20)])])
        out = map_shape(shape, lambda p: p if p.bounds().x == 0 else None, prune=True)
        assert len(out) == 1
        assert isinstance(out.shapes[0], Path)

    def test_top_level_kept_when_pruned(self):
        out = map_shape(Group([square()]), lambda p: None, prune=True)
        assert out == Group()

    def test_deep_nesting(self):
        leaf = square()
        g = Group([leaf])
        for i in range(5000):
            g = Group([g])
        assert list(iter_paths(g)) == [leaf]
        moved = map_shape(g, lambda p: p.translate(Point(5, 0)))
        assert list(iter_paths(moved))[0].bounds() == Rect(5, 0, 10, 10)
        assert g.bounds() == Rect(0, 0, 10, 10)


class TestTraversal:

    def test_order(self):
        a, b, c, d = square(), square(20), square(40), square(60)
        shape = [a, Group([b, Group([c])]), d]
        assert list(iter_paths(shape)) == [a, b, c, d]

    def test_leaves(self):
        pts = [Point(0, 0)]
        a = square()
        assert list(iter_leaves([a, [pts]])) == [a, pts]
        assert list(iter_paths([a, [pts]])) == [a]
        assert list(iter_leaves(a)) == [a]


class TestGroup:
    """Group node behaviour"""

    def test_children_checked(self):
        with pytest.raises(ValueError):
            Group([square(), [Point(0, 0)]])
        with pytest.raises(ValueError):
            Group(['x'])

    def test_container(self):
        a, b = square(), square(20)
        g = Group([a, b])
        assert len(g) == 2
        assert list(g) == [a, b]
        assert g == Group([a, b])
        assert g != Group([b, a])

    def test_bounds(self):
        g = Group([square(), Group([square(20, 20), Path()])])
        assert g.bounds() == Rect(0, 0, 30, 30)
        assert Group().bounds() == Rect()

    def test_length(self):
        assert Group([square(), Group([square(50)])]).length() == 80

    def test_colorize(self):
        g = Group([square(), Group([square(20)])]).colorize(WHITE, BLACK, 3)
        for p in iter_paths(g):
            assert (p.fill, p.stroke, p.stroke_width) == (WHITE, BLACK, 3)

    def test_resample(self):
        g = Group([square(), Group([square(20)])])
        r = g.resample_by_length(1)
        assert [len(p.commands) for p in iter_paths(r)] == [41, 41]
        r = g.resample_by_amount(4)
        assert [len(p.commands) for p in iter_paths(r)] == [5, 5]

    def test_transform(self):
        g = Group([square(), Group([square(20)])])
        moved = g.translate(Point(0, 100))
        assert moved.bounds() == Rect(0, 100, 30, 10)
        assert g.bounds() == Rect(0, 0, 30, 10)
