"""Group: an ordered tree node holding Paths and nested Groups."""

from __future__ import annotations

from vgshape.geom import BLACK, Rect
from vgshape.path import DEFAULT_PRECISION, Path
from vgshape.xform import Transformable


class Group(Transformable):
    """ordered collection of child Paths and Groups"""

    def __init__(self, shapes=None):
        self.shapes = []
        for s in shapes or []:
            if not isinstance(s, (Path, Group)):
                raise ValueError('bad shape passed to Group: {}'.format(s))
            self.shapes.append(s)

    def __repr__(self):
        return 'Group({})'.format(self.shapes)

    def __eq__(self, other):
        return isinstance(other, Group) and self.shapes == other.shapes

    __hash__ = None

    def __len__(self):
        return len(self.shapes)

    def __iter__(self):
        return iter(self.shapes)

    def bounds(self) -> Rect:
        from vgshape.shape import iter_paths

        r = None
        for p in iter_paths(self):
            if not p.commands:
                continue
            b = p.bounds()
            r = b if r is None else r.unite(b)
        return r or Rect()

    def length(self, precision=DEFAULT_PRECISION) -> float:
        from vgshape.shape import iter_paths

        return sum(p.length(precision) for p in iter_paths(self))

    def colorize(self, fill=BLACK, stroke=None, stroke_width=1.0) -> "Group":
        from vgshape.shape import map_shape

        return map_shape(self, lambda p: p.colorize(fill, stroke, stroke_width))

    def resample_by_length(self, max_length) -> "Group":
        from vgshape.shape import map_shape

        return map_shape(self, lambda p: p.resample_by_length(max_length))

    def resample_by_amount(self, amount, per_contour=False) -> "Group":
        from vgshape.shape import map_shape

        return map_shape(self, lambda p: p.resample_by_amount(amount, per_contour))
