"""Shape variants and tree traversal.

Every vgshape operation accepts a *shape*: a ``Path``, a ``Group``, a
list of ``Point`` values, or a list of shapes.  ``kind_of`` tags a value
with its ``ShapeKind`` so operations dispatch on an explicit variant.

The traversals here walk Groups and shape lists with an explicit stack
instead of recursion, so arbitrarily deep nesting is safe.  Leaves are
visited depth-first in document order, which matters to callers that
draw random numbers per leaf.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, Optional

from vgshape.geom import Point
from vgshape.group import Group
from vgshape.path import Path


class ShapeKind(Enum):
    PATH = 'path'
    GROUP = 'group'
    POINTS = 'points'
    SHAPES = 'shapes'


def kind_of(shape) -> ShapeKind:
    """Return the variant of ``shape``; raise ``ValueError`` if it is none.

    An empty list is a (trivially empty) list of shapes.
    """
    if isinstance(shape, Path):
        return ShapeKind.PATH
    if isinstance(shape, Group):
        return ShapeKind.GROUP
    if isinstance(shape, (list, tuple)):
        if shape and all(isinstance(p, Point) for p in shape):
            return ShapeKind.POINTS
        return ShapeKind.SHAPES
    raise ValueError('not a shape: {}'.format(shape))


def is_points(shape) -> bool:
    return isinstance(shape, (list, tuple)) and kind_of(shape) is ShapeKind.POINTS


def _children(shape, kind):
    if kind is ShapeKind.GROUP:
        return shape.shapes
    return shape


_DONE = object()


def map_shape(shape,
              on_path: Callable[[Path], object],
              on_points: Optional[Callable[[list], object]] = None,
              prune: bool = False):
    """Rebuild ``shape`` with every leaf replaced.

    ``on_path`` maps each Path leaf and ``on_points`` each point-list
    leaf (point lists are copied unchanged when it is omitted).  Groups
    come back as new Groups and shape lists as new lists.  A callback
    returning ``None`` drops that leaf; with ``prune`` nested containers
    left empty are dropped too.
    """
    if on_points is None:
        on_points = list

    kind = kind_of(shape)
    if kind is ShapeKind.PATH:
        return on_path(shape)
    if kind is ShapeKind.POINTS:
        return on_points(shape)

    result = None
    stack = [(kind, iter(_children(shape, kind)), [])]
    while stack:
        node_kind, it, out = stack[-1]
        child = next(it, _DONE)
        if child is _DONE:
            stack.pop()
            built = Group(out) if node_kind is ShapeKind.GROUP else out
            if not stack:
                result = built
            elif not (prune and len(out) == 0):
                stack[-1][2].append(built)
            continue
        child_kind = kind_of(child)
        if child_kind is ShapeKind.PATH:
            mapped = on_path(child)
        elif child_kind is ShapeKind.POINTS:
            mapped = on_points(child)
        else:
            stack.append((child_kind, iter(_children(child, child_kind)), []))
            continue
        if mapped is not None:
            out.append(mapped)
    return result


def iter_leaves(shape) -> Iterator:
    """Yield the Path and point-list leaves of ``shape`` depth-first."""
    kind = kind_of(shape)
    if kind is ShapeKind.PATH or kind is ShapeKind.POINTS:
        yield shape
        return
    stack = [iter(_children(shape, kind))]
    while stack:
        child = next(stack[-1], _DONE)
        if child is _DONE:
            stack.pop()
            continue
        child_kind = kind_of(child)
        if child_kind is ShapeKind.PATH or child_kind is ShapeKind.POINTS:
            yield child
        else:
            stack.append(iter(_children(child, child_kind)))


def iter_paths(shape) -> Iterator[Path]:
    """Yield only the Path leaves of ``shape``."""
    for leaf in iter_leaves(shape):
        if isinstance(leaf, Path):
            yield leaf
