# -*- coding: utf-8 -*-
"""2D vector geometry for procedural drawing: paths, groups, transforms,
boolean compounds and point sampling.  The shape operations live in
:mod:`vgshape.commands`."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("vgshape")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
