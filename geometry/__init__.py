# -*- coding: utf-8 -*-
# Relatix/geometry/__init__.py

"""
Project: Relatix
Date: 10/18/2026

Geometry Subfolder:
-------------------
Coordinate-level building blocks shared by the noding and relate packages.

Modules:
--------
- coords:       NumPy-backed CoordinateSequence (borrow-or-copy wrapper over (N,2|3)
                arrays) and exact 2D point equality.

- orientation:  Shoelace signed area and CW/CCW classification of rings.

- repeated:     Detection and removal of consecutive duplicate points.

- dimension:    Topological dimension constants (P/L/A) and shapely type mapping.

- _validation:  Shared array-structure checks used by the modules above.
"""

from .coords import CoordinateSequence, equals_2d
from .orientation import signed_area, is_ccw
from .repeated import has_repeated_points, remove_repeated_points

__all__ = [
    "CoordinateSequence", "equals_2d",
    "signed_area", "is_ccw",
    "has_repeated_points", "remove_repeated_points",
    "coords", "orientation", "repeated", "dimension",
]
