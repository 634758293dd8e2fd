# -*- coding: utf-8 -*-
# Relatix/relate/node_section.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
NodeSection: the local topology of one walk at one intersection point. It records the
owning walk's context (operand, dimension, element/ring ids, enclosing polygon), whether
the point is an existing vertex, and the point with its predecessor and successor along
the walk. Either neighbour is None at the open end of a line.

Notes:
------
   - Value object: coordinates are private read-only copies, so a section stays valid
     after the walk that produced it is discarded or garbage-collected.
   - The enclosing polygon is a shared reference to an immutable shapely geometry.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple
import numpy as np
from shapely.geometry import LineString

from geometry import dimension
from geometry.coords import equals_2d

__all__ = ["NodeSection", "frozen_point"]


def frozen_point(pt) -> np.ndarray:
    """Read-only float64 copy of a point (None passes through)."""
    if pt is None:
        return None
    arr = np.array(pt, dtype=np.float64)
    arr.flags.writeable = False
    return arr


def _edge_rep(p0, p1) -> str:
    if p0 is None or p1 is None:
        return "null"
    return LineString([tuple(p0[:2]), tuple(p1[:2])]).wkt


def _point_key(p) -> Tuple:
    # None sorts first
    if p is None:
        return (0,)
    return (1, float(p[0]), float(p[1]))


@dataclass(frozen=True, eq=False)
class NodeSection:
    is_a: bool
    dimension: int
    element_id: int
    ring_id: Optional[int]
    polygonal: Any
    is_at_vertex: bool
    previous: Optional[np.ndarray] = field(repr=False)
    point: np.ndarray = field(repr=False)
    next: Optional[np.ndarray] = field(repr=False)

    def __post_init__(self):
        object.__setattr__(self, "previous", frozen_point(self.previous))
        object.__setattr__(self, "point", frozen_point(self.point))
        object.__setattr__(self, "next", frozen_point(self.next))

    # --------------------
    # Queries
    # --------------------
    @property
    def operand(self) -> str:
        return "A" if self.is_a else "B"

    def vertex(self, i: int) -> Optional[np.ndarray]:
        """0 -> previous vertex, 1 -> next vertex."""
        if i == 0:
            return self.previous
        if i == 1:
            return self.next
        raise IndexError("NodeSection vertex index must be 0 or 1, got {}".format(i))

    @property
    def is_area(self) -> bool:
        return self.dimension == dimension.A

    @property
    def is_shell(self) -> bool:
        return self.ring_id == 0

    @property
    def is_proper(self) -> bool:
        """True when the node lies strictly inside a segment."""
        return not self.is_at_vertex

    def is_same_geometry(self, other: "NodeSection") -> bool:
        return self.is_a == other.is_a

    def is_same_polygon(self, other: "NodeSection") -> bool:
        return self.is_a == other.is_a and self.element_id == other.element_id

    @staticmethod
    def is_area_area(a: "NodeSection", b: "NodeSection") -> bool:
        return a.is_area and b.is_area

    def at_point(self, pt) -> bool:
        return equals_2d(self.point, pt)

    def sort_key(self) -> Tuple:
        """Deterministic ordering: context first, then neighbour coordinates."""
        return (
            0 if self.is_a else 1,
            self.dimension,
            self.element_id,
            -1 if self.ring_id is None else self.ring_id,
            1 if self.is_at_vertex else 0,
            _point_key(self.previous),
            _point_key(self.next),
        )

    def __str__(self) -> str:
        at_vertex = "-V-" if self.is_at_vertex else "---"
        poly_id = ""
        if self.element_id >= 0:
            ring = "" if self.ring_id is None else ":{}".format(self.ring_id)
            poly_id = "[{}{}]".format(self.element_id, ring)
        return "{}{}{}: {} {} {}".format(
            self.operand, self.dimension, poly_id,
            _edge_rep(self.previous, self.point), at_vertex,
            _edge_rep(self.point, self.next),
        )
