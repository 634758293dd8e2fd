# -*- coding: utf-8 -*-
# Relatix/relate/segment_string.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
RelateSegmentString: a walk over one line or ring of an operand geometry, decorated with
the context the relate engine needs to describe an intersection locally (operand A/B,
dimension, element id, ring id, enclosing polygon).

Main Tasks:
-----------
   1. Build walks from lines and rings (optionally normalized on construction).
   2. Normalize once: orient rings and collapse consecutive duplicate points.
   3. Resolve the walk-neighbours of a point lying on a segment (prev/next vertex).
   4. Decide which of two adjacent segments owns an intersection at a shared vertex.
   5. Synthesize NodeSections for discovered intersections.

Lifecycle:
----------
   - The vertex sequence is BORROWED from the caller at construction. Normalization may
     replace it with an OWNED derived sequence (de-duplicated and/or reversed); the
     borrowed sequence is never modified.
   - Normalization happens at most once. Afterwards every operation is a pure read and
     the walk can be shared between callers.
"""

import logging
from typing import Any, Optional
import numpy as np

from geometry import dimension
from geometry.coords import CoordinateSequence, equals_2d
from geometry.orientation import is_ccw
from geometry.repeated import remove_repeated_points
from noding.segment_string import SegmentString
from .errors import SegmentIndexError, WalkPreconditionError
from .node_section import NodeSection

__all__ = ["RelateSegmentString"]

logger = logging.getLogger(__name__)


class RelateSegmentString(SegmentString):
    """
    Segment string of one operand geometry component.

    Use the `create_line` / `create_ring` factories rather than the constructor.

    Attributes
    ----------
    is_a : bool
        True for operand A, False for operand B.
    dimension : int
        dimension.L for lines, dimension.A for polygon rings.
    element_id : int
        Atomic element the walk was extracted from.
    ring_id : Optional[int]
        0 for a shell, 1..n for holes, None for lines.
    polygonal : Optional[shapely geometry]
        Enclosing polygon (or parent MultiPolygon) of a ring walk.
    geometry : Optional[RelateGeometry]
        Operand context the walk belongs to.
    """

    def __init__(self, pts, is_a: bool, dim: int, element_id: int,
                 ring_id: Optional[int], poly: Any, parent: Any, orient: bool = False):
        seq = pts if isinstance(pts, CoordinateSequence) else CoordinateSequence(pts)
        if seq.size() < 2:
            raise WalkPreconditionError(
                "A walk needs at least two points.", {"size": seq.size(), "element_id": element_id})
        if dim == dimension.A and not seq.is_closed():
            raise WalkPreconditionError(
                "Ring walk is not closed (first != last).", {"element_id": element_id, "ring_id": ring_id})
        super(RelateSegmentString, self).__init__(seq)

        self._is_a = bool(is_a)
        self._dimension = dim
        self._element_id = element_id
        self._ring_id = ring_id
        self._polygonal = poly
        self._geometry = parent
        self._owned = False
        self._normalized = False

        if orient:
            if dim == dimension.A:
                self.orient_and_remove_repeated(ring_id == 0)
            else:
                self.remove_repeated()

    # --------------------
    # Factories
    # --------------------
    @classmethod
    def create_line(cls, pts, is_a: bool, element_id: int, parent: Any = None,
                    orient: bool = False) -> "RelateSegmentString":
        """Walk over a linestring: dimension L, no ring id, no enclosing polygon."""
        return cls(pts, is_a, dimension.L, element_id, None, None, parent, orient)

    @classmethod
    def create_ring(cls, pts, is_a: bool, element_id: int, ring_id: int, poly: Any,
                    parent: Any = None, orient: bool = False) -> "RelateSegmentString":
        """Walk over a polygon ring: dimension A, explicit ring id and polygon."""
        return cls(pts, is_a, dimension.A, element_id, ring_id, poly, parent, orient)

    # --------------------
    # Accessors
    # --------------------
    @property
    def is_a(self) -> bool:
        return self._is_a

    @property
    def operand(self) -> str:
        return "A" if self._is_a else "B"

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def element_id(self) -> int:
        return self._element_id

    @property
    def ring_id(self) -> Optional[int]:
        return self._ring_id

    @property
    def polygonal(self) -> Any:
        return self._polygonal

    @property
    def geometry(self) -> Any:
        return self._geometry

    @property
    def is_owned(self) -> bool:
        """True once normalization replaced the borrowed sequence with a derived one."""
        return self._owned

    @property
    def is_normalized(self) -> bool:
        return self._normalized

    def __repr__(self) -> str:
        ring = "" if self._ring_id is None else ":{}".format(self._ring_id)
        return "RelateSegmentString({}{}[{}{}], {} pts)".format(
            self.operand, dimension.symbol(self._dimension), self._element_id, ring, self.size())

    # --------------------
    # Node sections
    # --------------------
    def create_node_section(self, seg_index: int, int_pt) -> NodeSection:
        """
        Describe the walk's local topology at `int_pt`, which lies on segment `seg_index`.
        The returned NodeSection is independent of this walk.
        """
        self._check_segment_index(seg_index)
        pt = np.asarray(int_pt, dtype=np.float64)
        c0 = self.get_coordinate(seg_index)
        c1 = self.get_coordinate(seg_index + 1)
        is_node_at_vertex = equals_2d(pt, c0) or equals_2d(pt, c1)
        prev = self.prev_vertex(seg_index, pt)
        nxt = self.next_vertex(seg_index, pt)
        return NodeSection(
            self._is_a, self._dimension, self._element_id, self._ring_id, self._polygonal,
            is_node_at_vertex, prev, pt, nxt,
        )

    def prev_vertex(self, seg_index: Optional[int], pt) -> Optional[np.ndarray]:
        """
        Walk-predecessor of `pt` on segment `seg_index`, or None at the start of an
        open walk. `seg_index=None` denotes the single segment of a two-point walk.
        """
        seg_index = self._resolve_segment_index(seg_index)
        seg_start = self.get_coordinate(seg_index)
        if not equals_2d(seg_start, pt):
            return seg_start

        #-- pt is at segment start, so get previous vertex
        if seg_index > 0:
            return self.get_coordinate(seg_index - 1)

        if self.is_closed():
            return self.prev_in_ring(seg_index)

        return None

    def next_vertex(self, seg_index: Optional[int], pt) -> Optional[np.ndarray]:
        """
        Walk-successor of `pt` on segment `seg_index`, or None at the end of an open
        walk. `seg_index=None` denotes the single segment of a two-point walk; when
        `pt` is at its end the successor wraps to vertex 0.
        """
        unknown = seg_index is None
        seg_index = self._resolve_segment_index(seg_index)
        seg_end = self.get_coordinate(seg_index + 1)
        if not equals_2d(seg_end, pt):
            return seg_end

        #-- pt is at seg end, so get next vertex
        if unknown:
            return self.get_coordinate(0)

        if seg_index < self.size() - 2:
            return self.get_coordinate(seg_index + 2)

        if self.is_closed():
            return self.next_in_ring(seg_index + 1)

        #-- walk is not closed, so there is no next segment
        return None

    def is_containing_segment(self, seg_index: int, pt) -> bool:
        """
        Whether segment `seg_index` owns an intersection at `pt`.

        A point on a vertex shared by two segments is owned by the segment it starts,
        except for the final vertex of an open walk, which only the last segment has.
        """
        self._check_segment_index(seg_index)
        #-- intersection is at segment start vertex - process it
        if equals_2d(pt, self.get_coordinate(seg_index)):
            return True
        if equals_2d(pt, self.get_coordinate(seg_index + 1)):
            is_final_segment = seg_index == self.size() - 2
            if self.is_closed() or not is_final_segment:
                return False
            #-- for final segment, process intersections with final endpoint
            return True
        #-- intersection is interior - process it
        return True

    # --------------------
    # Normalization
    # --------------------
    def orient_and_remove_repeated(self, orient_cw: bool) -> None:
        """
        Orient the walk clockwise (`orient_cw=True`) or counter-clockwise and collapse
        consecutive duplicates. A derived owned sequence replaces the borrowed one only
        when something changes.
        """
        if self._freeze("orient_and_remove_repeated"):
            return
        is_flipped = orient_cw == is_ccw(self._seq)
        has_repeated = self._seq.has_repeated_points()
        #-- already conditioned
        if not is_flipped and not has_repeated:
            return

        if has_repeated:
            derived = remove_repeated_points(self._seq)
        else:
            derived = self._seq.clone()
        if is_flipped:
            derived.reverse()
        self._adopt(derived)
        logger.debug("[RelateSegmentString] %r normalized (flipped=%s, repeated=%s)",
                     self, is_flipped, has_repeated)

    def remove_repeated(self) -> None:
        """Collapse consecutive duplicate points into a derived owned sequence."""
        if self._freeze("remove_repeated"):
            return
        if not self._seq.has_repeated_points():
            return
        self._adopt(remove_repeated_points(self._seq))
        logger.debug("[RelateSegmentString] %r repeated points removed", self)

    # --------------------
    # Internals
    # --------------------
    def _freeze(self, op: str) -> bool:
        """Mark the walk normalized; True if it already was (caller must skip)."""
        if self._normalized:
            logger.debug("[RelateSegmentString] %s skipped: %r already normalized", op, self)
            return True
        self._normalized = True
        return False

    def _adopt(self, seq: CoordinateSequence) -> None:
        if seq.size() < 2:
            raise WalkPreconditionError(
                "Walk collapsed to fewer than two distinct points.",
                {"element_id": self._element_id, "ring_id": self._ring_id})
        self._seq = seq
        self._owned = True

    def _check_segment_index(self, seg_index: int) -> None:
        if seg_index is None or not 0 <= seg_index <= self.size() - 2:
            raise SegmentIndexError(
                "Segment index out of range.", {"seg_index": seg_index, "size": self.size()})

    def _resolve_segment_index(self, seg_index: Optional[int]) -> int:
        if seg_index is None:
            if self.size() != 2:
                raise SegmentIndexError(
                    "Unknown segment index is only defined for two-point walks.",
                    {"size": self.size()})
            return 0
        self._check_segment_index(seg_index)
        return seg_index
