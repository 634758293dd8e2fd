# -*- coding: utf-8 -*-
# Relatix/noding/intersector.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
Brute-force noding of relate walks: find every point where a segment of one walk meets a
segment of another, and turn each into a pair of NodeSections.

Main Tasks:
-----------
   1. `compute_intersection` classifies a segment pair (none / endpoint touch / proper
      crossing / collinear overlap) and returns the intersection point(s).
   2. `EdgeSegmentIntersector` filters intersections so a point on a vertex shared by
      two consecutive segments is recorded once, then asks both walks for NodeSections.
   3. `SimpleNoder` drives the intersector over all candidate segment pairs, pruned by
      per-segment bounding boxes (vectorized with NumPy).

Notes:
------
   - Pure computation; no logging, plotting, or file I/O.
   - Orientation tests are exact: the float cross product is used when it clears its
     error bound, otherwise the sign is recomputed with rationals. Endpoint and overlap
     intersections are returned as the exact input vertices; only proper crossings are
     computed (relative to p0, so large offsets keep their precision).
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, List, Sequence, Tuple
import numpy as np

from geometry.coords import equals_2d

__all__ = [
    "SegmentIntersection",
    "compute_intersection",
    "EdgeSegmentIntersector",
    "SimpleNoder",
]


# ---------------------------
# Segment / segment
# ---------------------------
@dataclass
class SegmentIntersection:
    points: List[np.ndarray] = field(default_factory=list)
    is_proper: bool = False
    is_collinear: bool = False

    @property
    def has_intersection(self) -> bool:
        return len(self.points) > 0


# relative error bound of the float determinant (Shewchuk's ccwerrboundA)
_DET_ERR_BOUND = (3.0 + 16.0 * np.finfo(np.float64).eps) * np.finfo(np.float64).eps


def _orientation_index(p1, p2, q) -> int:
    """
    +1 if q is left of p1->p2, -1 if right, 0 if collinear.

    The float determinant is trusted only when it clears its error bound; otherwise
    the sign is recomputed exactly over rationals (floats convert to Fraction exactly).
    """
    det_left = (p2[0] - p1[0]) * (q[1] - p1[1])
    det_right = (p2[1] - p1[1]) * (q[0] - p1[0])
    det = det_left - det_right
    if abs(det) > _DET_ERR_BOUND * (abs(det_left) + abs(det_right)):
        return 1 if det > 0.0 else -1

    ax, ay = Fraction(float(p1[0])), Fraction(float(p1[1]))
    exact = ((Fraction(float(p2[0])) - ax) * (Fraction(float(q[1])) - ay)
             - (Fraction(float(p2[1])) - ay) * (Fraction(float(q[0])) - ax))
    if exact > 0:
        return 1
    if exact < 0:
        return -1
    return 0


def _in_envelope(p, a, b) -> bool:
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def _append_unique(points: List[np.ndarray], p) -> None:
    for q in points:
        if equals_2d(p, q):
            return
    points.append(p)


def compute_intersection(p0, p1, q0, q1) -> SegmentIntersection:
    """
    Intersect segment p0-p1 with segment q0-q1.

    Returns
    -------
    SegmentIntersection
        0 points (disjoint), 1 point (touch or crossing) or 2 points (collinear overlap).
        `is_proper` is True only for a single crossing strictly inside both segments.
    """
    p0 = np.asarray(p0, dtype=np.float64)
    p1 = np.asarray(p1, dtype=np.float64)
    q0 = np.asarray(q0, dtype=np.float64)
    q1 = np.asarray(q1, dtype=np.float64)

    # envelope rejection
    if (max(p0[0], p1[0]) < min(q0[0], q1[0]) or max(q0[0], q1[0]) < min(p0[0], p1[0])
            or max(p0[1], p1[1]) < min(q0[1], q1[1]) or max(q0[1], q1[1]) < min(p0[1], p1[1])):
        return SegmentIntersection()

    pq0 = _orientation_index(p0, p1, q0)
    pq1 = _orientation_index(p0, p1, q1)
    if pq0 * pq1 > 0:
        return SegmentIntersection()
    qp0 = _orientation_index(q0, q1, p0)
    qp1 = _orientation_index(q0, q1, p1)
    if qp0 * qp1 > 0:
        return SegmentIntersection()

    if pq0 == 0 and pq1 == 0 and qp0 == 0 and qp1 == 0:
        pts = []  # type: List[np.ndarray]
        for cand, a, b in ((q0, p0, p1), (q1, p0, p1), (p0, q0, q1), (p1, q0, q1)):
            if _in_envelope(cand, a, b):
                _append_unique(pts, cand)
        return SegmentIntersection(points=pts, is_collinear=True)

    if pq0 == 0 or pq1 == 0 or qp0 == 0 or qp1 == 0:
        # endpoint touch: report the shared/touching input vertex exactly
        if equals_2d(p0, q0) or equals_2d(p0, q1):
            pt = p0
        elif equals_2d(p1, q0) or equals_2d(p1, q1):
            pt = p1
        elif pq0 == 0:
            pt = q0
        elif pq1 == 0:
            pt = q1
        elif qp0 == 0:
            pt = p0
        else:
            pt = p1
        return SegmentIntersection(points=[pt])

    # proper crossing
    r = p1[:2] - p0[:2]
    s = q1[:2] - q0[:2]
    denom = r[0] * s[1] - r[1] * s[0]
    t = ((q0[0] - p0[0]) * s[1] - (q0[1] - p0[1]) * s[0]) / denom
    pt = np.array([p0[0] + t * r[0], p0[1] + t * r[1]])
    return SegmentIntersection(points=[pt], is_proper=True)


# ---------------------------
# Walk / walk
# ---------------------------
class EdgeSegmentIntersector:
    """
    Collects NodeSection pairs (A side first) for intersections between walk segments.
    """

    def __init__(self):
        self.node_sections = []  # type: List[Tuple[object, object]]

    def process_intersections(self, ss0, seg_index0: int, ss1, seg_index1: int) -> None:
        #-- don't intersect a segment with itself
        if ss0 is ss1 and seg_index0 == seg_index1:
            return
        if ss0.is_a:
            self._add_intersections(ss0, seg_index0, ss1, seg_index1)
        else:
            self._add_intersections(ss1, seg_index1, ss0, seg_index0)

    def _add_intersections(self, ss_a, seg_index_a: int, ss_b, seg_index_b: int) -> None:
        a0, a1 = ss_a.segment(seg_index_a)
        b0, b1 = ss_b.segment(seg_index_b)
        li = compute_intersection(a0, a1, b0, b1)
        if not li.has_intersection:
            return
        for int_pt in li.points:
            # proper intersections are never at a vertex, so no ownership question arises
            if li.is_proper or (ss_a.is_containing_segment(seg_index_a, int_pt)
                                and ss_b.is_containing_segment(seg_index_b, int_pt)):
                ns_a = ss_a.create_node_section(seg_index_a, int_pt)
                ns_b = ss_b.create_node_section(seg_index_b, int_pt)
                self.node_sections.append((ns_a, ns_b))


def _segment_boxes(ss) -> Tuple[np.ndarray, np.ndarray]:
    xy = ss.coordinates.to_numpy()[:, :2]
    return np.minimum(xy[:-1], xy[1:]), np.maximum(xy[:-1], xy[1:])


def _candidate_pairs(ss0, ss1, bounds_filter: bool) -> Iterable[Tuple[int, int]]:
    n0 = ss0.size() - 1
    n1 = ss1.size() - 1
    if not bounds_filter:
        return ((i, j) for i in range(n0) for j in range(n1))
    lo0, hi0 = _segment_boxes(ss0)
    lo1, hi1 = _segment_boxes(ss1)
    overlap = ((lo0[:, None, 0] <= hi1[None, :, 0]) & (lo1[None, :, 0] <= hi0[:, None, 0])
               & (lo0[:, None, 1] <= hi1[None, :, 1]) & (lo1[None, :, 1] <= hi0[:, None, 1]))
    ii, jj = np.nonzero(overlap)
    return zip(ii.tolist(), jj.tolist())


class SimpleNoder:
    """
    Runs an EdgeSegmentIntersector over every candidate segment pair of two walk sets.

    Parameters
    ----------
    intersector : EdgeSegmentIntersector, optional
        Receives the segment pairs; a fresh one is created if omitted.
    bounds_filter : bool
        Prune segment pairs whose bounding boxes are disjoint.
    """

    def __init__(self, intersector: EdgeSegmentIntersector = None, bounds_filter: bool = True):
        self.intersector = intersector if intersector is not None else EdgeSegmentIntersector()
        self.bounds_filter = bounds_filter

    def compute_nodes(self, strings_a: Sequence, strings_b: Sequence,
                      self_nodes: bool = False) -> List[Tuple[object, object]]:
        """
        Intersect every walk of `strings_a` with every walk of `strings_b`. With
        `self_nodes`, walks of the same set are intersected with each other (and with
        themselves) as well. Returns the intersector's collected NodeSection pairs.
        """
        for ss_a in strings_a:
            for ss_b in strings_b:
                self._process_pair(ss_a, ss_b)
        if self_nodes:
            for strings in (strings_a, strings_b):
                for k, ss0 in enumerate(strings):
                    for ss1 in strings[k:]:
                        self._process_pair(ss0, ss1)
        return self.intersector.node_sections

    def _process_pair(self, ss0, ss1) -> None:
        if self.bounds_filter and not _boxes_intersect(ss0.bounds(), ss1.bounds()):
            return
        same = ss0 is ss1
        for i, j in _candidate_pairs(ss0, ss1, self.bounds_filter):
            # each unordered segment pair of one walk is visited once
            if same and j <= i:
                continue
            self.intersector.process_intersections(ss0, i, ss1, j)


def _boxes_intersect(b0, b1) -> bool:
    return not (b0[2] < b1[0] or b1[2] < b0[0] or b0[3] < b1[1] or b1[3] < b0[1])
