# -*- coding: utf-8 -*-
# Relatix/geometry/orientation.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
This module owns *orientation-level* concerns for rings:
   - Signed area (shoelace),
   - Orientation classification (CW/CCW) used to normalize ring walks.

Notes:
------------
   - NumPy for area, shapely (GEOS) for the orientation predicate; no logging or I/O.
   - Functions are side-effect free.
   - Accepts raw (N, 2|3) arrays or CoordinateSequence objects; only X, Y are used.
   - A closed ring repeats its first point at the end; the duplicate contributes a
     zero-length edge and does not affect the sum.
"""

from __future__ import division
import numpy as np
import shapely
from ._validation import _assert_coords, _require_min_points
from .coords import CoordinateSequence

__all__ = ["signed_area", "orientation", "is_ccw"]


def _as_array(points) -> np.ndarray:
    if isinstance(points, CoordinateSequence):
        return points.to_numpy()
    return np.asarray(points, dtype=np.float64)


def signed_area(points) -> float:
    """
    Shoelace signed area for a polygonal loop.

    Conventions
    -----------
    - Positive area => counter-clockwise (CCW) orientation.
    - The input may be explicitly closed (first==last) or open, in which case the
      formula implicitly connects last->first.
    - Coordinates are shifted to the first vertex before summing, so rings far from
      the origin keep their precision.

    Parameters
    ----------
    points : np.ndarray or CoordinateSequence
        (N, 2|3) coordinates.

    Returns
    -------
    float
        Signed area (units^2). Positive for CCW, negative for CW.

    Raises
    ------
    ValueError
        If input is not (N, 2|3) or N < 3.
    """
    P = _as_array(points)
    _assert_coords(P)
    _require_min_points(P, 3, "points to compute area")
    x = P[:, 0] - P[0, 0]
    y = P[:, 1] - P[0, 1]
    # Roll by -1 to represent edges (i -> i+1), implicitly connects last->first
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def is_ccw(points) -> bool:
    """
    True if the ring is counter-clockwise.

    Decided by GEOS's robust orientation predicate (via shapely), not by the sign of
    the float area: ring normalization must not flip on rounding noise. Open input is
    closed first; rings with fewer than 4 points after closing, and collapsed (flat)
    rings, are not CCW.
    """
    P = _as_array(points)
    _assert_coords(P)
    _require_min_points(P, 3, "points to classify orientation")
    xy = P[:, :2]
    if not (xy[0, 0] == xy[-1, 0] and xy[0, 1] == xy[-1, 1]):
        xy = np.vstack((xy, xy[:1]))
    if xy.shape[0] < 4:
        return False
    return bool(shapely.is_ccw(shapely.linearrings(xy)))


def orientation(points) -> str:
    """
    Return "CCW" if the ring is counter-clockwise, else "CW".

    Zero area (collapsed rings) is reported as "CW": such a ring is not CCW, which
    is the only question ring normalization asks.
    """
    return "CCW" if is_ccw(points) else "CW"
