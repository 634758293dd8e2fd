# -*- coding: utf-8 -*-
# Relatix/geometry/repeated.py

"""
Project: Relatix
Date: 10/18/2026

Purpose
-------
Consecutive-duplicate handling for coordinate sequences. Zero-length segments break
neighbour lookup along a walk (a vertex would be its own predecessor), so walks
collapse them before any intersection processing.

Notes
-----
- Equality is exact and 2D: points differing only in Z are duplicates.
- The first point of each run of duplicates is kept (with its Z).
- Results are always new arrays/sequences; inputs are never modified.
"""

import numpy as np
from .coords import CoordinateSequence

__all__ = ["has_repeated_points", "drop_consecutive_duplicates", "remove_repeated_points"]


def has_repeated_points(points) -> bool:
    """True if any two consecutive points are equal in 2D."""
    if isinstance(points, CoordinateSequence):
        return points.has_repeated_points()
    return CoordinateSequence(points).has_repeated_points()


def drop_consecutive_duplicates(pts: np.ndarray) -> np.ndarray:
    """
    Remove exact consecutive duplicates (2D comparison).

    Args
    ----
    pts : np.ndarray
        Input polyline points, shape (N, 2|3).

    Returns
    -------
    np.ndarray
        Filtered copy retaining original order.

    Raises
    ------
    ValueError
        If `pts` is not an (N, 2|3) array.
    """
    if pts is None or pts.ndim != 2 or pts.shape[1] not in (2, 3):
        raise ValueError("Expected (N,2) or (N,3) float array for points.")
    if pts.shape[0] <= 1:
        return pts.copy()
    xy = pts[:, :2]
    keep = np.ones(pts.shape[0], dtype=bool)
    keep[1:] = np.any(xy[1:] != xy[:-1], axis=1)
    return pts[keep]


def remove_repeated_points(seq: CoordinateSequence) -> CoordinateSequence:
    """
    Return a new, owned CoordinateSequence with consecutive duplicates collapsed.
    """
    return CoordinateSequence(drop_consecutive_duplicates(seq.to_numpy()))
