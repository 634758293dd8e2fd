# -*- coding: utf-8 -*-
# Relatix/geometry/coords.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
Ordered, indexable coordinate storage for segment strings. A CoordinateSequence wraps a
NumPy (N, 2) or (N, 3) float64 array; the optional third column (Z) is carried along but
ignored by every predicate here, which all work in the XY plane.

Conventions:
------------
   - Construction BORROWS the caller's array when it already is float64 (no copy) unless
     `copy=True` is requested. Only owned clones are ever mutated (`reverse`).
   - A sequence is "closed" when its first and last points are equal in 2D.
   - Equality is exact (no tolerance): topology decisions downstream depend on it.
"""

from typing import Tuple
import numpy as np
from ._validation import _assert_coords

__all__ = ["CoordinateSequence", "equals_2d"]


def equals_2d(p: np.ndarray, q: np.ndarray) -> bool:
    """Exact equality of the X and Y ordinates of two points."""
    return bool(p[0] == q[0] and p[1] == q[1])


class CoordinateSequence:
    """
    NumPy-backed coordinate sequence.

    Parameters
    ----------
    points : array-like
        (N, 2) or (N, 3) coordinates.
    copy : bool, optional
        If True, take a private copy of `points`; otherwise wrap it as-is when possible.
    """

    def __init__(self, points, copy: bool = False):
        if copy:
            arr = np.array(points, dtype=np.float64)
        else:
            arr = np.asarray(points, dtype=np.float64)
        _assert_coords(arr, check_finite=True)
        self._pts = arr

    def __len__(self) -> int:
        return int(self._pts.shape[0])

    def __getitem__(self, i: int) -> np.ndarray:
        return self._pts[i]

    def __repr__(self) -> str:
        return "CoordinateSequence({})".format(self._pts.tolist())

    # --------------------
    # Access
    # --------------------
    def size(self) -> int:
        return len(self)

    def get_coordinate(self, i: int) -> np.ndarray:
        """Row `i` as a view into the backing array."""
        return self._pts[i]

    def x(self, i: int) -> float:
        return float(self._pts[i, 0])

    def y(self, i: int) -> float:
        return float(self._pts[i, 1])

    @property
    def has_z(self) -> bool:
        return self._pts.shape[1] == 3

    def to_numpy(self) -> np.ndarray:
        """Copy of the backing (N, 2|3) array."""
        return self._pts.copy()

    def bounds(self) -> Tuple[float, float, float, float]:
        """(minx, miny, maxx, maxy) of the XY coordinates."""
        xy = self._pts[:, :2]
        mn = xy.min(axis=0)
        mx = xy.max(axis=0)
        return float(mn[0]), float(mn[1]), float(mx[0]), float(mx[1])

    # --------------------
    # Predicates
    # --------------------
    def is_closed(self) -> bool:
        if self._pts.shape[0] < 2:
            return False
        return equals_2d(self._pts[0], self._pts[-1])

    def has_repeated_points(self) -> bool:
        """True if any two consecutive points are equal in 2D."""
        xy = self._pts[:, :2]
        if xy.shape[0] < 2:
            return False
        return bool(np.any(np.all(xy[1:] == xy[:-1], axis=1)))

    def equals_2d(self, other: "CoordinateSequence") -> bool:
        """Same length and pointwise-equal XY ordinates."""
        if len(self) != len(other):
            return False
        return bool(np.array_equal(self._pts[:, :2], other._pts[:, :2]))

    # --------------------
    # Derivation / mutation
    # --------------------
    def clone(self) -> "CoordinateSequence":
        return CoordinateSequence(self._pts, copy=True)

    def reverse(self) -> None:
        """Reverse the point order in place."""
        self._pts = np.ascontiguousarray(self._pts[::-1])
