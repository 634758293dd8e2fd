# -*- coding: utf-8 -*-
# Relatix/noding/segment_string.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
Base segment string: an ordered vertex sequence traversed segment by segment, with
ring-aware index arithmetic for closed sequences.

Conventions:
------------
   - Segment `i` spans vertices `i` and `i + 1`; valid segment indices are 0..size-2.
   - A closed sequence repeats its first vertex at the end, so ring navigation skips
     the duplicate: the vertex before 0 is size-2, the vertex after size-1 is 1.
   - The ring helpers assume the caller already knows the sequence is closed.
"""

from typing import Any, Optional, Tuple
import numpy as np
from geometry.coords import CoordinateSequence

__all__ = ["SegmentString"]


class SegmentString:
    """
    Vertex sequence with ring semantics.

    Parameters
    ----------
    seq : CoordinateSequence or array-like
        The vertices. Array-likes are wrapped without copying where possible.
    data : Any, optional
        Arbitrary user payload carried with the string.
    """

    def __init__(self, seq, data: Optional[Any] = None):
        if not isinstance(seq, CoordinateSequence):
            seq = CoordinateSequence(seq)
        self._seq = seq
        self.data = data

    def __len__(self) -> int:
        return self._seq.size()

    def __repr__(self) -> str:
        return "{}({} pts, closed={})".format(type(self).__name__, self.size(), self.is_closed())

    @property
    def coordinates(self) -> CoordinateSequence:
        """The active coordinate sequence."""
        return self._seq

    def size(self) -> int:
        return self._seq.size()

    def get_coordinate(self, i: int) -> np.ndarray:
        return self._seq.get_coordinate(i)

    def segment(self, i: int) -> Tuple[np.ndarray, np.ndarray]:
        """Endpoints (p0, p1) of segment `i`."""
        return self._seq.get_coordinate(i), self._seq.get_coordinate(i + 1)

    def is_closed(self) -> bool:
        return self._seq.is_closed()

    def bounds(self) -> Tuple[float, float, float, float]:
        return self._seq.bounds()

    # --------------------
    # Ring navigation
    # --------------------
    def prev_in_ring(self, index: int) -> np.ndarray:
        """Vertex before `index`, wrapping across the closing point."""
        prev_index = index - 1
        if prev_index < 0:
            prev_index = self.size() - 2
        return self._seq.get_coordinate(prev_index)

    def next_in_ring(self, index: int) -> np.ndarray:
        """Vertex after `index`, wrapping across the closing point."""
        next_index = index + 1
        if next_index > self.size() - 1:
            next_index = 1
        return self._seq.get_coordinate(next_index)
