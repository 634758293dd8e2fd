# -*- coding: utf-8 -*-
# Relatix/geometry/_validation.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
Centralized validation utilities for coordinate arrays so that every geometry and
noding module checks its inputs the same way.

Main Tasks:
   1. Validate coordinate array structure: (N, 2) or (N, 3), float-convertible
   2. Enforce minimum point counts with a consistent message
   3. Provide optional finite-value checking for data coming from outside
"""

from typing import Optional
import numpy as np


def _assert_coords(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2) or (N, 3) with optional finite value checking.

    Parameters
    ----------
    points : Optional[np.ndarray]
        Points array to validate
    check_finite : bool, optional
        If True, check for finite values (no NaN/Inf) in X and Y, by default False

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError("No coordinates provided (points is None).")

    if points.ndim != 2 or points.shape[1] not in (2, 3):
        raise ValueError(f"Expected (N, 2) or (N, 3) array for points, got shape {points.shape}.")

    if check_finite and not np.isfinite(points[:, :2]).all():
        bad_indices = np.argwhere(~np.isfinite(points[:, :2]))
        raise ValueError(f"Non-finite coordinates detected at indices: {bad_indices.tolist()}")


def _require_min_points(points: np.ndarray, n_min: int, what: str = "points") -> None:
    """
    Require at least `n_min` rows in `points`.

    Raises
    ------
    ValueError
        If fewer than `n_min` rows are present.
    """
    if points.shape[0] < n_min:
        raise ValueError(f"Need at least {n_min} {what}, got {points.shape[0]}.")
