# -*- coding: utf-8 -*-
# Relatix/geometry/dimension.py

"""
Project: Relatix
Date: 10/18/2026

Topological dimension codes as used in DE-9IM: points are 0, lines 1, areas 2, and
FALSE (-1) stands for the empty set.
"""

FALSE = -1
P = 0
L = 1
A = 2

_SYMBOLS = {FALSE: "F", P: "P", L: "L", A: "A"}

_GEOM_TYPE_DIM = {
    "Point": P,
    "MultiPoint": P,
    "LineString": L,
    "LinearRing": L,
    "MultiLineString": L,
    "Polygon": A,
    "MultiPolygon": A,
}


def symbol(dim: int) -> str:
    """Single-letter symbol for a dimension code."""
    if dim not in _SYMBOLS:
        raise ValueError("Unknown dimension code: {}".format(dim))
    return _SYMBOLS[dim]


def of_geometry(geom) -> int:
    """
    Topological dimension of a shapely geometry.

    Collections report the highest dimension of their non-empty members; empty
    geometries report FALSE.
    """
    if geom.is_empty:
        return FALSE
    gt = geom.geom_type
    if gt in _GEOM_TYPE_DIM:
        return _GEOM_TYPE_DIM[gt]
    if gt == "GeometryCollection":
        return max((of_geometry(g) for g in geom.geoms), default=FALSE)
    raise ValueError("Unsupported geometry type: {}".format(gt))
