# -*- coding: utf-8 -*-
# Relatix/relate/relate_geometry.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
Operand wrapper for one input geometry (A or B) of a relate computation. Owns the
extraction of RelateSegmentStrings (walks) from the geometry's lines and rings.

Extraction rules:
-----------------
   - Atomic elements are numbered from 1 in traversal order; collections are recursed.
   - Lines -> one line walk each. Polygons -> one ring walk per ring, ring id 0 for the
     shell and 1..n for holes.
   - The enclosing polygon of a ring walk is the parent MultiPolygon if the polygon came
     from one, otherwise the polygon itself.
   - Empty elements (and empty rings) are skipped. With `bounds` given, elements and
     rings whose envelopes do not intersect it are skipped too (ids are still consumed
     only by extracted elements).
   - Walk normalization follows the relate options (see relate.config).

Notes:
------
   - Geometries are shapely objects; points/multipoints contribute no walks.
   - Coordinates are taken as NumPy arrays from shapely and borrowed by the walks.
"""

import logging
from typing import List, Optional, Tuple
import numpy as np
from shapely.geometry.base import BaseGeometry

from geometry import dimension
from .config import build_options
from .segment_string import RelateSegmentString

__all__ = ["RelateGeometry", "name"]

logger = logging.getLogger(__name__)

Bounds = Tuple[float, float, float, float]

_MULTI_TYPES = ("MultiPoint", "MultiLineString", "MultiPolygon", "GeometryCollection")


def name(is_a: bool) -> str:
    """Operand label: "A" or "B"."""
    return "A" if is_a else "B"


def _bounds_intersect(b1: Bounds, b2: Bounds) -> bool:
    return not (b1[2] < b2[0] or b2[2] < b1[0] or b1[3] < b2[1] or b2[3] < b1[1])


class RelateGeometry:
    """
    One operand of a relate computation.

    Parameters
    ----------
    geom : shapely geometry
        The input geometry. Assumed valid.
    is_a : bool, optional
        True for operand A (default), False for operand B.
    """

    def __init__(self, geom: BaseGeometry, is_a: bool = True):
        if geom is None:
            raise ValueError("[RelateGeometry] No geometry provided (geom is None).")
        self.geom = geom
        self.is_a = bool(is_a)
        self._element_id = 0

    @property
    def name(self) -> str:
        return name(self.is_a)

    @property
    def dimension(self) -> int:
        return dimension.of_geometry(self.geom)

    @property
    def bounds(self) -> Optional[Bounds]:
        if self.geom.is_empty:
            return None
        return tuple(self.geom.bounds)

    def is_polygonal(self) -> bool:
        return self.geom.geom_type in ("Polygon", "MultiPolygon")

    def __repr__(self) -> str:
        return "RelateGeometry({}, {})".format(self.name, self.geom.geom_type)

    # --------------------
    # Extraction
    # --------------------
    def extract_segment_strings(self, bounds: Optional[Bounds] = None,
                                options: Optional[dict] = None) -> List[RelateSegmentString]:
        """
        Extract one walk per line and per polygon ring of the geometry.

        Parameters
        ----------
        bounds : Optional[(minx, miny, maxx, maxy)]
            If given, only elements/rings whose envelopes intersect it are extracted.
        options : Optional[dict]
            Relate options (see relate.config.build_options); defaults if None.

        Returns
        -------
        List[RelateSegmentString]
            Walks in traversal order.
        """
        opts = options if options is not None else build_options()
        self._element_id = 0
        seg_strings = []  # type: List[RelateSegmentString]
        self._extract(self.geom, bounds, opts, seg_strings)
        logger.info("[RelateGeometry] %s: extracted %d walks from %d elements.",
                    self.name, len(seg_strings), self._element_id)
        return seg_strings

    def _extract(self, geom, bounds, opts, seg_strings) -> None:
        #-- record if parent is MultiPolygon
        parent_polygonal = geom if geom.geom_type == "MultiPolygon" else None
        if geom.geom_type in _MULTI_TYPES:
            for g in geom.geoms:
                if g.geom_type in _MULTI_TYPES:
                    self._extract(g, bounds, opts, seg_strings)
                else:
                    self._extract_atomic(g, parent_polygonal, bounds, opts, seg_strings)
        else:
            self._extract_atomic(geom, parent_polygonal, bounds, opts, seg_strings)

    def _extract_atomic(self, geom, parent_polygonal, bounds, opts, seg_strings) -> None:
        if geom.is_empty:
            return
        if bounds is not None and not _bounds_intersect(bounds, geom.bounds):
            return
        gt = geom.geom_type
        if gt not in ("LineString", "LinearRing", "Polygon"):
            return

        self._element_id += 1
        if gt in ("LineString", "LinearRing"):
            ss = RelateSegmentString.create_line(
                np.asarray(geom.coords), self.is_a, self._element_id, self,
                orient=opts["remove_repeated_lines"])
            seg_strings.append(ss)
            return

        parent_poly = parent_polygonal if parent_polygonal is not None else geom
        self._extract_ring(geom.exterior, 0, bounds, parent_poly, opts, seg_strings)
        for i, hole in enumerate(geom.interiors):
            self._extract_ring(hole, i + 1, bounds, parent_poly, opts, seg_strings)

    def _extract_ring(self, ring, ring_id, bounds, parent_poly, opts, seg_strings) -> None:
        if ring.is_empty:
            return
        if bounds is not None and not _bounds_intersect(bounds, ring.bounds):
            return
        ss = RelateSegmentString.create_ring(
            np.asarray(ring.coords), self.is_a, self._element_id, ring_id, parent_poly, self)
        if opts["orient_rings"]:
            #-- shells one way, holes the other
            require_cw = (ring_id == 0) == opts["shell_cw"]
            ss.orient_and_remove_repeated(require_cw)
        seg_strings.append(ss)
