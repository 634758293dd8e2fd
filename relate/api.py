# -*- coding: utf-8 -*-
# Relatix/relate/api.py

"""
Project: Relatix
Date: 10/18/2026

Purpose
-------
Thin, import-only façade over the relate walk machinery. Exposes two helpers to
(1) extract normalized walks from both operands and (2) node them against each other,
returning the NodeSection pairs a topology-graph builder consumes.

Main Tasks
----------
    1. `extract_walks` -> wrap A and B in RelateGeometry, extract oriented walks.
    2. `node_sections` -> run the brute-force noder over A x B (and A x A, B x B
       with `self_nodes`), return (ns_a, ns_b) pairs in deterministic order.

Notes
-----
- With `bounds_filter` on, each operand's extraction is clipped to the other operand's
  envelope, since only elements that can meet need walks.
"""

import logging
from typing import List, Optional, Tuple

from noding.intersector import EdgeSegmentIntersector, SimpleNoder
from .config import build_options
from .node_section import NodeSection
from .relate_geometry import RelateGeometry
from .segment_string import RelateSegmentString

__all__ = [
    "extract_walks",
    "node_sections",
]

logger = logging.getLogger(__name__)


# --------
# Helpers
# --------
def extract_walks(
    geom_a,
    geom_b,
    options: Optional[dict] = None,
) -> Tuple[List[RelateSegmentString], List[RelateSegmentString]]:
    """
    Extract the walks of both operands.

    Args
    ----
    geom_a, geom_b : shapely geometries
        Operands A and B (assumed valid).
    options : dict, optional
        Relate options from `relate.config.build_options`; defaults if None.

    Returns
    -------
    (list, list)
        Walks of A and walks of B.
    """
    opts = options if options is not None else build_options()
    rg_a = RelateGeometry(geom_a, is_a=True)
    rg_b = RelateGeometry(geom_b, is_a=False)

    bounds_a = bounds_b = None
    if opts["bounds_filter"] and not opts["self_nodes"]:
        bounds_a, bounds_b = rg_b.bounds, rg_a.bounds
        if bounds_a is None or bounds_b is None:
            logger.info("[extract_walks] Empty operand; nothing to extract.")
            return [], []

    walks_a = rg_a.extract_segment_strings(bounds=bounds_a, options=opts)
    walks_b = rg_b.extract_segment_strings(bounds=bounds_b, options=opts)
    return walks_a, walks_b


def node_sections(
    geom_a,
    geom_b,
    options: Optional[dict] = None,
) -> List[Tuple[NodeSection, NodeSection]]:
    """
    Node the walks of A against those of B.

    Returns
    -------
    list of (NodeSection, NodeSection)
        One pair per recorded intersection, sorted by point then by section.
    """
    opts = options if options is not None else build_options()
    walks_a, walks_b = extract_walks(geom_a, geom_b, options=opts)

    noder = SimpleNoder(EdgeSegmentIntersector(), bounds_filter=opts["bounds_filter"])
    pairs = noder.compute_nodes(walks_a, walks_b, self_nodes=opts["self_nodes"])
    pairs = sorted(pairs, key=lambda p: (float(p[0].point[0]), float(p[0].point[1]),
                                          p[0].sort_key(), p[1].sort_key()))
    logger.info("[node_sections] %d node-section pairs from %d x %d walks.",
                len(pairs), len(walks_a), len(walks_b))
    return pairs
