# -*- coding: utf-8 -*-
# Relatix/main.py

"""
End-to-end driver:
  1) Build two operand geometries (a square with a hole, and a crossing line)
  2) Extract normalized walks for A and B
  3) Node the walks against each other
  4) Print the node sections
  5) Quick QA plot (optional)
"""

import logging

from shapely.geometry import LineString, Polygon

from relate.api import extract_walks, node_sections
from relate.config import build_options


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Relatix")

    # ------------------------------------------------------------------
    # 1) Operands
    #    - A: square with a leading duplicate point and a square hole
    #    - B: a line passing through a shell vertex and crossing the hole
    # ------------------------------------------------------------------
    geom_a = Polygon(
        [(0, 0), (0, 0), (10, 0), (10, 10), (0, 10), (0, 0)],
        holes=[[(4, 4), (6, 4), (6, 6), (4, 6), (4, 4)]],
    )
    geom_b = LineString([(-5, -5), (0, 0), (5, 5), (15, 5)])

    options = build_options({"orient_rings": True, "shell_cw": True})

    # ------------------------------------------------------------------
    # 2) Walks
    # ------------------------------------------------------------------
    walks_a, walks_b = extract_walks(geom_a, geom_b, options=options)
    for ss in walks_a + walks_b:
        log.info("%r: %s", ss, ss.coordinates.to_numpy()[:, :2].tolist())

    # ------------------------------------------------------------------
    # 3) + 4) Node sections
    # ------------------------------------------------------------------
    pairs = node_sections(geom_a, geom_b, options=options)
    for ns_a, ns_b in pairs:
        log.info("%s  |  %s", ns_a, ns_b)

    # ------------------------------------------------------------------
    # 5) Quick QA plot (optional, needs matplotlib)
    # ------------------------------------------------------------------
    try:
        from post.plot_walk import plot_walks
        plot_walks(walks_a + walks_b, pairs, show=True, save_path="walks.png")
    except ImportError as e:
        log.warning("Skipping QA plot: %s", e)
