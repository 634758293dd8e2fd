# -*- coding: utf-8 -*-
# Relatix/post/plot_walk.py

"""
Project: Relatix
Date: 10/18/2026

Purpose:
--------
QA plotting for relate walks with matplotlib: draws each walk (A solid, B dashed), marks
its start vertex with its direction, and overlays node-section points (vertex nodes as
squares, proper crossings as circles). Useful to eyeball ring orientation and where the
noder recorded nodes.
"""

from typing import Iterable, Optional, Sequence, Tuple
import matplotlib.pyplot as plt
from matplotlib.axes import Axes


def plot_walks(walks: Sequence,
               node_sections: Optional[Iterable[Tuple[object, object]]] = None,
               *,
               title: str = "Relate walks",
               show: bool = True,
               save_path: Optional[str] = None,
               ax: Optional[Axes] = None) -> Axes:
    """
        Plot walks and (optionally) node-section pairs.

        Parameters
        ----------
        walks : Sequence[RelateSegmentString]
            Walks of either operand.
        node_sections : Optional[Iterable[(NodeSection, NodeSection)]]
            Pairs as returned by `relate.api.node_sections`.
        title : str
            Axes title.
        show : bool
            If True and we created the figure, display it.
        save_path : Optional[str]
            If given, save the figure to this path.
        ax : Optional[matplotlib.axes.Axes]
            Existing Axes to draw on; if None, a figure is created.

        Returns
        -------
        matplotlib.axes.Axes
            The Axes drawn on.
        """
    created_fig = False
    if ax is None:
        plt.figure(figsize=(6, 6))
        ax = plt.gca()
        created_fig = True

    for ss in walks:
        pts = ss.coordinates.to_numpy()
        style = "-" if ss.is_a else "--"
        color = "tab:blue" if ss.is_a else "tab:orange"
        ax.plot(pts[:, 0], pts[:, 1], style, color=color, lw=1.5)
        # direction cue on the first segment
        ax.annotate("", xy=(pts[1, 0], pts[1, 1]), xytext=(pts[0, 0], pts[0, 1]),
                    arrowprops=dict(arrowstyle="->", color=color))

    if node_sections:
        for ns_a, _ns_b in node_sections:
            marker = "s" if ns_a.is_at_vertex else "o"
            ax.plot(ns_a.point[0], ns_a.point[1], marker, color="tab:red", ms=5)

    ax.set_aspect('equal', adjustable='box')
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.grid(True)
    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
    return ax
