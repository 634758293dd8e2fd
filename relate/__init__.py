# -*- coding: utf-8 -*-
# Relatix/relate/__init__.py

"""
Project: Relatix
Date: 10/18/2026

Relate Subfolder:
-----------------
Segment-string (walk) layer of the relate engine: everything needed to describe, at an
intersection point, how a line or ring of operand A or B passes through it.

Modules:
--------
- segment_string:  RelateSegmentString (walk construction, normalization, neighbour
                   lookup, intersection ownership, node-section synthesis).

- node_section:    NodeSection value object.

- relate_geometry: RelateGeometry operand wrapper and walk extraction from shapely.

- config:          Sectioned option defaults and validated overrides.

- errors:          Typed exceptions (RelateError and subclasses).

- api:             extract_walks / node_sections façade.
"""

from .errors import RelateError, WalkPreconditionError, SegmentIndexError, OptionsError
from .node_section import NodeSection
from .segment_string import RelateSegmentString
from .relate_geometry import RelateGeometry
from .config import build_options

__all__ = [
    "RelateError", "WalkPreconditionError", "SegmentIndexError", "OptionsError",
    "NodeSection", "RelateSegmentString", "RelateGeometry", "build_options",
    "api", "config", "errors", "node_section", "relate_geometry", "segment_string",
]
