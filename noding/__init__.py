# -*- coding: utf-8 -*-
# Relatix/noding/__init__.py

"""
Project: Relatix
Date: 10/18/2026

Noding Subfolder:
-----------------
- segment_string: ring-aware base SegmentString.
- intersector:    segment intersection, EdgeSegmentIntersector, SimpleNoder.
"""

__all__ = ["segment_string", "intersector"]
