# -*- coding: utf-8 -*-
# Relatix/post/__init__.py

"""
Project: Relatix
Date: 10/18/2026

Modules:
--------
- plot_walk:  matplotlib QA plots of walks and node sections.
"""

__all__ = ["plot_walk"]
