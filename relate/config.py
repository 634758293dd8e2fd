# -*- coding: utf-8 -*-
# Relatix/relate/config.py

"""
Project: Relatix
Date: 10/18/2026

Purpose
-------
Assemble the options that drive walk extraction and noding from sectioned defaults and
user overrides, with key normalization and type checking.

Main Tasks
----------
    1. Flatten curated defaults (stable order preserved).
    2. Normalize user keys (strip, lowercase) and reject unknown keys.
    3. Check that every value is a bool and return a flat dict.

Notes
-----
- EXTRACTION.orient_rings : normalize each ring walk right after extraction
                            (orient_and_remove_repeated), freezing it.
- EXTRACTION.shell_cw     : shells clockwise (holes opposite) when orienting.
- EXTRACTION.remove_repeated_lines : collapse duplicate points in line walks.
- NODING.self_nodes       : also intersect walks of the same operand.
- NODING.bounds_filter    : skip elements/segments whose envelopes cannot meet.
"""

from typing import Any, Dict, Mapping, Optional
from .errors import OptionsError

__all__ = ["build_options", "DEFAULTS"]


# -----------------------------
_DEFAULTS_SECTIONS = [
    ("EXTRACTION", {
        "orient_rings": True,
        "shell_cw": True,
        "remove_repeated_lines": True,
    }),
    ("NODING", {
        "self_nodes": False,
        "bounds_filter": True,
    }),
]


def _flatten_defaults(sections):
    """
    Turn sectioned defaults into a single flat dict (stable order preserved).
    """
    flat = {}  # type: Dict[str, Any]
    for _name, block in sections:
        flat.update(block)
    return flat


_DEFAULTS = _flatten_defaults(_DEFAULTS_SECTIONS)
DEFAULTS = dict(_DEFAULTS)


def _normalize_keys(params):
    out = {}
    for k, v in params.items():
        if not isinstance(k, str):
            raise OptionsError("Option keys must be strings.", {"key": k})
        out[k.strip().lower()] = v
    return out


# ---------- Public API ----------
def build_options(params=None,  # type: Optional[Mapping[str, Any]]
                  **overrides   # type: Any
                  ):
    """
    Merge user params (then keyword overrides) over the defaults and return a flat dict.

    Raises
    ------
    OptionsError
        On unknown keys or non-boolean values.
    """
    merged = dict(_DEFAULTS)
    user = {}
    if params:
        user.update(_normalize_keys(params))
    if overrides:
        user.update(_normalize_keys(overrides))

    for key, value in user.items():
        if key not in _DEFAULTS:
            raise OptionsError("Unknown option.", {"key": key, "known": sorted(_DEFAULTS)})
        if not isinstance(value, bool):
            raise OptionsError("Option values must be bool.", {"key": key, "value": value})
        merged[key] = value
    return merged
