# -*- coding: utf-8 -*-
# Relatix/relate/errors.py

"""
Project: Relatix
Date: 10/18/2026

Purpose
-------
Typed exceptions for the relate layer. Every error here is a caller defect (bad input
to a walk, a bad segment index, a malformed options mapping); none of them is meant
to be caught and recovered from inside the engine.

Main Tasks
----------
    1. Define RelateError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: WalkPreconditionError, SegmentIndexError, OptionsError.

Notes
-----
- RelateError derives from ValueError, matching the plain ValueErrors raised by the
  array validation helpers in `geometry`.
- Context is optional; long values are truncated for readability.
"""

__all__ = [
    "RelateError",
    "WalkPreconditionError",
    "SegmentIndexError",
    "OptionsError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class RelateError(ValueError):
    """
    Base class for all relate-layer errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"seg_index": 7, "size": 5}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(RelateError, self).__init__(message)

    def __str__(self):
        base = super(RelateError, self).__str__()
        return base + _format_context(self.context)


class WalkPreconditionError(RelateError):
    """
    A walk was built from unusable input:
      - fewer than two points
      - a ring whose first and last points differ
    """


class SegmentIndexError(RelateError):
    """
    A segment index outside 0..size-2, or the unknown-index marker (None) used on a
    walk that is not exactly two points long.
    """


class OptionsError(RelateError):
    """
    Problems building relate options:
      - unknown keys
      - values of the wrong type
    """
