"""Shared utility functions for sofajax.

Provides angle conversion and normalization helpers.
"""

from sofajax.utils._angle import anp, anpm, to_radians

__all__ = [
    "anp",
    "anpm",
    "to_radians",
]
