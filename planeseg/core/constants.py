"""Default thresholds and small numeric constants for the comparators.

Defaults are the user-facing values; the config objects apply the stored
transforms (cosine, square) when they are built.
"""
from __future__ import annotations

# Comparator defaults
DEFAULT_ANGULAR_THRESHOLD: float = 0.0     # radians
DEFAULT_DISTANCE_THRESHOLD: float = 0.02   # meters
DEFAULT_COLOR_THRESHOLD: float = 50.0      # RGB units

__all__ = [
    'DEFAULT_ANGULAR_THRESHOLD',
    'DEFAULT_DISTANCE_THRESHOLD',
    'DEFAULT_COLOR_THRESHOLD',
]
