"""Configuration objects for the planar segmentation comparators.

Thresholds are kept in the representation ``compare`` reads (cosine of the
angle, squared distances) and rounded to float32, the precision of the
point and normal data they are compared against. The objects are frozen:
comparators swap the whole object on every setter so a configuration seen
by a running pass never changes under it.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from .constants import (
    DEFAULT_ANGULAR_THRESHOLD,
    DEFAULT_DISTANCE_THRESHOLD,
    DEFAULT_COLOR_THRESHOLD,
)


def _f32(value: float) -> float:
    return float(np.float32(value))


def cos_threshold(angle: float) -> float:
    """Stored form of an angular threshold (float32 cosine)."""
    return _f32(np.cos(np.float32(angle)))


def squared_threshold(value: float) -> float:
    """Stored form of a squared threshold (float32 product)."""
    v = np.float32(value)
    return _f32(v * v)


@dataclass(frozen=True)
class PlaneCoefficientConfig:
    """Thresholds of the plane-coefficient comparator.

    Attributes
    ----------
    angular_cos : float
        Cosine of the maximum angle between neighboring normals.
    distance : float
        Maximum difference of the plane d-coefficients, stored as given.
    depth_dependent : bool
        Scale ``distance`` by the squared depth of the first point.
    """
    angular_cos: float = cos_threshold(DEFAULT_ANGULAR_THRESHOLD)
    distance: float = _f32(DEFAULT_DISTANCE_THRESHOLD)
    depth_dependent: bool = False

    @classmethod
    def from_thresholds(cls, angular_threshold: float = DEFAULT_ANGULAR_THRESHOLD,
                        distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD,
                        depth_dependent: bool = False) -> 'PlaneCoefficientConfig':
        return cls(angular_cos=cos_threshold(angular_threshold),
                   distance=_f32(distance_threshold),
                   depth_dependent=bool(depth_dependent))

    @property
    def angular_threshold(self) -> float:
        """Angular threshold in radians (inverse of the stored cosine)."""
        return _f32(np.arccos(np.float32(self.angular_cos)))

    def with_angular_threshold(self, angle: float) -> 'PlaneCoefficientConfig':
        return replace(self, angular_cos=cos_threshold(angle))

    def with_distance_threshold(self, distance: float,
                                depth_dependent: bool = False) -> 'PlaneCoefficientConfig':
        return replace(self, distance=_f32(distance), depth_dependent=bool(depth_dependent))


@dataclass(frozen=True)
class RGBPlaneCoefficientConfig:
    """Thresholds of the RGB plane-coefficient comparator.

    Attributes
    ----------
    angular_cos : float
        Cosine of the maximum angle between neighboring normals.
    distance_sq : float
        Squared distance threshold. ``compare`` checks the actual (not
        squared) euclidean distance against this value.
    color_sq : float
        Squared RGB distance threshold.
    """
    angular_cos: float = cos_threshold(DEFAULT_ANGULAR_THRESHOLD)
    distance_sq: float = squared_threshold(DEFAULT_DISTANCE_THRESHOLD)
    color_sq: float = squared_threshold(DEFAULT_COLOR_THRESHOLD)

    @classmethod
    def from_thresholds(cls, angular_threshold: float = DEFAULT_ANGULAR_THRESHOLD,
                        distance_threshold: float = DEFAULT_DISTANCE_THRESHOLD,
                        color_threshold: float = DEFAULT_COLOR_THRESHOLD) -> 'RGBPlaneCoefficientConfig':
        return cls(angular_cos=cos_threshold(angular_threshold),
                   distance_sq=squared_threshold(distance_threshold),
                   color_sq=squared_threshold(color_threshold))

    @property
    def angular_threshold(self) -> float:
        """Angular threshold in radians (inverse of the stored cosine)."""
        return _f32(np.arccos(np.float32(self.angular_cos)))

    def with_angular_threshold(self, angle: float) -> 'RGBPlaneCoefficientConfig':
        return replace(self, angular_cos=cos_threshold(angle))

    def with_distance_threshold(self, distance: float) -> 'RGBPlaneCoefficientConfig':
        return replace(self, distance_sq=squared_threshold(distance))

    def with_color_threshold(self, color: float) -> 'RGBPlaneCoefficientConfig':
        return replace(self, color_sq=squared_threshold(color))


__all__ = [
    'PlaneCoefficientConfig', 'RGBPlaneCoefficientConfig',
    'cos_threshold', 'squared_threshold',
]
