"""RGB-aware plane comparator.

Splits co-planar regions of different color: neighbors are equivalent when
they are close in space, their normals agree and their colors agree.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .comparator import PlaneCoefficientComparator, _as_index_pairs
from .config import RGBPlaneCoefficientConfig
from .kernels import rgb_plane_compare_kernel, rgb_plane_compare_pairs_kernel
from .logging_utils import get_logger

logger = get_logger(__name__)


class RGBPlaneCoefficientComparator(PlaneCoefficientComparator):
    """Compare neighboring points on euclidean distance, normals and RGB.

    Use with an organized connected-component labeling engine to segment
    planes of uniform color from organized data.

    Stored thresholds:

    - angular: cosine of the angle (``get_angular_threshold`` inverts it)
    - distance: distance², returned as stored by ``get_distance_threshold``
    - color: color², returned as stored by ``get_color_threshold``

    ``compare`` tests the actual euclidean distance against the stored
    squared distance threshold, while color is squared against squared. With
    the default 0.02 m threshold only points closer than 0.0004 m agree.

    Stored values are float32, so positive thresholds below float32
    resolution collapse: any angle under about 3.4e-4 rad stores a cosine
    of exactly 1.0, and distance or color thresholds whose square underflows
    store 0.0. The strict comparisons then reject even identical points.

    The plane d-coefficients are accepted for interface compatibility with
    :class:`PlaneCoefficientComparator` but do not take part in ``compare``.

    Preconditions (unchecked): input cloud and normals installed with the same
    indexing, indices in range, thresholds non-negative and the angle in
    [0, pi]. ``compare`` is safe to call from several threads as long as no
    setter runs concurrently.
    """

    _config_type = RGBPlaneCoefficientConfig

    def __init__(self, plane_coeff_d=None, config: Optional[RGBPlaneCoefficientConfig] = None):
        super().__init__(plane_coeff_d=plane_coeff_d, config=config)

    def set_distance_threshold(self, distance_threshold: float, depth_dependent: bool = False) -> None:
        """Tolerance in meters between neighboring points, stored squared.

        Depth dependent thresholds are not supported by this variant;
        ``depth_dependent=True`` raises ValueError.
        """
        if depth_dependent:
            raise ValueError(f"{type(self).__name__} does not support depth dependent distance thresholds")
        self._config = self._config.with_distance_threshold(distance_threshold)
        logger.debug(f"{type(self).__name__}: distance threshold {distance_threshold} "
                     f"(stored {self._config.distance_sq})")

    def get_distance_threshold(self) -> float:
        return self._config.distance_sq

    def get_depth_dependent(self) -> bool:
        return False

    def set_color_threshold(self, color_threshold: float) -> None:
        """Tolerance in RGB space between neighboring points, stored squared."""
        self._config = self._config.with_color_threshold(color_threshold)
        logger.debug(f"{type(self).__name__}: color threshold {color_threshold} "
                     f"(stored {self._config.color_sq})")

    def get_color_threshold(self) -> float:
        return self._config.color_sq

    def compare(self, idx1: int, idx2: int) -> bool:
        """Compare two neighboring points using normals, euclidean distance and color."""
        cfg = self._config
        cloud = self._input
        return rgb_plane_compare_kernel(cloud.xyz, cloud.rgb, self._normals, idx1, idx2,
                                        cfg.distance_sq, cfg.angular_cos, cfg.color_sq)

    def compare_pairs(self, idx1, idx2) -> np.ndarray:
        a, b = _as_index_pairs(idx1, idx2)
        cfg = self._config
        cloud = self._input
        return rgb_plane_compare_pairs_kernel(cloud.xyz, cloud.rgb, self._normals, a, b,
                                              cfg.distance_sq, cfg.angular_cos, cfg.color_sq)


__all__ = ['RGBPlaneCoefficientComparator']
