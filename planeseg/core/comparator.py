"""Pairwise equivalence comparators for organized segmentation.

A comparator answers one question for a labeling engine walking a grid: do
the cells at indices i and j belong to the same region? Engines depend only
on ``Comparator.compare`` (and optionally ``compare_pairs``); the variants
decide on different cues.

Comparators hold references to arrays owned by the engine. Nothing is
validated per call: indices must be in range for every installed array and
the arrays must share one indexing. Violations give undefined results.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .cloud import OrganizedPointCloud, standardize_normals
from .config import PlaneCoefficientConfig
from .kernels import plane_coeff_compare_kernel, plane_coeff_compare_pairs_kernel
from .logging_utils import get_logger

logger = get_logger(__name__)

_EMPTY_XYZ = np.empty((0, 3), dtype=np.float32)


def _as_index_pairs(idx1, idx2):
    a = np.asarray(idx1, dtype=np.int64).ravel()
    b = np.asarray(idx2, dtype=np.int64).ravel()
    if a.shape != b.shape:
        raise ValueError(f"index arrays must have the same length, got {a.shape[0]} and {b.shape[0]}")
    return a, b


class Comparator:
    """Base class of the comparator family.

    Holds the input cloud. Subclasses implement ``compare`` and usually
    override ``compare_pairs`` with a compiled batch kernel.
    """

    def __init__(self):
        self._input: Optional[OrganizedPointCloud] = None

    def set_input_cloud(self, cloud: OrganizedPointCloud) -> None:
        """Install the point cloud reference (not copied)."""
        self._input = cloud
        logger.debug(f"{type(self).__name__}: input cloud set ({len(cloud)} points, "
                     f"{cloud.width}x{cloud.height})")

    def get_input_cloud(self) -> Optional[OrganizedPointCloud]:
        return self._input

    def compare(self, idx1: int, idx2: int) -> bool:
        """Return True if points idx1 and idx2 belong to the same region."""
        raise NotImplementedError("Subclasses must implement compare")

    def compare_pairs(self, idx1, idx2) -> np.ndarray:
        """Element-wise ``compare`` over two equal-length index arrays.

        Returns a boolean array. Raises ValueError when the lengths differ.
        """
        a, b = _as_index_pairs(idx1, idx2)
        out = np.empty(a.shape[0], dtype=bool)
        for k in range(a.shape[0]):
            out[k] = self.compare(int(a[k]), int(b[k]))
        return out


class PlaneCoefficientComparator(Comparator):
    """Compares neighbors on normal direction and plane d-coefficient.

    The a, b, c coefficients of each point's plane are its normal; the d
    coefficients come from ``set_plane_coeff_d``. Two points agree when their
    normals are within the angular threshold and their d-coefficients differ
    by less than the distance threshold (optionally scaled by depth²).
    """

    _config_type = PlaneCoefficientConfig

    def __init__(self, plane_coeff_d=None, config: Optional[PlaneCoefficientConfig] = None):
        super().__init__()
        self._normals: Optional[np.ndarray] = None
        self._plane_coeff_d: Optional[np.ndarray] = None
        self._config = self._check_config(config) if config is not None else self._config_type()
        if plane_coeff_d is not None:
            self.set_plane_coeff_d(plane_coeff_d)

    @classmethod
    def _check_config(cls, config):
        if not isinstance(config, cls._config_type):
            raise TypeError(f"{cls.__name__} expects a {cls._config_type.__name__}, "
                            f"got {type(config).__name__}")
        return config

    # --- configuration ---

    @property
    def config(self):
        """The frozen threshold configuration currently installed."""
        return self._config

    def set_config(self, config) -> None:
        """Install a whole configuration; raises TypeError for another variant's config."""
        self._config = self._check_config(config)
        logger.debug(f"{type(self).__name__}: config set to {config}")

    def set_input_normals(self, normals) -> None:
        """Install the normal array; must share the input cloud's indexing.

        (N, 4) and grid shaped inputs are viewed down to (N, 3) float32.
        """
        self._normals = standardize_normals(normals)
        logger.debug(f"{type(self).__name__}: input normals set ({self._normals.shape[0]} normals)")

    def get_input_normals(self) -> Optional[np.ndarray]:
        return self._normals

    def set_plane_coeff_d(self, plane_coeff_d) -> None:
        """Install the d-coefficients of the planes' hessian normal form.

        A float32 array is kept by reference; other sequences are copied.
        """
        self._plane_coeff_d = np.asarray(plane_coeff_d, dtype=np.float32).ravel()

    def get_plane_coeff_d(self) -> Optional[np.ndarray]:
        return self._plane_coeff_d

    def set_angular_threshold(self, angular_threshold: float) -> None:
        """Tolerance in radians between neighboring normals, stored as its cosine."""
        self._config = self._config.with_angular_threshold(angular_threshold)
        logger.debug(f"{type(self).__name__}: angular threshold {angular_threshold} rad "
                     f"(stored cos {self._config.angular_cos})")

    def get_angular_threshold(self) -> float:
        return self._config.angular_threshold

    def set_distance_threshold(self, distance_threshold: float, depth_dependent: bool = False) -> None:
        """Tolerance in meters between the d-coefficients of neighboring points."""
        self._config = self._config.with_distance_threshold(distance_threshold, depth_dependent)
        logger.debug(f"{type(self).__name__}: distance threshold {self._config.distance} "
                     f"(depth dependent: {self._config.depth_dependent})")

    def get_distance_threshold(self) -> float:
        return self._config.distance

    def get_depth_dependent(self) -> bool:
        return self._config.depth_dependent

    # --- evaluation ---

    def _xyz(self):
        # Only the depth dependent threshold reads positions
        if self._input is None:
            return _EMPTY_XYZ
        return self._input.xyz

    def compare(self, idx1: int, idx2: int) -> bool:
        cfg = self._config
        return plane_coeff_compare_kernel(self._xyz(), self._normals, self._plane_coeff_d,
                                          idx1, idx2, cfg.distance, cfg.angular_cos,
                                          cfg.depth_dependent)

    def compare_pairs(self, idx1, idx2) -> np.ndarray:
        a, b = _as_index_pairs(idx1, idx2)
        cfg = self._config
        return plane_coeff_compare_pairs_kernel(self._xyz(), self._normals, self._plane_coeff_d,
                                                a, b, cfg.distance, cfg.angular_cos,
                                                cfg.depth_dependent)


__all__ = ['Comparator', 'PlaneCoefficientComparator']
