"""Organized point containers handed to the comparators.

Canonical layout (standardized at construction, never inside ``compare``):
    xyz: (N, 3) float32 array, row-major grid order (index = row * width + col)
    rgb: (N, 3) uint8 array, same indexing
    normals: (N, 3) float32 array (a view when the input carries curvature)
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class OrganizedPointCloud:
    """Grid-indexed points with position and color channels.

    Arrays already in the canonical dtype are kept by reference; the cloud
    never copies them, so the caller must not resize or free them while a
    comparator holds the cloud.
    """
    xyz: np.ndarray
    rgb: np.ndarray
    width: int
    height: int = 1

    def __post_init__(self):
        self.xyz = np.asarray(self.xyz, dtype=np.float32)
        rgb = np.asarray(self.rgb)
        if rgb.dtype != np.uint8 and rgb.size and (rgb.min() < 0 or rgb.max() > 255):
            raise ValueError(f"rgb channels must lie in [0, 255], got range [{rgb.min()}, {rgb.max()}]")
        self.rgb = rgb.astype(np.uint8, copy=False)
        if self.xyz.ndim != 2 or self.xyz.shape[1] != 3:
            raise ValueError(f"xyz must have shape (N, 3), got shape {self.xyz.shape}")
        if self.rgb.shape != self.xyz.shape:
            raise ValueError(f"rgb must match xyz shape {self.xyz.shape}, got shape {self.rgb.shape}")
        self.width = int(self.width)
        self.height = int(self.height)
        if self.width * self.height != self.xyz.shape[0]:
            raise ValueError(
                f"width*height ({self.width}x{self.height}) does not match point count {self.xyz.shape[0]}")

    @classmethod
    def from_grid(cls, xyz_grid, rgb_grid) -> 'OrganizedPointCloud':
        """Build a cloud from (H, W, 3) position and color grids."""
        xyz_grid = np.asarray(xyz_grid, dtype=np.float32)
        rgb_grid = np.asarray(rgb_grid)
        if xyz_grid.ndim != 3 or xyz_grid.shape[2] != 3:
            raise ValueError(f"xyz grid must have shape (H, W, 3), got shape {xyz_grid.shape}")
        h, w = xyz_grid.shape[:2]
        return cls(xyz_grid.reshape(h * w, 3), rgb_grid.reshape(-1, 3), width=w, height=h)

    def __len__(self) -> int:
        return self.xyz.shape[0]

    @property
    def is_organized(self) -> bool:
        return self.height > 1

    def index(self, row: int, col: int) -> int:
        return row * self.width + col


def standardize_normals(normals) -> np.ndarray:
    """Return an (N, 3) float32 view of a normal array.

    Accepts (N, 3), (N, 4) (normal + curvature), (H, W, 3) and (H, W, 4).
    The length is not checked against any cloud; matching indexing is the
    caller's contract.
    """
    arr = np.asarray(normals, dtype=np.float32)
    if arr.ndim == 3:
        arr = arr.reshape(-1, arr.shape[2])
    if arr.ndim != 2 or arr.shape[1] not in (3, 4):
        raise ValueError(f"normals must be (N, 3) or (N, 4), got shape {np.shape(normals)}")
    return arr[:, :3]


__all__ = ['OrganizedPointCloud', 'standardize_normals']
