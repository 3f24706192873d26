"""Compiled decision kernels shared by the scalar and batched comparators.

Each comparator variant has one scalar kernel that decides a single pair and
one batched kernel that maps it over two index arrays. ``compare`` and
``compare_pairs`` both go through the scalar kernel, so the two paths give
identical answers.

Arithmetic follows the single precision data: coordinate and normal products
are formed in float32, the euclidean distance is accumulated in float64 and
color channel differences are taken as signed integers. Compiled without
fastmath. Indices are not bounds checked.
"""
from __future__ import annotations

import math

import numpy as np
from numba import njit, prange

__all__ = [
    'rgb_plane_compare_kernel', 'rgb_plane_compare_pairs_kernel',
    'plane_coeff_compare_kernel', 'plane_coeff_compare_pairs_kernel',
    'normal_dot',
]


@njit(cache=True)
def normal_dot(normals, i, j):
    """Float32 dot product of normals i and j."""
    return (normals[i, 0] * normals[j, 0]
            + normals[i, 1] * normals[j, 1]
            + normals[i, 2] * normals[j, 2])


@njit(cache=True)
def rgb_plane_compare_kernel(xyz, rgb, normals, i, j, distance_sq, angular_cos, color_sq):
    """Distance, normal and color agreement of points i and j.

    The euclidean distance (not squared) is checked against ``distance_sq``.
    """
    dx = np.float64(xyz[i, 0] - xyz[j, 0])
    dy = np.float64(xyz[i, 1] - xyz[j, 1])
    dz = np.float64(xyz[i, 2] - xyz[j, 2])
    dist = math.sqrt(dx * dx + dy * dy + dz * dz)

    dr = np.int64(rgb[i, 0]) - np.int64(rgb[j, 0])
    dg = np.int64(rgb[i, 1]) - np.int64(rgb[j, 1])
    db = np.int64(rgb[i, 2]) - np.int64(rgb[j, 2])
    # Rough metric; RGB distance is not perceptual
    color_dist = np.float32(dr * dr + dg * dg + db * db)

    return (dist < distance_sq
            and normal_dot(normals, i, j) > angular_cos
            and color_dist < color_sq)


@njit(cache=True, parallel=True)
def rgb_plane_compare_pairs_kernel(xyz, rgb, normals, idx1, idx2, distance_sq, angular_cos, color_sq):
    n = idx1.shape[0]
    out = np.empty(n, dtype=np.bool_)
    for k in prange(n):
        out[k] = rgb_plane_compare_kernel(xyz, rgb, normals, idx1[k], idx2[k],
                                          distance_sq, angular_cos, color_sq)
    return out


@njit(cache=True)
def plane_coeff_compare_kernel(xyz, normals, plane_d, i, j, distance, angular_cos, depth_dependent):
    """d-coefficient and normal agreement of points i and j.

    With ``depth_dependent`` the threshold grows with the squared depth of
    point i; ``xyz`` is only read in that case.
    """
    threshold = np.float32(distance)
    if depth_dependent:
        z = xyz[i, 2]
        threshold = threshold * z * z
    return (abs(plane_d[i] - plane_d[j]) < threshold
            and normal_dot(normals, i, j) > angular_cos)


@njit(cache=True, parallel=True)
def plane_coeff_compare_pairs_kernel(xyz, normals, plane_d, idx1, idx2, distance, angular_cos, depth_dependent):
    n = idx1.shape[0]
    out = np.empty(n, dtype=np.bool_)
    for k in prange(n):
        out[k] = plane_coeff_compare_kernel(xyz, normals, plane_d, idx1[k], idx2[k],
                                            distance, angular_cos, depth_dependent)
    return out
