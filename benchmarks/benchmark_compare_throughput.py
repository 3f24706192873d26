#!/usr/bin/env python3
"""
Throughput of the RGB plane comparator: per-pair ``compare`` calls vs the
batched ``compare_pairs`` kernel over every 4-connected pair of a frame.
"""

import time
import numpy as np
from planeseg import OrganizedPointCloud, RGBPlaneCoefficientComparator


def make_frame(h=480, w=640, seed=0):
    rng = np.random.default_rng(seed)
    rows, cols = np.mgrid[0:h, 0:w]
    xyz = np.stack([cols * 0.002, rows * 0.002, np.full((h, w), 1.5)], axis=-1)
    xyz = xyz + rng.normal(scale=0.0005, size=xyz.shape)
    rgb = rng.integers(90, 110, size=(h, w, 3))
    normals = np.array([0, 0, 1.0]) + rng.normal(scale=0.02, size=(h, w, 3))
    normals /= np.linalg.norm(normals, axis=-1, keepdims=True)
    return OrganizedPointCloud.from_grid(xyz, rgb), normals.astype(np.float32)


def grid_pairs(h, w):
    idx = np.arange(h * w).reshape(h, w)
    a = np.concatenate([idx[:, :-1].ravel(), idx[:-1, :].ravel()])
    b = np.concatenate([idx[:, 1:].ravel(), idx[1:, :].ravel()])
    return a, b


def benchmark_compare():
    print("\n" + "="*80)
    print("RGB PLANE COMPARATOR THROUGHPUT")
    print("="*80)

    h, w = 480, 640
    cloud, normals = make_frame(h, w)
    comp = RGBPlaneCoefficientComparator()
    comp.set_input_cloud(cloud)
    comp.set_input_normals(normals)
    comp.set_angular_threshold(0.1)
    comp.set_distance_threshold(0.1)
    comp.set_color_threshold(20.0)
    a, b = grid_pairs(h, w)

    # Warm up (JIT compile / cache load)
    comp.compare(0, 1)
    comp.compare_pairs(a[:10], b[:10])

    n_scalar = 200_000
    start = time.time()
    for k in range(n_scalar):
        comp.compare(int(a[k]), int(b[k]))
    t_scalar = time.time() - start
    print(f"   compare():        {n_scalar / t_scalar:>14,.0f} pairs/s")

    n_iters = 10
    start = time.time()
    for _ in range(n_iters):
        accepted = comp.compare_pairs(a, b)
    t_batch = (time.time() - start) / n_iters
    print(f"   compare_pairs():  {a.size / t_batch:>14,.0f} pairs/s  ({a.size:,} pairs, {t_batch*1000:.2f} ms/frame)")
    print(f"   accepted:         {accepted.mean()*100:>13.1f} %")


if __name__ == '__main__':
    benchmark_compare()
