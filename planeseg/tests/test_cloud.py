"""Tests for the organized point container and normal standardization."""
import numpy as np
import pytest

from planeseg import OrganizedPointCloud, standardize_normals


class TestOrganizedPointCloud:

    def test_from_grid_indexing(self):
        h, w = 3, 4
        xyz = np.arange(h * w * 3, dtype=np.float64).reshape(h, w, 3)
        rgb = np.zeros((h, w, 3), dtype=np.uint8)
        cloud = OrganizedPointCloud.from_grid(xyz, rgb)
        assert len(cloud) == 12
        assert (cloud.width, cloud.height) == (4, 3)
        assert cloud.is_organized
        assert cloud.xyz.dtype == np.float32 and cloud.rgb.dtype == np.uint8
        np.testing.assert_array_equal(cloud.xyz[cloud.index(2, 1)], xyz[2, 1])

    def test_canonical_arrays_not_copied(self):
        xyz = np.zeros((6, 3), dtype=np.float32)
        rgb = np.zeros((6, 3), dtype=np.uint8)
        cloud = OrganizedPointCloud(xyz, rgb, width=3, height=2)
        assert cloud.xyz is xyz
        assert cloud.rgb is rgb

    def test_unorganized_cloud(self):
        cloud = OrganizedPointCloud(np.zeros((5, 3)), np.zeros((5, 3)), width=5)
        assert not cloud.is_organized

    def test_bad_shapes_raise(self):
        with pytest.raises(ValueError):
            OrganizedPointCloud(np.zeros((4, 2)), np.zeros((4, 2)), width=4)
        with pytest.raises(ValueError):
            OrganizedPointCloud(np.zeros((4, 3)), np.zeros((3, 3)), width=4)
        with pytest.raises(ValueError):
            OrganizedPointCloud(np.zeros((4, 3)), np.zeros((4, 3)), width=3, height=2)
        with pytest.raises(ValueError):
            OrganizedPointCloud.from_grid(np.zeros((4, 3)), np.zeros((4, 3)))

    def test_out_of_range_colors_raise(self):
        with pytest.raises(ValueError):
            OrganizedPointCloud(np.zeros((2, 3)), np.array([[256, 0, 0], [0, 0, 0]]), width=2)
        with pytest.raises(ValueError):
            OrganizedPointCloud(np.zeros((2, 3)), np.array([[0, -1, 0], [0, 0, 0]]), width=2)
        with pytest.raises(ValueError):
            OrganizedPointCloud.from_grid(np.zeros((1, 2, 3)), np.full((1, 2, 3), 300))

    def test_in_range_int_colors_converted(self):
        cloud = OrganizedPointCloud(np.zeros((2, 3)), np.array([[255, 0, 0], [0, 128, 7]]), width=2)
        assert cloud.rgb.dtype == np.uint8
        assert cloud.rgb.tolist() == [[255, 0, 0], [0, 128, 7]]


class TestStandardizeNormals:

    @pytest.mark.parametrize("shape", [(6, 3), (6, 4), (2, 3, 3), (2, 3, 4)])
    def test_accepted_shapes(self, shape):
        out = standardize_normals(np.ones(shape))
        assert out.shape == (6, 3)
        assert out.dtype == np.float32

    def test_view_without_copy(self):
        normals = np.ones((5, 4), dtype=np.float32)
        out = standardize_normals(normals)
        assert np.shares_memory(out, normals)

    @pytest.mark.parametrize("shape", [(6,), (6, 2), (6, 5)])
    def test_rejected_shapes(self, shape):
        with pytest.raises(ValueError):
            standardize_normals(np.ones(shape))
