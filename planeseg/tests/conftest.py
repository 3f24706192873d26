import datetime
import io
import logging
import pathlib

import numpy as np
import pytest

from planeseg import OrganizedPointCloud, RGBPlaneCoefficientComparator


LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport (with .outcome) to the item so fixtures can see the
    # outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture logging for each test into an in-memory buffer and write it to
    a file only when the test fails.
    """
    root = logging.getLogger()
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    pkg = logging.getLogger("planeseg")
    prev_level = pkg.level
    pkg.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        root.removeHandler(handler)
        pkg.setLevel(prev_level)

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and getattr(rep, "outcome", None) == "failed":
            LOG_DIR.mkdir(exist_ok=True)
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())


@pytest.fixture
def make_rgb_comparator():
    """Factory: comparator wired to a 1-row cloud built from per-point lists."""
    def _make(xyz, rgb, normals, angular=None, distance=None, color=None):
        xyz = np.asarray(xyz, dtype=np.float32)
        cloud = OrganizedPointCloud(xyz, np.asarray(rgb, dtype=np.uint8), width=xyz.shape[0])
        comp = RGBPlaneCoefficientComparator()
        comp.set_input_cloud(cloud)
        comp.set_input_normals(np.asarray(normals, dtype=np.float32))
        if angular is not None:
            comp.set_angular_threshold(angular)
        if distance is not None:
            comp.set_distance_threshold(distance)
        if color is not None:
            comp.set_color_threshold(color)
        return comp
    return _make


@pytest.fixture
def random_scene():
    """8x8 organized grid: a gently tilted plane split into two color halves,
    with noisy normals and small color noise. Returns (cloud, normals).
    """
    rng = np.random.default_rng(1234)
    h, w = 8, 8
    rows, cols = np.mgrid[0:h, 0:w]
    xyz = np.stack([cols * 0.05, rows * 0.05, 1.0 + 0.01 * cols], axis=-1)
    xyz = xyz + rng.normal(scale=0.01, size=xyz.shape)
    rgb = np.where((cols < w // 2)[..., None], [200, 40, 40], [40, 40, 200])
    rgb = np.clip(rgb + rng.integers(-6, 7, size=rgb.shape), 0, 255)
    normals = np.array([0.0, 0.0, 1.0]) + rng.normal(scale=0.08, size=(h, w, 3))
    normals /= np.linalg.norm(normals, axis=-1, keepdims=True)
    cloud = OrganizedPointCloud.from_grid(xyz, rgb)
    return cloud, normals.reshape(-1, 3).astype(np.float32)


@pytest.fixture
def grid_pairs():
    """All 4-connected (right, down) index pairs of the 8x8 grid."""
    h, w = 8, 8
    idx = np.arange(h * w).reshape(h, w)
    right = np.stack([idx[:, :-1].ravel(), idx[:, 1:].ravel()], axis=1)
    down = np.stack([idx[:-1, :].ravel(), idx[1:, :].ravel()], axis=1)
    pairs = np.concatenate([right, down])
    return pairs[:, 0], pairs[:, 1]
