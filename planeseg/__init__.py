"""Public package API for planeseg.

Pairwise equivalence comparators for region-growing segmentation of
organized point clouds. A labeling engine installs the cloud, normals and
thresholds once per frame and then asks ``compare(i, j)`` for every pair of
neighboring grid cells (or ``compare_pairs`` for a whole batch).

Example
-------
    from planeseg import OrganizedPointCloud, RGBPlaneCoefficientComparator

    comp = RGBPlaneCoefficientComparator()
    comp.set_input_cloud(OrganizedPointCloud.from_grid(xyz_grid, rgb_grid))
    comp.set_input_normals(normal_grid)
    comp.set_angular_threshold(0.1)
    same = comp.compare(0, 1)

The deeper modules (``planeseg.core.*``) are internal and may change; rely
on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("planeseg")  # populated when installed
except Exception:  # pragma: no cover - editable / unknown state
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('planeseg.core.constants')
_config = _imp('planeseg.core.config')
_cloud = _imp('planeseg.core.cloud')
_kernels = _imp('planeseg.core.kernels')
_comparator = _imp('planeseg.core.comparator')
_rgb = _imp('planeseg.core.rgb_comparator')
_log = _imp('planeseg.core.logging_utils')

# Data containers
OrganizedPointCloud = _cloud.OrganizedPointCloud
standardize_normals = _cloud.standardize_normals

# Configuration
PlaneCoefficientConfig = _config.PlaneCoefficientConfig
RGBPlaneCoefficientConfig = _config.RGBPlaneCoefficientConfig
DEFAULT_ANGULAR_THRESHOLD = _const.DEFAULT_ANGULAR_THRESHOLD
DEFAULT_DISTANCE_THRESHOLD = _const.DEFAULT_DISTANCE_THRESHOLD
DEFAULT_COLOR_THRESHOLD = _const.DEFAULT_COLOR_THRESHOLD

# Comparator family
Comparator = _comparator.Comparator
PlaneCoefficientComparator = _comparator.PlaneCoefficientComparator
RGBPlaneCoefficientComparator = _rgb.RGBPlaneCoefficientComparator

# Logging
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# Namespace submodules
constants = _const
config = _config
kernels = _kernels

__all__ = [
    '__version__',
    # data
    'OrganizedPointCloud', 'standardize_normals',
    # configuration
    'PlaneCoefficientConfig', 'RGBPlaneCoefficientConfig',
    'DEFAULT_ANGULAR_THRESHOLD', 'DEFAULT_DISTANCE_THRESHOLD', 'DEFAULT_COLOR_THRESHOLD',
    # comparators
    'Comparator', 'PlaneCoefficientComparator', 'RGBPlaneCoefficientComparator',
    # logging
    'get_logger', 'configure_logging',
    # submodules
    'constants', 'config', 'kernels',
]
