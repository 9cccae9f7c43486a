"""Public package API for the convex separator.

This facade provides a flat import surface on top of the internal
implementation package ``separator.core`` while deferring the matplotlib
import (visualization) until first use to keep ``import separator`` fast.

Example
-------
    from separator import decompose, validate, ValidationStatus

    pieces = decompose([(0, 0), (0, 10), (5, 10), (5, 5), (10, 5), (10, 0)])

The deeper modules (``separator.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("convex-separator")  # populated when installed
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('separator.core.constants')
_geom = _imp('separator.core.geometry')
_decomp = _imp('separator.core.decomposition')
_valid = _imp('separator.core.validation')
_diag = _imp('separator.core.diagnostics')
_scaling = _imp('separator.core.scaling')
_config = _imp('separator.core.config')
_stats = _imp('separator.core.stats')
_io = _imp('separator.core.io')
_log = _imp('separator.core.logging_utils')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            # an unset slot lands here; don't recurse into _load
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded matplotlib-backed module
visualization = _lazy_module('separator.core.visualization')


def plot_decomposition(*args, **kwargs):
    return visualization.plot_decomposition(*args, **kwargs)


# Core entry points
decompose = _decomp.decompose
decompose_with_stats = _decomp.decompose_with_stats
DecompositionFailure = _decomp.DecompositionFailure
validate = _valid.validate
validation_report = _valid.validation_report
ValidationStatus = _valid.ValidationStatus
ValidationReport = _valid.ValidationReport
separate = _scaling.separate
check_decomposition = _diag.check_decomposition
SeparatorConfig = _config.SeparatorConfig
DecompositionStats = _stats.DecompositionStats
configure_logging = _log.configure_logging

# Predicates
orientation = _geom.orientation
segment_intersection = _geom.segment_intersection
ray_hit = _geom.ray_hit
point_on_segment = _geom.point_on_segment
points_match = _geom.points_match

# Tolerances and defaults
EPS_MATCH = _const.EPS_MATCH
DEFAULT_SCALE = _const.DEFAULT_SCALE

# I/O functions
read_polygon = _io.read_polygon
write_pieces = _io.write_pieces

# Namespace submodules for exploratory users
constants = _const
geometry = _geom
decomposition = _decomp
validation = _valid
diagnostics = _diag
io = _io

__all__ = [
    '__version__',
    # decomposition
    'decompose', 'decompose_with_stats', 'DecompositionFailure', 'DecompositionStats',
    'separate', 'SeparatorConfig',
    # validation
    'validate', 'validation_report', 'ValidationStatus', 'ValidationReport', 'check_decomposition',
    # predicates
    'orientation', 'segment_intersection', 'ray_hit', 'point_on_segment', 'points_match',
    # tolerances
    'EPS_MATCH', 'DEFAULT_SCALE',
    # I/O, plotting, logging
    'read_polygon', 'write_pieces', 'plot_decomposition', 'configure_logging',
    # submodules / namespaces
    'constants', 'geometry', 'decomposition', 'validation', 'diagnostics', 'io', 'visualization',
]
