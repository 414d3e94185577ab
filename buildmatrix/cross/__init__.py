"""
Cross-compilation support for buildmatrix.

This module provides the Go platform catalog and the expansion of build
specifications into ordered lists of cross-compilation targets.
"""

from buildmatrix.cross.platforms import (
    is_valid,
    known_arch,
    known_os,
    supported_platforms,
)
from buildmatrix.cross.targets import (
    Target,
    build_matrix,
    expand_variants,
    is_excluded,
    list_targets,
    matrix,
)

__all__ = [
    "Target",
    "build_matrix",
    "expand_variants",
    "is_excluded",
    "list_targets",
    "matrix",
    "is_valid",
    "known_arch",
    "known_os",
    "supported_platforms",
]
