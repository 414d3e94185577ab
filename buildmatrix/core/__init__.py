"""
Core functionality for buildmatrix.

This package contains the foundational modules that other components depend on.
"""

from .directory import PathKind, stat_path

from .exceptions import (
    BuildMatrixError,
    ConfigValidationError,
    ConfigError,
    BuildEnvironmentError,
    InvalidBuildDirError,
    ToolchainProbeError,
    VersionParseError,
)

__all__ = [
    # Directory
    "PathKind",
    "stat_path",
    # Exceptions
    "BuildMatrixError",
    "ConfigValidationError",
    "ConfigError",
    "BuildEnvironmentError",
    "InvalidBuildDirError",
    "ToolchainProbeError",
    "VersionParseError",
]
