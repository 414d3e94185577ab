"""
Configuration system for buildmatrix.

Parses buildmatrix.yaml into BuildSpec objects that describe the target matrix
of each build.
"""

from buildmatrix.config.parser import (
    BuildSpec,
    IgnoredBuild,
    ProjectConfig,
    parse_config,
    parse_config_dict,
)

__all__ = [
    "BuildSpec",
    "IgnoredBuild",
    "ProjectConfig",
    "parse_config",
    "parse_config_dict",
]
