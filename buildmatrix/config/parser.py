"""YAML configuration parser for buildmatrix.

This module provides parsing and validation for buildmatrix.yaml configuration
files and the build specification dataclasses consumed by the target matrix.
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from buildmatrix.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Applied only when the key is absent from a build entry
DEFAULT_GOOS = ["linux", "darwin"]
DEFAULT_GOARCH = ["amd64", "arm64", "386"]
DEFAULT_GOARM = ["6"]
DEFAULT_GOMIPS = ["hardfloat"]


@dataclass
class IgnoredBuild:
    """
    Exclusion rule for the target matrix.

    Any field left as None is a wildcard. A rule with every field unset
    matches every target.
    """

    goos: Optional[str] = None
    goarch: Optional[str] = None
    goarm: Optional[str] = None
    gomips: Optional[str] = None

    def matches(self, target) -> bool:
        """
        Check whether this rule excludes a target.

        Args:
            target: Object exposing ``as_env()`` with goos/goarch/goarm/gomips keys

        Returns:
            True if every field set on the rule equals the target's value
        """
        values = target.as_env()
        for f in fields(self):
            expected = getattr(self, f.name)
            if expected is not None and values.get(f.name) != expected:
                return False
        return True


@dataclass
class BuildSpec:
    """Declarative description of what a single build should target."""

    id: str = "default"
    goos: List[str] = field(default_factory=list)
    goarch: List[str] = field(default_factory=list)
    goarm: List[str] = field(default_factory=list)
    gomips: List[str] = field(default_factory=list)
    ignore: List[IgnoredBuild] = field(default_factory=list)
    go_binary: str = "go"
    dir: Optional[str] = None


@dataclass
class ProjectConfig:
    """Complete buildmatrix configuration."""

    version: int
    project: Optional[str] = None
    builds: List[BuildSpec] = field(default_factory=list)

    def get_build(self, build_id: str) -> BuildSpec:
        """
        Look up a build by id.

        Raises:
            ConfigError: If no build has that id
        """
        for build in self.builds:
            if build.id == build_id:
                return build
        raise ConfigError(f"Unknown build id: {build_id}")


def parse_config(config_path: Path) -> ProjectConfig:
    """
    Parse buildmatrix.yaml configuration file.

    Args:
        config_path: Path to buildmatrix.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

    if data is None:
        raise ConfigError("Configuration file is empty")

    logger.debug(f"Loaded configuration from {config_path}")
    return parse_config_dict(data)


def parse_config_dict(data: Any) -> ProjectConfig:
    """Parse and validate an already-loaded configuration mapping."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    raw_builds = data.get("builds")
    if not raw_builds or not isinstance(raw_builds, list):
        raise ConfigError("At least one build must be defined under 'builds'")

    project = data.get("project")
    default_id = str(project) if project else "default"

    builds = []
    build_ids = set()

    for index, build_data in enumerate(raw_builds):
        build = _parse_build(build_data, index, default_id)

        if build.id in build_ids:
            raise ConfigError(f"Duplicate build id: {build.id}")

        build_ids.add(build.id)
        builds.append(build)

    return ProjectConfig(version=data["version"], project=project, builds=builds)


def _parse_build(data: Any, index: int, default_id: str) -> BuildSpec:
    """Parse a single entry of the builds list."""
    if not isinstance(data, dict):
        raise ConfigError(f"builds[{index}] must be a mapping")

    build_dir = data.get("dir")

    return BuildSpec(
        id=str(data.get("id", default_id)),
        goos=_parse_list(data, "goos", DEFAULT_GOOS, index),
        goarch=_parse_list(data, "goarch", DEFAULT_GOARCH, index),
        goarm=_parse_list(data, "goarm", DEFAULT_GOARM, index),
        gomips=_parse_list(data, "gomips", DEFAULT_GOMIPS, index),
        ignore=_parse_ignore(data.get("ignore", []), index),
        go_binary=str(data.get("gobinary", "go")),
        dir=str(build_dir) if build_dir else None,
    )


def _parse_list(
    data: Dict[str, Any], key: str, default: List[str], index: int
) -> List[str]:
    """Read a list of scalars, normalising values such as ``7`` to ``"7"``."""
    if key not in data:
        return list(default)

    value = data[key]
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"builds[{index}].{key} must be a list")
    return [str(item) for item in value]


def _parse_ignore(data: Any, index: int) -> List[IgnoredBuild]:
    """Parse the ignore list of a build."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigError(f"builds[{index}].ignore must be a list")

    allowed = {f.name for f in fields(IgnoredBuild)}
    rules = []
    for rule_index, rule_data in enumerate(data):
        if not isinstance(rule_data, Mapping):
            raise ConfigError(f"builds[{index}].ignore[{rule_index}] must be a mapping")

        unknown = set(rule_data) - allowed
        if unknown:
            raise ConfigError(
                f"builds[{index}].ignore[{rule_index}] has unknown keys: "
                f"{', '.join(sorted(str(k) for k in unknown))}"
            )

        rules.append(
            IgnoredBuild(
                **{
                    key: str(value)
                    for key, value in rule_data.items()
                    if value is not None
                }
            )
        )
    return rules
