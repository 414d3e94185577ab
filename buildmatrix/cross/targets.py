"""
Cross-compilation target matrix.

This module expands a BuildSpec into the ordered list of Go targets it should
produce. Targets are rendered as ``goos_goarch`` with an ``_goarm`` or
``_gomips`` suffix when the architecture has sub-variants.

Order matters: os values are traversed in declaration order, then arch
values, then variants. Callers may treat the first target as the default.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from buildmatrix.config.parser import BuildSpec, IgnoredBuild
from buildmatrix.core.directory import PathKind, stat_path
from buildmatrix.core.exceptions import (
    ConfigValidationError,
    InvalidBuildDirError,
    ToolchainProbeError,
)
from buildmatrix.cross.platforms import is_valid, known_arch, known_os
from buildmatrix.toolchain.version import (
    ToolchainVersion,
    parse_toolchain_version,
    probe_go_version,
)

logger = logging.getLogger(__name__)

VALID_GOARM = ("6", "7")
VALID_GOMIPS = ("hardfloat", "softfloat")

ARM_ARCHES = ("arm",)
MIPS_ARCHES = ("mips", "mipsle", "mips64", "mips64le")


@dataclass(frozen=True)
class Target:
    """
    A single concrete build target.

    Attributes:
        os: GOOS value
        arch: GOARCH value
        arm: GOARM revision, only for arch 'arm'
        mips: GOMIPS float mode, only for the mips family
    """

    os: str
    arch: str
    arm: Optional[str] = None
    mips: Optional[str] = None

    def __post_init__(self):
        if self.arm is not None and self.arch not in ARM_ARCHES:
            raise ValueError(f"goarm is only valid for arm, not {self.arch}")
        if self.mips is not None and self.arch not in MIPS_ARCHES:
            raise ValueError(
                f"gomips is only valid for {', '.join(MIPS_ARCHES)}, not {self.arch}"
            )

    def as_env(self) -> Dict[str, Optional[str]]:
        """Get the target as GOOS/GOARCH/GOARM/GOMIPS style values."""
        return {
            "goos": self.os,
            "goarch": self.arch,
            "goarm": self.arm,
            "gomips": self.mips,
        }

    def __str__(self) -> str:
        name = f"{self.os}_{self.arch}"
        if self.arm:
            name += f"_{self.arm}"
        elif self.mips:
            name += f"_{self.mips}"
        return name


def expand_variants(
    os: str, arch: str, goarm: Sequence[str], gomips: Sequence[str]
) -> List[Target]:
    """
    Expand an (os, arch) pair into its concrete variant targets.

    Args:
        os: GOOS value
        arch: GOARCH value
        goarm: ARM revisions to build, in order
        gomips: MIPS float modes to build, in order

    Returns:
        One target per variant, or a single variant-less target when the
        arch has no variants or the variant list is empty

    Example:
        >>> [str(t) for t in expand_variants("linux", "arm", ["6", "7"], [])]
        ['linux_arm_6', 'linux_arm_7']
    """
    if arch in ARM_ARCHES and goarm:
        return [Target(os, arch, arm=arm) for arm in goarm]
    if arch in MIPS_ARCHES and gomips:
        return [Target(os, arch, mips=mips) for mips in gomips]
    return [Target(os, arch)]


def is_excluded(target: Target, rules: Iterable[IgnoredBuild]) -> bool:
    """Check if any ignore rule matches the target."""
    return any(rule.matches(target) for rule in rules)


def _check_values(field: str, values: Sequence[str], allowed: Sequence[str]):
    for value in values:
        if value not in allowed:
            raise ConfigValidationError(field, value)


def validate_spec(spec: BuildSpec):
    """
    Validate every enumerated value declared by a build.

    Checks goos, goarch, goarm and gomips, in that order. The first unknown
    value in declaration order is reported.

    Raises:
        ConfigValidationError: On the first unknown value
    """
    _check_values("goos", spec.goos, known_os())
    _check_values("goarch", spec.goarch, known_arch())
    _check_values("goarm", spec.goarm, VALID_GOARM)
    _check_values("gomips", spec.gomips, VALID_GOMIPS)


def build_matrix(spec: BuildSpec, version: ToolchainVersion) -> List[str]:
    """
    Compute the ordered target list of a build for a toolchain version.

    Args:
        spec: Build specification
        version: Version of the go toolchain that will compile the targets

    Returns:
        Target names, os outer, arch inner, variant innermost

    Raises:
        ConfigValidationError: If the spec declares an unknown value
    """
    validate_spec(spec)

    result = []
    for os in spec.goos:
        for arch in spec.goarch:
            if not is_valid(os, arch, version):
                logger.debug(f"Skipping {os}/{arch}: not supported by go {version}")
                continue
            for target in expand_variants(os, arch, spec.goarm, spec.gomips):
                if is_excluded(target, spec.ignore):
                    logger.debug(f"Skipping {target}: ignored by build {spec.id}")
                    continue
                result.append(str(target))

    logger.debug(f"Build {spec.id} has {len(result)} targets")
    return result


def matrix(spec: BuildSpec, version_output: Union[bytes, str]) -> List[str]:
    """
    Compute the target list from raw ``go version`` output.

    Args:
        spec: Build specification
        version_output: Output of the toolchain's version command

    Returns:
        Ordered target names

    Raises:
        VersionParseError: If the output contains no go version
        ConfigValidationError: If the spec declares an unknown value
    """
    return build_matrix(spec, parse_toolchain_version(version_output))


def list_targets(
    spec: BuildSpec,
    probe: Callable[[str, Optional[str]], bytes] = probe_go_version,
    stat: Callable[[str], PathKind] = stat_path,
) -> List[str]:
    """
    List the targets of a build using its configured go binary.

    Args:
        spec: Build specification
        probe: Returns the raw version output for (binary, dir)
        stat: Classifies a path on disk

    Returns:
        Ordered target names

    Raises:
        InvalidBuildDirError: If spec.dir is set but is not a directory
        ToolchainProbeError: If the go binary cannot report its version
        VersionParseError: If the version output is unrecognizable
        ConfigValidationError: If the spec declares an unknown value

    Example:
        >>> spec = BuildSpec(goos=["linux"], goarch=["amd64"])
        >>> list_targets(spec)
        ['linux_amd64']
    """
    if spec.dir and stat(spec.dir) != PathKind.DIRECTORY:
        raise InvalidBuildDirError(spec.dir)

    try:
        output = probe(spec.go_binary, spec.dir)
    except ToolchainProbeError:
        raise
    except (OSError, subprocess.SubprocessError) as e:
        raise ToolchainProbeError(spec.go_binary, str(e)) from e

    return matrix(spec, output)
