"""Go platform catalog and helper functions.

This module provides the fixed database of (GOOS, GOARCH) pairs that the Go
toolchain can target, together with the minimum toolchain version required
for pairs that were added later.

Platform Catalog
================

Each entry maps an ``(os, arch)`` pair to the minimum ToolchainVersion that
supports it, or ``None`` when the pair is supported by every toolchain we
care about. Any pair not present is invalid.

When a new Go release adds a port, add a row with its minimum version.
"""

from typing import Dict, List, Optional, Tuple

from buildmatrix.toolchain.version import ToolchainVersion

# (goos, goarch) -> minimum toolchain version, None if always valid
PLATFORM_CATALOG: Dict[Tuple[str, str], Optional[ToolchainVersion]] = {
    ("aix", "ppc64"): None,
    ("android", "386"): None,
    ("android", "amd64"): None,
    ("android", "arm"): None,
    ("android", "arm64"): None,
    ("darwin", "amd64"): None,
    ("darwin", "arm64"): None,
    ("dragonfly", "amd64"): None,
    ("freebsd", "386"): None,
    ("freebsd", "amd64"): None,
    ("freebsd", "arm"): None,
    ("freebsd", "arm64"): None,
    ("illumos", "amd64"): None,
    ("js", "wasm"): None,
    ("linux", "386"): None,
    ("linux", "amd64"): None,
    ("linux", "arm"): None,
    ("linux", "arm64"): None,
    ("linux", "mips"): None,
    ("linux", "mipsle"): None,
    ("linux", "mips64"): None,
    ("linux", "mips64le"): None,
    ("linux", "ppc64"): None,
    ("linux", "ppc64le"): None,
    ("linux", "s390x"): None,
    ("linux", "riscv64"): None,
    ("netbsd", "386"): None,
    ("netbsd", "amd64"): None,
    ("netbsd", "arm"): None,
    ("openbsd", "386"): None,
    ("openbsd", "amd64"): None,
    ("openbsd", "arm"): None,
    ("openbsd", "arm64"): None,
    ("plan9", "386"): None,
    ("plan9", "amd64"): None,
    ("plan9", "arm"): None,
    ("solaris", "amd64"): None,
    ("windows", "386"): None,
    ("windows", "amd64"): None,
    ("windows", "arm"): None,
    ("windows", "arm64"): ToolchainVersion(1, 18),
}

# Ordered, duplicate-free views of the catalog keys
_KNOWN_OS: Tuple[str, ...] = tuple(dict.fromkeys(os for os, _ in PLATFORM_CATALOG))
_KNOWN_ARCH: Tuple[str, ...] = tuple(
    dict.fromkeys(arch for _, arch in PLATFORM_CATALOG)
)


def known_os() -> Tuple[str, ...]:
    """
    Get every GOOS value that appears in the catalog.

    Returns:
        Tuple of os names in catalog order
    """
    return _KNOWN_OS


def known_arch() -> Tuple[str, ...]:
    """
    Get every GOARCH value that appears in the catalog.

    Returns:
        Tuple of architecture names in catalog order
    """
    return _KNOWN_ARCH


def is_known_platform(os: str, arch: str) -> bool:
    """Check catalog membership of a pair, ignoring version gates."""
    return (os, arch) in PLATFORM_CATALOG


def minimum_version(os: str, arch: str) -> Optional[ToolchainVersion]:
    """
    Get the minimum toolchain version required for a pair.

    Args:
        os: GOOS value
        arch: GOARCH value

    Returns:
        Minimum ToolchainVersion, or None if the pair is always valid or
        not in the catalog at all
    """
    return PLATFORM_CATALOG.get((os, arch))


def is_valid(os: str, arch: str, version: ToolchainVersion) -> bool:
    """
    Check if a pair can be built with the given toolchain version.

    Args:
        os: GOOS value
        arch: GOARCH value
        version: Toolchain version in use

    Returns:
        True if the pair is in the catalog and its version gate (if any) is met

    Example:
        >>> is_valid("windows", "arm64", ToolchainVersion(1, 17))
        False
        >>> is_valid("windows", "arm64", ToolchainVersion(1, 18))
        True
    """
    if (os, arch) not in PLATFORM_CATALOG:
        return False
    required = PLATFORM_CATALOG[(os, arch)]
    return required is None or version >= required


def supported_platforms(version: ToolchainVersion) -> List[Tuple[str, str]]:
    """
    List every pair that is valid for the given toolchain version.

    Args:
        version: Toolchain version in use

    Returns:
        List of (os, arch) tuples in catalog order
    """
    return [
        (os, arch) for (os, arch) in PLATFORM_CATALOG if is_valid(os, arch, version)
    ]


__all__ = [
    "PLATFORM_CATALOG",
    "known_os",
    "known_arch",
    "is_known_platform",
    "minimum_version",
    "is_valid",
    "supported_platforms",
]
