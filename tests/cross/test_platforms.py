"""
Unit tests for the Go platform catalog.
"""

import pytest

from buildmatrix.cross.platforms import (
    PLATFORM_CATALOG,
    is_known_platform,
    is_valid,
    known_arch,
    known_os,
    minimum_version,
    supported_platforms,
)
from buildmatrix.toolchain.version import ToolchainVersion

GO_118 = ToolchainVersion(1, 18)


@pytest.mark.parametrize(
    "os,arch,valid",
    [
        # valid targets
        ("aix", "ppc64", True),
        ("android", "386", True),
        ("android", "amd64", True),
        ("android", "arm", True),
        ("android", "arm64", True),
        ("darwin", "amd64", True),
        ("darwin", "arm64", True),
        ("dragonfly", "amd64", True),
        ("freebsd", "386", True),
        ("freebsd", "amd64", True),
        ("freebsd", "arm", True),
        ("illumos", "amd64", True),
        ("linux", "386", True),
        ("linux", "amd64", True),
        ("linux", "arm", True),
        ("linux", "arm64", True),
        ("linux", "mips", True),
        ("linux", "mipsle", True),
        ("linux", "mips64", True),
        ("linux", "mips64le", True),
        ("linux", "ppc64", True),
        ("linux", "ppc64le", True),
        ("linux", "s390x", True),
        ("linux", "riscv64", True),
        ("netbsd", "386", True),
        ("netbsd", "amd64", True),
        ("netbsd", "arm", True),
        ("openbsd", "386", True),
        ("openbsd", "amd64", True),
        ("openbsd", "arm", True),
        ("plan9", "386", True),
        ("plan9", "amd64", True),
        ("plan9", "arm", True),
        ("solaris", "amd64", True),
        ("windows", "386", True),
        ("windows", "amd64", True),
        ("windows", "arm", True),
        ("windows", "arm64", True),
        ("js", "wasm", True),
        # invalid targets
        ("darwin", "386", False),
        ("darwin", "arm", False),
        ("windows", "riscv64", False),
    ],
)
def test_goos_goarch_combos(os, arch, valid):
    """Test catalog validity of os/arch pairs at go 1.18."""
    assert is_valid(os, arch, GO_118) is valid


class TestVersionGates:
    """Tests for version-gated catalog entries."""

    def test_windows_arm64_gate(self):
        """Test windows/arm64 requires go 1.18."""
        assert minimum_version("windows", "arm64") == ToolchainVersion(1, 18)
        assert not is_valid("windows", "arm64", ToolchainVersion(1, 17))
        assert is_valid("windows", "arm64", ToolchainVersion(1, 18))

    @pytest.mark.parametrize(
        "os,arch", [("darwin", "arm64"), ("openbsd", "arm64"), ("freebsd", "arm64")]
    )
    def test_arm64_ports_not_gated(self, os, arch):
        """Test other arm64 ports are valid regardless of version."""
        assert minimum_version(os, arch) is None
        assert is_valid(os, arch, ToolchainVersion(1, 0))

    def test_only_windows_arm64_is_gated(self):
        """Test the catalog has a single gated entry."""
        gated = [pair for pair, gate in PLATFORM_CATALOG.items() if gate is not None]

        assert gated == [("windows", "arm64")]


class TestKnownValues:
    """Tests for known os/arch sets."""

    def test_known_os(self):
        """Test os names derived from the catalog."""
        assert "linux" in known_os()
        assert "js" in known_os()
        assert "beos" not in known_os()
        assert len(known_os()) == len(set(known_os()))

    def test_known_arch(self):
        """Test arch names derived from the catalog."""
        assert "wasm" in known_arch()
        assert "mips64le" in known_arch()
        assert "sparc64" not in known_arch()
        assert len(known_arch()) == len(set(known_arch()))

    def test_known_arch_invalid_for_os_is_still_known(self):
        """Test a known arch is not a known platform with every os."""
        assert "wasm" in known_arch()
        assert not is_known_platform("linux", "wasm")
        assert is_known_platform("js", "wasm")

    def test_known_platform_ignores_gates(self):
        """Test catalog membership does not depend on version."""
        assert is_known_platform("windows", "arm64")


class TestSupportedPlatforms:
    """Tests for supported_platforms listing."""

    def test_go_117_excludes_windows_arm64(self):
        """Test gated pairs are hidden before their version."""
        platforms = supported_platforms(ToolchainVersion(1, 17))

        assert ("windows", "arm64") not in platforms
        assert len(platforms) == len(PLATFORM_CATALOG) - 1

    def test_go_118_lists_everything(self):
        """Test all pairs in catalog order from go 1.18."""
        assert supported_platforms(GO_118) == list(PLATFORM_CATALOG)
