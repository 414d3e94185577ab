"""
Go toolchain interaction for buildmatrix.

Only the version of the toolchain is ever queried; no compilation happens here.
"""

from buildmatrix.toolchain.version import (
    ToolchainVersion,
    parse_toolchain_version,
    probe_go_version,
    detect_go_version,
)

__all__ = [
    "ToolchainVersion",
    "parse_toolchain_version",
    "probe_go_version",
    "detect_go_version",
]
