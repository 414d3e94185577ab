"""
Platforms command implementation.

Shows which GOOS/GOARCH pairs a go toolchain version can target.
"""

import json
import logging

from buildmatrix.cross.platforms import supported_platforms
from buildmatrix.toolchain.version import parse_toolchain_version, probe_go_version

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the platforms command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    if args.go_version:
        output = args.go_version
    else:
        output = probe_go_version(args.go_binary)

    version = parse_toolchain_version(output)
    logger.info(f"Platforms supported by go {version}:")

    platforms = supported_platforms(version)
    if args.json:
        print(json.dumps([f"{os}/{arch}" for os, arch in platforms], indent=2))
        return 0

    for os, arch in platforms:
        print(f"{os}/{arch}")

    return 0
