"""
List command implementation.

Prints the cross-compilation targets of the builds declared in the project
configuration.
"""

import json
import logging
from typing import Dict, List

from buildmatrix.cli.utils import load_project_config
from buildmatrix.cross.targets import list_targets, matrix

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_project_config(args.config)

    if args.id:
        builds = [config.get_build(args.id)]
    else:
        builds = config.builds

    results: Dict[str, List[str]] = {}
    for build in builds:
        if args.go_version:
            results[build.id] = matrix(build, args.go_version)
        else:
            results[build.id] = list_targets(build)
        logger.debug(f"Build {build.id}: {len(results[build.id])} targets")

    if args.json:
        print(json.dumps(results, indent=2))
        return 0

    single = len(results) == 1
    for build_id, targets in results.items():
        for target in targets:
            print(target if single else f"{build_id}: {target}")

    return 0
