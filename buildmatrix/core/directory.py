"""
Filesystem checks used before probing the toolchain.

The build directory of a spec is only ever inspected, never created: a
missing or non-directory ``builds.dir`` is a configuration mistake that the
user has to fix.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class PathKind(Enum):
    """What a path points at on disk."""

    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"


def stat_path(path: Union[str, Path]) -> PathKind:
    """
    Classify a path as missing, a directory, or some other file.

    Relative paths are resolved against the current working directory.

    Args:
        path: Path to inspect

    Returns:
        PathKind describing the path

    Example:
        >>> stat_path("/tmp")
        <PathKind.DIRECTORY: 'directory'>
    """
    p = Path(path)
    try:
        if p.is_dir():
            return PathKind.DIRECTORY
        if p.exists():
            return PathKind.FILE
    except OSError as e:
        logger.debug(f"Cannot stat {p}: {e}")
    return PathKind.MISSING
