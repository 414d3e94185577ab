"""
buildmatrix/toolchain/version.py

Go toolchain version detection - asks the configured go binary for its version
and reduces the output to a comparable (major, minor) pair.
"""

import logging
import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional, Union

from ..core.exceptions import ToolchainProbeError, VersionParseError

logger = logging.getLogger(__name__)

# Matches "go1.18", "go1.18.0", "go1.21rc2", "devel go1.22-abcdef"
_GO_VERSION_RE = re.compile(r"go(\d+)\.(\d+)")


@dataclass(frozen=True, order=True)
class ToolchainVersion:
    """
    Go toolchain version, ordered lexicographically by (major, minor).

    Attributes:
        major: Major version number (1 for every released Go)
        minor: Minor version number (e.g., 18 for go1.18.3)
    """

    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def parse_toolchain_version(output: Union[bytes, str]) -> ToolchainVersion:
    """
    Extract the (major, minor) version from ``go version`` output.

    The patch level and anything around the version token are ignored, so
    trailing platform information and newlines are fine.

    Args:
        output: Raw output of the version command

    Returns:
        Parsed ToolchainVersion

    Raises:
        VersionParseError: If no ``go<major>.<minor>`` token is present

    Example:
        >>> parse_toolchain_version(b"go version go1.18.0 linux/amd64\\n")
        ToolchainVersion(major=1, minor=18)
    """
    if isinstance(output, bytes):
        text = output.decode("utf-8", errors="replace")
    else:
        text = output

    match = _GO_VERSION_RE.search(text)
    if not match:
        raise VersionParseError(text.strip())

    version = ToolchainVersion(int(match.group(1)), int(match.group(2)))
    logger.debug(f"Parsed go version {version} from {text.strip()!r}")
    return version


def probe_go_version(
    binary: str, dir: Optional[str] = None, timeout: Optional[float] = None
) -> bytes:
    """
    Run ``<binary> version`` and return its combined output.

    Args:
        binary: Name or path of the go binary
        dir: Working directory for the command (optional)
        timeout: Seconds to wait before giving up (no limit by default)

    Returns:
        Combined stdout and stderr of the command

    Raises:
        ToolchainProbeError: If the binary cannot be found or run, or exits
            with a non-zero status
    """
    found = shutil.which(binary)
    if found is None:
        raise ToolchainProbeError(
            binary, f'exec: "{binary}": executable file not found in $PATH'
        )

    # Relative paths are found from our cwd, so run them from there too
    executable = os.path.abspath(found)
    logger.debug(f"Running {executable} version (cwd={dir or '.'})")
    try:
        result = subprocess.run(
            [executable, "version"],
            cwd=dir or None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            timeout=timeout,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise ToolchainProbeError(binary, f"exit status {e.returncode}") from e
    except subprocess.TimeoutExpired as e:
        raise ToolchainProbeError(
            binary, f"timed out after {e.timeout} seconds"
        ) from e
    except OSError as e:
        raise ToolchainProbeError(binary, str(e)) from e

    return result.stdout


def detect_go_version(
    binary: str = "go", dir: Optional[str] = None, timeout: Optional[float] = None
) -> ToolchainVersion:
    """
    Probe and parse the version of a go binary in one step.

    Args:
        binary: Name or path of the go binary
        dir: Working directory for the command (optional)
        timeout: Seconds to wait before giving up (no limit by default)

    Returns:
        Parsed ToolchainVersion
    """
    return parse_toolchain_version(probe_go_version(binary, dir, timeout))
