"""
Centralized exception hierarchy for buildmatrix.

Every message produced here is meant to be shown as-is to the person running
the build, so ``str(exc)`` is always the complete user-facing text.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class BuildMatrixError(Exception):
    """Base exception for all buildmatrix errors."""

    pass


# ============================================================================
# Build Specification Exceptions
# ============================================================================


class ConfigValidationError(BuildMatrixError):
    """Raised when a build declares an unknown goos/goarch/goarm/gomips value."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"invalid {field}: {value}")


class ConfigError(BuildMatrixError):
    """Configuration file parsing or validation error."""

    pass


# ============================================================================
# Environment Exceptions
# ============================================================================


class BuildEnvironmentError(BuildMatrixError):
    """Base exception when the caller's environment is misconfigured."""

    pass


class InvalidBuildDirError(BuildEnvironmentError):
    """Raised when builds.dir is missing or is not a directory."""

    def __init__(self, dir: str):
        self.dir = dir
        super().__init__(
            f"invalid builds.dir property, it should be a directory: {dir}"
        )


class ToolchainProbeError(BuildEnvironmentError):
    """Raised when the go binary cannot be asked for its version."""

    def __init__(self, binary: str, reason: str):
        self.binary = binary
        self.reason = reason
        super().__init__(
            f"unable to determine version of go binary ({binary}): {reason}"
        )


# ============================================================================
# Toolchain Version Exceptions
# ============================================================================


class VersionParseError(BuildMatrixError):
    """Raised when the toolchain version output has no recognizable version."""

    def __init__(self, output: str):
        self.output = output
        super().__init__(f"unable to parse go version from output: {output}")
