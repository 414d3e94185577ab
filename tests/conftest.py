"""
Pytest configuration and shared fixtures for buildmatrix tests.
"""

import os
import stat
import sys
from pathlib import Path

import pytest

from buildmatrix.config.parser import BuildSpec, IgnoredBuild


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run real subprocesses",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def reference_build() -> BuildSpec:
    """Build spec covering every os/arch family, variants and ignore rules."""
    return BuildSpec(
        id="reference",
        go_binary="go",
        goos=["linux", "darwin", "freebsd", "openbsd", "windows", "js"],
        goarch=[
            "386",
            "amd64",
            "arm",
            "arm64",
            "wasm",
            "mips",
            "mips64",
            "mipsle",
            "mips64le",
            "riscv64",
        ],
        goarm=["6", "7"],
        gomips=["hardfloat", "softfloat"],
        ignore=[
            IgnoredBuild(goos="linux", goarch="arm", goarm="7"),
            IgnoredBuild(goos="openbsd", goarch="arm"),
            IgnoredBuild(goarch="mips64", gomips="hardfloat"),
            IgnoredBuild(goarch="mips64le", gomips="softfloat"),
        ],
    )


@pytest.fixture
def fake_go(tmp_path: Path):
    """
    Create an executable that behaves like ``go version``.

    Returns a factory taking the output to print and the exit code.
    """
    if sys.platform == "win32":
        pytest.skip("fake go binary is a POSIX shell script")

    def _make(output: str = "go version go1.18.0 linux/amd64", exit_code: int = 0):
        script = tmp_path / "bin" / "go"
        script.parent.mkdir(exist_ok=True)
        script.write_text(f"#!/bin/sh\necho '{output}'\nexit {exit_code}\n")
        script.chmod(script.stat().st_mode | stat.S_IEXEC)
        return script

    return _make


@pytest.fixture
def config_file(tmp_path: Path):
    """Write a buildmatrix.yaml into tmp_path and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "buildmatrix.yaml"
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def isolated_env(monkeypatch):
    """Remove buildmatrix environment variables for the test."""
    monkeypatch.delenv("BUILDMATRIX_CONFIG", raising=False)
    return os.environ
