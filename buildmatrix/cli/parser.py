"""
buildmatrix CLI argument parser.

This module implements the command-line interface for buildmatrix using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from buildmatrix.core.exceptions import (
    BuildMatrixError,
    ConfigValidationError,
    InvalidBuildDirError,
    ToolchainProbeError,
)
from buildmatrix.cross.platforms import known_arch, known_os
from buildmatrix.cross.targets import VALID_GOARM, VALID_GOMIPS

# Get version from package
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("buildmatrix")
except PackageNotFoundError:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """buildmatrix command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="buildmatrix",
            description="buildmatrix - Go cross-compilation target matrix",
            epilog='Use "buildmatrix COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"buildmatrix {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./buildmatrix.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_list_command(subparsers)
        self._add_platforms_command(subparsers)

        return parser

    def _add_list_command(self, subparsers):
        """Add 'list' subcommand."""
        parser = subparsers.add_parser(
            "list",
            help="List build targets",
            description="List the cross-compilation targets of each configured build",
        )
        parser.add_argument(
            "--id",
            metavar="ID",
            help="Only list targets of the build with this id",
        )
        parser.add_argument(
            "--go-version",
            metavar="TEXT",
            help='Use this version output instead of running go (e.g., "go1.18.0")',
        )
        parser.add_argument(
            "--json", action="store_true", help="Print targets as JSON"
        )

    def _add_platforms_command(self, subparsers):
        """Add 'platforms' subcommand."""
        parser = subparsers.add_parser(
            "platforms",
            help="Show supported platforms",
            description="Show the GOOS/GOARCH pairs a go toolchain can target",
        )
        source = parser.add_mutually_exclusive_group()
        source.add_argument(
            "--go-version",
            metavar="TEXT",
            help='Use this version output instead of running go (e.g., "go1.18.0")',
        )
        source.add_argument(
            "--go-binary",
            metavar="BIN",
            default="go",
            help="Go binary to query for its version (default: go)",
        )
        parser.add_argument(
            "--json", action="store_true", help="Print platforms as JSON"
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Build errors are logged as ``Error: <message>`` followed by a hint on
        how to fix the build configuration, and exit with status 1.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, 1 for build errors, 130 if interrupted)
        """
        parsed_args = self.parse_args(args)
        self._configure_logging(parsed_args.verbose, parsed_args.quiet)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return COMMANDS[parsed_args.command](parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except BuildMatrixError as e:
            logger.error(f"Error: {e}")
            hint = error_hint(e)
            if hint:
                logger.info(hint)
            logger.debug("Traceback:", exc_info=True)
            return 1

    def _configure_logging(self, verbose: bool, quiet: bool):
        """Log debug details with --verbose, only errors with --quiet."""
        if verbose:
            level, format_str = logging.DEBUG, "%(levelname)s [%(name)s] %(message)s"
        elif quiet:
            level, format_str = logging.ERROR, "%(levelname)s: %(message)s"
        else:
            level, format_str = logging.INFO, "%(message)s"

        logging.basicConfig(level=level, format=format_str, force=True)


def _run_list(args) -> int:
    from buildmatrix.cli.commands import list as list_command

    return list_command.run(args)


def _run_platforms(args) -> int:
    from buildmatrix.cli.commands import platforms as platforms_command

    return platforms_command.run(args)


COMMANDS: Dict[str, Callable[[argparse.Namespace], int]] = {
    "list": _run_list,
    "platforms": _run_platforms,
}


def error_hint(error: BuildMatrixError) -> Optional[str]:
    """
    Suggest how to fix a build error.

    Args:
        error: Error raised while computing targets

    Returns:
        One-line hint, or None when there is nothing useful to add
    """
    if isinstance(error, ConfigValidationError):
        allowed = {
            "goos": known_os(),
            "goarch": known_arch(),
            "goarm": VALID_GOARM,
            "gomips": VALID_GOMIPS,
        }.get(error.field)
        if allowed:
            return f"Supported {error.field} values: {', '.join(allowed)}"
    elif isinstance(error, InvalidBuildDirError):
        return "builds.dir is resolved from the directory buildmatrix runs in"
    elif isinstance(error, ToolchainProbeError):
        return "Set gobinary on the build or make sure go is on PATH"
    return None


def main():
    """Main entry point for CLI."""
    sys.exit(CLI().run())


if __name__ == "__main__":
    main()
