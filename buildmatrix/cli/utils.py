"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from buildmatrix.config.parser import ProjectConfig, parse_config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "BUILDMATRIX_CONFIG"
DEFAULT_CONFIG_NAME = "buildmatrix.yaml"


# ============================================================================
# Configuration Management
# ============================================================================


def resolve_config_path(config: Optional[Path] = None) -> Path:
    """
    Determine which configuration file to use.

    Lookup order: explicit path, BUILDMATRIX_CONFIG environment variable,
    then ./buildmatrix.yaml.

    Args:
        config: Path given on the command line (optional)

    Returns:
        Path to the configuration file (not checked for existence)
    """
    if config:
        return Path(config)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        logger.debug(f"Using configuration from {CONFIG_ENV_VAR}: {env_path}")
        return Path(env_path)

    return Path.cwd() / DEFAULT_CONFIG_NAME


def load_project_config(config: Optional[Path] = None) -> ProjectConfig:
    """
    Resolve and parse the project configuration.

    Raises:
        ConfigError: If the file is missing or invalid
    """
    path = resolve_config_path(config)
    logger.debug(f"Loading configuration: {path}")
    return parse_config(path)
