"""Configuration loading.

Sources are checked in order and the first one found wins:

1. ``.ci-release.toml`` in the project directory (top-level keys)
2. ``[tool.ci-release]`` in the project's ``pyproject.toml``
3. Built-in defaults
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ci_release.config.models import CIReleaseConfig
from ci_release.exceptions import ConfigValidationError

CONFIG_FILE_NAME = ".ci-release.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"
TOOL_SECTION = "ci-release"


def load_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML file.

    Raises:
        ConfigValidationError: If the file is not valid TOML
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_tool_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.ci-release]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_SECTION, {})


def find_config_data(project_path: Path) -> tuple[dict[str, Any], Path | None]:
    """Locate raw configuration data for a project directory.

    Returns:
        The raw data and the file it came from (None for defaults)
    """
    config_file = project_path / CONFIG_FILE_NAME
    if config_file.is_file():
        return load_toml(config_file), config_file

    pyproject = project_path / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        data = extract_tool_config(load_toml(pyproject))
        if data:
            return data, pyproject

    return {}, None


def load_config(project_path: Path | None = None) -> CIReleaseConfig:
    """Load and validate configuration for a project.

    Args:
        project_path: Project directory (defaults to the current directory)

    Raises:
        ConfigValidationError: If a config file is invalid
    """
    project_path = project_path or Path.cwd()
    data, source = find_config_data(project_path)

    try:
        return CIReleaseConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration in {source}:\n{e}") from e
