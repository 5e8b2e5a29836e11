"""Pydantic models for ci-release configuration."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Names written to GITHUB_ENV as NAME=value or NAME<<DELIMITER
ENV_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _check_env_name(value: str) -> str:
    if not ENV_NAME_PATTERN.match(value):
        raise ValueError(f"{value!r} is not a valid environment variable name")
    return value


class BumpConfig(BaseModel):
    """Settings for the version bump command."""

    model_config = ConfigDict(extra="forbid")

    version_file: str = "VERSION"
    build_descriptors: list[str] = Field(default_factory=lambda: ["pom.xml", "*/pom.xml"])
    snapshot_suffix: str = "-SNAPSHOT"
    maven_executable: str = "mvn"
    commit_message: str = "[CI] Prepare next version: {version}"
    changes_flag: str = "has_changes"

    @field_validator("commit_message")
    @classmethod
    def _require_version_placeholder(cls, value: str) -> str:
        if "{version}" not in value:
            raise ValueError("commit_message must contain the {version} placeholder")
        return value

    @field_validator("changes_flag")
    @classmethod
    def _valid_flag_name(cls, value: str) -> str:
        return _check_env_name(value)


class ChangelogConfig(BaseModel):
    """Settings for the changelog command."""

    model_config = ConfigDict(extra="forbid")

    variable: str = "changelog_content"
    delimiter: str = "EOF"

    @field_validator("variable")
    @classmethod
    def _valid_variable_name(cls, value: str) -> str:
        return _check_env_name(value)

    @field_validator("delimiter")
    @classmethod
    def _single_line(cls, value: str) -> str:
        if not value or "\n" in value or "\r" in value:
            raise ValueError("must be a non-empty single line")
        return value


class CIReleaseConfig(BaseModel):
    """Root configuration.

    Read from ``.ci-release.toml`` or ``[tool.ci-release]`` in
    ``pyproject.toml``; every field has a default so an empty
    configuration is valid.
    """

    model_config = ConfigDict(extra="forbid")

    bump: BumpConfig = Field(default_factory=BumpConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)
