"""Configuration management for ci-release."""

from __future__ import annotations

from ci_release.config.environment import GitHubEnvironment
from ci_release.config.loader import load_config
from ci_release.config.models import BumpConfig, ChangelogConfig, CIReleaseConfig

__all__ = [
    "BumpConfig",
    "CIReleaseConfig",
    "ChangelogConfig",
    "GitHubEnvironment",
    "load_config",
]
