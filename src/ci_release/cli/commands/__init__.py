"""CLI command implementations."""

from __future__ import annotations

from ci_release.cli.commands.bump import run_bump
from ci_release.cli.commands.changelog import run_changelog

__all__ = ["run_bump", "run_changelog"]
