"""Core business logic for ci-release.

- Version parsing and patch bumping
- Commit message categorisation and changelog rendering
"""

from __future__ import annotations

from ci_release.core.changelog import (
    CategoryEntry,
    ChangelogReport,
    build_report,
    parse_entry,
    render_changelog,
)
from ci_release.core.version import Version

__all__ = [
    # Changelog
    "CategoryEntry",
    "ChangelogReport",
    # Version
    "Version",
    "build_report",
    "parse_entry",
    "render_changelog",
]
