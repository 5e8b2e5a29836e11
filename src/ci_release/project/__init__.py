"""Project files that carry the version: VERSION and Maven descriptors."""

from __future__ import annotations

from ci_release.project.maven import find_build_descriptors, set_project_version
from ci_release.project.version_file import write_version_file

__all__ = [
    "find_build_descriptors",
    "set_project_version",
    "write_version_file",
]
