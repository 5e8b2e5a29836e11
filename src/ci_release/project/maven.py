"""Maven build-descriptor version propagation.

The project version in every ``pom.xml`` is set by the versions plugin
rather than by editing XML here, so parent references and module
inheritance are resolved by Maven itself.
"""

from __future__ import annotations

import subprocess
from pathlib import PurePath
from typing import TYPE_CHECKING

from ci_release.exceptions import BuildToolError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def build_versions_set_args(executable: str, new_version: str) -> list[str]:
    """Command line for ``versions:set`` across all modules without backup poms."""
    return [
        executable,
        "versions:set",
        f"-DnewVersion={new_version}",
        "-DgenerateBackupPoms=false",
        "-DprocessAllModules",
    ]


def set_project_version(project_path: Path, new_version: str, executable: str = "mvn") -> str:
    """Run the Maven versions plugin to set the project version.

    Args:
        project_path: Directory holding the root ``pom.xml``
        new_version: Version to set, e.g. ``1.2.4-SNAPSHOT``
        executable: Maven executable name or path

    Returns:
        Maven's standard output

    Raises:
        BuildToolError: If Maven is missing or exits non-zero
    """
    args = build_versions_set_args(executable, new_version)
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=True,
            cwd=project_path,
        )
    except FileNotFoundError as e:
        raise BuildToolError(f"{executable} not found. Is Maven installed and on PATH?") from e
    except subprocess.CalledProcessError as e:
        # Maven reports build errors on stdout
        raise BuildToolError(
            f"{executable} versions:set failed with exit code {e.returncode}",
            stderr=e.stderr or e.stdout,
        ) from e
    return result.stdout


def find_build_descriptors(project_path: Path, patterns: Sequence[str]) -> list[Path]:
    """Existing files matching ``patterns``, relative to ``project_path``.

    Patterns are globs relative to the project directory. As with shell
    globs, ``*`` does not match hidden entries such as ``.mvn``. Duplicates
    are dropped and the order of first match is kept.
    """
    found: dict[Path, None] = {}
    for pattern in patterns:
        pattern_parts = PurePath(pattern).parts
        for match in sorted(project_path.glob(pattern)):
            relative = match.relative_to(project_path)
            if any(
                part.startswith(".") and not wanted.startswith(".")
                for part, wanted in zip(relative.parts, pattern_parts)
            ):
                continue
            if match.is_file():
                found.setdefault(relative, None)
    return list(found)
