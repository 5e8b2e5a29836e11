"""Plain-text VERSION file handling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ci_release.exceptions import FileWriteError

if TYPE_CHECKING:
    from pathlib import Path

    from ci_release.core.version import Version


def write_version_file(path: Path, version: Version) -> Path:
    """Overwrite ``path`` with ``version`` followed by a newline.

    Raises:
        FileWriteError: If the file cannot be written
    """
    try:
        path.write_text(f"{version}\n")
    except OSError as e:
        raise FileWriteError(f"Could not write {path}: {e.strerror or e}") from e
    return path
