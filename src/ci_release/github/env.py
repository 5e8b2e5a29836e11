"""Writers for the GitHub Actions environment file.

Later workflow steps see every ``NAME=value`` line appended to the file
named by ``GITHUB_ENV``. Multi-line values use the heredoc form::

    NAME<<EOF
    line one
    line two
    EOF

The delimiter must not appear as a line of the value, otherwise the
runner would end the value early.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ci_release.exceptions import FileWriteError, OutputFormatError

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_DELIMITER = "EOF"


def _check_name(name: str) -> None:
    if not name or "=" in name or "<<" in name or "\n" in name or "\r" in name:
        raise OutputFormatError(f"Invalid environment variable name: {name!r}")


def _append(env_file: Path, text: str) -> None:
    try:
        with env_file.open("a", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise FileWriteError(f"Could not write {env_file}: {e.strerror or e}") from e


def append_env_var(env_file: Path, name: str, value: str) -> None:
    """Append a single-line ``name=value`` assignment."""
    _check_name(name)
    if "\n" in value or "\r" in value:
        raise OutputFormatError(
            f"Value for {name} spans several lines; use append_multiline_env_var"
        )
    _append(env_file, f"{name}={value}\n")


def format_multiline_env_var(name: str, value: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Render a heredoc-style assignment block.

    Raises:
        OutputFormatError: If a line of ``value`` equals ``delimiter``
    """
    _check_name(name)
    if delimiter in value.splitlines():
        raise OutputFormatError(
            f"Value for {name} contains a line equal to the delimiter {delimiter!r}"
        )
    body = value if value.endswith("\n") or not value else value + "\n"
    return f"{name}<<{delimiter}\n{body}{delimiter}\n"


def append_multiline_env_var(
    env_file: Path,
    name: str,
    value: str,
    delimiter: str = DEFAULT_DELIMITER,
) -> None:
    """Append a heredoc-style multi-line assignment."""
    _append(env_file, format_multiline_env_var(name, value, delimiter))
