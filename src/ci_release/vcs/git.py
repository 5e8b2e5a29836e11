"""Thin wrapper around the git command line.

Every call runs git as a subprocess in the repository directory.
Failures are raised as GitError carrying git's stderr; nothing is
retried.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ci_release.exceptions import GitError, InvalidInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

# ASCII unit and record separators cannot appear in a commit message
# typed by a human, so they delimit fields and commits unambiguously.
FIELD_SEPARATOR = "\x1f"
RECORD_SEPARATOR = "\x1e"
LOG_FORMAT = f"%h{FIELD_SEPARATOR}%B{RECORD_SEPARATOR}"


@dataclass(frozen=True)
class Commit:
    """A commit as read from the log."""

    sha: str
    message: str


class GitRepository:
    """A git working tree."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _run(self, *args: str) -> str:
        """Run a git command and return its stdout.

        Raises:
            GitError: If git is missing or exits non-zero
        """
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git not found. Is it installed and on PATH?") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout

    def get_commits_since_tag(self, tag: str | None = None) -> list[Commit]:
        """Get commits after ``tag`` up to HEAD, newest first.

        Args:
            tag: Reference to start after; the whole history when None

        Returns:
            Commits with their short hash and full message

        Raises:
            InvalidInputError: If ``tag`` starts with "-" and would be
                read by git as an option
        """
        args = ["log", f"--pretty=format:{LOG_FORMAT}"]
        if tag:
            if tag.startswith("-"):
                raise InvalidInputError(f"Invalid tag {tag!r}: tags cannot start with '-'")
            args.append(f"{tag}..HEAD")
        return parse_log_output(self._run(*args))

    def add(self, paths: Sequence[str | Path]) -> None:
        """Stage the given paths."""
        if not paths:
            return
        self._run("add", "--", *(str(p) for p in paths))

    def has_staged_changes(self) -> bool:
        """Whether the index differs from HEAD.

        Raises:
            GitError: If git fails for any reason other than reporting a diff
        """
        try:
            result = subprocess.run(
                ["git", "diff", "--cached", "--quiet"],
                capture_output=True,
                text=True,
                check=False,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git not found. Is it installed and on PATH?") from e

        # --quiet implies --exit-code: 0 means clean, 1 means changes
        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True
        raise GitError(
            f"git diff failed with exit code {result.returncode}",
            stderr=result.stderr,
        )

    def commit(self, message: str) -> None:
        """Commit whatever is staged."""
        self._run("commit", "-m", message)


def parse_log_output(output: str) -> list[Commit]:
    """Split ``git log`` output produced with LOG_FORMAT into commits."""
    commits = []
    for record in _records(output):
        sha, sep, message = record.partition(FIELD_SEPARATOR)
        if not sep:
            continue
        commits.append(Commit(sha=sha.strip(), message=message.rstrip("\n")))
    return commits


def _records(output: str) -> Iterable[str]:
    for record in output.split(RECORD_SEPARATOR):
        record = record.lstrip("\n")
        if record.strip():
            yield record
