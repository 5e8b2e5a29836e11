"""Categorised changelog generation from commit messages.

Any line of a commit message that starts with a bracketed tag, e.g.::

    [ci] fix build
    [framework] add module

becomes one changelog entry under that tag. A commit may carry several
tagged lines under different categories. Lines where the bracket does not
open the line are ignored.

Parsing is a pure function returning a ChangelogReport, rendering turns
the report into markdown, and parse_entry reverses the bullet format.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ci_release.exceptions import ParseError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ci_release.vcs.git import Commit

CATEGORY_LINE_PATTERN = re.compile(r"^\[(?P<category>[A-Za-z0-9_.-]+)\] (?P<description>.+)$")
ENTRY_PATTERN = re.compile(
    r"^- \[(?P<sha>[^\]]+)\]\((?P<repo_url>.+?)/commit/(?P=sha)\) (?P<description>.+)$"
)


@dataclass(frozen=True)
class CategoryEntry:
    """One changelog line contributed by one tagged line of a commit."""

    category: str
    sha: str
    description: str
    repo_url: str

    @property
    def commit_url(self) -> str:
        return f"{self.repo_url}/commit/{self.sha}"

    def render(self) -> str:
        """Markdown bullet linking the short hash to the commit page."""
        return f"- [{self.sha}]({self.commit_url}) {self.description}"


@dataclass
class ChangelogReport:
    """Entries grouped by category.

    Categories iterate in ascending lexicographic order; entries within
    a category keep the order they were added in.
    """

    _entries: dict[str, list[CategoryEntry]] = field(default_factory=dict)

    def add(self, entry: CategoryEntry) -> None:
        self._entries.setdefault(entry.category, []).append(entry)

    @property
    def categories(self) -> list[str]:
        return sorted(self._entries)

    def entries(self, category: str) -> list[CategoryEntry]:
        return list(self._entries.get(category, []))

    def __iter__(self) -> Iterator[tuple[str, list[CategoryEntry]]]:
        for category in self.categories:
            yield category, self.entries(category)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


def parse_category_line(line: str) -> tuple[str, str] | None:
    """Split a tagged line into (category, description).

    Returns:
        None when the line does not start with a ``[category] `` tag
    """
    match = CATEGORY_LINE_PATTERN.match(line)
    if not match:
        return None
    return match.group("category"), match.group("description")


def extract_entries(commit: Commit, repo_url: str) -> list[CategoryEntry]:
    """All entries of one commit, in message line order."""
    entries = []
    for line in commit.message.splitlines():
        parsed = parse_category_line(line)
        if parsed is None:
            continue
        category, description = parsed
        entries.append(
            CategoryEntry(
                category=category,
                sha=commit.sha,
                description=description,
                repo_url=repo_url,
            )
        )
    return entries


def build_report(commits: Iterable[Commit], repo_url: str) -> ChangelogReport:
    """Group the tagged lines of ``commits`` by category.

    Args:
        commits: Commits in log order (newest first as git returns them)
        repo_url: Repository web URL used to link each hash

    Returns:
        A new report; commits without tagged lines contribute nothing
    """
    report = ChangelogReport()
    for commit in commits:
        for entry in extract_entries(commit, repo_url):
            report.add(entry)
    return report


def render_changelog(report: ChangelogReport) -> str:
    """Render a report as markdown.

    Each category is a bold ``**[category]**`` header, its bullets, then
    a blank line. An empty report renders as an empty string.
    """
    lines: list[str] = []
    for category, entries in report:
        lines.append(f"**[{category}]**")
        lines.extend(entry.render() for entry in entries)
        lines.append("")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def parse_entry(line: str, category: str = "") -> CategoryEntry:
    """Parse a rendered bullet back into an entry.

    Args:
        line: A line produced by :meth:`CategoryEntry.render`
        category: Category to attach; bullets do not carry their own

    Raises:
        ParseError: If the line is not a rendered changelog bullet
    """
    match = ENTRY_PATTERN.match(line)
    if not match:
        raise ParseError(f"Not a changelog entry: {line!r}")
    return CategoryEntry(
        category=category,
        sha=match.group("sha"),
        description=match.group("description"),
        repo_url=match.group("repo_url"),
    )
