"""Implementation of the 'changelog' command.

Builds a category-grouped changelog from commit messages and exports it
to the GitHub Actions environment as a multi-line variable.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from ci_release.cli.console import fail
from ci_release.config import GitHubEnvironment, load_config
from ci_release.core.changelog import build_report, render_changelog
from ci_release.exceptions import CIReleaseError
from ci_release.github.env import append_multiline_env_var
from ci_release.vcs import GitRepository

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console


def run_changelog(
    previous_tag: str | None,
    path: str | None,
    print_changelog: bool,
    console: Console,
    err_console: Console,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Run the changelog command.

    Args:
        previous_tag: Tag to start after; whole history when None or empty
        path: Optional path to the repository
        print_changelog: Also write the rendered changelog to stdout
        console: Console for standard output
        err_console: Console for error output
        environ: Environment to read CI variables from (defaults to os.environ)
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
    except CIReleaseError as e:
        fail(err_console, "Error loading config", e)

    env = GitHubEnvironment.from_environ(environ)
    try:
        repo_url = env.repository_url()
        env_file = env.require_env_file()
    except CIReleaseError as e:
        fail(err_console, "Error", e)

    repo = GitRepository(project_path)
    try:
        commits = repo.get_commits_since_tag(previous_tag or None)
    except CIReleaseError as e:
        fail(err_console, "Error reading commit history", e)

    report = build_report(commits, repo_url)
    content = render_changelog(report)

    if print_changelog and content:
        console.print(content, markup=False, highlight=False, soft_wrap=True, end="")

    try:
        append_multiline_env_var(
            env_file,
            config.changelog.variable,
            content,
            config.changelog.delimiter,
        )
    except CIReleaseError as e:
        fail(err_console, "Error writing changelog", e)

    since = f"since [cyan]{escape(previous_tag)}[/]" if previous_tag else "for the whole history"
    entry_count = sum(len(entries) for _, entries in report)
    console.print(
        f"  [green]✓[/] Exported {escape(config.changelog.variable)} {since}: "
        f"{len(commits)} commit(s), {len(report)} categor{'y' if len(report) == 1 else 'ies'}, "
        f"{entry_count} entr{'y' if entry_count == 1 else 'ies'}"
    )
