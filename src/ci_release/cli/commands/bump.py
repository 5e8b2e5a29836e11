"""Implementation of the 'bump' command.

Increments the patch version, writes VERSION, propagates the next
SNAPSHOT version to the Maven descriptors and commits the result.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from ci_release.cli.console import fail
from ci_release.config import GitHubEnvironment, load_config
from ci_release.core.version import Version
from ci_release.exceptions import CIReleaseError
from ci_release.github.env import append_env_var
from ci_release.project.maven import find_build_descriptors, set_project_version
from ci_release.project.version_file import write_version_file
from ci_release.vcs import GitRepository

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console


def run_bump(
    version: str,
    path: str | None,
    dry_run: bool,
    skip_build_tool: bool,
    console: Console,
    err_console: Console,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Run the bump command.

    Args:
        version: Current version string, e.g. "1.2.3"
        path: Optional path to project directory
        dry_run: Only report what would change
        skip_build_tool: Do not run Maven
        console: Console for standard output
        err_console: Console for error output
        environ: Environment to read CI variables from (defaults to os.environ)
    """
    project_path = Path(path) if path else Path.cwd()

    try:
        config = load_config(project_path)
    except CIReleaseError as e:
        fail(err_console, "Error loading config", e)

    try:
        current_version = Version.parse(version)
    except CIReleaseError as e:
        fail(err_console, "Invalid version", e)

    next_version = current_version.bump_patch()
    snapshot_version = next_version.snapshot(config.bump.snapshot_suffix)
    commit_message = config.bump.commit_message.format(version=next_version)

    console.print(f"Bumping version from [cyan]{current_version}[/] to [green]{next_version}[/]")

    if dry_run:
        steps = [f"  • Write [cyan]{next_version}[/] to [cyan]{escape(config.bump.version_file)}[/]"]
        if not skip_build_tool:
            steps.append(f"  • Set Maven project version to [cyan]{snapshot_version}[/]")
        steps.append(f"  • Commit with message [cyan]{escape(commit_message)}[/]")
        console.print(
            Panel(
                "[bold]Would make the following changes:[/]\n\n" + "\n".join(steps),
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        return

    # Resolve the output file before touching anything on disk
    try:
        env_file = GitHubEnvironment.from_environ(environ).require_env_file()
    except CIReleaseError as e:
        fail(err_console, "Error", e)

    repo = GitRepository(project_path)

    version_file = project_path / config.bump.version_file
    try:
        write_version_file(version_file, next_version)
    except CIReleaseError as e:
        fail(err_console, "Error writing version file", e)
    console.print(f"  [green]✓[/] Wrote {next_version} to {escape(config.bump.version_file)}")

    if not skip_build_tool:
        try:
            set_project_version(project_path, snapshot_version, config.bump.maven_executable)
        except CIReleaseError as e:
            fail(err_console, "Error updating build descriptors", e)
        console.print(f"  [green]✓[/] Set Maven project version to {snapshot_version}")

    paths = [Path(config.bump.version_file)]
    paths.extend(find_build_descriptors(project_path, config.bump.build_descriptors))

    try:
        repo.add(paths)
        has_changes = repo.has_staged_changes()
    except CIReleaseError as e:
        fail(err_console, "Error staging changes", e)

    if not has_changes:
        console.print("[yellow]No changes to commit[/]")
        return

    try:
        repo.commit(commit_message)
    except CIReleaseError as e:
        fail(err_console, "Error committing changes", e)
    console.print(f"  [green]✓[/] Committed: {escape(commit_message)}")

    try:
        append_env_var(env_file, config.bump.changes_flag, "true")
    except CIReleaseError as e:
        fail(err_console, "Error exporting changes flag", e)
    console.print(f"  [green]✓[/] Exported {escape(config.bump.changes_flag)}=true")
