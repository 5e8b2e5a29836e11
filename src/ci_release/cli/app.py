"""Typer applications for ci-release.

``ci-release`` groups both commands; ``bump-version`` and
``generate-changelog`` expose each one on its own for CI scripts.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from ci_release import __version__

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="ci-release",
    help="CI helpers for version bumping and changelog generation.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
bump_version_app = typer.Typer(name="bump-version", add_completion=False)
changelog_app = typer.Typer(name="generate-changelog", add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"ci-release [cyan]{__version__}[/]")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True),
    ] = None,
) -> None:
    """CI helpers for version bumping and changelog generation."""


def bump(
    version: Annotated[str, typer.Argument(help="Current version, e.g. 1.2.3")],
    path: Annotated[
        str | None, typer.Option("--path", "-p", help="Project directory")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Show what would change without changing it")
    ] = False,
    skip_build_tool: Annotated[
        bool, typer.Option("--skip-build-tool", help="Do not run mvn versions:set")
    ] = False,
) -> None:
    """Increment the patch version, update VERSION and pom.xml files, and commit."""
    from ci_release.cli.commands.bump import run_bump

    run_bump(
        version=version,
        path=path,
        dry_run=dry_run,
        skip_build_tool=skip_build_tool,
        console=console,
        err_console=err_console,
    )


def changelog(
    previous_tag: Annotated[
        str | None,
        typer.Argument(help="Tag to start after; the whole history when omitted"),
    ] = None,
    path: Annotated[
        str | None, typer.Option("--path", "-p", help="Repository directory")
    ] = None,
    print_changelog: Annotated[
        bool, typer.Option("--print", help="Also print the changelog to stdout")
    ] = False,
) -> None:
    """Generate a categorized changelog and export it to GITHUB_ENV."""
    from ci_release.cli.commands.changelog import run_changelog

    run_changelog(
        previous_tag=previous_tag,
        path=path,
        print_changelog=print_changelog,
        console=console,
        err_console=err_console,
    )


app.command("bump")(bump)
app.command("changelog")(changelog)
bump_version_app.command()(bump)
changelog_app.command()(changelog)
