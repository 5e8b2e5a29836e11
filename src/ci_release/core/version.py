"""Semantic version parsing and patch bumping.

Only plain ``major.minor.patch`` triples are accepted. Pre-release and
build metadata are not parsed; the ``-SNAPSHOT`` marker used by Maven is
produced on output only.

Components are stored as integers, so leading zeros do not survive a
bump: ``01.02.3`` becomes ``1.2.4``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ci_release.exceptions import VersionParseError

DEFAULT_SNAPSHOT_SUFFIX = "-SNAPSHOT"


@dataclass(frozen=True, order=True)
class Version:
    """An immutable ``major.minor.patch`` version."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise VersionParseError(f"Version component {name} must be non-negative")

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string.

        Args:
            text: String of the form ``major.minor.patch``

        Returns:
            Parsed Version

        Raises:
            VersionParseError: If the string does not have exactly three
                dot-separated non-negative integer components
        """
        stripped = text.strip()
        parts = stripped.split(".")
        if len(parts) != 3:
            raise VersionParseError(
                f"Invalid version {text!r}: expected major.minor.patch, got {len(parts)} component(s)"
            )

        numbers = []
        for part in parts:
            # str.isdigit() accepts superscripts and other non-ASCII digits
            if not part.isascii() or not part.isdigit():
                raise VersionParseError(
                    f"Invalid version {text!r}: component {part!r} is not a non-negative integer"
                )
            numbers.append(int(part))

        return cls(*numbers)

    def bump_patch(self) -> Version:
        """Return the next patch version; major and minor are unchanged."""
        return Version(self.major, self.minor, self.patch + 1)

    def snapshot(self, suffix: str = DEFAULT_SNAPSHOT_SUFFIX) -> str:
        """Render as a development pre-release, e.g. ``1.2.4-SNAPSHOT``."""
        return f"{self}{suffix}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
