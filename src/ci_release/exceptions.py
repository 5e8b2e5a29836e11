"""Exception hierarchy for ci-release.

Library code raises these; the CLI command layer is the only place
that catches them, reports them and turns them into a non-zero exit.
"""

from __future__ import annotations


class CIReleaseError(Exception):
    """Base class for all ci-release errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# Invalid input


class InvalidInputError(CIReleaseError):
    """A command-line argument or other user input is malformed."""


class ParseError(InvalidInputError):
    """Text could not be parsed into the expected structure."""


class VersionParseError(ParseError):
    """A version string is not of the form major.minor.patch."""


# External tools


class ExternalToolError(CIReleaseError):
    """An external command failed or could not be started."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr


class GitError(ExternalToolError):
    """A git command failed."""


class BuildToolError(ExternalToolError):
    """The build-descriptor updater failed."""


# Environment and configuration


class EnvironmentMisconfigurationError(CIReleaseError):
    """A required environment variable is missing or empty."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"Required environment variable {variable} is not set")
        self.variable = variable


class ConfigError(CIReleaseError):
    """Configuration could not be loaded."""


class ConfigValidationError(ConfigError):
    """Configuration was found but is invalid."""


class OutputFormatError(CIReleaseError):
    """Content cannot be written in the requested output format."""


class FileWriteError(CIReleaseError):
    """A file could not be written."""
