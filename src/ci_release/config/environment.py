"""CI platform environment variables.

GitHub Actions exposes the server URL, the repository slug and the
path of the file that later workflow steps read variables from.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

from ci_release.exceptions import EnvironmentMisconfigurationError

SERVER_URL_VAR = "GITHUB_SERVER_URL"
REPOSITORY_VAR = "GITHUB_REPOSITORY"
ENV_FILE_VAR = "GITHUB_ENV"


class GitHubEnvironment(BaseModel):
    """Snapshot of the GitHub Actions variables ci-release depends on."""

    server_url: str | None = None
    repository: str | None = None
    env_file: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> GitHubEnvironment:
        environ = os.environ if environ is None else environ
        return cls(
            server_url=environ.get(SERVER_URL_VAR) or None,
            repository=environ.get(REPOSITORY_VAR) or None,
            env_file=environ.get(ENV_FILE_VAR) or None,
        )

    def require_env_file(self) -> Path:
        """Path of the environment file.

        Raises:
            EnvironmentMisconfigurationError: If GITHUB_ENV is not set
        """
        if not self.env_file:
            raise EnvironmentMisconfigurationError(ENV_FILE_VAR)
        return Path(self.env_file)

    def repository_url(self) -> str:
        """Web URL of the repository, e.g. ``https://github.com/owner/repo``.

        Raises:
            EnvironmentMisconfigurationError: If either variable is not set
        """
        if not self.server_url:
            raise EnvironmentMisconfigurationError(SERVER_URL_VAR)
        if not self.repository:
            raise EnvironmentMisconfigurationError(REPOSITORY_VAR)
        return f"{self.server_url.rstrip('/')}/{self.repository.strip('/')}"
