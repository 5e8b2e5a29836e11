"""GitHub Actions integration."""

from __future__ import annotations

from ci_release.github.env import append_env_var, append_multiline_env_var, format_multiline_env_var

__all__ = ["append_env_var", "append_multiline_env_var", "format_multiline_env_var"]
