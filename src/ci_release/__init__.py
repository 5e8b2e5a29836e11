"""ci-release: CI helpers for version bumping and changelog generation."""

from __future__ import annotations

__version__ = "0.1.0"
