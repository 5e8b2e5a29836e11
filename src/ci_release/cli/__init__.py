"""Command-line interface for ci-release."""

from __future__ import annotations
