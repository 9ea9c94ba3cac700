"""Command-line interface."""

from tollgate.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
