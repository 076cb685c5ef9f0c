"""Command-line interface for wgkit."""

from wgkit.cli.main import cli

__all__ = ["cli"]
