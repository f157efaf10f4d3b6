"""Command-line interface for procsh."""

from procsh.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
