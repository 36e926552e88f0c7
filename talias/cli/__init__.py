"""Command-line entry points."""

from talias.cli.main import app, main

__all__ = ["app", "main"]
