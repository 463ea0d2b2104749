"""Command-line interface for streamedit."""

from .main import cli, main

__all__ = ["cli", "main"]
