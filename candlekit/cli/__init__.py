"""CLI commands for candlekit.

This package provides the command-line interface for checking and
inspecting candle files.
"""

from candlekit.cli.main import cli, main

__all__ = ["cli", "main"]
