"""Command-line interface for desktop-entry."""

from desktop_entry.cli.parser import CLIParser
from desktop_entry.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
