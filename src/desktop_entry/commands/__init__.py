"""Command handlers for the desktop-entry CLI."""

from desktop_entry.commands.base import BaseCommandHandler
from desktop_entry.commands.config import ConfigHandler
from desktop_entry.commands.dump import DumpHandler
from desktop_entry.commands.format import FormatHandler
from desktop_entry.commands.show import ShowHandler
from desktop_entry.commands.validate import ValidateHandler

__all__ = [
    "BaseCommandHandler",
    "ConfigHandler",
    "DumpHandler",
    "FormatHandler",
    "ShowHandler",
    "ValidateHandler",
]
