"""CLI commands for swash."""

from swash.cli.commands.fonts import fonts
from swash.cli.commands.sizes import size, sizes

__all__ = ["fonts", "size", "sizes"]
