"""Exception hierarchy for swash."""

from __future__ import annotations


class SwashError(Exception):
    """Base class for all swash errors."""


class FontNotFoundError(SwashError):
    """Raised when the font backend cannot construct the requested font."""

    def __init__(
        self,
        font_name: str,
        size: float | None = None,
        message: str | None = None,
    ) -> None:
        self.font_name = font_name
        self.size = size
        self.message = message or f"Font not found: {font_name}"
        super().__init__(self.message)


class ConfigError(SwashError):
    """Raised when a configuration file contains invalid values."""
