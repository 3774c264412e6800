"""Interfaces to the platform services swash relies on.

swash never talks to a windowing system directly. Font construction,
accessibility settings and dynamic type scaling are injected through the
protocols below so that resolution can be tested without real platform state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Protocol, runtime_checkable

from swash.styles import ContentSizeCategory, TextStyle


@dataclass(frozen=True)
class ResolvedFont:
    """A font constructed by a backend.

    Attributes:
        name: Font name that was requested (``None`` for the system font).
        size: Point size.
        handle: Backend specific font object.
        cascade: Fallback font names, highest priority first.
        is_fallback: True when the requested font was missing and the
            system font was substituted.
    """

    name: str | None
    size: float
    handle: Any
    cascade: tuple[str, ...] = field(default_factory=tuple)
    is_fallback: bool = False


@runtime_checkable
class FontBackend(Protocol):
    """Constructs fonts by name."""

    def load(self, name: str, size: float) -> Any | None:
        """Return a font handle, or None when ``name`` is unknown."""
        ...

    def system_font(self, size: float) -> Any:
        """Return the platform default font at ``size``."""
        ...

    def available_fonts(self) -> dict[str, list[str]]:
        """Return installed font names grouped by family."""
        ...


@runtime_checkable
class AccessibilityProvider(Protocol):
    """Live accessibility settings. Implementations must not cache."""

    def is_bold_text_enabled(self) -> bool: ...

    def preferred_content_size_category(self) -> ContentSizeCategory | None: ...


@runtime_checkable
class FontScaler(Protocol):
    """Scales a font for the current content size category."""

    def scale(
        self, font: ResolvedFont, text_style: TextStyle, max_size: float | None
    ) -> ResolvedFont: ...


@dataclass(frozen=True)
class StaticAccessibility:
    """Fixed accessibility settings, for tests and command line use."""

    bold_text: bool = False
    content_size_category: ContentSizeCategory | None = None

    def is_bold_text_enabled(self) -> bool:
        return self.bold_text

    def preferred_content_size_category(self) -> ContentSizeCategory | None:
        return self.content_size_category


class CappingScaler:
    """Scale by a constant factor and clamp to the maximum size.

    Stands in for a platform scaling curve where none is available. The font
    is reloaded through ``backend`` when its size changes.
    """

    def __init__(self, backend: FontBackend, factor: float = 1.0) -> None:
        if factor <= 0:
            raise ValueError(f"Scale factor must be positive, got {factor}")
        self.backend = backend
        self.factor = factor

    def scale(
        self, font: ResolvedFont, text_style: TextStyle, max_size: float | None
    ) -> ResolvedFont:
        size = font.size * self.factor
        if max_size is not None:
            size = min(size, max_size)
        if size == font.size:
            return font

        if font.name is None or font.is_fallback:
            handle = self.backend.system_font(size)
        else:
            handle = self.backend.load(font.name, size)
            if handle is None:
                handle = self.backend.system_font(size)
        return replace(font, size=size, handle=handle)
