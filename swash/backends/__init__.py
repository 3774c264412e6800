"""Font construction, accessibility and scaling backends."""

from swash.backends.base import (
    AccessibilityProvider,
    CappingScaler,
    FontBackend,
    FontScaler,
    ResolvedFont,
    StaticAccessibility,
)

__all__ = [
    "AccessibilityProvider",
    "CappingScaler",
    "FontBackend",
    "FontScaler",
    "ResolvedFont",
    "StaticAccessibility",
]
