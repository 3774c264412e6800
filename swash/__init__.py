"""swash: typed font names and dynamic type sizes.

This library provides:
- FontVariant enumerations naming concrete font faces
- Preferred point sizes per text style for phone, TV and watch
- Bold text mappings and cascade (fallback) lists
- A FontFactory that builds fonts through an injected backend

Example:
    >>> from swash import FontVariant, PlatformClass, TextStyle, preferred_size
    >>> class Avenir(FontVariant):
    ...     ROMAN = "Avenir-Roman"
    >>> Avenir.ROMAN.font_name
    'Avenir-Roman'
    >>> preferred_size(PlatformClass.PHONE, TextStyle.TITLE2)
    22.0
"""

__version__ = "0.3.0"

from swash.backends.base import (
    AccessibilityProvider,
    CappingScaler,
    FontBackend,
    FontScaler,
    ResolvedFont,
    StaticAccessibility,
)
from swash.config import Config
from swash.exceptions import ConfigError, FontNotFoundError, SwashError
from swash.fonts import (
    CascadeEntry,
    DynamicSize,
    FailurePolicy,
    FontFactory,
    FontTraits,
    FontVariant,
    resolve_cascade,
    resolve_dynamic_size,
    resolve_name,
)
from swash.styles import (
    ContentSizeCategory,
    PlatformClass,
    TextStyle,
    preferred_size,
    size_table,
)

__all__ = [
    # Fonts
    "FontVariant",
    "CascadeEntry",
    "FontTraits",
    "FontFactory",
    "FailurePolicy",
    "resolve_name",
    "resolve_cascade",
    # Sizes
    "TextStyle",
    "PlatformClass",
    "ContentSizeCategory",
    "DynamicSize",
    "preferred_size",
    "size_table",
    "resolve_dynamic_size",
    # Backends
    "FontBackend",
    "AccessibilityProvider",
    "FontScaler",
    "CappingScaler",
    "ResolvedFont",
    "StaticAccessibility",
    # Config and exceptions
    "Config",
    "SwashError",
    "FontNotFoundError",
    "ConfigError",
    # Metadata
    "__version__",
]
