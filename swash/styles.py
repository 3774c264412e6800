"""Preferred text sizes for dynamic type styles.

Default point sizes come from Apple's Human Interface Guidelines for each
platform class. They correspond to the baseline content size category used
when scaling dynamic type, so the literals must stay exact: layout snapshot
tests in consuming apps depend on them.
"""

from __future__ import annotations

from enum import Enum


class TextStyle(str, Enum):
    """Semantic text roles."""

    LARGE_TITLE = "large_title"
    TITLE1 = "title1"
    TITLE2 = "title2"
    TITLE3 = "title3"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    BODY = "body"
    CALLOUT = "callout"
    FOOTNOTE = "footnote"
    CAPTION1 = "caption1"
    CAPTION2 = "caption2"


class PlatformClass(str, Enum):
    """Device classes with their own size tables."""

    PHONE = "phone"
    TV = "tv"
    WATCH = "watch"


class ContentSizeCategory(str, Enum):
    """Watch content size categories."""

    SMALL = "small"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"

    @classmethod
    def parse(cls, value: str) -> ContentSizeCategory:
        """Parse a short name or a platform identifier like ``UICTContentSizeCategoryL``."""
        key = value.strip().lower()
        try:
            return _CATEGORY_ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown content size category: {value!r}") from None


_CATEGORY_ALIASES: dict[str, ContentSizeCategory] = {
    "small": ContentSizeCategory.SMALL,
    "s": ContentSizeCategory.SMALL,
    "uictcontentsizecategorys": ContentSizeCategory.SMALL,
    "large": ContentSizeCategory.LARGE,
    "l": ContentSizeCategory.LARGE,
    "uictcontentsizecategoryl": ContentSizeCategory.LARGE,
    "extra-large": ContentSizeCategory.EXTRA_LARGE,
    "extra_large": ContentSizeCategory.EXTRA_LARGE,
    "xl": ContentSizeCategory.EXTRA_LARGE,
    "uictcontentsizecategoryxl": ContentSizeCategory.EXTRA_LARGE,
}

_PHONE_SIZES: dict[TextStyle, float] = {
    TextStyle.CAPTION2: 11,
    TextStyle.CAPTION1: 12,
    TextStyle.FOOTNOTE: 13,
    TextStyle.SUBHEADLINE: 15,
    TextStyle.CALLOUT: 16,
    TextStyle.BODY: 17,
    TextStyle.HEADLINE: 17,
    TextStyle.TITLE3: 20,
    TextStyle.TITLE2: 22,
    TextStyle.TITLE1: 28,
    TextStyle.LARGE_TITLE: 34,
}

_TV_SIZES: dict[TextStyle, float] = {
    TextStyle.CAPTION2: 23,
    TextStyle.CAPTION1: 25,
    TextStyle.FOOTNOTE: 29,
    TextStyle.SUBHEADLINE: 29,
    TextStyle.CALLOUT: 31,
    TextStyle.BODY: 29,
    TextStyle.HEADLINE: 38,
    TextStyle.TITLE3: 48,
    TextStyle.TITLE2: 57,
    TextStyle.TITLE1: 76,
    TextStyle.LARGE_TITLE: 76,
}

_WATCH_SMALL_SIZES: dict[TextStyle, float] = {
    TextStyle.FOOTNOTE: 12,
    TextStyle.CAPTION2: 13,
    TextStyle.CAPTION1: 14,
    TextStyle.BODY: 15,
    TextStyle.HEADLINE: 15,
    TextStyle.TITLE3: 18,
    TextStyle.TITLE2: 26,
    TextStyle.TITLE1: 30,
    TextStyle.LARGE_TITLE: 32,
}

_WATCH_LARGE_SIZES: dict[TextStyle, float] = {
    TextStyle.FOOTNOTE: 13,
    TextStyle.CAPTION2: 14,
    TextStyle.CAPTION1: 15,
    TextStyle.BODY: 16,
    TextStyle.HEADLINE: 16,
    TextStyle.TITLE3: 19,
    TextStyle.TITLE2: 27,
    TextStyle.TITLE1: 34,
    TextStyle.LARGE_TITLE: 36,
}

# Same values as the Large table.
_WATCH_EXTRA_LARGE_SIZES: dict[TextStyle, float] = {
    TextStyle.FOOTNOTE: 13,
    TextStyle.CAPTION2: 14,
    TextStyle.CAPTION1: 15,
    TextStyle.BODY: 16,
    TextStyle.HEADLINE: 16,
    TextStyle.TITLE3: 19,
    TextStyle.TITLE2: 27,
    TextStyle.TITLE1: 34,
    TextStyle.LARGE_TITLE: 36,
}

# (table, default size for styles missing from the table)
_PLATFORM_TABLES: dict[PlatformClass, tuple[dict[TextStyle, float], float]] = {
    PlatformClass.PHONE: (_PHONE_SIZES, 17),
    PlatformClass.TV: (_TV_SIZES, 17),
}

_WATCH_TABLES: dict[ContentSizeCategory, tuple[dict[TextStyle, float], float]] = {
    ContentSizeCategory.SMALL: (_WATCH_SMALL_SIZES, 15),
    ContentSizeCategory.LARGE: (_WATCH_LARGE_SIZES, 16),
    ContentSizeCategory.EXTRA_LARGE: (_WATCH_EXTRA_LARGE_SIZES, 16),
}

# Watch size when the content size category is unknown.
WATCH_FALLBACK_SIZE = 16.0


def _table_for(
    platform: PlatformClass, category: ContentSizeCategory | None
) -> tuple[dict[TextStyle, float], float] | None:
    if platform is PlatformClass.WATCH:
        return _WATCH_TABLES.get(category) if category is not None else None
    return _PLATFORM_TABLES[platform]


def preferred_size(
    platform: PlatformClass,
    text_style: TextStyle,
    category: ContentSizeCategory | None = None,
) -> float:
    """Return the default point size of ``text_style`` on ``platform``.

    Args:
        platform: Device class whose table applies.
        text_style: Semantic text style to size.
        category: Content size category, only consulted on watch.

    Returns:
        The point size. Styles missing from a table resolve to that
        table's default, so every combination yields a size.
    """
    table = _table_for(platform, category)
    if table is None:
        return WATCH_FALLBACK_SIZE
    sizes, default = table
    return float(sizes.get(text_style, default))


def size_table(
    platform: PlatformClass, category: ContentSizeCategory | None = None
) -> dict[TextStyle, float]:
    """Return the preferred size of every text style for one platform/category."""
    return {style: preferred_size(platform, style, category) for style in TextStyle}
