"""Base size selection for dynamic type fonts."""

from __future__ import annotations

from dataclasses import dataclass

from swash.styles import ContentSizeCategory, PlatformClass, TextStyle, preferred_size


@dataclass(frozen=True)
class DynamicSize:
    """Inputs handed to a scaler for one dynamic font.

    Attributes:
        base_size: Size at the baseline content size category.
        max_size: Size the scaled font may not exceed, if any.
    """

    base_size: float
    max_size: float | None = None

    @property
    def capped_size(self) -> float:
        if self.max_size is None:
            return self.base_size
        return min(self.base_size, self.max_size)


def resolve_dynamic_size(
    text_style: TextStyle,
    platform: PlatformClass,
    category: ContentSizeCategory | None = None,
    max_size: float | None = None,
    default_size: float | None = None,
) -> DynamicSize:
    """Pick the base size for ``text_style`` and pair it with ``max_size``.

    ``default_size`` replaces the platform's preferred size for the style.
    No scaling happens here; the scaler applies the content size curve.
    """
    if default_size is not None and default_size <= 0:
        raise ValueError(f"default_size must be positive, got {default_size}")
    if max_size is not None and max_size <= 0:
        raise ValueError(f"max_size must be positive, got {max_size}")

    if default_size is not None:
        base_size = float(default_size)
    else:
        base_size = preferred_size(platform, text_style, category)
    return DynamicSize(
        base_size=base_size,
        max_size=float(max_size) if max_size is not None else None,
    )
