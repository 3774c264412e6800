"""Construct fonts from variants at literal or dynamic type sizes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from swash.backends.base import (
    AccessibilityProvider,
    CappingScaler,
    FontBackend,
    FontScaler,
    ResolvedFont,
)
from swash.exceptions import FontNotFoundError
from swash.fonts.dynamic import resolve_dynamic_size
from swash.fonts.variant import (
    DEFAULT_TRAITS,
    FontTraits,
    FontVariant,
    resolve_cascade,
    resolve_name,
)
from swash.styles import PlatformClass, TextStyle, preferred_size

log = logging.getLogger(__name__)

MissingFontHook = Callable[[FontNotFoundError], None]


class FailurePolicy(str, Enum):
    """What to do when the backend cannot construct a font."""

    STRICT = "strict"  # raise FontNotFoundError
    FALLBACK = "fallback"  # substitute the system font


class FontFactory:
    """Build fonts for :class:`FontVariant` members.

    Args:
        backend: Font construction service.
        accessibility: Source of the live bold text flag and content size
            category. Queried on every call.
        platform: Device class used for size tables.
        policy: Failure handling for missing fonts.
        scaler: Dynamic type scaler. Defaults to a :class:`CappingScaler`
            over ``backend``.
        on_missing: Called with the error whenever the fallback policy
            substitutes the system font.
    """

    def __init__(
        self,
        backend: FontBackend,
        accessibility: AccessibilityProvider,
        platform: PlatformClass = PlatformClass.PHONE,
        policy: FailurePolicy = FailurePolicy.FALLBACK,
        scaler: FontScaler | None = None,
        on_missing: MissingFontHook | None = None,
    ) -> None:
        self.backend = backend
        self.accessibility = accessibility
        self.platform = platform
        self.policy = policy
        self.scaler = scaler if scaler is not None else CappingScaler(backend)
        self.on_missing = on_missing
        self._traits: dict[type[FontVariant], FontTraits] = {}

    def register(self, variant_type: type[FontVariant], traits: FontTraits) -> None:
        """Attach bold mapping and cascade list data to a font family."""
        self._traits[variant_type] = traits

    def traits_for(self, variant: FontVariant) -> FontTraits:
        return self._traits.get(type(variant), DEFAULT_TRAITS)

    def _bold_text_enabled(self) -> bool:
        # Bold text mappings do not apply on watch.
        if self.platform is PlatformClass.WATCH:
            return False
        return self.accessibility.is_bold_text_enabled()

    def of_size(self, variant: FontVariant, size: float) -> ResolvedFont:
        """Create a font of ``variant`` at a fixed point size.

        Prefer :meth:`of_text_style`, which follows the user's content size
        category.

        Raises:
            FontNotFoundError: The backend has no font of the resolved name
                and the policy is ``STRICT``.
            ValueError: ``size`` is not positive.
        """
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        traits = self.traits_for(variant)
        bold = self._bold_text_enabled()
        font_name = resolve_name(variant, bold, traits.bold_mapping)
        cascade = tuple(resolve_cascade(traits.cascade_for(variant), bold))

        handle = self.backend.load(font_name, size)
        if handle is not None:
            return ResolvedFont(name=font_name, size=size, handle=handle, cascade=cascade)

        error = FontNotFoundError(font_name, size)
        if self.policy is FailurePolicy.STRICT:
            raise error
        log.warning("%s; using the system font", error.message)
        if self.on_missing is not None:
            self.on_missing(error)
        return ResolvedFont(
            name=None,
            size=size,
            handle=self.backend.system_font(size),
            is_fallback=True,
        )

    def of_text_style(
        self,
        variant: FontVariant,
        text_style: TextStyle,
        max_size: float | None = None,
        default_size: float | None = None,
    ) -> ResolvedFont:
        """Create a dynamic type font of ``variant``.

        Args:
            variant: Font to construct.
            text_style: Style used to scale the text.
            max_size: Size the scaled font may not exceed.
            default_size: Base size at the baseline content size category.
                Defaults to the platform's preferred size for ``text_style``.
        """
        dynamic = resolve_dynamic_size(
            text_style,
            self.platform,
            self.accessibility.preferred_content_size_category(),
            max_size=max_size,
            default_size=default_size,
        )
        font = self.of_size(variant, dynamic.base_size)
        return self.scaler.scale(font, text_style, dynamic.max_size)

    def preferred_size(self, text_style: TextStyle) -> float:
        return preferred_size(
            self.platform,
            text_style,
            self.accessibility.preferred_content_size_category(),
        )

    @staticmethod
    def preferred(variant_type: type[FontVariant], text_style: TextStyle) -> FontVariant:
        """Return the member of ``variant_type`` used for ``text_style``.

        Families choose by defining a ``preferred(text_style)`` classmethod;
        otherwise their first member is used.
        """
        chooser = getattr(variant_type, "preferred", None)
        if callable(chooser):
            return chooser(text_style)
        return next(iter(variant_type))

    def font_for_style(
        self,
        variant_type: type[FontVariant],
        text_style: TextStyle,
        max_size: float | None = None,
    ) -> ResolvedFont:
        """Create a dynamic font of the family's preferred member for ``text_style``."""
        variant = self.preferred(variant_type, text_style)
        return self.of_text_style(
            variant,
            text_style,
            max_size=max_size,
            default_size=self.preferred_size(text_style),
        )
