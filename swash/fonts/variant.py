"""Font variants, bold text mappings and cascade lists.

A font family is declared as a :class:`FontVariant` subclass whose member
values are the literal font names handed to the font backend::

    class Avenir(FontVariant):
        ROMAN = "Avenir-Roman"
        HEAVY = "Avenir-Heavy"

Optional behaviour (the weight used when the user enables bold text, the
fallback fonts for unsupported glyphs) lives in :class:`FontTraits`, which is
plain data attached to a variant type rather than something each family has
to override.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union


def validate_font_name(font_name: object) -> str:
    """Return ``font_name`` if it is usable as a font name, else raise ValueError."""
    if not isinstance(font_name, str) or not font_name.strip():
        raise ValueError(f"Font name must be a non-empty string, got {font_name!r}")
    if font_name != font_name.strip():
        raise ValueError(f"Font name has surrounding whitespace: {font_name!r}")
    return font_name


class FontVariant(Enum):
    """Base class for font name enumerations."""

    def __init__(self, font_name: str) -> None:
        validate_font_name(font_name)

    @property
    def font_name(self) -> str:
        """The literal name passed to the font backend."""
        return self.value


BoldTextMapping = Union[
    Mapping[FontVariant, FontVariant], Callable[[FontVariant], FontVariant]
]


def _name_of(font: FontVariant | str) -> str:
    if isinstance(font, FontVariant):
        return font.font_name
    return validate_font_name(font)


@dataclass(frozen=True)
class CascadeEntry:
    """A fallback font used for glyphs the primary font does not cover.

    Attributes:
        font_name: Fallback font used normally.
        bold_font_name: Fallback used when bold text is enabled. When absent
            the regular fallback is used in both cases.
    """

    font_name: str
    bold_font_name: str | None = None

    def __init__(
        self,
        font_name: FontVariant | str,
        bold_font_name: FontVariant | str | None = None,
    ) -> None:
        object.__setattr__(self, "font_name", _name_of(font_name))
        object.__setattr__(
            self,
            "bold_font_name",
            _name_of(bold_font_name) if bold_font_name is not None else None,
        )


CascadeSource = Union[
    Sequence[CascadeEntry],
    Mapping[FontVariant, Sequence[CascadeEntry]],
    Callable[[FontVariant], Sequence[CascadeEntry]],
]


@dataclass(frozen=True)
class FontTraits:
    """Optional per-family behaviour.

    Both fields default to "no effect": without a bold mapping, turning on
    bold text leaves the font unchanged, and without a cascade list no
    fallback fonts are attached.
    """

    bold_mapping: BoldTextMapping | None = None
    cascade_list: CascadeSource | None = None

    def bold_for(self, variant: FontVariant) -> FontVariant:
        return apply_bold_mapping(variant, self.bold_mapping)

    def cascade_for(self, variant: FontVariant) -> list[CascadeEntry]:
        source = self.cascade_list
        if source is None:
            return []
        if callable(source):
            return list(source(variant))
        if isinstance(source, Mapping):
            return list(source.get(variant, ()))
        return list(source)


DEFAULT_TRAITS = FontTraits()


def apply_bold_mapping(
    variant: FontVariant, bold_mapping: BoldTextMapping | None
) -> FontVariant:
    """Return the variant ``bold_mapping`` assigns to ``variant`` (identity by default)."""
    if bold_mapping is None:
        return variant
    if isinstance(bold_mapping, Mapping):
        return bold_mapping.get(variant, variant)
    return bold_mapping(variant)


def resolve_name(
    variant: FontVariant,
    bold_enabled: bool,
    bold_mapping: BoldTextMapping | None = None,
) -> str:
    """Return the font name to request for ``variant``.

    The bold mapping is consulted only when ``bold_enabled`` is true.
    """
    if bold_enabled:
        return apply_bold_mapping(variant, bold_mapping).font_name
    return variant.font_name


def resolve_cascade(
    cascade_list: Sequence[CascadeEntry], bold_enabled: bool
) -> list[str]:
    """Return fallback font names in cascade priority order.

    With bold text enabled each entry contributes its bold name when it has
    one, otherwise its regular name.
    """
    if bold_enabled:
        return [entry.bold_font_name or entry.font_name for entry in cascade_list]
    return [entry.font_name for entry in cascade_list]
