"""Pytest configuration and shared fixtures for swash tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from swash import CascadeEntry, FontTraits, FontVariant, StaticAccessibility
from swash.styles import TextStyle

PROJECT_ROOT = Path(__file__).parent.parent


class Avenir(FontVariant):
    ROMAN = "Avenir-Roman"
    MEDIUM = "Avenir-Medium"
    HEAVY = "Avenir-Heavy"
    BLACK = "Avenir-Black"
    LIGHT = "Avenir-Light"
    BLACK_OBLIQUE = "Avenir-BlackOblique"

    @classmethod
    def preferred(cls, text_style: TextStyle) -> "Avenir":
        if text_style in (TextStyle.HEADLINE, TextStyle.TITLE1, TextStyle.LARGE_TITLE):
            return cls.HEAVY
        return cls.ROMAN


class Damascus(FontVariant):
    REGULAR = "Damascus"
    BOLD = "DamascusBold"


class Futura(FontVariant):
    MEDIUM = "Futura-Medium"
    CONDENSED_MEDIUM = "Futura-CondensedMedium"


class InvalidFont(FontVariant):
    DOES_NOT_EXIST = "DoesNotExist-Regular"


AVENIR_TRAITS = FontTraits(
    bold_mapping={
        Avenir.ROMAN: Avenir.HEAVY,
        Avenir.MEDIUM: Avenir.HEAVY,
        Avenir.HEAVY: Avenir.BLACK,
    },
    cascade_list=[CascadeEntry(Damascus.REGULAR, Damascus.BOLD)],
)


class FakeBackend:
    """In-memory font backend; handles are (name, size) tuples."""

    def __init__(self, names: set[str] | None = None) -> None:
        if names is None:
            names = {v.font_name for family in (Avenir, Damascus, Futura) for v in family}
        self.names = set(names)
        self.loads: list[tuple[str, float]] = []

    def load(self, name: str, size: float) -> Any | None:
        self.loads.append((name, size))
        if name not in self.names:
            return None
        return (name, size)

    def system_font(self, size: float) -> Any:
        return ("<system>", size)

    def available_fonts(self) -> dict[str, list[str]]:
        families: dict[str, list[str]] = {}
        for name in sorted(self.names):
            family = name.split("-", 1)[0]
            families.setdefault(family, []).append(name)
        return families


class CountingAccessibility:
    """Accessibility provider that records how often it is queried."""

    def __init__(self, bold_text: bool = False, category=None) -> None:
        self.bold_text = bold_text
        self.category = category
        self.bold_queries = 0
        self.category_queries = 0

    def is_bold_text_enabled(self) -> bool:
        self.bold_queries += 1
        return self.bold_text

    def preferred_content_size_category(self):
        self.category_queries += 1
        return self.category


@pytest.fixture
def backend() -> FakeBackend:
    """Return a backend knowing the Avenir, Damascus and Futura fonts."""
    return FakeBackend()


@pytest.fixture
def accessibility() -> StaticAccessibility:
    """Return default accessibility settings (bold text off)."""
    return StaticAccessibility()


@pytest.fixture
def bold_accessibility() -> StaticAccessibility:
    """Return accessibility settings with bold text enabled."""
    return StaticAccessibility(bold_text=True)
