"""Unit tests for swash.fonts.factory.

Tests cover literal size fonts, bold text and cascade handling, the strict
and fallback failure policies, dynamic type fonts and preferred members.
Fonts are built against an in-memory backend.
"""

import pytest
from conftest import (
    AVENIR_TRAITS,
    Avenir,
    CountingAccessibility,
    FakeBackend,
    Futura,
    InvalidFont,
)

from swash import (
    CappingScaler,
    ContentSizeCategory,
    FailurePolicy,
    FontFactory,
    FontNotFoundError,
    PlatformClass,
    ResolvedFont,
    StaticAccessibility,
    TextStyle,
)


@pytest.fixture
def factory(backend: FakeBackend, accessibility: StaticAccessibility) -> FontFactory:
    """Return a phone factory with Avenir traits registered."""
    f = FontFactory(backend, accessibility)
    f.register(Avenir, AVENIR_TRAITS)
    return f


class TestOfSize:
    """Tests for FontFactory.of_size."""

    def test_of_size_builds_requested_font(self, factory: FontFactory) -> None:
        """The backend receives the variant's name and size."""
        font = factory.of_size(Avenir.ROMAN, 23)
        assert font.name == "Avenir-Roman"
        assert font.size == 23
        assert font.handle == ("Avenir-Roman", 23)
        assert font.is_fallback is False

    def test_cascade_attached(self, factory: FontFactory) -> None:
        """The registered cascade list is resolved onto the font."""
        font = factory.of_size(Avenir.ROMAN, 12)
        assert font.cascade == ("Damascus",)

    def test_unregistered_family_has_no_cascade(self, factory: FontFactory) -> None:
        """Families without traits get no fallback fonts."""
        assert factory.of_size(Futura.MEDIUM, 12).cascade == ()

    def test_bold_text_applies_mapping_and_bold_cascade(
        self, backend: FakeBackend, bold_accessibility: StaticAccessibility
    ) -> None:
        """With bold text on, both the name and the cascade use bold faces."""
        factory = FontFactory(backend, bold_accessibility)
        factory.register(Avenir, AVENIR_TRAITS)
        font = factory.of_size(Avenir.ROMAN, 17)
        assert font.name == "Avenir-Heavy"
        assert font.cascade == ("DamascusBold",)

    def test_bold_text_without_mapping_is_noop(
        self, backend: FakeBackend, bold_accessibility: StaticAccessibility
    ) -> None:
        """Bold text has no effect on families without a mapping."""
        factory = FontFactory(backend, bold_accessibility)
        assert factory.of_size(Futura.MEDIUM, 17).name == "Futura-Medium"

    def test_bold_text_ignored_on_watch(
        self, backend: FakeBackend, bold_accessibility: StaticAccessibility
    ) -> None:
        """Watch fonts never apply the bold mapping."""
        factory = FontFactory(backend, bold_accessibility, platform=PlatformClass.WATCH)
        factory.register(Avenir, AVENIR_TRAITS)
        font = factory.of_size(Avenir.ROMAN, 17)
        assert font.name == "Avenir-Roman"
        assert font.cascade == ("Damascus",)

    def test_accessibility_queried_on_every_call(self, backend: FakeBackend) -> None:
        """Settings are read live, so a change takes effect on the next call."""
        settings = CountingAccessibility(bold_text=False)
        factory = FontFactory(backend, settings)
        factory.register(Avenir, AVENIR_TRAITS)

        assert factory.of_size(Avenir.ROMAN, 17).name == "Avenir-Roman"
        settings.bold_text = True
        assert factory.of_size(Avenir.ROMAN, 17).name == "Avenir-Heavy"
        assert settings.bold_queries == 2

    @pytest.mark.parametrize("size", [0, -12.5])
    def test_non_positive_size_rejected(
        self, factory: FontFactory, backend: FakeBackend, size: float
    ) -> None:
        """Zero or negative sizes raise ValueError before the backend is asked."""
        with pytest.raises(ValueError, match="size must be positive"):
            factory.of_size(Avenir.ROMAN, size)
        assert backend.loads == []


class TestFailurePolicy:
    """Tests for missing font handling."""

    def test_strict_raises_font_not_found(
        self, backend: FakeBackend, accessibility: StaticAccessibility
    ) -> None:
        """The strict policy raises FontNotFoundError naming the font."""
        factory = FontFactory(backend, accessibility, policy=FailurePolicy.STRICT)
        with pytest.raises(FontNotFoundError) as excinfo:
            factory.of_size(InvalidFont.DOES_NOT_EXIST, 12)
        assert excinfo.value.font_name == "DoesNotExist-Regular"
        assert excinfo.value.size == 12
        assert "DoesNotExist-Regular" in str(excinfo.value)

    def test_strict_reports_bold_mapped_name(self, accessibility: StaticAccessibility) -> None:
        """The error names the font actually requested after bold mapping."""
        backend = FakeBackend({"Avenir-Roman"})
        factory = FontFactory(
            backend, StaticAccessibility(bold_text=True), policy=FailurePolicy.STRICT
        )
        factory.register(Avenir, AVENIR_TRAITS)
        with pytest.raises(FontNotFoundError, match="Avenir-Heavy"):
            factory.of_size(Avenir.ROMAN, 12)

    def test_fallback_returns_system_font(self, factory: FontFactory) -> None:
        """The fallback policy substitutes the system font."""
        font = factory.of_size(InvalidFont.DOES_NOT_EXIST, 12)
        assert font.is_fallback is True
        assert font.name is None
        assert font.handle == ("<system>", 12)
        assert font.cascade == ()

    def test_fallback_calls_hook_and_logs(
        self,
        backend: FakeBackend,
        accessibility: StaticAccessibility,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """The diagnostic hook receives the error and a warning is logged."""
        seen: list[FontNotFoundError] = []
        factory = FontFactory(backend, accessibility, on_missing=seen.append)
        with caplog.at_level("WARNING", logger="swash.fonts.factory"):
            factory.of_size(InvalidFont.DOES_NOT_EXIST, 9)
        assert len(seen) == 1
        assert seen[0].font_name == "DoesNotExist-Regular"
        assert "DoesNotExist-Regular" in caplog.text


class TestOfTextStyle:
    """Tests for dynamic type fonts."""

    def test_uses_preferred_size(self, factory: FontFactory) -> None:
        """The base size comes from the phone table."""
        font = factory.of_text_style(Avenir.BLACK_OBLIQUE, TextStyle.TITLE1)
        assert font.name == "Avenir-BlackOblique"
        assert font.size == 28.0

    def test_max_size_caps(self, factory: FontFactory) -> None:
        """The default scaler clamps to the maximum size."""
        font = factory.of_text_style(Avenir.LIGHT, TextStyle.LARGE_TITLE, max_size=30)
        assert font.size == 30.0
        assert font.handle == ("Avenir-Light", 30.0)

    def test_default_size_overrides(self, factory: FontFactory) -> None:
        """An explicit default size is used as the base."""
        font = factory.of_text_style(
            Futura.CONDENSED_MEDIUM, TextStyle.BODY, max_size=30, default_size=19
        )
        assert font.size == 19.0

    def test_watch_category_selects_table(self, backend: FakeBackend) -> None:
        """On watch the live content size category drives the base size."""
        settings = CountingAccessibility(category=ContentSizeCategory.SMALL)
        factory = FontFactory(backend, settings, platform=PlatformClass.WATCH)
        assert factory.of_text_style(Avenir.ROMAN, TextStyle.CAPTION2).size == 13.0
        settings.category = ContentSizeCategory.LARGE
        assert factory.of_text_style(Avenir.ROMAN, TextStyle.CAPTION2).size == 14.0

    def test_custom_scaler_receives_inputs(
        self, backend: FakeBackend, accessibility: StaticAccessibility
    ) -> None:
        """The scaler is handed the base font, the style and the maximum."""
        calls = []

        class RecordingScaler:
            def scale(self, font, text_style, max_size):
                calls.append((font.size, text_style, max_size))
                return font

        factory = FontFactory(backend, accessibility, scaler=RecordingScaler())
        factory.of_text_style(Avenir.ROMAN, TextStyle.HEADLINE, max_size=40)
        assert calls == [(17.0, TextStyle.HEADLINE, 40.0)]

    def test_missing_font_in_strict_mode(
        self, backend: FakeBackend, accessibility: StaticAccessibility
    ) -> None:
        """Dynamic fonts propagate FontNotFoundError under the strict policy."""
        factory = FontFactory(backend, accessibility, policy=FailurePolicy.STRICT)
        with pytest.raises(FontNotFoundError):
            factory.of_text_style(InvalidFont.DOES_NOT_EXIST, TextStyle.FOOTNOTE)


class TestPreferred:
    """Tests for preferred members and font_for_style."""

    def test_family_chooser_used(self) -> None:
        """Families with a preferred classmethod choose the member."""
        assert FontFactory.preferred(Avenir, TextStyle.HEADLINE) is Avenir.HEAVY
        assert FontFactory.preferred(Avenir, TextStyle.BODY) is Avenir.ROMAN

    def test_first_member_without_chooser(self) -> None:
        """Families without a chooser use their first member."""
        assert FontFactory.preferred(Futura, TextStyle.TITLE3) is Futura.MEDIUM

    def test_font_for_style(self, factory: FontFactory) -> None:
        """font_for_style combines the preferred member and preferred size."""
        font = factory.font_for_style(Avenir, TextStyle.TITLE1, max_size=None)
        assert font.name == "Avenir-Heavy"
        assert font.size == 28.0

    def test_preferred_size_tv(self, backend: FakeBackend, accessibility) -> None:
        """preferred_size follows the factory platform."""
        factory = FontFactory(backend, accessibility, platform=PlatformClass.TV)
        assert factory.preferred_size(TextStyle.TITLE1) == 76.0


class TestCappingScaler:
    """Tests for the default scaler."""

    def test_scale_factor_reloads(self, backend: FakeBackend) -> None:
        """A scale factor reloads the font at the new size."""
        scaler = CappingScaler(backend, factor=2.0)
        base = ResolvedFont(name="Avenir-Roman", size=10.0, handle=("Avenir-Roman", 10.0))
        scaled = scaler.scale(base, TextStyle.BODY, None)
        assert scaled.size == 20.0
        assert scaled.handle == ("Avenir-Roman", 20.0)

    def test_unchanged_size_returns_same_font(self, backend: FakeBackend) -> None:
        """No reload happens when the size does not change."""
        base = ResolvedFont(name="Avenir-Roman", size=10.0, handle=("Avenir-Roman", 10.0))
        assert CappingScaler(backend).scale(base, TextStyle.BODY, 12.0) is base
        assert backend.loads == []

    def test_fallback_font_rescaled_as_system_font(self, backend: FakeBackend) -> None:
        """A substituted system font stays the system font when capped."""
        base = ResolvedFont(name=None, size=34.0, handle=("<system>", 34.0), is_fallback=True)
        scaled = CappingScaler(backend).scale(base, TextStyle.LARGE_TITLE, 20.0)
        assert scaled.handle == ("<system>", 20.0)
        assert scaled.is_fallback is True

    def test_invalid_factor(self, backend: FakeBackend) -> None:
        """Non-positive factors are rejected."""
        with pytest.raises(ValueError):
            CappingScaler(backend, factor=0)
