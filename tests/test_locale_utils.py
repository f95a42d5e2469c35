"""Tests for locale_utils.py.

Covers normalization, language/country extraction, validity and
right-to-left classification over Babel CLDR data.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from babel import Locale
from hypothesis import event, given
from hypothesis import strategies as st

from i18ngen.locale_utils import (
    BabelLocaleMetadata,
    clear_locale_cache,
    country_code,
    get_babel_locale,
    is_rtl_language,
    is_valid_locale,
    language_code,
    normalize_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_underscore(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("en-US") == "en_US"

    def test_casing_preserved(self) -> None:
        """Casing is kept so generated identifiers match the configuration."""
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_language_only(self) -> None:
        """A bare language code is unchanged."""
        assert normalize_locale("fr") == "fr"

    @given(st.from_regex(r"[a-z]{2,3}(-[A-Z]{2})?", fullmatch=True))
    def test_no_hyphen_remains(self, code: str) -> None:
        """Property: normalized codes never contain a hyphen."""
        normalized = normalize_locale(code)
        event(f"has_region={'_' in normalized}")
        assert "-" not in normalized
        assert normalize_locale(normalized) == normalized


class TestLanguageAndCountry:
    """Test language_code and country_code."""

    @pytest.mark.parametrize(
        ("locale", "language", "country"),
        [
            ("en-US", "en", "US"),
            ("en_GB", "en", "GB"),
            ("fr", "fr", ""),
            ("zh-Hans-CN", "zh", "CN"),
            ("pt-BR", "pt", "BR"),
        ],
    )
    def test_split(self, locale: str, language: str, country: str) -> None:
        """Language and region subtags are extracted."""
        assert language_code(locale) == language
        assert country_code(locale) == country

    def test_language_lowercased(self) -> None:
        """Language codes compare case-insensitively."""
        assert language_code("EN-us") == "en"

    def test_metadata_delegates(self) -> None:
        """BabelLocaleMetadata exposes the same lookups."""
        metadata = BabelLocaleMetadata()
        assert metadata.language_code("de-AT") == "de"
        assert metadata.country_code("de-AT") == "AT"
        assert metadata.is_valid_locale("de-AT")
        assert metadata.is_rtl_language("ar")


class TestGetBabelLocale:
    """Test get_babel_locale and its cache."""

    def test_returns_locale(self) -> None:
        """A Babel Locale is returned."""
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.territory == "US"

    def test_cached(self) -> None:
        """Repeated calls return the cached object."""
        clear_locale_cache()
        assert get_babel_locale("de-DE") is get_babel_locale("de-DE")

    def test_clear_cache(self) -> None:
        """clear_locale_cache empties the cache."""
        get_babel_locale("fr-FR")
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0


class TestIsValidLocale:
    """Test is_valid_locale."""

    @pytest.mark.parametrize("locale", ["en-US", "de-AT", "ar", "zh-Hans-CN"])
    def test_known(self, locale: str) -> None:
        """CLDR locales are valid."""
        assert is_valid_locale(locale)

    @pytest.mark.parametrize("locale", ["", "   ", "xx-YY", "not a locale"])
    def test_unknown(self, locale: str) -> None:
        """Empty, unknown and malformed codes are invalid."""
        assert not is_valid_locale(locale)


class TestIsRtlLanguage:
    """Test is_rtl_language."""

    @pytest.mark.parametrize("language", ["ar", "he", "fa", "ur"])
    def test_rtl(self, language: str) -> None:
        """Right-to-left scripts are detected."""
        assert is_rtl_language(language)

    @pytest.mark.parametrize("language", ["en", "fr", "zh", "ru"])
    def test_ltr(self, language: str) -> None:
        """Left-to-right scripts are not."""
        assert not is_rtl_language(language)

    def test_unknown_is_ltr(self) -> None:
        """Unknown languages default to left-to-right."""
        assert not is_rtl_language("xx")
