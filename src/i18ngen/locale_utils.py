"""Locale utilities backed by Babel CLDR data.

Centralizes locale code handling used throughout the codebase:
normalization to the identifier form used in generated code, language and
country extraction, validity checks and right-to-left classification.

The LocaleMetadata protocol lets the generation pipeline consume these as a
pure service; BabelLocaleMetadata is the default implementation.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from babel import Locale, UnknownLocaleError
from babel.core import parse_locale

if TYPE_CHECKING:
    from i18ngen.core.types import LocaleCode

__all__ = [
    "BabelLocaleMetadata",
    "LocaleMetadata",
    "clear_locale_cache",
    "country_code",
    "get_babel_locale",
    "is_rtl_language",
    "is_valid_locale",
    "language_code",
    "normalize_locale",
]


def normalize_locale(locale_code: LocaleCode) -> str:
    """Convert a BCP-47 locale code to the underscore form.

    The underscore form is both what Babel expects and a valid identifier
    fragment for generated class names.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "zh-Hans-CN")

    Returns:
        Underscore-separated code with original casing (e.g., "en_US")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("fr")
        'fr'
    """
    return locale_code.replace("-", "_")


def _split(locale_code: LocaleCode) -> tuple[str, str | None]:
    """Split a locale into (language, territory), tolerating unknown shapes."""
    normalized = normalize_locale(locale_code)
    try:
        language, territory, _script, _variant = parse_locale(normalized)[:4]
    except ValueError:
        parts = normalized.split("_")
        language = parts[0]
        territory = next((p for p in parts[1:] if len(p) == 2 and p.isalpha()), None)
    return language.lower(), territory


def language_code(locale_code: LocaleCode) -> str:
    """Return the language subtag of a locale, ignoring script and region.

    Example:
        >>> language_code("zh-Hans-CN")
        'zh'
        >>> language_code("en_GB")
        'en'
    """
    return _split(locale_code)[0]


def country_code(locale_code: LocaleCode) -> str:
    """Return the region subtag of a locale, or an empty string if absent.

    Example:
        >>> country_code("pt-BR")
        'BR'
        >>> country_code("fr")
        ''
    """
    return _split(locale_code)[1] or ""


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: LocaleCode) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def is_valid_locale(locale_code: LocaleCode) -> bool:
    """Check whether Babel's CLDR data knows the locale.

    Example:
        >>> is_valid_locale("de-AT")
        True
        >>> is_valid_locale("xx-YY")
        False
    """
    if not locale_code or not locale_code.strip():
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


@functools.lru_cache(maxsize=128)
def is_rtl_language(language: str) -> bool:
    """Check whether a language is written right-to-left.

    Unknown languages are classified left-to-right.

    Example:
        >>> is_rtl_language("ar")
        True
        >>> is_rtl_language("fr")
        False
    """
    try:
        return Locale.parse(language).text_direction == "rtl"
    except (UnknownLocaleError, ValueError):
        return False


class LocaleMetadata(Protocol):
    """Protocol for locale metadata lookups consumed by the pipeline.

    Implementations must be pure: the same input always yields the same
    answer during a generation pass.
    """

    def language_code(self, locale: LocaleCode) -> str:
        """Return the language subtag of a locale."""

    def country_code(self, locale: LocaleCode) -> str:
        """Return the region subtag of a locale, empty if absent."""

    def is_valid_locale(self, locale: LocaleCode) -> bool:
        """Check whether the locale is recognized."""

    def is_rtl_language(self, language: str) -> bool:
        """Check whether a language is written right-to-left."""


@dataclass(frozen=True, slots=True)
class BabelLocaleMetadata:
    """LocaleMetadata implementation over Babel CLDR data."""

    def language_code(self, locale: LocaleCode) -> str:
        """Return the language subtag of a locale."""
        return language_code(locale)

    def country_code(self, locale: LocaleCode) -> str:
        """Return the region subtag of a locale, empty if absent."""
        return country_code(locale)

    def is_valid_locale(self, locale: LocaleCode) -> bool:
        """Check whether Babel knows the locale."""
        return is_valid_locale(locale)

    def is_rtl_language(self, language: str) -> bool:
        """Check whether a language is written right-to-left."""
        return is_rtl_language(language)
