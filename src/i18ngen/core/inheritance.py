"""Locale inheritance resolution.

Region variants of a language usually share most translations. A locale
class therefore extends the nearest previously configured locale of the same
language, and only declares what differs from it. Locales without such a
predecessor extend the canonical class.

Resolution depends only on configured order and language-code equality,
never on resource content.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from i18ngen.locale_utils import language_code as _babel_language_code

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from i18ngen.core.types import LocaleCode

__all__ = ["inheritance_chain", "resolve_base"]


def resolve_base(
    locale: LocaleCode,
    locales: Sequence[LocaleCode],
    *,
    default_locale: LocaleCode | None = None,
    language_code: Callable[[LocaleCode], str] = _babel_language_code,
) -> LocaleCode | None:
    """Find the locale a given locale's class should extend.

    Scans the locales configured strictly before ``locale``, nearest first,
    and returns the first one sharing its language code.

    Args:
        locale: Locale being resolved
        locales: Configured locales in order
        default_locale: The default locale always extends the canonical class
        language_code: Language-code extraction rule

    Returns:
        The base locale, or None to extend the canonical class

    Raises:
        ValueError: If ``locale`` is not configured

    Example:
        >>> resolve_base("en-GB", ["en-US", "en-GB", "fr-FR"])
        'en-US'
        >>> resolve_base("fr-FR", ["en-US", "en-GB", "fr-FR"]) is None
        True
    """
    if locale == default_locale:
        return None
    position = list(locales).index(locale)
    language = language_code(locale)
    for candidate in reversed(locales[:position]):
        if language_code(candidate) == language:
            return candidate
    return None


def inheritance_chain(
    locale: LocaleCode,
    locales: Sequence[LocaleCode],
    *,
    default_locale: LocaleCode | None = None,
    language_code: Callable[[LocaleCode], str] = _babel_language_code,
) -> tuple[LocaleCode, ...]:
    """List the bases of a locale from the most generic to the nearest.

    Example:
        >>> inheritance_chain("en-AU", ["en-US", "en-GB", "en-AU"])
        ('en-US', 'en-GB')
    """
    chain: list[LocaleCode] = []
    base = resolve_base(locale, locales, default_locale=default_locale, language_code=language_code)
    while base is not None:
        chain.append(base)
        base = resolve_base(
            base, locales, default_locale=default_locale, language_code=language_code
        )
    return tuple(reversed(chain))
