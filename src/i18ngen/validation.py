"""Input validation for user-supplied locale codes and keys.

Validators follow the prompt callback contract: they return an error
message, or None when the input is acceptable. require() turns a validator
result into a ValidationError for non-interactive callers.

Python 3.13+.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from i18ngen.diagnostics import ValidationError
from i18ngen.locale_utils import BabelLocaleMetadata

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from i18ngen.locale_utils import LocaleMetadata

__all__ = [
    "KEY_PATTERN",
    "locale_validator",
    "require",
    "validate_key",
    "validate_locale_code",
]

KEY_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def validate_locale_code(
    locale: str,
    existing: Iterable[str] = (),
    metadata: LocaleMetadata | None = None,
) -> str | None:
    """Check a locale code entered by the user.

    Args:
        locale: Candidate locale code (e.g., "fr-CA")
        existing: Locales already configured
        metadata: Locale metadata service

    Returns:
        Error message, or None if the locale is acceptable
    """
    metadata = metadata or BabelLocaleMetadata()
    if not locale or not locale.strip():
        return "Locale code cannot be empty"
    if locale != locale.strip():
        return f"Locale code must not contain surrounding whitespace: {locale!r}"
    if not metadata.is_valid_locale(locale):
        return f"{locale} is not a valid locale code"
    if locale in set(existing):
        return f"Locale {locale} is already configured"
    return None


def validate_key(key: str, existing: Iterable[str] = ()) -> str | None:
    """Check a translation key entered by the user.

    Keys become Dart member names, so they must be identifiers.

    Returns:
        Error message, or None if the key is acceptable
    """
    if not key:
        return "Key cannot be empty"
    if not KEY_PATTERN.fullmatch(key):
        return (
            f"Key '{key}' must start with a letter or underscore "
            "and contain only letters, digits and underscores"
        )
    if key in set(existing):
        return f"Key {key} already exists"
    return None


def locale_validator(
    existing: Iterable[str] = (),
    metadata: LocaleMetadata | None = None,
) -> Callable[[str], str | None]:
    """Bind validate_locale_code to the configured locales for use as a prompt callback."""
    configured = tuple(existing)
    return lambda value: validate_locale_code(value, configured, metadata)


def require(message: str | None, *, locale: str | None = None) -> None:
    """Raise ValidationError when a validator returned a message.

    Raises:
        ValidationError: If ``message`` is not None
    """
    if message is not None:
        raise ValidationError(message, locale=locale)
