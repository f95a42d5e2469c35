"""Workspace configuration model.

The configuration document (``i18nconfig.json``) is the single source of
truth between invocations:

    {
        "defaultLocale": "en-US",
        "locales": ["en-US", "ar"],
        "localePath": "i18n",
        "generatedPath": "lib/generated",
        "ltr": ["en-US"],
        "rtl": ["ar"]
    }

I18nConfig is immutable; add/remove-locale mutations return new instances.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from i18ngen.constants import DEFAULT_GENERATED_PATH, DEFAULT_LOCALE, DEFAULT_LOCALE_PATH
from i18ngen.diagnostics import ConfigurationError, ValidationError

__all__ = ["I18nConfig"]

# JSON key -> attribute name
_FIELDS: dict[str, str] = {
    "defaultLocale": "default_locale",
    "locales": "locales",
    "localePath": "locale_path",
    "generatedPath": "generated_path",
    "rtl": "rtl",
    "ltr": "ltr",
    "googleTranslateApiKey": "translate_api_key",
}

_SEQUENCE_FIELDS: frozenset[str] = frozenset({"locales", "rtl", "ltr"})


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Immutable workspace configuration.

    Attributes:
        default_locale: Locale whose resource defines the canonical table
        locales: Configured locales; order drives inheritance and output order
        locale_path: Folder holding the per-locale resources
        generated_path: Folder receiving the generated file
        rtl: Locales explicitly classified right-to-left
        ltr: Locales explicitly classified left-to-right
        translate_api_key: Google Translate API key (optional)
    """

    default_locale: str = DEFAULT_LOCALE
    locales: tuple[str, ...] = (DEFAULT_LOCALE,)
    locale_path: str = DEFAULT_LOCALE_PATH
    generated_path: str = DEFAULT_GENERATED_PATH
    rtl: tuple[str, ...] = ()
    ltr: tuple[str, ...] = ()
    translate_api_key: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants at construction.

        Raises:
            ConfigurationError: If the default locale is not configured,
                locales repeat, or a locale is both rtl and ltr
        """
        if not self.default_locale:
            msg = "defaultLocale must be set"
            raise ConfigurationError(msg)
        if self.default_locale not in self.locales:
            msg = f"defaultLocale '{self.default_locale}' is not listed in locales"
            raise ConfigurationError(msg, locale=self.default_locale)
        if len(set(self.locales)) != len(self.locales):
            msg = f"locales must be unique, got {list(self.locales)}"
            raise ConfigurationError(msg)
        both = set(self.rtl) & set(self.ltr)
        if both:
            msg = f"Locales listed as both rtl and ltr: {sorted(both)}"
            raise ConfigurationError(msg)

    @classmethod
    def from_dict(cls, data: Any) -> I18nConfig:
        """Build a configuration from a decoded JSON document.

        Unknown keys are ignored; missing keys take their defaults.

        Raises:
            ConfigurationError: If the document is not an object, a value has
                the wrong type, or an invariant does not hold
        """
        if not isinstance(data, Mapping):
            msg = f"Configuration must be a JSON object, got {type(data).__name__}"
            raise ConfigurationError(msg)

        values: dict[str, Any] = {}
        for json_key, attribute in _FIELDS.items():
            if json_key not in data or data[json_key] is None:
                continue
            value = data[json_key]
            if attribute in _SEQUENCE_FIELDS:
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    msg = f"'{json_key}' must be a list of strings"
                    raise ConfigurationError(msg)
                values[attribute] = tuple(value)
            else:
                if not isinstance(value, str):
                    msg = f"'{json_key}' must be a string"
                    raise ConfigurationError(msg)
                values[attribute] = value

        if "locales" not in values and "default_locale" in values:
            values["locales"] = (values["default_locale"],)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON document layout (camelCase keys)."""
        data: dict[str, Any] = {
            "defaultLocale": self.default_locale,
            "locales": list(self.locales),
            "localePath": self.locale_path,
            "generatedPath": self.generated_path,
            "ltr": list(self.ltr),
            "rtl": list(self.rtl),
        }
        if self.translate_api_key:
            data["googleTranslateApiKey"] = self.translate_api_key
        return data

    def with_locale(self, locale: str) -> I18nConfig:
        """Return a copy with ``locale`` appended to the configured locales.

        Raises:
            ValidationError: If the locale is already configured
        """
        if locale in self.locales:
            msg = f"Locale {locale} is already configured"
            raise ValidationError(msg, locale=locale)
        return replace(self, locales=(*self.locales, locale))

    def without_locale(self, locale: str) -> I18nConfig:
        """Return a copy with ``locale`` removed from locales, rtl and ltr.

        Raises:
            ValidationError: If the locale is the default locale or unknown
        """
        if locale == self.default_locale:
            msg = f"Default locale {locale} cannot be removed"
            raise ValidationError(msg, locale=locale)
        if locale not in self.locales:
            msg = f"Locale {locale} is not configured"
            raise ValidationError(msg, locale=locale)
        return replace(
            self,
            locales=tuple(code for code in self.locales if code != locale),
            rtl=tuple(code for code in self.rtl if code != locale),
            ltr=tuple(code for code in self.ltr if code != locale),
        )

    @property
    def non_default_locales(self) -> tuple[str, ...]:
        """Configured locales other than the default, in configured order."""
        return tuple(locale for locale in self.locales if locale != self.default_locale)
