"""Automatic translation of missing keys.

For every non-default locale, keys present in the default resource but
missing from the locale's resource are machine-translated and appended to
the locale's resource file.

Placeholders must survive translation. Backends sometimes translate the
names inside braces ("{name}" -> "{nombre}"), so after each call the
translated placeholders are re-parsed and mapped back to the source names
by position. When the number of placeholders differs the source text is
kept for that key.

Writes are per locale and non-transactional: if the service fails, locales
written before the failure keep their new entries (at-least-once).

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from i18ngen.core.variables import PLACEHOLDER_PATTERN, parse_variables, placeholder
from i18ngen.diagnostics import LocaleProcessingError

if TYPE_CHECKING:
    from i18ngen.core.types import LeafValue, LocaleCode, Resource
    from i18ngen.storage.config import I18nConfig
    from i18ngen.storage.store import ResourceStore
    from i18ngen.translation.service import TranslationService

__all__ = ["AutoTranslator", "TranslationReport", "remap_placeholders"]

logger = logging.getLogger(__name__)


def remap_placeholders(source: str, translated: str) -> str | None:
    """Restore the source placeholder names inside a translation.

    Args:
        source: Text that was sent for translation
        translated: Text returned by the service

    Returns:
        The translation with placeholders renamed to the source names, or
        None when no safe mapping exists. Names the service kept are left
        alone; only the renamed ones are paired with the missing source
        names, by position.

    Example:
        >>> remap_placeholders("Hi {name}", "Hola {nombre}")
        'Hola {name}'
        >>> remap_placeholders("{a} and {b}", "{b} y {a}")
        '{b} y {a}'
        >>> remap_placeholders("{name} has {count}", "{count} pour {nombre}")
        '{count} pour {name}'
    """
    source_vars = parse_variables(source) or ()
    translated_vars = parse_variables(translated) or ()
    if set(source_vars) == set(translated_vars):
        return translated
    missing = [name for name in source_vars if name not in translated_vars]
    renamed = [name for name in translated_vars if name not in source_vars]
    if len(missing) != len(renamed):
        return None

    mapping = dict(zip(renamed, missing, strict=True))
    return PLACEHOLDER_PATTERN.sub(
        lambda m: placeholder(mapping.get(m.group(1), m.group(1))), translated
    )


@dataclass(slots=True)
class TranslationReport:
    """What one auto-translation run changed.

    Attributes:
        translated: Locale -> keys added to its resource
        kept_source: Locale -> keys whose source text was kept because
            placeholders could not be mapped
        failed: Locale -> reason it was skipped
    """

    translated: dict[LocaleCode, tuple[str, ...]] = field(default_factory=dict)
    kept_source: dict[LocaleCode, tuple[str, ...]] = field(default_factory=dict)
    failed: dict[LocaleCode, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        """Number of keys added across all locales."""
        return sum(len(keys) for keys in self.translated.values())


class AutoTranslator:
    """Fill missing keys of every non-default locale by machine translation."""

    __slots__ = ("_service", "_store")

    def __init__(self, service: TranslationService, store: ResourceStore) -> None:
        """Initialize the translator.

        Args:
            service: Translation backend
            store: Workspace store used to read and write resources
        """
        self._service = service
        self._store = store

    def translate_text(self, text: str, locale: LocaleCode) -> str | None:
        """Translate one string, preserving placeholders.

        Returns:
            The translation, or None when placeholders could not be preserved

        Raises:
            TranslationServiceError: If the service fails
        """
        translated = self._service.translate(text, locale)
        return remap_placeholders(text, translated)

    def _translate_value(self, value: LeafValue, locale: LocaleCode) -> LeafValue | None:
        if isinstance(value, list):
            items: list[str] = []
            for item in value:
                translated = self.translate_text(item, locale)
                if translated is None:
                    return None
                items.append(translated)
            return items
        if isinstance(value, str):
            return self.translate_text(value, locale)
        return value

    def translate_locale(
        self,
        locale: LocaleCode,
        default_resource: Resource,
        config: I18nConfig,
        report: TranslationReport | None = None,
    ) -> tuple[str, ...]:
        """Translate and persist the keys a locale is missing.

        Args:
            locale: Target locale
            default_resource: Flattened default-locale resource
            config: Current configuration
            report: Report to record results into

        Returns:
            Keys added to the locale's resource

        Raises:
            TranslationServiceError: If the service fails (nothing is written
                for this locale)
            LocaleProcessingError: If the locale's existing resource is unusable
        """
        if self._store.has_resource(locale, config):
            raw = self._store.read_raw_resource(locale, config)
            existing = self._store.read_resource(locale, config)
        else:
            raw, existing = {}, {}

        added: list[str] = []
        kept: list[str] = []
        for key, value in default_resource.items():
            if key in existing:
                continue
            translated = self._translate_value(value, locale)
            if translated is None:
                logger.warning(
                    "Placeholders of '%s' did not survive translation to %s; keeping source text",
                    key,
                    locale,
                )
                translated = value
                kept.append(key)
            raw[key] = translated
            added.append(key)

        if added:
            self._store.write_resource(locale, raw, config)
            logger.info("Translated %d key(s) for locale %s", len(added), locale)
        else:
            logger.debug("Locale %s has no missing keys", locale)

        if report is not None:
            report.translated[locale] = tuple(added)
            if kept:
                report.kept_source[locale] = tuple(kept)
        return tuple(added)

    def translate_all(self, config: I18nConfig) -> TranslationReport:
        """Translate missing keys for every non-default locale, in configured order.

        A locale whose existing resource is unusable is skipped and recorded
        in the report's failed entries.

        Raises:
            ConfigurationError: If the default resource is unusable
            TranslationServiceError: On the first service failure; locales
                already written are not rolled back
        """
        default_resource = self._store.read_resource(config.default_locale, config)
        report = TranslationReport()
        for locale in config.non_default_locales:
            try:
                self.translate_locale(locale, default_resource, config, report)
            except LocaleProcessingError as e:
                logger.warning("Skipping locale %s: %s", locale, e)
                report.failed[locale] = str(e)
        return report
