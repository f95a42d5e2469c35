"""Workspace operations exposed to editors and the command line.

I18nCommands bundles the user-facing operations (initialize, update,
add/remove locale, insert key, auto-translate). Each prompts through the
UserInteraction protocol, mutates durable state through ResourceStore and
finishes with a generation pass.

Errors from the i18ngen hierarchy propagate to the caller, which decides how
to display them; validation happens at prompt time so bad input never
reaches the pipeline.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from i18ngen.core.direction import assign_directions
from i18ngen.core.functions import build_function
from i18ngen.generator import I18nGenerator
from i18ngen.locale_utils import BabelLocaleMetadata
from i18ngen.storage.config import I18nConfig
from i18ngen.translation.auto_translator import AutoTranslator
from i18ngen.translation.service import GoogleTranslateService
from i18ngen.validation import locale_validator, require, validate_key

if TYPE_CHECKING:
    from collections.abc import Callable

    from i18ngen.generator import GenerationResult
    from i18ngen.interaction import UserInteraction
    from i18ngen.locale_utils import LocaleMetadata
    from i18ngen.storage.store import ResourceStore
    from i18ngen.translation.auto_translator import TranslationReport
    from i18ngen.translation.service import TranslationService

__all__ = ["I18nCommands", "extract_missing_getter"]

logger = logging.getLogger(__name__)

_MISSING_GETTER: re.Pattern[str] = re.compile(
    r"^The getter '(.*)' isn't defined for the class '(?:I18n|S)'\."
)


def extract_missing_getter(message: str) -> str | None:
    """Extract the accessor name from a Dart analyzer "undefined getter" message.

    Example:
        >>> extract_missing_getter("The getter 'title' isn't defined for the class 'I18n'.")
        'title'
        >>> extract_missing_getter("Undefined name 'x'.") is None
        True
    """
    match = _MISSING_GETTER.match(message)
    return match.group(1) if match else None


class I18nCommands:
    """User-facing workspace operations.

    Example:
        >>> commands = I18nCommands(ResourceStore("."), ConsoleInteraction())
        >>> commands.add_locale()
    """

    __slots__ = ("_generator", "_metadata", "_store", "_translation_factory", "_ui")

    def __init__(
        self,
        store: ResourceStore,
        ui: UserInteraction,
        *,
        metadata: LocaleMetadata | None = None,
        translation_factory: Callable[[I18nConfig], TranslationService] | None = None,
    ) -> None:
        """Initialize the command set.

        Args:
            store: Workspace store
            ui: User interaction implementation
            metadata: Locale metadata service (defaults to Babel)
            translation_factory: Builds the translation backend from the
                configuration (defaults to Google Translate)
        """
        self._store = store
        self._ui = ui
        self._metadata: LocaleMetadata = metadata or BabelLocaleMetadata()
        self._generator = I18nGenerator(store, metadata=self._metadata)
        self._translation_factory = translation_factory or _google_translate

    @property
    def generator(self) -> I18nGenerator:
        """Generator used for regeneration after each mutation."""
        return self._generator

    def initialize(self) -> GenerationResult:
        """Create the configuration, default resource and generated folder, then generate.

        Existing files are left untouched.
        """
        if self._store.has_config():
            config = self._store.read_config()
            logger.info("Configuration already present at %s", self._store.config_path)
        else:
            config = assign_directions(I18nConfig(), self._metadata)
            self._store.write_config(config)

        self._store.storage.create_dir(self._store.locale_dir(config))
        if not self._store.has_resource(config.default_locale, config):
            self._store.write_resource(config.default_locale, {}, config)
        self._store.storage.create_dir(self._store.generated_dir(config))
        return self.update()

    def update(self) -> GenerationResult:
        """Regenerate the output and report skipped locales."""
        result = self._generator.update()
        for skipped in result.skipped:
            self._ui.show_error(f"Locale {skipped.locale} was skipped: {skipped.error}")
        return result

    def add_locale(self, locale: str | None = None) -> GenerationResult | None:
        """Add a locale with an empty resource and regenerate.

        Args:
            locale: Locale to add; prompted for when omitted

        Returns:
            The generation result, or None if the user cancelled

        Raises:
            ValidationError: If a locale passed in is invalid or already configured
        """
        config = self._store.read_config()
        validator = locale_validator(config.locales, self._metadata)
        if locale is None:
            locale = self._ui.prompt(
                "Enter locale code (e.g. 'en-GB')", placeholder="Locale", validator=validator
            )
            if locale is None:
                self._ui.show_info("Adding locale was cancelled.")
                return None
        else:
            require(validator(locale), locale=locale)

        config = assign_directions(config.with_locale(locale), self._metadata)
        if not self._store.has_resource(locale, config):
            self._store.write_resource(locale, {}, config)
        self._store.write_config(config)
        logger.info("Added locale %s", locale)
        return self.update()

    def remove_locale(self, locale: str | None = None) -> GenerationResult | None:
        """Remove a non-default locale, its direction entry and its resource, then regenerate.

        Args:
            locale: Locale to remove; picked from the configured ones when omitted

        Returns:
            The generation result, or None if cancelled or nothing to remove

        Raises:
            ValidationError: If the locale is the default locale or not configured
        """
        config = self._store.read_config()
        if locale is None:
            candidates = config.non_default_locales
            if not candidates:
                self._ui.show_info("There are no locales to remove.")
                return None
            locale = self._ui.pick_one(candidates, placeholder="Locale to remove")
            if locale is None:
                self._ui.show_info("Removing locale was cancelled.")
                return None

        updated = config.without_locale(locale)
        self._store.delete_resource(locale, config)
        self._store.write_config(updated)
        logger.info("Removed locale %s", locale)
        return self.update()

    def insert_key(self, key: str, value: str | None = None) -> str | None:
        """Add a key to the default locale and regenerate.

        Args:
            key: New accessor name
            value: Default-locale text; prompted for when omitted

        Returns:
            Call suffix to insert after the accessor, e.g. "(name, count)", an
            empty string when the accessor takes no arguments, or None if the
            key was not added

        Raises:
            ValidationError: If the key is not a valid accessor name
        """
        require(validate_key(key))
        if value is None:
            value = self._ui.prompt(
                f"Enter the {key} value for the default locale", placeholder="Value"
            )
        if not value:
            self._ui.show_info("Adding key was cancelled.")
            return None

        config = self._store.read_config()
        resource = self._store.read_raw_resource(config.default_locale, config)
        if key in self._store.read_resource(config.default_locale, config):
            self._ui.show_info(f"Key {key} already exists.")
            return None
        resource[key] = value
        self._store.write_resource(config.default_locale, resource, config)
        self.update()

        descriptor = build_function(key, value)
        if descriptor.variables:
            return "(" + ", ".join(descriptor.variables) + ")"
        return ""

    def auto_translate(self) -> TranslationReport:
        """Machine-translate missing keys for every non-default locale, then regenerate.

        Locales translated before a service failure keep their new entries;
        the failure propagates and no regeneration happens. Locales with an
        unreadable resource are shown as errors and left out.

        Raises:
            TranslationServiceError: On the first service failure
        """
        config = self._store.read_config()
        translator = AutoTranslator(self._translation_factory(config), self._store)
        report = translator.translate_all(config)
        for locale, keys in report.kept_source.items():
            self._ui.show_info(
                f"{locale}: kept source text for {', '.join(keys)} (placeholders changed)"
            )
        for locale, reason in report.failed.items():
            self._ui.show_error(f"{locale}: not translated ({reason})")
        self._ui.show_info(f"Translated {report.total} string(s).")
        self.update()
        return report


def _google_translate(config: I18nConfig) -> TranslationService:
    return GoogleTranslateService(config.translate_api_key, source=config.default_locale)
