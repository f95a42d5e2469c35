"""Generation pass orchestration.

One pass recomputes everything from durable storage:

    1. Load config, record missing text directions
    2. Load and flatten the default-locale resource
    3. Build the canonical table (barrier: every later step reads it)
    4. Per configured locale: resolve inheritance base, classify direction,
       diff against the canonical table, prune what the base already provides
    5. Render canonical class, locale classes and registry class
    6. Persist (update() only)

A failure on the configuration or default resource aborts the pass before
anything is written. A failure on any other locale is logged, recorded in
the result and that locale's overrides are skipped; its class is still
rendered so that inheritance and the registry stay intact.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18ngen.core.diff import diff_function_table, effective_bodies, prune_inherited
from i18ngen.core.direction import assign_directions, classify_direction
from i18ngen.core.functions import build_function_table
from i18ngen.core.inheritance import inheritance_chain, resolve_base
from i18ngen.diagnostics import ConfigurationError, LocaleProcessingError
from i18ngen.enums import LoadStatus
from i18ngen.locale_utils import BabelLocaleMetadata
from i18ngen.rendering.renderer import CodeRenderer, LocaleClass

if TYPE_CHECKING:
    from pathlib import Path

    from i18ngen.core.functions import FunctionDescriptor
    from i18ngen.core.types import LocaleCode
    from i18ngen.enums import TextDirection
    from i18ngen.locale_utils import LocaleMetadata
    from i18ngen.storage.config import I18nConfig
    from i18ngen.storage.store import ResourceStore

__all__ = ["GenerationResult", "I18nGenerator", "LocaleResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleResult:
    """Outcome of processing one configured locale.

    Attributes:
        locale: Locale code
        status: Whether the locale's resource was processed
        base: Inheritance base, None for the canonical class
        direction: Text direction used for the locale class
        overrides: Number of accessors the locale class declares
        error: The recovered error when status is not SUCCESS
    """

    locale: LocaleCode
    status: LoadStatus
    base: LocaleCode | None
    direction: TextDirection
    overrides: int = 0
    error: LocaleProcessingError | None = None

    @property
    def is_success(self) -> bool:
        """Check if the locale was processed without error."""
        return self.status == LoadStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Result of one generation pass.

    Attributes:
        text: Rendered output
        config: Configuration used, with text directions recorded
        canonical: Canonical table
        locales: Per-locale outcomes in configured order
        output_path: Where the text was written (update() only)
    """

    text: str
    config: I18nConfig
    canonical: tuple[FunctionDescriptor, ...]
    locales: tuple[LocaleResult, ...]
    output_path: Path | None = None

    @property
    def skipped(self) -> tuple[LocaleResult, ...]:
        """Locales whose overrides were skipped because of an error."""
        return tuple(r for r in self.locales if not r.is_success)

    @property
    def has_skipped(self) -> bool:
        """Check if any locale was skipped."""
        return any(not r.is_success for r in self.locales)


class I18nGenerator:
    """Run generation passes for one workspace.

    Example:
        >>> generator = I18nGenerator(ResourceStore("/path/to/app"))
        >>> result = generator.update()
        >>> for skipped in result.skipped:
        ...     print(skipped.locale, skipped.error)
    """

    __slots__ = ("_metadata", "_prune", "_renderer", "_store")

    def __init__(
        self,
        store: ResourceStore,
        *,
        metadata: LocaleMetadata | None = None,
        renderer: CodeRenderer | None = None,
        prune: bool = True,
    ) -> None:
        """Initialize the generator.

        Args:
            store: Workspace store
            metadata: Locale metadata service (defaults to Babel)
            renderer: Output renderer
            prune: Drop overrides identical to what the base class provides
        """
        self._store = store
        self._metadata: LocaleMetadata = metadata or BabelLocaleMetadata()
        self._renderer = renderer or CodeRenderer(metadata=self._metadata)
        self._prune = prune

    @property
    def store(self) -> ResourceStore:
        """Workspace store."""
        return self._store

    def generate(self, config: I18nConfig | None = None) -> GenerationResult:
        """Run a generation pass without writing anything.

        Args:
            config: Configuration to use; read from the store when omitted

        Returns:
            GenerationResult with the rendered text

        Raises:
            ConfigurationError: If the configuration or the default-locale
                resource is missing, unreadable or invalid
        """
        if config is None:
            config = self._store.read_config()
        config = assign_directions(config, self._metadata)

        try:
            default_resource = self._store.read_resource(config.default_locale, config)
        except ConfigurationError as e:
            logger.error("Generation aborted: %s", e)
            raise
        canonical = build_function_table(default_resource)
        logger.debug(
            "Canonical table for %s: %d accessor(s)", config.default_locale, len(canonical)
        )

        declared: dict[LocaleCode, tuple[FunctionDescriptor, ...]] = {}
        classes: list[LocaleClass] = []
        results: list[LocaleResult] = []
        for locale in config.locales:
            locale_class, result = self._process_locale(locale, config, canonical, declared)
            declared[locale] = locale_class.functions
            classes.append(locale_class)
            results.append(result)

        text = self._renderer.render(canonical, classes)
        skipped = sum(1 for r in results if not r.is_success)
        logger.info(
            "Generated %d accessor(s) for %d locale(s), %d skipped",
            len(canonical),
            len(config.locales),
            skipped,
        )
        return GenerationResult(
            text=text,
            config=config,
            canonical=canonical,
            locales=tuple(results),
        )

    def update(self, config: I18nConfig | None = None) -> GenerationResult:
        """Run a generation pass and persist its output.

        The configuration is written back only when text directions were
        newly recorded.

        Raises:
            ConfigurationError: As generate(); nothing is written in that case
        """
        original = config if config is not None else self._store.read_config()
        result = self.generate(original)
        if result.config != original:
            self._store.write_config(result.config)
        path = self._store.write_output(result.text, result.config)
        return GenerationResult(
            text=result.text,
            config=result.config,
            canonical=result.canonical,
            locales=result.locales,
            output_path=path,
        )

    def _process_locale(
        self,
        locale: LocaleCode,
        config: I18nConfig,
        canonical: tuple[FunctionDescriptor, ...],
        declared: dict[LocaleCode, tuple[FunctionDescriptor, ...]],
    ) -> tuple[LocaleClass, LocaleResult]:
        language_code = self._metadata.language_code
        base = resolve_base(
            locale,
            config.locales,
            default_locale=config.default_locale,
            language_code=language_code,
        )
        direction = classify_direction(locale, config, self._metadata)

        if locale == config.default_locale:
            locale_class = LocaleClass(locale=locale, base=base, direction=direction)
            return locale_class, LocaleResult(locale, LoadStatus.SUCCESS, base, direction)

        try:
            overrides = self._overrides(locale, config, canonical)
        except LocaleProcessingError as e:
            status = LoadStatus.ERROR
            if not self._store.has_resource(locale, config):
                status = LoadStatus.NOT_FOUND
            logger.warning("Skipping locale %s: %s", locale, e)
            locale_class = LocaleClass(locale=locale, base=base, direction=direction)
            return locale_class, LocaleResult(locale, status, base, direction, error=e)

        if self._prune:
            chain = inheritance_chain(
                locale,
                config.locales,
                default_locale=config.default_locale,
                language_code=language_code,
            )
            inherited = effective_bodies(canonical, *(declared[b] for b in chain))
            overrides = prune_inherited(overrides, inherited)

        logger.debug("Locale %s extends %s with %d override(s)", locale, base, len(overrides))
        locale_class = LocaleClass(
            locale=locale, base=base, direction=direction, functions=overrides
        )
        return locale_class, LocaleResult(
            locale, LoadStatus.SUCCESS, base, direction, overrides=len(overrides)
        )

    def _overrides(
        self,
        locale: LocaleCode,
        config: I18nConfig,
        canonical: tuple[FunctionDescriptor, ...],
    ) -> tuple[FunctionDescriptor, ...]:
        target = self._store.read_resource(locale, config)
        return diff_function_table(canonical, target, locale=locale)
