"""Template filling for the generated output.

CodeRenderer is pure text substitution: it never decides what to emit, only
how. The generator hands it the canonical table and one LocaleClass per
configured locale; the renderer fills the injected templates and
concatenates canonical class, locale classes (configured order) and the
registry class into a single text.

Python 3.13+.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18ngen.constants import (
    CANONICAL_CLASS_NAME,
    CASE_INDENT,
    FUNCTION_INDENT,
    FUNCTION_SEPARATOR,
    LOCALE_CLASS_PREFIX,
    LOCALE_INDENT,
)
from i18ngen.locale_utils import BabelLocaleMetadata, normalize_locale
from i18ngen.rendering.templates import DEFAULT_TEMPLATES, RenderTemplates

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from i18ngen.core.functions import FunctionDescriptor
    from i18ngen.core.types import LocaleCode
    from i18ngen.enums import TextDirection
    from i18ngen.locale_utils import LocaleMetadata

__all__ = ["CodeRenderer", "LocaleClass", "class_name", "fill"]

_TOKEN_PATTERN: re.Pattern[str] = re.compile(r"\$\{(\w+)\}")


def fill(template: str, values: Mapping[str, str]) -> str:
    """Replace ``${token}`` markers with values in a single pass.

    Markers whose name is not in ``values`` are left untouched, and
    substituted text is never rescanned, so generated bodies containing
    Dart interpolations survive intact.

    Example:
        >>> fill("a ${x} ${y}", {"x": "${y}"})
        'a ${y} ${y}'
    """
    return _TOKEN_PATTERN.sub(lambda m: values.get(m.group(1), m.group(0)), template)


def class_name(locale: LocaleCode | None) -> str:
    """Generated class identifier for a locale, or the canonical class for None.

    Example:
        >>> class_name("en-US")
        '$en_US'
        >>> class_name(None)
        'S'
    """
    if locale is None:
        return CANONICAL_CLASS_NAME
    return LOCALE_CLASS_PREFIX + normalize_locale(locale)


@dataclass(frozen=True, slots=True)
class LocaleClass:
    """Everything needed to render one locale's class.

    Attributes:
        locale: Configured locale code
        base: Locale whose class this one extends, None for the canonical class
        direction: Text direction of the locale
        functions: Overrides declared by this class (empty for the default locale)
    """

    locale: LocaleCode
    base: LocaleCode | None
    direction: TextDirection
    functions: tuple[FunctionDescriptor, ...] = ()


class CodeRenderer:
    """Fill the output templates.

    Example:
        >>> renderer = CodeRenderer()
        >>> text = renderer.render(canonical, locale_classes)
    """

    __slots__ = ("_metadata", "_templates")

    def __init__(
        self,
        templates: RenderTemplates = DEFAULT_TEMPLATES,
        metadata: LocaleMetadata | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            templates: Template set to fill
            metadata: Locale metadata used for registry entries and cases
        """
        self._templates = templates
        self._metadata: LocaleMetadata = metadata or BabelLocaleMetadata()

    @staticmethod
    def render_functions(functions: Iterable[FunctionDescriptor]) -> str:
        """Render descriptors as ``signature => body;`` members."""
        return FUNCTION_SEPARATOR.join(FUNCTION_INDENT + d.render() for d in functions)

    def render_canonical(self, functions: Iterable[FunctionDescriptor]) -> str:
        """Render the canonical class."""
        return fill(self._templates.canonical, {"functions": self.render_functions(functions)})

    def render_locale(self, locale_class: LocaleClass) -> str:
        """Render one locale's class."""
        return fill(
            self._templates.locale,
            {
                "functions": self.render_functions(locale_class.functions),
                "locale": normalize_locale(locale_class.locale),
                "derived": class_name(locale_class.base),
                "textDirection": str(locale_class.direction),
            },
        )

    def render_locale_entries(self, locales: Sequence[LocaleCode]) -> str:
        """Render one ``Locale(...)`` construction per configured locale."""
        return "\n".join(
            fill(
                self._templates.locale_entry,
                {
                    "indent": LOCALE_INDENT,
                    "language": self._metadata.language_code(locale),
                    "country": self._metadata.country_code(locale),
                },
            )
            for locale in locales
        )

    def render_cases(self, locales: Sequence[LocaleCode]) -> str:
        """Render the load() switch branches.

        The first pass matches each locale as getLang() spells it at runtime:
        language and region joined by an underscore, without any script.
        The second pass matches bare language codes, selecting the first
        configured locale of each language; language codes already matched
        by the first pass are skipped.
        """
        matches: dict[str, LocaleCode] = {}
        for locale in locales:
            matches.setdefault(self._dispatch_key(locale), locale)
        for locale in locales:
            matches.setdefault(self._metadata.language_code(locale), locale)

        return "\n".join(
            fill(
                self._templates.case,
                {"indent": CASE_INDENT, "match": match, "locale": normalize_locale(locale)},
            )
            for match, locale in matches.items()
        )

    def _dispatch_key(self, locale: LocaleCode) -> str:
        language = self._metadata.language_code(locale)
        country = self._metadata.country_code(locale)
        return f"{language}_{country}" if country else language

    def render_registry(self, locales: Sequence[LocaleCode]) -> str:
        """Render the locale registry / dispatch class."""
        return fill(
            self._templates.registry,
            {
                "locales": self.render_locale_entries(locales),
                "cases": self.render_cases(locales),
            },
        )

    def render(
        self,
        canonical: Iterable[FunctionDescriptor],
        locale_classes: Sequence[LocaleClass],
    ) -> str:
        """Render the complete output text.

        Args:
            canonical: Canonical table
            locale_classes: One entry per configured locale, in configured order

        Returns:
            Canonical class, locale classes and registry class concatenated
        """
        parts = [self.render_canonical(canonical)]
        parts.extend(self.render_locale(locale_class) for locale_class in locale_classes)
        parts.append(self.render_registry([c.locale for c in locale_classes]))
        return "".join(parts)
