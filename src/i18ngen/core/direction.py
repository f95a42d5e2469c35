"""Text-direction classification.

Explicit ``ltr``/``rtl`` entries in the configuration always win; other
locales fall back to the language-level lookup of the LocaleMetadata service.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from i18ngen.enums import TextDirection
from i18ngen.locale_utils import BabelLocaleMetadata

if TYPE_CHECKING:
    from i18ngen.core.types import LocaleCode
    from i18ngen.locale_utils import LocaleMetadata
    from i18ngen.storage.config import I18nConfig

__all__ = ["assign_directions", "classify_direction"]

logger = logging.getLogger(__name__)


def classify_direction(
    locale: LocaleCode,
    config: I18nConfig,
    metadata: LocaleMetadata | None = None,
) -> TextDirection:
    """Classify a locale as right-to-left or left-to-right.

    Args:
        locale: Locale code to classify
        config: Configuration carrying the explicit rtl/ltr overrides
        metadata: Language lookup used when no override exists

    Returns:
        TextDirection.LTR or TextDirection.RTL
    """
    if locale in config.ltr:
        return TextDirection.LTR
    if locale in config.rtl:
        return TextDirection.RTL
    metadata = metadata or BabelLocaleMetadata()
    if metadata.is_rtl_language(metadata.language_code(locale)):
        return TextDirection.RTL
    return TextDirection.LTR


def assign_directions(
    config: I18nConfig,
    metadata: LocaleMetadata | None = None,
) -> I18nConfig:
    """Record a direction for every configured locale lacking one.

    Once recorded in the configuration, a locale keeps its direction on later
    passes until an add/remove-locale mutation changes it.

    Args:
        config: Current configuration
        metadata: Language lookup for unassigned locales

    Returns:
        The same config when nothing changed, otherwise an updated copy
    """
    rtl = list(config.rtl)
    ltr = list(config.ltr)
    for locale in config.locales:
        if locale in rtl or locale in ltr:
            continue
        direction = classify_direction(locale, config, metadata)
        logger.debug("Assigned direction %s to locale %s", direction, locale)
        (rtl if direction is TextDirection.RTL else ltr).append(locale)

    if len(rtl) == len(config.rtl) and len(ltr) == len(config.ltr):
        return config
    return replace(config, rtl=tuple(rtl), ltr=tuple(ltr))
