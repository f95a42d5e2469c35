"""Per-locale override computation.

A locale class only declares the accessors whose text differs from what it
inherits. diff_function_table() selects the canonical accessors a locale
translates and rebuilds their bodies from the locale's own text;
prune_inherited() then drops the ones identical to the inheritance base.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from i18ngen.core.functions import render_value
from i18ngen.enums import FunctionKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from i18ngen.core.functions import FunctionDescriptor
    from i18ngen.core.types import LeafValue, ResourceKey

__all__ = ["diff_function_table", "effective_bodies", "prune_inherited"]

logger = logging.getLogger(__name__)


def diff_function_table(
    canonical: Iterable[FunctionDescriptor],
    target: Mapping[ResourceKey, LeafValue],
    *,
    locale: str | None = None,
) -> tuple[FunctionDescriptor, ...]:
    """Compute the overrides a target locale declares.

    For each canonical descriptor whose name is a key of ``target``, emits a
    descriptor with the same name, signature and variables and a body built
    from the target text, with the canonical variable names rewritten into
    interpolations. The target text is expected to use the same placeholder
    names as the default locale.

    Keys only present in ``target`` are ignored. Keys only present in the
    canonical table are omitted and fall back to the inherited accessor.

    Args:
        canonical: Canonical table built from the default locale
        target: Flattened resource of the target locale
        locale: Locale code used for log context only

    Returns:
        Overrides in canonical table order
    """
    overrides: list[FunctionDescriptor] = []
    for descriptor in canonical:
        if descriptor.name not in target:
            continue
        value = target[descriptor.name]
        if (descriptor.kind is FunctionKind.LIST) != isinstance(value, list):
            logger.warning(
                "Skipping '%s' for locale %s: value shape differs from default locale",
                descriptor.name,
                locale,
            )
            continue
        overrides.append(descriptor.with_body(render_value(value, descriptor.variables)))
    return tuple(overrides)


def effective_bodies(
    canonical: Iterable[FunctionDescriptor],
    *override_chain: Iterable[FunctionDescriptor],
) -> dict[ResourceKey, str]:
    """Resolve the body each accessor ends up with after a chain of overrides.

    Args:
        canonical: Canonical table
        override_chain: Override tables from the most generic class to the
            most specific one

    Returns:
        Mapping from accessor name to its effective body
    """
    bodies = {descriptor.name: descriptor.body for descriptor in canonical}
    for overrides in override_chain:
        bodies.update((descriptor.name, descriptor.body) for descriptor in overrides)
    return bodies


def prune_inherited(
    overrides: Iterable[FunctionDescriptor],
    inherited: Mapping[ResourceKey, str],
) -> tuple[FunctionDescriptor, ...]:
    """Drop overrides whose body equals the one already inherited."""
    return tuple(d for d in overrides if inherited.get(d.name) != d.body)
