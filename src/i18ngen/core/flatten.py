"""Nested resource flattening.

Collapses nested JSON objects into a single-level mapping whose keys are
valid accessor names: ``{"parent": {"childValue": "x"}}`` becomes
``{"parentChildValue": "x"}``. Lists are leaves and are never descended into.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from i18ngen.diagnostics import KeyCollisionError

if TYPE_CHECKING:
    from i18ngen.core.types import Resource

__all__ = ["flatten", "join_key", "upper_first"]


def upper_first(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched.

    Example:
        >>> upper_first("childValue")
        'ChildValue'
    """
    return text[:1].upper() + text[1:]


def join_key(parent: str, child: str) -> str:
    """Join a parent key and a child key into one accessor name."""
    return parent + upper_first(child)


def flatten(tree: Mapping[str, object], *, locale: str | None = None) -> Resource:
    """Flatten a nested resource into a single-level mapping.

    Entries are visited in source declaration order, which keeps generated
    output reproducible across runs.

    Args:
        tree: Resource as read from JSON
        locale: Locale code used for error context only

    Returns:
        Mapping whose values are all leaves (strings, numbers, booleans, lists)

    Raises:
        KeyCollisionError: If two entries produce the same flattened key

    Example:
        >>> flatten({"parent": {"childValue": "x"}, "title": "T"})
        {'parentChildValue': 'x', 'title': 'T'}
    """
    result: Resource = {}
    for key, value in tree.items():
        if isinstance(value, Mapping):
            nested = flatten(value, locale=locale)
            for child_key, child_value in nested.items():
                _put(result, join_key(key, child_key), child_value, locale)
        else:
            _put(result, key, value, locale)  # type: ignore[arg-type]
    return result


def _put(result: Resource, key: str, value: object, locale: str | None) -> None:
    if key in result:
        raise KeyCollisionError(key, locale=locale)
    result[key] = value  # type: ignore[assignment]
