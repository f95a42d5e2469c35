"""Placeholder discovery and interpolation rewriting.

Translation values mark interpolation points with ``{name}`` placeholders.
Generated Dart code interpolates with ``${name}``. This module finds the
placeholders and performs the rewrite.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from i18ngen.core.types import VariableSet

__all__ = [
    "PLACEHOLDER_PATTERN",
    "interpolation",
    "parse_variables",
    "placeholder",
    "replace_variables",
]

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{(\w+)\}")


def placeholder(name: str) -> str:
    """Return the raw placeholder form of a variable: ``{name}``."""
    return "{" + name + "}"


def interpolation(name: str) -> str:
    """Return the interpolation form of a variable: ``${name}``."""
    return "${" + name + "}"


def parse_variables(text: str | None) -> VariableSet | None:
    """Extract placeholder names from text.

    Args:
        text: Translation value, possibly empty or None

    Returns:
        Distinct names in order of first appearance, or None when the text
        is empty or contains no placeholders.

    Example:
        >>> parse_variables("Hello {name}, you have {count} new {count}")
        ('name', 'count')
        >>> parse_variables("Hello") is None
        True
    """
    if not text:
        return None
    names = dict.fromkeys(match.group(1) for match in PLACEHOLDER_PATTERN.finditer(text))
    return tuple(names) or None


def replace_variables(text: str, variables: Iterable[str] | None) -> str:
    """Rewrite ``{name}`` placeholders into ``${name}`` interpolations.

    Occurrences already preceded by ``$`` are left alone, so applying the
    rewrite twice with the same variables yields the same text. Names that
    do not occur in the text are ignored.

    Args:
        text: Text containing placeholders
        variables: Names to rewrite

    Returns:
        Text with the named placeholders rewritten

    Example:
        >>> replace_variables("Hi {name}", ("name",))
        'Hi ${name}'
        >>> replace_variables("Hi ${name}", ("name",))
        'Hi ${name}'
    """
    if not variables:
        return text
    for name in variables:
        pattern = re.compile(r"(?<!\$)" + re.escape(placeholder(name)))
        text = pattern.sub(lambda _m, n=name: interpolation(n), text)
    return text
