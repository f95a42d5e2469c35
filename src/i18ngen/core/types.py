"""Type aliases for the generation domain.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LeafValue",
    "LocaleCode",
    "Resource",
    "ResourceKey",
    "ResourceTree",
    "VariableSet",
]

type LocaleCode = str
"""BCP-47 locale code as configured (e.g., 'en-US', 'fr', 'zh-Hans-CN')."""

type ResourceKey = str
"""Flattened translation key; also the name of the generated accessor."""

type LeafValue = str | int | float | bool | list[str]
"""Value stored under a flattened key."""

type ResourceTree = dict[str, LeafValue | ResourceTree]
"""Resource as read from JSON, before flattening."""

type Resource = dict[ResourceKey, LeafValue]
"""Flattened resource: every value is a leaf."""

type VariableSet = tuple[str, ...]
"""Distinct placeholder names in first-occurrence order."""
