"""Rendering of generation results into Dart source text.

Python 3.13+.
"""

from .renderer import CodeRenderer, LocaleClass, class_name, fill
from .templates import DEFAULT_TEMPLATES, RenderTemplates

__all__ = [
    "DEFAULT_TEMPLATES",
    "CodeRenderer",
    "LocaleClass",
    "RenderTemplates",
    "class_name",
    "fill",
]
