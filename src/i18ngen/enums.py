"""Enumerations for i18ngen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TextDirection(StrEnum):
    """Writing direction of a locale.

    StrEnum provides automatic string conversion: str(TextDirection.RTL) == "rtl".
    The value is emitted verbatim into the generated ``TextDirection.<value>``.
    """

    RTL = "rtl"
    """Right-to-left scripts (Arabic, Hebrew, Persian, ...)."""

    LTR = "ltr"
    """Left-to-right scripts."""


class FunctionKind(StrEnum):
    """Shape of a generated accessor.

    StrEnum provides automatic string conversion: str(FunctionKind.GETTER) == "getter"
    """

    GETTER = "getter"
    """Zero-argument accessor: String get title => "Hello";"""

    METHOD = "method"
    """Parameterized accessor: String greet(String name) => "Hi ${name}";"""

    LIST = "list"
    """List accessor: List<String> get days => ["Mon", "Tue"];"""


class LoadStatus(StrEnum):
    """Outcome of processing one locale during a generation pass.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Locale resource loaded and diffed."""

    NOT_FOUND = "not_found"
    """Locale resource file does not exist."""

    ERROR = "error"
    """Locale resource exists but could not be read or flattened."""


__all__ = [
    "FunctionKind",
    "LoadStatus",
    "TextDirection",
]
