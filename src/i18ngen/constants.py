"""Shared constants for i18ngen.

This module provides centralized configuration constants used across
the core, storage, rendering and translation packages. Placing constants
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Workspace layout: File names and default folders
- Serialization: JSON formatting of persisted documents
- Rendering: Separators used when assembling generated source
- Translation: Remote translation endpoint settings

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Workspace layout
    "CONFIG_FILE_NAME",
    "DEFAULT_LOCALE",
    "DEFAULT_LOCALE_PATH",
    "DEFAULT_GENERATED_PATH",
    "GENERATED_FILE_NAME",
    "RESOURCE_EXTENSION",
    # Serialization
    "JSON_INDENT",
    # Rendering
    "CANONICAL_CLASS_NAME",
    "LOCALE_CLASS_PREFIX",
    "FUNCTION_SEPARATOR",
    "FUNCTION_INDENT",
    "CASE_INDENT",
    "LOCALE_INDENT",
    # Translation
    "GOOGLE_TRANSLATE_URL",
    "TRANSLATE_TIMEOUT",
]

# ============================================================================
# WORKSPACE LAYOUT
# ============================================================================

# Configuration document, relative to the workspace root.
CONFIG_FILE_NAME: str = "i18nconfig.json"

DEFAULT_LOCALE: str = "en-US"

# Folder holding one <locale>.json resource per configured locale.
DEFAULT_LOCALE_PATH: str = "i18n"

# Folder receiving the generated Dart file.
DEFAULT_GENERATED_PATH: str = "lib/generated"

GENERATED_FILE_NAME: str = "i18n.dart"

RESOURCE_EXTENSION: str = ".json"

# ============================================================================
# SERIALIZATION
# ============================================================================

# Stable indentation keeps config and resource diffs reviewable.
JSON_INDENT: int = 4

# ============================================================================
# RENDERING
# ============================================================================

# Generated class holding the canonical (default locale) accessors.
CANONICAL_CLASS_NAME: str = "S"

# Locale classes are named "$<normalized locale>", e.g. "$en_US".
LOCALE_CLASS_PREFIX: str = "$"

FUNCTION_SEPARATOR: str = "\n"

FUNCTION_INDENT: str = "  "

CASE_INDENT: str = "        "

LOCALE_INDENT: str = "      "

# ============================================================================
# TRANSLATION
# ============================================================================

GOOGLE_TRANSLATE_URL: str = "https://www.googleapis.com/language/translate/v2"

# Seconds before a translation request is abandoned.
TRANSLATE_TIMEOUT: float = 30.0
