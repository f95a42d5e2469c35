"""Error types for i18ngen.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    ConfigurationError,
    I18nError,
    KeyCollisionError,
    LocaleProcessingError,
    TranslationServiceError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "I18nError",
    "KeyCollisionError",
    "LocaleProcessingError",
    "TranslationServiceError",
    "ValidationError",
]
