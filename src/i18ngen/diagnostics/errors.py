"""i18ngen exception hierarchy.

Every exception carries optional locale and path context so that callers
(the command layer, the CLI) can surface a precise message without
re-deriving where the failure happened.

Hierarchy:
    I18nError (base)
    ├─ ConfigurationError (config or default resource unusable, pass aborted)
    │  └─ KeyCollisionError (two nested paths flatten to the same key)
    ├─ LocaleProcessingError (one non-default locale skipped)
    ├─ TranslationServiceError (remote translation failed)
    └─ ValidationError (user input rejected)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "I18nError",
    "KeyCollisionError",
    "LocaleProcessingError",
    "TranslationServiceError",
    "ValidationError",
]


class I18nError(Exception):
    """Base exception for all i18ngen errors.

    Attributes:
        locale: Locale code the error relates to (optional)
        path: File path the error relates to (optional)
    """

    def __init__(
        self,
        message: str,
        *,
        locale: str | None = None,
        path: str | None = None,
    ) -> None:
        """Initialize I18nError.

        Args:
            message: Human-readable error description
            locale: Locale code the error relates to
            path: File path the error relates to
        """
        super().__init__(message)
        self.locale = locale
        self.path = path


class ConfigurationError(I18nError):
    """Configuration or default-locale resource is missing, unreadable or invalid.

    Fatal for a generation pass: the canonical table cannot be built, so the
    pass is aborted before anything is written.
    """


class KeyCollisionError(ConfigurationError):
    """Two different nested paths flatten to the same key.

    Example:
        {"userName": "a", "user": {"name": "b"}} both produce "userName".

    Attributes:
        key: The colliding flattened key
    """

    def __init__(
        self,
        key: str,
        *,
        locale: str | None = None,
        path: str | None = None,
    ) -> None:
        """Initialize KeyCollisionError.

        Args:
            key: The colliding flattened key
            locale: Locale code of the resource being flattened
            path: Resource file path
        """
        super().__init__(
            f"Flattened key '{key}' is produced by more than one entry",
            locale=locale,
            path=path,
        )
        self.key = key


class LocaleProcessingError(I18nError):
    """A single non-default locale could not be processed.

    Recovered locally: the locale is logged and skipped while generation
    continues for the remaining locales.
    """


class TranslationServiceError(I18nError):
    """The remote translation service failed or returned an unusable payload.

    Aborts the remaining auto-translation loop. Locale resources written
    before the failure are kept.
    """


class ValidationError(I18nError):
    """User-supplied locale code or key failed format checks.

    Raised at input time; never reaches the generation pipeline.
    """
