"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from i18ngen.diagnostics import (
    ConfigurationError,
    I18nError,
    KeyCollisionError,
    LocaleProcessingError,
    TranslationServiceError,
    ValidationError,
)


class TestHierarchy:
    """Exception classes and their context attributes."""

    @pytest.mark.parametrize(
        "error_type",
        [
            ConfigurationError,
            LocaleProcessingError,
            TranslationServiceError,
            ValidationError,
        ],
    )
    def test_subclasses_share_base(self, error_type: type[I18nError]) -> None:
        """Every error is catchable as I18nError and carries context."""
        error = error_type("boom", locale="fr", path="i18n/fr.json")
        assert isinstance(error, I18nError)
        assert str(error) == "boom"
        assert error.locale == "fr"
        assert error.path == "i18n/fr.json"

    def test_context_optional(self) -> None:
        """Locale and path default to None."""
        error = I18nError("boom")
        assert error.locale is None
        assert error.path is None

    def test_key_collision(self) -> None:
        """KeyCollisionError names the key and is a configuration error."""
        error = KeyCollisionError("userName", locale="en-US")
        assert isinstance(error, ConfigurationError)
        assert error.key == "userName"
        assert "userName" in str(error)
        assert error.locale == "en-US"
