"""Workspace persistence: configuration, locale resources and generated output.

ResourceStore maps the logical objects of a workspace onto files:

    <workspace>/i18nconfig.json                  configuration
    <workspace>/<localePath>/<locale>.json       one resource per locale
    <workspace>/<generatedPath>/i18n.dart        generated output

and translates I/O and decoding failures into the package's error taxonomy.
Failures on the configuration or the default locale raise ConfigurationError;
failures on any other locale raise LocaleProcessingError.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from i18ngen.constants import CONFIG_FILE_NAME, GENERATED_FILE_NAME, RESOURCE_EXTENSION
from i18ngen.core.flatten import flatten
from i18ngen.diagnostics import ConfigurationError, LocaleProcessingError
from i18ngen.storage.config import I18nConfig
from i18ngen.storage.filesystem import LocalFileSystem

if TYPE_CHECKING:
    from i18ngen.core.types import LocaleCode, Resource, ResourceTree
    from i18ngen.storage.filesystem import Storage

__all__ = ["ResourceStore"]

logger = logging.getLogger(__name__)


class ResourceStore:
    """File-backed store for one workspace.

    Example:
        >>> store = ResourceStore("/path/to/flutter/app")
        >>> config = store.read_config()
        >>> resource = store.read_resource(config.default_locale, config)
    """

    __slots__ = ("_storage", "_workspace")

    def __init__(self, workspace: str | Path, storage: Storage | None = None) -> None:
        """Initialize the store.

        Args:
            workspace: Workspace root directory
            storage: File access implementation (defaults to LocalFileSystem)
        """
        self._workspace = Path(workspace)
        self._storage: Storage = storage or LocalFileSystem()

    @property
    def workspace(self) -> Path:
        """Workspace root directory."""
        return self._workspace

    @property
    def storage(self) -> Storage:
        """Underlying file access implementation."""
        return self._storage

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def config_path(self) -> Path:
        """Path of the configuration document."""
        return self._workspace / CONFIG_FILE_NAME

    def locale_dir(self, config: I18nConfig) -> Path:
        """Folder holding the locale resources."""
        return self._workspace / config.locale_path

    def resource_path(self, locale: LocaleCode, config: I18nConfig) -> Path:
        """Path of one locale's resource file."""
        return self.locale_dir(config) / f"{locale}{RESOURCE_EXTENSION}"

    def generated_dir(self, config: I18nConfig) -> Path:
        """Folder receiving the generated output."""
        return self._workspace / config.generated_path

    def output_path(self, config: I18nConfig) -> Path:
        """Path of the generated output file."""
        return self.generated_dir(config) / GENERATED_FILE_NAME

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def has_config(self) -> bool:
        """Check whether the workspace has a configuration document."""
        return self._storage.exists(self.config_path)

    def read_config(self) -> I18nConfig:
        """Load the configuration document.

        Raises:
            ConfigurationError: If the document is missing, unreadable or invalid
        """
        path = str(self.config_path)
        try:
            data = self._storage.read_json(self.config_path)
        except FileNotFoundError as e:
            msg = f"Configuration file not found: {path}"
            raise ConfigurationError(msg, path=path) from e
        except (OSError, ValueError) as e:
            msg = f"Cannot read configuration file {path}: {e}"
            raise ConfigurationError(msg, path=path) from e
        try:
            return I18nConfig.from_dict(data)
        except ConfigurationError as e:
            e.path = path
            raise

    def write_config(self, config: I18nConfig) -> None:
        """Persist the configuration document."""
        self._storage.write_json(self.config_path, config.to_dict())
        logger.info("Configuration written to %s", self.config_path)

    # ------------------------------------------------------------------
    # Locale resources
    # ------------------------------------------------------------------

    def has_resource(self, locale: LocaleCode, config: I18nConfig) -> bool:
        """Check whether a locale's resource file exists."""
        return self._storage.exists(self.resource_path(locale, config))

    def read_raw_resource(self, locale: LocaleCode, config: I18nConfig) -> ResourceTree:
        """Load a locale resource as written on disk (possibly nested).

        Raises:
            ConfigurationError: If the default locale's resource is unusable
            LocaleProcessingError: If another locale's resource is unusable
        """
        path = self.resource_path(locale, config)
        error_type = (
            ConfigurationError if locale == config.default_locale else LocaleProcessingError
        )
        try:
            data = self._storage.read_json(path)
        except FileNotFoundError as e:
            msg = f"Resource file for locale {locale} not found: {path}"
            raise error_type(msg, locale=locale, path=str(path)) from e
        except (OSError, ValueError) as e:
            msg = f"Cannot read resource file for locale {locale}: {e}"
            raise error_type(msg, locale=locale, path=str(path)) from e
        if not isinstance(data, Mapping):
            msg = f"Resource file for locale {locale} must contain a JSON object"
            raise error_type(msg, locale=locale, path=str(path))
        return dict(data)

    def read_resource(self, locale: LocaleCode, config: I18nConfig) -> Resource:
        """Load and flatten a locale resource.

        Raises:
            ConfigurationError: If the default locale's resource is unusable,
                including flattening collisions
            LocaleProcessingError: If another locale's resource is unusable,
                including flattening collisions
        """
        tree = self.read_raw_resource(locale, config)
        try:
            return flatten(tree, locale=locale)
        except ConfigurationError as e:
            path = str(self.resource_path(locale, config))
            if locale == config.default_locale:
                e.path = path
                raise
            raise LocaleProcessingError(str(e), locale=locale, path=path) from e

    def write_resource(
        self,
        locale: LocaleCode,
        resource: Mapping[str, Any],
        config: I18nConfig,
    ) -> None:
        """Persist a locale resource, creating the locale folder if needed."""
        self._storage.create_dir(self.locale_dir(config))
        path = self.resource_path(locale, config)
        self._storage.write_json(path, dict(resource))
        logger.info("Resource for locale %s written to %s", locale, path)

    def delete_resource(self, locale: LocaleCode, config: I18nConfig) -> None:
        """Delete a locale resource if it exists."""
        path = self.resource_path(locale, config)
        if self._storage.exists(path):
            self._storage.delete_file(path)
            logger.info("Resource for locale %s deleted", locale)
        else:
            logger.debug("No resource to delete for locale %s", locale)

    # ------------------------------------------------------------------
    # Generated output
    # ------------------------------------------------------------------

    def write_output(self, text: str, config: I18nConfig) -> Path:
        """Persist generated output, creating the generated folder if needed.

        Returns:
            Path of the written file
        """
        self._storage.create_dir(self.generated_dir(config))
        path = self.output_path(config)
        self._storage.write_text(path, text)
        logger.info("Generated output written to %s", path)
        return path
