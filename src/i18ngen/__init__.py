"""i18ngen - Dart localization code generation from JSON translation resources.

Turns per-locale key/value resources into one generated Dart file exposing
one accessor per translation key, with parameters derived from ``{name}``
placeholders, per-locale overrides inheriting along region variants, and
right-to-left/left-to-right metadata.

Public API:
    I18nGenerator - Generation passes for one workspace
    I18nCommands - Workspace operations (init, add/remove locale, translate)
    ResourceStore - Workspace persistence
    I18nConfig - Workspace configuration
    CodeRenderer - Template filling
    FunctionDescriptor - One generated accessor

Exceptions:
    I18nError - Base exception class
    ConfigurationError - Configuration or default resource unusable
    LocaleProcessingError - One locale skipped
    TranslationServiceError - Machine translation failed
    ValidationError - User input rejected

Submodules:
    i18ngen.core - Pure engine (variables, flatten, functions, diff, inheritance, direction)
    i18ngen.rendering - Templates and renderer
    i18ngen.storage - File access, configuration and store
    i18ngen.translation - Machine translation of missing keys
"""

from .commands import I18nCommands
from .core import FunctionDescriptor
from .diagnostics import (
    ConfigurationError,
    I18nError,
    KeyCollisionError,
    LocaleProcessingError,
    TranslationServiceError,
    ValidationError,
)
from .enums import TextDirection
from .generator import GenerationResult, I18nGenerator
from .rendering import CodeRenderer
from .storage import I18nConfig, ResourceStore

# Version information - Auto-populated from package metadata
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18ngen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CodeRenderer",
    "ConfigurationError",
    "FunctionDescriptor",
    "GenerationResult",
    "I18nCommands",
    "I18nConfig",
    "I18nError",
    "I18nGenerator",
    "KeyCollisionError",
    "LocaleProcessingError",
    "ResourceStore",
    "TextDirection",
    "TranslationServiceError",
    "ValidationError",
    "__version__",
]
