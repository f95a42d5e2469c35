"""Persistence layer: file access, configuration model and workspace store.

Python 3.13+. Zero external dependencies.
"""

from .config import I18nConfig
from .filesystem import LocalFileSystem, Storage
from .store import ResourceStore

__all__ = [
    "I18nConfig",
    "LocalFileSystem",
    "ResourceStore",
    "Storage",
]
