"""File access for the generator.

The Storage protocol is the only way the rest of the package touches the
disk, which keeps the generation pipeline testable with in-memory fakes.
LocalFileSystem implements it over pathlib.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from i18ngen.constants import JSON_INDENT

__all__ = ["LocalFileSystem", "Storage"]

logger = logging.getLogger(__name__)

type PathLike = str | Path


class Storage(Protocol):
    """Protocol for file access used by ResourceStore.

    This is a Protocol (structural typing) rather than ABC so that tests and
    editor integrations can supply their own implementation.

    Implementations raise FileNotFoundError for missing files and OSError
    for other I/O failures. read_json additionally raises ValueError
    (json.JSONDecodeError) for malformed documents.
    """

    def exists(self, path: PathLike) -> bool:
        """Check whether a file or directory exists."""

    def create_dir(self, path: PathLike) -> None:
        """Create a directory and its missing ancestors; no-op if present."""

    def read_text(self, path: PathLike) -> str:
        """Read a UTF-8 text file."""

    def write_text(self, path: PathLike, text: str) -> None:
        """Write a UTF-8 text file, replacing existing content."""

    def read_json(self, path: PathLike) -> Any:
        """Read and decode a JSON document."""

    def write_json(self, path: PathLike, value: Any) -> None:
        """Encode a JSON document with 4-space indentation and write it."""

    def delete_file(self, path: PathLike) -> None:
        """Delete a file."""


@dataclass(frozen=True, slots=True)
class LocalFileSystem:
    """Storage implementation over the local file system."""

    encoding: str = "utf-8"

    def exists(self, path: PathLike) -> bool:
        """Check whether a file or directory exists."""
        return Path(path).exists()

    def create_dir(self, path: PathLike) -> None:
        """Create a directory and its missing ancestors; no-op if present."""
        Path(path).mkdir(parents=True, exist_ok=True)

    def read_text(self, path: PathLike) -> str:
        """Read a text file."""
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: PathLike, text: str) -> None:
        """Write a text file, replacing existing content."""
        Path(path).write_text(text, encoding=self.encoding)
        logger.debug("Wrote %s", path)

    def read_json(self, path: PathLike) -> Any:
        """Read and decode a JSON document, preserving key order."""
        return json.loads(self.read_text(path))

    def write_json(self, path: PathLike, value: Any) -> None:
        """Encode a JSON document with stable indentation and write it."""
        self.write_text(path, json.dumps(value, indent=JSON_INDENT, ensure_ascii=False))

    def delete_file(self, path: PathLike) -> None:
        """Delete a file."""
        Path(path).unlink()
        logger.debug("Deleted %s", path)
