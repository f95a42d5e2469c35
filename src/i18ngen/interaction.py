"""User interaction boundary.

Commands never talk to a terminal or an editor directly; they go through the
UserInteraction protocol. ConsoleInteraction implements it for the CLI.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

__all__ = ["ConsoleInteraction", "UserInteraction"]

type Validator = Callable[[str], str | None]


class UserInteraction(Protocol):
    """Protocol for prompting the user and reporting outcomes."""

    def prompt(
        self,
        text: str,
        placeholder: str = "",
        validator: Validator | None = None,
    ) -> str | None:
        """Ask for a line of text.

        The validator returns an error message for rejected input, or None.

        Returns:
            The accepted text, or None if the user cancelled
        """

    def pick_one(self, items: Sequence[str], placeholder: str = "") -> str | None:
        """Let the user pick one item; None if cancelled."""

    def show_info(self, text: str) -> None:
        """Display an informational message."""

    def show_error(self, text: str) -> None:
        """Display an error message."""


class ConsoleInteraction:
    """UserInteraction over standard input and output.

    An empty answer (or end of input) cancels a prompt.
    """

    __slots__ = ("_input", "_output")

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Initialize with explicit streams (defaults to sys.stdin/sys.stdout)."""
        self._input = stdin or sys.stdin
        self._output = stdout or sys.stdout

    def _ask(self, text: str) -> str | None:
        self._output.write(text)
        self._output.flush()
        line = self._input.readline()
        if not line:
            return None
        return line.rstrip("\r\n") or None

    def prompt(
        self,
        text: str,
        placeholder: str = "",
        validator: Validator | None = None,
    ) -> str | None:
        """Ask until the validator accepts the answer or the user cancels."""
        hint = f" [{placeholder}]" if placeholder else ""
        while True:
            answer = self._ask(f"{text}{hint}: ")
            if answer is None:
                return None
            error = validator(answer) if validator else None
            if error is None:
                return answer
            self.show_error(error)

    def pick_one(self, items: Sequence[str], placeholder: str = "") -> str | None:
        """Show a numbered list and ask for a choice."""
        if not items:
            return None
        for index, item in enumerate(items, start=1):
            self._output.write(f"  {index}) {item}\n")

        def check(answer: str) -> str | None:
            if answer in items:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(items):
                return None
            return f"Choose a number between 1 and {len(items)}"

        answer = self.prompt(placeholder or "Choose", validator=check)
        if answer is None:
            return None
        return answer if answer in items else items[int(answer) - 1]

    def show_info(self, text: str) -> None:
        """Print an informational message."""
        self._output.write(f"{text}\n")

    def show_error(self, text: str) -> None:
        """Print an error message."""
        self._output.write(f"Error: {text}\n")
