"""Tests for the console user interaction."""

from __future__ import annotations

import io

from i18ngen.interaction import ConsoleInteraction


def console(stdin: str) -> tuple[ConsoleInteraction, io.StringIO]:
    output = io.StringIO()
    return ConsoleInteraction(stdin=io.StringIO(stdin), stdout=output), output


class TestPrompt:
    """Test ConsoleInteraction.prompt."""

    def test_answer_returned(self) -> None:
        """The entered line is returned without its newline."""
        ui, output = console("fr-CA\n")
        assert ui.prompt("Locale", placeholder="code") == "fr-CA"
        assert output.getvalue() == "Locale [code]: "

    def test_empty_line_cancels(self) -> None:
        """An empty answer cancels."""
        ui, _ = console("\n")
        assert ui.prompt("Locale") is None

    def test_end_of_input_cancels(self) -> None:
        """End of input cancels."""
        ui, _ = console("")
        assert ui.prompt("Locale") is None

    def test_validator_retries(self) -> None:
        """Rejected answers are reported and asked again."""
        ui, output = console("bad\ngood\n")
        answer = ui.prompt("Value", validator=lambda v: None if v == "good" else "nope")
        assert answer == "good"
        assert "Error: nope\n" in output.getvalue()


class TestPickOne:
    """Test ConsoleInteraction.pick_one."""

    def test_by_number(self) -> None:
        """A number selects by position."""
        ui, output = console("2\n")
        assert ui.pick_one(["fr", "de"]) == "de"
        assert "  1) fr\n  2) de\n" in output.getvalue()

    def test_by_name(self) -> None:
        """The item itself is accepted."""
        ui, _ = console("fr\n")
        assert ui.pick_one(["fr", "de"]) == "fr"

    def test_out_of_range(self) -> None:
        """Out-of-range numbers are rejected."""
        ui, output = console("3\n1\n")
        assert ui.pick_one(["fr", "de"]) == "fr"
        assert "Choose a number between 1 and 2" in output.getvalue()

    def test_empty_items(self) -> None:
        """Nothing to pick returns None."""
        ui, _ = console("1\n")
        assert ui.pick_one([]) is None


class TestMessages:
    """Test show_info and show_error."""

    def test_info_and_error(self) -> None:
        """Messages are written one per line."""
        ui, output = console("")
        ui.show_info("done")
        ui.show_error("failed")
        assert output.getvalue() == "done\nError: failed\n"
