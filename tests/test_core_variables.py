"""Tests for placeholder parsing and interpolation rewriting.

Includes property-based tests with Hypothesis for the rewrite invariants.
"""

from __future__ import annotations

import re

from hypothesis import event, given
from hypothesis import strategies as st

from i18ngen.core.variables import (
    interpolation,
    parse_variables,
    placeholder,
    replace_variables,
)

# Placeholder names and the literal text around them. Literal text never
# contains braces so that every brace in a generated string is a placeholder.
names = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,8}", fullmatch=True)
literals = st.text(alphabet=st.characters(exclude_characters="{}$"), max_size=10)


@st.composite
def templated_text(draw: st.DrawFn) -> str:
    """Text with zero or more placeholders interleaved with literal text."""
    parts = [draw(literals)]
    for name in draw(st.lists(names, max_size=5)):
        parts.extend((placeholder(name), draw(literals)))
    return "".join(parts)


class TestParseVariables:
    """Test parse_variables."""

    def test_single_variable(self) -> None:
        """A single placeholder is returned."""
        assert parse_variables("Hello {name}") == ("name",)

    def test_first_occurrence_order(self) -> None:
        """Names are returned in order of first appearance."""
        assert parse_variables("{b} then {a} then {b}") == ("b", "a")

    def test_no_placeholders_is_absent(self) -> None:
        """Text without placeholders yields None."""
        assert parse_variables("Hello") is None

    def test_empty_and_none_are_absent(self) -> None:
        """Empty or missing text yields None."""
        assert parse_variables("") is None
        assert parse_variables(None) is None

    def test_non_word_content_ignored(self) -> None:
        """Braces around non-word characters are not placeholders."""
        assert parse_variables("{ name } {} {a-b}") is None

    def test_nested_braces(self) -> None:
        """Only the innermost word-braced token matches."""
        assert parse_variables("{{count}}") == ("count",)

    def test_digits_and_underscores(self) -> None:
        """Word characters include digits and underscores."""
        assert parse_variables("{item_1} {2nd}") == ("item_1", "2nd")

    @given(templated_text())
    def test_names_are_distinct(self, text: str) -> None:
        """Property: parsed names never repeat."""
        variables = parse_variables(text) or ()
        event(f"variables={len(variables)}")
        assert len(variables) == len(set(variables))


class TestReplaceVariables:
    """Test replace_variables."""

    def test_rewrites_to_interpolation(self) -> None:
        """Placeholders become Dart interpolations."""
        assert replace_variables("Hello {name}!", ("name",)) == "Hello ${name}!"

    def test_every_occurrence_rewritten(self) -> None:
        """Repeated placeholders are all rewritten."""
        assert replace_variables("{a}{a}", ("a",)) == "${a}${a}"

    def test_absent_variable_is_noop(self) -> None:
        """A listed name missing from the text changes nothing."""
        assert replace_variables("Hello", ("name",)) == "Hello"

    def test_unlisted_placeholder_untouched(self) -> None:
        """Placeholders not in the list stay raw."""
        assert replace_variables("{a} {b}", ("a",)) == "${a} {b}"

    def test_none_variables(self) -> None:
        """No variables means no rewrite."""
        assert replace_variables("{a}", None) == "{a}"

    def test_idempotent(self) -> None:
        """Applying twice does not double-wrap."""
        once = replace_variables("Hi {name}", ("name",))
        assert replace_variables(once, ("name",)) == once

    @given(templated_text())
    def test_no_raw_placeholders_remain(self, text: str) -> None:
        """Property: after rewriting with the parsed set, no raw placeholder remains."""
        variables = parse_variables(text)
        rewritten = replace_variables(text, variables)
        event(f"has_variables={variables is not None}")
        assert re.search(r"(?<!\$)\{\w+\}", rewritten) is None

    @given(templated_text())
    def test_one_interpolation_per_occurrence(self, text: str) -> None:
        """Property: each parsed name is referenced as an interpolation, once per occurrence."""
        variables = parse_variables(text) or ()
        rewritten = replace_variables(text, variables)
        for name in variables:
            assert rewritten.count(interpolation(name)) == text.count(placeholder(name))
        referenced = set(re.findall(r"\$\{(\w+)\}", rewritten))
        assert referenced == set(variables)

    @given(templated_text())
    def test_idempotent_property(self, text: str) -> None:
        """Property: rewriting is idempotent for a fixed variable list."""
        variables = parse_variables(text)
        once = replace_variables(text, variables)
        assert replace_variables(once, variables) == once
