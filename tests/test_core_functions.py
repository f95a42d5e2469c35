"""Tests for function table construction and literal escaping."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from i18ngen.core.functions import (
    FunctionDescriptor,
    build_function,
    build_function_table,
    escape,
    render_value,
)
from i18ngen.enums import FunctionKind


class TestEscape:
    """Test escape."""

    @pytest.mark.parametrize(
        ("raw", "escaped"),
        [
            ("\t", "\\t"),
            ("\r", "\\r"),
            ("\n", "\\n"),
            ('"', '\\"'),
            ("\\", "\\\\"),
            ("$", "\\$"),
        ],
    )
    def test_special_characters(self, raw: str, escaped: str) -> None:
        """Each special character is escaped."""
        assert escape(raw) == escaped

    def test_backslash_escaped_before_others(self) -> None:
        """An escaped newline is not double-escaped."""
        assert escape("a\\\nb") == "a\\\\\\nb"

    def test_plain_text_unchanged(self) -> None:
        """Ordinary text passes through."""
        assert escape("Hello, world") == "Hello, world"

    @given(st.text())
    def test_no_raw_control_characters(self, text: str) -> None:
        """Property: escaped text contains no raw tab, CR or LF."""
        escaped = escape(text)
        event(f"grew={len(escaped) > len(text)}")
        assert "\n" not in escaped
        assert "\r" not in escaped
        assert "\t" not in escaped


class TestBuildFunction:
    """Test build_function."""

    def test_getter(self) -> None:
        """Text without placeholders becomes a zero-argument getter."""
        descriptor = build_function("title", "Hello")
        assert descriptor == FunctionDescriptor(
            name="title",
            signature="String get title",
            body='"Hello"',
            variables=None,
            kind=FunctionKind.GETTER,
        )

    def test_parameterized(self) -> None:
        """Placeholders become parameters in first-occurrence order."""
        descriptor = build_function("title", "Hello {name}")
        assert descriptor.kind is FunctionKind.METHOD
        assert descriptor.variables == ("name",)
        assert descriptor.signature == "String title(String name)"
        assert descriptor.body == '"Hello ${name}"'

    def test_multiple_parameters(self) -> None:
        """Several placeholders produce several parameters."""
        descriptor = build_function("summary", "{count} items for {user}, {count}!")
        assert descriptor.signature == "String summary(String count, String user)"
        assert descriptor.body == '"${count} items for ${user}, ${count}!"'

    def test_list(self) -> None:
        """Lists become list getters with a list literal body."""
        descriptor = build_function("days", ["Mon", 'Say "hi"'])
        assert descriptor.kind is FunctionKind.LIST
        assert descriptor.signature == "List<String> get days"
        assert descriptor.body == '["Mon", "Say \\"hi\\""]'

    def test_empty_list(self) -> None:
        """An empty list renders as an empty list literal."""
        assert build_function("none", []).body == "[]"

    def test_number(self) -> None:
        """Numbers keep their JSON spelling inside a string literal."""
        assert build_function("max", 10).body == '"10"'

    def test_boolean(self) -> None:
        """Booleans use JSON spelling, not Python's."""
        assert build_function("flag", True).body == '"true"'

    def test_literal_escaped(self) -> None:
        """Getter bodies are escaped."""
        assert build_function("quote", 'a "b"\nc').body == '"a \\"b\\"\\nc"'

    def test_parameterized_body_escaped(self) -> None:
        """Method bodies are escaped as well."""
        assert build_function("q", '"{name}"').body == '"\\"${name}\\""'

    def test_dollar_is_literal(self) -> None:
        """A literal dollar sign never starts an interpolation."""
        assert build_function("price", "Costs $5").body == '"Costs \\$5"'
        assert build_function("total", "{amount} $").body == '"${amount} \\$"'
        assert build_function("raw", "$name").body == '"\\$name"'

    def test_render(self) -> None:
        """render() produces a single Dart member."""
        assert build_function("greet", "Hi {name}").render() == (
            'String greet(String name) => "Hi ${name}";'
        )

    def test_with_body_keeps_shape(self) -> None:
        """with_body() only swaps the body."""
        descriptor = build_function("greet", "Hi {name}")
        other = descriptor.with_body('"Salut ${name}"')
        assert other.signature == descriptor.signature
        assert other.variables == descriptor.variables
        assert other.body == '"Salut ${name}"'


class TestRenderValue:
    """Test render_value."""

    def test_variables_interpolated(self) -> None:
        """Given variables are rewritten."""
        assert render_value("Bonjour {name}", ("name",)) == '"Bonjour ${name}"'

    def test_list_items_not_interpolated(self) -> None:
        """List items are plain literals."""
        assert render_value(["{x}"], ("x",)) == '["{x}"]'


class TestBuildFunctionTable:
    """Test build_function_table."""

    def test_scenario_single_parameterized(self) -> None:
        """{"title": "Hello {name}"} yields one method named title taking name."""
        table = build_function_table({"title": "Hello {name}"})
        assert len(table) == 1
        assert table[0].name == "title"
        assert table[0].variables == ("name",)
        assert table[0].kind is FunctionKind.METHOD

    def test_order_follows_resource(self) -> None:
        """Table order matches resource iteration order."""
        table = build_function_table({"b": "1", "a": "2", "c": ["x"]})
        assert [d.name for d in table] == ["b", "a", "c"]

    @given(
        st.dictionaries(
            st.from_regex(r"[a-z][A-Za-z0-9]{0,6}", fullmatch=True),
            st.one_of(st.text(max_size=12), st.lists(st.text(max_size=4), max_size=3)),
            max_size=8,
        )
    )
    def test_one_descriptor_per_key(self, resource: dict[str, str | list[str]]) -> None:
        """Property: every key produces exactly one descriptor, in order."""
        table = build_function_table(resource)
        event(f"size={len(table)}")
        assert [d.name for d in table] == list(resource)
