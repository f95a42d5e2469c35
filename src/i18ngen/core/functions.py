"""Function table construction.

Each flattened resource key becomes one accessor in the generated class:

    "title": "Hello"            ->  String get title => "Hello";
    "greet": "Hi {name}"        ->  String greet(String name) => "Hi ${name}";
    "days": ["Mon", "Tue"]      ->  List<String> get days => ["Mon", "Tue"];

The canonical table is built once per generation pass from the default
locale; per-locale overrides reuse its names, signatures and variables.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

from i18ngen.core.variables import parse_variables, replace_variables
from i18ngen.enums import FunctionKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from i18ngen.core.types import LeafValue, ResourceKey, VariableSet

__all__ = [
    "FunctionDescriptor",
    "build_function",
    "build_function_table",
    "escape",
    "render_value",
]

# Order matters: backslash first so later escapes are not doubled.
_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ("$", "\\$"),
    ("\t", "\\t"),
    ("\r", "\\r"),
    ("\n", "\\n"),
    ('"', '\\"'),
)


@dataclass(frozen=True, slots=True)
class FunctionDescriptor:
    """Immutable description of one generated accessor.

    Attributes:
        name: Accessor name (the flattened resource key)
        signature: Declaration left of ``=>`` (e.g., ``String get title``)
        body: Dart expression right of ``=>``
        variables: Parameter names, None for zero-argument accessors
        kind: Accessor shape
    """

    name: ResourceKey
    signature: str
    body: str
    variables: VariableSet | None = None
    kind: FunctionKind = FunctionKind.GETTER

    def with_body(self, body: str) -> FunctionDescriptor:
        """Return a copy carrying another body (used for locale overrides)."""
        return FunctionDescriptor(
            name=self.name,
            signature=self.signature,
            body=body,
            variables=self.variables,
            kind=self.kind,
        )

    def render(self) -> str:
        """Render as a single Dart member: ``signature => body;``."""
        return f"{self.signature} => {self.body};"


def escape(text: str) -> str:
    """Escape text for embedding in a double-quoted Dart string literal.

    Backslash, dollar sign, tab, carriage return, newline and double quote
    are escaped. Interpolations are added after escaping, so a literal
    ``$`` never starts one.
    """
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return text


def _as_text(value: object) -> str:
    if isinstance(value, str):
        return value
    # Numbers and booleans keep their JSON spelling (true, 1.5).
    return json.dumps(value)


def _string_literal(text: str, variables: VariableSet | None) -> str:
    return '"' + replace_variables(escape(text), variables) + '"'


def render_value(value: LeafValue, variables: VariableSet | None = None) -> str:
    """Render a resource value as a Dart expression.

    Args:
        value: Leaf value from a flattened resource
        variables: Placeholder names to rewrite into interpolations

    Returns:
        A string literal, or a list literal for list values
    """
    if isinstance(value, list):
        items = ", ".join(_string_literal(_as_text(item), None) for item in value)
        return f"[{items}]"
    return _string_literal(_as_text(value), variables)


def build_function(name: ResourceKey, value: LeafValue) -> FunctionDescriptor:
    """Build the descriptor for one resource entry.

    Args:
        name: Flattened resource key
        value: Leaf value

    Returns:
        A parameterized accessor when the value has placeholders, a list
        accessor for list values, otherwise a zero-argument getter.

    Example:
        >>> build_function("greet", "Hi {name}").render()
        'String greet(String name) => "Hi ${name}";'
    """
    if isinstance(value, list):
        return FunctionDescriptor(
            name=name,
            signature=f"List<String> get {name}",
            body=render_value(value),
            kind=FunctionKind.LIST,
        )

    text = _as_text(value)
    variables = parse_variables(text)
    if variables:
        parameters = ", ".join(f"String {variable}" for variable in variables)
        return FunctionDescriptor(
            name=name,
            signature=f"String {name}({parameters})",
            body=render_value(text, variables),
            variables=variables,
            kind=FunctionKind.METHOD,
        )

    return FunctionDescriptor(
        name=name,
        signature=f"String get {name}",
        body=render_value(text),
    )


def build_function_table(
    resource: Mapping[ResourceKey, LeafValue],
) -> tuple[FunctionDescriptor, ...]:
    """Build the ordered descriptor table for a flattened resource.

    Table order follows the resource's iteration order; every key produces
    exactly one descriptor.
    """
    return tuple(build_function(name, value) for name, value in resource.items())
