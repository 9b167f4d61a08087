"""
Property values for decorator object literals.

A property value is classified into one of three kinds before it becomes an
expression node:

1. NUMBER: int or float (bool excluded) -> numeric literal
2. IDENTIFIER_REF: string with a known constant prefix (e.g. "DataType.") -> bare reference
3. RAW_LITERAL: anything else -> string, boolean, null or nested object literal

Classification never fails; only turning an unsupported raw literal into a
node raises UnsupportedLiteralError.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .config import DEFAULT_IDENTIFIER_PREFIXES
from .errors import UnsupportedLiteralError
from .ts_ast.nodes import (
    BooleanLiteral,
    Expression,
    Identifier,
    NullLiteral,
    NumericLiteral,
    ObjectLiteral,
    PropertyAssignment,
    StringLiteral,
)
from .utils import format_js_number


class PropertyValueKind(str, Enum):
    """Kinds of decorator property values."""

    NUMBER = "number"
    IDENTIFIER_REF = "identifier_ref"
    RAW_LITERAL = "raw_literal"


@dataclass(frozen=True)
class PropertyValue:
    """A classified property value."""

    kind: PropertyValueKind
    value: Any

    def to_expression(self) -> Expression:
        """Build the expression node for this value."""
        if self.kind is PropertyValueKind.NUMBER:
            return create_numeric_literal(self.value)
        if self.kind is PropertyValueKind.IDENTIFIER_REF:
            return Identifier(self.value)
        return create_literal(self.value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify_property_value(value: Any, identifier_prefixes: Iterable[str] = DEFAULT_IDENTIFIER_PREFIXES) -> PropertyValue:
    """
    Classify a decorator property value.

    Args:
        value: The value from the property mapping
        identifier_prefixes: String prefixes that mark bare constant references

    Returns:
        The classified value
    """
    if _is_number(value):
        return PropertyValue(PropertyValueKind.NUMBER, value)
    if isinstance(value, str) and value.startswith(tuple(identifier_prefixes)):
        return PropertyValue(PropertyValueKind.IDENTIFIER_REF, value)
    return PropertyValue(PropertyValueKind.RAW_LITERAL, value)


def create_numeric_literal(value: int | float) -> NumericLiteral:
    return NumericLiteral(format_js_number(value))


def create_literal(value: Any) -> Expression:
    """Create a literal node from a plain value.

    Strings are quoted, numbers written as numeric literals, booleans as
    true/false and None as null. Mappings become nested object literals
    whose values go through this same function.
    """
    if isinstance(value, str):
        return StringLiteral(value)
    if isinstance(value, bool):
        return BooleanLiteral(value)
    if _is_number(value):
        return create_numeric_literal(value)
    if value is None:
        return NullLiteral()
    if isinstance(value, Mapping):
        return create_object_literal(value, create_literal)
    raise UnsupportedLiteralError(value)


def create_object_literal(props: Mapping[str, Any], convert=create_literal) -> ObjectLiteral:
    """Build an object literal, converting each value with `convert`; insertion order is kept."""
    return ObjectLiteral(tuple(PropertyAssignment(str(name), convert(value)) for name, value in props.items()))
