"""
TypeScript AST node definitions.

These nodes represent the small set of TypeScript constructs emitted by the
fragment builders: import/export declarations, decorators, calls, object
literals, arrow functions and literals. Nodes are immutable; children are
held in tuples and each child belongs to exactly one parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class TsNode:
    """Base class for all TypeScript AST nodes."""

    pass


@dataclass(frozen=True)
class Identifier(TsNode):
    """A bare name reference (e.g. `User` or `DataType.STRING`), printed verbatim."""

    text: str = ""


@dataclass(frozen=True)
class StringLiteral(TsNode):
    """A string literal; `text` is the unescaped value."""

    text: str = ""


@dataclass(frozen=True)
class NumericLiteral(TsNode):
    """A numeric literal; `text` is already in JavaScript number format."""

    text: str = "0"


@dataclass(frozen=True)
class BooleanLiteral(TsNode):
    value: bool = False


@dataclass(frozen=True)
class NullLiteral(TsNode):
    pass


@dataclass(frozen=True)
class PropertyAssignment(TsNode):
    """An object literal member `name: initializer`."""

    name: str = ""
    initializer: Expression = field(default_factory=NullLiteral)


@dataclass(frozen=True)
class ObjectLiteral(TsNode):
    """An object literal `{ a: 1, b: "x" }`."""

    properties: tuple[PropertyAssignment, ...] = ()


@dataclass(frozen=True)
class ArrowFunction(TsNode):
    """A zero-parameter arrow function with an expression body (`() => body`)."""

    body: Expression = field(default_factory=Identifier)


@dataclass(frozen=True)
class CallExpression(TsNode):
    callee: Identifier = field(default_factory=Identifier)
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class Decorator(TsNode):
    """A decorator application (e.g. `@Column({ type: DataType.STRING })`)."""

    expression: CallExpression = field(default_factory=CallExpression)


@dataclass(frozen=True)
class ImportSpecifier(TsNode):
    """A named import without alias."""

    name: Identifier = field(default_factory=Identifier)


@dataclass(frozen=True)
class ImportDeclaration(TsNode):
    """A named import declaration (`import { A, B } from "module";`)."""

    specifiers: tuple[ImportSpecifier, ...] = ()
    module_specifier: StringLiteral = field(default_factory=StringLiteral)


@dataclass(frozen=True)
class ExportDeclaration(TsNode):
    """A wildcard re-export (`export * from "./module";`)."""

    module_specifier: StringLiteral = field(default_factory=StringLiteral)


@dataclass(frozen=True)
class SourceFile(TsNode):
    """Enclosing unit for several top-level statements printed together."""

    statements: tuple[Statement, ...] = ()


Expression = Union[
    Identifier,
    StringLiteral,
    NumericLiteral,
    BooleanLiteral,
    NullLiteral,
    ObjectLiteral,
    ArrowFunction,
    CallExpression,
]

Statement = Union[ImportDeclaration, ExportDeclaration, Decorator]
