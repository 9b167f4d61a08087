"""
TypeScript AST nodes and printer used to emit source fragments.
"""

from __future__ import annotations

from .nodes import (
    ArrowFunction,
    BooleanLiteral,
    CallExpression,
    Decorator,
    ExportDeclaration,
    Expression,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    NullLiteral,
    NumericLiteral,
    ObjectLiteral,
    PropertyAssignment,
    SourceFile,
    Statement,
    StringLiteral,
    TsNode,
)
from .printer import Printer, node_to_string, render

__all__ = [
    "ArrowFunction",
    "BooleanLiteral",
    "CallExpression",
    "Decorator",
    "ExportDeclaration",
    "Expression",
    "Identifier",
    "ImportDeclaration",
    "ImportSpecifier",
    "NullLiteral",
    "NumericLiteral",
    "ObjectLiteral",
    "PropertyAssignment",
    "SourceFile",
    "Statement",
    "StringLiteral",
    "TsNode",
    "Printer",
    "node_to_string",
    "render",
]
