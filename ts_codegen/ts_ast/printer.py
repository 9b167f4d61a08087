"""
TypeScript AST Printer.

Converts TypeScript AST nodes to source text. Output follows the single-line
forms of the TypeScript compiler's printer:
- Double-quoted string literals
- Spaces inside non-empty braces (`{ a: 1 }`), none inside empty ones (`{}`)
- Comma-space separated arguments and specifiers
- Statements terminated with a semicolon
"""

from __future__ import annotations

from ..config import EmitterConfig, NewLineKind
from ..utils import escape_string
from .nodes import (
    ArrowFunction,
    BooleanLiteral,
    CallExpression,
    Decorator,
    ExportDeclaration,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    NullLiteral,
    NumericLiteral,
    ObjectLiteral,
    PropertyAssignment,
    SourceFile,
    StringLiteral,
    TsNode,
)


class Printer:
    """Prints TypeScript AST nodes to source text.

    A printer only reads its settings, so one instance can be shared freely.
    """

    def __init__(self, new_line: NewLineKind = NewLineKind.LINE_FEED, escape_non_ascii: bool = True):
        self.new_line = new_line
        self.escape_non_ascii = escape_non_ascii
        self._printers = {
            Identifier: self._print_identifier,
            StringLiteral: self._print_string_literal,
            NumericLiteral: self._print_numeric_literal,
            BooleanLiteral: self._print_boolean_literal,
            NullLiteral: self._print_null_literal,
            PropertyAssignment: self._print_property_assignment,
            ObjectLiteral: self._print_object_literal,
            ArrowFunction: self._print_arrow_function,
            CallExpression: self._print_call_expression,
            Decorator: self._print_decorator,
            ImportSpecifier: self._print_import_specifier,
            ImportDeclaration: self._print_import_declaration,
            ExportDeclaration: self._print_export_declaration,
            SourceFile: self.print_file,
        }

    @classmethod
    def from_config(cls, config: EmitterConfig) -> Printer:
        return cls(new_line=config.new_line, escape_non_ascii=config.escape_non_ascii)

    def print_node(self, node: TsNode) -> str:
        """Print a single node with no surrounding context."""
        printer = self._printers.get(type(node))
        if printer is None:
            raise TypeError(f"Cannot print node of type {type(node).__name__}")
        return printer(node)

    def print_file(self, source_file: SourceFile) -> str:
        """Print every statement of a source file, one per line."""
        return self.new_line.value.join(self.print_node(statement) for statement in source_file.statements)

    def _print_identifier(self, node: Identifier) -> str:
        return node.text

    def _print_string_literal(self, node: StringLiteral) -> str:
        return f'"{escape_string(node.text, self.escape_non_ascii)}"'

    def _print_numeric_literal(self, node: NumericLiteral) -> str:
        return node.text

    def _print_boolean_literal(self, node: BooleanLiteral) -> str:
        return "true" if node.value else "false"

    def _print_null_literal(self, node: NullLiteral) -> str:
        return "null"

    def _print_property_assignment(self, node: PropertyAssignment) -> str:
        return f"{node.name}: {self.print_node(node.initializer)}"

    def _print_object_literal(self, node: ObjectLiteral) -> str:
        if not node.properties:
            return "{}"
        members = ", ".join(self.print_node(prop) for prop in node.properties)
        return f"{{ {members} }}"

    def _print_arrow_function(self, node: ArrowFunction) -> str:
        body = self.print_node(node.body)
        # An object literal body would otherwise parse as a block
        if isinstance(node.body, ObjectLiteral):
            body = f"({body})"
        return f"() => {body}"

    def _print_call_expression(self, node: CallExpression) -> str:
        args = ", ".join(self.print_node(arg) for arg in node.arguments)
        return f"{self.print_node(node.callee)}({args})"

    def _print_decorator(self, node: Decorator) -> str:
        return f"@{self.print_node(node.expression)}"

    def _print_import_specifier(self, node: ImportSpecifier) -> str:
        return self.print_node(node.name)

    def _print_import_declaration(self, node: ImportDeclaration) -> str:
        module = self.print_node(node.module_specifier)
        if not node.specifiers:
            return f"import {{}} from {module};"
        names = ", ".join(self.print_node(spec) for spec in node.specifiers)
        return f"import {{ {names} }} from {module};"

    def _print_export_declaration(self, node: ExportDeclaration) -> str:
        return f"export * from {self.print_node(node.module_specifier)};"


_printer = Printer(new_line=NewLineKind.LINE_FEED)


def node_to_string(node: TsNode, printer: Printer | None = None) -> str:
    """
    Return the source text of a TypeScript node.

    Args:
        node: Any node built by the fragment builders
        printer: Printer to use; defaults to a shared line-feed printer

    Returns:
        The printed source text
    """
    return (printer or _printer).print_node(node)


render = node_to_string
