"""
Printer tests.

These tests build TypeScript AST nodes by hand and check the printed text.
"""

from __future__ import annotations

import dataclasses

import pytest

from ts_codegen.config import EmitterConfig, NewLineKind
from ts_codegen.ts_ast.nodes import (
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
from ts_codegen.ts_ast.printer import Printer, node_to_string, render


def test_literals():
    assert render(StringLiteral("hello")) == '"hello"'
    assert render(NumericLiteral("255")) == "255"
    assert render(BooleanLiteral(True)) == "true"
    assert render(BooleanLiteral(False)) == "false"
    assert render(NullLiteral()) == "null"
    assert render(Identifier("DataType.STRING")) == "DataType.STRING"


def test_object_literal():
    node = ObjectLiteral((PropertyAssignment("a", NumericLiteral("1")), PropertyAssignment("b", StringLiteral("x"))))
    assert render(node) == '{ a: 1, b: "x" }'
    assert render(ObjectLiteral()) == "{}"


def test_nested_object_literal():
    inner = ObjectLiteral((PropertyAssignment("isEmail", BooleanLiteral(True)),))
    node = ObjectLiteral((PropertyAssignment("validate", inner),))
    assert render(node) == "{ validate: { isEmail: true } }"


def test_arrow_function():
    assert render(ArrowFunction(Identifier("User"))) == "() => User"


def test_arrow_function_object_body_is_parenthesized():
    assert render(ArrowFunction(ObjectLiteral())) == "() => ({})"


def test_decorator_with_call():
    call = CallExpression(Identifier("Table"), (ObjectLiteral(),))
    assert render(Decorator(call)) == "@Table({})"
    assert render(Decorator(CallExpression(Identifier("AllowNull")))) == "@AllowNull()"


def test_import_and_export():
    specifiers = (ImportSpecifier(Identifier("A")), ImportSpecifier(Identifier("B")))
    assert render(ImportDeclaration(specifiers, StringLiteral("m"))) == 'import { A, B } from "m";'
    assert render(ImportDeclaration((), StringLiteral("m"))) == 'import {} from "m";'
    assert render(ExportDeclaration(StringLiteral("./user.model"))) == 'export * from "./user.model";'


@pytest.mark.parametrize(
    "value, expected",
    [
        ('say "hi"', r'"say \"hi\""'),
        ("back\\slash", r'"back\\slash"'),
        ("tab\there", r'"tab\there"'),
        ("line\nbreak", r'"line\nbreak"'),
        ("nul\0", r'"nul\0"'),
        ("nul\x001", r'"nul\x001"'),
        ("bell\x07", r'"bell\u0007"'),
        ("sep\u2028", r'"sep\u2028"'),
        ("caf\u00e9", r'"caf\u00E9"'),
        ("emoji \U0001F600", r'"emoji \uD83D\uDE00"'),
    ],
)
def test_string_escaping(value, expected):
    assert render(StringLiteral(value)) == expected


def test_non_ascii_kept_when_not_escaping():
    printer = Printer(escape_non_ascii=False)
    assert printer.print_node(StringLiteral("caf\u00e9")) == '"caf\u00e9"'
    assert printer.print_node(StringLiteral("a\u2028b")) == r'"a\u2028b"'


def test_printer_from_config():
    printer = Printer.from_config(EmitterConfig(escape_non_ascii=False, new_line=NewLineKind.CARRIAGE_RETURN_LINE_FEED))
    assert printer.escape_non_ascii is False
    assert printer.new_line is NewLineKind.CARRIAGE_RETURN_LINE_FEED


def test_print_file_joins_statements():
    source = SourceFile(
        (
            ImportDeclaration((ImportSpecifier(Identifier("Model")),), StringLiteral("sequelize-typescript")),
            ExportDeclaration(StringLiteral("./user.model")),
        )
    )
    expected_lf = 'import { Model } from "sequelize-typescript";\nexport * from "./user.model";'
    assert node_to_string(source) == expected_lf
    crlf = Printer(new_line=NewLineKind.CARRIAGE_RETURN_LINE_FEED)
    assert crlf.print_file(source) == expected_lf.replace("\n", "\r\n")


def test_print_empty_file():
    assert render(SourceFile()) == ""


def test_rendering_is_idempotent():
    node = Decorator(CallExpression(Identifier("Column"), (ObjectLiteral((PropertyAssignment("len", NumericLiteral("8")),)),)))
    assert render(node) == render(node)


def test_nodes_are_immutable():
    node = Identifier("User")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.text = "Other"


def test_unknown_node_type():
    @dataclasses.dataclass(frozen=True)
    class Unknown(TsNode):
        pass

    with pytest.raises(TypeError):
        render(Unknown())
