"""
Fragment builders.

Each builder turns a small declarative description into a TypeScript AST
fragment, ready to be printed with `render`:

- Named imports: `import { A, B } from "module";`
- Index re-exports: `export * from "./user.model";`
- Object literal decorators: `@Column({ type: DataType.STRING, allowNull: false })`
- Arrow decorators: `@BelongsTo(() => User, { onDelete: "CASCADE" })`

Names, module paths and file stems are emitted verbatim. Unless
`validate_identifiers` is enabled, checking them is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .config import EmitterConfig
from .errors import InvalidIdentifierError
from .ts_ast.nodes import (
    ArrowFunction,
    CallExpression,
    Decorator,
    ExportDeclaration,
    Expression,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    StringLiteral,
)
from .utils import is_valid_identifier
from .values import classify_property_value, create_literal, create_object_literal

logger = logging.getLogger(__name__)


class FragmentBuilder:
    """Builds TypeScript AST fragments according to an EmitterConfig."""

    def __init__(self, config: EmitterConfig | None = None):
        """
        Initialize the builder.

        Args:
            config: Emission configuration; defaults to EmitterConfig()
        """
        self.config = config or EmitterConfig()

    def _check_identifier(self, name: str, role: str) -> None:
        if self.config.validate_identifiers and not is_valid_identifier(name):
            raise InvalidIdentifierError(name, role)

    def _check_property_names(self, props: Mapping[str, Any]) -> None:
        for name in props:
            self._check_identifier(name, "property")

    def build_named_import(self, names: Iterable[str], module_path: str) -> ImportDeclaration:
        """
        Build `import { names... } from "module_path";`.

        Args:
            names: Symbols to import, in output order; may be empty
            module_path: Module specifier, emitted as given

        Returns:
            The import declaration
        """
        specifiers = []
        for name in names:
            self._check_identifier(name, "import")
            specifiers.append(ImportSpecifier(Identifier(name)))
        logger.debug(f"Built named import of {len(specifiers)} symbol(s) from {module_path!r}")
        return ImportDeclaration(tuple(specifiers), StringLiteral(module_path))

    def build_index_export(self, file_stem: str) -> ExportDeclaration:
        """Build `export * from "./file_stem";` for an index file."""
        logger.debug(f"Built index export for {file_stem!r}")
        return ExportDeclaration(StringLiteral(f"./{file_stem}"))

    def build_object_literal_decorator(self, decorator_name: str, properties: Mapping[str, Any]) -> Decorator:
        """
        Build `@decorator_name({ key: value, ... })`.

        Numbers are written unquoted, strings with a configured identifier
        prefix (e.g. "DataType.STRING") as bare references, and everything
        else as a literal.

        Args:
            decorator_name: Name of the decorator function
            properties: Properties of the single object literal argument, in output order

        Returns:
            The decorator node
        """
        self._check_identifier(decorator_name, "decorator")
        self._check_property_names(properties)

        def convert(value: Any) -> Expression:
            return classify_property_value(value, self.config.identifier_prefixes).to_expression()

        argument = create_object_literal(properties, convert)
        logger.debug(f"Built decorator @{decorator_name} with {len(argument.properties)} property(ies)")
        return Decorator(CallExpression(Identifier(decorator_name), (argument,)))

    def build_arrow_decorator(
        self,
        decorator_name: str,
        target_identifiers: Iterable[str],
        object_literal_props: Mapping[str, Any] | None = None,
    ) -> Decorator:
        """
        Build `@decorator_name(() => target, ..., { key: value })`.

        Each target becomes a zero-argument arrow function returning the bare
        identifier, so the referenced class is resolved lazily. Object literal
        values are always written as plain literals.

        Args:
            decorator_name: Name of the decorator function
            target_identifiers: Names wrapped in arrow functions, in output order
            object_literal_props: Optional trailing object literal argument; skipped when empty

        Returns:
            The decorator node
        """
        self._check_identifier(decorator_name, "decorator")

        arguments: list[Expression] = []
        for target in target_identifiers:
            self._check_identifier(target, "arrow target")
            arguments.append(ArrowFunction(Identifier(target)))

        if object_literal_props:
            self._check_property_names(object_literal_props)
            arguments.append(create_object_literal(object_literal_props, create_literal))

        logger.debug(f"Built arrow decorator @{decorator_name} with {len(arguments)} argument(s)")
        return Decorator(CallExpression(Identifier(decorator_name), tuple(arguments)))


def build_named_import(names: Iterable[str], module_path: str, config: EmitterConfig | None = None) -> ImportDeclaration:
    return FragmentBuilder(config).build_named_import(names, module_path)


def build_index_export(file_stem: str, config: EmitterConfig | None = None) -> ExportDeclaration:
    return FragmentBuilder(config).build_index_export(file_stem)


def build_object_literal_decorator(
    decorator_name: str,
    properties: Mapping[str, Any],
    config: EmitterConfig | None = None,
) -> Decorator:
    return FragmentBuilder(config).build_object_literal_decorator(decorator_name, properties)


def build_arrow_decorator(
    decorator_name: str,
    target_identifiers: Iterable[str],
    object_literal_props: Mapping[str, Any] | None = None,
    config: EmitterConfig | None = None,
) -> Decorator:
    return FragmentBuilder(config).build_arrow_decorator(decorator_name, target_identifiers, object_literal_props)
