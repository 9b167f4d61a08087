"""
Fragment descriptions.

Turns the JSON description consumed by the command line tool into AST
fragments. A description looks like:

    {
        "fragments": [
            {"kind": "import", "names": ["Table", "Column"], "module": "sequelize-typescript"},
            {"kind": "export", "file": "user.model"},
            {"kind": "decorator", "name": "Column", "properties": {"type": "DataType.STRING"}},
            {"kind": "arrow_decorator", "name": "BelongsTo", "targets": ["User"], "properties": {"onDelete": "CASCADE"}}
        ]
    }
"""

from __future__ import annotations

from typing import Any

from .builders import FragmentBuilder
from .errors import FragmentDescriptionError
from .ts_ast.nodes import SourceFile, Statement


def _require(entry: dict, key: str, expected_type: type | tuple[type, ...], index: int) -> Any:
    if key not in entry:
        raise FragmentDescriptionError(f"Fragment {index} ({entry.get('kind')}): missing field {key!r}")
    value = entry[key]
    if not isinstance(value, expected_type):
        raise FragmentDescriptionError(f"Fragment {index} ({entry.get('kind')}): field {key!r} has unexpected type {type(value).__name__}")
    return value


def _optional(entry: dict, key: str, expected_type: type, default: Any, index: int) -> Any:
    if entry.get(key) is None:
        return default
    return _require(entry, key, expected_type, index)


def _names(entry: dict, key: str, names: list, index: int) -> list:
    if not all(isinstance(name, str) for name in names):
        raise FragmentDescriptionError(f"Fragment {index} ({entry.get('kind')}): field {key!r} must be a list of strings")
    return names


def build_fragment(entry: dict, builder: FragmentBuilder, index: int = 0) -> Statement:
    """Build a single fragment from one description entry."""
    if not isinstance(entry, dict):
        raise FragmentDescriptionError(f"Fragment {index}: expected an object, got {type(entry).__name__}")

    kind = entry.get("kind")
    if kind == "import":
        return builder.build_named_import(
            _names(entry, "names", _require(entry, "names", list, index), index),
            _require(entry, "module", str, index),
        )
    if kind == "export":
        return builder.build_index_export(_require(entry, "file", str, index))
    if kind == "decorator":
        return builder.build_object_literal_decorator(
            _require(entry, "name", str, index),
            _optional(entry, "properties", dict, {}, index),
        )
    if kind == "arrow_decorator":
        return builder.build_arrow_decorator(
            _require(entry, "name", str, index),
            _names(entry, "targets", _optional(entry, "targets", list, [], index), index),
            _optional(entry, "properties", dict, None, index),
        )
    raise FragmentDescriptionError(f"Fragment {index}: unknown kind {kind!r}")


def build_source_file(description: dict, builder: FragmentBuilder) -> SourceFile:
    """Build every fragment of a description, keeping their order."""
    fragments = description.get("fragments") if isinstance(description, dict) else None
    if not isinstance(fragments, list):
        raise FragmentDescriptionError('Description must be an object with a "fragments" list')
    statements = tuple(build_fragment(entry, builder, i) for i, entry in enumerate(fragments))
    return SourceFile(statements)
