"""TypeScript fragment emitter

A Python package for building TypeScript source fragments (named imports,
index re-exports and decorators) as small ASTs and printing them as text,
for splicing into generated model files.
"""

__version__ = "0.1.0"

from .builders import (
    FragmentBuilder,
    build_arrow_decorator,
    build_index_export,
    build_named_import,
    build_object_literal_decorator,
)
from .config import EmitterConfig, NewLineKind
from .errors import CodegenError, FragmentDescriptionError, InvalidIdentifierError, UnsupportedLiteralError
from .ts_ast import Printer, SourceFile, node_to_string, render
from .values import PropertyValue, PropertyValueKind, classify_property_value

__all__ = [
    "FragmentBuilder",
    "build_named_import",
    "build_index_export",
    "build_object_literal_decorator",
    "build_arrow_decorator",
    "render",
    "node_to_string",
    "Printer",
    "SourceFile",
    "EmitterConfig",
    "NewLineKind",
    "PropertyValue",
    "PropertyValueKind",
    "classify_property_value",
    "CodegenError",
    "InvalidIdentifierError",
    "UnsupportedLiteralError",
    "FragmentDescriptionError",
]
