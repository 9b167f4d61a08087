"""
Exceptions raised while building TypeScript fragments.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for all ts_codegen errors."""

    pass


class InvalidIdentifierError(CodegenError, ValueError):
    """Raised when a name is not a valid TypeScript identifier.

    Only raised when identifier validation is enabled in the configuration.
    By default names are trusted and emitted verbatim.
    """

    def __init__(self, name: str, role: str):
        self.name = name
        self.role = role
        super().__init__(f"Invalid {role} identifier: {name!r}")


class UnsupportedLiteralError(CodegenError, TypeError):
    """Raised when a value cannot be written as a TypeScript literal.

    Supported values are strings, numbers, booleans, None and mappings of those.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Cannot create a literal from value of type {type(value).__name__}: {value!r}")


class FragmentDescriptionError(CodegenError):
    """Raised when a fragment description entry is malformed.

    This can happen when:
    - The entry has no "kind" or an unknown one
    - A required field for the kind is missing
    - A field has the wrong shape (e.g. "names" is not a list)
    """

    pass
