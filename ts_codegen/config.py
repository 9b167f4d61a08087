"""
Configuration for TypeScript fragment emission.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

# String values starting with one of these are emitted as bare references
DEFAULT_IDENTIFIER_PREFIXES = ("DataType.", "Sequelize.")


def _prefix_list(value) -> list[str]:
    # a single prefix may be given as a bare string
    if isinstance(value, str):
        return [value]
    prefixes = list(value)
    if not all(isinstance(p, str) for p in prefixes):
        raise ValueError(f"identifier_prefixes must be a string or a list of strings, got {value!r}")
    return prefixes


class NewLineKind(str, Enum):
    """Line terminator used when printing several fragments together."""

    LINE_FEED = "\n"
    CARRIAGE_RETURN_LINE_FEED = "\r\n"

    @classmethod
    def from_name(cls, name: str) -> NewLineKind:
        """Accept "lf"/"crlf" as well as the enum names and raw terminators."""
        aliases = {"lf": cls.LINE_FEED, "crlf": cls.CARRIAGE_RETURN_LINE_FEED}
        if name.lower() in aliases:
            return aliases[name.lower()]
        if name.upper() in cls.__members__:
            return cls[name.upper()]
        return cls(name)


@dataclass
class EmitterConfig:
    """Configuration options for fragment building and printing."""

    # Prefixes marking enum-like constants (e.g. DataType.STRING) in decorator properties
    identifier_prefixes: list[str] = field(default_factory=lambda: list(DEFAULT_IDENTIFIER_PREFIXES))

    # Reject names that are not valid TypeScript identifiers
    validate_identifiers: bool = False

    # Write non-ASCII characters in string literals as \uXXXX escapes
    escape_non_ascii: bool = True

    # Line terminator between printed statements
    new_line: NewLineKind = NewLineKind.LINE_FEED

    # Add generation comment at top of CLI output
    add_generation_comment: bool = False

    @staticmethod
    def from_dict(d: dict) -> EmitterConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = EmitterConfig()
        known = {f.name for f in fields(EmitterConfig)}
        for k, v in d.items():
            if k == "new_line" and isinstance(v, str):
                config.new_line = NewLineKind.from_name(v)
            elif k == "identifier_prefixes":
                config.identifier_prefixes = _prefix_list(v)
            elif k in known:
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "identifier_prefixes": list(self.identifier_prefixes),
            "validate_identifiers": self.validate_identifiers,
            "escape_non_ascii": self.escape_non_ascii,
            "new_line": self.new_line.name,
            "add_generation_comment": self.add_generation_comment,
        }
