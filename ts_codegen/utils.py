"""
Utility functions for TypeScript code emission.
"""

import math
import re
import string
from decimal import Decimal

# Characters that must be escaped inside a double-quoted string literal
_DOUBLE_QUOTE_ESCAPED_CHARS = re.compile(r'[\\"\x00-\x1f\u2028\u2029\u0085]')

_NON_ASCII_CHARS = re.compile(r"[^\x00-\x7f]")

_ESCAPED_CHARS = {
    "\t": "\\t",
    "\v": "\\v",
    "\f": "\\f",
    "\b": "\\b",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
    "\u0085": "\\u0085",
}

# Numbers at or above this magnitude are printed in exponent form by JavaScript
_JS_EXPONENT_THRESHOLD = 21
_MAX_SAFE_INTEGER = 2**53


def _utf16_escape(code_unit: int) -> str:
    return "\\u" + format(code_unit, "04X")


def _escape_char(match: re.Match) -> str:
    char = match.group(0)
    if char in _ESCAPED_CHARS:
        return _ESCAPED_CHARS[char]
    if char == "\0":
        # "\0" followed by a digit would read as a legacy octal escape
        following = match.string[match.end() : match.end() + 1]
        return "\\x00" if following and following in string.digits else "\\0"
    return _utf16_escape(ord(char))


def _escape_non_ascii_char(match: re.Match) -> str:
    code = ord(match.group(0))
    if code <= 0xFFFF:
        return _utf16_escape(code)
    code -= 0x10000
    return _utf16_escape(0xD800 + (code >> 10)) + _utf16_escape(0xDC00 + (code & 0x3FF))


def escape_string(text: str, escape_non_ascii: bool = True) -> str:
    """Escape text for use between double quotes in TypeScript source.

    Quotes, backslashes and control characters get their short escapes
    (\\n, \\t, ...); other control characters use \\uXXXX.

    Args:
        text: The raw string value
        escape_non_ascii: Whether to write characters outside ASCII as \\uXXXX escapes

    Returns:
        The escaped text, without surrounding quotes
    """
    escaped = _DOUBLE_QUOTE_ESCAPED_CHARS.sub(_escape_char, text)
    if escape_non_ascii:
        escaped = _NON_ASCII_CHARS.sub(_escape_non_ascii_char, escaped)
    return escaped


def format_js_number(value: int | float) -> str:
    """Format a number the way JavaScript's Number.prototype.toString does.

    Examples:
        255 -> "255"
        1.5 -> "1.5"
        3.0 -> "3"
        1e21 -> "1e+21"
        0.0000001 -> "1e-7"
        float("nan") -> "NaN"
    """
    if isinstance(value, int):
        if abs(value) <= _MAX_SAFE_INTEGER:
            return str(value)
        # larger integers lose precision the same way a JavaScript number does
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = exponent + k
    prefix = "-" if sign else ""

    if k <= n <= _JS_EXPONENT_THRESHOLD:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= _JS_EXPONENT_THRESHOLD:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * (-n) + digits

    e = n - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{prefix}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def is_valid_identifier(text: str) -> bool:
    """Check whether text is a valid TypeScript identifier.

    Letters, digits, "_" and "$" are accepted, with no leading digit.
    Reserved words are not rejected.
    """
    if not text:
        return False
    first, rest = text[0], text[1:]
    if not (first.isalpha() or first in "_$"):
        return False
    return all(c.isalnum() or c in "_$" for c in rest)
