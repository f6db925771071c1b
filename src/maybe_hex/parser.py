"""Decimal-or-hex literal parsing.

maybe_hex() tries the decimal parser first and falls back to hex:

    maybe_hex("255", U8)    -> 255
    maybe_hex("0xff", U8)   -> 255
    maybe_hex("ff", U8)     -> 255    (prefix is optional)
    maybe_hex("-12", I8)    -> -12    (sign is decimal-only)
    maybe_hex("0XFF", U8)   -> NumericParseError (prefix must be lowercase)
"""
from __future__ import annotations

from maybe_hex.errors import NumericParseError, ParseErrorKind
from maybe_hex.int_types import IntType, get_int_type

HEX_PREFIX = "0x"

_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def maybe_hex(text: str, int_type: IntType | str) -> int:
    """Parse a decimal or hexadecimal literal into int_type.
    
    - A leading "0x" prefix must have a lowercase "x".
    - An explicit sign is only accepted on decimal literals ("-12345", "+12345").
      Signed hex such as "-0xAB" or "+0xAB" is rejected.
    
    Args:
        text: Literal as typed by the user
        int_type: Target IntType or its name ("u32", "i16", ...)
    
    Returns:
        int: Value within int_type's range
    
    Raises:
        NumericParseError: The hex parser's error when neither reading works
    """
    int_type = get_int_type(int_type)
    _check_text(text)
    
    try:
        return parse_decimal(text, int_type)
    except NumericParseError:
        # Any decimal failure falls through to hex; its error is the one reported
        return parse_hex(strip_hex_prefix(text), int_type)


def strip_hex_prefix(text: str) -> str:
    """Remove one leading lowercase "0x", if present."""
    return text[len(HEX_PREFIX):] if text.startswith(HEX_PREFIX) else text


# =============================================================================
# RADIX PARSERS
# =============================================================================

def parse_decimal(text: str, int_type: IntType | str) -> int:
    """Parse an optionally signed base-10 literal: [+-]?[0-9]+

    Any literal whose value fits int_type is accepted, so "-0" parses as 0
    even for unsigned types. Rust's unsigned from_str rejects "-0" with
    InvalidDigit.
    """
    int_type = get_int_type(int_type)
    _check_text(text)
    if not text:
        raise NumericParseError(ParseErrorKind.EMPTY, text, int_type, radix=10)
    
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not _DECIMAL_DIGITS.issuperset(digits):
        raise NumericParseError(ParseErrorKind.INVALID_DIGIT, text, int_type, radix=10)
    
    bound = int_type.min_value if negative else int_type.max_value
    magnitude = _digits_to_int(digits, 10, limit=abs(bound))
    if magnitude is None or magnitude > abs(bound):
        raise NumericParseError(ParseErrorKind.OVERFLOW, text, int_type, radix=10, negative=negative)
    return -magnitude if negative else magnitude


def parse_hex(text: str, int_type: IntType | str) -> int:
    """Parse bare base-16 digits (no prefix, no sign), case-insensitive."""
    int_type = get_int_type(int_type)
    _check_text(text)
    if not text:
        raise NumericParseError(ParseErrorKind.EMPTY, text, int_type, radix=16)
    if not _HEX_DIGITS.issuperset(text):
        raise NumericParseError(ParseErrorKind.INVALID_DIGIT, text, int_type, radix=16)
    
    value = _digits_to_int(text, 16, limit=int_type.max_value)
    if value is None or value > int_type.max_value:
        raise NumericParseError(ParseErrorKind.OVERFLOW, text, int_type, radix=16)
    return value


# =============================================================================
# HELPERS
# =============================================================================

def _check_text(text) -> None:
    if not isinstance(text, str):
        raise TypeError(f"Expected str literal, got {type(text).__name__}")


def _digits_to_int(digits: str, radix: int, limit: int) -> int | None:
    """Convert pre-validated digits, or None when they cannot fit under limit.
    
    Leading zeros are dropped first, so an overlong digit string is rejected on
    length alone and never reaches int()'s str-conversion limit.
    """
    significant = digits.lstrip("0")
    max_len = len(_format_radix(limit, radix))
    if len(significant) > max_len:
        return None
    return int(significant or "0", radix)


def _format_radix(value: int, radix: int) -> str:
    return format(value, "x") if radix == 16 else str(value)
