"""Error raised when a literal does not parse into its target type."""
from __future__ import annotations

from enum import Enum

from maybe_hex.int_types import IntType


class ParseErrorKind(Enum):
    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    OVERFLOW = "overflow"


class NumericParseError(ValueError):
    """A literal is not a valid number for its target type.
    
    Subclasses ValueError so argparse and click converters report it as an
    invalid value without extra wiring.
    
    Attributes:
        kind: What went wrong
        text: The string handed to the failing radix parser
        int_type: Target type of the parse
        radix: 10 or 16, whichever parser raised
        negative: True when an OVERFLOW was below the type's minimum
    """
    
    def __init__(self, kind: ParseErrorKind, text: str, int_type: IntType, radix: int, negative: bool = False):
        self.kind = kind
        self.text = text
        self.int_type = int_type
        self.radix = radix
        self.negative = negative
        super().__init__(self.describe())
    
    def describe(self) -> str:
        if self.kind is ParseErrorKind.EMPTY:
            return "cannot parse integer from empty string"
        if self.kind is ParseErrorKind.INVALID_DIGIT:
            return "invalid digit found in string"
        if self.negative:
            return "number too small to fit in target type"
        return "number too large to fit in target type"
    
    def __repr__(self) -> str:
        return (
            f"NumericParseError(kind={self.kind.name}, text={self.text!r}, "
            f"int_type={self.int_type.name}, radix={self.radix})"
        )
