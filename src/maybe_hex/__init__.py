"""Parse command-line numbers written either as decimal ("255") or hex ("0xff")."""
from loguru import logger

from maybe_hex.errors import NumericParseError, ParseErrorKind
from maybe_hex.int_types import (
    IntType,
    U8, U16, U32, U64, U128,
    I8, I16, I32, I64, I128,
    INT_TYPE_REGISTRY,
    get_int_type,
)
from maybe_hex.parser import maybe_hex, parse_decimal, parse_hex, strip_hex_prefix
from maybe_hex.formatting import format_decimal, format_hex
from maybe_hex.cli_types import MaybeHexParamType, maybe_hex_arg

# Silent when embedded; the CLI re-enables via setup_logging()
logger.disable("maybe_hex")

__version__ = "0.1.0"

__all__ = [
    "maybe_hex",
    "parse_decimal",
    "parse_hex",
    "strip_hex_prefix",
    "format_decimal",
    "format_hex",
    "IntType",
    "U8", "U16", "U32", "U64", "U128",
    "I8", "I16", "I32", "I64", "I128",
    "INT_TYPE_REGISTRY",
    "get_int_type",
    "NumericParseError",
    "ParseErrorKind",
    "MaybeHexParamType",
    "maybe_hex_arg",
]
