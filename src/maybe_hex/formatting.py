"""Render integers back into literals that maybe_hex() accepts."""
from __future__ import annotations

from maybe_hex.int_types import IntType, get_int_type
from maybe_hex.parser import HEX_PREFIX


def format_decimal(value: int, int_type: IntType | str | None = None) -> str:
    _check_range(value, int_type)
    return str(value)


def format_hex(value: int, int_type: IntType | str | None = None, pad: bool = False) -> str:
    """Format as a lowercase "0x" literal.
    
    Args:
        value: Non-negative integer (hex literals carry no sign)
        int_type: Optional type to range-check against and to pad to
        pad: Zero-pad to the full width of int_type
    """
    _check_range(value, int_type)
    if value < 0:
        raise ValueError(f"Cannot format negative value {value} as a hex literal")
    
    width = get_int_type(int_type).hex_width if (pad and int_type is not None) else 0
    return f"{HEX_PREFIX}{value:0{width}x}" if width else f"{HEX_PREFIX}{value:x}"


def _check_range(value: int, int_type: IntType | str | None) -> None:
    if int_type is None:
        return
    int_type = get_int_type(int_type)
    if not int_type.contains(value):
        raise ValueError(
            f"{value} is out of range for {int_type.name} "
            f"[{int_type.min_value}, {int_type.max_value}]"
        )
