"""Target integer types - add new widths here."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntType:
    """Fixed-width integer type that literals are parsed into.
    
    Attributes:
        name: Short lowercase name, e.g. "u32" or "i16"
        bits: Width in bits
        signed: Two's complement range if True, else unsigned
    """
    name: str
    bits: int
    signed: bool
    
    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0
    
    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1
    
    @property
    def hex_width(self) -> int:
        """Hex digits needed to spell the full width."""
        return self.bits // 4
    
    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value
    
    def __str__(self) -> str:
        return self.name


U8 = IntType("u8", 8, signed=False)
U16 = IntType("u16", 16, signed=False)
U32 = IntType("u32", 32, signed=False)
U64 = IntType("u64", 64, signed=False)
U128 = IntType("u128", 128, signed=False)
I8 = IntType("i8", 8, signed=True)
I16 = IntType("i16", 16, signed=True)
I32 = IntType("i32", 32, signed=True)
I64 = IntType("i64", 64, signed=True)
I128 = IntType("i128", 128, signed=True)

# ============================================================================
# INT TYPE REGISTRY - Add new types here
# ============================================================================
INT_TYPE_REGISTRY: dict[str, IntType] = {
    t.name: t for t in (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128)
}
# ============================================================================


def get_int_type(int_type: IntType | str) -> IntType:
    """Resolve an IntType from an instance or a case-insensitive name."""
    if isinstance(int_type, IntType):
        return int_type
    
    name = str(int_type).strip().lower()
    if name not in INT_TYPE_REGISTRY:
        available = ", ".join(INT_TYPE_REGISTRY.keys())
        raise ValueError(f"Unknown int type: {int_type!r}. Available: {available}")
    return INT_TYPE_REGISTRY[name]


__all__ = [
    "IntType",
    "U8", "U16", "U32", "U64", "U128",
    "I8", "I16", "I32", "I64", "I128",
    "INT_TYPE_REGISTRY",
    "get_int_type",
]
