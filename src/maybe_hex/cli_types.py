"""Adapters that plug maybe_hex() into argument parsers.

- argparse:  parser.add_argument("--addr", type=maybe_hex_arg("u32"))
- typer:     typer.Option("0xff", parser=maybe_hex_arg("u8"))
- click:     click.option("--mask", type=MaybeHexParamType("u8"))

typer vendors its own click, so a plain click.ParamType cannot be handed to
typer's click_type=; use parser=maybe_hex_arg(...) there instead.
"""
from __future__ import annotations

from typing import Callable

import click

from maybe_hex.errors import NumericParseError
from maybe_hex.int_types import IntType, get_int_type
from maybe_hex.parser import maybe_hex


class MaybeHexParamType(click.ParamType):
    """click parameter type accepting "255" or "0xff"."""
    
    def __init__(self, int_type: IntType | str):
        self.int_type = get_int_type(int_type)
        self.name = self.int_type.name
    
    def convert(self, value, param, ctx):
        if isinstance(value, int) and not isinstance(value, bool):
            if self.int_type.contains(value):
                return value
            self.fail(f"{value} is out of range for {self.name}", param, ctx)
        
        try:
            return maybe_hex(value, self.int_type)
        except NumericParseError as exc:
            self.fail(f"{value!r} is not a valid {self.name}: {exc}", param, ctx)
    
    def __repr__(self) -> str:
        return f"MaybeHex({self.name})"


def maybe_hex_arg(int_type: IntType | str) -> Callable[[str], int]:
    """Build a converter for argparse `type=` or typer `parser=`.
    
    Failures raise ValueError, which both frameworks turn into a usage error.
    argparse names the converter in its message, e.g. "invalid u16 value: '0x1FFFF'".
    """
    resolved = get_int_type(int_type)
    
    def convert(text: str | int) -> int:
        if isinstance(text, int) and not isinstance(text, bool):
            if not resolved.contains(text):
                raise ValueError(f"{text} is out of range for {resolved.name}")
            return text
        return maybe_hex(text, resolved)
    
    convert.__name__ = resolved.name
    return convert
