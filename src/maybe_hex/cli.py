from __future__ import annotations

from pathlib import Path

import typer
import yaml
from dotenv import find_dotenv, load_dotenv
from loguru import logger

from maybe_hex.config import OUTPUT_FORMATS, load_config
from maybe_hex.errors import NumericParseError
from maybe_hex.formatting import format_decimal, format_hex
from maybe_hex.int_types import INT_TYPE_REGISTRY, IntType, get_int_type
from maybe_hex.parser import maybe_hex
from maybe_hex.utils.logging import setup_logging

app = typer.Typer(help="maybe-hex: parse decimal or 0x-prefixed hex numbers into fixed-width integers")


@app.command(name="parse")
def parse(
    values: list[str] = typer.Argument(..., help="Literals to parse, e.g. 255 0xff -12"),
    int_type: str | None = typer.Option(None, "--type", "-t", help=f"Target type: {', '.join(INT_TYPE_REGISTRY)}"),
    output: str | None = typer.Option(None, "--output", "-o", help=f"Output: {', '.join(OUTPUT_FORMATS)}"),
    pad: bool | None = typer.Option(None, "--pad/--no-pad", help="Zero-pad hex output to the full type width"),
    config: Path | None = typer.Option(
        None, "--config", exists=True, dir_okay=False, help="YAML file merged over the packaged defaults"
    ),
    overrides: list[str] = typer.Option([], "--set", help="Config override, e.g. parse.int_type=u8"),
):
    """Parse each VALUE and print it as decimal and/or hex."""
    cfg = _load_cli_config(config, overrides, int_type=int_type, output=output, pad=pad)
    setup_logging(cfg.logging.level, cfg.logging.log_dir)
    
    target = get_int_type(cfg.parse.int_type)
    logger.debug(f"Parsing {len(values)} value(s) as {target.name}")
    
    for text in values:
        value = parse_value(text, target)
        logger.debug(f"{text!r} -> {value}")
        if value < 0 and cfg.parse.output == "hex":
            raise typer.BadParameter(f"{text!r} has no hex literal (negative)", param_hint="'VALUES...'")
        typer.echo(render(text, value, target, cfg.parse.output, cfg.parse.pad))


@app.command(name="types")
def list_types():
    """List the supported integer types and their ranges."""
    for int_type in INT_TYPE_REGISTRY.values():
        typer.echo(f"{int_type.name:<5} {int_type.min_value} .. {int_type.max_value}")


def parse_value(text: str, int_type: IntType) -> int:
    """maybe_hex() with failures reported as a usage error on VALUES."""
    try:
        return maybe_hex(text, int_type)
    except NumericParseError as exc:
        raise typer.BadParameter(f"{text!r} is not a valid {int_type.name}: {exc}", param_hint="'VALUES...'") from exc


def render(text: str, value: int, int_type: IntType, output: str, pad: bool) -> str:
    """Format one parsed value for printing."""
    decimal = format_decimal(value, int_type)
    if output == "dec":
        return decimal
    # Negative values only have a decimal spelling; their hex field stays empty
    hex_literal = format_hex(value, int_type, pad=pad) if value >= 0 else ""
    if output == "hex":
        return hex_literal
    return f"{text}\t{decimal}\t{hex_literal}"


def _load_cli_config(config: Path | None, overrides: list[str], **flags):
    """Merge config sources; explicit CLI flags win over everything else."""
    load_dotenv(find_dotenv(usecwd=True))
    flag_overrides = [
        f"parse.{key}={str(val).lower() if isinstance(val, bool) else val}"
        for key, val in flags.items()
        if val is not None
    ]
    try:
        return load_config(config, [*overrides, *flag_overrides])
    except (OSError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Cannot read config: {exc}", param_hint="'--config'") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def main():
    app()


if __name__ == "__main__":
    main()
