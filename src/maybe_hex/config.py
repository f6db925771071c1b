"""CLI configuration - packaged defaults, optional user file, dotlist overrides."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence

from omegaconf import DictConfig, OmegaConf

from maybe_hex.int_types import get_int_type

DEFAULT_CONFIG_PATH = Path(__file__).parent / "conf" / "default.yaml"
OUTPUT_FORMATS = ("both", "dec", "hex")


def load_config(path: str | Path | None = None, overrides: Sequence[str] = ()) -> DictConfig:
    """Load the resolved CLI config.
    
    Args:
        path: Optional YAML file merged over the packaged defaults
        overrides: Dotlist entries merged last, e.g. ["parse.int_type=u8"]
    
    Returns:
        DictConfig with environment interpolations resolved
    """
    cfg = OmegaConf.load(DEFAULT_CONFIG_PATH)
    if path is not None:
        cfg = OmegaConf.merge(cfg, OmegaConf.load(Path(path)))
    if overrides:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(list(overrides)))
    
    OmegaConf.resolve(cfg)
    validate_config(cfg)
    return cfg


def validate_config(cfg: DictConfig) -> None:
    get_int_type(cfg.parse.int_type)
    if cfg.parse.output not in OUTPUT_FORMATS:
        available = ", ".join(OUTPUT_FORMATS)
        raise ValueError(f"Unknown output format: {cfg.parse.output!r}. Available: {available}")
