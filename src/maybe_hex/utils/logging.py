"""Logging utilities - loguru setup for the CLI."""
import sys
from pathlib import Path

from loguru import logger


def setup_logging(level: str = "WARNING", log_dir: Path | None = None) -> None:
    """Configure loguru for console and file logging.
    
    Args:
        level: Minimum level for the console sink
        log_dir: Directory for log files (optional)
    """
    logger.enable("maybe_hex")
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level:<7}</level> | {message}",
        colorize=True,
    )
    
    if log_dir is not None:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        logger.add(
            Path(log_dir) / "maybe-hex.log",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {message}",
            enqueue=True,
        )
