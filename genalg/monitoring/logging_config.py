"""
Logging Configuration for genalg.

Provides structured logging with loguru.

Author: genalg developers
License: MIT
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from genalg.genome.population import PopulationStatistics


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation: str = "100 MB",
    retention: str = "30 days",
    format_string: Optional[str] = None,
    serialize: bool = False,
) -> None:
    """
    Configure logging for genalg.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        rotation: Log rotation size/time
        retention: Log retention period
        format_string: Custom format string
        serialize: Whether to serialize logs as JSON
    """
    # Remove default handler
    logger.remove()

    if format_string is None:
        if serialize:
            format_string = "{message}"
        else:
            format_string = (
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            )

    # Console handler
    logger.add(
        sys.stderr,
        format=format_string,
        level=log_level.upper(),
        colorize=not serialize,
        serialize=serialize,
    )

    # File handler
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_file),
            format=format_string,
            level=log_level.upper(),
            rotation=rotation,
            retention=retention,
            serialize=serialize,
        )

    logger.configure(extra={"component": "genalg"})


def get_logger(name: str):
    """
    Get logger instance for component.

    Args:
        name: Component name

    Returns:
        Logger bound to the component
    """
    return logger.bind(component=name)


class LogContext:
    """Context manager for structured logging."""

    def __init__(self, **kwargs):
        """
        Initialize log context.

        Args:
            **kwargs: Context key-value pairs
        """
        self.context = kwargs
        self.token = None

    def __enter__(self):
        self.token = logger.contextualize(**self.context)
        self.token.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.token.__exit__(exc_type, exc_val, exc_tb)


def log_generation(generation: int, stats: PopulationStatistics) -> None:
    """Log the fitness summary of one evaluated generation."""
    with LogContext(phase="evolution", generation=generation):
        if stats.evaluated == 0:
            logger.info(f"Generation {generation}: no evaluated individuals")
            return

        logger.info(
            f"Generation {generation}: "
            f"best={stats.best_fitness:.4f}, avg={stats.avg_fitness:.4f}, "
            f"min={stats.min_fitness:.4f}, evaluated={stats.evaluated}/{stats.size}"
        )


__all__ = [
    "configure_logging",
    "get_logger",
    "LogContext",
    "log_generation",
]
