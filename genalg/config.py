"""
genalg Configuration System

Pydantic v2-based configuration with YAML/JSON support and environment overrides.

Features:
- Type-safe configuration models
- YAML/JSON file loading
- Environment variable overrides
- Validation with defaults

Author: genalg developers
Python: 3.10+
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field
from loguru import logger


# =============================================================================
# Genotype Configuration
# =============================================================================


class GenotypeConfig(BaseModel):
    """Shape of the bit-string genotype."""

    length: int = Field(
        default=32,
        ge=2,
        le=1_000_000,
        description="Number of bits per genotype",
    )


# =============================================================================
# Operator Configuration
# =============================================================================


class OperatorsConfig(BaseModel):
    """Parameters of the mutation and crossover operators."""

    bit_flip_probability: float = Field(
        default=0.02,
        gt=0.0,
        lt=1.0,
        description="Probability of flipping each bit during mutation",
    )

    crossover_points: int = Field(
        default=1,
        ge=1,
        le=1000,
        description="Number of cut points for n-point crossover",
    )


# =============================================================================
# Engine Configuration
# =============================================================================


class EngineConfig(BaseModel):
    """Configuration of the generational loop."""

    population_size: int = Field(
        default=20,
        ge=1,
        le=100_000,
        description="Number of individuals per generation",
    )

    recombination_probability: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Probability that a child is bred from two parents",
    )

    mutation_probability: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Probability that a child is mutated",
    )

    tournament_size: int = Field(
        default=2,
        ge=1,
        le=1000,
        description="Individuals drawn per tournament",
    )

    generations: int = Field(
        default=100,
        ge=0,
        le=1_000_000,
        description="Number of generations to breed",
    )

    target_fitness: float | None = Field(
        default=None,
        description="Stop early once the best fitness reaches this value",
    )


# =============================================================================
# Main Configuration
# =============================================================================


class GenalgConfig(BaseModel):
    """Complete configuration of an evolution run."""

    genotype: GenotypeConfig = Field(default_factory=GenotypeConfig)
    operators: OperatorsConfig = Field(default_factory=OperatorsConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    seed: int | None = Field(
        default=None,
        description="Seed for the shared random generator (unseeded if None)",
    )

    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @classmethod
    def from_yaml(cls, path: str | Path) -> GenalgConfig:
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML file

        Returns:
            GenalgConfig instance
        """
        import yaml

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        logger.info(f"Loaded configuration from {path}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str | Path) -> GenalgConfig:
        """
        Load configuration from JSON file.

        Args:
            path: Path to JSON file

        Returns:
            GenalgConfig instance
        """
        import json

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r") as f:
            data = json.load(f)

        logger.info(f"Loaded configuration from {path}")
        return cls(**data)

    @classmethod
    def from_env(cls, prefix: str = "GENALG_") -> GenalgConfig:
        """
        Load configuration from environment variables.

        Environment variables should be in the format:
        GENALG_ENGINE__POPULATION_SIZE=100
        GENALG_OPERATORS__BIT_FLIP_PROBABILITY=0.01

        Args:
            prefix: Environment variable prefix

        Returns:
            GenalgConfig instance
        """
        config_dict: dict[str, Any] = {}

        for key, value in _prefixed_env(prefix).items():
            parts = key[len(prefix):].lower().split("__")

            # Navigate/create nested structure
            current = config_dict
            for part in parts[:-1]:
                current = current.setdefault(part, {})

            current[parts[-1]] = _parse_env_value(value)

        logger.info(f"Loaded configuration from environment variables (prefix={prefix})")
        return cls(**config_dict)

    def to_yaml(self, path: str | Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            path: Path to YAML file
        """
        import yaml

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

        logger.info(f"Saved configuration to {path}")

    def to_json(self, path: str | Path) -> None:
        """
        Save configuration to JSON file.

        Args:
            path: Path to JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            f.write(self.model_dump_json(indent=2))

        logger.info(f"Saved configuration to {path}")


def _prefixed_env(prefix: str) -> dict[str, str]:
    return {key: value for key, value in os.environ.items() if key.startswith(prefix)}


def _parse_env_value(value: str) -> Any:
    """Best-effort conversion of an environment string to bool/int/float."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("none", "null"):
        return None

    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            continue

    return value


# =============================================================================
# Configuration Factory
# =============================================================================


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "GENALG_",
) -> GenalgConfig:
    """
    Load configuration with automatic format detection.

    Priority:
    1. Explicit config file (YAML or JSON)
    2. Environment variables
    3. Defaults

    Args:
        config_path: Path to config file (YAML or JSON)
        env_prefix: Environment variable prefix

    Returns:
        GenalgConfig instance
    """
    if config_path:
        path = Path(config_path)
        if path.suffix in (".yaml", ".yml"):
            return GenalgConfig.from_yaml(path)
        elif path.suffix == ".json":
            return GenalgConfig.from_json(path)
        else:
            raise ValueError(f"Unknown config format: {path.suffix}")

    if _prefixed_env(env_prefix):
        logger.info("Using configuration from environment variables")
        return GenalgConfig.from_env(env_prefix)

    logger.info("Using default configuration")
    return GenalgConfig()


__all__ = [
    "GenalgConfig",
    "GenotypeConfig",
    "OperatorsConfig",
    "EngineConfig",
    "load_config",
]
