"""
CLI Commands for genalg.

Provides command-line interface using Click framework.

Author: genalg developers
License: MIT
"""

import json
import random
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from loguru import logger

from genalg.config import GenalgConfig, load_config
from genalg.genome import BinaryGenotype
from genalg.monitoring import configure_logging, get_logger

log = get_logger("cli")


# Main CLI group
@click.group()
@click.version_option(version="0.1.0")
@click.option("--config", "-c", type=click.Path(exists=True), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also write logs to this file")
@click.option("--json-logs", is_flag=True, help="Serialize log records as JSON")
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool, log_file: Optional[str], json_logs: bool):
    """
    genalg - generic genetic algorithm engine.

    Evolves bit-string genotypes with tournament selection,
    n-point crossover and bit-flip mutation.
    """
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["log_file"] = Path(log_file) if log_file else None
    ctx.obj["json_logs"] = json_logs

    _configure(ctx, "DEBUG" if verbose else "INFO")


def _configure(ctx, log_level: str) -> None:
    configure_logging(
        log_level=log_level,
        log_file=ctx.obj.get("log_file"),
        serialize=ctx.obj.get("json_logs", False),
    )


def _load(ctx) -> GenalgConfig:
    try:
        return load_config(ctx.obj.get("config"))
    except Exception as e:
        log.error(f"Could not load configuration: {e}")
        sys.exit(1)


# Random genotype command
@cli.command("random")
@click.option("--size", "-s", type=int, default=32, help="Number of bits")
@click.option("--seed", type=int, default=None, help="Random seed")
def random_genotype(size: int, seed: Optional[int]):
    """Print one random binary genotype."""
    try:
        genotype = BinaryGenotype.random(size, random.Random(seed))
    except ValueError as e:
        log.error(f"Invalid genotype size: {e}")
        sys.exit(1)

    click.echo(str(genotype))


# Evolution command
@cli.command()
@click.option("--generations", "-g", type=int, default=None, help="Number of generations")
@click.option("--population", "-p", type=int, default=None, help="Population size")
@click.option("--length", "-l", type=int, default=None, help="Genotype length in bits")
@click.option("--bit-flip", "-m", type=float, default=None, help="Per-bit mutation probability")
@click.option("--tournament", "-t", type=int, default=None, help="Tournament group size")
@click.option("--seed", type=int, default=None, help="Random seed")
@click.option("--target", type=float, default=None, help="Stop once best fitness reaches this value")
@click.option("--show-population", is_flag=True, help="Print the final population")
@click.pass_context
def run(
    ctx,
    generations: Optional[int],
    population: Optional[int],
    length: Optional[int],
    bit_flip: Optional[float],
    tournament: Optional[int],
    seed: Optional[int],
    target: Optional[float],
    show_population: bool,
):
    """Evolve OneMax bit strings."""
    from genalg.orchestrator import build_engine

    config = _load(ctx)

    overrides = {
        ("engine", "generations"): generations,
        ("engine", "population_size"): population,
        ("engine", "tournament_size"): tournament,
        ("engine", "target_fitness"): target,
        ("genotype", "length"): length,
        ("operators", "bit_flip_probability"): bit_flip,
    }

    try:
        data = config.model_dump()
        for (section, key), value in overrides.items():
            if value is not None:
                data[section][key] = value
        if seed is not None:
            data["seed"] = seed
        config = GenalgConfig(**data)

        if not ctx.obj.get("verbose"):
            _configure(ctx, config.log_level)

        logger.info(
            f"Starting evolution: generations={config.engine.generations}, "
            f"population={config.engine.population_size}, length={config.genotype.length}"
        )

        engine = build_engine(config)
        history = engine.run(
            config.engine.generations,
            target_fitness=config.engine.target_fitness,
        )
    except Exception as e:
        logger.error(f"Evolution failed: {e}")
        sys.exit(1)

    best = engine.best()
    logger.success(f"Evolution complete after {engine.generation} generations")

    if show_population:
        click.echo(str(engine))

    click.echo(f"generations = {engine.generation}")
    click.echo(f"best genotype = {best.genotype}")
    click.echo(f"best fitness = {best.fitness}")
    click.echo(f"avg. fitness = {history[-1].avg_fitness}")


# Configuration commands
@cli.group()
def config():
    """Configuration management."""


@config.command("show")
@click.option("--format", "fmt", type=click.Choice(["yaml", "json"]), default="yaml", help="Output format")
@click.pass_context
def show_config(ctx, fmt: str):
    """Print the effective configuration."""
    settings = _load(ctx)

    if fmt == "json":
        click.echo(json.dumps(settings.model_dump(), indent=2))
    else:
        click.echo(yaml.dump(settings.model_dump(), default_flow_style=False, sort_keys=False))


__all__ = ["cli"]
