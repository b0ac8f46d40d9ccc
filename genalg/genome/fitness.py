"""
Fitness Evaluation Module

Bundles the problem-specific pieces of a run (genotype factory, mutation,
recombination and fitness function) behind one capability, and ships the
OneMax fitness functions used by the demo and tests.

Fitness is a plain float, higher is better. Fitness functions must be
deterministic: the engine caches the value per individual.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Generic, Protocol

from loguru import logger

from .encoding import G, BinaryGenotype
from .operators import (
    BitFlipMutation,
    MutationOperator,
    NPointCrossover,
    RecombinationOperator,
)


class EvolutionConfig(Protocol[G]):
    """Everything the engine needs to know about one genotype type."""

    def create(self) -> G:
        ...

    def mutate(self, genotype: G) -> None:
        ...

    def recombine(self, parent1: G, parent2: G) -> G:
        ...

    def evaluate(self, genotype: G) -> float:
        ...


@dataclass
class OperatorBundle(Generic[G]):
    """EvolutionConfig assembled from independent parts."""

    factory: Callable[[], G]
    mutation: MutationOperator[G]
    recombination: RecombinationOperator[G]
    fitness: Callable[[G], float]

    def create(self) -> G:
        return self.factory()

    def mutate(self, genotype: G) -> None:
        self.mutation.mutate(genotype)

    def recombine(self, parent1: G, parent2: G) -> G:
        return self.recombination.recombine(parent1, parent2)

    def evaluate(self, genotype: G) -> float:
        return float(self.fitness(genotype))


# =============================================================================
# OneMax
# =============================================================================


def count_ones(genotype: BinaryGenotype) -> float:
    """Number of set bits."""
    return float(genotype.count_ones())


def fraction_of_ones(genotype: BinaryGenotype) -> float:
    """Share of set bits in [0, 1]; 1.0 only for the all-ones genotype."""
    if len(genotype) == 0:
        return 0.0
    return genotype.count_ones() / len(genotype)


def onemax_config(
    length: int,
    bit_flip_probability: float,
    crossover_points: int = 1,
    rng: random.Random | None = None,
) -> OperatorBundle[BinaryGenotype]:
    """
    Build the OneMax configuration for bit strings.

    Args:
        length: Genotype length in bits
        bit_flip_probability: Per-bit mutation probability
        crossover_points: Number of crossover points
        rng: Random source shared by factory and operators

    Returns:
        OperatorBundle maximizing the fraction of set bits
    """
    rng = rng or random.Random()

    logger.info(
        "Building OneMax configuration",
        length=length,
        bit_flip_probability=bit_flip_probability,
        crossover_points=crossover_points,
    )

    return OperatorBundle(
        factory=lambda: BinaryGenotype.random(length, rng),
        mutation=BitFlipMutation(bit_flip_probability, rng),
        recombination=NPointCrossover(crossover_points, rng),
        fitness=fraction_of_ones,
    )


__all__ = [
    "EvolutionConfig",
    "OperatorBundle",
    "count_ones",
    "fraction_of_ones",
    "onemax_config",
]
