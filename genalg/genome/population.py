"""
Population Management

This module holds the data model of one generation:
- Individual: one genotype plus its lazily computed fitness
- Population: ordered, growable collection of individuals
- Population statistics (best, average, worst fitness)

Author: genalg developers
Python: 3.10+
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Generic, Iterable, Iterator

from .encoding import G

if TYPE_CHECKING:
    from .fitness import EvolutionConfig


# =============================================================================
# Individual
# =============================================================================


@dataclass(eq=False)
class Individual(Generic[G]):
    """
    A genotype and its cached fitness.

    The individual exclusively owns its genotype. ``fitness`` is None until
    evaluated and is never recomputed afterwards.
    """

    genotype: G
    fitness: float | None = None

    @property
    def evaluated(self) -> bool:
        return self.fitness is not None

    def __str__(self) -> str:
        if self.fitness is None:
            return str(self.genotype)
        return f"{self.genotype} fitness = {self.fitness}"


# =============================================================================
# Population Statistics
# =============================================================================


@dataclass
class PopulationStatistics:
    """Fitness summary over the evaluated individuals of a population."""

    size: int
    evaluated: int

    # None until at least one individual is evaluated
    best_fitness: float | None
    avg_fitness: float | None
    min_fitness: float | None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


# =============================================================================
# Population
# =============================================================================


class Population(Generic[G]):
    """
    Ordered collection of individuals.

    Order carries no meaning for selection but is kept for iteration and
    rendering.
    """

    def __init__(self, individuals: Iterable[Individual[G]] | None = None):
        self.individuals: list[Individual[G]] = list(individuals or [])

    def populate(self, target_size: int, config: EvolutionConfig[G]) -> None:
        """
        Grow the population with fresh individuals until it reaches a size.

        Never shrinks: a population already at or above ``target_size`` is
        left untouched.

        Args:
            target_size: Desired number of individuals
            config: Source of new genotypes
        """
        while len(self.individuals) < target_size:
            self.individuals.append(Individual(config.create()))

    def add(self, individual: Individual[G]) -> None:
        self.individuals.append(individual)

    def size(self) -> int:
        return len(self.individuals)

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self) -> Iterator[Individual[G]]:
        return iter(self.individuals)

    def __getitem__(self, index: int) -> Individual[G]:
        return self.individuals[index]

    def best(self) -> Individual[G] | None:
        """
        Fittest evaluated individual.

        Returns:
            The first individual holding the highest known fitness, or None
            if nothing is evaluated yet
        """
        best: Individual[G] | None = None
        for individual in self.individuals:
            if individual.fitness is None:
                continue
            if best is None or individual.fitness > best.fitness:  # type: ignore[operator]
                best = individual
        return best

    def statistics(self) -> PopulationStatistics:
        """
        Compute fitness statistics over evaluated individuals.

        Returns:
            Population statistics
        """
        fitness_values = [
            individual.fitness
            for individual in self.individuals
            if individual.fitness is not None
        ]

        if not fitness_values:
            return PopulationStatistics(
                size=len(self.individuals),
                evaluated=0,
                best_fitness=None,
                avg_fitness=None,
                min_fitness=None,
            )

        return PopulationStatistics(
            size=len(self.individuals),
            evaluated=len(fitness_values),
            best_fitness=max(fitness_values),
            avg_fitness=sum(fitness_values) / len(fitness_values),
            min_fitness=min(fitness_values),
        )

    def __str__(self) -> str:
        lines = "".join(f"{individual}\n" for individual in self.individuals)

        stats = self.statistics()
        if stats.evaluated == 0:
            return lines

        return f"{lines}best = {stats.best_fitness}, avg. = {stats.avg_fitness}"

    def __repr__(self) -> str:
        return f"Population(size={len(self.individuals)})"


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "Individual",
    "Population",
    "PopulationStatistics",
]
