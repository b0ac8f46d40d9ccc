"""
Parent Selection

A SelectionStrategy is bound to one evaluated population and yields a
Selector that keeps handing out parents for the next generation. The
selector owns the population it was built from; nothing else should touch
that generation once selection has begun.

Author: genalg developers
Python: 3.10+
"""

from __future__ import annotations

import random
from typing import Generic, Protocol

from loguru import logger

from .encoding import G
from .population import Individual, Population


class Selector(Protocol[G]):
    """Repeatedly chooses a parent from a bound population."""

    def select(self) -> Individual[G]:
        ...


class SelectionStrategy(Protocol[G]):
    """Builds a Selector that takes over a population."""

    def select_from(self, population: Population[G]) -> Selector[G]:
        ...


# =============================================================================
# Tournament Selection
# =============================================================================


def _improves(candidate: Individual, best: Individual) -> bool:
    """
    Strict improvement test.

    Unknown fitness ranks below every known fitness, and two unknowns are
    never an improvement over each other.
    """
    if candidate.fitness is None:
        return False
    if best.fitness is None:
        return True
    return candidate.fitness > best.fitness


class TournamentSelection:
    """Best-of-group selection with uniform sampling and replacement."""

    def __init__(self, group_size: int, rng: random.Random | None = None):
        """
        Initialize tournament selection.

        Args:
            group_size: Individuals drawn per tournament (1 means no
                selection pressure)
            rng: Random source (fresh generator if None)

        Raises:
            ValueError: If group_size < 1
        """
        if group_size < 1:
            raise ValueError(f"Tournament group size must be >= 1 (got {group_size})")

        self.group_size = group_size
        self.rng = rng or random.Random()

        logger.info("Initialized TournamentSelection", group_size=group_size)

    def select_from(self, population: Population[G]) -> TournamentSelector[G]:
        """
        Hand a population over to a new selector.

        Args:
            population: Generation to select parents from

        Returns:
            Selector owning the population

        Raises:
            ValueError: If the population is empty
        """
        if population.size() == 0:
            raise ValueError("Cannot select from an empty population")

        if population.statistics().evaluated == 0:
            # Every tournament is then won by its first draw
            logger.warning(
                "Tournament selection on a population without evaluated individuals",
                size=population.size(),
            )

        return TournamentSelector(population, self.group_size, self.rng)

    def __repr__(self) -> str:
        return f"TournamentSelection(group_size={self.group_size})"


class TournamentSelector(Generic[G]):
    """Selector produced by TournamentSelection."""

    def __init__(self, population: Population[G], group_size: int, rng: random.Random):
        self.population = population
        self.group_size = group_size
        self.rng = rng

    def select(self) -> Individual[G]:
        """
        Run one tournament.

        Returns:
            The fittest of ``group_size`` draws, the earliest draw on ties
        """
        best = self._draw()

        for _ in range(1, self.group_size):
            other = self._draw()
            if _improves(other, best):
                best = other

        return best

    def _draw(self) -> Individual[G]:
        return self.population.individuals[self.rng.randrange(len(self.population.individuals))]


__all__ = [
    "Selector",
    "SelectionStrategy",
    "TournamentSelection",
    "TournamentSelector",
]
