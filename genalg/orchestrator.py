"""
Evolution Orchestrator

Drives the generational loop of a genetic algorithm.

Features:
- Initialize a population from the run's EvolutionConfig
- Lazy, memoized fitness evaluation
- Breed a full replacement generation through a selection strategy
- Caller-driven run helper with per-generation statistics

Author: genalg developers
Python: 3.10+
"""

from __future__ import annotations

import random
from typing import Callable, Generic

from loguru import logger

from genalg.config import GenalgConfig
from genalg.genome import (
    BinaryGenotype,
    EvolutionConfig,
    Individual,
    Population,
    PopulationStatistics,
    SelectionStrategy,
    TournamentSelection,
    onemax_config,
)
from genalg.genome.encoding import G
from genalg.monitoring import log_generation


DEFAULT_RECOMBINATION_PROBABILITY = 0.8
DEFAULT_MUTATION_PROBABILITY = 0.8
DEFAULT_TOURNAMENT_SIZE = 2


# =============================================================================
# Evolution Engine
# =============================================================================


class EvolutionEngine(Generic[G]):
    """
    Generational genetic algorithm.

    Lifecycle: uninitialized (no population) -> ``start()`` -> repeated
    ``evaluate()`` / ``breed()``. There is no terminal state; the caller
    decides when to stop.
    """

    def __init__(
        self,
        pop_size: int,
        config: EvolutionConfig[G],
        selection: SelectionStrategy[G] | None = None,
        recombination_probability: float = DEFAULT_RECOMBINATION_PROBABILITY,
        mutation_probability: float = DEFAULT_MUTATION_PROBABILITY,
        rng: random.Random | None = None,
    ):
        """
        Initialize evolution engine.

        Args:
            pop_size: Number of individuals per generation
            config: Problem-specific factory, operators and fitness
            selection: Parent selection strategy (tournament of
                DEFAULT_TOURNAMENT_SIZE if None)
            recombination_probability: Chance a child comes from two parents
            mutation_probability: Chance a child is mutated
            rng: Random source for breeding decisions (fresh if None)

        Raises:
            ValueError: If any parameter is out of range
        """
        errors = []

        if pop_size < 1:
            errors.append("pop_size must be >= 1")

        if not (0.0 <= recombination_probability <= 1.0):
            errors.append("recombination_probability must be in [0, 1]")

        if not (0.0 <= mutation_probability <= 1.0):
            errors.append("mutation_probability must be in [0, 1]")

        if errors:
            raise ValueError(f"Invalid engine parameters: {', '.join(errors)}")

        self.pop_size = pop_size
        self.config = config
        self.recombination_probability = recombination_probability
        self.mutation_probability = mutation_probability
        self.rng = rng or random.Random()
        self.selection = selection or TournamentSelection(DEFAULT_TOURNAMENT_SIZE, self.rng)

        # State
        self.population: Population[G] | None = None
        self.generation = 0

        logger.info(
            "Initialized EvolutionEngine",
            pop_size=pop_size,
            recombination_probability=recombination_probability,
            mutation_probability=mutation_probability,
            selection=repr(self.selection),
        )

    def start(self) -> Population[G]:
        """Discard any current population and create a fresh one."""
        population: Population[G] = Population()
        population.populate(self.pop_size, self.config)

        self.population = population
        self.generation = 0

        logger.info("Population initialized", size=population.size())
        return population

    def evaluate(self) -> PopulationStatistics | None:
        """
        Compute fitness for every individual that has none yet.

        Already evaluated individuals are left untouched, so repeated calls
        are cheap.

        Returns:
            Statistics of the evaluated population, None before ``start()``
        """
        if self.population is None:
            logger.debug("evaluate() called before start(); nothing to do")
            return None

        return self._evaluate_population(self.population)

    def _evaluate_population(self, population: Population[G]) -> PopulationStatistics:
        computed = 0
        for individual in population:
            if individual.fitness is None:
                individual.fitness = self.config.evaluate(individual.genotype)
                computed += 1

        stats = population.statistics()
        logger.debug(
            "Population evaluated",
            generation=self.generation,
            computed=computed,
            best=stats.best_fitness,
        )

        return stats

    def breed(self) -> Population[G]:
        """
        Replace the population with a new generation.

        The current population is handed to the selector and the engine
        keeps no reference to it.

        Returns:
            The new, unevaluated population

        Raises:
            RuntimeError: If called before ``start()``
        """
        if self.population is None:
            raise RuntimeError("breed() called before start(): no population to breed from")

        old_population, self.population = self.population, None
        selector = self.selection.select_from(old_population)
        del old_population

        offspring: Population[G] = Population()
        recombined = 0
        mutated = 0

        while offspring.size() < self.pop_size:
            if self.rng.random() < self.recombination_probability:
                parent1 = selector.select()
                parent2 = selector.select()
                genotype = self.config.recombine(parent1.genotype, parent2.genotype)
                recombined += 1
            else:
                genotype = selector.select().genotype.clone()

            if self.rng.random() < self.mutation_probability:
                self.config.mutate(genotype)
                mutated += 1

            offspring.add(Individual(genotype))

        self.population = offspring
        self.generation += 1

        logger.debug(
            "Generation bred",
            generation=self.generation,
            recombined=recombined,
            mutated=mutated,
        )
        return offspring

    def best(self) -> Individual[G] | None:
        """Fittest evaluated individual of the current population."""
        if self.population is None:
            return None
        return self.population.best()

    def run(
        self,
        generations: int,
        target_fitness: float | None = None,
        callback: Callable[[int, PopulationStatistics], None] | None = None,
    ) -> list[PopulationStatistics]:
        """
        Evaluate and breed for a number of generations.

        Starts the engine if needed. The final generation is evaluated as
        well, so the returned history has ``generations + 1`` entries unless
        the target fitness is reached earlier.

        Args:
            generations: Number of ``breed()`` calls
            target_fitness: Stop as soon as the best fitness reaches it
            callback: Called with (generation, statistics) after each evaluation

        Returns:
            Statistics of every evaluated generation
        """
        population = self.population if self.population is not None else self.start()

        history: list[PopulationStatistics] = []

        for remaining in range(generations, -1, -1):
            stats = self._evaluate_population(population)
            history.append(stats)

            log_generation(self.generation, stats)
            if callback is not None:
                callback(self.generation, stats)

            if _reached(stats, target_fitness):
                logger.info(
                    "Target fitness reached",
                    generation=self.generation,
                    best=stats.best_fitness,
                )
                break

            if remaining:
                population = self.breed()

        return history

    def __str__(self) -> str:
        if self.population is None:
            return ""
        return f"Population:\n{self.population}"


def _reached(stats: PopulationStatistics, target_fitness: float | None) -> bool:
    return (
        target_fitness is not None
        and stats.best_fitness is not None
        and stats.best_fitness >= target_fitness
    )


# =============================================================================
# Factory
# =============================================================================


def build_engine(config: GenalgConfig) -> EvolutionEngine[BinaryGenotype]:
    """
    Wire a OneMax engine from a run configuration.

    All components share one random generator, seeded from ``config.seed``.

    Args:
        config: Run configuration

    Returns:
        Engine ready for ``start()``
    """
    rng = random.Random(config.seed)

    evolution_config = onemax_config(
        length=config.genotype.length,
        bit_flip_probability=config.operators.bit_flip_probability,
        crossover_points=config.operators.crossover_points,
        rng=rng,
    )

    return EvolutionEngine(
        pop_size=config.engine.population_size,
        config=evolution_config,
        selection=TournamentSelection(config.engine.tournament_size, rng),
        recombination_probability=config.engine.recombination_probability,
        mutation_probability=config.engine.mutation_probability,
        rng=rng,
    )


__all__ = [
    "EvolutionEngine",
    "build_engine",
    "DEFAULT_RECOMBINATION_PROBABILITY",
    "DEFAULT_MUTATION_PROBABILITY",
    "DEFAULT_TOURNAMENT_SIZE",
]
