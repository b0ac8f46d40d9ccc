"""
OneMax Evolution Example

Demonstrates a caller-driven evolution loop on 32-bit strings: the engine is
evaluated and bred generation by generation until the all-ones genotype
appears or the generation budget runs out.

Author: genalg developers
"""

import random

from genalg import (
    BinaryGenotype,
    BitFlipMutation,
    EvolutionEngine,
    NPointCrossover,
    OperatorBundle,
    TournamentSelection,
    fraction_of_ones,
)
from genalg.monitoring import configure_logging


GENOTYPE_LENGTH = 32
POPULATION_SIZE = 20
MAX_GENERATIONS = 100


def main():
    configure_logging(log_level="WARNING")
    rng = random.Random(7)

    print("=" * 60)
    print("GENALG ONEMAX EXAMPLE")
    print("=" * 60)
    print()

    # ==========================================================================
    # STEP 1: Assemble the problem
    # ==========================================================================
    config = OperatorBundle(
        factory=lambda: BinaryGenotype.random(GENOTYPE_LENGTH, rng),
        mutation=BitFlipMutation(0.02, rng),
        recombination=NPointCrossover(1, rng),
        fitness=fraction_of_ones,
    )

    engine = EvolutionEngine(
        pop_size=POPULATION_SIZE,
        config=config,
        selection=TournamentSelection(2, rng),
        rng=rng,
    )

    # ==========================================================================
    # STEP 2: Evolve
    # ==========================================================================
    engine.start()

    for generation in range(MAX_GENERATIONS):
        stats = engine.evaluate()
        print(f"Generation {generation:3d}: best = {stats.best_fitness:.4f}, avg. = {stats.avg_fitness:.4f}")

        if stats.best_fitness >= 1.0:
            break

        engine.breed()

    # ==========================================================================
    # STEP 3: Report
    # ==========================================================================
    engine.evaluate()
    print()
    print(engine)
    print()
    print(f"Best genotype: {engine.best().genotype}")


if __name__ == "__main__":
    main()
