"""
genalg Genome System

Genotype encodings, genetic operators, the population data model and
parent selection.
"""

# Core encoding
from .encoding import (
    Genotype,
    BinaryGenotype,
)

# Evolution operators
from .operators import (
    MutationOperator,
    RecombinationOperator,
    BitFlipMutation,
    NPointCrossover,
)

# Fitness evaluation
from .fitness import (
    EvolutionConfig,
    OperatorBundle,
    count_ones,
    fraction_of_ones,
    onemax_config,
)

# Population management
from .population import (
    Individual,
    Population,
    PopulationStatistics,
)

# Selection
from .selection import (
    Selector,
    SelectionStrategy,
    TournamentSelection,
    TournamentSelector,
)

__all__ = [
    # Encoding
    "Genotype",
    "BinaryGenotype",
    # Operators
    "MutationOperator",
    "RecombinationOperator",
    "BitFlipMutation",
    "NPointCrossover",
    # Fitness
    "EvolutionConfig",
    "OperatorBundle",
    "count_ones",
    "fraction_of_ones",
    "onemax_config",
    # Population
    "Individual",
    "Population",
    "PopulationStatistics",
    # Selection
    "Selector",
    "SelectionStrategy",
    "TournamentSelection",
    "TournamentSelector",
]
