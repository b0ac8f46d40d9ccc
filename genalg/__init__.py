"""
genalg - Generic Genetic Algorithm Engine

Evolves populations of pluggable genotypes through tournament selection,
recombination and mutation, with a bit-string genotype and its operators
built in.
"""

# Core genome system
from genalg.genome import (
    Genotype,
    BinaryGenotype,
    MutationOperator,
    RecombinationOperator,
    BitFlipMutation,
    NPointCrossover,
    EvolutionConfig,
    OperatorBundle,
    fraction_of_ones,
    onemax_config,
    Individual,
    Population,
    PopulationStatistics,
    Selector,
    SelectionStrategy,
    TournamentSelection,
)

# Configuration
from genalg.config import (
    GenalgConfig,
    GenotypeConfig,
    OperatorsConfig,
    EngineConfig,
    load_config,
)

# Orchestrator
from genalg.orchestrator import (
    EvolutionEngine,
    build_engine,
)

__all__ = [
    # Genome system
    "Genotype",
    "BinaryGenotype",
    "MutationOperator",
    "RecombinationOperator",
    "BitFlipMutation",
    "NPointCrossover",
    "EvolutionConfig",
    "OperatorBundle",
    "fraction_of_ones",
    "onemax_config",
    "Individual",
    "Population",
    "PopulationStatistics",
    "Selector",
    "SelectionStrategy",
    "TournamentSelection",
    # Configuration
    "GenalgConfig",
    "GenotypeConfig",
    "OperatorsConfig",
    "EngineConfig",
    "load_config",
    # Orchestrator
    "EvolutionEngine",
    "build_engine",
]

__version__ = "0.1.0"
