"""
Pytest configuration and shared fixtures for genalg tests.

This module provides reusable test fixtures for:
- Seeded random sources and scripted draws
- Sample genotypes and populations
- OneMax configurations and counting fitness functions
- Log capture for loguru

Author: genalg developers
License: MIT
"""

import random
import tempfile
from pathlib import Path

import pytest
from loguru import logger

from genalg.genome import (
    BinaryGenotype,
    BitFlipMutation,
    Individual,
    NPointCrossover,
    OperatorBundle,
    Population,
    fraction_of_ones,
)


# ============================================================================
# Random Sources
# ============================================================================

class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)

    def random(self):
        return self.floats.pop(0)

    def randrange(self, start, stop=None):
        return self.ints.pop(0)


@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return random.Random(1234)


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


# ============================================================================
# Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ============================================================================
# Genome Fixtures
# ============================================================================

@pytest.fixture
def onemax_bundle(rng):
    """OneMax configuration over 16-bit genotypes."""
    return OperatorBundle(
        factory=lambda: BinaryGenotype.random(16, rng),
        mutation=BitFlipMutation(0.05, rng),
        recombination=NPointCrossover(2, rng),
        fitness=fraction_of_ones,
    )


class CountingFitness:
    """Fitness function that records how often it is called."""

    def __init__(self):
        self.calls = 0

    def __call__(self, genotype):
        self.calls += 1
        return fraction_of_ones(genotype)


@pytest.fixture
def counting_fitness():
    return CountingFitness()


@pytest.fixture
def counting_bundle(rng, counting_fitness):
    """OneMax configuration whose fitness calls are counted."""
    return OperatorBundle(
        factory=lambda: BinaryGenotype.random(16, rng),
        mutation=BitFlipMutation(0.05, rng),
        recombination=NPointCrossover(1, rng),
        fitness=counting_fitness,
    )


@pytest.fixture
def ranked_population():
    """Five evaluated individuals with fitness 0.0 .. 4.0."""
    return Population(
        Individual(BinaryGenotype.from_string(f"{i:04b}"), fitness=float(i))
        for i in range(5)
    )


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture
def log_messages():
    """Capture loguru records at WARNING and above."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="WARNING")
    yield messages
    logger.remove(handler_id)
