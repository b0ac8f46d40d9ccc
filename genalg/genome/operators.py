"""
Genome Evolution Operators - Mutation & Crossover

This module implements the genetic operators for bit-string genotypes:
- Mutation: flip each bit independently with a fixed probability
- Crossover: combine two parents by exchanging segments between n points

Both operator kinds are expressed as protocols so that problem-specific
genotypes can bring their own operators.

Author: genalg developers
Python: 3.10+
"""

from __future__ import annotations

import math
import random
import sys
from typing import Protocol

from loguru import logger

from .encoding import G, BinaryGenotype


# =============================================================================
# Operator Capabilities
# =============================================================================


class MutationOperator(Protocol[G]):
    """In-place stochastic perturbation of a genotype."""

    def mutate(self, target: G) -> None:
        ...


class RecombinationOperator(Protocol[G]):
    """Produces one child genotype from two parents."""

    def recombine(self, parent1: G, parent2: G) -> G:
        ...


# =============================================================================
# Mutation Operators
# =============================================================================


# Largest cursor step; an offset at or above it ends the mutation pass
MAX_STEP = sys.maxsize


class BitFlipMutation:
    """
    Flips every bit independently with probability ``p``.

    Instead of rolling a die for every bit, the operator draws the distance
    to the next flipped bit directly. The gap between two successes of a
    Bernoulli(p) process is geometric:

        P(gap <= N) = 1 - (1 - p)^(N + 1)

    so inverting the CDF for a uniform draw ``u`` in [0, 1) gives

        offset = floor( ln(1 - u) / ln(1 - p) )

    non-flipped bits before the next flip. A pass therefore costs
    O(L * p) draws on average instead of O(L).
    """

    def __init__(self, probability: float, rng: random.Random | None = None):
        """
        Initialize bit-flip mutation.

        Args:
            probability: Per-bit flip probability, strictly between 0 and 1
            rng: Random source (fresh generator if None)

        Raises:
            ValueError: If probability is outside (0, 1)
        """
        if not (0.0 < probability < 1.0):
            raise ValueError(f"Bit flip probability must be in (0, 1) (got {probability})")

        self.probability = probability
        self.rng = rng or random.Random()

        # ln(1 - p), shared by every offset draw
        self._denominator = math.log1p(-probability)

        logger.info("Initialized BitFlipMutation", probability=probability)

    def mutate(self, target: BinaryGenotype) -> None:
        """
        Mutate a genotype in place.

        Args:
            target: Genotype to perturb
        """
        length = len(target)
        index = 0

        while True:
            index += self._next_offset()
            if index >= length:
                return

            target.flip(index)
            index += 1

    def _next_offset(self) -> int:
        """Number of bits to skip before the next flip."""
        numerator = math.log1p(-self.rng.random())
        offset = numerator / self._denominator

        # Truncate toward zero, saturating huge and infinite steps
        if not offset < MAX_STEP:
            return MAX_STEP
        return int(offset)

    def __repr__(self) -> str:
        return f"BitFlipMutation(probability={self.probability})"


# =============================================================================
# Crossover Operators
# =============================================================================


class NPointCrossover:
    """
    N-point crossover for bit strings.

    Draws ``n`` cut points and alternates between the parents' material at
    each cut, always starting with parent 1. The child has the length of
    parent 1.
    """

    def __init__(self, points: int, rng: random.Random | None = None):
        """
        Initialize n-point crossover.

        Args:
            points: Number of crossover points (n >= 1)
            rng: Random source (fresh generator if None)

        Raises:
            ValueError: If points < 1
        """
        if points < 1:
            raise ValueError(f"Number of crossover points must be >= 1 (got {points})")

        self.points = points
        self.rng = rng or random.Random()

        logger.info("Initialized NPointCrossover", points=points)

    def recombine(self, parent1: BinaryGenotype, parent2: BinaryGenotype) -> BinaryGenotype:
        """
        Combine two parents into one child.

        Args:
            parent1: Parent providing the leading segment and the child length
            parent2: Parent providing every other segment

        Returns:
            Child genotype

        Raises:
            ValueError: If the parents share fewer than two bits
        """
        common = min(len(parent1), len(parent2))
        if common < 2:
            raise ValueError(
                f"Crossover needs parents with at least 2 common bits (got {common})"
            )

        cuts = sorted(self.rng.randrange(1, common) for _ in range(self.points))
        if self.points % 2 == 1:
            # Close the last open segment
            cuts.append(len(parent1))

        child = parent1.clone()
        for start, stop in zip(cuts[0::2], cuts[1::2]):
            # parent2 may be shorter than the padded segment
            stop = min(stop, len(parent2))
            child.bits[start:stop] = parent2.bits[start:stop]

        return child

    def __repr__(self) -> str:
        return f"NPointCrossover(points={self.points})"


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "MutationOperator",
    "RecombinationOperator",
    "BitFlipMutation",
    "NPointCrossover",
    "MAX_STEP",
]
