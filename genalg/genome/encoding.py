"""
Genotype Encoding

This module defines how candidate solutions are represented:
- Genotype: the capability every candidate solution must satisfy
- BinaryGenotype: fixed-length bit string backed by a NumPy boolean array

Genotypes are plain values. A clone never shares its buffer with the
original, so breeding can copy parents without touching the old generation.

Author: genalg developers
Python: 3.10+
"""

from __future__ import annotations

import random
from typing import Any, Iterator, Protocol, TypeVar, runtime_checkable

import numpy as np


# =============================================================================
# Genotype Capability
# =============================================================================


@runtime_checkable
class Genotype(Protocol):
    """Anything that renders as text and can be deep-cloned."""

    def clone(self) -> Any:
        ...

    def __str__(self) -> str:
        ...


G = TypeVar("G", bound=Genotype)


# =============================================================================
# Binary Genotype
# =============================================================================


class BinaryGenotype:
    """
    Fixed-length bit string.

    The length is set at construction and never changes; mutation and
    crossover only rewrite bits in place.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: Any):
        """
        Create a genotype from any sequence of truthy/falsy values.

        Args:
            bits: Bit values (copied, never aliased)
        """
        array = np.array(bits, dtype=bool)
        if array.ndim != 1:
            raise ValueError(f"Genotype bits must be one-dimensional (got shape {array.shape})")

        self.bits = array

    @classmethod
    def random(cls, size: int, rng: random.Random | None = None) -> BinaryGenotype:
        """
        Create a genotype whose bits are independent fair coin flips.

        Args:
            size: Number of bits
            rng: Random source (module-level generator if None)

        Returns:
            Randomly filled genotype
        """
        _check_size(size)
        rng = rng or random
        return cls([rng.random() < 0.5 for _ in range(size)])

    @classmethod
    def zeros(cls, size: int) -> BinaryGenotype:
        """Create a genotype with every bit cleared."""
        _check_size(size)
        return cls(np.zeros(size, dtype=bool))

    @classmethod
    def ones(cls, size: int) -> BinaryGenotype:
        """Create a genotype with every bit set."""
        _check_size(size)
        return cls(np.ones(size, dtype=bool))

    @classmethod
    def from_string(cls, text: str) -> BinaryGenotype:
        """
        Parse the text rendering produced by ``str(genotype)``.

        Args:
            text: String of '0' and '1' characters

        Returns:
            Genotype with the same bit sequence

        Raises:
            ValueError: If the text contains anything but '0' and '1'
        """
        invalid = set(text) - {"0", "1"}
        if invalid:
            raise ValueError(
                f"Binary genotype text may only contain '0' and '1' (got {sorted(invalid)})"
            )

        return cls([char == "1" for char in text])

    def clone(self) -> BinaryGenotype:
        """Deep copy with an independent bit buffer."""
        return type(self)(self.bits)

    def flip(self, index: int) -> None:
        """Invert a single bit in place."""
        self.bits[index] = not self.bits[index]

    def count_ones(self) -> int:
        """Number of set bits (Hamming weight)."""
        return int(np.count_nonzero(self.bits))

    def __len__(self) -> int:
        return len(self.bits)

    def __getitem__(self, index: int) -> bool:
        return bool(self.bits[index])

    def __setitem__(self, index: int, value: bool) -> None:
        self.bits[index] = value

    def __iter__(self) -> Iterator[bool]:
        return (bool(bit) for bit in self.bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryGenotype):
            return NotImplemented
        return bool(np.array_equal(self.bits, other.bits))

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self.bits)

    def __repr__(self) -> str:
        return f"BinaryGenotype('{self}')"


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"Genotype size must be >= 0 (got {size})")


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "Genotype",
    "BinaryGenotype",
    "G",
]
