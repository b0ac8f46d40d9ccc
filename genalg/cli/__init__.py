"""
Command Line Interface for genalg.

Commands:
- genalg random: Print a random bit-string genotype
- genalg run: Evolve OneMax bit strings
- genalg config show: Print the effective configuration

Author: genalg developers
License: MIT
"""

from .commands import cli

__all__ = ["cli"]
__version__ = "0.1.0"
