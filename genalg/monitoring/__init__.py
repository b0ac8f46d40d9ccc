"""
Monitoring and Observability for genalg.

Structured logging of evolution runs.

Author: genalg developers
License: MIT
"""

from .logging_config import LogContext, configure_logging, get_logger, log_generation

__all__ = [
    "configure_logging",
    "get_logger",
    "LogContext",
    "log_generation",
]
