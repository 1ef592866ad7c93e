"""Utility modules for Culebra.

Provides:
- logger: get_logger for module loggers, configure_logging for the CLI
"""

from culebra.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
