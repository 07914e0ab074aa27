"""
Cross-cutting Concerns

Logging and error translation shared across layers.
"""

from .logging import setup_logging, get_logger
from .error_handling import ConstructionErrorHandler

__all__ = [
    "setup_logging",
    "get_logger",
    "ConstructionErrorHandler",
]
