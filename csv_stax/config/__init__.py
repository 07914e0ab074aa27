"""
Configuration Module

Application settings and configuration management.
"""

from .schemas import WriterFactoryConfig, DEFAULT_WRITER_FACTORY
from .settings import (
    AppConfig,
    WriterConfig,
    LoggingConfig,
    get_default_config,
)

__all__ = [
    "AppConfig",
    "WriterConfig",
    "LoggingConfig",
    "WriterFactoryConfig",
    "DEFAULT_WRITER_FACTORY",
    "get_default_config",
]
