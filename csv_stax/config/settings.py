"""
Application Configuration

Settings for writer selection and logging.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Mapping
from pathlib import Path
import os

from dotenv import load_dotenv
from pydantic import ValidationError

from ..domain.exceptions import WriterConfigurationError
from .schemas import WriterFactoryConfig, DEFAULT_WRITER_FACTORY


@dataclass
class WriterConfig:
    """Writer factory selection."""

    type: str = DEFAULT_WRITER_FACTORY
    options: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "options": dict(self.options)}


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    log_file: Optional[str] = None
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


@dataclass
class AppConfig:
    """
    Main application configuration.

    Aggregates all component configurations.
    """

    writer: WriterConfig = field(default_factory=WriterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Create configuration from environment variables.

        Environment variables:
            CSV_STAX_WRITER_TYPE: Writer factory alias
            CSV_STAX_LOG_LEVEL: Logging level
            CSV_STAX_LOG_FILE: Log file path
        """
        config = cls()

        if writer_type := os.getenv("CSV_STAX_WRITER_TYPE"):
            config.writer.type = writer_type.strip()

        if log_level := os.getenv("CSV_STAX_LOG_LEVEL"):
            config.logging.level = log_level.upper()
        if log_file := os.getenv("CSV_STAX_LOG_FILE"):
            config.logging.log_file = log_file

        return config

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """
        Create configuration from dictionary.

        Raises:
            WriterConfigurationError: If the writer section is invalid or the
                logging section is not a mapping
        """
        config = cls()

        if "writer" in data:
            try:
                section = WriterFactoryConfig.model_validate(data["writer"])
            except ValidationError as e:
                raise WriterConfigurationError(
                    f"Invalid writer configuration: {e.error_count()} error(s)",
                    details={"errors": [err["msg"] for err in e.errors()]},
                ) from e
            config.writer = WriterConfig(type=section.type, options=dict(section.options))

        if "logging" in data:
            if not isinstance(data["logging"], Mapping):
                raise WriterConfigurationError(
                    "Logging configuration must be a mapping",
                    details={"section": "logging", "type": type(data["logging"]).__name__},
                )
            for key, value in data["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "writer": self.writer.to_dict(),
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "format": self.logging.format,
            },
        }


def get_default_config(env_file: Optional[str] = None) -> AppConfig:
    """
    Get default application configuration.

    Loads ``env_file`` (or a ``.env`` in the working directory) before
    reading the environment. Variables already set are not overridden.
    """
    env_path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if env_path.is_file():
        load_dotenv(dotenv_path=env_path)
    return AppConfig.from_env()
