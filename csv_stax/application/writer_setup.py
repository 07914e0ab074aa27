"""
Writer Setup

Resolves the configured writer factory at configuration-load time.
"""

from typing import Optional

from ..config.settings import AppConfig, get_default_config
from ..cross_cutting.logging import setup_logging, get_logger
from ..domain.exceptions import WriterConfigurationError
from ..domain.ports.stream_writer_factory import StreamWriterFactoryPort
from ..infrastructure.stax.factory import WriterFactoryRegistry


logger = get_logger(__name__)


class WriterFactoryBuilder:
    """
    Builder for the writer factory used by a conversion pipeline.

    Usage:
        factory = (
            WriterFactoryBuilder()
            .with_config(AppConfig.from_dict(raw_config))
            .with_registry(registry)
            .build()
        )
        with factory.create(sink) as writer:
            ...
    """

    def __init__(self):
        self._config: Optional[AppConfig] = None
        self._registry: Optional[WriterFactoryRegistry] = None
        self._configure_logging = False

    def with_config(self, config: AppConfig) -> "WriterFactoryBuilder":
        """Set the application configuration."""
        self._config = config
        return self

    def with_registry(self, registry: WriterFactoryRegistry) -> "WriterFactoryBuilder":
        """Use a registry other than the built-in one."""
        self._registry = registry
        return self

    def with_logging(self, enabled: bool = True) -> "WriterFactoryBuilder":
        """Apply the logging section of the configuration on build."""
        self._configure_logging = enabled
        return self

    def build(self) -> StreamWriterFactoryPort:
        """
        Resolve the configured factory.

        Falls back to ``get_default_config()`` and the built-in registry
        when none were given.

        Raises:
            WriterConfigurationError: If the configured alias or options
                cannot be resolved
        """
        config = self._config or get_default_config()
        registry = self._registry or WriterFactoryRegistry.with_builtins()

        if self._configure_logging:
            try:
                setup_logging(
                    level=config.logging.level,
                    log_file=config.logging.log_file,
                    format_string=config.logging.format,
                )
            except ValueError as e:
                raise WriterConfigurationError(
                    f"Invalid logging configuration: {e}",
                    details={"level": config.logging.level},
                ) from e

        factory = registry.create_from_config(config.writer.to_dict())
        logger.info(f"Using writer factory '{config.writer.type}'")
        return factory
