"""
Writer Factory Registry

Maps configuration aliases to writer factory constructors.
"""

from typing import Optional, Dict, Any, Callable, List
import logging

from pydantic import ValidationError

from ...config.schemas import WriterFactoryConfig
from ...domain.exceptions import (
    WriterConfigurationError,
    UnknownWriterFactoryError,
)
from ...domain.ports.stream_writer_factory import StreamWriterFactoryPort
from ...domain.ports.xml_stream_writer import XmlStreamWriterPort
from .default_factory import DefaultWriterFactory


logger = logging.getLogger(__name__)

FactoryConstructor = Callable[..., StreamWriterFactoryPort]

DEFAULT_ALIAS = DefaultWriterFactory.ALIAS

BUILTIN_FACTORIES: Dict[str, FactoryConstructor] = {
    DefaultWriterFactory.ALIAS: DefaultWriterFactory,
}


class WriterFactoryRegistry:
    """
    Explicit lookup table from alias to factory constructor.

    Aliases are resolved when configuration is loaded, so a pipeline
    can swap writer implementations by changing one string.

    Usage:
        registry = WriterFactoryRegistry.with_builtins()

        # Resolve by alias
        factory = registry.resolve("csv-default-stream-writer")
        writer = factory.create(sink)

        # Resolve from a configuration section
        factory = registry.create_from_config({"type": "csv-default-stream-writer"})
    """

    def __init__(self, factories: Optional[Dict[str, FactoryConstructor]] = None):
        self._factories: Dict[str, FactoryConstructor] = {}
        for alias, constructor in (factories or {}).items():
            self.register(alias, constructor)

    @classmethod
    def with_builtins(cls) -> "WriterFactoryRegistry":
        """Create a registry holding the built-in factories."""
        return cls(BUILTIN_FACTORIES)

    @property
    def aliases(self) -> List[str]:
        return sorted(self._factories)

    def is_registered(self, alias: str) -> bool:
        return alias in self._factories

    def register(
        self,
        alias: str,
        constructor: FactoryConstructor,
        replace: bool = False
    ) -> None:
        """
        Register a factory constructor under an alias.

        Args:
            alias: Configuration key
            constructor: Callable returning a factory; receives the
                configured options as keyword arguments
            replace: Overwrite an existing registration

        Raises:
            WriterConfigurationError: On empty alias, non-callable
                constructor, or duplicate alias without ``replace``
        """
        if not isinstance(alias, str) or not alias.strip():
            raise WriterConfigurationError("Writer factory alias must be a non-empty string")
        if not callable(constructor):
            raise WriterConfigurationError(
                f"Constructor for '{alias}' is not callable",
                details={"alias": alias},
            )
        if alias in self._factories and not replace:
            raise WriterConfigurationError(
                f"Writer factory alias '{alias}' is already registered",
                details={"alias": alias},
            )

        self._factories[alias] = constructor
        logger.debug(f"Registered writer factory '{alias}'")

    def unregister(self, alias: str) -> None:
        if alias not in self._factories:
            raise UnknownWriterFactoryError(alias, known_aliases=self.aliases)
        del self._factories[alias]
        logger.debug(f"Unregistered writer factory '{alias}'")

    def resolve(self, alias: str, /, **options) -> StreamWriterFactoryPort:
        """
        Build the factory registered under ``alias``.

        Args:
            alias: Configuration key
            **options: Passed to the factory constructor

        Returns:
            StreamWriterFactoryPort implementation

        Raises:
            UnknownWriterFactoryError: If nothing is registered for the alias
            WriterConfigurationError: If the constructor rejects the
                options or does not return a factory
        """
        constructor = self._factories.get(alias)
        if constructor is None:
            raise UnknownWriterFactoryError(alias, known_aliases=self.aliases)

        try:
            factory = constructor(**options)
        except TypeError as e:
            raise WriterConfigurationError(
                f"Invalid options for writer factory '{alias}': {e}",
                details={"alias": alias, "options": sorted(options)},
            ) from e

        if not callable(getattr(factory, "create", None)):
            raise WriterConfigurationError(
                f"Writer factory '{alias}' does not provide create(sink)",
                details={"alias": alias, "factory_type": type(factory).__name__},
            )

        logger.debug(f"Resolved writer factory '{alias}' -> {type(factory).__name__}")
        return factory

    def create_from_config(self, config: Dict[str, Any]) -> StreamWriterFactoryPort:
        """
        Build a factory from a configuration dictionary.

        Args:
            config: Mapping with 'type' (alias) and optional 'options'

        Returns:
            StreamWriterFactoryPort implementation
        """
        try:
            section = WriterFactoryConfig.model_validate(config)
        except ValidationError as e:
            raise WriterConfigurationError(
                f"Invalid writer factory configuration: {e.error_count()} error(s)",
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e

        return self.resolve(section.type, **section.options)

    def create_writer(self, sink: Any, alias: str = DEFAULT_ALIAS) -> XmlStreamWriterPort:
        """Resolve ``alias`` and bind a writer to ``sink``."""
        return self.resolve(alias).create(sink)
