"""Unit tests for alias-based writer factory selection."""
import io
import logging

import pytest

from csv_stax.config.schemas import DEFAULT_WRITER_FACTORY
from csv_stax.domain.exceptions import (
    UnknownWriterFactoryError,
    WriterConfigurationError,
)
from csv_stax.infrastructure.stax import (
    DEFAULT_ALIAS,
    DefaultWriterFactory,
    SaxXmlStreamWriter,
    WriterFactoryRegistry,
)


class ShortTagWriterFactory:
    """Alternative factory writing ``<a/>`` for empty elements."""

    def __init__(self, encoding="utf-8"):
        self.encoding = encoding

    def create(self, sink):
        return SaxXmlStreamWriter(sink, encoding=self.encoding, short_empty_elements=True)


class TestBuiltins:
    """Test the built-in table."""

    def test_default_alias_registered(self, registry):
        assert registry.aliases == ["csv-default-stream-writer"]
        assert registry.is_registered(DEFAULT_ALIAS)

    def test_alias_matches_config_default(self):
        assert DEFAULT_ALIAS == DEFAULT_WRITER_FACTORY == DefaultWriterFactory.ALIAS

    def test_resolve_default(self, registry):
        assert isinstance(registry.resolve(DEFAULT_ALIAS), DefaultWriterFactory)

    def test_registries_are_isolated(self, registry):
        registry.register("custom", ShortTagWriterFactory)

        assert not WriterFactoryRegistry.with_builtins().is_registered("custom")

    def test_empty_registry(self):
        assert WriterFactoryRegistry().aliases == []


class TestRegistration:
    """Test adding and removing factories."""

    def test_register_alternative(self, registry):
        registry.register("csv-short-tag-writer", ShortTagWriterFactory)
        sink = io.StringIO()

        writer = registry.create_writer(sink, alias="csv-short-tag-writer")
        writer.write_empty_element("row")

        assert sink.getvalue() == "<row/>"

    def test_duplicate_alias_rejected(self, registry):
        with pytest.raises(WriterConfigurationError):
            registry.register(DEFAULT_ALIAS, ShortTagWriterFactory)

    def test_replace_existing(self, registry):
        registry.register(DEFAULT_ALIAS, ShortTagWriterFactory, replace=True)

        assert isinstance(registry.resolve(DEFAULT_ALIAS), ShortTagWriterFactory)

    @pytest.mark.parametrize("alias", ["", "   ", None])
    def test_blank_alias_rejected(self, registry, alias):
        with pytest.raises(WriterConfigurationError):
            registry.register(alias, ShortTagWriterFactory)

    def test_non_callable_constructor_rejected(self, registry):
        with pytest.raises(WriterConfigurationError):
            registry.register("broken", DefaultWriterFactory())

    def test_unregister(self, registry):
        registry.unregister(DEFAULT_ALIAS)

        assert registry.aliases == []
        with pytest.raises(UnknownWriterFactoryError):
            registry.unregister(DEFAULT_ALIAS)


class TestResolve:
    """Test building factories from aliases."""

    def test_unknown_alias(self, registry):
        with pytest.raises(UnknownWriterFactoryError) as exc_info:
            registry.resolve("csv-pretty-writer")

        error = exc_info.value
        assert error.alias == "csv-pretty-writer"
        assert error.details["known_aliases"] == [DEFAULT_ALIAS]
        assert isinstance(error, WriterConfigurationError)

    def test_options_passed_to_constructor(self, registry):
        registry.register("short", ShortTagWriterFactory)

        factory = registry.resolve("short", encoding="utf-16")

        assert factory.encoding == "utf-16"

    def test_default_factory_takes_no_options(self, registry):
        with pytest.raises(WriterConfigurationError) as exc_info:
            registry.resolve(DEFAULT_ALIAS, indent=2)

        assert exc_info.value.details["options"] == ["indent"]
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_constructor_must_return_factory(self, registry):
        registry.register("not-a-factory", dict)

        with pytest.raises(WriterConfigurationError) as exc_info:
            registry.resolve("not-a-factory")

        assert exc_info.value.details["factory_type"] == "dict"

    def test_each_resolve_builds_new_factory(self, registry):
        assert registry.resolve(DEFAULT_ALIAS) is not registry.resolve(DEFAULT_ALIAS)

    def test_resolution_is_logged(self, registry, caplog):
        caplog.set_level(logging.DEBUG, logger="csv_stax")

        registry.resolve(DEFAULT_ALIAS)

        assert "Resolved writer factory 'csv-default-stream-writer'" in caplog.text


class TestCreateFromConfig:
    """Test configuration-driven selection."""

    def test_type_selects_factory(self, registry):
        factory = registry.create_from_config({"type": DEFAULT_ALIAS})

        assert isinstance(factory, DefaultWriterFactory)

    def test_missing_type_uses_default(self, registry):
        assert isinstance(registry.create_from_config({}), DefaultWriterFactory)

    def test_type_is_stripped(self, registry):
        factory = registry.create_from_config({"type": "  csv-default-stream-writer "})

        assert isinstance(factory, DefaultWriterFactory)

    def test_options_forwarded(self, registry):
        registry.register("short", ShortTagWriterFactory)

        factory = registry.create_from_config({"type": "short", "options": {"encoding": "ascii"}})

        assert factory.encoding == "ascii"

    @pytest.mark.parametrize(
        "config",
        [
            {"type": ""},
            {"type": 42},
            {"type": DEFAULT_ALIAS, "options": "indent=2"},
            {"type": DEFAULT_ALIAS, "indent": 2},
        ],
    )
    def test_invalid_config(self, registry, config):
        with pytest.raises(WriterConfigurationError) as exc_info:
            registry.create_from_config(config)

        assert exc_info.value.details["errors"]

    def test_option_named_alias(self, registry):
        """Test an 'alias' option reaches the constructor instead of clashing."""
        class AliasedFactory(ShortTagWriterFactory):
            def __init__(self, alias):
                super().__init__()
                self.alias = alias

        registry.register("aliased", AliasedFactory)

        factory = registry.create_from_config({"type": "aliased", "options": {"alias": "y"}})

        assert factory.alias == "y"

    def test_alias_option_rejected_by_default_factory(self, registry):
        with pytest.raises(WriterConfigurationError) as exc_info:
            registry.create_from_config({"type": DEFAULT_ALIAS, "options": {"alias": "y"}})

        assert exc_info.value.details["options"] == ["alias"]

    def test_unknown_type(self, registry):
        with pytest.raises(UnknownWriterFactoryError):
            registry.create_from_config({"type": "nope"})
