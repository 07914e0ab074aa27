"""Unit tests for the exception hierarchy."""
from csv_stax.domain.exceptions import (
    DomainException,
    InvalidXmlNameError,
    UnknownWriterFactoryError,
    WriterConfigurationError,
    WriterConstructionError,
    WriterStateError,
    XmlStreamError,
)


def test_hierarchy():
    assert issubclass(WriterConstructionError, XmlStreamError)
    assert issubclass(WriterStateError, XmlStreamError)
    assert issubclass(InvalidXmlNameError, XmlStreamError)
    assert issubclass(UnknownWriterFactoryError, WriterConfigurationError)
    assert issubclass(XmlStreamError, DomainException)
    assert issubclass(WriterConfigurationError, DomainException)


def test_construction_error_to_dict():
    error = WriterConstructionError("Sink is already closed", sink_type="StringIO")

    assert error.to_dict() == {
        "type": "WriterConstructionError",
        "message": "Sink is already closed",
        "details": {"sink_type": "StringIO"},
        "is_recoverable": False,
    }
    assert str(error) == "WriterConstructionError: Sink is already closed"


def test_unknown_factory_message():
    error = UnknownWriterFactoryError("x", known_aliases=["a", "b"])

    assert error.message == "No writer factory registered for alias 'x'"
    assert error.details == {"alias": "x", "known_aliases": ["a", "b"]}


def test_invalid_name_details():
    error = InvalidXmlNameError("1st", kind="attribute")

    assert error.details == {"name": "1st", "kind": "attribute"}
    assert error.is_recoverable is False


def test_base_defaults():
    error = DomainException("plain")

    assert error.details == {}
    assert error.is_recoverable is True
