"""
csv-stax

Streaming XML writer factories for CSV-to-XML conversion.
Writers are selected by configuration alias through an explicit registry.
"""

__version__ = "1.0.0"

from .domain.exceptions import (
    DomainException,
    XmlStreamError,
    WriterConstructionError,
    WriterStateError,
    InvalidXmlNameError,
    WriterConfigurationError,
    UnknownWriterFactoryError,
)
from .domain.ports import StreamWriterFactoryPort, XmlStreamWriterPort
from .infrastructure.stax import (
    DefaultWriterFactory,
    SaxXmlStreamWriter,
    WriterFactoryRegistry,
)
from .application import WriterFactoryBuilder

__all__ = [
    "DomainException",
    "XmlStreamError",
    "WriterConstructionError",
    "WriterStateError",
    "InvalidXmlNameError",
    "WriterConfigurationError",
    "UnknownWriterFactoryError",
    "StreamWriterFactoryPort",
    "XmlStreamWriterPort",
    "DefaultWriterFactory",
    "SaxXmlStreamWriter",
    "WriterFactoryRegistry",
    "WriterFactoryBuilder",
]
