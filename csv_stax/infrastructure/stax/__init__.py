"""
StAX-style Writer Adapters

XML stream writers on the standard library SAX generator, plus the
factories that build them.
"""

from .sax_stream_writer import SaxXmlStreamWriter, ensure_writable_sink
from .default_factory import DefaultWriterFactory
from .factory import WriterFactoryRegistry, BUILTIN_FACTORIES, DEFAULT_ALIAS

__all__ = [
    "SaxXmlStreamWriter",
    "ensure_writable_sink",
    "DefaultWriterFactory",
    "WriterFactoryRegistry",
    "BUILTIN_FACTORIES",
    "DEFAULT_ALIAS",
]
