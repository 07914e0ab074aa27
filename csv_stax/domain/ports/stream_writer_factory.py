"""
Stream Writer Factory Port

Capability interface for anything that can bind an XML stream writer
to a character sink.
"""

from typing import Any, Protocol, runtime_checkable

from .xml_stream_writer import XmlStreamWriterPort


@runtime_checkable
class StreamWriterFactoryPort(Protocol):
    """
    Port (interface) for writer factory implementations.

    Any object with a matching ``create`` method fills the role; there
    is no base class to inherit from. Implementations are selected by
    alias through ``WriterFactoryRegistry``.

    Implementations must be stateless with respect to sinks: each call
    to ``create`` returns a new, independent writer.
    """

    def create(self, sink: Any) -> XmlStreamWriterPort:
        """
        Create a writer bound to ``sink``.

        Args:
            sink: An already-open, writable character stream.
                  Ownership stays with the caller.

        Returns:
            XmlStreamWriterPort bound to the sink

        Raises:
            WriterConstructionError: If no writer can be bound to the sink
        """
        ...
