"""
Ports (Interfaces)

Capability interfaces implemented by infrastructure adapters.
"""

from .xml_stream_writer import XmlStreamWriterPort
from .stream_writer_factory import StreamWriterFactoryPort

__all__ = [
    "XmlStreamWriterPort",
    "StreamWriterFactoryPort",
]
