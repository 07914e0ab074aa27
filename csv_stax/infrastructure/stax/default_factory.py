"""
Default Writer Factory

Builds XML stream writers with the platform's default configuration.
"""

from typing import Any
import logging

from ...config.schemas import DEFAULT_WRITER_FACTORY
from ...cross_cutting.error_handling import ConstructionErrorHandler
from .sax_stream_writer import SaxXmlStreamWriter, ensure_writable_sink


logger = logging.getLogger(__name__)


class DefaultWriterFactory:
    """
    Writer factory using ``xml.sax.saxutils.XMLGenerator`` defaults.

    No pretty-printing, no namespace repairing, long-form empty
    elements. The prolog declares UTF-8 since the sink receives
    characters, not bytes.

    Configuration alias: ``csv-default-stream-writer``
    """

    ALIAS = DEFAULT_WRITER_FACTORY
    ENCODING = "utf-8"

    def create(self, sink: Any) -> SaxXmlStreamWriter:
        """
        Create a writer bound to ``sink``.

        Args:
            sink: Open, writable character stream. Not closed by the writer.

        Returns:
            SaxXmlStreamWriter bound to the sink

        Raises:
            WriterConstructionError: If no writer can be bound to the sink
        """
        with ConstructionErrorHandler("default stream writer", sink):
            ensure_writable_sink(sink)
            writer = SaxXmlStreamWriter(sink, encoding=self.ENCODING)

        logger.debug(f"Created XML stream writer for {type(sink).__name__}")
        return writer

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
