"""
SAX Stream Writer

Streaming XML writer built on ``xml.sax.saxutils.XMLGenerator``.
"""

from typing import Optional, Dict, List, Any
import codecs
import io
import logging
import re
from xml.sax.saxutils import XMLGenerator

from ...domain.exceptions import (
    WriterConstructionError,
    WriterStateError,
    InvalidXmlNameError,
    XmlStreamError,
)


logger = logging.getLogger(__name__)

# Letter, underscore or colon first; then word characters, '.', '-', ':'
_NAME_PATTERN = re.compile(r"(?:[^\W\d]|:)[\w.\-:]*")


def _check_name(name: str, kind: str = "element") -> str:
    if not isinstance(name, str) or not _NAME_PATTERN.fullmatch(name):
        raise InvalidXmlNameError(str(name), kind=kind)
    return name


def ensure_writable_sink(sink: Any) -> None:
    """
    Reject sinks no writer can be bound to.

    Args:
        sink: Candidate character stream

    Raises:
        WriterConstructionError: If the sink is missing, closed, binary
            or not writable
    """
    if sink is None:
        raise WriterConstructionError("Sink is None")

    sink_type = type(sink).__name__

    if getattr(sink, "closed", False):
        raise WriterConstructionError("Sink is already closed", sink_type=sink_type)

    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        raise WriterConstructionError(
            "Sink is a binary stream; a character stream is required",
            sink_type=sink_type,
        )

    if not callable(getattr(sink, "write", None)):
        raise WriterConstructionError("Sink has no write method", sink_type=sink_type)

    writable = getattr(sink, "writable", None)
    if callable(writable) and not writable():
        raise WriterConstructionError("Sink is not writable", sink_type=sink_type)


class _TextSinkAdapter(io.TextIOBase):
    """Presents an object with only ``write(str)`` as a text stream."""

    def __init__(self, target: Any):
        super().__init__()
        self._target = target

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        self._target.write(text)
        return len(text)

    def flush(self) -> None:
        if getattr(self._target, "closed", False):
            return
        flush = getattr(self._target, "flush", None)
        if callable(flush):
            flush()


def _as_text_stream(sink: Any) -> Any:
    # XMLGenerator encodes to bytes for anything outside these types
    if isinstance(sink, (io.TextIOBase, codecs.StreamWriter, codecs.StreamReaderWriter)):
        return sink
    return _TextSinkAdapter(sink)


class SaxXmlStreamWriter:
    """
    Forward-only XML writer over the standard library SAX generator.

    Start tags are held back until the next event so attributes can be
    added after ``write_start_element``. The sink is never closed by
    the writer.

    Attributes:
        encoding: Encoding declared in the XML prolog
        depth: Number of currently open elements
        closed: Whether ``close`` has been called
    """

    def __init__(
        self,
        sink: Any,
        encoding: str = "utf-8",
        short_empty_elements: bool = False
    ):
        """
        Bind a writer to ``sink``.

        Args:
            sink: Open, writable character stream
            encoding: Encoding named in the XML declaration
            short_empty_elements: Write ``<a/>`` instead of ``<a></a>``
        """
        self._sink = sink
        self._encoding = encoding
        self._generator = XMLGenerator(
            _as_text_stream(sink),
            encoding=encoding,
            short_empty_elements=short_empty_elements,
        )

        self._open_elements: List[str] = []
        self._pending_attributes: Optional[Dict[str, str]] = None
        self._has_content = False
        self._document_started = False
        self._document_ended = False
        self._closed = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def depth(self) -> int:
        return len(self._open_elements)

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def write_start_document(self) -> None:
        """Write the XML declaration. Must come before any other content."""
        self._check_writable("write_start_document")
        if self._document_started:
            raise WriterStateError(
                "Document already started", operation="write_start_document"
            )
        if self._has_content:
            raise WriterStateError(
                "XML declaration must precede all content",
                operation="write_start_document",
            )
        self._generator.startDocument()
        self._document_started = True

    def write_end_document(self) -> None:
        """Close all open elements, innermost first, and flush."""
        self._check_writable("write_end_document")
        self._emit_pending_start()
        while self._open_elements:
            self._generator.endElement(self._open_elements.pop())
        self._generator.endDocument()
        self._document_ended = True

    # ------------------------------------------------------------------
    # Elements and content
    # ------------------------------------------------------------------

    def write_start_element(self, name: str) -> None:
        self._check_writable("write_start_element")
        _check_name(name)
        self._emit_pending_start()
        self._open_elements.append(name)
        self._pending_attributes = {}
        self._has_content = True

    def write_attribute(self, name: str, value: str) -> None:
        self._check_writable("write_attribute")
        if self._pending_attributes is None:
            raise WriterStateError(
                "Attributes must directly follow a start element",
                operation="write_attribute",
            )
        _check_name(name, kind="attribute")
        if name in self._pending_attributes:
            raise WriterStateError(
                f"Duplicate attribute '{name}' on <{self._open_elements[-1]}>",
                operation="write_attribute",
            )
        self._pending_attributes[name] = str(value)

    def write_empty_element(
        self,
        name: str,
        attributes: Optional[Dict[str, str]] = None
    ) -> None:
        attributes = attributes or {}
        _check_name(name)
        for attr_name in attributes:
            _check_name(attr_name, kind="attribute")

        self.write_start_element(name)
        for attr_name, attr_value in attributes.items():
            self.write_attribute(attr_name, attr_value)
        self.write_end_element()

    def write_characters(self, text: str) -> None:
        self._check_writable("write_characters")
        self._emit_pending_start()
        self._generator.characters(str(text))
        self._has_content = True

    def write_processing_instruction(self, target: str, data: str = "") -> None:
        self._check_writable("write_processing_instruction")
        _check_name(target, kind="processing instruction target")
        if target.lower() == "xml":
            raise InvalidXmlNameError(target, kind="processing instruction target")
        if "?>" in data:
            raise XmlStreamError("Processing instruction data must not contain '?>'")
        self._emit_pending_start()
        self._generator.processingInstruction(target, data)
        self._has_content = True

    def write_end_element(self) -> None:
        self._check_writable("write_end_element")
        if not self._open_elements:
            raise WriterStateError("No open element to close", operation="write_end_element")
        self._emit_pending_start()
        self._generator.endElement(self._open_elements.pop())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def flush(self) -> None:
        """Flush the sink if it supports flushing."""
        if self._closed:
            raise WriterStateError("Writer is closed", operation="flush")
        if getattr(self._sink, "closed", False):
            return
        flush = getattr(self._sink, "flush", None)
        if callable(flush):
            flush()

    def close(self) -> None:
        """
        Release the writer.

        A start tag still held back is written out first, unless the
        caller has already closed the sink, in which case it is dropped.
        Open elements are left open; use ``write_end_document`` to close
        them. The sink itself stays open.
        """
        if self._closed:
            return
        try:
            if getattr(self._sink, "closed", False):
                self._pending_attributes = None
            else:
                self._emit_pending_start()
                self.flush()
        finally:
            self._closed = True
        logger.debug(f"Closed XML stream writer at depth {self.depth}")

    def __enter__(self) -> "SaxXmlStreamWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(sink={type(self._sink).__name__}, "
            f"encoding={self._encoding!r}, depth={self.depth}, closed={self._closed})"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_writable(self, operation: str) -> None:
        if self._closed:
            raise WriterStateError("Writer is closed", operation=operation)
        if self._document_ended:
            raise WriterStateError("Document already ended", operation=operation)

    def _emit_pending_start(self) -> None:
        if self._pending_attributes is None:
            return
        self._generator.startElement(self._open_elements[-1], self._pending_attributes)
        self._pending_attributes = None
