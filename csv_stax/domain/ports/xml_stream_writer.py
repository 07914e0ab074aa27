"""
XML Stream Writer Port

Capability interface for forward-only XML emission.
"""

from typing import Optional, Dict, Protocol, runtime_checkable


@runtime_checkable
class XmlStreamWriterPort(Protocol):
    """
    Port (interface) for streaming XML writers.

    A writer emits XML structure sequentially to a character sink
    without building a document tree. Consumers drive it with
    start-document, element, characters and end-document calls.

    The writer never owns the sink: closing the writer leaves the
    sink open for its creator to close.
    """

    def write_start_document(self) -> None:
        """Write the XML declaration."""
        ...

    def write_start_element(self, name: str) -> None:
        """Open an element. Attributes may follow until other content is written."""
        ...

    def write_attribute(self, name: str, value: str) -> None:
        """Add an attribute to the element just opened."""
        ...

    def write_empty_element(
        self,
        name: str,
        attributes: Optional[Dict[str, str]] = None
    ) -> None:
        ...

    def write_characters(self, text: str) -> None:
        """Write escaped character data."""
        ...

    def write_processing_instruction(self, target: str, data: str = "") -> None:
        ...

    def write_end_element(self) -> None:
        """Close the innermost open element."""
        ...

    def write_end_document(self) -> None:
        """Close any open elements and finish the document."""
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        """Release the writer. The sink is left open."""
        ...
