"""
Error Handling

Translation of platform errors into domain exceptions.
"""

from typing import Optional, Tuple, Type

from ..domain.exceptions import DomainException, WriterConstructionError


# Errors the XML engine and file objects raise when a sink is unusable
PLATFORM_ERRORS: Tuple[Type[BaseException], ...] = (
    AttributeError,
    ValueError,
    OSError,
    LookupError,
    TypeError,
)


class ConstructionErrorHandler:
    """
    Context manager turning platform errors into WriterConstructionError.

    Domain exceptions raised inside the block pass through untouched.
    Nothing is logged; the translated error propagates to the caller.

    Usage:
        with ConstructionErrorHandler("default stream writer", sink):
            generator = XMLGenerator(sink, encoding="utf-8")
    """

    def __init__(self, context: str = "", sink: Optional[object] = None):
        """
        Args:
            context: Short description used in the error message
            sink: The sink being bound, recorded in error details
        """
        self.context = context
        self.sink = sink

    def __enter__(self) -> "ConstructionErrorHandler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None or isinstance(exc_val, DomainException):
            return False
        if not isinstance(exc_val, PLATFORM_ERRORS):
            return False

        prefix = f"{self.context}: " if self.context else ""
        error = WriterConstructionError(
            f"{prefix}{exc_val}",
            sink_type=type(self.sink).__name__ if self.sink is not None else None,
        )
        error.details["original_error"] = f"{exc_type.__name__}: {exc_val}"
        raise error from exc_val
