"""
Domain Exceptions

Custom exceptions for streaming XML writer construction and use.
Organized by concern: stream writing vs. factory configuration.
"""

from typing import Optional, Dict, Any, List


class DomainException(Exception):
    """
    Base exception for all csv_stax errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details
        is_recoverable: Whether the operation can be retried
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        is_recoverable: bool = True
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.is_recoverable = is_recoverable

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "is_recoverable": self.is_recoverable,
        }


# =============================================================================
# Stream Writing Exceptions
# =============================================================================

class XmlStreamError(DomainException):
    """Base exception for streaming XML writer errors."""
    pass


class WriterConstructionError(XmlStreamError):
    """No writer could be bound to the given sink."""

    def __init__(
        self,
        message: str = "Cannot create XML stream writer for sink",
        sink_type: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, is_recoverable=False, **kwargs)
        if sink_type:
            self.details["sink_type"] = sink_type


class WriterStateError(XmlStreamError):
    """Operation is not valid in the writer's current state."""

    def __init__(
        self,
        message: str = "Invalid writer state",
        operation: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, is_recoverable=False, **kwargs)
        if operation:
            self.details["operation"] = operation


class InvalidXmlNameError(XmlStreamError):
    """Element, attribute or PI target name is not usable."""

    def __init__(self, name: str, kind: str = "element", **kwargs):
        message = f"Invalid {kind} name: {name!r}"
        super().__init__(message, is_recoverable=False, **kwargs)
        self.details["name"] = name
        self.details["kind"] = kind


# =============================================================================
# Configuration Exceptions
# =============================================================================

class WriterConfigurationError(DomainException):
    """Writer factory configuration is invalid."""

    def __init__(
        self,
        message: str = "Invalid writer factory configuration",
        **kwargs
    ):
        super().__init__(message, is_recoverable=False, **kwargs)


class UnknownWriterFactoryError(WriterConfigurationError):
    """No factory is registered under the configured alias."""

    def __init__(
        self,
        alias: str,
        known_aliases: Optional[List[str]] = None,
        **kwargs
    ):
        message = f"No writer factory registered for alias '{alias}'"
        super().__init__(message, **kwargs)
        self.alias = alias
        self.details["alias"] = alias
        if known_aliases:
            self.details["known_aliases"] = known_aliases
