"""
Application Layer

Wires configuration to writer factories.
"""

from .writer_setup import WriterFactoryBuilder

__all__ = [
    "WriterFactoryBuilder",
]
