"""
Infrastructure Layer

Adapters implementing the domain ports.
"""
