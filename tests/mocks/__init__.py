"""
Mock implementations for testing tailwindkit components.

This package provides stand-ins for external processes so that tests stay
isolated and deterministic.
"""

from .probe import FakeProbe

__all__ = [
    "FakeProbe",
]
