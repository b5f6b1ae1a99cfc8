"""
tailwindkit CLI module.

This module provides the launcher and its command-line entry point.
"""

from .launcher import Launcher
from .app import main, run

__all__ = ["Launcher", "main", "run"]
