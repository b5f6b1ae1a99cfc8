"""
Core interfaces for tailwindkit.

This module defines the abstract interfaces that the release logic depends on,
so that collaborators touching the outside world can be swapped out (for
example, in tests) without invoking real binaries.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class ExecutableProbe(ABC):
    """
    Abstract interface for asking an executable to self-report its version.

    The installation inspector only needs the first line the executable
    prints when run without arguments; how that line is obtained is up to
    the implementation.
    """

    @abstractmethod
    def first_output_line(self, executable: Path) -> Optional[str]:
        """
        Run the executable without arguments and return its first stdout line.

        Args:
            executable: Path to the executable to probe

        Returns:
            First line of standard output, or None if the executable could not
            be run, failed, or printed nothing
        """
        pass


__all__ = [
    "ExecutableProbe",
]
