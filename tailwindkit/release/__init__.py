"""
Release handling for the tailwindcss standalone CLI.

Resolves the target version, inspects the local installation and downloads
the platform binary when needed.
"""

from .resolver import VersionResolver, TAGS_URL
from .inspector import InstallationInspector, SubprocessProbe
from .installer import Installer

__all__ = [
    "VersionResolver",
    "TAGS_URL",
    "InstallationInspector",
    "SubprocessProbe",
    "Installer",
]
