"""
Acquisition of the tailwindcss standalone CLI.

Downloads the release artifact for the host platform into the install
directory, replacing whatever binary was there before.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from tailwindkit.core.directory import ensure_install_dir
from tailwindkit.core.download import EXECUTABLE_MODE, download_file
from tailwindkit.core.platform import PlatformDescriptor
from tailwindkit.release.resolver import VersionResolver

logger = logging.getLogger(__name__)


class Installer:
    """Installs the tailwindcss binary into the install directory."""

    def __init__(
        self,
        install_dir: Path,
        executable_name: str,
        platform: PlatformDescriptor,
        resolver: VersionResolver,
        session: Optional[requests.Session] = None,
    ):
        self.install_dir = Path(install_dir)
        self.executable_name = executable_name
        self.platform = platform
        self.resolver = resolver
        self.session = session

    @property
    def executable_path(self) -> Path:
        return self.install_dir / self.executable_name

    def acquire(self) -> Path:
        """
        Download the binary for this platform.

        Returns:
            The install directory containing the fresh executable

        Raises:
            InstallationError: If the install directory cannot be created or
                the binary cannot be written
            DownloadError: If the download fails
        """
        ensure_install_dir(self.install_dir)

        url = self.resolver.download_url(self.platform)
        logger.info(
            f"Downloading tailwindcss ({self.platform}) to {self.executable_path}"
        )
        download_file(
            url, self.executable_path, session=self.session, mode=EXECUTABLE_MODE
        )

        return self.install_dir


__all__ = [
    "Installer",
]
