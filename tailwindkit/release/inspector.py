"""
Local installation inspection.

Decides whether the binary in the install directory exists and is the
version we want. The binary is the only record of which version is
installed: it is run without arguments and its first line of output
(e.g. ``≈ tailwindcss v4.0.0``) is searched for the target version.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from tailwindkit.core.interfaces import ExecutableProbe

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 30


class SubprocessProbe(ExecutableProbe):
    """Probe an executable by running it in a subprocess."""

    def __init__(self, timeout: int = PROBE_TIMEOUT):
        self.timeout = timeout

    def first_output_line(self, executable: Path) -> Optional[str]:
        try:
            result = subprocess.run(
                [str(executable)],
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug(f"{executable} did not exit within {self.timeout}s")
            return None
        except OSError as e:
            # Corrupt download, wrong permissions, foreign platform binary.
            logger.debug(f"Could not run {executable}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"{executable} exited with code {result.returncode}")
            return None

        lines = result.stdout.splitlines()
        if not lines:
            return None
        return lines[0]


class InstallationInspector:
    """Inspects the single local tailwindcss installation."""

    def __init__(
        self,
        install_dir: Path,
        executable_name: str,
        probe: Optional[ExecutableProbe] = None,
    ):
        """
        Initialize inspector.

        Args:
            install_dir: Directory holding the installed binary
            executable_name: File name of the binary on this host
            probe: Probe used to read the version banner
        """
        self.install_dir = Path(install_dir)
        self.executable_name = executable_name
        self.probe = probe or SubprocessProbe()

    @property
    def executable_path(self) -> Path:
        return self.install_dir / self.executable_name

    def exists(self) -> bool:
        """Check whether a binary is present at the install path."""
        return self.executable_path.is_file()

    def reported_version(self) -> Optional[str]:
        """
        Get the version banner the installed binary prints.

        Returns:
            First output line of the binary, or None if it is missing or
            could not be run
        """
        if not self.exists():
            return None
        return self.probe.first_output_line(self.executable_path)

    def is_current(self, version: str) -> bool:
        """
        Check whether the installed binary is the target version.

        The banner only has to contain the version, so decoration around it
        (``≈ tailwindcss v4.0.0``) is tolerated.

        Args:
            version: Target version tag

        Returns:
            True if the binary exists and reports the version
        """
        banner = self.reported_version()
        if banner is None:
            logger.debug(f"No usable tailwindcss at {self.executable_path}")
            return False

        if version not in banner:
            logger.debug(f"Installed tailwindcss is stale: '{banner}' != {version}")
            return False

        return True


__all__ = [
    "PROBE_TIMEOUT",
    "SubprocessProbe",
    "InstallationInspector",
]
