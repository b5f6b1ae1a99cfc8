"""
Launcher for the tailwindcss standalone CLI.

Locates a usable ``tailwindcss`` executable, in priority order:

1. ``tailwindcss`` on the system PATH (no version, network or install
   directory logic runs at all)
2. A current copy in ``~/.tailwindcss``
3. A fresh download into ``~/.tailwindcss``

and runs it as a child process with the caller's arguments, inheriting
stdin, stdout and stderr.
"""

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

import requests

from tailwindkit.core.config import LauncherConfig
from tailwindkit.core.directory import get_install_dir, get_user_home
from tailwindkit.core.exceptions import LaunchError
from tailwindkit.core.interfaces import ExecutableProbe
from tailwindkit.core.platform import HostInfo, path_separator
from tailwindkit.release.inspector import InstallationInspector
from tailwindkit.release.installer import Installer
from tailwindkit.release.resolver import VersionResolver

logger = logging.getLogger(__name__)


class Launcher:
    """Finds or installs tailwindcss and hands execution off to it."""

    def __init__(
        self,
        host: HostInfo,
        config: LauncherConfig,
        session: Optional[requests.Session] = None,
        probe: Optional[ExecutableProbe] = None,
        home: Optional[Path] = None,
        self_path: Optional[Path] = None,
    ):
        """
        Initialize launcher.

        Args:
            host: Host information captured at startup
            config: Launcher configuration
            session: Optional requests session for network access
            probe: Optional executable probe for the installation inspector
            home: User home directory (detected lazily when omitted)
            self_path: Path of the running launcher script, never treated as
                the tailwindcss executable (defaults to sys.argv[0])
        """
        self.host = host
        self.config = config
        self.session = session
        self.probe = probe
        self.home = home
        self.self_path = self_path if self_path is not None else Path(sys.argv[0])

    def find_on_path(self) -> Optional[Path]:
        """
        Look up tailwindcss on the system PATH.

        Returns:
            Path to the executable, or None if it isn't on PATH
        """
        found = shutil.which(self.host.executable_name)
        if not found:
            return None

        found_path = Path(found)
        if self._is_self(found_path):
            logger.debug(f"Ignoring {found_path}: it is this launcher")
            return None

        return found_path

    def _is_self(self, candidate: Path) -> bool:
        try:
            return candidate.resolve() == self.self_path.resolve()
        except OSError:
            return False

    def locate(self) -> Tuple[Path, bool]:
        """
        Find a tailwindcss executable, installing it if necessary.

        Returns:
            Tuple of (executable path, True if it is the local install)

        Raises:
            HomeDirectoryError: If the home directory cannot be determined
            VersionResolutionError: If the target version cannot be resolved
            InstallationError: If the binary cannot be installed
        """
        on_path = self.find_on_path()
        if on_path is not None:
            logger.debug(f"Using tailwindcss from PATH: {on_path}")
            return on_path, False

        logger.info("tailwindcss not found on path, trying to download")

        home = self.home if self.home is not None else get_user_home()
        install_dir = get_install_dir(home)

        resolver = VersionResolver(self.config, session=self.session)
        inspector = InstallationInspector(
            install_dir, self.host.executable_name, probe=self.probe
        )

        if inspector.exists() and inspector.is_current(resolver.resolve()):
            logger.debug(f"Using installed tailwindcss: {inspector.executable_path}")
            return inspector.executable_path, True

        installer = Installer(
            install_dir,
            self.host.executable_name,
            self.host.platform,
            resolver,
            session=self.session,
        )
        installer.acquire()
        return installer.executable_path, True

    def build_env(
        self, install_dir: Path, environ: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        """
        Build the child environment with install_dir prepended to PATH.

        Args:
            install_dir: Directory to put in front of the search path
            environ: Base environment (defaults to ``os.environ``)

        Returns:
            New environment mapping for the child process
        """
        env = dict(os.environ if environ is None else environ)
        current = env.get("PATH", "")
        if current:
            env["PATH"] = f"{install_dir}{path_separator(self.host)}{current}"
        else:
            env["PATH"] = str(install_dir)
        return env

    def execute(
        self,
        executable: Path,
        args: List[str],
        env: Optional[Mapping[str, str]] = None,
    ) -> int:
        """
        Run the executable, inheriting the standard streams.

        Args:
            executable: Executable to run
            args: Arguments passed through unchanged
            env: Environment for the child (inherits ours when None)

        Returns:
            The child's exit code (128 + N when killed by signal N)

        Raises:
            LaunchError: If the child cannot be started
        """
        command = [str(executable), *args]
        logger.debug(f"Running: {command}")

        try:
            result = subprocess.run(command, env=env)
        except OSError as e:
            raise LaunchError(str(executable), str(e)) from e

        returncode = result.returncode
        if returncode < 0:
            returncode = 128 - returncode

        if returncode != 0:
            logger.debug(f"tailwindcss exited with code {returncode}")
        return returncode

    def run(self, args: List[str]) -> int:
        """
        Locate tailwindcss and run it with args.

        Args:
            args: Command-line arguments for tailwindcss

        Returns:
            The exit code of tailwindcss
        """
        executable, is_local = self.locate()

        env = None
        if is_local:
            env = self.build_env(executable.parent)

        return self.execute(executable, args, env=env)


__all__ = [
    "Launcher",
]
