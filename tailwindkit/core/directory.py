"""
Install location management for tailwindkit.

The tailwindcss binary lives in a single, fixed directory under the user's
home directory. There is one slot: a new download replaces the previous
binary in place.

Directory Structure:
    ~/.tailwindcss/ (or %USERPROFILE%\\.tailwindcss\\):
        - tailwindcss      : The standalone CLI (tailwindcss.exe on Windows)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from tailwindkit.core.exceptions import HomeDirectoryError, InstallationError

logger = logging.getLogger(__name__)

INSTALL_DIRECTORY = ".tailwindcss"

# rwxr-xr-x
INSTALL_DIRECTORY_MODE = 0o755


def get_user_home() -> Path:
    """
    Get the current user's home directory.

    Returns:
        Path: The user's home directory.

    Raises:
        HomeDirectoryError: If the home directory cannot be determined.
    """
    if os.name == "nt":  # Windows
        user_profile = os.environ.get("USERPROFILE")
        if user_profile:
            return Path(user_profile)

    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError(
            f"Cannot determine the user home directory: {e}"
        ) from e


def get_install_dir(home: Optional[Path] = None) -> Path:
    """
    Get the tailwindcss install directory.

    Args:
        home: User home directory (detected when omitted).

    Returns:
        Path: The install directory path.

    Example:
        >>> get_install_dir(Path('/home/user'))
        PosixPath('/home/user/.tailwindcss')
    """
    if home is None:
        home = get_user_home()
    return Path(home) / INSTALL_DIRECTORY


def ensure_install_dir(install_dir: Path) -> Path:
    """
    Create the install directory if it doesn't exist.

    Args:
        install_dir: Directory to create.

    Returns:
        Path: The install directory path.

    Raises:
        InstallationError: If the directory cannot be created.
    """
    try:
        install_dir.mkdir(mode=INSTALL_DIRECTORY_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise InstallationError(
            f"Failed to create install directory at {install_dir}: {e}"
        ) from e

    logger.debug(f"Ensured install directory exists: {install_dir}")
    return install_dir


__all__ = [
    "INSTALL_DIRECTORY",
    "INSTALL_DIRECTORY_MODE",
    "get_user_home",
    "get_install_dir",
    "ensure_install_dir",
]
