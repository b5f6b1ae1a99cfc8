"""
Core functionality for tailwindkit.

This package contains the foundational modules that the release and CLI
layers depend on.
"""

from .directory import (
    INSTALL_DIRECTORY,
    get_user_home,
    get_install_dir,
    ensure_install_dir,
)

from .platform import (
    PlatformDescriptor,
    HostInfo,
    resolve_platform,
    executable_name,
    path_separator,
    build_host,
    detect_host,
    clear_host_cache,
)

from .config import (
    LauncherConfig,
    load_config,
)

from .exceptions import (
    TailwindKitError,
    HomeDirectoryError,
    ConfigurationError,
    VersionResolutionError,
    InstallationError,
    DownloadError,
    LaunchError,
)

__all__ = [
    "INSTALL_DIRECTORY",
    "get_user_home",
    "get_install_dir",
    "ensure_install_dir",
    "PlatformDescriptor",
    "HostInfo",
    "resolve_platform",
    "executable_name",
    "path_separator",
    "build_host",
    "detect_host",
    "clear_host_cache",
    "LauncherConfig",
    "load_config",
    "TailwindKitError",
    "HomeDirectoryError",
    "ConfigurationError",
    "VersionResolutionError",
    "InstallationError",
    "DownloadError",
    "LaunchError",
]
