"""
Centralized exception hierarchy for tailwindkit.

Every failure the launcher can hit is raised as one of these exceptions and
propagates up to the single handler in ``tailwindkit.cli.app``, which decides
the process exit status.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class TailwindKitError(Exception):
    """Base exception for all tailwindkit errors."""

    pass


# ============================================================================
# Environment / Configuration Exceptions
# ============================================================================


class HomeDirectoryError(TailwindKitError):
    """Raised when the user's home directory cannot be determined."""

    pass


class ConfigurationError(TailwindKitError):
    """Raised when the configuration file cannot be read or is invalid."""

    pass


# ============================================================================
# Release Exceptions
# ============================================================================


class VersionResolutionError(TailwindKitError):
    """Raised when the target tailwindcss version cannot be resolved."""

    pass


class InstallationError(TailwindKitError):
    """Base exception for errors while installing the tailwindcss binary."""

    pass


class DownloadError(InstallationError):
    """Raised when the release artifact cannot be downloaded."""

    def __init__(self, message: str, url: str = "", status_code: int = 0):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


# ============================================================================
# Launch Exceptions
# ============================================================================


class LaunchError(TailwindKitError):
    """Raised when the tailwindcss executable cannot be started."""

    def __init__(self, executable: str, reason: str):
        self.executable = executable
        self.reason = reason
        super().__init__(f"Failed to start {executable}: {reason}")


__all__ = [
    "TailwindKitError",
    "HomeDirectoryError",
    "ConfigurationError",
    "VersionResolutionError",
    "InstallationError",
    "DownloadError",
    "LaunchError",
]
