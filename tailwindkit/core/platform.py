"""
Platform detection for tailwindkit.

This module maps the host operating system and CPU architecture onto the
naming scheme used by the Tailwind CSS standalone CLI release artifacts
(``tailwindcss-<os>-<arch>``), and derives the executable file name for the host.

Usage:
    from tailwindkit.core.platform import detect_host

    host = detect_host()
    print(f"Artifact: {host.platform.artifact_name()}")
    print(f"Executable: {host.executable_name}")
"""

import functools
import platform
from dataclasses import dataclass

EXECUTABLE_STEM = "tailwindcss"


@dataclass(frozen=True)
class PlatformDescriptor:
    """
    Platform naming pair used to select a release artifact.

    Attributes:
        os: Operating system token ('macos', 'linux', 'windows')
        arch: Architecture token ('arm64', 'x64', 'x64.exe')
    """

    os: str
    arch: str

    def artifact_name(self) -> str:
        """
        Get the release artifact file name for this platform.

        Example:
            >>> PlatformDescriptor("linux", "arm64").artifact_name()
            'tailwindcss-linux-arm64'
        """
        return f"{EXECUTABLE_STEM}-{self.os}-{self.arch}"

    def __str__(self) -> str:
        return f"{self.os}-{self.arch}"


@dataclass(frozen=True)
class HostInfo:
    """
    Host facts captured once at startup and passed down the call chain.

    Attributes:
        system: Raw OS name as reported by ``platform.system()``
        machine: Raw CPU architecture as reported by ``platform.machine()``
        platform: Release artifact platform descriptor
        executable_name: File name of the tailwindcss executable on this host
    """

    system: str
    machine: str
    platform: PlatformDescriptor
    executable_name: str

    @property
    def is_windows(self) -> bool:
        return _is_windows(self.system)


def _is_windows(system: str) -> bool:
    return system.lower() == "windows"


def _is_arm64(machine: str) -> bool:
    return machine.lower() in ("arm64", "aarch64")


def resolve_platform(system: str, machine: str) -> PlatformDescriptor:
    """
    Map a host OS and architecture to the release artifact naming pair.

    Unknown operating systems fall through to the Windows artifact; there is
    no error case.

    Args:
        system: OS name (e.g. 'Darwin', 'Linux', 'Windows')
        machine: CPU architecture (e.g. 'x86_64', 'arm64', 'aarch64')

    Returns:
        PlatformDescriptor for the release artifact

    Example:
        >>> resolve_platform("Darwin", "arm64")
        PlatformDescriptor(os='macos', arch='arm64')
        >>> resolve_platform("Linux", "x86_64")
        PlatformDescriptor(os='linux', arch='x64')
    """
    system = system.lower()

    if system == "darwin":
        if _is_arm64(machine):
            return PlatformDescriptor("macos", "arm64")
        return PlatformDescriptor("macos", "x64")

    if system == "linux":
        if _is_arm64(machine):
            return PlatformDescriptor("linux", "arm64")
        return PlatformDescriptor("linux", "x64")

    # The Windows artifact name carries its file extension in the arch slot.
    return PlatformDescriptor("windows", "x64.exe")


def executable_name(system: str) -> str:
    """
    Get the tailwindcss executable file name for a host OS.

    Args:
        system: OS name as reported by ``platform.system()``

    Returns:
        'tailwindcss.exe' on Windows, 'tailwindcss' elsewhere
    """
    if _is_windows(system):
        return f"{EXECUTABLE_STEM}.exe"
    return EXECUTABLE_STEM


def path_separator(host: HostInfo) -> str:
    """Get the PATH list separator for the host."""
    return ";" if host.is_windows else ":"


def build_host(system: str, machine: str) -> HostInfo:
    """Build HostInfo from raw OS/architecture strings."""
    return HostInfo(
        system=system,
        machine=machine,
        platform=resolve_platform(system, machine),
        executable_name=executable_name(system),
    )


@functools.lru_cache(maxsize=1)
def detect_host() -> HostInfo:
    """
    Detect the current host.

    This function is cached - it only runs detection once per process.
    """
    return build_host(platform.system(), platform.machine())


def clear_host_cache():
    """
    Clear the host detection cache.

    Forces the next call to detect_host() to re-detect. Useful for testing.
    """
    detect_host.cache_clear()


__all__ = [
    "EXECUTABLE_STEM",
    "PlatformDescriptor",
    "HostInfo",
    "resolve_platform",
    "executable_name",
    "path_separator",
    "build_host",
    "detect_host",
    "clear_host_cache",
]
