"""
Pytest configuration and shared fixtures for tailwindkit tests.
"""

import pytest
from pathlib import Path

from tailwindkit.core.config import LauncherConfig
from tailwindkit.core.platform import build_host, clear_host_cache


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_host_cache():
    """Make sure host detection is not shared between tests."""
    clear_host_cache()
    yield
    clear_host_cache()


@pytest.fixture(autouse=True)
def _clean_launcher_env(monkeypatch):
    """Keep the developer's environment from leaking into tests."""
    for name in ("TAILWINDCSS_VERSION", "TAILWINDKIT_DEBUG", "GOTAILWINDCSS_DEBUG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Create isolated home directory for tests."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))

    return fake_home


@pytest.fixture
def no_network(monkeypatch):
    """Disable network access for tests."""
    import socket

    def guard(*args, **kwargs):
        raise RuntimeError("Network access not allowed in this test")

    monkeypatch.setattr(socket, "socket", guard)


@pytest.fixture
def host_linux():
    """HostInfo for an x86_64 Linux machine."""
    return build_host("Linux", "x86_64")


@pytest.fixture
def host_windows():
    """HostInfo for an AMD64 Windows machine."""
    return build_host("Windows", "AMD64")


@pytest.fixture
def latest_config() -> LauncherConfig:
    """Configuration tracking the latest release."""
    return LauncherConfig()


@pytest.fixture
def pinned_config() -> LauncherConfig:
    """Configuration pinned to v4.0.0."""
    return LauncherConfig(version="v4.0.0")
