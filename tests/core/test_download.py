"""
Unit tests for download module.

Tests download functionality with mocked network requests.
"""

import logging
import os
import stat
import sys

import pytest
import requests
import responses

from tailwindkit.core.download import EXECUTABLE_MODE, download_file
from tailwindkit.core.exceptions import DownloadError

URL = "https://example.com/tailwindcss-linux-x64"

posix_only = pytest.mark.skipif(
    sys.platform == "win32", reason="POSIX permission bits"
)


def _leftovers(directory):
    return [p.name for p in directory.iterdir() if p.name.endswith(".part")]


class TestDownloadFile:
    """Test download_file function."""

    @responses.activate
    def test_simple_download(self, tmp_path):
        """Test simple download."""
        content = b"\x7fELF binary content"
        destination = tmp_path / "tailwindcss"

        responses.add(
            responses.GET,
            URL,
            body=content,
            status=200,
            headers={"content-length": str(len(content))},
        )

        result = download_file(URL, destination)

        assert result == destination
        assert destination.read_bytes() == content
        assert _leftovers(tmp_path) == []

    @posix_only
    @responses.activate
    def test_download_sets_executable_mode(self, tmp_path):
        """Test finished file is executable by its owner."""
        destination = tmp_path / "tailwindcss"
        responses.add(responses.GET, URL, body=b"binary", status=200)

        download_file(URL, destination)

        mode = stat.S_IMODE(destination.stat().st_mode)
        assert mode == EXECUTABLE_MODE
        assert os.access(destination, os.X_OK)

    @responses.activate
    def test_download_replaces_existing_file(self, tmp_path):
        """Test an existing binary is overwritten in place."""
        destination = tmp_path / "tailwindcss"
        destination.write_bytes(b"old version")
        responses.add(responses.GET, URL, body=b"new version", status=200)

        download_file(URL, destination)

        assert destination.read_bytes() == b"new version"

    @responses.activate
    def test_download_sends_user_agent(self, tmp_path):
        """Test requests identify the launcher."""
        responses.add(responses.GET, URL, body=b"binary", status=200)

        download_file(URL, tmp_path / "tailwindcss")

        assert responses.calls[0].request.headers["User-Agent"].startswith(
            "tailwindkit/"
        )

    @responses.activate
    def test_download_follows_redirect(self, tmp_path):
        """Test GitHub's redirect to the asset host is followed."""
        asset_url = "https://objects.example.com/asset"
        responses.add(
            responses.GET, URL, status=302, headers={"Location": asset_url}
        )
        responses.add(responses.GET, asset_url, body=b"binary", status=200)

        destination = download_file(URL, tmp_path / "tailwindcss")

        assert destination.read_bytes() == b"binary"

    @responses.activate
    def test_download_with_session(self, tmp_path):
        """Test the given session is used for the request."""
        responses.add(responses.GET, URL, body=b"binary", status=200)

        with requests.Session() as session:
            download_file(URL, tmp_path / "tailwindcss", session=session)

        assert len(responses.calls) == 1

    @pytest.mark.parametrize("status", [404, 500])
    @responses.activate
    def test_bad_status_code(self, tmp_path, status):
        """Test non-200 responses fail without touching the destination."""
        destination = tmp_path / "tailwindcss"
        responses.add(responses.GET, URL, body=b"Not Found", status=status)

        with pytest.raises(DownloadError, match="bad response code") as exc_info:
            download_file(URL, destination)

        assert exc_info.value.status_code == status
        assert exc_info.value.url == URL
        assert not destination.exists()
        assert _leftovers(tmp_path) == []

    @posix_only
    @responses.activate
    def test_bad_status_keeps_previous_binary(self, tmp_path):
        """Test a failed download leaves the old binary and its mode alone."""
        destination = tmp_path / "tailwindcss"
        destination.write_bytes(b"old version")
        destination.chmod(0o644)
        responses.add(responses.GET, URL, status=500)

        with pytest.raises(DownloadError):
            download_file(URL, destination)

        assert destination.read_bytes() == b"old version"
        assert stat.S_IMODE(destination.stat().st_mode) == 0o644

    @responses.activate
    def test_connection_error(self, tmp_path):
        """Test transport errors are wrapped in DownloadError."""
        responses.add(
            responses.GET, URL, body=requests.exceptions.ConnectionError("refused")
        )

        with pytest.raises(DownloadError, match="refused"):
            download_file(URL, tmp_path / "tailwindcss")

    def test_interrupted_transfer_removes_partial_file(self, tmp_path, monkeypatch):
        """Test a failure mid-copy leaves no partial output behind."""
        destination = tmp_path / "tailwindcss"

        class BrokenResponse:
            status_code = 200
            reason = "OK"

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

            def iter_content(self, chunk_size):
                yield b"first chunk"
                raise requests.exceptions.ChunkedEncodingError("connection reset")

        monkeypatch.setattr(requests, "get", lambda *a, **kw: BrokenResponse())

        with pytest.raises(DownloadError, match="interrupted after 11 bytes"):
            download_file(URL, destination)

        assert not destination.exists()
        assert _leftovers(tmp_path) == []

    def test_keyboard_interrupt_removes_partial_file(self, tmp_path, monkeypatch):
        """Test Ctrl-C mid-transfer propagates and leaves no partial output."""
        destination = tmp_path / "tailwindcss"

        class InterruptedResponse:
            status_code = 200
            reason = "OK"

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

            def iter_content(self, chunk_size):
                yield b"first chunk"
                raise KeyboardInterrupt

        monkeypatch.setattr(requests, "get", lambda *a, **kw: InterruptedResponse())

        with pytest.raises(KeyboardInterrupt):
            download_file(URL, destination)

        assert not destination.exists()
        assert _leftovers(tmp_path) == []

    @responses.activate
    def test_interrupt_while_installing_removes_partial_file(self, tmp_path, monkeypatch):
        """Test an interrupt between transfer and replace cleans up too."""
        destination = tmp_path / "tailwindcss"
        responses.add(responses.GET, URL, body=b"binary", status=200)

        def interrupted_replace(src, dst):
            raise KeyboardInterrupt

        monkeypatch.setattr(os, "replace", interrupted_replace)

        with pytest.raises(KeyboardInterrupt):
            download_file(URL, destination)

        assert not destination.exists()
        assert _leftovers(tmp_path) == []

    def test_transfer_error_logged_once(self, tmp_path, monkeypatch, caplog):
        """Test a failed transfer is not logged at error level here."""

        class BrokenResponse:
            status_code = 200
            reason = "OK"

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

            def iter_content(self, chunk_size):
                raise requests.exceptions.ChunkedEncodingError("connection reset")
                yield b""

        monkeypatch.setattr(requests, "get", lambda *a, **kw: BrokenResponse())

        with caplog.at_level(logging.ERROR, logger="tailwindkit.core.download"):
            with pytest.raises(DownloadError):
                download_file(URL, tmp_path / "tailwindcss")

        assert [r for r in caplog.records if r.levelno >= logging.ERROR] == []

    @pytest.mark.parametrize("destination", ["", ".", "/"])
    def test_destination_without_file_name(self, destination, no_network):
        """Test a destination that names no file is refused up front."""
        with pytest.raises(ValueError, match="must name a file"):
            download_file(URL, destination)

    def test_empty_url(self, tmp_path):
        """Test empty URL raises ValueError."""
        with pytest.raises(ValueError, match="URL cannot be empty"):
            download_file("", tmp_path / "tailwindcss")
