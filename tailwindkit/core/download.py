"""
Network download of release artifacts.

This module streams a single file over HTTP(S) into place:
- Streams the response body in chunks (no full buffering in memory)
- Writes to a temporary file next to the destination, then atomically
  replaces the destination so a failed transfer never leaves a truncated
  executable behind
- Applies the requested permission bits once the file is complete

There is no retry, resume or checksum verification; any failure is raised
to the caller.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

import requests
from requests.exceptions import RequestException

from tailwindkit import __version__
from tailwindkit.core.exceptions import DownloadError, InstallationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
DEFAULT_TIMEOUT = 30

# rwxrwxr-x
EXECUTABLE_MODE = 0o775

USER_AGENT = f"tailwindkit/{__version__}"


def download_file(
    url: str,
    destination: Path,
    session: Optional[requests.Session] = None,
    mode: Optional[int] = EXECUTABLE_MODE,
    timeout: int = DEFAULT_TIMEOUT,
) -> Path:
    """
    Download file from URL to destination.

    Args:
        url: URL to download from
        destination: Local path to save file (parent directory must exist)
        session: Optional requests session to issue the request with
        mode: Permission bits applied to the finished file (None keeps defaults)
        timeout: Connect/read timeout in seconds

    Returns:
        Path to downloaded file

    Raises:
        DownloadError: If the request fails, the server answers with a
            non-200 status, or the body cannot be written
        ValueError: If URL or destination is invalid

    Example:
        >>> url = "https://example.com/tailwindcss-linux-x64"
        >>> download_file(url, Path.home() / ".tailwindcss" / "tailwindcss")
    """
    if not url:
        raise ValueError("URL cannot be empty")

    destination = Path(destination)
    if not destination.name:
        raise ValueError(f"Destination must name a file: {destination}")

    http = session or requests

    logger.info(f"Downloading from {url}")

    try:
        response = http.get(
            url,
            stream=True,
            timeout=timeout,
            allow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )
    except RequestException as e:
        raise DownloadError(f"Download of {url} failed: {e}", url=url) from e

    with response:
        if response.status_code != requests.codes.ok:
            raise DownloadError(
                f"bad response code: {response.status_code} {response.reason or ''}".rstrip(),
                url=url,
                status_code=response.status_code,
            )

        tmp_path = _stream_to_temp(response, destination, url)

    try:
        if mode is not None:
            os.chmod(tmp_path, mode)
        os.replace(tmp_path, destination)
    except OSError as e:
        _discard(tmp_path)
        raise InstallationError(f"Failed to install {destination}: {e}") from e
    except BaseException:
        _discard(tmp_path)
        raise

    logger.info(f"Download complete: {destination}")
    return destination


def _stream_to_temp(response, destination: Path, url: str) -> Path:
    """
    Write the response body to a temporary file beside destination.

    Returns:
        Path of the completed temporary file

    Raises:
        DownloadError: If the transfer or the write fails midway
    """
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.", suffix=".part", dir=destination.parent
        )
    except OSError as e:
        raise InstallationError(
            f"Failed to create file in {destination.parent}: {e}"
        ) from e

    tmp_path = Path(tmp_name)
    downloaded = 0
    try:
        with os.fdopen(fd, "wb") as f:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    f.write(chunk)
                    downloaded += len(chunk)
    except (RequestException, OSError) as e:
        logger.debug(f"Error during download: {e}")
        _discard(tmp_path)
        raise DownloadError(
            f"Download of {url} interrupted after {downloaded} bytes: {e}", url=url
        ) from e
    except BaseException:
        _discard(tmp_path)
        raise

    logger.debug(f"Received {downloaded} bytes into {tmp_path}")
    return tmp_path


def _discard(path: Path):
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove partial download {path}: {e}")


__all__ = [
    "CHUNK_SIZE",
    "DEFAULT_TIMEOUT",
    "EXECUTABLE_MODE",
    "USER_AGENT",
    "download_file",
]
