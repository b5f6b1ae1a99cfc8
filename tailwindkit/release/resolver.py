"""
Target version resolution.

The version to install is either pinned by configuration or the newest tag
published in the tailwindcss GitHub repository. Resolution is fail-fast: it
only runs when no usable local copy exists, so any failure here means the
tool cannot run at all.
"""

import logging
from typing import Optional

import requests
from requests.exceptions import RequestException

from tailwindkit.core.config import LauncherConfig
from tailwindkit.core.download import DEFAULT_TIMEOUT, USER_AGENT
from tailwindkit.core.exceptions import VersionResolutionError
from tailwindkit.core.platform import PlatformDescriptor

logger = logging.getLogger(__name__)

REPOSITORY = "tailwindlabs/tailwindcss"
TAGS_URL = f"https://api.github.com/repos/{REPOSITORY}/tags"
RELEASE_DOWNLOAD_URL = (
    f"https://github.com/{REPOSITORY}/releases/download/{{version}}/{{artifact}}"
)
LATEST_DOWNLOAD_URL = (
    f"https://github.com/{REPOSITORY}/releases/latest/download/{{artifact}}"
)


class VersionResolver:
    """
    Resolves the tailwindcss release to target.

    The latest version is looked up at most once per resolver instance.
    """

    def __init__(
        self,
        config: LauncherConfig,
        session: Optional[requests.Session] = None,
        tags_url: str = TAGS_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Initialize resolver.

        Args:
            config: Launcher configuration (supplies the pinned version)
            session: Optional requests session for the metadata query
            tags_url: Tag listing endpoint
            timeout: Request timeout in seconds
        """
        self.config = config
        self.session = session
        self.tags_url = tags_url
        self.timeout = timeout
        self._resolved: Optional[str] = None

    def resolve(self) -> str:
        """
        Get the target version.

        Returns:
            The pinned version verbatim, or the name of the newest tag

        Raises:
            VersionResolutionError: If the tag listing cannot be fetched or
                does not contain any tag
        """
        if self.config.is_pinned:
            return self.config.version

        if self._resolved is None:
            self._resolved = self._fetch_latest()
            logger.debug(f"Latest tailwindcss version: {self._resolved}")
        return self._resolved

    def download_url(self, platform: PlatformDescriptor) -> str:
        """
        Get the release artifact URL for a platform.

        A pinned version targets that release; otherwise the "latest release"
        download URL is used.

        Args:
            platform: Target platform descriptor

        Returns:
            Download URL of the standalone CLI binary
        """
        artifact = platform.artifact_name()
        if self.config.is_pinned:
            return RELEASE_DOWNLOAD_URL.format(
                version=self.config.version, artifact=artifact
            )
        return LATEST_DOWNLOAD_URL.format(artifact=artifact)

    def _fetch_latest(self) -> str:
        http = self.session or requests

        try:
            response = http.get(
                self.tags_url,
                timeout=self.timeout,
                headers={
                    "Accept": "application/vnd.github+json",
                    "User-Agent": USER_AGENT,
                },
            )
        except RequestException as e:
            raise VersionResolutionError(
                f"Unable to get latest version: {e}"
            ) from e

        if response.status_code != requests.codes.ok:
            raise VersionResolutionError(
                f"Unable to get latest version: status {response.status_code}"
            )

        try:
            tags = response.json()
        except ValueError as e:
            raise VersionResolutionError(
                f"Unable to get latest version: invalid JSON: {e}"
            ) from e

        if not isinstance(tags, list):
            raise VersionResolutionError(
                "Unable to get latest version: expected a list of tags"
            )

        if not tags:
            raise VersionResolutionError("Unable to get latest version: no tags found")

        newest = tags[0]
        name = newest.get("name") if isinstance(newest, dict) else None
        if not isinstance(name, str) or not name:
            raise VersionResolutionError(
                "Unable to get latest version: tag entry has no name"
            )

        return name


__all__ = [
    "REPOSITORY",
    "TAGS_URL",
    "RELEASE_DOWNLOAD_URL",
    "LATEST_DOWNLOAD_URL",
    "VersionResolver",
]
