"""
Artifact downloader implementation.

Downloads a registered artifact into a directory and marks that directory
as managed.
"""

import logging
import pathlib
from typing import Optional, Union

from modfetch.artifact_downloader.transport import ArtifactTransport, HttpxTransport
from modfetch.artifact_registry import ArtifactRegistry, DownloadPlan
from modfetch.modfetch_exceptions import DownloadFailed
from modfetch.modfetch_logger import ModfetchLogger
from modfetch.modfetch_utils import FileUtils


class ArtifactDownloader:
    """
    Downloads artifacts planned by an ArtifactRegistry.

    Performs a single attempt per call. Transport errors are surfaced as DownloadFailed.
    """

    def __init__(
        self,
        registry: ArtifactRegistry,
        logger: ModfetchLogger,
        transport: Optional[ArtifactTransport] = None,
    ):
        """
        Initialize the artifact downloader.

        Args:
            registry: The ArtifactRegistry with the registered descriptors
            logger: Logger for progress and error messages
            transport: Transport used to fetch URLs, defaults to HttpxTransport
        """
        self.registry = registry
        self.logger = logger
        self.transport = transport or HttpxTransport(
            logger, timeout=registry.config.download_timeout
        )

    @property
    def config(self):
        return self.registry.config

    def download_and_install(
        self, platform_version: str, directory: Union[str, pathlib.Path]
    ) -> pathlib.Path:
        """
        Download the artifact registered for a platform version into a directory.

        Args:
            platform_version: The platform version to download the artifact for
            directory: An existing directory to download into

        Returns:
            Path of the downloaded artifact

        Raises:
            UnregisteredVersion: if nothing is registered for the version
            DownloadFailed: if the transport fails
        """
        plan = self.registry.create_download_plan(platform_version, directory)
        return self.download(plan)

    def download(self, plan: DownloadPlan) -> pathlib.Path:
        """
        Execute a download plan.

        Args:
            plan: The download plan to execute

        Returns:
            Path of the downloaded artifact
        """
        tag = plan.descriptor.composite_version_tag
        self.logger.log(
            f"Downloading {self.config.package_name} {tag} from {plan.url}",
            logging.INFO,
        )

        try:
            self.transport.download(plan.url, plan.destination_path)
        except Exception as e:
            raise DownloadFailed(plan.url, plan.destination_path) from e

        self._create_marker(plan.directory)

        self.logger.log(
            f"Successfully downloaded {self.config.package_name} {tag} to {plan.destination_path}",
            logging.INFO,
        )

        return plan.destination_path

    def _create_marker(self, directory: pathlib.Path) -> None:
        """
        Create the file telling users not to put other files into the directory.
        """
        marker = directory / self.config.marker_file_name
        try:
            FileUtils.ensure_file(marker)
        except OSError as e:
            self.logger.log(
                f"Failed to create marker file {marker}: {e}",
                logging.ERROR,
            )
