"""
Cache reconciler implementation.

Keeps a directory holding exactly one valid, up-to-date copy of the artifact
for a platform version. The directory is treated as owned by modfetch: any
ambiguity in its contents is resolved by deleting and downloading again.
"""

import logging
import pathlib
from typing import Optional, Union

from modfetch.artifact_downloader import ArtifactDownloader, ArtifactTransport
from modfetch.artifact_models import ArtifactDescriptor
from modfetch.artifact_registry import ArtifactRegistry
from modfetch.cache_reconciler.directory_state import (
    CacheDirectoryState,
    DirectoryClassification,
)
from modfetch.cache_reconciler.inspection import (
    ArtifactInspection,
    ValidationStatus,
    inspect_archive,
)
from modfetch.modfetch_logger import ModfetchLogger
from modfetch.modfetch_utils import FileUtils


class CacheReconciler:
    """
    Produces a usable local artifact path for a platform version, downloading at most once
    per call.
    """

    def __init__(
        self,
        registry: ArtifactRegistry,
        logger: Optional[ModfetchLogger] = None,
        transport: Optional[ArtifactTransport] = None,
        downloader: Optional[ArtifactDownloader] = None,
    ):
        """
        Initialize the reconciler.

        Args:
            registry: The ArtifactRegistry with the registered descriptors
            logger: Logger for progress and warning messages
            transport: Transport handed to the default downloader
            downloader: Downloader to use instead of the default one
        """
        self.registry = registry
        self.logger = logger or ModfetchLogger()
        self.downloader = downloader or ArtifactDownloader(
            registry, self.logger, transport=transport
        )

    @property
    def config(self):
        return self.registry.config

    def ensure_artifact(
        self, platform_version: str, directory: Union[str, pathlib.Path]
    ) -> pathlib.Path:
        """
        Make sure the directory contains the valid artifact for a platform version.

        Args:
            platform_version: The platform version to provide the artifact for
            directory: Directory owned by modfetch, created if missing

        Returns:
            Path of the artifact, either the existing one or a fresh download

        Raises:
            UnregisteredVersion: if nothing is registered for the version
            DownloadFailed: if a required download fails
        """
        descriptor = self.registry.resolve(platform_version)
        directory = pathlib.Path(directory)

        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            return self.downloader.download_and_install(platform_version, directory)

        state = CacheDirectoryState.scan(directory, self.config.package_extension)
        classification = state.classification

        if classification is DirectoryClassification.EMPTY:
            return self.downloader.download_and_install(platform_version, directory)

        if classification is DirectoryClassification.MULTIPLE_CANDIDATES:
            # More than one package in a managed directory means someone else wrote to it
            self.logger.log(
                f"Found {len(state.candidates)} {self.config.package_extension} files in "
                f"{directory}, resetting the directory",
                logging.WARNING,
            )
            FileUtils.reset_directory(directory)
            return self.downloader.download_and_install(platform_version, directory)

        candidate = state.candidates[0]
        inspection = self.inspect_candidate(candidate, descriptor)

        if inspection.is_valid:
            self.logger.log(
                f"The installed {self.config.package_name} is up to date!",
                logging.INFO,
            )
            return candidate

        FileUtils.delete_path(candidate)
        return self.downloader.download_and_install(platform_version, directory)

    def inspect_candidate(
        self, candidate: pathlib.Path, descriptor: ArtifactDescriptor
    ) -> ArtifactInspection:
        """
        Check a local candidate against a descriptor. Never raises; anything that cannot be
        read is reported as UNREADABLE.
        """
        try:
            archive_bytes = candidate.read_bytes()
        except OSError as e:
            inspection = ArtifactInspection(
                ValidationStatus.UNREADABLE, f"{candidate} could not be read: {e}"
            )
        else:
            inspection = inspect_archive(
                archive_bytes,
                expected_id=self.config.package_id,
                expected_version=descriptor.composite_version_tag,
                metadata_entry=self.config.metadata_entry,
            )

        if inspection.status is ValidationStatus.UNREADABLE:
            self.logger.log(
                f"Failed to read {self.config.metadata_entry} of local "
                f"{self.config.package_name} to verify: {inspection.reason}",
                logging.WARNING,
            )
        elif (
            inspection.status is ValidationStatus.INVALID
            and inspection.installed_id == self.config.package_id
        ):
            self.logger.log(
                f"Installed {self.config.package_name} version is outdated "
                f"(installed: {inspection.installed_version}, "
                f"latest: {descriptor.composite_version_tag})! Updating...",
                logging.INFO,
            )
        elif inspection.status is ValidationStatus.INVALID:
            self.logger.log(
                f"{candidate.name} is not {self.config.package_name} "
                f"({inspection.reason}), replacing it",
                logging.WARNING,
            )

        return inspection
