"""
Artifact registry implementation.

Maps platform versions to the remote release that should be installed for
them. The registry is populated once at startup and then handed to the
downloader and the reconciler.
"""

import json
import os
import pathlib
from pathlib import PurePath
from typing import Dict, List, Optional, Union

from modfetch.artifact_models import ArtifactDescriptor, ArtifactRegistryConfig
from modfetch.modfetch_config import ModfetchConfig
from modfetch.modfetch_exceptions import UnregisteredVersion


class DownloadPlan:
    """
    A plan to download a specific artifact.

    Captures all information needed to fetch the artifact and place it on disk.
    """

    def __init__(
        self,
        descriptor: ArtifactDescriptor,
        url: str,
        destination_path: pathlib.Path,
    ):
        """
        Initialize a download plan.

        Args:
            descriptor: The descriptor the plan was created from
            url: URL to download from
            destination_path: Where the downloaded file is written
        """
        self.descriptor = descriptor
        self.url = url
        self.destination_path = destination_path

    @property
    def directory(self) -> pathlib.Path:
        return self.destination_path.parent

    def __repr__(self) -> str:
        return (
            f"DownloadPlan(version={self.descriptor.platform_version}, "
            f"url={self.url}, destination={self.destination_path})"
        )


class ArtifactRegistry:
    """
    Holds the artifact descriptors, keyed by platform version.

    Registration is meant to happen once during startup and is not safe for
    concurrent mutation. Lookups afterwards are read-only.
    """

    def __init__(self, config: Optional[ModfetchConfig] = None):
        """
        Initialize an empty registry.

        Args:
            config: Package constants used to build file names and URLs
        """
        self.config = config or ModfetchConfig()
        self.artifacts: Dict[str, ArtifactDescriptor] = {}

    @classmethod
    def from_config(
        cls,
        registry_config: ArtifactRegistryConfig,
        config: Optional[ModfetchConfig] = None,
    ) -> "ArtifactRegistry":
        """
        Build a registry from a parsed artifacts.json.

        Entries without a packageVersion use the file's defaultPackageVersion,
        and failing that the one from the ModfetchConfig.
        """
        registry = cls(config)
        default_version = registry_config.default_package_version
        for platform_version, entry in registry_config.artifacts.items():
            registry.register(
                platform_version,
                entry.remote_version_id,
                entry.package_version or default_version,
            )
        return registry

    @classmethod
    def from_json(
        cls,
        path: Union[str, pathlib.Path],
        config: Optional[ModfetchConfig] = None,
    ) -> "ArtifactRegistry":
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_config(ArtifactRegistryConfig.from_dict(data), config)

    @classmethod
    def load_default(cls, config: Optional[ModfetchConfig] = None) -> "ArtifactRegistry":
        """
        Build a registry from the artifacts.json bundled with this package.
        """
        bundled = PurePath(os.path.dirname(os.path.dirname(__file__)), "artifacts.json")
        return cls.from_json(str(bundled), config)

    def register(
        self,
        platform_version: str,
        remote_version_id: str,
        package_version: Optional[str] = None,
    ) -> ArtifactDescriptor:
        """
        Register (or replace) the descriptor for a platform version.

        Args:
            platform_version: The host platform version, e.g. "1.20.4"
            remote_version_id: Remote version id used in the download URL
            package_version: Version of the package, defaults to the configured one

        Returns:
            The registered descriptor
        """
        descriptor = ArtifactDescriptor(
            platform_version=platform_version,
            remote_version_id=remote_version_id,
            package_version=package_version or self.config.default_package_version,
        )
        self.artifacts[platform_version] = descriptor
        return descriptor

    def resolve(self, platform_version: str) -> ArtifactDescriptor:
        """
        Get the descriptor registered for a platform version.

        Raises:
            UnregisteredVersion: if nothing is registered for the version
        """
        descriptor = self.artifacts.get(platform_version)
        if descriptor is None:
            raise UnregisteredVersion(platform_version)
        return descriptor

    def create_download_plan(
        self, platform_version: str, directory: Union[str, pathlib.Path]
    ) -> DownloadPlan:
        """
        Create the plan for downloading the artifact of a platform version into a directory.

        Raises:
            UnregisteredVersion: if nothing is registered for the version
        """
        descriptor = self.resolve(platform_version)
        return DownloadPlan(
            descriptor=descriptor,
            url=descriptor.download_url(self.config),
            destination_path=pathlib.Path(directory) / descriptor.file_name(self.config),
        )

    def platform_versions(self) -> List[str]:
        return list(self.artifacts.keys())

    def __contains__(self, platform_version: object) -> bool:
        return platform_version in self.artifacts

    def __len__(self) -> int:
        return len(self.artifacts)
