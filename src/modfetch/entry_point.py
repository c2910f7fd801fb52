"""
Hooks modfetch into the host's mod loader discovery.

The host announces mod discovery with a ModLoaderDiscoveryEvent. Before the
mod loader scans its directories, the entry point reconciles the managed
package into "<first mod directory>/<package name>/" and adds the resulting
file to the discovery.
"""

import dataclasses
import logging
import pathlib
from typing import List, Optional

from modfetch.artifact_downloader import ArtifactTransport
from modfetch.artifact_registry import ArtifactRegistry
from modfetch.cache_reconciler import CacheReconciler
from modfetch.modfetch_config import ModfetchConfig
from modfetch.modfetch_logger import ModfetchLogger


@dataclasses.dataclass
class ModLoaderDiscoveryEvent:
    """
    Raised by the host before a mod loader discovers mods.
    """

    mod_loader_id: str
    platform_version: str
    mod_directory_paths: List[pathlib.Path] = dataclasses.field(default_factory=list)
    additional_discoveries: List[pathlib.Path] = dataclasses.field(default_factory=list)

    def add_additional_discovery(self, path: pathlib.Path) -> None:
        self.additional_discoveries.append(path)


class ModLoaderEntryPoint:
    """
    Provides the managed package to the mod loader named in the config.
    """

    def __init__(
        self,
        config: Optional[ModfetchConfig] = None,
        registry: Optional[ArtifactRegistry] = None,
        transport: Optional[ArtifactTransport] = None,
        logger: Optional[ModfetchLogger] = None,
    ):
        self.config = config or ModfetchConfig()
        self.logger = logger or ModfetchLogger()
        self.registry = registry or ArtifactRegistry.load_default(self.config)
        self.reconciler = CacheReconciler(self.registry, self.logger, transport=transport)

    def on_mod_loader_discover(
        self, event: ModLoaderDiscoveryEvent
    ) -> Optional[pathlib.Path]:
        """
        Reconcile the package and add it to the event's discovery.

        Returns:
            The path added to the discovery, or None if nothing was added
        """
        if event.mod_loader_id != self.config.mod_loader_id:
            return None

        # The first mod directory is the one belonging to the running version
        mod_directory = next(iter(event.mod_directory_paths), None)
        if mod_directory is None:
            self.logger.log(
                f"Could not find mod directory. Skipping {self.config.package_name} installation",
                logging.ERROR,
            )
            return None

        package_directory = pathlib.Path(mod_directory) / self.config.package_name
        try:
            package_file = self.reconciler.ensure_artifact(
                event.platform_version, package_directory
            )
        except Exception as e:
            self.logger.log(
                f"Failed to load {self.config.package_name}", logging.ERROR, exc_info=e
            )
            return None

        event.add_additional_discovery(package_file)
        return package_file
