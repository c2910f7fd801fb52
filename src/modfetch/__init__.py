"""
modfetch keeps a version-matched copy of a single external mod package in a
directory it owns and hands its path to the host mod loader.
"""

from .artifact_registry import ArtifactRegistry
from .cache_reconciler import CacheReconciler
from .entry_point import ModLoaderDiscoveryEvent, ModLoaderEntryPoint
from .modfetch_config import ModfetchConfig
from .modfetch_exceptions import (
    DownloadFailed,
    MetadataReadFailure,
    ModfetchException,
    UnregisteredVersion,
)

__all__ = [
    "ArtifactRegistry",
    "CacheReconciler",
    "DownloadFailed",
    "MetadataReadFailure",
    "ModLoaderDiscoveryEvent",
    "ModLoaderEntryPoint",
    "ModfetchConfig",
    "ModfetchException",
    "UnregisteredVersion",
]
