"""
Cache reconciliation.

This package decides, from the contents of a directory and the metadata
embedded in the package found there, whether to keep, replace or fetch the
artifact for a platform version.
"""

from .directory_state import CacheDirectoryState, DirectoryClassification
from .inspection import ArtifactInspection, ValidationStatus, inspect_archive, read_metadata
from .reconciler import CacheReconciler

__all__ = [
    "ArtifactInspection",
    "CacheDirectoryState",
    "CacheReconciler",
    "DirectoryClassification",
    "ValidationStatus",
    "inspect_archive",
    "read_metadata",
]
