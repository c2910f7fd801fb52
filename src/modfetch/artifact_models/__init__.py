"""
Artifact models for modfetch.

This package provides Pydantic data models for the bundled artifacts.json
descriptor data and for the metadata embedded inside a downloaded package.
"""

from .artifact_descriptor import (
    ArtifactDescriptor,
    ArtifactEntry,
    ArtifactRegistryConfig,
)
from .archive_metadata import ArchiveMetadata

__all__ = [
    # Descriptors
    "ArtifactDescriptor",
    "ArtifactEntry",
    "ArtifactRegistryConfig",
    # Embedded metadata
    "ArchiveMetadata",
]
