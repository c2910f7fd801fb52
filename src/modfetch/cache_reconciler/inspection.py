"""
Validation of a package archive against the descriptor it should match.

Everything here works on archive bytes only: no filesystem, network or logging.
"""

import io
import zipfile
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from modfetch.artifact_models import ArchiveMetadata
from modfetch.modfetch_exceptions import MetadataReadFailure


class ValidationStatus(Enum):
    VALID = "valid"
    INVALID = "invalid"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class ArtifactInspection:
    """
    Outcome of inspecting a package archive.
    """

    status: ValidationStatus
    reason: str
    installed_id: Optional[str] = None
    installed_version: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status is ValidationStatus.VALID


def read_metadata(archive_bytes: bytes, metadata_entry: str) -> ArchiveMetadata:
    """
    Read the embedded metadata file of a zip archive.

    Only the first entry with the given name is considered.

    Raises:
        MetadataReadFailure: if the archive cannot be read, or the entry is missing or malformed
    """
    try:
        with zipfile.ZipFile(io.BytesIO(archive_bytes)) as archive:
            entry = next(
                (info for info in archive.infolist() if info.filename == metadata_entry),
                None,
            )
            raw = archive.read(entry) if entry is not None else None
    except Exception as e:
        raise MetadataReadFailure(f"Archive could not be read: {e}") from e

    if raw is None:
        raise MetadataReadFailure(f"{metadata_entry} not found in archive")

    try:
        return ArchiveMetadata.model_validate_json(raw)
    except ValueError as e:
        raise MetadataReadFailure(f"{metadata_entry} is malformed: {e}") from e


def inspect_archive(
    archive_bytes: bytes,
    expected_id: str,
    expected_version: str,
    metadata_entry: str = "fabric.mod.json",
) -> ArtifactInspection:
    """
    Decide whether an archive is the expected package at the expected version.

    Args:
        archive_bytes: Raw bytes of the candidate archive
        expected_id: Package id the metadata must declare
        expected_version: Composite version tag the metadata must declare
        metadata_entry: Name of the metadata entry inside the archive

    Returns:
        VALID if id and version match, INVALID if either differs, UNREADABLE if the
        metadata could not be read at all
    """
    try:
        metadata = read_metadata(archive_bytes, metadata_entry)
    except MetadataReadFailure as e:
        return ArtifactInspection(ValidationStatus.UNREADABLE, e.message)

    if metadata.id != expected_id:
        return ArtifactInspection(
            ValidationStatus.INVALID,
            f"archive contains {metadata.id!r}, expected {expected_id!r}",
            installed_id=metadata.id,
            installed_version=metadata.version,
        )

    if metadata.version != expected_version:
        return ArtifactInspection(
            ValidationStatus.INVALID,
            f"installed version {metadata.version} differs from {expected_version}",
            installed_id=metadata.id,
            installed_version=metadata.version,
        )

    return ArtifactInspection(
        ValidationStatus.VALID,
        "up to date",
        installed_id=metadata.id,
        installed_version=metadata.version,
    )
