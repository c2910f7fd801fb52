"""
Pydantic model for the metadata file embedded in a package archive.
"""

from pydantic import BaseModel, ConfigDict, StrictStr


class ArchiveMetadata(BaseModel):
    """Package id and version as declared by the package itself (fabric.mod.json)."""

    model_config = ConfigDict(extra="allow")

    id: StrictStr
    version: StrictStr
