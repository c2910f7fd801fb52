"""
Pydantic data models for artifacts.json and the descriptors built from it.

A descriptor pins one remote release of the managed package to one platform
version. artifacts.json lists those pins:

{
  "_description": "...",
  "defaultPackageVersion": "2.6.15",
  "artifacts": {
    "1.20.4": {"remoteVersionId": "gxDkodfS"},
    "1.20.1": {"remoteVersionId": "NIH877ct", "packageVersion": "2.6.15"}
  }
}
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from modfetch.modfetch_config import ModfetchConfig


class ArtifactDescriptor(BaseModel):
    """
    Identifies one remote release of the managed package.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    platform_version: str = Field(..., alias="platformVersion")
    remote_version_id: str = Field(..., alias="remoteVersionId")
    package_version: str = Field(..., alias="packageVersion")

    @property
    def composite_version_tag(self) -> str:
        """The version string the package embeds in its own metadata."""
        return f"{self.platform_version}-{self.package_version}"

    def file_name(self, config: ModfetchConfig) -> str:
        return (
            f"{config.package_name}-{self.platform_version}-"
            f"{self.package_version}{config.package_extension}"
        )

    def download_url(self, config: ModfetchConfig) -> str:
        return (
            f"{config.cdn_base_url.rstrip('/')}/data/{config.project_id}"
            f"/versions/{self.remote_version_id}/{self.file_name(config)}"
        )


class ArtifactEntry(BaseModel):
    """
    A single entry of artifacts.json. The platform version is the key it is stored under.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    remote_version_id: str = Field(
        ..., alias="remoteVersionId", description="Remote version id used in the download URL"
    )
    package_version: Optional[str] = Field(
        None,
        alias="packageVersion",
        description="Package version, falls back to defaultPackageVersion",
    )


class ArtifactRegistryConfig(BaseModel):
    """
    Complete artifacts.json configuration.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    description: Optional[str] = Field(None, alias="_description")
    default_package_version: Optional[str] = Field(None, alias="defaultPackageVersion")
    artifacts: Dict[str, ArtifactEntry] = Field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "ArtifactRegistryConfig":
        return cls.model_validate(data)
