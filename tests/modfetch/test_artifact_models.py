"""
Tests for artifact models.
"""

import json
import pathlib

import pytest
from pydantic import ValidationError

from modfetch.artifact_models import (
    ArchiveMetadata,
    ArtifactDescriptor,
    ArtifactRegistryConfig,
)
from modfetch.modfetch_config import ModfetchConfig


class TestArtifactDescriptor:
    """Tests for ArtifactDescriptor model."""

    @pytest.fixture
    def descriptor(self):
        return ArtifactDescriptor(
            platform_version="1.20.4",
            remote_version_id="gxDkodfS",
            package_version="2.6.15",
        )

    def test_composite_version_tag(self, descriptor):
        assert descriptor.composite_version_tag == "1.20.4-2.6.15"

    def test_file_name(self, descriptor):
        assert descriptor.file_name(ModfetchConfig()) == "replaymod-1.20.4-2.6.15.jar"

    def test_download_url(self, descriptor):
        """Test the Modrinth CDN URL layout."""
        assert descriptor.download_url(ModfetchConfig()) == (
            "https://cdn.modrinth.com/data/Nv2fQJo5/versions/gxDkodfS/"
            "replaymod-1.20.4-2.6.15.jar"
        )

    def test_download_url_with_custom_base(self, descriptor):
        config = ModfetchConfig(cdn_base_url="http://mirror.local/")
        assert descriptor.download_url(config).startswith(
            "http://mirror.local/data/Nv2fQJo5/versions/gxDkodfS/"
        )

    def test_populate_by_alias(self):
        descriptor = ArtifactDescriptor(
            platformVersion="1.19.2", remoteVersionId="BYJF82Q8", packageVersion="2.6.10"
        )
        assert descriptor.remote_version_id == "BYJF82Q8"
        assert descriptor.composite_version_tag == "1.19.2-2.6.10"

    def test_descriptor_is_immutable(self, descriptor):
        with pytest.raises(ValidationError):
            descriptor.package_version = "9.9.9"


class TestArtifactRegistryConfig:
    """Tests for the artifacts.json schema."""

    @pytest.fixture
    def bundled_artifacts_path(self):
        """Path to the bundled artifacts.json."""
        return (
            pathlib.Path(__file__).parent.parent.parent
            / "src/modfetch/artifacts.json"
        )

    @pytest.fixture
    def bundled_artifacts(self, bundled_artifacts_path):
        with open(bundled_artifacts_path) as f:
            return json.load(f)

    def test_load_bundled_artifacts(self, bundled_artifacts):
        config = ArtifactRegistryConfig(**bundled_artifacts)
        assert config.description is not None
        assert config.default_package_version == "2.6.15"
        assert set(config.artifacts) == {
            "1.20.4",
            "1.20.3",
            "1.20.2",
            "1.20.1",
            "1.19.4",
            "1.19.3",
            "1.19.2",
        }

    def test_entry_fields(self, bundled_artifacts):
        config = ArtifactRegistryConfig.from_dict(bundled_artifacts)
        entry = config.artifacts["1.20.2"]
        assert entry.remote_version_id == "G3s7lNSQ"
        assert entry.package_version is None

    def test_unknown_entry_field_rejected(self):
        with pytest.raises(ValidationError):
            ArtifactRegistryConfig.from_dict(
                {"artifacts": {"1.20.4": {"remoteVersionId": "x", "sha1": "abc"}}}
            )

    def test_missing_remote_version_id_rejected(self):
        with pytest.raises(ValidationError):
            ArtifactRegistryConfig.from_dict({"artifacts": {"1.20.4": {}}})


class TestArchiveMetadata:
    """Tests for the embedded fabric.mod.json model."""

    def test_parses_id_and_version(self):
        metadata = ArchiveMetadata.model_validate_json(
            '{"schemaVersion": 1, "id": "replaymod", "version": "1.20.4-2.6.15", "environment": "client"}'
        )
        assert metadata.id == "replaymod"
        assert metadata.version == "1.20.4-2.6.15"

    def test_version_required(self):
        with pytest.raises(ValidationError):
            ArchiveMetadata.model_validate_json('{"id": "replaymod"}')

    def test_version_must_be_string(self):
        with pytest.raises(ValidationError):
            ArchiveMetadata.model_validate_json('{"id": "replaymod", "version": 2}')
