"""
Shared fixtures for modfetch tests.
"""

import pytest

from modfetch.artifact_registry import ArtifactRegistry
from modfetch.modfetch_config import ModfetchConfig
from modfetch.modfetch_logger import ModfetchLogger
from tests.test_utils import RecordingTransport


@pytest.fixture
def config():
    return ModfetchConfig()


@pytest.fixture
def logger():
    return ModfetchLogger()


@pytest.fixture
def registry(config):
    registry = ArtifactRegistry(config)
    registry.register("1.20.4", "gxDkodfS")
    registry.register("1.20.1", "NIH877ct")
    registry.register("1.19.2", "BYJF82Q8", "2.6.10")
    return registry


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "mods" / "replaymod"
