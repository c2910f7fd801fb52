"""
Artifact downloader.

This package handles:
1. Fetching an artifact over HTTP through a narrow transport interface
2. Placing it at its planned destination
3. Marking the directory as managed by modfetch
"""

from .downloader import ArtifactDownloader
from .transport import ArtifactTransport, HttpxTransport

__all__ = ["ArtifactDownloader", "ArtifactTransport", "HttpxTransport"]
