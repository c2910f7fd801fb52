"""
Artifact registry.

This package handles:
1. Registering one pinned remote release per platform version
2. Resolving the descriptor for a platform version
3. Planning where a release is downloaded from and to
"""

from .registry import ArtifactRegistry, DownloadPlan

__all__ = ["ArtifactRegistry", "DownloadPlan"]
