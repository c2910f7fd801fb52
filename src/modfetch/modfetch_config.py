"""
Configuration parameters for modfetch.
"""

import inspect
from dataclasses import dataclass
from typing import Optional


@dataclass
class ModfetchConfig:
    """
    Configuration parameters for fetching the managed package
    """

    package_name: str = "replaymod"
    package_id: str = "replaymod"
    project_id: str = "Nv2fQJo5"
    default_package_version: str = "2.6.15"
    cdn_base_url: str = "https://cdn.modrinth.com"
    package_extension: str = ".jar"
    metadata_entry: str = "fabric.mod.json"
    marker_file_name: str = "this is not a mod directory"
    mod_loader_id: str = "fabricloader"
    download_timeout: Optional[float] = 60.0

    @classmethod
    def from_dict(cls, env: dict):
        """
        Create a ModfetchConfig instance from a dictionary, ignoring unknown keys
        """
        return cls(
            **{k: v for k, v in env.items() if k in inspect.signature(cls).parameters}
        )
