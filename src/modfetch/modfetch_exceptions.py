"""
This module contains the exceptions raised by modfetch.
"""

import pathlib
from typing import Union


class ModfetchException(Exception):
    """
    Base class for all errors raised by modfetch.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnregisteredVersion(ModfetchException):
    """
    No artifact descriptor is registered for the requested platform version.
    """

    def __init__(self, platform_version: str):
        self.platform_version = platform_version
        super().__init__(f"No artifact registered for version {platform_version}")


class DownloadFailed(ModfetchException):
    """
    The transport failed to fetch an artifact. The underlying error is
    available as __cause__.
    """

    def __init__(self, url: str, destination: Union[str, pathlib.Path]):
        self.url = url
        self.destination = pathlib.Path(destination)
        super().__init__(f"Failed to download {url} to {destination}")


class MetadataReadFailure(ModfetchException):
    """
    The embedded package metadata is missing, unreadable or malformed.
    """
