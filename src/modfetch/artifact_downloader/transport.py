"""
Transports used by the downloader to fetch a URL into a file.
"""

import abc
import pathlib
from typing import Optional

import httpx

from modfetch.modfetch_logger import ModfetchLogger
from modfetch.modfetch_utils import FileUtils


class ArtifactTransport(abc.ABC):
    """
    Fetches a URL into a local file. Any failure is reported by raising.
    """

    @abc.abstractmethod
    def download(self, url: str, destination: pathlib.Path) -> None:
        ...


class HttpxTransport(ArtifactTransport):
    """
    Synchronous HTTP transport backed by httpx.

    A client may be passed in to share a connection pool or to mount a custom
    transport; otherwise a short-lived client is created per download.
    """

    def __init__(
        self,
        logger: ModfetchLogger,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.logger = logger
        self.timeout = timeout
        self.client = client

    def download(self, url: str, destination: pathlib.Path) -> None:
        FileUtils.download_file(
            self.logger, url, destination, client=self.client, timeout=self.timeout
        )
