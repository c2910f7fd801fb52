"""
This file contains various utility functions like I/O operations, handling paths, etc.
"""

import logging
import os
import pathlib
import shutil
import tempfile
from typing import List, Optional

import httpx

from modfetch.modfetch_logger import ModfetchLogger


class FileUtils:
    """
    Utility functions for file operations.
    """

    @staticmethod
    def list_with_extension(directory: pathlib.Path, extension: str) -> List[pathlib.Path]:
        """
        Lists the entries of a directory whose name ends with the given extension, sorted by name.
        """
        return sorted(
            entry for entry in directory.iterdir() if entry.name.endswith(extension)
        )

    @staticmethod
    def delete_path(path: pathlib.Path) -> None:
        """
        Deletes a file, or a directory together with everything below it.
        """
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()

    @staticmethod
    def reset_directory(directory: pathlib.Path) -> None:
        """
        Deletes the directory tree and recreates it empty.
        """
        shutil.rmtree(directory)
        directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def ensure_file(path: pathlib.Path) -> bool:
        """
        Creates an empty file unless it already exists. Returns True if the file was created.
        """
        try:
            path.touch(exist_ok=False)
        except FileExistsError:
            return False
        return True

    @staticmethod
    def download_file(
        logger: ModfetchLogger,
        url: str,
        target_path: pathlib.Path,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Downloads the file from the given URL to the given target path.

        The body is streamed into a temporary file next to the target and renamed into place
        once complete, so a failed transfer leaves nothing behind.
        """
        target_path = pathlib.Path(target_path)
        logger.log(f"Downloading file from {url} to {target_path}", logging.DEBUG)
        tmp_fd, tmp_name = tempfile.mkstemp(suffix=".tmp", dir=target_path.parent)
        owns_client = client is None
        if owns_client:
            client = httpx.Client(timeout=timeout)

        try:
            with os.fdopen(tmp_fd, "wb") as tmp_file:
                with client.stream("GET", url, follow_redirects=True) as response:
                    response.raise_for_status()
                    for chunk in response.iter_bytes():
                        tmp_file.write(chunk)
            os.replace(tmp_name, target_path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        finally:
            if owns_client:
                client.close()
