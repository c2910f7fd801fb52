"""
Snapshot of the candidate files in a cache directory.
"""

import pathlib
from dataclasses import dataclass
from enum import Enum
from typing import List

from modfetch.modfetch_utils import FileUtils


class DirectoryClassification(Enum):
    EMPTY = "empty"
    SINGLE_CANDIDATE = "single-candidate"
    MULTIPLE_CANDIDATES = "multiple-candidates"


@dataclass(frozen=True)
class CacheDirectoryState:
    """
    Entries of a cache directory that carry the package extension. Computed fresh on every
    reconciliation and never persisted.
    """

    directory: pathlib.Path
    candidates: List[pathlib.Path]

    @classmethod
    def scan(cls, directory: pathlib.Path, extension: str) -> "CacheDirectoryState":
        return cls(directory, FileUtils.list_with_extension(directory, extension))

    @property
    def classification(self) -> DirectoryClassification:
        if not self.candidates:
            return DirectoryClassification.EMPTY
        if len(self.candidates) == 1:
            return DirectoryClassification.SINGLE_CANDIDATE
        return DirectoryClassification.MULTIPLE_CANDIDATES
