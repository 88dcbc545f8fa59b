"""Error taxonomy for the bundler."""

from pathlib import Path
from typing import Union


class BundlerError(Exception):
    """Base class for failures that abort a bundle run."""

    exit_code = 1

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ScanError(BundlerError):
    """Could not list, stat or read something under the source directory."""

    exit_code = 3


class WriteError(BundlerError):
    """Could not create or overwrite the destination file."""

    exit_code = 4
