# Path: dataset_verify/loaders/errors.py
"""
Loader Errors

Raised when an input file cannot be read at all. Anything that can be
read is handed to the checks, which report data problems as
diagnostics instead of raising.
"""

from pathlib import Path


class DatasetLoadError(Exception):
    """An input file is unreadable or not in the expected format."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


__all__ = ['DatasetLoadError']
