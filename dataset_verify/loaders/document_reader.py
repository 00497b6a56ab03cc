# Path: dataset_verify/loaders/document_reader.py
"""
Hierarchical Document Reader

Reads the nested JSON document that the tabular export is verified
against. Non-integer numbers are loaded as exact Decimals so that
leaf comparisons are not disturbed by binary floating point.

The document is returned as-is. No structure is assumed beyond a
top-level object; missing keys at any depth are the checks' concern.
"""

import json
from decimal import Decimal
from pathlib import Path

from .errors import DatasetLoadError
from ..core.logger import get_input_logger
from ..constants import LOG_INPUT


class DocumentReader:
    """
    Loads hierarchical documents.

    Example:
        reader = DocumentReader()
        document = reader.read(Path('public/data/value.json'))
    """

    def __init__(self):
        self.logger = get_input_logger('document_reader')

    def read(self, path: Path) -> dict:
        """
        Read a JSON document.

        Args:
            path: Path to the JSON file

        Returns:
            Top-level mapping

        Raises:
            DatasetLoadError: If the file is unreadable, not JSON,
                or not a JSON object at the top level
        """
        path = Path(path)
        self.logger.info(f"{LOG_INPUT} Reading hierarchical document: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f, parse_float=Decimal)
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(path, f"cannot read document: {e}") from e
        except json.JSONDecodeError as e:
            raise DatasetLoadError(path, f"invalid JSON: {e}") from e

        if not isinstance(document, dict):
            raise DatasetLoadError(
                path, f"expected a JSON object, got {type(document).__name__}"
            )

        self.logger.info(f"{LOG_INPUT} Document has {len(document)} top-level geographies")
        return document


__all__ = ['DocumentReader']
