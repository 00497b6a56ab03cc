# Path: dataset_verify/loaders/__init__.py
"""
Input layer: reads the tabular export and the hierarchical document.
"""

from .errors import DatasetLoadError
from .tabular_reader import parse_line, TabularRow, TabularParseResult, TabularReader
from .document_reader import DocumentReader

__all__ = [
    'DatasetLoadError',
    'parse_line',
    'TabularRow',
    'TabularParseResult',
    'TabularReader',
    'DocumentReader',
]
