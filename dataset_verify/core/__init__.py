# Path: dataset_verify/core/__init__.py
"""
Core services: configuration, geography table, dataset pairs, logging.
"""

from .config_loader import ConfigLoader
from .dataset_specs import DatasetSpec, dataset_specs_from_config
from .geography import GeographyTable, GeographyError, DEFAULT_REGION_COUNTRIES

__all__ = [
    'ConfigLoader',
    'DatasetSpec',
    'dataset_specs_from_config',
    'GeographyTable',
    'GeographyError',
    'DEFAULT_REGION_COUNTRIES',
]
