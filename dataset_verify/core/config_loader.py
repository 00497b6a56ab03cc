# Path: dataset_verify/core/config_loader.py
"""
Configuration Loader for Dataset Verification Module

Loads configuration from .env file for the verification system.
Singleton pattern ensures consistent configuration across all components.

NO hardcoded paths, NO magic numbers.
All configuration comes from environment variables, with defaults
matching the standard value/volume export layout.
"""

import math
import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from ..constants import (
    DEFAULT_FIRST_YEAR,
    DEFAULT_YEAR_COUNT,
    DEFAULT_GLOBAL_LABEL,
    DEFAULT_VIEW_DATASETS,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

ENV_PREFIX = 'DATASET_VERIFY_'

# Input files
DEFAULT_VALUE_CSV: str = 'Nut value.csv'
DEFAULT_VALUE_JSON: str = 'public/data/value.json'
DEFAULT_VOLUME_CSV: str = 'Nut volume.csv'
DEFAULT_VOLUME_JSON: str = 'public/data/volume.json'


class ConfigLoader:
    """
    Singleton configuration loader for the verification module.

    Loads configuration from environment variables with validation,
    type conversion, and sensible defaults.

    Example:
        config = ConfigLoader()
        years = config.get('year_count')            # Returns int
        tolerance = config.get('region_tolerance')  # float, or None when unset
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # dataset_verify/core/config_loader.py -> go up 3 levels to project root
        current_file = Path(__file__).resolve()
        project_root = current_file.parent.parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # DEBUG (forces DEBUG log level)
            # ================================================================
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # INPUT FILES (READ-ONLY)
            # ================================================================
            'value_csv': self._get_path('VALUE_CSV', DEFAULT_VALUE_CSV),
            'value_json': self._get_path('VALUE_JSON', DEFAULT_VALUE_JSON),
            'volume_csv': self._get_path('VOLUME_CSV', DEFAULT_VOLUME_CSV),
            'volume_json': self._get_path('VOLUME_JSON', DEFAULT_VOLUME_JSON),
            'geography_file': self._get_path('GEOGRAPHY_FILE'),
            'view_datasets': self._get_list('VIEW_DATASETS', DEFAULT_VIEW_DATASETS),

            # ================================================================
            # OUTPUT PATHS (WRITE)
            # ================================================================
            'output_dir': self._get_path('OUTPUT_DIR'),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', 'INFO'),

            # ================================================================
            # DATASET SCHEMA
            # ================================================================
            'first_year': self._get_int('FIRST_YEAR', DEFAULT_FIRST_YEAR),
            'year_count': self._get_int('YEAR_COUNT', DEFAULT_YEAR_COUNT),
            'global_label': self._get_env('GLOBAL_LABEL', DEFAULT_GLOBAL_LABEL),

            # ================================================================
            # VERIFICATION TOLERANCES
            # ================================================================
            # None when unset; CheckSettings applies the engine defaults
            'leaf_tolerance': self._get_float('LEAF_TOLERANCE'),
            'region_tolerance': self._get_float('REGION_TOLERANCE'),
            'global_tolerance': self._get_float('GLOBAL_TOLERANCE'),
            'view_tolerance': self._get_float('VIEW_TOLERANCE'),

            # ================================================================
            # DIAGNOSTIC SAMPLES
            # ================================================================
            'missing_sample_limit': self._get_int('MISSING_SAMPLE_LIMIT'),
            'mismatch_sample_limit': self._get_int('MISMATCH_SAMPLE_LIMIT'),
            'view_sample_limit': self._get_int('VIEW_SAMPLE_LIMIT'),
        }

        return config

    def _get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get string environment variable."""
        value = os.getenv(ENV_PREFIX + key)

        if value is None:
            return default

        return value.strip()

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default

        return value.strip().lower() in ('true', '1', 'yes', 'on')

    def _get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default

        try:
            return int(value.strip())
        except ValueError:
            return default

    def _get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        """Get finite float environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default

        try:
            parsed = float(value.strip())
        except ValueError:
            return default

        return parsed if math.isfinite(parsed) else default

    def _get_path(self, key: str, default: Optional[str] = None) -> Optional[Path]:
        """Get path environment variable."""
        value = os.getenv(ENV_PREFIX + key)

        if value is None or not value.strip():
            return Path(default) if default else None

        return Path(value.strip())

    def _get_list(self, key: str, default: list[str]) -> list[str]:
        """Get comma separated environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return list(default)

        return [item.strip() for item in value.split(',') if item.strip()]

    def get(self, key: str, default: any = None) -> any:
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> any:
        """Get configuration value using dictionary syntax."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config

    def keys(self):
        """Get all configuration keys."""
        return self._config.keys()

    @classmethod
    def reset(cls):
        """Reset singleton for testing purposes."""
        cls._instance = None
        cls._initialized = False


__all__ = ['ConfigLoader']
