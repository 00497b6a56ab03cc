# Path: dataset_verify/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for dataset_verify

Provides common test fixtures used across all test modules.
"""

import json
import os
import sys
import tempfile
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dataset_verify.core.config_loader import ConfigLoader
from dataset_verify.core.geography import GeographyTable
from dataset_verify.engine.checks.core.check_settings import CheckSettings
from dataset_verify.loaders.tabular_reader import TabularRow


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'DATASET_VERIFY_DEBUG': 'true',

        # Input files
        'DATASET_VERIFY_VALUE_CSV': str(temp_dir / 'value.csv'),
        'DATASET_VERIFY_VALUE_JSON': str(temp_dir / 'value.json'),
        'DATASET_VERIFY_VOLUME_CSV': str(temp_dir / 'volume.csv'),
        'DATASET_VERIFY_VOLUME_JSON': str(temp_dir / 'volume.json'),
        'DATASET_VERIFY_VIEW_DATASETS': 'value',

        # Output paths
        'DATASET_VERIFY_OUTPUT_DIR': str(temp_dir / 'output'),
        'DATASET_VERIFY_LOG_LEVEL': 'DEBUG',

        # Schema
        'DATASET_VERIFY_FIRST_YEAR': '2024',
        'DATASET_VERIFY_YEAR_COUNT': '1',

        # Thresholds
        'DATASET_VERIFY_REGION_TOLERANCE': '0.05',
        'DATASET_VERIFY_MISMATCH_SAMPLE_LIMIT': '3',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset ConfigLoader singleton between tests."""
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def geography():
    """Two regions, three countries."""
    return GeographyTable({
        'Europe': ['U.K.', 'Germany'],
        'Asia Pacific': ['Japan'],
    })


@pytest.fixture
def settings():
    """Single reporting year keeps check counts easy to follow."""
    return CheckSettings(years=('2024',))


@pytest.fixture
def make_row():
    """Factory for TabularRow records with a single 2024 value."""
    def _make_row(region, segment='SegX', subsegment='SubY', subsegment1='Sub1Z',
                  value='0.00', values=None):
        if values is None:
            values = {'2024': Decimal(value)}
        return TabularRow(
            region=region,
            segment=segment,
            subsegment=subsegment,
            subsegment1=subsegment1,
            values=values,
        )
    return _make_row


def _leaf(value):
    return {'SegX': {'SubY': {'Sub1Z': {'2024': value}}}}


@pytest.fixture
def sample_document():
    """Document consistent with sample_rows."""
    return {
        'U.K.': _leaf(Decimal('10.00')),
        'Germany': _leaf(Decimal('5.00')),
        'Japan': _leaf(Decimal('2.50')),
        'Europe': _leaf(Decimal('15.00')),
        'Asia Pacific': _leaf(Decimal('2.50')),
        'Global': {
            'SegX': {'SubY': {'Sub1Z': {'2024': Decimal('17.50')}}},
            'By Region': {
                'Europe': {
                    'Europe': {'2024': Decimal('15.00')},
                    'U.K.': {'2024': Decimal('10.00')},
                    'Germany': {'2024': Decimal('5.00')},
                },
                'Asia Pacific': {
                    'Asia Pacific': {'2024': Decimal('2.50')},
                    'Japan': {'2024': Decimal('2.50')},
                },
            },
        },
    }


@pytest.fixture
def sample_rows(make_row):
    """Country, region, global and view rows that agree with sample_document."""
    return [
        make_row('U.K.', value='10.00'),
        make_row('Germany', value='5.00'),
        make_row('Japan', value='2.50'),
        make_row('Europe', value='15.00'),
        make_row('Asia Pacific', value='2.50'),
        make_row('Global', value='17.50'),
        make_row('Global', segment='By Region', subsegment='Europe',
                 subsegment1='Europe', value='15.00'),
        make_row('Global', segment='By Region', subsegment='Asia Pacific',
                 subsegment1='Asia Pacific', value='2.50'),
        make_row('Europe', segment='By Country', subsegment='Europe',
                 subsegment1='U.K.', value='10.00'),
        make_row('Europe', segment='By Country', subsegment='Europe',
                 subsegment1='Germany', value='5.00'),
    ]


SAMPLE_CSV_LINES = [
    'region,segment,subsegment,subsegment1,2024',
    'U.K.,SegX,SubY,Sub1Z,10.00',
    'Germany,SegX,SubY,Sub1Z,5.00',
    'Japan,SegX,SubY,Sub1Z,2.50',
    'Europe,SegX,SubY,Sub1Z,15.00',
    'Asia Pacific,SegX,SubY,Sub1Z,2.50',
    'Global,SegX,SubY,Sub1Z,17.50',
    'Global,By Region,Europe,Europe,15.00',
    'Europe,By Country,Europe,U.K.,10.00',
]


def _json_leaf(value):
    return {'SegX': {'SubY': {'Sub1Z': {'2024': value}}}}


SAMPLE_JSON_DOCUMENT = {
    'U.K.': _json_leaf(10.0),
    'Germany': _json_leaf(5.0),
    'Japan': _json_leaf(2.5),
    'Europe': _json_leaf(15.0),
    'Asia Pacific': _json_leaf(2.5),
    'Global': {
        'SegX': {'SubY': {'Sub1Z': {'2024': 17.5}}},
        'By Region': {
            'Europe': {
                'Europe': {'2024': 15.0},
                'U.K.': {'2024': 10.0},
            },
        },
    },
}


# ==============================================================================
# FILE CREATION FIXTURES
# ==============================================================================

@pytest.fixture
def create_dataset_files(temp_dir):
    """Write a consistent CSV / JSON pair and return their paths."""
    csv_path = temp_dir / 'value.csv'
    json_path = temp_dir / 'value.json'

    csv_path.write_text('\n'.join(SAMPLE_CSV_LINES) + '\n', encoding='utf-8')
    with open(json_path, 'w', encoding='utf-8') as f:
        json.dump(SAMPLE_JSON_DOCUMENT, f, indent=2)

    return csv_path, json_path


@pytest.fixture
def create_geography_file(temp_dir):
    """Write the two-region geography table used by the CLI tests."""
    path = temp_dir / 'geography.json'
    with open(path, 'w', encoding='utf-8') as f:
        json.dump({'Europe': ['U.K.', 'Germany'], 'Asia Pacific': ['Japan']}, f)
    return path


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config(temp_dir):
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'first_year': 2024,
        'year_count': 1,
        'global_label': 'Global',
        'leaf_tolerance': 0.01,
        'region_tolerance': 0.05,
        'global_tolerance': 0.1,
        'view_tolerance': 0.01,
        'missing_sample_limit': 5,
        'mismatch_sample_limit': 10,
        'view_sample_limit': 5,
        'view_datasets': ['value'],
        'output_dir': temp_dir / 'output',
        'log_dir': None,
        'log_level': 'INFO',
    }.get(key, default)
    return config
