# Path: dataset_verify/constants.py
"""
Dataset Verification Module Constants

Module-wide constants for the verification system.
All dataset-agnostic constants live here.
"""

# ==============================================================================
# IPO LOGGING PREFIXES
# ==============================================================================
LOG_INPUT = '[INPUT]'
LOG_PROCESS = '[PROCESS]'
LOG_OUTPUT = '[OUTPUT]'

# ==============================================================================
# FILE NAMES
# ==============================================================================
REPORT_FILE = 'report.json'

# ==============================================================================
# TABULAR LAYOUT
# ==============================================================================
# region, segment, subsegment, subsegment1
KEY_COLUMN_COUNT = 4

CSV_DELIMITER = ','
QUOTE_CHAR = '"'

# Thousands separator stripped before numeric parsing
GROUPING_SEPARATOR = ','

# ==============================================================================
# REPORTING YEARS
# ==============================================================================
DEFAULT_FIRST_YEAR = 2021
DEFAULT_YEAR_COUNT = 13

# ==============================================================================
# GEOGRAPHY AND VIEW LABELS
# ==============================================================================
# Region label that aggregates every country
DEFAULT_GLOBAL_LABEL = 'Global'

# Segment labels marking rows that belong to the alternate view
VIEW_BY_REGION = 'By Region'
VIEW_BY_COUNTRY = 'By Country'

VIEW_SEGMENTS = frozenset({
    VIEW_BY_REGION,
    VIEW_BY_COUNTRY,
})

# Separator used when rendering hierarchical paths
PATH_SEPARATOR = ' > '

# ==============================================================================
# DATASETS
# ==============================================================================
DATASET_VALUE = 'value'
DATASET_VOLUME = 'volume'

# Only the value export carries the "By Region" view by default
DEFAULT_VIEW_DATASETS = [
    DATASET_VALUE,
]


__all__ = [
    # IPO logging
    'LOG_INPUT',
    'LOG_PROCESS',
    'LOG_OUTPUT',

    # File names
    'REPORT_FILE',

    # Tabular layout
    'KEY_COLUMN_COUNT',
    'CSV_DELIMITER',
    'QUOTE_CHAR',
    'GROUPING_SEPARATOR',

    # Years
    'DEFAULT_FIRST_YEAR',
    'DEFAULT_YEAR_COUNT',

    # Geography and views
    'DEFAULT_GLOBAL_LABEL',
    'VIEW_BY_REGION',
    'VIEW_BY_COUNTRY',
    'VIEW_SEGMENTS',
    'PATH_SEPARATOR',

    # Datasets
    'DATASET_VALUE',
    'DATASET_VOLUME',
    'DEFAULT_VIEW_DATASETS',
]
