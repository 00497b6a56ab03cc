# Path: dataset_verify/engine/checks/core/constants.py
"""
Verification Checks Constants

Pass names, diagnostic kinds and tolerance values for the four
consistency passes.

TOLERANCES:
Each pass compounds a different number of rounded addends, so each
gets its own absolute tolerance. Comparisons are strict: a difference
equal to the tolerance passes.
"""

from decimal import Decimal

# ==============================================================================
# PASS NAMES
# ==============================================================================

PASS_COUNTRY = 'country'
PASS_REGION_SUM = 'region_sum'
PASS_GLOBAL_SUM = 'global_sum'
PASS_VIEW = 'view'

PASS_NAMES = [
    PASS_COUNTRY,
    PASS_REGION_SUM,
    PASS_GLOBAL_SUM,
    PASS_VIEW,
]

PASS_LABELS = {
    PASS_COUNTRY: 'Country data',
    PASS_REGION_SUM: 'Region sums',
    PASS_GLOBAL_SUM: 'Global sums',
    PASS_VIEW: 'By Region view',
}

# ==============================================================================
# DIAGNOSTIC KINDS
# ==============================================================================

KIND_MISSING_GEOGRAPHY = 'missing-geography'
KIND_MISSING_SEGMENT = 'missing-segment'
KIND_MISSING_SUBSEGMENT = 'missing-subsegment'
KIND_MISSING_LEAF = 'missing-leaf'
KIND_VALUE_MISMATCH = 'value-mismatch'
KIND_SUM_MISMATCH = 'sum-mismatch'

# Indexed by the depth at which path resolution stopped.
# Any depth past the end of this tuple is a missing leaf.
MISSING_KINDS_BY_DEPTH = (
    KIND_MISSING_GEOGRAPHY,
    KIND_MISSING_SEGMENT,
    KIND_MISSING_SUBSEGMENT,
)

MISSING_KINDS = frozenset({
    KIND_MISSING_GEOGRAPHY,
    KIND_MISSING_SEGMENT,
    KIND_MISSING_SUBSEGMENT,
    KIND_MISSING_LEAF,
})

MISMATCH_KINDS = frozenset({
    KIND_VALUE_MISMATCH,
    KIND_SUM_MISMATCH,
})

MISSING_LABELS = {
    KIND_MISSING_GEOGRAPHY: 'geography',
    KIND_MISSING_SEGMENT: 'segment',
    KIND_MISSING_SUBSEGMENT: 'sub-segment',
    KIND_MISSING_LEAF: 'leaf',
}

# ==============================================================================
# TOLERANCES
# ==============================================================================

DEFAULT_LEAF_TOLERANCE = Decimal('0.01')
DEFAULT_REGION_TOLERANCE = Decimal('0.05')
DEFAULT_GLOBAL_TOLERANCE = Decimal('0.1')
DEFAULT_VIEW_TOLERANCE = Decimal('0.01')

# ==============================================================================
# ROUNDING
# ==============================================================================

# Two decimal places
AMOUNT_QUANTUM = Decimal('0.01')
ZERO_AMOUNT = Decimal('0.00')

# Amounts with this many integer digits or more are not measurements
AMOUNT_MAX_DIGITS = 60

# Working precision for sums and differences; exact for any in-range amount
AMOUNT_PRECISION = 80

# ==============================================================================
# DIAGNOSTIC SAMPLE LIMITS
# ==============================================================================

DEFAULT_MISSING_SAMPLE_LIMIT = 5
DEFAULT_MISMATCH_SAMPLE_LIMIT = 10
DEFAULT_VIEW_SAMPLE_LIMIT = 5


__all__ = [
    'PASS_COUNTRY',
    'PASS_REGION_SUM',
    'PASS_GLOBAL_SUM',
    'PASS_VIEW',
    'PASS_NAMES',
    'PASS_LABELS',
    'KIND_MISSING_GEOGRAPHY',
    'KIND_MISSING_SEGMENT',
    'KIND_MISSING_SUBSEGMENT',
    'KIND_MISSING_LEAF',
    'KIND_VALUE_MISMATCH',
    'KIND_SUM_MISMATCH',
    'MISSING_KINDS_BY_DEPTH',
    'MISSING_KINDS',
    'MISMATCH_KINDS',
    'MISSING_LABELS',
    'DEFAULT_LEAF_TOLERANCE',
    'DEFAULT_REGION_TOLERANCE',
    'DEFAULT_GLOBAL_TOLERANCE',
    'DEFAULT_VIEW_TOLERANCE',
    'AMOUNT_QUANTUM',
    'ZERO_AMOUNT',
    'AMOUNT_MAX_DIGITS',
    'AMOUNT_PRECISION',
    'DEFAULT_MISSING_SAMPLE_LIMIT',
    'DEFAULT_MISMATCH_SAMPLE_LIMIT',
    'DEFAULT_VIEW_SAMPLE_LIMIT',
]
