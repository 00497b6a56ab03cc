# Path: dataset_verify/engine/checks/__init__.py
"""
Verification Checks Package

- core/: Fundamental types and utilities
  - check_result: Diagnostic, PassResult, PassAccumulator
  - check_settings: Years, tolerances and sample limits
  - constants: Pass names, diagnostic kinds, default tolerances
  - value_parsing: Numeric normalization

- path_resolver: Tagged key-path lookup in the hierarchical document

- checkers/: One checker per verification pass
  - leaf_checker: Country-level equivalence
  - sum_checker: Region and global sum equivalence
  - view_checker: Cross-view equivalence

- consistency_checker: Runs every pass for one dataset pair
"""

from .core.check_result import Diagnostic, PassResult, PassAccumulator
from .core.check_settings import CheckSettings, build_years
from .core.constants import (
    PASS_COUNTRY,
    PASS_REGION_SUM,
    PASS_GLOBAL_SUM,
    PASS_VIEW,
    PASS_NAMES,
    KIND_MISSING_GEOGRAPHY,
    KIND_MISSING_SEGMENT,
    KIND_MISSING_SUBSEGMENT,
    KIND_MISSING_LEAF,
    KIND_VALUE_MISMATCH,
    KIND_SUM_MISMATCH,
)
from .core.value_parsing import ValueParser, normalize, round_amount
from .path_resolver import PathResolver, Resolution, classify_missing
from .checkers import LeafChecker, RegionSumChecker, GlobalSumChecker, ViewChecker
from .consistency_checker import ConsistencyChecker

__all__ = [
    # Core types
    'Diagnostic',
    'PassResult',
    'PassAccumulator',
    'CheckSettings',
    'build_years',
    'ValueParser',
    'normalize',
    'round_amount',

    # Path resolution
    'PathResolver',
    'Resolution',
    'classify_missing',

    # Checkers
    'LeafChecker',
    'RegionSumChecker',
    'GlobalSumChecker',
    'ViewChecker',
    'ConsistencyChecker',

    # Constants - passes
    'PASS_COUNTRY',
    'PASS_REGION_SUM',
    'PASS_GLOBAL_SUM',
    'PASS_VIEW',
    'PASS_NAMES',

    # Constants - diagnostic kinds
    'KIND_MISSING_GEOGRAPHY',
    'KIND_MISSING_SEGMENT',
    'KIND_MISSING_SUBSEGMENT',
    'KIND_MISSING_LEAF',
    'KIND_VALUE_MISMATCH',
    'KIND_SUM_MISMATCH',
]
