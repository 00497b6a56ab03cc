# Path: dataset_verify/engine/checks/core/__init__.py
"""
Core check types and utilities.

Contains:
- check_result: Diagnostic, PassResult and PassAccumulator
- check_settings: CheckSettings (years, tolerances, sample limits)
- constants: Pass names, diagnostic kinds, default tolerances
- value_parsing: Numeric normalization to rounded Decimals
"""

from .check_result import Diagnostic, PassResult, PassAccumulator
from .check_settings import CheckSettings, build_years
from .value_parsing import (
    ValueParser,
    in_range,
    normalize,
    round_amount,
    add_amounts,
    subtract_amounts,
    to_decimal,
)

__all__ = [
    'Diagnostic',
    'PassResult',
    'PassAccumulator',
    'CheckSettings',
    'build_years',
    'ValueParser',
    'normalize',
    'in_range',
    'round_amount',
    'add_amounts',
    'subtract_amounts',
    'to_decimal',
]
