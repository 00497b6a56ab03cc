# Path: dataset_verify/engine/checks/core/value_parsing.py
"""
Value Parsing and Normalization for Dataset Verification

Handles parsing of raw values from tabular exports and document leaves:
- Empty and absent values mean zero
- Thousands separators (commas) are stripped
- Malformed text degrades to zero instead of failing the check
- Parsed amounts are rounded to two decimals (half away from zero)
- Amounts of AMOUNT_MAX_DIGITS integer digits or more are out of range

Everything is Decimal so that a difference of exactly one cent stays
exactly one cent when compared against a tolerance. Rounding, sums and
differences run under AMOUNT_CONTEXT, whose precision covers every
in-range amount, so arithmetic on amounts never raises.
"""

from decimal import (
    Context,
    Decimal,
    InvalidOperation,
    MAX_EMAX,
    MIN_EMIN,
    ROUND_HALF_UP,
    localcontext,
)
from typing import Optional

from .constants import (
    AMOUNT_QUANTUM,
    AMOUNT_MAX_DIGITS,
    AMOUNT_PRECISION,
    ZERO_AMOUNT,
)
from ....core.logger import get_process_logger
from ....constants import GROUPING_SEPARATOR


AMOUNT_CONTEXT = Context(
    prec=AMOUNT_PRECISION,
    rounding=ROUND_HALF_UP,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
)


def in_range(value: Decimal) -> bool:
    """True for finite amounts below AMOUNT_MAX_DIGITS integer digits."""
    if not value.is_finite():
        return False
    return value.is_zero() or value.adjusted() < AMOUNT_MAX_DIGITS


class ValueParser:
    """
    Converts raw numeric representations into comparable Decimal amounts.

    Example:
        parser = ValueParser()
        parser.normalize('1,234.5')   # Decimal('1234.50')
        parser.normalize('abc')       # Decimal('0.00')
        parser.to_decimal(10.005)     # Decimal('10.005')
    """

    def __init__(self):
        self.logger = get_process_logger('value_parsing')

    def normalize(self, raw_value) -> Decimal:
        """
        Normalize free-form numeric text to a rounded Decimal.

        Never raises. Empty, absent, malformed, non-finite or out of
        range input yields zero.

        Args:
            raw_value: Raw field text (or None)

        Returns:
            Decimal rounded to two places
        """
        if raw_value is None:
            return ZERO_AMOUNT

        cleaned = str(raw_value).replace(GROUPING_SEPARATOR, '').strip()
        if not cleaned:
            return ZERO_AMOUNT

        try:
            parsed = Decimal(cleaned)
        except (InvalidOperation, ValueError):
            self.logger.debug(f"Unparseable numeric text {raw_value!r} treated as zero")
            return ZERO_AMOUNT

        if not in_range(parsed):
            self.logger.debug(f"Numeric text {raw_value!r} out of range, treated as zero")
            return ZERO_AMOUNT

        return self.round_amount(parsed)

    def round_amount(self, value: Decimal) -> Decimal:
        """Round to two decimals, half away from zero."""
        with localcontext(AMOUNT_CONTEXT):
            return value.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)

    def add_amounts(self, values) -> Decimal:
        """Exact sum of in-range amounts (zero when empty)."""
        total = ZERO_AMOUNT
        with localcontext(AMOUNT_CONTEXT):
            for value in values:
                total += value
        return total

    def subtract_amounts(self, expected: Decimal, actual: Decimal) -> Decimal:
        """Signed expected - actual."""
        with localcontext(AMOUNT_CONTEXT):
            return expected - actual

    def to_decimal(self, value) -> Optional[Decimal]:
        """
        Convert a document leaf to an exact Decimal.

        Args:
            value: Leaf taken from the hierarchical document

        Returns:
            Decimal, or None if the leaf is not an in-range finite number
        """
        # bool is an int subclass but never a measurement
        if isinstance(value, bool):
            return None

        if isinstance(value, Decimal):
            converted = value
        elif isinstance(value, int):
            converted = Decimal(value)
        elif isinstance(value, float):
            converted = Decimal(str(value))
        else:
            return None

        if not in_range(converted):
            self.logger.debug(f"Document leaf {value!r} is not an in-range number")
            return None
        return converted


_parser = ValueParser()


def normalize(raw_value) -> Decimal:
    """Module-level shortcut for ValueParser.normalize()."""
    return _parser.normalize(raw_value)


def round_amount(value: Decimal) -> Decimal:
    """Module-level shortcut for ValueParser.round_amount()."""
    return _parser.round_amount(value)


def add_amounts(values) -> Decimal:
    """Module-level shortcut for ValueParser.add_amounts()."""
    return _parser.add_amounts(values)


def subtract_amounts(expected: Decimal, actual: Decimal) -> Decimal:
    """Module-level shortcut for ValueParser.subtract_amounts()."""
    return _parser.subtract_amounts(expected, actual)


def to_decimal(value) -> Optional[Decimal]:
    """Module-level shortcut for ValueParser.to_decimal()."""
    return _parser.to_decimal(value)


__all__ = [
    'AMOUNT_CONTEXT',
    'ValueParser',
    'in_range',
    'normalize',
    'round_amount',
    'add_amounts',
    'subtract_amounts',
    'to_decimal',
]
