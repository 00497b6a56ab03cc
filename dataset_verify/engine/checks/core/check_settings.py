# Path: dataset_verify/engine/checks/core/check_settings.py
"""
Check Settings

Immutable settings consumed by the consistency passes: the reporting
year list, per-pass tolerances, diagnostic sample limits and the
global aggregate label.

Built from ConfigLoader values (or constructed directly in tests).
"""

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation

from .constants import (
    DEFAULT_LEAF_TOLERANCE,
    DEFAULT_REGION_TOLERANCE,
    DEFAULT_GLOBAL_TOLERANCE,
    DEFAULT_VIEW_TOLERANCE,
    DEFAULT_MISSING_SAMPLE_LIMIT,
    DEFAULT_MISMATCH_SAMPLE_LIMIT,
    DEFAULT_VIEW_SAMPLE_LIMIT,
)
from ....constants import (
    DEFAULT_FIRST_YEAR,
    DEFAULT_YEAR_COUNT,
    DEFAULT_GLOBAL_LABEL,
    KEY_COLUMN_COUNT,
)


def build_years(first_year: int, count: int) -> tuple[str, ...]:
    """Consecutive year labels, e.g. build_years(2021, 3) -> ('2021', '2022', '2023')."""
    return tuple(str(first_year + offset) for offset in range(count))


def _tolerance(value, default: Decimal) -> Decimal:
    """Config floats become Decimals through their shortest repr."""
    if value is None:
        return default
    try:
        tolerance = Decimal(str(value))
    except InvalidOperation:
        return default
    if not tolerance.is_finite() or tolerance < 0:
        return default
    return tolerance


def _limit(value, default: int) -> int:
    if value is None or value < 0:
        return default
    return value


@dataclass(frozen=True)
class CheckSettings:
    """
    Settings shared by all verification passes.

    Attributes:
        years: Ordered year labels, one value column each
        global_label: Region label that aggregates every country
        leaf_tolerance: Country-level tolerance (Pass A)
        region_tolerance: Region sum tolerance (Pass B)
        global_tolerance: Global sum tolerance (Pass C)
        view_tolerance: By Region view tolerance (Pass D)
        missing_sample_limit: Sample cap for missing paths
        mismatch_sample_limit: Sample cap for value and sum mismatches
        view_sample_limit: Combined sample cap for the view pass
    """
    years: tuple = build_years(DEFAULT_FIRST_YEAR, DEFAULT_YEAR_COUNT)
    global_label: str = DEFAULT_GLOBAL_LABEL
    leaf_tolerance: Decimal = DEFAULT_LEAF_TOLERANCE
    region_tolerance: Decimal = DEFAULT_REGION_TOLERANCE
    global_tolerance: Decimal = DEFAULT_GLOBAL_TOLERANCE
    view_tolerance: Decimal = DEFAULT_VIEW_TOLERANCE
    missing_sample_limit: int = DEFAULT_MISSING_SAMPLE_LIMIT
    mismatch_sample_limit: int = DEFAULT_MISMATCH_SAMPLE_LIMIT
    view_sample_limit: int = DEFAULT_VIEW_SAMPLE_LIMIT

    @property
    def min_field_count(self) -> int:
        """Fields a tabular line needs: four keys plus one per year."""
        return KEY_COLUMN_COUNT + len(self.years)

    def with_years(self, first_year: int, count: int) -> 'CheckSettings':
        return replace(self, years=build_years(first_year, count))

    @classmethod
    def from_config(cls, config) -> 'CheckSettings':
        """
        Build settings from a ConfigLoader (or any object with get()).

        Args:
            config: ConfigLoader instance

        Returns:
            CheckSettings with configured values, defaults elsewhere
        """
        first_year = config.get('first_year', DEFAULT_FIRST_YEAR)
        year_count = config.get('year_count', DEFAULT_YEAR_COUNT)

        return cls(
            years=build_years(first_year, year_count),
            global_label=config.get('global_label', DEFAULT_GLOBAL_LABEL),
            leaf_tolerance=_tolerance(config.get('leaf_tolerance'), DEFAULT_LEAF_TOLERANCE),
            region_tolerance=_tolerance(config.get('region_tolerance'), DEFAULT_REGION_TOLERANCE),
            global_tolerance=_tolerance(config.get('global_tolerance'), DEFAULT_GLOBAL_TOLERANCE),
            view_tolerance=_tolerance(config.get('view_tolerance'), DEFAULT_VIEW_TOLERANCE),
            missing_sample_limit=_limit(config.get('missing_sample_limit'), DEFAULT_MISSING_SAMPLE_LIMIT),
            mismatch_sample_limit=_limit(
                config.get('mismatch_sample_limit'), DEFAULT_MISMATCH_SAMPLE_LIMIT
            ),
            view_sample_limit=_limit(config.get('view_sample_limit'), DEFAULT_VIEW_SAMPLE_LIMIT),
        )


__all__ = ['CheckSettings', 'build_years']
