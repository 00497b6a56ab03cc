# Path: dataset_verify/engine/checks/checkers/sum_checker.py
"""
Sum Checkers (aggregate equivalence)

Aggregate rows of the tabular export must equal the sum of their
constituent country leaves in the document:

- RegionSumChecker: region rows vs the sum of that region's countries
- GlobalSumChecker: global rows vs the sum of every country

A country missing from the document contributes zero and is listed
in the diagnostic details; the sum is still compared. The sum is
rounded to two decimals before comparison. Tolerances are looser than
the leaf tolerance because rounding compounds across addends.
"""

from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence

from ....core.geography import GeographyTable
from ....core.logger import get_process_logger
from ....constants import LOG_PROCESS
from ..core.check_result import Diagnostic, PassAccumulator, PassResult
from ..core.check_settings import CheckSettings
from ..core.constants import (
    PASS_REGION_SUM,
    PASS_GLOBAL_SUM,
    KIND_SUM_MISMATCH,
)
from ..core.value_parsing import add_amounts, round_amount, subtract_amounts
from ..path_resolver import PathResolver


class AggregateSumChecker:
    """
    Base class for sum passes.

    Subclasses choose which rows are aggregates, which countries
    make up each aggregate, and which tolerance applies.
    """

    pass_name: str = ''

    def __init__(
        self,
        settings: CheckSettings,
        geography: GeographyTable,
        resolver: Optional[PathResolver] = None
    ):
        self.settings = settings
        self.geography = geography
        self.resolver = resolver if resolver else PathResolver()
        self.logger = get_process_logger(self.pass_name)

    @property
    def tolerance(self) -> Decimal:
        raise NotImplementedError

    def selects(self, row) -> bool:
        raise NotImplementedError

    def members(self, row) -> Sequence[str]:
        raise NotImplementedError

    def sum_members(
        self,
        document: Mapping,
        members: Sequence[str],
        row,
        year: str
    ) -> tuple[Decimal, list[str]]:
        """
        Sum the member leaves for one row and year.

        Returns:
            Tuple of (rounded sum, members with no numeric leaf)
        """
        amounts = []
        absent = []

        for country in members:
            path = (country, row.segment, row.subsegment, row.subsegment1, year)
            lookup = self.resolver.resolve_amount(document, path)
            if lookup.found:
                amounts.append(lookup.value)
            else:
                absent.append(country)

        return round_amount(add_amounts(amounts)), absent

    def check(self, rows: Iterable, document: Mapping) -> PassResult:
        """
        Run the sum pass.

        Args:
            rows: Parsed TabularRow records
            document: Hierarchical document

        Returns:
            PassResult with exact counts and capped diagnostics
        """
        tolerance = self.tolerance
        acc = PassAccumulator(
            self.pass_name,
            tolerance=tolerance,
            missing_limit=self.settings.missing_sample_limit,
            mismatch_limit=self.settings.mismatch_sample_limit,
        )

        for row in rows:
            if row.is_view_row or not self.selects(row):
                continue

            members = self.members(row)
            for year in self.settings.years:
                acc.count_check()
                expected = row.value_for(year)
                total, absent = self.sum_members(document, members, row, year)
                difference = subtract_amounts(expected, total)

                if abs(difference) > tolerance:
                    details = {'member_count': len(members)}
                    if absent:
                        details['missing_members'] = absent
                    acc.record(Diagnostic(
                        kind=KIND_SUM_MISMATCH,
                        path=row.key_path() + (year,),
                        expected=expected,
                        actual=total,
                        difference=difference,
                        details=details,
                    ))

        result = acc.result()
        self.logger.info(
            f"{LOG_PROCESS} {result.label} checks: {result.checks}, "
            f"mismatches (>{tolerance}): {result.mismatches}"
        )
        return result


class RegionSumChecker(AggregateSumChecker):
    """Region rows must equal the sum of their countries."""

    pass_name = PASS_REGION_SUM

    @property
    def tolerance(self) -> Decimal:
        return self.settings.region_tolerance

    def selects(self, row) -> bool:
        return self.geography.is_region(row.region)

    def members(self, row) -> Sequence[str]:
        return self.geography.countries_in(row.region)


class GlobalSumChecker(AggregateSumChecker):
    """Global rows must equal the sum of every country of every region."""

    pass_name = PASS_GLOBAL_SUM

    @property
    def tolerance(self) -> Decimal:
        return self.settings.global_tolerance

    def selects(self, row) -> bool:
        return row.region == self.settings.global_label

    def members(self, row) -> Sequence[str]:
        return self.geography.all_countries


__all__ = ['AggregateSumChecker', 'RegionSumChecker', 'GlobalSumChecker']
