# Path: dataset_verify/engine/checks/checkers/leaf_checker.py
"""
Leaf Checker (country-level equivalence)

Every country row of the tabular export must match the document leaf
at the same path:

    country -> segment -> subsegment -> subsegment1 -> year

One check per year per qualifying row. A path that does not resolve
is a missing-* diagnostic classified by the depth of failure; a
resolved leaf further than the leaf tolerance from the row value is a
value-mismatch.

Rows labelled By Region / By Country are alternate-view rows and are
left to the view checker.
"""

from typing import Iterable, Mapping, Optional

from ....core.geography import GeographyTable
from ....core.logger import get_process_logger
from ....constants import LOG_PROCESS
from ..core.check_result import Diagnostic, PassAccumulator, PassResult
from ..core.check_settings import CheckSettings
from ..core.constants import PASS_COUNTRY, KIND_VALUE_MISMATCH
from ..core.value_parsing import subtract_amounts
from ..path_resolver import PathResolver, classify_missing


class LeafChecker:
    """
    Compares country rows against document leaves.

    Example:
        checker = LeafChecker(CheckSettings(), GeographyTable.default())
        result = checker.check(rows, document)
        print(f"{result.checks} checks, {result.mismatches} mismatches")
    """

    def __init__(
        self,
        settings: CheckSettings,
        geography: GeographyTable,
        resolver: Optional[PathResolver] = None
    ):
        self.settings = settings
        self.geography = geography
        self.resolver = resolver if resolver else PathResolver()
        self.logger = get_process_logger('leaf_checker')

    def check(self, rows: Iterable, document: Mapping) -> PassResult:
        """
        Run the country-level pass.

        Args:
            rows: Parsed TabularRow records
            document: Hierarchical document

        Returns:
            PassResult with exact counts and capped diagnostics
        """
        tolerance = self.settings.leaf_tolerance
        acc = PassAccumulator(
            PASS_COUNTRY,
            tolerance=tolerance,
            missing_limit=self.settings.missing_sample_limit,
            mismatch_limit=self.settings.mismatch_sample_limit,
        )

        for row in rows:
            if row.is_view_row or not self.geography.is_country(row.region):
                continue

            for year in self.settings.years:
                acc.count_check()
                path = row.key_path() + (year,)
                expected = row.value_for(year)
                lookup = self.resolver.resolve_amount(document, path)

                if not lookup.found:
                    acc.record(Diagnostic(
                        kind=classify_missing(lookup.failed_depth),
                        path=path,
                        expected=expected,
                        depth=lookup.failed_depth,
                    ))
                    continue

                difference = subtract_amounts(expected, lookup.value)
                if abs(difference) > tolerance:
                    acc.record(Diagnostic(
                        kind=KIND_VALUE_MISMATCH,
                        path=path,
                        expected=expected,
                        actual=lookup.value,
                        difference=difference,
                    ))

        result = acc.result()
        self.logger.info(
            f"{LOG_PROCESS} Country checks: {result.checks}, "
            f"mismatches: {result.mismatches}, missing: {result.missing}"
        )
        return result


__all__ = ['LeafChecker']
