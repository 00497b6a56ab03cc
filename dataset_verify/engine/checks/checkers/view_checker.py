# Path: dataset_verify/engine/checks/checkers/view_checker.py
"""
View Checker (cross-view equivalence)

Documents that carry the alternate "By Region" view must agree with
the view rows of the tabular export:

    By Region row (global):  global > By Region > subsegment > subsegment1 > year
    By Country row:          global > By Region > region > subsegment1 > year

Missing and mismatch diagnostics share one sample. Only applied to
datasets flagged as carrying the view.
"""

from typing import Iterable, Mapping, Optional

from ....core.geography import GeographyTable
from ....core.logger import get_process_logger
from ....constants import LOG_PROCESS, VIEW_BY_REGION, VIEW_BY_COUNTRY
from ..core.check_result import Diagnostic, PassAccumulator, PassResult
from ..core.check_settings import CheckSettings
from ..core.constants import (
    PASS_VIEW,
    KIND_MISSING_SUBSEGMENT,
    KIND_VALUE_MISMATCH,
)
from ..core.value_parsing import subtract_amounts
from ..path_resolver import PathResolver, classify_missing

# Depth of the region key along the view path
VIEW_REGION_DEPTH = 2


class ViewChecker:
    """
    Compares view rows against the document's By Region subtree.

    Example:
        checker = ViewChecker(CheckSettings(), GeographyTable.default())
        result = checker.check(rows, document)
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
        self.logger = get_process_logger('view_checker')

    def view_target(self, row) -> Optional[tuple[str, str]]:
        """
        Pick the (region, child) pair a view row maps to.

        Returns:
            Tuple of view keys, or None if the row is not a view row
        """
        if row.segment == VIEW_BY_REGION and row.region == self.settings.global_label:
            return row.subsegment, row.subsegment1
        if row.segment == VIEW_BY_COUNTRY:
            return row.region, row.subsegment1
        return None

    def check(self, rows: Iterable, document: Mapping) -> PassResult:
        """
        Run the cross-view pass.

        Args:
            rows: Parsed TabularRow records
            document: Hierarchical document

        Returns:
            PassResult with exact counts and one shared diagnostic sample
        """
        tolerance = self.settings.view_tolerance
        acc = PassAccumulator(
            PASS_VIEW,
            tolerance=tolerance,
            shared_limit=self.settings.view_sample_limit,
        )

        for row in rows:
            target = self.view_target(row)
            if target is None:
                continue

            view_region, child = target
            unknown_region = (
                row.segment == VIEW_BY_REGION
                and not self.geography.is_region(view_region)
            )

            for year in self.settings.years:
                acc.count_check()
                path = (self.settings.global_label, VIEW_BY_REGION, view_region, child, year)
                expected = row.value_for(year)

                if unknown_region:
                    acc.record(Diagnostic(
                        kind=KIND_MISSING_SUBSEGMENT,
                        path=path,
                        expected=expected,
                        depth=VIEW_REGION_DEPTH,
                        details={'reason': f"'{view_region}' is not a region"},
                    ))
                    continue

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
            f"{LOG_PROCESS} By Region checks: {result.checks}, "
            f"failures: {result.failures}"
        )
        return result


__all__ = ['ViewChecker']
