# Path: dataset_verify/engine/checks/consistency_checker.py
"""
Consistency Checker

Runs the four verification passes over one dataset pair:

1. country:    country rows vs document leaves
2. region_sum: region rows vs the sum of their countries
3. global_sum: global rows vs the sum of every country
4. view:       view rows vs the By Region subtree (capability gated)

Passes are independent. Each owns a fresh accumulator, so running the
checker twice over the same inputs yields identical results.
"""

from typing import Mapping, Optional, Sequence

from ...core.geography import GeographyTable
from ...core.logger import get_process_logger
from ...constants import LOG_PROCESS
from .core.check_result import PassResult
from .core.check_settings import CheckSettings
from .core.constants import PASS_VIEW
from .checkers.leaf_checker import LeafChecker
from .checkers.sum_checker import RegionSumChecker, GlobalSumChecker
from .checkers.view_checker import ViewChecker
from .path_resolver import PathResolver


class ConsistencyChecker:
    """
    Runs all passes for one (rows, document) pair.

    Example:
        checker = ConsistencyChecker()
        results = checker.check_all(rows, document, has_view=True)
        for result in results:
            print(result.label, result.checks, result.failures)
    """

    def __init__(
        self,
        settings: Optional[CheckSettings] = None,
        geography: Optional[GeographyTable] = None,
        resolver: Optional[PathResolver] = None
    ):
        self.settings = settings if settings else CheckSettings()
        self.geography = geography if geography else GeographyTable.default()
        self.resolver = resolver if resolver else PathResolver()
        self.logger = get_process_logger('consistency_checker')

        self.leaf_checker = LeafChecker(self.settings, self.geography, self.resolver)
        self.region_sum_checker = RegionSumChecker(self.settings, self.geography, self.resolver)
        self.global_sum_checker = GlobalSumChecker(self.settings, self.geography, self.resolver)
        self.view_checker = ViewChecker(self.settings, self.geography, self.resolver)

    def check_countries(self, rows: Sequence, document: Mapping) -> PassResult:
        return self.leaf_checker.check(rows, document)

    def check_region_sums(self, rows: Sequence, document: Mapping) -> PassResult:
        return self.region_sum_checker.check(rows, document)

    def check_global_sums(self, rows: Sequence, document: Mapping) -> PassResult:
        return self.global_sum_checker.check(rows, document)

    def check_view(self, rows: Sequence, document: Mapping) -> PassResult:
        return self.view_checker.check(rows, document)

    def check_all(
        self,
        rows: Sequence,
        document: Mapping,
        has_view: bool = False
    ) -> list[PassResult]:
        """
        Run every pass in order.

        Args:
            rows: Parsed TabularRow records
            document: Hierarchical document
            has_view: Whether the document carries the By Region view

        Returns:
            One PassResult per pass; the view pass is marked skipped
            when the document has no view
        """
        rows = list(rows)
        self.logger.info(f"{LOG_PROCESS} Running consistency passes over {len(rows)} rows")

        results = [
            self.check_countries(rows, document),
            self.check_region_sums(rows, document),
            self.check_global_sums(rows, document),
        ]

        if has_view:
            results.append(self.check_view(rows, document))
        else:
            self.logger.info(f"{LOG_PROCESS} No By Region view, skipping view pass")
            results.append(PassResult(pass_name=PASS_VIEW, skipped=True))

        return results


__all__ = ['ConsistencyChecker']
