# Path: dataset_verify/engine/aggregator.py
"""
Report Aggregator

Pure aggregation of DatasetResults into a cross-dataset summary:
per dataset and per pass (checks, failures, missing, mismatches),
plus grand totals. No checking happens here.
"""

from dataclasses import dataclass, field
from typing import Iterable

from .coordinator import DatasetResult

COUNT_FIELDS = ('checks', 'failures', 'missing', 'mismatches')


def _empty_counts() -> dict:
    return {name: 0 for name in COUNT_FIELDS}


@dataclass
class VerificationSummary:
    """
    Cross-dataset summary.

    Attributes:
        datasets: Dataset name -> {'loaded', 'row_count', 'dropped_lines',
            'passes': pass name -> counts, 'totals': counts}
        totals: Grand totals over every dataset and pass
        failed_loads: Names of datasets that could not be loaded
    """
    datasets: dict = field(default_factory=dict)
    totals: dict = field(default_factory=_empty_counts)
    failed_loads: list = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.totals['failures'] == 0 and not self.failed_loads

    def to_dict(self) -> dict:
        return {
            'passed': self.passed,
            'totals': dict(self.totals),
            'failed_loads': list(self.failed_loads),
            'datasets': self.datasets,
        }


class ReportAggregator:
    """
    Collects dataset results and builds the summary.

    Example:
        aggregator = ReportAggregator()
        aggregator.extend(results)
        summary = aggregator.summary()
    """

    def __init__(self):
        self.results: list[DatasetResult] = []

    def add(self, result: DatasetResult) -> None:
        self.results.append(result)

    def extend(self, results: Iterable[DatasetResult]) -> None:
        for result in results:
            self.add(result)

    def summary(self) -> VerificationSummary:
        summary = VerificationSummary()

        for result in self.results:
            dataset_totals = _empty_counts()
            passes = {}

            for pass_result in result.passes:
                counts = {
                    'checks': pass_result.checks,
                    'failures': pass_result.failures,
                    'missing': pass_result.missing,
                    'mismatches': pass_result.mismatches,
                }
                passes[pass_result.pass_name] = dict(counts, skipped=pass_result.skipped)

                for name in COUNT_FIELDS:
                    dataset_totals[name] += counts[name]
                    summary.totals[name] += counts[name]

            summary.datasets[result.name] = {
                'loaded': result.loaded,
                'row_count': result.row_count,
                'dropped_lines': result.dropped_lines,
                'passes': passes,
                'totals': dataset_totals,
            }

            if not result.loaded:
                summary.failed_loads.append(result.name)

        return summary


__all__ = ['VerificationSummary', 'ReportAggregator']
