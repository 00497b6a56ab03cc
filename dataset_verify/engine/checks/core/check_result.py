# Path: dataset_verify/engine/checks/core/check_result.py
"""
Check Result Data Structures

Provides the Diagnostic and PassResult dataclasses used by all
verification passes, plus the PassAccumulator that collects them.

Counts are always exact. Only the diagnostic SAMPLE is capped, so a
systemic failure does not flood the report.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from .constants import (
    MISSING_KINDS,
    MISMATCH_KINDS,
    MISSING_LABELS,
    KIND_SUM_MISMATCH,
    PASS_LABELS,
)
from ....constants import PATH_SEPARATOR


def _amount(value: Optional[Decimal]) -> Optional[float]:
    """Convert a Decimal to float for serialization."""
    return float(value) if value is not None else None


@dataclass(frozen=True)
class Diagnostic:
    """
    One failed check.

    Attributes:
        kind: One of the KIND_* constants
        path: Full key path in the hierarchical document (ending in the year)
        expected: Value stored in the tabular export
        actual: Value found in the document, or the computed sum
        difference: Signed difference (expected - actual) for mismatches
        depth: Index of the key at which path resolution stopped (missing only)
        details: Additional context (e.g. countries absent from a sum)
    """
    kind: str
    path: tuple
    expected: Optional[Decimal] = None
    actual: Optional[Decimal] = None
    difference: Optional[Decimal] = None
    depth: Optional[int] = None
    details: dict = field(default_factory=dict)

    @property
    def is_missing(self) -> bool:
        return self.kind in MISSING_KINDS

    @property
    def is_mismatch(self) -> bool:
        return self.kind in MISMATCH_KINDS

    @property
    def path_label(self) -> str:
        return PATH_SEPARATOR.join(str(key) for key in self.path)

    @property
    def message(self) -> str:
        """Human-readable sample line."""
        if self.is_missing:
            return f"MISSING {MISSING_LABELS[self.kind]}: {self.path_label}"

        if self.kind == KIND_SUM_MISMATCH:
            return (
                f"{self.path_label}: CSV={self.expected} sum={self.actual} "
                f"diff={self.difference:.2f}"
            )

        return f"MISMATCH: {self.path_label}: CSV={self.expected} JSON={self.actual}"

    def to_dict(self) -> dict:
        item = {
            'kind': self.kind,
            'path': list(self.path),
            'message': self.message,
        }

        if self.expected is not None:
            item['expected'] = _amount(self.expected)

        if self.actual is not None:
            item['actual'] = _amount(self.actual)

        if self.difference is not None:
            item['difference'] = _amount(self.difference)

        if self.depth is not None:
            item['depth'] = self.depth

        if self.details:
            item['details'] = self.details

        return item


@dataclass
class PassResult:
    """
    Outcome of one verification pass over one dataset pair.

    Attributes:
        pass_name: One of the PASS_* constants
        tolerance: Absolute tolerance used by the pass
        checks: Number of comparisons performed
        missing: Number of comparisons that failed path resolution
        mismatches: Number of comparisons outside tolerance
        skipped: Whether the pass was not applicable to the dataset
        diagnostics: Capped sample of failures
    """
    pass_name: str
    tolerance: Optional[Decimal] = None
    checks: int = 0
    missing: int = 0
    mismatches: int = 0
    skipped: bool = False
    diagnostics: list = field(default_factory=list)

    @property
    def failures(self) -> int:
        return self.missing + self.mismatches

    @property
    def passed(self) -> bool:
        return self.failures == 0

    @property
    def label(self) -> str:
        return PASS_LABELS.get(self.pass_name, self.pass_name)

    def to_dict(self) -> dict:
        return {
            'pass_name': self.pass_name,
            'tolerance': _amount(self.tolerance),
            'skipped': self.skipped,
            'checks': self.checks,
            'failures': self.failures,
            'missing': self.missing,
            'mismatches': self.mismatches,
            'diagnostics': [d.to_dict() for d in self.diagnostics],
        }


class PassAccumulator:
    """
    Collects counts and a capped diagnostic sample for one pass.

    Owned by exactly one pass invocation and returned through result().
    Missing and mismatch samples are capped separately, unless a
    shared_limit is given, in which case both draw from one sample.

    Example:
        acc = PassAccumulator(PASS_COUNTRY, tolerance=Decimal('0.01'))
        acc.count_check()
        acc.record(diagnostic)
        result = acc.result()
    """

    def __init__(
        self,
        pass_name: str,
        tolerance: Optional[Decimal] = None,
        missing_limit: int = 0,
        mismatch_limit: int = 0,
        shared_limit: Optional[int] = None
    ):
        self.pass_name = pass_name
        self.tolerance = tolerance
        self.missing_limit = missing_limit
        self.mismatch_limit = mismatch_limit
        self.shared_limit = shared_limit
        self.checks = 0
        self.missing = 0
        self.mismatches = 0
        self._diagnostics: list[Diagnostic] = []

    def count_check(self) -> None:
        self.checks += 1

    def record(self, diagnostic: Diagnostic) -> None:
        """Count a failure and keep it if its sample still has room."""
        if diagnostic.is_missing:
            self.missing += 1
            within_cap = self.missing <= self.missing_limit
        else:
            self.mismatches += 1
            within_cap = self.mismatches <= self.mismatch_limit

        if self.shared_limit is not None:
            within_cap = len(self._diagnostics) < self.shared_limit

        if within_cap:
            self._diagnostics.append(diagnostic)

    def result(self) -> PassResult:
        return PassResult(
            pass_name=self.pass_name,
            tolerance=self.tolerance,
            checks=self.checks,
            missing=self.missing,
            mismatches=self.mismatches,
            diagnostics=list(self._diagnostics),
        )


__all__ = ['Diagnostic', 'PassResult', 'PassAccumulator']
