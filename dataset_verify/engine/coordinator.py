# Path: dataset_verify/engine/coordinator.py
"""
Verification Coordinator

Main orchestration for the verification module.
Loads each dataset pair, runs the consistency passes and collects
one DatasetResult per pair.

A pair that cannot be loaded is reported as a load failure; the
remaining pairs are still verified.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from ..core.dataset_specs import DatasetSpec
from ..core.geography import GeographyTable
from ..core.logger import get_process_logger
from ..loaders.errors import DatasetLoadError
from ..loaders.tabular_reader import TabularReader
from ..loaders.document_reader import DocumentReader
from .checks.core.check_result import PassResult
from .checks.core.check_settings import CheckSettings
from .checks.consistency_checker import ConsistencyChecker
from ..constants import LOG_INPUT, LOG_PROCESS, LOG_OUTPUT


@dataclass
class DatasetResult:
    """
    Complete verification result for one dataset pair.

    Attributes:
        name: Dataset name (e.g. 'value')
        csv_path: Tabular export that was read
        json_path: Hierarchical document that was read
        has_view: Whether the view pass was applied
        row_count: Rows retained from the tabular export
        dropped_lines: Data lines rejected for having too few fields
        passes: One PassResult per pass, in run order
        load_error: Reason the pair could not be loaded (None on success)
        verified_at: Verification timestamp
        processing_time_seconds: Time taken to verify
    """
    name: str
    csv_path: str = ''
    json_path: str = ''
    has_view: bool = False
    row_count: int = 0
    dropped_lines: int = 0
    passes: list[PassResult] = field(default_factory=list)
    load_error: Optional[str] = None
    verified_at: datetime = None
    processing_time_seconds: float = 0.0

    def __post_init__(self):
        if self.verified_at is None:
            self.verified_at = datetime.now()

    @property
    def loaded(self) -> bool:
        return self.load_error is None

    @property
    def total_checks(self) -> int:
        return sum(p.checks for p in self.passes)

    @property
    def total_failures(self) -> int:
        return sum(p.failures for p in self.passes)

    def get_pass(self, pass_name: str) -> Optional[PassResult]:
        for result in self.passes:
            if result.pass_name == pass_name:
                return result
        return None

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'csv_path': self.csv_path,
            'json_path': self.json_path,
            'has_view': self.has_view,
            'row_count': self.row_count,
            'dropped_lines': self.dropped_lines,
            'load_error': self.load_error,
            'verified_at': self.verified_at.isoformat(),
            'processing_time_seconds': self.processing_time_seconds,
            'passes': [p.to_dict() for p in self.passes],
        }


class VerificationCoordinator:
    """
    Dataset verification workflow orchestrator.

    Coordinates:
    1. Reading the tabular export
    2. Reading the hierarchical document
    3. Running the consistency passes

    Example:
        coordinator = VerificationCoordinator(CheckSettings(), GeographyTable.default())
        results = coordinator.verify_all(specs)
    """

    def __init__(
        self,
        settings: Optional[CheckSettings] = None,
        geography: Optional[GeographyTable] = None
    ):
        """
        Initialize verification coordinator.

        Args:
            settings: Years, tolerances and sample limits
            geography: Region -> countries table
        """
        self.settings = settings if settings else CheckSettings()
        self.geography = geography if geography else GeographyTable.default()
        self.logger = get_process_logger('coordinator')

        self.tabular_reader = TabularReader(self.settings)
        self.document_reader = DocumentReader()
        self.checker = ConsistencyChecker(self.settings, self.geography)

        self.logger.info(
            f"{LOG_PROCESS} Coordinator ready: {len(self.settings.years)} years, "
            f"{len(self.geography.regions)} regions"
        )

    def verify_dataset(self, spec: DatasetSpec) -> DatasetResult:
        """
        Verify a single dataset pair.

        Args:
            spec: DatasetSpec naming the CSV and JSON files

        Returns:
            DatasetResult with pass results, or with load_error set
        """
        start_time = datetime.now()
        self.logger.info(f"{LOG_INPUT} Verifying dataset: {spec.name}")

        result = DatasetResult(
            name=spec.name,
            csv_path=str(spec.csv_path),
            json_path=str(spec.json_path),
            has_view=spec.has_view,
        )

        try:
            parsed = self.tabular_reader.read_rows(spec.csv_path)
            document = self.document_reader.read(spec.json_path)
        except DatasetLoadError as e:
            self.logger.error(f"{LOG_INPUT} Cannot load dataset {spec.name}: {e}")
            result.load_error = str(e)
            result.processing_time_seconds = (datetime.now() - start_time).total_seconds()
            return result

        result.row_count = len(parsed.rows)
        result.dropped_lines = parsed.dropped_lines

        self.logger.info(f"{LOG_PROCESS} Checking {result.row_count} rows for {spec.name}")
        result.passes = self.checker.check_all(parsed.rows, document, has_view=spec.has_view)

        result.processing_time_seconds = (datetime.now() - start_time).total_seconds()
        self.logger.info(
            f"{LOG_OUTPUT} Dataset {spec.name}: {result.total_checks} checks, "
            f"{result.total_failures} failures in {result.processing_time_seconds:.2f}s"
        )
        return result

    def verify_all(self, specs: Iterable[DatasetSpec]) -> list[DatasetResult]:
        """
        Verify every dataset pair in order.

        Returns:
            List of DatasetResult, one per DatasetSpec
        """
        results = [self.verify_dataset(spec) for spec in specs]
        self.logger.info(f"{LOG_OUTPUT} Verified {len(results)} datasets")
        return results


__all__ = ['DatasetResult', 'VerificationCoordinator']
