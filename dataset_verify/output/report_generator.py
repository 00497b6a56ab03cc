# Path: dataset_verify/output/report_generator.py
"""
Report Generator for Dataset Verification

Writes the JSON verification report:
- report.json: every dataset result (counts and diagnostic samples)
  plus the cross-dataset summary
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_output_logger
from ..engine.coordinator import DatasetResult
from ..engine.aggregator import VerificationSummary
from ..constants import LOG_OUTPUT, REPORT_FILE


class ReportGenerator:
    """
    Creates the verification report JSON file.

    Example:
        generator = ReportGenerator(output_dir=Path('reports'))
        path = generator.generate_report(results, summary)
        print(f"Report saved to: {path}")
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        output_dir: Optional[Path] = None
    ):
        """
        Initialize report generator.

        Args:
            config: Optional ConfigLoader instance
            output_dir: Report directory (defaults to the configured output_dir)
        """
        if output_dir is None:
            self.config = config if config else ConfigLoader()
            output_dir = self.config.get('output_dir')
        else:
            self.config = config

        self.output_dir = Path(output_dir) if output_dir else None
        self.logger = get_output_logger('report_generator')

    def generate_report(
        self,
        results: list[DatasetResult],
        summary: VerificationSummary,
        output_path: Optional[Path] = None
    ) -> Path:
        """
        Generate the verification report JSON.

        Args:
            results: DatasetResults from the coordinator
            summary: VerificationSummary from the aggregator
            output_path: Optional custom output path

        Returns:
            Path to generated report file

        Raises:
            ValueError: If no output path is given and no output
                directory is configured
        """
        self.logger.info(f"{LOG_OUTPUT} Generating report for {len(results)} datasets")

        if output_path is None:
            output_path = self._get_default_output_path()

        report = self._build_report(results, summary)
        self._write_report(report, Path(output_path))

        self.logger.info(f"{LOG_OUTPUT} Report saved to: {output_path}")

        return Path(output_path)

    def _get_default_output_path(self) -> Path:
        if not self.output_dir:
            raise ValueError("Output directory not configured")
        return self.output_dir / REPORT_FILE

    def _build_report(
        self,
        results: list[DatasetResult],
        summary: VerificationSummary
    ) -> dict:
        """Build report dictionary from dataset results and summary."""
        return {
            'report_type': 'dataset_verification',
            'generated_at': datetime.now().isoformat(),
            'summary': summary.to_dict(),
            'datasets': [result.to_dict() for result in results],
        }

    def _write_report(self, report: dict, output_path: Path) -> None:
        """Write report to JSON file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, default=str)


__all__ = ['ReportGenerator']
