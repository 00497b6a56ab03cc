# Path: dataset_verify/tests/test_report_generator.py
"""
Unit Tests for the Output Layer

Tests the JSON report file and the rich console report.
"""

import json
import sys
from decimal import Decimal
from pathlib import Path

import pytest
from rich.console import Console

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dataset_verify.engine.aggregator import ReportAggregator
from dataset_verify.engine.checks.core.check_result import Diagnostic, PassResult
from dataset_verify.engine.coordinator import DatasetResult
from dataset_verify.output import ConsoleReport, ReportGenerator


@pytest.fixture
def failing_result():
    diagnostic = Diagnostic(
        kind='sum-mismatch',
        path=('Europe', 'SegX', 'SubY', 'Sub1Z', '2024'),
        expected=Decimal('15.10'),
        actual=Decimal('15.00'),
        difference=Decimal('0.10'),
    )
    return DatasetResult(
        name='value',
        row_count=3,
        passes=[
            PassResult('country', tolerance=Decimal('0.01'), checks=2),
            PassResult('region_sum', tolerance=Decimal('0.05'), checks=1,
                       mismatches=1, diagnostics=[diagnostic]),
            PassResult('view', skipped=True),
        ],
    )


def _summary(*results):
    aggregator = ReportAggregator()
    aggregator.extend(results)
    return aggregator.summary()


class TestReportGenerator:
    """Test report.json output."""

    def test_writes_report_to_output_dir(self, temp_dir, failing_result):
        generator = ReportGenerator(output_dir=temp_dir / 'reports')

        path = generator.generate_report([failing_result], _summary(failing_result))

        assert path == temp_dir / 'reports' / 'report.json'
        report = json.loads(path.read_text(encoding='utf-8'))
        assert report['summary']['totals']['mismatches'] == 1
        dataset = report['datasets'][0]
        assert dataset['name'] == 'value'
        diagnostic = dataset['passes'][1]['diagnostics'][0]
        assert diagnostic['path'] == ['Europe', 'SegX', 'SubY', 'Sub1Z', '2024']
        assert diagnostic['difference'] == pytest.approx(0.10)
        assert diagnostic['message'] == 'Europe > SegX > SubY > Sub1Z > 2024: CSV=15.10 sum=15.00 diff=0.10'

    def test_explicit_output_path(self, temp_dir, failing_result):
        target = temp_dir / 'nested' / 'custom.json'

        path = ReportGenerator(output_dir=temp_dir).generate_report(
            [failing_result], _summary(failing_result), output_path=target
        )

        assert path == target
        assert target.exists()

    def test_output_dir_from_config(self, mock_config, temp_dir, failing_result):
        generator = ReportGenerator(mock_config)

        path = generator.generate_report([failing_result], _summary(failing_result))

        assert path == temp_dir / 'output' / 'report.json'

    def test_no_output_dir_raises(self, mock_config, failing_result):
        mock_config.get.side_effect = lambda key, default=None: None
        generator = ReportGenerator(mock_config)

        with pytest.raises(ValueError):
            generator.generate_report([failing_result], _summary(failing_result))


class TestConsoleReport:
    """Test rich console rendering."""

    def _render(self, callback):
        console = Console(record=True, width=200)
        callback(ConsoleReport(console))
        return console.export_text()

    def test_dataset_report_shows_counts_and_samples(self, failing_result):
        text = self._render(lambda report: report.print_dataset(failing_result))

        assert 'Region sums' in text
        assert 'Europe > SegX > SubY > Sub1Z > 2024' in text
        assert 'skipped' in text
        assert '1 failures in 3 checks' in text

    def test_unloaded_dataset(self):
        result = DatasetResult(name='volume', load_error='volume.csv: cannot read')

        text = self._render(lambda report: report.print_dataset(result))

        assert 'NOT LOADED' in text
        assert 'volume.csv: cannot read' in text

    def test_summary(self, failing_result):
        text = self._render(lambda report: report.print_summary(_summary(failing_result)))

        assert 'Verification Summary' in text
        assert 'Country data' in text
        assert '1 failures' in text
