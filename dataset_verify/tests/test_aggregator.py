# Path: dataset_verify/tests/test_aggregator.py
"""
Unit Tests for the Report Aggregator and Coordinator

Tests per-dataset and grand-total aggregation, and the coordinator's
handling of unreadable dataset pairs.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dataset_verify.core.dataset_specs import DatasetSpec
from dataset_verify.engine.aggregator import ReportAggregator
from dataset_verify.engine.checks.core.check_result import PassResult
from dataset_verify.engine.coordinator import DatasetResult, VerificationCoordinator


def _dataset(name, *passes, load_error=None):
    return DatasetResult(name=name, row_count=10, passes=list(passes), load_error=load_error)


class TestReportAggregator:
    """Test summary construction."""

    def test_empty_summary(self):
        summary = ReportAggregator().summary()

        assert summary.datasets == {}
        assert summary.totals == {'checks': 0, 'failures': 0, 'missing': 0, 'mismatches': 0}
        assert summary.passed

    def test_per_pass_and_totals(self):
        aggregator = ReportAggregator()
        aggregator.extend([
            _dataset(
                'value',
                PassResult('country', checks=10, missing=1, mismatches=2),
                PassResult('region_sum', checks=4, mismatches=1),
                PassResult('view', checks=3),
            ),
            _dataset(
                'volume',
                PassResult('country', checks=10),
                PassResult('view', skipped=True),
            ),
        ])

        summary = aggregator.summary()

        value = summary.datasets['value']
        assert value['passes']['country'] == {
            'checks': 10, 'failures': 3, 'missing': 1, 'mismatches': 2, 'skipped': False,
        }
        assert value['totals'] == {'checks': 17, 'failures': 4, 'missing': 1, 'mismatches': 3}
        assert summary.datasets['volume']['passes']['view']['skipped'] is True
        assert summary.totals == {'checks': 27, 'failures': 4, 'missing': 1, 'mismatches': 3}
        assert not summary.passed

    def test_failed_load_listed(self):
        aggregator = ReportAggregator()
        aggregator.add(_dataset('value', load_error='value.csv: cannot read'))

        summary = aggregator.summary()

        assert summary.failed_loads == ['value']
        assert summary.datasets['value']['loaded'] is False
        assert not summary.passed

    def test_to_dict(self):
        aggregator = ReportAggregator()
        aggregator.add(_dataset('value', PassResult('country', checks=2)))

        data = aggregator.summary().to_dict()

        assert data['passed'] is True
        assert data['totals']['checks'] == 2
        assert 'value' in data['datasets']


class TestVerificationCoordinator:
    """Test dataset orchestration."""

    def test_verify_dataset(self, settings, geography, create_dataset_files):
        csv_path, json_path = create_dataset_files
        spec = DatasetSpec('value', csv_path, json_path, has_view=True)

        result = VerificationCoordinator(settings, geography).verify_dataset(spec)

        assert result.loaded
        assert result.row_count == 8
        assert [p.pass_name for p in result.passes] == ['country', 'region_sum', 'global_sum', 'view']
        assert result.total_failures == 0
        assert result.get_pass('view').checks == 2

    def test_unreadable_pair_reported_not_raised(self, settings, geography, temp_dir, create_dataset_files):
        csv_path, _ = create_dataset_files
        specs = [
            DatasetSpec('broken', csv_path, temp_dir / 'missing.json'),
            DatasetSpec('value', *create_dataset_files),
        ]

        results = VerificationCoordinator(settings, geography).verify_all(specs)

        assert not results[0].loaded
        assert 'missing.json' in results[0].load_error
        assert results[0].passes == []
        assert results[1].loaded

    def test_invalid_json_reported(self, settings, geography, temp_dir, create_dataset_files):
        csv_path, _ = create_dataset_files
        bad_json = temp_dir / 'bad.json'
        bad_json.write_text('{"U.K.": ', encoding='utf-8')

        result = VerificationCoordinator(settings, geography).verify_dataset(
            DatasetSpec('value', csv_path, bad_json)
        )

        assert 'invalid JSON' in result.load_error

    def test_result_to_dict(self, settings, geography, create_dataset_files):
        spec = DatasetSpec('value', *create_dataset_files)

        data = VerificationCoordinator(settings, geography).verify_dataset(spec).to_dict()

        assert data['name'] == 'value'
        assert data['has_view'] is False
        assert data['passes'][-1]['skipped'] is True
        assert isinstance(data['verified_at'], str)
