# Path: dataset_verify/tests/test_verify_cli.py
"""
Integration Tests for the Verification CLI

Runs the CLI end-to-end against temporary CSV / JSON pairs.
"""

import json
import logging
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dataset_verify.verify import VerificationCLI, main, parse_args


@pytest.fixture
def reset_logging():
    """Close the handlers the CLI attaches to the root logger."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)


def _dataset_args(csv_path, json_path, name='value'):
    return ['--dataset', name, str(csv_path), str(json_path)]


class TestParseArgs:

    def test_repeatable_datasets(self):
        args = parse_args([
            '--dataset', 'value', 'v.csv', 'v.json',
            '--dataset', 'volume', 'q.csv', 'q.json',
            '--with-view', 'value',
            '--years', '2021', '13',
        ])

        assert args.dataset == [['value', 'v.csv', 'v.json'], ['volume', 'q.csv', 'q.json']]
        assert args.with_view == ['value']
        assert args.years == [2021, 13]

    def test_defaults(self):
        args = parse_args([])

        assert args.dataset is None
        assert args.output_dir is None
        assert args.log_level is None


class TestVerifyCLI:
    """End-to-end runs."""

    def test_consistent_run_writes_report(
        self, reset_singletons, reset_logging, temp_dir,
        create_dataset_files, create_geography_file
    ):
        output_dir = temp_dir / 'reports'
        argv = _dataset_args(*create_dataset_files) + [
            '--with-view', 'value',
            '--geography', str(create_geography_file),
            '--years', '2024', '1',
            '--output-dir', str(output_dir),
        ]

        assert main(argv) == 0

        report = json.loads((output_dir / 'report.json').read_text(encoding='utf-8'))
        assert report['summary']['passed'] is True
        # 3 countries, 2 regions, 1 global, 2 view rows
        assert report['summary']['totals']['checks'] == 8
        view = report['datasets'][0]['passes'][-1]
        assert view['skipped'] is False
        assert view['checks'] == 2

    def test_mismatches_still_exit_zero(
        self, reset_singletons, reset_logging, temp_dir,
        create_dataset_files, create_geography_file, capsys
    ):
        csv_path, json_path = create_dataset_files
        text = csv_path.read_text(encoding='utf-8').replace('Europe,SegX,SubY,Sub1Z,15.00',
                                                            'Europe,SegX,SubY,Sub1Z,15.10')
        csv_path.write_text(text, encoding='utf-8')
        output_dir = temp_dir / 'reports'

        exit_code = main(_dataset_args(csv_path, json_path) + [
            '--geography', str(create_geography_file),
            '--years', '2024', '1',
            '--output-dir', str(output_dir),
        ])

        assert exit_code == 0
        report = json.loads((output_dir / 'report.json').read_text(encoding='utf-8'))
        region = report['datasets'][0]['passes'][1]
        assert region['mismatches'] == 1
        assert region['diagnostics'][0]['kind'] == 'sum-mismatch'
        assert 'Verification Summary' in capsys.readouterr().out

    def test_unreadable_dataset_continues(
        self, reset_singletons, reset_logging, temp_dir, create_dataset_files
    ):
        output_dir = temp_dir / 'reports'
        argv = (
            _dataset_args(temp_dir / 'absent.csv', temp_dir / 'absent.json', name='broken')
            + _dataset_args(*create_dataset_files)
            + ['--years', '2024', '1', '--output-dir', str(output_dir)]
        )

        assert main(argv) == 0

        report = json.loads((output_dir / 'report.json').read_text(encoding='utf-8'))
        assert report['summary']['failed_loads'] == ['broken']
        assert report['datasets'][1]['load_error'] is None

    def test_bad_geography_is_fatal(
        self, reset_singletons, reset_logging, temp_dir, create_dataset_files
    ):
        geography = temp_dir / 'geography.json'
        geography.write_text('["Europe"]', encoding='utf-8')

        argv = _dataset_args(*create_dataset_files) + ['--geography', str(geography)]

        assert main(argv) == 1

    def test_no_datasets_is_fatal(self, reset_singletons, reset_logging):
        with patch('dataset_verify.verify.dataset_specs_from_config', return_value=[]):
            assert main([]) == 1

    def test_configured_datasets_and_log_files(
        self, mock_env_vars, reset_singletons, reset_logging, temp_dir, create_dataset_files
    ):
        log_dir = temp_dir / 'logs'

        assert main(['--log-dir', str(log_dir)]) == 0

        report = json.loads((temp_dir / 'output' / 'report.json').read_text(encoding='utf-8'))
        summary = report['summary']
        # volume files are not created by the fixture
        assert summary['failed_loads'] == ['volume']
        assert summary['datasets']['value']['totals']['failures'] == 0
        for name in ('full', 'input', 'process', 'output'):
            assert (log_dir / f'{name}_activity.log').exists()


class TestLogLevel:
    """Resolution of the log level from arguments and configuration."""

    @staticmethod
    def _config(debug, log_level='INFO'):
        config = MagicMock()
        config.get.side_effect = lambda key, default=None: {
            'debug': debug,
            'log_level': log_level,
        }.get(key, default)
        return config

    def test_debug_flag_selects_debug(self):
        cli = VerificationCLI(parse_args([]), config=self._config(True, 'WARNING'))
        assert cli._log_level() == 'DEBUG'

    def test_configured_level_without_debug(self):
        cli = VerificationCLI(parse_args([]), config=self._config(False, 'WARNING'))
        assert cli._log_level() == 'WARNING'

    def test_command_line_level_wins(self):
        cli = VerificationCLI(parse_args(['--log-level', 'ERROR']), config=self._config(True))
        assert cli._log_level() == 'ERROR'

    def test_debug_environment_reaches_root_logger(
        self, reset_singletons, reset_logging, create_dataset_files
    ):
        env = {'DATASET_VERIFY_DEBUG': 'true', 'DATASET_VERIFY_LOG_LEVEL': 'WARNING'}
        with patch.dict(os.environ, env):
            assert main(_dataset_args(*create_dataset_files) + ['--years', '2024', '1']) == 0

        assert logging.getLogger().level == logging.DEBUG
