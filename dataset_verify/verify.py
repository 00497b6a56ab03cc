#!/usr/bin/env python3
# Path: dataset_verify/verify.py
"""
Dataset Verification CLI

Main entry point for the verification module.
Reconciles tabular exports against their hierarchical documents.

Usage:
    python -m dataset_verify.verify
    dataset-verify --dataset value "Nut value.csv" public/data/value.json --with-view value

The CLI will:
1. Load configuration and the geography table
2. Verify every dataset pair
3. Print each dataset report and the final summary
4. Save the JSON report when an output directory is set
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from .core.config_loader import ConfigLoader
from .core.dataset_specs import DatasetSpec, dataset_specs_from_config
from .core.geography import GeographyTable, GeographyError
from .core.logger import setup_ipo_logging, get_input_logger
from .engine.checks.core.check_settings import CheckSettings
from .engine.coordinator import VerificationCoordinator, DatasetResult
from .engine.aggregator import ReportAggregator
from .output.console_report import ConsoleReport
from .output.report_generator import ReportGenerator
from .constants import LOG_INPUT, LOG_OUTPUT


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dataset-verify',
        description="Dataset Verifier - reconcile tabular exports with hierarchical documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Verify the configured value and volume pairs
  dataset-verify

  # Verify a specific pair that carries the By Region view
  dataset-verify --dataset value "Nut value.csv" public/data/value.json --with-view value

  # Write report.json and log files
  dataset-verify --output-dir reports --log-dir logs
        """
    )

    parser.add_argument(
        '--dataset',
        nargs=3,
        action='append',
        metavar=('NAME', 'CSV', 'JSON'),
        help='Dataset pair to verify (repeatable; overrides configured pairs)'
    )
    parser.add_argument(
        '--with-view',
        action='append',
        metavar='NAME',
        help='Dataset whose document carries the By Region view (repeatable)'
    )
    parser.add_argument(
        '--geography',
        type=Path,
        help='JSON file mapping region names to country lists'
    )
    parser.add_argument(
        '--output-dir',
        type=Path,
        help='Directory for report.json'
    )
    parser.add_argument(
        '--log-dir',
        type=Path,
        help='Directory for IPO log files'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level'
    )
    parser.add_argument(
        '--years',
        nargs=2,
        type=int,
        metavar=('FIRST', 'COUNT'),
        help='First reporting year and number of year columns'
    )

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


class VerificationCLI:
    """
    Command-line interface for the verification module.

    Example:
        cli = VerificationCLI(parse_args(['--output-dir', 'reports']))
        exit_code = cli.run()
    """

    def __init__(
        self,
        args: argparse.Namespace,
        config: Optional[ConfigLoader] = None,
        console: Optional[Console] = None
    ):
        self.args = args
        self.config = config if config else ConfigLoader()
        self.console = console if console else Console()
        self.logger = get_input_logger('cli')

    def _log_level(self) -> str:
        # --log-level wins over DATASET_VERIFY_DEBUG, which wins over LOG_LEVEL
        if self.args.log_level:
            return self.args.log_level
        if self.config.get('debug'):
            return 'DEBUG'
        return self.config.get('log_level', 'INFO')

    def _setup_logging(self) -> None:
        log_dir = self.args.log_dir or self.config.get('log_dir')
        setup_ipo_logging(
            log_dir=log_dir,
            log_level=self._log_level(),
            console_output=True,
            console=self.console,
        )

    def _load_settings(self) -> CheckSettings:
        settings = CheckSettings.from_config(self.config)
        if self.args.years:
            first_year, count = self.args.years
            settings = settings.with_years(first_year, count)
        return settings

    def _load_geography(self) -> GeographyTable:
        geography_file = self.args.geography or self.config.get('geography_file')
        if geography_file:
            return GeographyTable.from_file(geography_file)
        return GeographyTable.default()

    def _dataset_specs(self) -> list[DatasetSpec]:
        with_view = self.args.with_view
        if not self.args.dataset:
            return dataset_specs_from_config(self.config, view_datasets=with_view)

        views = set(with_view if with_view is not None else self.config.get('view_datasets', []))
        return [
            DatasetSpec(
                name=name,
                csv_path=Path(csv_path),
                json_path=Path(json_path),
                has_view=name in views,
            )
            for name, csv_path, json_path in self.args.dataset
        ]

    def _save_report(self, results: list[DatasetResult], summary) -> None:
        output_dir = self.args.output_dir or self.config.get('output_dir')
        if not output_dir:
            return

        generator = ReportGenerator(self.config, output_dir=output_dir)
        path = generator.generate_report(results, summary)
        self.console.print(f"\n[green]Report saved:[/green] {path}")

    def run(self) -> int:
        """
        Run the verification.

        Returns:
            0 when verification ran (mismatches included), 1 on fatal
            startup errors
        """
        self._setup_logging()

        try:
            geography = self._load_geography()
        except GeographyError as e:
            self.console.print(f"[red bold]Error:[/red bold] {e}")
            self.logger.error(f"{LOG_INPUT} Invalid geography table: {e}")
            return 1

        specs = self._dataset_specs()
        if not specs:
            self.console.print("[red bold]Error:[/red bold] No datasets configured")
            return 1

        settings = self._load_settings()
        coordinator = VerificationCoordinator(settings, geography)
        console_report = ConsoleReport(self.console)
        aggregator = ReportAggregator()

        results = []
        for spec in specs:
            self.console.print(f"\n[bold cyan]{'═' * 70}[/bold cyan]")
            self.console.print(f"[bold]VERIFYING: {spec.name.upper()}[/bold]")
            self.console.print(f"[bold cyan]{'═' * 70}[/bold cyan]")

            result = coordinator.verify_dataset(spec)
            console_report.print_dataset(result)
            aggregator.add(result)
            results.append(result)

        summary = aggregator.summary()
        self.console.print(f"\n[bold cyan]{'═' * 70}[/bold cyan]")
        console_report.print_summary(summary)

        self._save_report(results, summary)
        self.logger.info(f"{LOG_OUTPUT} Verification complete")
        return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        return VerificationCLI(args).run()
    except KeyboardInterrupt:
        Console().print("\n[yellow]Verification interrupted by user[/yellow]")
        return 130


if __name__ == '__main__':
    sys.exit(main())
