# Path: dataset_verify/output/console_report.py
"""
Console Report

Renders dataset results and the cross-dataset summary with rich:
- one panel and pass table per dataset, followed by the diagnostic
  sample of every pass that failed
- a final summary table across datasets
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..engine.coordinator import DatasetResult
from ..engine.aggregator import VerificationSummary
from ..engine.checks.core.check_result import PassResult
from ..engine.checks.core.constants import PASS_LABELS
from ..core.logger import get_output_logger
from ..constants import LOG_OUTPUT


def _format_amount(value) -> str:
    return '' if value is None else f"{value:.2f}"


class ConsoleReport:
    """
    Prints verification results to the terminal.

    Example:
        report = ConsoleReport()
        for result in results:
            report.print_dataset(result)
        report.print_summary(summary)
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console if console else Console()
        self.logger = get_output_logger('console_report')

    def print_dataset(self, result: DatasetResult) -> None:
        """Display one dataset result."""
        if not result.loaded:
            self.console.print(Panel(
                f"[red bold]✗ NOT LOADED[/red bold]\n{escape(result.load_error)}",
                title=f"Dataset: {result.name}",
                border_style="red",
            ))
            return

        status_color = "green" if result.total_failures == 0 else "red"
        status_symbol = "✓" if result.total_failures == 0 else "✗"

        self.console.print(Panel(
            f"[{status_color} bold]{status_symbol} "
            f"{result.total_failures} failures in {result.total_checks} checks"
            f"[/{status_color} bold]\n"
            f"CSV rows: {result.row_count} | Dropped lines: {result.dropped_lines}\n"
            f"CSV: {escape(result.csv_path)}\n"
            f"JSON: {escape(result.json_path)}",
            title=f"Dataset: {result.name}",
            border_style=status_color,
        ))

        pass_table = Table(show_header=True, header_style="bold")
        pass_table.add_column("Pass", style="cyan")
        pass_table.add_column("Tolerance", justify="right")
        pass_table.add_column("Checks", justify="right")
        pass_table.add_column("Missing", justify="right", style="yellow")
        pass_table.add_column("Mismatches", justify="right", style="red")

        for pass_result in result.passes:
            if pass_result.skipped:
                pass_table.add_row(pass_result.label, "-", "[dim]skipped[/dim]", "-", "-")
                continue
            pass_table.add_row(
                pass_result.label,
                _format_amount(pass_result.tolerance),
                str(pass_result.checks),
                str(pass_result.missing),
                str(pass_result.mismatches),
            )

        self.console.print(pass_table)

        for pass_result in result.passes:
            if pass_result.diagnostics:
                self._print_diagnostics(pass_result)

        self.logger.debug(f"{LOG_OUTPUT} Printed dataset report for {result.name}")

    def _print_diagnostics(self, pass_result: PassResult) -> None:
        shown = len(pass_result.diagnostics)
        title = f"Sample {pass_result.label} errors ({shown} of {pass_result.failures})"

        table = Table(title=title, show_header=True, header_style="bold red")
        table.add_column("#", style="dim", width=4)
        table.add_column("Kind", style="red")
        table.add_column("Path", style="cyan")
        table.add_column("CSV", justify="right")
        table.add_column("JSON / sum", justify="right")
        table.add_column("Diff", justify="right")

        for i, diagnostic in enumerate(pass_result.diagnostics, 1):
            table.add_row(
                str(i),
                diagnostic.kind,
                escape(diagnostic.path_label),
                _format_amount(diagnostic.expected),
                _format_amount(diagnostic.actual),
                _format_amount(diagnostic.difference),
            )

        self.console.print(table)

    def print_summary(self, summary: VerificationSummary) -> None:
        """Display the cross-dataset summary."""
        table = Table(title="Verification Summary", show_header=True)
        table.add_column("Dataset", style="bold")
        table.add_column("Pass")
        table.add_column("Checks", justify="right")
        table.add_column("Failures", justify="right")
        table.add_column("Missing", justify="right")
        table.add_column("Mismatches", justify="right")

        for name, dataset in summary.datasets.items():
            if not dataset['loaded']:
                table.add_row(name, "[red]not loaded[/red]", "-", "-", "-", "-")
                continue

            for pass_name, counts in dataset['passes'].items():
                label = PASS_LABELS.get(pass_name, pass_name)
                if counts['skipped']:
                    table.add_row(name, label, "[dim]skipped[/dim]", "-", "-", "-")
                    continue

                failures = counts['failures']
                failure_text = f"[red]{failures}[/red]" if failures else f"[green]{failures}[/green]"
                table.add_row(
                    name,
                    label,
                    str(counts['checks']),
                    failure_text,
                    str(counts['missing']),
                    str(counts['mismatches']),
                )

        totals = summary.totals
        table.add_row(
            "[bold]Total[/bold]",
            "",
            str(totals['checks']),
            str(totals['failures']),
            str(totals['missing']),
            str(totals['mismatches']),
        )

        self.console.print(table)

        if summary.passed:
            self.console.print("[green bold]✓ All datasets consistent[/green bold]")
        else:
            status = f"{totals['failures']} failures"
            if summary.failed_loads:
                status += f", {len(summary.failed_loads)} datasets not loaded"
            self.console.print(f"[red bold]✗ {status}[/red bold]")


__all__ = ['ConsoleReport']
