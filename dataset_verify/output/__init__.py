# Path: dataset_verify/output/__init__.py
"""
OUTPUT layer: rich console report and JSON report file.
"""

from .console_report import ConsoleReport
from .report_generator import ReportGenerator

__all__ = ['ConsoleReport', 'ReportGenerator']
