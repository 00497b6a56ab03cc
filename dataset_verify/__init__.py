# Path: dataset_verify/__init__.py
"""
Dataset Verification Module

Reconciles the flat CSV exports of a market dataset with the nested
JSON documents built from them. Every country leaf, region sum, global
sum and (where present) the By Region view must agree within tolerance.

Key Principle: We do NOT correct either side. We detect and report
every disagreement, with exact counts and capped samples.

Architecture (IPO):
- INPUT: loaders/ - Tabular export and hierarchical document readers
- PROCESS: engine/ - Consistency passes, coordination, aggregation
- OUTPUT: output/ - Console report and JSON report

Usage:
    python -m dataset_verify.verify

    # Or programmatically:
    from dataset_verify.engine.coordinator import VerificationCoordinator

    coordinator = VerificationCoordinator()
    results = coordinator.verify_all(specs)
"""

__version__ = '0.1.0'
__author__ = 'MAP PRO'

# Core exports for convenient access
from .engine.coordinator import VerificationCoordinator, DatasetResult
from .engine.aggregator import ReportAggregator, VerificationSummary
from .engine.checks.consistency_checker import ConsistencyChecker
from .core.dataset_specs import DatasetSpec

__all__ = [
    '__version__',
    '__author__',
    'VerificationCoordinator',
    'DatasetResult',
    'ReportAggregator',
    'VerificationSummary',
    'ConsistencyChecker',
    'DatasetSpec',
]
