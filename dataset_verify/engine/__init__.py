# Path: dataset_verify/engine/__init__.py
"""
PROCESS layer: consistency passes, dataset orchestration, report aggregation.

The coordinator is imported from engine.coordinator directly.
"""
