# Path: dataset_verify/engine/checks/checkers/__init__.py
"""
Verification pass implementations.

Contains:
- leaf_checker: Country rows vs document leaves
- sum_checker: Region and global rows vs sums of country leaves
- view_checker: View rows vs the By Region subtree
"""

from .leaf_checker import LeafChecker
from .sum_checker import AggregateSumChecker, RegionSumChecker, GlobalSumChecker
from .view_checker import ViewChecker

# Import PassResult for convenience (commonly used with checkers)
from ..core import PassResult

__all__ = [
    'LeafChecker',
    'AggregateSumChecker',
    'RegionSumChecker',
    'GlobalSumChecker',
    'ViewChecker',
    'PassResult',
]
