# Path: dataset_verify/engine/checks/path_resolver.py
"""
Hierarchical Path Resolver

Looks up a key path inside the nested document and reports whether
every level exists:

    geography -> segment -> subsegment -> subsegment1 -> year

Resolution is tagged: a path is either found (with its leaf) or not
found at a specific depth. A missing key is never confused with a
zero value, and no partial value is returned on a not-found path.

Keys come from the tabular export and are untrusted. They are only
ever used for mapping membership tests.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .core.constants import MISSING_KINDS_BY_DEPTH, KIND_MISSING_LEAF
from .core.value_parsing import to_decimal


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving a key path.

    Attributes:
        found: Whether every key was present
        value: Leaf value (None when not found)
        failed_depth: 0-based index of the first missing key
    """
    found: bool
    value: Any = None
    failed_depth: Optional[int] = None


def classify_missing(depth: int) -> str:
    """
    Map the depth of a resolution failure to a diagnostic kind.

    0 -> missing-geography, 1 -> missing-segment,
    2 -> missing-subsegment, 3 and deeper -> missing-leaf.
    """
    if 0 <= depth < len(MISSING_KINDS_BY_DEPTH):
        return MISSING_KINDS_BY_DEPTH[depth]
    return KIND_MISSING_LEAF


class PathResolver:
    """
    Side-effect-free path lookup over nested mappings.

    Example:
        resolver = PathResolver()
        resolution = resolver.resolve(doc, ('U.S.', 'SegX', 'SubY', 'Z', '2024'))
        if not resolution.found:
            kind = classify_missing(resolution.failed_depth)
    """

    def resolve(self, document: Any, segments: Sequence[str]) -> Resolution:
        """
        Walk the document one key at a time.

        Args:
            document: Nested mapping (the hierarchical document)
            segments: Keys to follow, outermost first

        Returns:
            Resolution tagged found / not-found
        """
        node = document
        for depth, key in enumerate(segments):
            if not isinstance(node, Mapping) or key not in node:
                return Resolution(found=False, failed_depth=depth)
            node = node[key]

        return Resolution(found=True, value=node)

    def resolve_amount(self, document: Any, segments: Sequence[str]) -> Resolution:
        """
        Resolve a path whose leaf must be a number.

        A leaf that is present but not numeric (a nested mapping, text,
        null) is reported as not found at the leaf depth.

        Returns:
            Resolution whose value is a Decimal when found
        """
        resolution = self.resolve(document, segments)
        if not resolution.found:
            return resolution

        amount = to_decimal(resolution.value)
        if amount is None:
            return Resolution(found=False, failed_depth=len(segments) - 1)

        return Resolution(found=True, value=amount)


_resolver = PathResolver()


def resolve(document: Any, segments: Sequence[str]) -> Resolution:
    """Module-level shortcut for PathResolver.resolve()."""
    return _resolver.resolve(document, segments)


__all__ = ['Resolution', 'PathResolver', 'classify_missing', 'resolve']
