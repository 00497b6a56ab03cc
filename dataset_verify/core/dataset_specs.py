# Path: dataset_verify/core/dataset_specs.py
"""
Dataset Pair Specifications

A dataset pair is one tabular export plus the hierarchical document it
must agree with. The has_view flag marks documents that also carry
the alternate "By Region" view, which enables the cross-view pass.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from ..constants import DATASET_VALUE, DATASET_VOLUME


@dataclass(frozen=True)
class DatasetSpec:
    """
    One (tabular export, hierarchical document) pair.

    Attributes:
        name: Dataset name used in reports (e.g. 'value')
        csv_path: Tabular export
        json_path: Hierarchical document
        has_view: Whether the document carries the By Region view
    """
    name: str
    csv_path: Path
    json_path: Path
    has_view: bool = False


def dataset_specs_from_config(
    config,
    view_datasets: Optional[Iterable[str]] = None
) -> list[DatasetSpec]:
    """
    Build the standard value/volume pairs from configuration.

    Args:
        config: ConfigLoader instance
        view_datasets: Names carrying the By Region view
            (defaults to the configured view_datasets)

    Returns:
        List of DatasetSpec in run order
    """
    views = set(view_datasets if view_datasets is not None else config.get('view_datasets', []))

    return [
        DatasetSpec(
            name=DATASET_VALUE,
            csv_path=config.get('value_csv'),
            json_path=config.get('value_json'),
            has_view=DATASET_VALUE in views,
        ),
        DatasetSpec(
            name=DATASET_VOLUME,
            csv_path=config.get('volume_csv'),
            json_path=config.get('volume_json'),
            has_view=DATASET_VOLUME in views,
        ),
    ]


__all__ = ['DatasetSpec', 'dataset_specs_from_config']
