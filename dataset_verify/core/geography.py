# Path: dataset_verify/core/geography.py
"""
Geography Table

Static configuration mapping each region to its ordered constituent
countries. The set of all countries and the set of region names are
derived once at construction and shared read-only by every check.

The built-in table can be replaced by a JSON file of the form:

    {"Europe": ["U.K.", "Germany"], "North America": ["U.S.", "Canada"]}
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Sequence

from .logger import get_input_logger
from ..constants import LOG_INPUT


DEFAULT_REGION_COUNTRIES = {
    'North America': ['U.S.', 'Canada'],
    'Europe': ['U.K.', 'Germany', 'Italy', 'France', 'Spain', 'Turkey', 'Rest of Europe'],
    'Asia Pacific': [
        'China', 'India', 'Japan', 'South Korea', 'ASEAN', 'Australia',
        'Rest of Asia Pacific',
    ],
    'Latin America': ['Brazil', 'Argentina', 'Mexico', 'Rest of Latin America'],
    'Middle East & Africa': ['GCC', 'South Africa', 'Rest of Middle East & Africa'],
}


class GeographyError(ValueError):
    """The geography table is malformed."""


class GeographyTable:
    """
    Read-only region -> countries mapping with derived lookups.

    Example:
        geography = GeographyTable.default()
        geography.is_country('Germany')      # True
        geography.countries_in('Europe')     # ('U.K.', 'Germany', ...)
    """

    def __init__(self, region_countries: Mapping[str, Sequence[str]]):
        if not region_countries:
            raise GeographyError("Geography table has no regions")

        regions = {}
        for region, countries in region_countries.items():
            if not isinstance(region, str) or not isinstance(countries, (list, tuple)):
                raise GeographyError(f"Invalid geography entry for {region!r}")
            members = tuple(countries)
            if not all(isinstance(country, str) for country in members):
                raise GeographyError(f"Country names for {region!r} must be strings")
            regions[region] = members

        self._regions = MappingProxyType(regions)
        self._all_countries = tuple(
            country for members in regions.values() for country in members
        )
        self._country_set = frozenset(self._all_countries)
        self._region_names = frozenset(regions)

        overlap = self._country_set & self._region_names
        if overlap:
            raise GeographyError(
                f"Names used as both region and country: {sorted(overlap)}"
            )

    @classmethod
    def default(cls) -> 'GeographyTable':
        return cls(DEFAULT_REGION_COUNTRIES)

    @classmethod
    def from_file(cls, path: Path) -> 'GeographyTable':
        """
        Load a geography table from JSON.

        Raises:
            GeographyError: If the file is unreadable or malformed
        """
        path = Path(path)
        logger = get_input_logger('geography')
        logger.info(f"{LOG_INPUT} Loading geography table: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise GeographyError(f"Cannot load geography table {path}: {e}") from e

        if not isinstance(data, dict):
            raise GeographyError(f"Geography table {path} must be a JSON object")

        return cls(data)

    @property
    def regions(self) -> Mapping[str, tuple]:
        return self._regions

    @property
    def region_names(self) -> frozenset:
        return self._region_names

    @property
    def all_countries(self) -> tuple:
        """Every country, in region order then table order."""
        return self._all_countries

    def is_country(self, name: str) -> bool:
        return name in self._country_set

    def is_region(self, name: str) -> bool:
        return name in self._region_names

    def countries_in(self, region: str) -> tuple:
        return self._regions.get(region, ())

    def to_dict(self) -> dict:
        return {region: list(members) for region, members in self._regions.items()}


__all__ = [
    'DEFAULT_REGION_COUNTRIES',
    'GeographyError',
    'GeographyTable',
]
