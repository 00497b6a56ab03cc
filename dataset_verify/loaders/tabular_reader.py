# Path: dataset_verify/loaders/tabular_reader.py
"""
Tabular Reader for Dataset Verification

Reads the flat CSV export into immutable TabularRow records.

Layout:
    region, segment, subsegment, subsegment1, <year_1>, ..., <year_N>

The first line is a header and is discarded. Lines with fewer than
4 + N fields are dropped before they reach the checks; the number of
dropped lines is reported.

QUOTING:
A double quote toggles the inside-quotes state and is consumed. A
delimiter inside quotes is literal text. Doubled quotes ("") are two
toggles, not an escaped quote character.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .errors import DatasetLoadError
from ..core.logger import get_input_logger
from ..constants import CSV_DELIMITER, QUOTE_CHAR, VIEW_SEGMENTS, LOG_INPUT
from ..engine.checks.core.check_settings import CheckSettings
from ..engine.checks.core.constants import ZERO_AMOUNT
from ..engine.checks.core.value_parsing import ValueParser


def parse_line(line: str, delimiter: str = CSV_DELIMITER) -> list[str]:
    """
    Split one delimited line into trimmed fields.

    Args:
        line: Raw text line
        delimiter: Field separator

    Returns:
        List of fields; the final field is always emitted

    Example:
        parse_line('a,"b,c",d')  # ['a', 'b,c', 'd']
    """
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == QUOTE_CHAR:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append(''.join(current).strip())
    return fields


@dataclass(frozen=True)
class TabularRow:
    """
    One record from the tabular export.

    Attributes:
        region: Country, region or global label
        segment: First categorical level (or a view label)
        subsegment: Second categorical level
        subsegment1: Third categorical level
        values: Year label -> amount, one entry per configured year
    """
    region: str
    segment: str
    subsegment: str
    subsegment1: str
    values: Mapping[str, Decimal] = field(default_factory=dict)

    @property
    def is_view_row(self) -> bool:
        """Rows labelled By Region / By Country belong to the alternate view."""
        return self.segment in VIEW_SEGMENTS

    def key_path(self) -> tuple[str, str, str, str]:
        return (self.region, self.segment, self.subsegment, self.subsegment1)

    def value_for(self, year: str) -> Decimal:
        return self.values.get(year, ZERO_AMOUNT)


@dataclass
class TabularParseResult:
    """
    Rows parsed from one export.

    Attributes:
        rows: Retained rows, in file order
        dropped_lines: Data lines rejected for having too few fields
        source_file: File the rows came from (None for in-memory input)
    """
    rows: list[TabularRow] = field(default_factory=list)
    dropped_lines: int = 0
    source_file: Optional[Path] = None


class TabularReader:
    """
    Parses tabular exports into TabularRow records.

    Example:
        reader = TabularReader(CheckSettings())
        result = reader.read_rows(Path('Nut value.csv'))
        print(f"{len(result.rows)} rows, {result.dropped_lines} dropped")
    """

    def __init__(
        self,
        settings: Optional[CheckSettings] = None,
        delimiter: str = CSV_DELIMITER,
        value_parser: Optional[ValueParser] = None
    ):
        self.settings = settings if settings else CheckSettings()
        self.delimiter = delimiter
        self.value_parser = value_parser if value_parser else ValueParser()
        self.logger = get_input_logger('tabular_reader')

    def read_rows(self, path: Path) -> TabularParseResult:
        """
        Read and parse a tabular export file.

        Args:
            path: CSV file path

        Returns:
            TabularParseResult

        Raises:
            DatasetLoadError: If the file cannot be read
        """
        path = Path(path)
        self.logger.info(f"{LOG_INPUT} Reading tabular export: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DatasetLoadError(path, f"cannot read tabular export: {e}") from e

        result = self.parse_rows(text.splitlines())
        result.source_file = path
        return result

    def parse_rows(self, lines: Iterable[str]) -> TabularParseResult:
        """
        Parse already-split lines. The first non-blank line is the header.

        Args:
            lines: Raw text lines

        Returns:
            TabularParseResult
        """
        result = TabularParseResult()
        min_fields = self.settings.min_field_count
        content_lines = [line for line in lines if line.strip()]

        for line in content_lines[1:]:
            fields = parse_line(line, self.delimiter)
            if len(fields) < min_fields:
                result.dropped_lines += 1
                continue
            result.rows.append(self._build_row(fields))

        if result.dropped_lines:
            self.logger.warning(
                f"{LOG_INPUT} Dropped {result.dropped_lines} lines with fewer "
                f"than {min_fields} fields"
            )

        self.logger.info(f"{LOG_INPUT} Parsed {len(result.rows)} tabular rows")
        return result

    def _build_row(self, fields: list[str]) -> TabularRow:
        values = {
            year: self.value_parser.normalize(fields[4 + index])
            for index, year in enumerate(self.settings.years)
        }
        return TabularRow(
            region=fields[0],
            segment=fields[1],
            subsegment=fields[2],
            subsegment1=fields[3],
            values=MappingProxyType(values),
        )


__all__ = [
    'parse_line',
    'TabularRow',
    'TabularParseResult',
    'TabularReader',
]
