"""
Row access over tabular sources for ElNotices.

Extraction only ever needs one capability from a sheet: the text shown in
a cell, addressed by 1-based (row, column) like in a spreadsheet. Sources
are materialized in memory; both inputs are small.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from openpyxl import load_workbook

from errors import MissingWorksheet, StructuralAnchorMismatch
from utils import cell_to_text

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm")


class RowSource(Protocol):
    """Anything that can hand out cell text by row and column"""

    @property
    def row_count(self) -> int: ...

    def cell_text(self, row: int, column: int) -> str: ...


@dataclass(frozen=True)
class Row:
    """One row of a source"""
    source: RowSource
    number: int

    def text(self, column: int) -> str:
        return self.source.cell_text(self.number, column)


class TableSource:
    """RowSource over rows of raw cell values already in memory"""

    def __init__(self, rows: Sequence[Sequence[object]], title: str = ""):
        self._rows = [tuple(r) for r in rows]
        self.title = title

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def cell_text(self, row: int, column: int) -> str:
        if row < 1 or row > len(self._rows):
            return ""
        values = self._rows[row - 1]
        if column < 1 or column > len(values):
            return ""
        return cell_to_text(values[column - 1])


class WorksheetSource(TableSource):
    """First worksheet of an Excel workbook"""

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "WorksheetSource":
        wb = load_workbook(path, read_only=True, data_only=True)
        try:
            if not wb.worksheets:
                raise MissingWorksheet(str(path))
            ws = wb.worksheets[0]
            # stored dimensions are not always written by other tools
            ws.reset_dimensions()
            rows = [tuple(r) for r in ws.iter_rows(values_only=True)]
            title = ws.title
        finally:
            wb.close()
        logger.debug("Read %d rows from sheet '%s' of %s", len(rows), title, path)
        return cls(rows, title=title)


def open_source(path: Union[str, Path], csv_delimiter: str = ";") -> TableSource:
    """Open an .xlsx workbook or a .csv export as a row source"""
    # imported here, csv_handler builds on TableSource
    from csv_handler import CsvSource

    p = Path(path)
    suffix = p.suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        return WorksheetSource.from_path(p)
    if suffix == ".csv":
        return CsvSource.from_path(p, delimiter=csv_delimiter)
    raise ValueError(f"Unsupported file type '{suffix}' for {p.name}")


def check_anchor(source: RowSource, start: int, label: str) -> None:
    """
    Verify that the row just above the data block starts with `label`.
    Guards against the sheet layout shifting under fixed row numbers.
    """
    value = source.cell_text(start - 1, 1)
    if value != label:
        raise StructuralAnchorMismatch(label, start - 1, value)


def data_rows(source: RowSource, start: int, end: Optional[int] = None) -> List[Row]:
    """Rows from `start` to `end` inclusive (default: last row)"""
    last = source.row_count if end is None else end
    return [Row(source, n) for n in range(start, last + 1)]
