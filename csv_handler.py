"""
CSV import for ElNotices: a sheet saved as delimited text
"""
from __future__ import annotations
import csv
from pathlib import Path
from typing import List, Union

from sheets import TableSource


class CsvSource(TableSource):
    """
    Row source over a CSV export of a sheet.
    Every cell is already text; rows keep their position in the file so
    the same row/column numbers apply as in the workbook.
    """

    @classmethod
    def from_path(
        cls,
        filepath: Union[str, Path],
        delimiter: str = ";",
        encoding: str = "utf-8-sig"
    ) -> "CsvSource":
        rows: List[List[str]] = []
        with open(filepath, 'r', newline='', encoding=encoding) as f:
            reader = csv.reader(f, delimiter=delimiter)
            for row in reader:
                rows.append(row)
        return cls(rows, title=Path(filepath).stem)
