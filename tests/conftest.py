from __future__ import annotations
from typing import List, Optional, Sequence

import pytest
from openpyxl import Workbook

from sheets import TableSource

PRICE_TEXT = "Elkostnad 2023: 2,34 kr/kWh"


def apartment_code(apartment: int) -> str:
    return f"01-2345-1-{apartment:04d}-1"


def roster_rows(members: Sequence[tuple]) -> List[list]:
    """(name, apartment, email) tuples laid out like the member roster"""
    rows: List[list] = [
        ["Medlemsregister"],
        ["Brf Folkparken"],
        ["Utskrivet 2024-01-11"],
        [None],
        [None],
        [None],
        ["Namn", "Lägenhetsnummer", None, None, None, "E-post"],
    ]
    for name, apartment, email in members:
        if name is None:
            rows.append([None])
            continue
        code = apartment if isinstance(apartment, str) else apartment_code(apartment)
        rows.append([name, code, None, None, None, email])
    return rows


def ledger_rows(records: Sequence[tuple], price_text: Optional[str] = PRICE_TEXT) -> List[list]:
    """(apartment, consumption, paid_sum, offset) tuples laid out like the ledger"""
    rows: List[list] = [
        ["Brf Folkparken el 2023", None, None, None, None, price_text],
        ["Lägenhet", None, None, None, "kWh", None, "Betalt", "Justering"],
    ]
    for apartment, consumption, paid, offset in records:
        rows.append([apartment, None, None, None, consumption, None, paid, offset])
    return rows


@pytest.fixture
def make_roster():
    def _make(*members) -> TableSource:
        return TableSource(roster_rows(members))
    return _make


@pytest.fixture
def make_ledger():
    def _make(*records, price_text: Optional[str] = PRICE_TEXT) -> TableSource:
        return TableSource(ledger_rows(records, price_text))
    return _make


@pytest.fixture
def write_workbook(tmp_path):
    def _write(filename: str, rows: List[list]):
        wb = Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        path = tmp_path / filename
        wb.save(path)
        return path
    return _write
