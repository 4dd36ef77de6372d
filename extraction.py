"""
Extraction of roster members and electricity records from sheet rows.

Both sheets are read by fixed positions. Before reading, the row above the
data block is checked for its label so a shifted layout fails loudly
instead of producing misaligned records. Any bad cell aborts the whole
extraction; a partial list is never returned.
"""
from __future__ import annotations
import logging
import math
from typing import List, Optional

from config import LedgerLayout, RosterLayout
from errors import (
    CellParseError,
    MalformedName,
    MissingApartment,
    PriceFormatError,
    PriceParseError,
)
from models import ElectricityRecord, Member, Name
from sheets import Row, RowSource, check_anchor, data_rows
from utils import MAX_WHOLE_DIGITS, parse_decimal, parse_int, round_half_up

logger = logging.getLogger(__name__)

NO_EMAIL = ("", "-")


# ---------- Members ----------

def parse_name(raw: str) -> Name:
    """'Family, Given' -> Name(given, family)"""
    parts = raw.split(",")
    if len(parts) != 2:
        raise MalformedName(raw)
    family, given = parts
    return Name(given=given.strip(), family=family.strip())


def parse_apartment_code(code: str, name: str) -> int:
    """
    The roster code looks like XX-XXXX-X-YYYY-X; the apartment is the
    second to last segment (YYYY).
    """
    segments = code.split("-")
    if len(segments) < 2 or not segments[-2].strip():
        raise MissingApartment(name)
    try:
        return parse_int(segments[-2])
    except ValueError:
        raise MissingApartment(name)


def parse_email(raw: str) -> Optional[str]:
    return None if raw in NO_EMAIL else raw


def parse_member(row: Row, layout: RosterLayout) -> Member:
    raw_name = row.text(layout.name_column)
    return Member(
        name=parse_name(raw_name),
        apartment=parse_apartment_code(row.text(layout.apartment_column), raw_name),
        email=parse_email(row.text(layout.email_column)),
    )


def extract_members(source: RowSource, layout: Optional[RosterLayout] = None) -> List[Member]:
    """Read every named roster row below the anchor, in sheet order"""
    layout = layout or RosterLayout()
    check_anchor(source, layout.start_row, layout.anchor_label)

    rows = [
        r for r in data_rows(source, layout.start_row)
        if r.text(layout.name_column).strip()
    ]
    members = [parse_member(r, layout) for r in rows]
    logger.info(
        "Extracted %d members (%d without email)",
        len(members), sum(1 for m in members if m.email is None)
    )
    return members


# ---------- Electricity ----------

def parse_price(raw: str) -> float:
    """
    Price line is of the form 'Elkostnad 2023: 2,34 kr/kWh'.
    Steps: take the part after ':', trim, take the first word,
    turn the decimal comma into a dot, parse.
    """
    parts = raw.split(":")
    if len(parts) < 2:
        raise PriceFormatError(raw, 1)
    words = parts[1].strip().split()
    if not words:
        raise PriceFormatError(raw, 3)
    token = words[0].replace(",", ".", 1)
    try:
        price = float(token)
    except ValueError:
        raise PriceParseError(raw)
    if price == 0 or not math.isfinite(price) or abs(price) >= 10 ** MAX_WHOLE_DIGITS:
        raise PriceParseError(raw)
    return price


def extract_price(source: RowSource, layout: Optional[LedgerLayout] = None) -> float:
    layout = layout or LedgerLayout()
    price = parse_price(source.cell_text(layout.price_row, layout.price_column))
    logger.info("Electricity price for the period: %s kr/kWh", price)
    return price


def _number_cell(row: Row, column: int, rounded: bool = False) -> int:
    raw = row.text(column)
    try:
        if rounded:
            return round_half_up(parse_decimal(raw))
        return parse_int(raw)
    except ValueError:
        raise CellParseError(row.number, column, raw)


def parse_electricity(row: Row, layout: LedgerLayout, price: float) -> ElectricityRecord:
    return ElectricityRecord(
        apartment=_number_cell(row, layout.apartment_column),
        consumption=_number_cell(row, layout.consumption_column),
        paid_sum=_number_cell(row, layout.paid_sum_column, rounded=True),
        price=price,
        offset=_number_cell(row, layout.offset_column, rounded=True),
    )


def extract_electricity(
    source: RowSource,
    layout: Optional[LedgerLayout] = None
) -> List[ElectricityRecord]:
    """Read every ledger row that has an apartment, attaching the period price"""
    layout = layout or LedgerLayout()
    check_anchor(source, layout.start_row, layout.anchor_label)
    price = extract_price(source, layout)

    rows = [
        r for r in data_rows(source, layout.start_row)
        if r.text(layout.apartment_column).strip()
    ]
    records = [parse_electricity(r, layout, price) for r in rows]
    logger.info("Extracted %d electricity records", len(records))
    return records
