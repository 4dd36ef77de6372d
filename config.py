"""
Configuration and settings loading for ElNotices
"""
from __future__ import annotations
import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_ROSTER_FILE = "Medlemsregister 2024-01-11 mail.xlsx"
DEFAULT_LEDGER_FILE = "Brf Folkparken el 2023_till_HSB.xlsx"


@dataclass
class RosterLayout:
    """Where things live in the member roster (1-based rows and columns)"""
    anchor_label: str = "Namn"
    start_row: int = 8  # first data row, the anchor sits right above
    name_column: int = 1
    apartment_column: int = 2
    email_column: int = 6


@dataclass
class LedgerLayout:
    """Where things live in the electricity ledger"""
    anchor_label: str = "Lägenhet"
    start_row: int = 3
    price_row: int = 1
    price_column: int = 6
    apartment_column: int = 1
    consumption_column: int = 5
    paid_sum_column: int = 7
    offset_column: int = 8


@dataclass
class NoticeText:
    """Wording that changes from one billing period to the next"""
    subject: str = "Justering av elkostnad 2022-nov -- 2023-okt"
    period: str = "2022-november tom 2023-oktober"
    settlement_month: str = "april"
    signature: str = "/ BRF Folkparken Styrelse"


@dataclass
class Settings:
    roster: RosterLayout = field(default_factory=RosterLayout)
    ledger: LedgerLayout = field(default_factory=LedgerLayout)
    notice: NoticeText = field(default_factory=NoticeText)
    email_output: str = "output-email.txt"
    print_output: str = "output-print.txt"
    csv_delimiter: str = ";"


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from a JSON file, falling back to the defaults"""
    if path is None:
        return Settings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning("Settings file %s not found, using defaults", path)
        return Settings()
    logger.info("Loaded settings from %s", path)
    return dict_to_settings(data)


def settings_to_dict(settings: Settings) -> dict:
    """Convert Settings object to dictionary for JSON serialization"""
    return asdict(settings)


def dict_to_settings(d: dict) -> Settings:
    """Convert dictionary from JSON to Settings object; missing keys keep defaults"""
    defaults = Settings()
    return Settings(
        roster=RosterLayout(**d.get("roster", {})),
        ledger=LedgerLayout(**d.get("ledger", {})),
        notice=NoticeText(**d.get("notice", {})),
        email_output=d.get("email_output", defaults.email_output),
        print_output=d.get("print_output", defaults.print_output),
        csv_delimiter=d.get("csv_delimiter", defaults.csv_delimiter),
    )
