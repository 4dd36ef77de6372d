"""
Data models for ElNotices
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Channel(Enum):
    """Delivery category of a notice"""
    EMAIL = "email"
    PRINT = "print"


@dataclass(frozen=True)
class Name:
    """Person name as registered in the roster"""
    given: str
    family: str


@dataclass(frozen=True)
class Member:
    """Single roster entry"""
    name: Name
    apartment: int
    email: Optional[str] = None  # None when the roster has "" or "-"

    @property
    def full_name(self) -> str:
        if not self.name.family:
            return self.name.given
        return f"{self.name.given} {self.name.family}"


@dataclass(frozen=True)
class ElectricityRecord:
    """Electricity figures for one apartment over the billing period"""
    apartment: int
    consumption: int  # kWh
    paid_sum: int  # kr
    price: float  # kr/kWh, same for every record of a run
    offset: int  # >0 owed, <=0 refunded


@dataclass(frozen=True)
class NotificationTarget:
    """Who gets which record, and through which channel"""
    recipient: Member
    record: ElectricityRecord
    channel: Channel


@dataclass(frozen=True)
class RenderedNotice:
    target: NotificationTarget
    text: str

    @property
    def channel(self) -> Channel:
        return self.target.channel
