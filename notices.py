"""
Rendering of electricity adjustment notices as plain text
"""
from __future__ import annotations
from typing import Optional

from config import NoticeText
from models import Channel, ElectricityRecord, Member, NotificationTarget
from utils import format_decimal_sv

EMAIL_HEADER = """To: {email}
Subject: {subject}


"""

BODY = """Hej {given},
här kommer information om eldebitering för perioden {period} för bostadsrätt {apartment}

Förbrukning under perioden: {consumption} kWh
Kostnad per kWh under perioden: {price} kr
El debitering betald under perioden: {paid_sum} kr
Justering eldebiteringen för er lägenhet att {direction}: {amount} kr
Det kommer regleras på er avi för {settlement_month}.

Hälsningar
{signature}



"""

TO_PAY = "tillägg att betala"
TO_REFUND = "få åter"


def adjustment_direction(offset: int) -> str:
    """Positive offsets are owed by the member, everything else is refunded"""
    return TO_PAY if offset > 0 else TO_REFUND


def render_notice(
    member: Member,
    record: ElectricityRecord,
    channel: Channel,
    text: Optional[NoticeText] = None
) -> str:
    """Text of one notice; email notices get a To/Subject header"""
    if member.apartment != record.apartment:
        raise ValueError(
            f"Member apartment {member.apartment} does not match record apartment {record.apartment}"
        )
    text = text or NoticeText()

    body = BODY.format(
        given=member.name.given,
        period=text.period,
        apartment=member.apartment,
        consumption=record.consumption,
        price=format_decimal_sv(record.price),
        paid_sum=record.paid_sum,
        direction=adjustment_direction(record.offset),
        amount=abs(record.offset),
        settlement_month=text.settlement_month,
        signature=text.signature,
    )
    if channel is Channel.EMAIL:
        return EMAIL_HEADER.format(email=member.email, subject=text.subject) + body
    return body


def render_target(target: NotificationTarget, text: Optional[NoticeText] = None) -> str:
    return render_notice(target.recipient, target.record, target.channel, text)
