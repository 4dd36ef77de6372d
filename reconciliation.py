"""
Matching of roster members to electricity records for ElNotices.

Phase A walks the ledger and emails every distinct address registered for
the apartment. Apartments where nobody has an email are deferred to
phase B, which produces exactly one printed notice per apartment,
combining the occupants' given names when several live there.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Set

from errors import ReconciliationInconsistency
from models import Channel, ElectricityRecord, Member, Name, NotificationTarget

logger = logging.getLogger(__name__)

NAME_JOINER = " och "


def group_by_apartment(members: List[Member]) -> Dict[int, List[Member]]:
    """Map apartment -> members living there, keeping roster order"""
    out: Dict[int, List[Member]] = {}
    for m in members:
        out.setdefault(m.apartment, []).append(m)
    return out


def combine_members(members: List[Member]) -> Member:
    """One print recipient standing for all occupants of an apartment"""
    if len(members) == 1:
        return members[0]
    given = NAME_JOINER.join(m.name.given for m in members)
    return Member(
        name=Name(given=given, family=""),
        apartment=members[0].apartment,
        email=None,
    )


def email_targets(members: List[Member], record: ElectricityRecord) -> List[NotificationTarget]:
    """One email target per distinct address; first occurrence wins"""
    notified: Set[str] = set()
    out = []
    for m in members:
        if m.email in notified:
            logger.debug("Apartment %d: %s already notified, skipping", record.apartment, m.email)
            continue
        notified.add(m.email)
        out.append(NotificationTarget(m, record, Channel.EMAIL))
    return out


def print_target(
    apartment: int,
    occupants: List[Member],
    records: List[ElectricityRecord]
) -> NotificationTarget:
    matching = [r for r in records if r.apartment == apartment]
    if len(matching) != 1:
        raise ReconciliationInconsistency(
            apartment, f"expected one electricity record, found {len(matching)}"
        )
    if not occupants:
        raise ReconciliationInconsistency(
            apartment, "electricity is billed but nobody is registered in the roster"
        )
    recipient = combine_members(occupants)
    if len(occupants) > 1:
        logger.debug("Apartment %d: combined %d occupants as '%s'",
                     apartment, len(occupants), recipient.name.given)
    return NotificationTarget(recipient, matching[0], Channel.PRINT)


def reconcile(members: List[Member], records: List[ElectricityRecord]) -> List[NotificationTarget]:
    """
    Decide who is notified about which electricity record, and how.
    Returns email targets in ledger order followed by print targets.
    """
    by_apartment = group_by_apartment(members)
    targets: List[NotificationTarget] = []
    without_email: List[int] = []

    for record in records:
        reachable = [m for m in by_apartment.get(record.apartment, []) if m.email is not None]
        if not reachable:
            logger.debug("Apartment %d has no email address, deferring to print", record.apartment)
            without_email.append(record.apartment)
            continue
        targets.extend(email_targets(reachable, record))

    for apartment in without_email:
        targets.append(print_target(apartment, by_apartment.get(apartment, []), records))

    logger.info(
        "Reconciled %d records: %d email, %d print",
        len(records),
        sum(1 for t in targets if t.channel is Channel.EMAIL),
        len(without_email),
    )
    return targets
