"""
One run of ElNotices: read both sheets, match, render, write.

Everything is computed in memory first; the output files are only
written once extraction, matching and rendering have all succeeded.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Union

from config import Settings
from extraction import extract_electricity, extract_members
from models import RenderedNotice
from notices import render_target
from output import NoticeSink
from reconciliation import reconcile
from sheets import RowSource, open_source

logger = logging.getLogger(__name__)


def build_notices(
    roster: RowSource,
    ledger: RowSource,
    settings: Optional[Settings] = None
) -> List[RenderedNotice]:
    """Extract, reconcile and render; no side effects"""
    settings = settings or Settings()
    members = extract_members(roster, settings.roster)
    records = extract_electricity(ledger, settings.ledger)
    targets = reconcile(members, records)
    return [RenderedNotice(t, render_target(t, settings.notice)) for t in targets]


def run(
    roster_path: Union[str, Path],
    ledger_path: Union[str, Path],
    settings: Optional[Settings] = None,
    sink: Optional[NoticeSink] = None
) -> List[RenderedNotice]:
    """Produce both notice files from the two input sheets"""
    settings = settings or Settings()
    sink = sink or NoticeSink(settings.email_output, settings.print_output)
    sink.reset()

    roster = open_source(roster_path, settings.csv_delimiter)
    ledger = open_source(ledger_path, settings.csv_delimiter)
    notices = build_notices(roster, ledger, settings)

    sink.write_all(notices)
    return notices
