"""
Excel summary of produced notices, for review before they go out
"""
from __future__ import annotations
from typing import List, Union
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from models import Channel, RenderedNotice

HEADERS = [
    "Apartment", "Channel", "Recipient", "Email",
    "Consumption (kWh)", "Price (kr/kWh)", "Paid (kr)", "Adjustment (kr)",
]


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="4F81BD")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=45):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            if cell.value is None:
                continue
            max_len = max(max_len, len(str(cell.value)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def export_summary(notices: List[RenderedNotice], filepath: Union[str, Path]) -> None:
    """
    Write one row per notice, sorted by apartment.
    Print notices are highlighted since they have to be delivered by hand.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Notices"
    ws.append(HEADERS)
    _style_header(ws, 1)
    ws.freeze_panes = "A2"

    print_fill = PatternFill("solid", fgColor="FCE4D6")
    for n in sorted(notices, key=lambda n: n.target.record.apartment):
        member = n.target.recipient
        record = n.target.record
        ws.append([
            record.apartment,
            n.channel.value,
            member.full_name,
            member.email or "",
            record.consumption,
            record.price,
            record.paid_sum,
            record.offset,
        ])
        if n.channel is Channel.PRINT:
            for cell in ws[ws.max_row]:
                cell.fill = print_fill

    for r in range(2, ws.max_row + 1):
        ws.cell(r, 6).number_format = "0.00"

    _autosize_columns(ws)
    wb.save(filepath)
