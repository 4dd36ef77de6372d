"""
Errors raised while building electricity notices.
All of them abort the run; nothing is retried or recovered locally.
"""
from __future__ import annotations


class NoticeError(Exception):
    """Base class for every data error that stops a run"""


class StructuralAnchorMismatch(NoticeError):
    """The row above the data block does not carry the expected label"""

    def __init__(self, label: str, row: int, value: str):
        self.label = label
        self.row = row
        self.value = value
        super().__init__(
            f"Expected '{label}' in row {row}, found '{value}'. "
            "The start row might be wrong."
        )


class MissingWorksheet(NoticeError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No worksheet found in {path}")


class MalformedName(NoticeError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Name '{raw}' is not of the form 'Family, Given'")


class MissingApartment(NoticeError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No apartment found for {name}")


class PriceFormatError(NoticeError):
    """The price cell could not be cut down to a number token"""

    def __init__(self, raw: str, step: int):
        self.raw = raw
        self.step = step
        super().__init__(f"Price text '{raw}' failed at step {step} of price detection")


class PriceParseError(NoticeError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Price text '{raw}' is not a usable non-zero number")


class CellParseError(NoticeError):
    """A numeric cell holds something that is not a number"""

    def __init__(self, row: int, column: int, value: str):
        self.row = row
        self.column = column
        self.value = value
        super().__init__(f"Cell at row {row}, column {column} is not a number: '{value}'")


class ReconciliationInconsistency(NoticeError):
    def __init__(self, apartment: int, detail: str):
        self.apartment = apartment
        self.detail = detail
        super().__init__(f"Apartment {apartment}: {detail}")
