"""
Render contacts as a fixed-width text table.

Column widths are computed from the records being shown so every value fits
without truncation.

File: rendering/table.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ..models import ContactRecord
from ..validation import PHONE_DISPLAY_LENGTH, format_phone_display

HEADERS = ("NAME", "PHONE", "EMAIL", "ADDRESS", "BIRTHDATE")
SEPARATOR = " | "


@dataclass
class ColumnWidths:
    """Column widths, starting from the header label lengths."""

    name: int = len("NAME")
    phone: int = len("PHONE")
    email: int = len("EMAIL")
    address: int = len("ADDRESS")
    birthdate: int = len("BIRTHDATE")

    # 2 spaces on each side
    MIN_PADDING = 4

    def update(self, contact: ContactRecord) -> None:
        """Widen columns to fit a record."""
        self.name = max(self.name, len(contact.name) + self.MIN_PADDING)
        # Phone is always displayed as "+63 (XXX) XXX XXXX"
        self.phone = max(self.phone, PHONE_DISPLAY_LENGTH + self.MIN_PADDING)
        self.email = max(self.email, len(contact.email) + self.MIN_PADDING)
        self.address = max(self.address, len(contact.address) + self.MIN_PADDING)
        self.birthdate = max(self.birthdate, len(contact.birthdate) + self.MIN_PADDING)

    def as_tuple(self) -> tuple:
        return (self.name, self.phone, self.email, self.address, self.birthdate)

    @property
    def total_width(self) -> int:
        # 4 " | " separators between 5 columns, plus the outer borders
        return sum(self.as_tuple()) + (4 * len(SEPARATOR)) + 2


def column_widths(contacts: Iterable[ContactRecord]) -> ColumnWidths:
    widths = ColumnWidths()
    for contact in contacts:
        widths.update(contact)
    return widths


def _format_row(cells: Sequence[str], widths: ColumnWidths) -> str:
    padded = [cell.ljust(width) for cell, width in zip(cells, widths.as_tuple())]
    return "| " + SEPARATOR.join(padded) + " |"


def render_contact_table(contacts: Sequence[ContactRecord]) -> str:
    """
    Lay out contacts as an aligned table.

    Args:
        contacts: Records to display, in display order

    Returns:
        The table as a newline-joined string (no trailing newline)
    """
    widths = column_widths(contacts)
    separator = "-" * widths.total_width

    lines: List[str] = [separator, _format_row(HEADERS, widths), separator]
    for contact in contacts:
        lines.append(
            _format_row(
                (
                    contact.name,
                    format_phone_display(contact.phone),
                    contact.email,
                    contact.address,
                    contact.birthdate,
                ),
                widths,
            )
        )
    lines.append(separator)

    return "\n".join(lines)
