"""
Table rendering for contact listings.
"""

from .table import ColumnWidths, column_widths, render_contact_table, HEADERS

__all__ = [
    "ColumnWidths",
    "column_widths",
    "render_contact_table",
    "HEADERS",
]
