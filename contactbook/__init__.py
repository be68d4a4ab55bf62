"""
Contact book: in-memory address book with field validation and table output.
"""

from .config import AppConfig
from .models import ContactRecord
from .rendering import render_contact_table
from .store import ContactStore, ModifyResult, SearchResult

__all__ = [
    "AppConfig",
    "ContactRecord",
    "ContactStore",
    "ModifyResult",
    "SearchResult",
    "render_contact_table",
]
