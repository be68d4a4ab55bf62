"""
In-memory record store.

File: store/__init__.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from .contact_store import ContactStore, ModifyResult, SearchResult, EMPTY_SEARCH_TERM

__all__ = [
    "ContactStore",
    "ModifyResult",
    "SearchResult",
    "EMPTY_SEARCH_TERM",
]
