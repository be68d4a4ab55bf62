"""
Shared data models for the contact book.
"""

from .contact import ContactRecord

__all__ = [
    "ContactRecord",
]
