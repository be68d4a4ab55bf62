"""
In-memory contact store.

Owns the ordered list of contacts for the lifetime of the process and
exposes add/search/list/delete/modify.

File: store/contact_store.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import string
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Optional

from ..models import ContactRecord
from ..validation import CONTACT_FIELDS, validate_field

log = logging.getLogger(__name__)

EMPTY_SEARCH_TERM = "Search term cannot be empty!"

# Byte-wise toupper: only a-z change, so "ß" never expands to "SS"
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _ascii_upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


@dataclass
class SearchResult:
    """Outcome of a search. `error` is set only when the term itself was unusable."""

    matches: List[ContactRecord] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ModifyResult:
    """Outcome of a modify call."""

    found: bool
    updated: List[str] = field(default_factory=list)  # fields actually written
    rejected: Dict[str, str] = field(default_factory=dict)  # field -> error message

    @property
    def ok(self) -> bool:
        return self.found and not self.rejected


class ContactStore:
    """Ordered, in-memory collection of contacts."""

    def __init__(self, contacts: Optional[List[ContactRecord]] = None):
        self._contacts: List[ContactRecord] = list(contacts or [])

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[ContactRecord]:
        return iter(list(self._contacts))

    @property
    def is_empty(self) -> bool:
        return not self._contacts

    def add(self, contact: ContactRecord) -> None:
        """Append a contact. Duplicate names are allowed."""
        self._contacts.append(contact)
        log.info(f"Added contact '{contact.name}' ({len(self._contacts)} total)")

    def list(self) -> List[ContactRecord]:
        """All contacts in insertion order."""
        return list(self._contacts)

    def search(self, term: str) -> SearchResult:
        """
        Case-insensitive substring search across every field.

        Args:
            term: Text to look for

        Returns:
            SearchResult with matching contacts in store order, or with
            `error` set if the term is empty
        """
        if not term:
            log.debug("Rejected empty search term")
            return SearchResult(error=EMPTY_SEARCH_TERM)

        needle = _ascii_upper(term)
        matches = [
            contact
            for contact in self._contacts
            if any(needle in _ascii_upper(value) for value in contact.to_dict().values())
        ]

        log.debug(f"Search '{term}' matched {len(matches)} of {len(self._contacts)} contacts")
        return SearchResult(matches=matches)

    def find_index(self, name: str) -> Optional[int]:
        """Index of the first contact whose name matches exactly (case-sensitive)."""
        for i, contact in enumerate(self._contacts):
            if contact.name == name:
                return i
        return None

    def get(self, name: str) -> Optional[ContactRecord]:
        idx = self.find_index(name)
        return None if idx is None else self._contacts[idx]

    def delete(self, name: str) -> bool:
        """
        Remove the first contact named exactly `name`.

        Returns:
            True if a contact was removed, False if none matched
        """
        idx = self.find_index(name)
        if idx is None:
            log.debug(f"Delete: no contact named '{name}'")
            return False

        del self._contacts[idx]
        log.info(f"Deleted contact '{name}' ({len(self._contacts)} remaining)")
        return True

    def modify(
        self,
        name: str,
        new_fields: Optional[Mapping[str, Optional[str]]] = None,
        **kwargs: Optional[str],
    ) -> ModifyResult:
        """
        Update fields of the first contact named exactly `name`.

        Empty or missing values keep the current value. Every non-empty value
        is validated before anything is written; if any fails, the contact is
        left unchanged and the failures are reported in `rejected`.

        Args:
            name: Exact name of the contact to modify
            new_fields: Mapping of field -> replacement value
            **kwargs: Replacement values by field name

        Returns:
            ModifyResult describing what happened

        Raises:
            KeyError: If a field name is not a contact field
        """
        replacements: Dict[str, Optional[str]] = dict(new_fields or {})
        replacements.update(kwargs)

        unknown = set(replacements) - set(CONTACT_FIELDS)
        if unknown:
            raise KeyError(f"Unknown contact field(s): {', '.join(sorted(unknown))}")

        idx = self.find_index(name)
        if idx is None:
            log.debug(f"Modify: no contact named '{name}'")
            return ModifyResult(found=False)

        pending = {
            field_name: replacements[field_name]
            for field_name in CONTACT_FIELDS
            if replacements.get(field_name)
        }

        rejected = {}
        for field_name, value in pending.items():
            error = validate_field(field_name, value)
            if error is not None:
                rejected[field_name] = error

        if rejected:
            log.warning(f"Modify '{name}' rejected invalid field(s): {', '.join(rejected)}")
            return ModifyResult(found=True, rejected=rejected)

        contact = self._contacts[idx]
        for field_name, value in pending.items():
            setattr(contact, field_name, value)

        if pending:
            log.info(f"Modified contact '{name}': {', '.join(pending)}")
        return ModifyResult(found=True, updated=list(pending))
