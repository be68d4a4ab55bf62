"""
Human-readable validation messages, keyed by field.

File: validation/messages.py
Author: Contact Book maintainers
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import Callable, Dict, Optional, Tuple

from .validators import (
    MAX_TEXT_LENGTH,
    is_valid_address,
    is_valid_birthdate,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
)

CONTACT_FIELDS = ("name", "phone", "email", "address", "birthdate")


def name_length_message(max_length: int = MAX_TEXT_LENGTH) -> str:
    return f"Name must be between 2 and {max_length} characters."


def name_format_message() -> str:
    return "Name must contain only letters and spaces."


def phone_format_message() -> str:
    return "Phone number must be 11 digits starting with '09' (e.g., 09244561530)"


def email_format_message() -> str:
    return "Invalid email format. Example: user@domain.com"


def birthdate_format_message() -> str:
    return "Birthdate must be in format: DD/MM/YYYY"


def address_length_message(max_length: int = MAX_TEXT_LENGTH) -> str:
    return f"Address must be between 5 and {max_length} characters."


# field -> (predicate, message shown when the predicate fails)
FIELD_RULES: Dict[str, Tuple[Callable[[str], bool], str]] = {
    "name": (is_valid_name, name_length_message() + "\n" + name_format_message()),
    "phone": (is_valid_phone, phone_format_message()),
    "email": (is_valid_email, email_format_message()),
    "address": (is_valid_address, address_length_message()),
    "birthdate": (is_valid_birthdate, birthdate_format_message()),
}


def validate_field(field: str, value: str) -> Optional[str]:
    """
    Check a single field value.

    Args:
        field: One of CONTACT_FIELDS
        value: Candidate value

    Returns:
        None if the value is valid, otherwise the field's error message

    Raises:
        KeyError: If field is not a contact field
    """
    predicate, message = FIELD_RULES[field]
    return None if predicate(value) else message
